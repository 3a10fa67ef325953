"""
Profile model - Clients and contractors with a spendable balance
"""

from decimal import Decimal
from sqlalchemy import Column, String, Numeric, CheckConstraint, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum
from jobpay.core.common.base_model import BaseModel


class ProfileType(str, enum.Enum):
    """Profile type enum"""
    CLIENT = "client"  # Pays for jobs, may deposit
    CONTRACTOR = "contractor"  # Gets paid for jobs


class Profile(BaseModel):
    """
    Profile model

    The balance is the only shared mutable value in the ledger. It is changed
    exclusively by the transfer engine (job payments) and the deposit path,
    and only while the row is locked.
    """

    __tablename__ = "profiles"

    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    profession = Column(String(255), nullable=False)
    balance = Column(Numeric(12, 2), nullable=False, default=Decimal("0.00"))
    type = Column(
        SQLEnum(
            ProfileType,
            name="profile_type",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        index=True,
    )

    # Relationships
    client_contracts = relationship(
        "Contract", foreign_keys="Contract.client_id", back_populates="client", lazy="select"
    )
    contractor_contracts = relationship(
        "Contract", foreign_keys="Contract.contractor_id", back_populates="contractor", lazy="select"
    )

    __table_args__ = (
        CheckConstraint('balance >= 0', name='check_profiles_balance_non_negative'),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_client(self) -> bool:
        return self.type == ProfileType.CLIENT

    def __repr__(self):
        return f'<Profile {self.id} {self.type.value if self.type else None} balance={self.balance}>'
