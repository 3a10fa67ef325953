"""
Contract model - Links a client profile to a contractor profile
"""

from sqlalchemy import Column, Integer, Text, ForeignKey, Index, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum
from jobpay.core.common.base_model import BaseModel


class ContractStatus(str, enum.Enum):
    """Contract status enum"""
    NEW = "new"
    IN_PROGRESS = "in_progress"
    TERMINATED = "terminated"


class Contract(BaseModel):
    """Contract model (read-only for the payment core)"""

    __tablename__ = "contracts"

    terms = Column(Text, nullable=False, default="")
    status = Column(
        SQLEnum(
            ContractStatus,
            name="contract_status",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=ContractStatus.NEW,
        index=True,
    )
    client_id = Column(Integer, ForeignKey("profiles.id", name="fk_contracts_client_id"), nullable=False, index=True)
    contractor_id = Column(Integer, ForeignKey("profiles.id", name="fk_contracts_contractor_id"), nullable=False, index=True)

    # Relationships
    client = relationship("Profile", foreign_keys=[client_id], back_populates="client_contracts")
    contractor = relationship("Profile", foreign_keys=[contractor_id], back_populates="contractor_contracts")
    jobs = relationship("Job", back_populates="contract", lazy="select")

    __table_args__ = (
        Index('ix_contracts_client_status', 'client_id', 'status'),
        Index('ix_contracts_contractor_status', 'contractor_id', 'status'),
    )

    def __repr__(self):
        return f'<Contract {self.id} client={self.client_id} contractor={self.contractor_id} {self.status}>'
