"""
Job model - A priced unit of work under a contract
"""

from sqlalchemy import Column, Integer, Text, Numeric, Boolean, DateTime, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from jobpay.core.common.base_model import BaseModel


class Job(BaseModel):
    """
    Job model

    `paid` goes from NULL to True exactly once, together with `payment_date`,
    inside the same database transaction that moves the money.
    """

    __tablename__ = "jobs"

    description = Column(Text, nullable=False, default="")
    price = Column(Numeric(12, 2), nullable=False)
    paid = Column(Boolean, nullable=True)
    payment_date = Column(DateTime(timezone=True), nullable=True)
    contract_id = Column(Integer, ForeignKey("contracts.id", name="fk_jobs_contract_id"), nullable=False, index=True)

    # Relationships
    contract = relationship("Contract", back_populates="jobs")

    __table_args__ = (
        CheckConstraint('price > 0', name='check_jobs_price_positive'),
        Index('ix_jobs_paid_payment_date', 'paid', 'payment_date'),
    )

    @property
    def is_paid(self) -> bool:
        return bool(self.paid)

    def __repr__(self):
        return f'<Job {self.id} contract={self.contract_id} price={self.price} paid={self.paid}>'
