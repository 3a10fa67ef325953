"""
Payment and deposit request/response schemas
"""

from decimal import Decimal
from pydantic import BaseModel, Field, field_validator


class DepositRequest(BaseModel):
    """Request schema for a client self-deposit"""
    amount: Decimal = Field(
        ...,
        decimal_places=2,
        description="Amount to deposit (must be > 0, at most 2 decimal places and within the deposit cap)",
    )

    @field_validator('amount')
    @classmethod
    def validate_amount(cls, v: Decimal) -> Decimal:
        """Reject non-finite amounts (NaN, Infinity)"""
        if not v.is_finite():
            raise ValueError("Amount must be a finite number")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "amount": "37.50",
            }
        }


class JobPaymentResponse(BaseModel):
    """Response schema for a job payment"""
    status: int = Field(200, description="Status code echoed in the body")
    message: str = Field(..., description="Human readable outcome")
    job_id: int = Field(..., description="Paid job id")
    amount: str = Field(..., description="Amount transferred")
    balance: str = Field(..., description="Client balance after payment")


class DepositResponse(BaseModel):
    """Response schema for a deposit"""
    status: int = Field(200, description="Status code echoed in the body")
    message: str = Field(..., description="Human readable outcome")
    profile_id: int = Field(..., description="Credited profile id")
    balance: str = Field(..., description="Balance after deposit")
