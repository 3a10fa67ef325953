"""
Admin report response schemas
"""

from pydantic import BaseModel, Field


class BestProfessionResponse(BaseModel):
    """Best earning profession in a date range"""
    profession: str = Field(..., description="Contractor profession")
    total_earnings: str = Field(..., description="Sum of paid job prices")


class BestClientResponse(BaseModel):
    """Client ranked by amount paid in a date range"""
    id: int = Field(..., description="Client profile id")
    full_name: str = Field(..., description="First and last name")
    paid: str = Field(..., description="Sum of paid job prices")
