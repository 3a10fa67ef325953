"""
Contract and job API response schemas
"""

from typing import Optional
from pydantic import BaseModel, Field


class ContractResponse(BaseModel):
    """Contract response schema"""
    id: int = Field(..., description="Contract id")
    terms: str = Field(..., description="Contract terms")
    status: str = Field(..., description="new, in_progress or terminated")
    client_id: int = Field(..., description="Client profile id")
    contractor_id: int = Field(..., description="Contractor profile id")

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "terms": "bla bla bla",
                "status": "in_progress",
                "client_id": 1,
                "contractor_id": 5,
            }
        }


class JobResponse(BaseModel):
    """Job response schema"""
    id: int = Field(..., description="Job id")
    description: str = Field(..., description="Job description")
    price: str = Field(..., description="Job price (decimal string)")
    paid: Optional[bool] = Field(None, description="True once paid, null while unpaid")
    payment_date: Optional[str] = Field(None, description="ISO 8601 timestamp of payment")
    contract_id: int = Field(..., description="Contract id")

    class Config:
        json_schema_extra = {
            "example": {
                "id": 2,
                "description": "work",
                "price": "201.00",
                "paid": None,
                "payment_date": None,
                "contract_id": 2,
            }
        }
