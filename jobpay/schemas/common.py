"""
Common Pydantic schemas
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response"""
    status: str


class ReadyResponse(BaseModel):
    """Readiness check response"""
    status: str
    database: str
