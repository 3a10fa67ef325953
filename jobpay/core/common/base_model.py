"""
Base model with common fields
"""

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.sql import func
from jobpay.infrastructure.database import Base


class BaseModel(Base):
    """
    Base model with common fields

    All models inherit from this base class and get:
    - id: integer primary key (ids travel in headers and URL paths)
    - created_at: Timezone-aware timestamp
    - updated_at: Timezone-aware timestamp (nullable)
    """
    __abstract__ = True

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)
