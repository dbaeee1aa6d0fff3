"""
Declarative base and common columns for all models.
"""
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import declarative_base
from app.core.utils import generate_id

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(Base):
    """Abstract base model with id and timestamps."""
    __abstract__ = True
    
    id = Column(String(24), primary_key=True, default=generate_id)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)
