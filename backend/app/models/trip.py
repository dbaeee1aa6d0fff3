"""
Trip and member models for shared expense tracking.
"""
from sqlalchemy import Column, String, Boolean, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
from app.core.utils import generate_room_code


class Trip(BaseModel):
    """Trip model representing a shared expense session joined by room code."""
    __tablename__ = "trips"
    
    name = Column(String(200), nullable=False)
    room_code = Column(String(6), unique=True, nullable=False, index=True, default=generate_room_code)
    is_locked = Column(Boolean, default=False, nullable=False)
    
    # Relationships
    members = relationship(
        "Member", back_populates="trip", cascade="all, delete-orphan",
        order_by="Member.display_order"
    )
    expenses = relationship(
        "Expense", back_populates="trip", cascade="all, delete-orphan",
        order_by="Expense.created_at"
    )


class Member(BaseModel):
    """A participant in a trip. Names are display-only and may repeat."""
    __tablename__ = "members"
    
    trip_id = Column(String(24), ForeignKey("trips.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)
    display_order = Column(Integer, nullable=False, default=0)  # Join order within the trip
    
    # Relationships
    trip = relationship("Trip", back_populates="members")
