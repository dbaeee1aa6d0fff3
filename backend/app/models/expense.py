"""
Expense model for tracking spending.
"""
from sqlalchemy import Column, String, Numeric, ForeignKey, Text
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Expense(BaseModel):
    """Expense model representing a payment fronted by one member."""
    __tablename__ = "expenses"
    
    trip_id = Column(String(24), ForeignKey("trips.id"), nullable=False, index=True)
    paid_by = Column(String(24), ForeignKey("members.id"), nullable=False, index=True)
    description = Column(Text, nullable=False)
    amount = Column(Numeric(15, 2), nullable=False)
    split_type = Column(String(20), nullable=False, default="equal")
    
    # Relationships
    trip = relationship("Trip", back_populates="expenses")
    splits = relationship("ExpenseSplit", back_populates="expense", cascade="all, delete-orphan")


class ExpenseSplit(BaseModel):
    """Junction table holding a member's share of an expense."""
    __tablename__ = "expense_splits"
    
    expense_id = Column(String(24), ForeignKey("expenses.id"), nullable=False, index=True)
    member_id = Column(String(24), ForeignKey("members.id"), nullable=False, index=True)
    amount = Column(Numeric(15, 2), nullable=False)
    
    # Relationships
    expense = relationship("Expense", back_populates="splits")
