"""Models package - Import all models for SQLAlchemy registration."""
from app.models.trip import Trip, Member
from app.models.expense import Expense, ExpenseSplit

__all__ = [
    "Trip",
    "Member",
    "Expense",
    "ExpenseSplit",
]
