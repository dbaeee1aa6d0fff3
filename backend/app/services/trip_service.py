"""
Trip service: loads a trip snapshot and computes its balance sheet.
"""
import logging
from typing import List, Tuple
from sqlalchemy.orm import Session, selectinload
from app.models.trip import Trip, Member
from app.models.expense import Expense
from app.services.balance_service import ExpenseRecord, MemberRecord, SplitRecord
from app.services.settlement_service import BalanceSheet, build_balance_sheet

logger = logging.getLogger(__name__)


class TripNotFoundError(ValueError):
    """Raised when a trip does not exist."""


def load_trip_snapshot(
    trip_id: str,
    db: Session
) -> Tuple[List[MemberRecord], List[ExpenseRecord]]:
    """
    Load the full roster and every expense with its splits for a trip.
    
    Members are returned in join order, including those without any
    expenses. Both lists are read in the same session.
    """
    trip = db.query(Trip).filter(Trip.id == trip_id).first()
    if not trip:
        raise TripNotFoundError(f"Trip '{trip_id}' not found")
    
    members = db.query(Member).filter(
        Member.trip_id == trip_id
    ).order_by(Member.display_order, Member.created_at, Member.id).all()
    
    expenses = db.query(Expense).options(
        selectinload(Expense.splits)
    ).filter(Expense.trip_id == trip_id).order_by(Expense.created_at).all()
    
    member_records = [MemberRecord(id=m.id, name=m.name) for m in members]
    expense_records = [
        ExpenseRecord(
            paid_by=e.paid_by,
            amount=e.amount,
            splits=tuple(SplitRecord(member_id=s.member_id, amount=s.amount) for s in e.splits)
        )
        for e in expenses
    ]
    return member_records, expense_records


def get_trip_balance_sheet(trip_id: str, db: Session) -> BalanceSheet:
    """Calculate balances and suggested settlements for a trip."""
    members, expenses = load_trip_snapshot(trip_id, db)
    sheet = build_balance_sheet(members, expenses)
    logger.info(
        f"Computed balances for trip {trip_id}: {len(members)} members, "
        f"{len(expenses)} expenses, {len(sheet.settlements)} settlements"
    )
    return sheet
