"""
Balance and settlement routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.schemas.balance import BalanceCalculationRequest, BalanceSheetResponse
from app.services.balance_service import ExpenseRecord, MemberRecord
from app.services.settlement_service import build_balance_sheet
from app.services.split_service import SplitError, compute_splits
from app.services.trip_service import TripNotFoundError, get_trip_balance_sheet

router = APIRouter(tags=["balances"])


@router.get("/trips/{trip_id}/balances", response_model=BalanceSheetResponse)
async def get_trip_balances(
    trip_id: str,
    db: Session = Depends(get_db)
):
    """Get balances and suggested settlements for a trip."""
    try:
        return get_trip_balance_sheet(trip_id, db)
    except TripNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Trip not found"
        )


@router.post("/balances/calculate", response_model=BalanceSheetResponse)
async def calculate_balance_sheet(request: BalanceCalculationRequest):
    """Calculate balances and settlements for members and expenses in the request body."""
    members = [MemberRecord(id=m.id, name=m.name) for m in request.members]
    member_ids = [m.id for m in members]
    
    expenses = []
    for index, expense in enumerate(request.expenses):
        shares = [(s.member_id, s.amount) for s in expense.splits] if expense.splits else None
        try:
            splits = compute_splits(expense.amount, expense.split_type, member_ids, shares)
        except SplitError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Expense {index}: {e}"
            )
        expenses.append(ExpenseRecord(paid_by=expense.paid_by, amount=expense.amount, splits=tuple(splits)))
    
    return build_balance_sheet(members, expenses)
