"""
Balance service: turns a trip's roster and expenses into net balances.
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Sequence, Tuple
from app.core.utils import Amount, round_money, to_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberRecord:
    """A trip participant as seen by the engine."""
    id: str
    name: str


@dataclass(frozen=True)
class SplitRecord:
    """One member's owed share of an expense."""
    member_id: str
    amount: Amount


@dataclass(frozen=True)
class ExpenseRecord:
    """An expense fronted by `paid_by` and divided according to `splits`."""
    paid_by: str
    amount: Amount
    splits: Tuple[SplitRecord, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Balance:
    """Net position of a member (positive = owed, negative = owes)."""
    member_id: str
    member_name: str
    balance: Decimal


def calculate_balances(
    members: Sequence[MemberRecord],
    expenses: Sequence[ExpenseRecord]
) -> List[Balance]:
    """
    Calculate the net balance of every member in the roster.
    
    The payer of an expense is credited with its full amount and each split
    member is debited with their share. Sums are kept exact and rounded to
    cents once per member at the end.
    
    References to members missing from the roster are ignored.
    
    Returns:
        One Balance per member, in roster order.
    """
    net_balances: Dict[str, Decimal] = {member.id: Decimal(0) for member in members}
    
    for expense in expenses:
        if expense.paid_by in net_balances:
            net_balances[expense.paid_by] += to_decimal(expense.amount)
        else:
            logger.debug(f"Ignoring payer '{expense.paid_by}' not in roster")
        
        for split in expense.splits:
            if split.member_id in net_balances:
                net_balances[split.member_id] -= to_decimal(split.amount)
            else:
                logger.debug(f"Ignoring split for '{split.member_id}' not in roster")
    
    return [
        Balance(
            member_id=member.id,
            member_name=member.name,
            balance=round_money(net_balances.get(member.id, Decimal(0)))
        )
        for member in members
    ]
