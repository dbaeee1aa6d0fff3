"""
Settlement service for suggesting transfers that clear a trip's balances.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Sequence
from app.core.utils import MONEY_EPSILON, round_money, to_decimal
from app.services.balance_service import (
    Balance, ExpenseRecord, MemberRecord, calculate_balances
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settlement:
    """Represents a single transfer from a debtor to a creditor."""
    from_member_id: str
    to_member_id: str
    amount: Decimal
    from_name: str
    to_name: str


@dataclass(frozen=True)
class BalanceSheet:
    """Balances together with the settlements that clear them."""
    balances: List[Balance]
    settlements: List[Settlement]


class _Position:
    """Working copy of a balance, mutated while planning."""
    def __init__(self, balance: Balance):
        self.member_id = balance.member_id
        self.member_name = balance.member_name
        self.balance = to_decimal(balance.balance)


def calculate_settlements(balances: Sequence[Balance]) -> List[Settlement]:
    """
    Suggest transfers that bring every balance to within 0.01 of zero.

    Greedy: the largest creditor is matched against the largest debtor, the
    smaller side is closed and the walk moves on. This keeps transfers few
    but does not guarantee the minimum count.
    """
    creditors = [_Position(b) for b in balances if to_decimal(b.balance) > MONEY_EPSILON]
    debtors = [_Position(b) for b in balances if to_decimal(b.balance) < -MONEY_EPSILON]

    # Stable sorts, so ties keep roster order
    creditors.sort(key=lambda p: p.balance, reverse=True)
    debtors.sort(key=lambda p: p.balance)

    settlements: List[Settlement] = []
    cred_idx = 0
    debt_idx = 0

    while cred_idx < len(creditors) and debt_idx < len(debtors):
        creditor = creditors[cred_idx]
        debtor = debtors[debt_idx]

        amount = min(creditor.balance, -debtor.balance)

        if amount > MONEY_EPSILON:
            settlements.append(Settlement(
                from_member_id=debtor.member_id,
                to_member_id=creditor.member_id,
                amount=round_money(amount),
                from_name=debtor.member_name,
                to_name=creditor.member_name
            ))
            creditor.balance -= amount
            debtor.balance += amount

        # amount <= epsilon means one side is already within epsilon, so at
        # least one cursor always moves. A closed side hands its sub-cent
        # remainder to the next entry so it is still paid off.
        if abs(creditor.balance) <= MONEY_EPSILON:
            cred_idx += 1
            if cred_idx < len(creditors):
                creditors[cred_idx].balance += creditor.balance
        if abs(debtor.balance) <= MONEY_EPSILON:
            debt_idx += 1
            if debt_idx < len(debtors):
                debtors[debt_idx].balance += debtor.balance

    logger.debug(
        f"Planned {len(settlements)} settlements for "
        f"{len(creditors)} creditors and {len(debtors)} debtors"
    )
    return settlements


def build_balance_sheet(
    members: Sequence[MemberRecord],
    expenses: Sequence[ExpenseRecord]
) -> BalanceSheet:
    """Calculate balances and the settlements that clear them."""
    balances = calculate_balances(members, expenses)
    return BalanceSheet(balances=balances, settlements=calculate_settlements(balances))
