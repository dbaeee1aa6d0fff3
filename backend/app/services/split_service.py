"""
Split service: divides an expense amount into per-member shares.
"""
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple
from app.core.utils import Amount, round_money, to_decimal
from app.services.balance_service import SplitRecord

SPLIT_EQUAL = "equal"
SPLIT_CUSTOM = "custom"
SPLIT_PERCENTAGE = "percentage"

SPLIT_TYPES = (SPLIT_EQUAL, SPLIT_CUSTOM, SPLIT_PERCENTAGE)


class SplitError(ValueError):
    """Raised when an expense cannot be split as requested."""


def compute_splits(
    amount: Amount,
    split_type: str,
    member_ids: Sequence[str],
    shares: Optional[Sequence[Tuple[str, Amount]]] = None
) -> List[SplitRecord]:
    """
    Compute split amounts for an expense.

    Args:
        amount: Total expense amount
        split_type: One of 'equal', 'custom', 'percentage'
        member_ids: Trip roster, used by equal splits
        shares: (member_id, value) pairs; an amount for custom splits,
            a percent of the total for percentage splits

    Returns:
        Split records rounded to cents. Equal splits are not rebalanced,
        so 100 over 3 members gives 33.33 each.
    """
    total = to_decimal(amount)

    if split_type == SPLIT_EQUAL:
        if not member_ids:
            raise SplitError("Cannot split equally among zero members")
        share = round_money(total / len(member_ids))
        return [SplitRecord(member_id=member_id, amount=share) for member_id in member_ids]

    if split_type not in SPLIT_TYPES:
        raise SplitError(f"Unknown split type '{split_type}'")

    if not shares:
        raise SplitError(f"Splits are required for {split_type} split type")

    if split_type == SPLIT_CUSTOM:
        return [
            SplitRecord(member_id=member_id, amount=to_decimal(value))
            for member_id, value in shares
        ]

    return [
        SplitRecord(
            member_id=member_id,
            amount=round_money(to_decimal(value) / Decimal(100) * total)
        )
        for member_id, value in shares
    ]
