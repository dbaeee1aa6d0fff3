"""
Utility functions for the application.
"""
import secrets
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

# Creditor/debtor threshold and "settled" tolerance, in currency units.
MONEY_EPSILON = Decimal("0.01")

_CENT = Decimal("0.01")

# Excludes look-alike characters (0/O, 1/I)
ROOM_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
ROOM_CODE_LENGTH = 6

Amount = Union[int, float, str, Decimal]


class NonFiniteAmountError(ValueError):
    """Raised when an amount is NaN or infinite."""


def to_decimal(value: Amount) -> Decimal:
    """Convert a numeric value to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        result = Decimal(value)
    if not result.is_finite():
        raise NonFiniteAmountError(f"Amount must be finite, got {value!r}")
    return result


def round_money(value: Amount) -> Decimal:
    """Round to 2 decimal places, half up."""
    return to_decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)


def generate_id() -> str:
    """Generate a 24-character hex identifier."""
    return secrets.token_hex(12)


def generate_room_code() -> str:
    """Generate a room code members use to join a trip."""
    return "".join(secrets.choice(ROOM_CODE_ALPHABET) for _ in range(ROOM_CODE_LENGTH))
