"""Display helpers for rupee amounts.

Amounts are rounded only here, at display time, to the nearest whole rupee
and grouped the Indian way (3,00,000 rather than 300,000).
"""

import math
import re

from income_tax import TaxResult

RUPEE = "₹"
INVALID_INCOME_MESSAGE = "Please enter a valid income amount"

# plain digits, or commas grouped the Indian (12,50,000) or Western (1,250,000) way
_AMOUNT_RE = re.compile(r"[+-]?(?:\d+|\d{1,3}(?:,\d{3})+|\d{1,2}(?:,\d{2})+,\d{3})(?:\.\d+)?")


class InvalidIncomeError(ValueError):
    """Raised when a manually entered income cannot be used."""

    def __init__(self, raw: object):
        super().__init__(INVALID_INCOME_MESSAGE)
        self.raw = raw


def round_currency(amount: float) -> int:
    """Round to the nearest rupee; halves go up (2.5 -> 3, -2.5 -> -2)."""
    whole = math.floor(amount)
    return whole + 1 if amount - whole >= 0.5 else whole


def group_indian(n: int) -> str:
    sign = "-" if n < 0 else ""
    digits = str(abs(n))
    if len(digits) <= 3:
        return sign + digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return sign + ",".join(groups + [tail])


def format_inr(amount: float) -> str:
    return RUPEE + group_indian(round_currency(amount))


def parse_income(raw: str) -> float:
    """Parse a manually entered annual income such as ``"₹12,50,000"``.

    Raises:
        InvalidIncomeError: anything but a plain or comma-grouped decimal number.
    """
    if raw is None:
        raise InvalidIncomeError(raw)
    text = str(raw).strip()
    if text.startswith(RUPEE):
        text = text[len(RUPEE):].strip()
    if not _AMOUNT_RE.fullmatch(text):
        raise InvalidIncomeError(raw)
    return float(text.replace(",", ""))


def breakdown_rows(result: TaxResult) -> list[tuple[str, str]]:
    return [(line.label, format_inr(line.amount)) for line in result.breakdown]
