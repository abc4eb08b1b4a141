"""Income tax slab utilities.

This module provides a progressive slab calculator given a list of
brackets like:
    [TaxBracket(start=0, end=300000, rate=0.0, label="Up to ₹3,00,000"), ...]

All amounts are annual rupees. Nothing is rounded here; rounding to whole
rupees is a display concern (see formatting.py).
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from cess import CESS_LABEL, CESS_RATE, cess_on_tax


@dataclass(frozen=True)
class TaxBracket:
    start: float
    end: Optional[float]  # None means no upper bound
    rate: float           # e.g., 0.05 for 5%
    label: str


@dataclass(frozen=True)
class TaxBreakdownLine:
    label: str
    amount: float


@dataclass(frozen=True)
class TaxResult:
    total_tax: float
    breakdown: Tuple[TaxBreakdownLine, ...]


def validate_brackets(brackets: Sequence[TaxBracket]) -> None:
    """Raise ValueError unless brackets form a contiguous schedule from 0."""
    if not brackets:
        raise ValueError("at least one tax bracket is required")
    if brackets[0].start != 0:
        raise ValueError(f"first bracket must start at 0, got {brackets[0].start}")
    for prev, b in zip(brackets, brackets[1:]):
        if prev.end is None or prev.end != b.start:
            raise ValueError(f"bracket {b.label!r} does not follow {prev.label!r}")
    for b in brackets:
        if not 0 <= b.rate < 1:
            raise ValueError(f"rate {b.rate} for {b.label!r} is outside [0, 1)")
        if b.end is not None and b.end <= b.start:
            raise ValueError(f"bracket {b.label!r} is empty")
    if brackets[-1].end is not None:
        raise ValueError("last bracket must be unbounded")


def compute_tax(
    income: float,
    brackets: Optional[Sequence[TaxBracket]] = None,
    cess_rate: float = CESS_RATE,
) -> TaxResult:
    """Compute tax owed under progressive slabs plus cess.

    Args:
        income: annual taxable income. Callers ensure it is a finite,
            non-negative number; anything <= 0 is taxed as zero and NaN
            comes back as NaN.
        brackets: ordered low-to-high list of TaxBracket. Defaults to
            DEFAULT_BRACKETS.
        cess_rate: surcharge applied on the slab total, not on income.

    Returns:
        TaxResult with one line per slab the income reaches (the first slab
        is always present) followed by the cess line.
    """
    if brackets is None:
        brackets = DEFAULT_BRACKETS

    lines: List[TaxBreakdownLine] = []
    for i, b in enumerate(brackets):
        lower = b.start
        upper = float('inf') if b.end is None else b.end
        if i > 0 and income <= lower:
            break
        amount_in_bracket = max(min(income, upper) - lower, 0.0)
        lines.append(TaxBreakdownLine(b.label, amount_in_bracket * b.rate))

    slab_tax = sum(line.amount for line in lines)
    lines.append(TaxBreakdownLine(CESS_LABEL, cess_on_tax(slab_tax, cess_rate)))
    # total_tax is exactly the sum of the breakdown amounts
    return TaxResult(
        total_tax=sum(line.amount for line in lines),
        breakdown=tuple(lines),
    )


# New regime slabs, FY 2023-24 (can be overridden)
DEFAULT_BRACKETS: List[TaxBracket] = [
    TaxBracket(start=0, end=300000, rate=0.0, label="Up to ₹3,00,000"),
    TaxBracket(start=300000, end=600000, rate=0.05, label="₹3,00,001 to ₹6,00,000 (5%)"),
    TaxBracket(start=600000, end=900000, rate=0.10, label="₹6,00,001 to ₹9,00,000 (10%)"),
    TaxBracket(start=900000, end=1200000, rate=0.15, label="₹9,00,001 to ₹12,00,000 (15%)"),
    TaxBracket(start=1200000, end=1500000, rate=0.20, label="₹12,00,001 to ₹15,00,000 (20%)"),
    TaxBracket(start=1500000, end=None, rate=0.30, label="Above ₹15,00,000 (30%)"),
]
