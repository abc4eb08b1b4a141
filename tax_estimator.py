"""Annual tax estimate derived from recorded income.

The dashboard keeps a running total of income transactions for the current
period. This module turns that total into an annual tax estimate and keeps
it current:

- Annual income = period income * periods_per_year (12 by default, i.e. the
  recorded total is treated as one month's income).
- Whenever the period income changes and auto-update is on, the estimate is
  recomputed and every subscriber is notified with the new result.
- A manually entered annual income replaces the estimate until the next
  automatic recomputation.
- Monthly provision = annual tax / 12.

Each UI session should own its own TaxEstimator; it is not locked.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Callable

from cess import CESS_RATE
from formatting import InvalidIncomeError, parse_income
from income_tax import (
    DEFAULT_BRACKETS as DEFAULT_TAX_BRACKETS,
    TaxBracket,
    TaxResult,
    compute_tax,
    validate_brackets,
)

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


@dataclass
class EstimatorInputs:
    periods_per_year: int = MONTHS_PER_YEAR
    auto_update: bool = True
    cess_rate: float = CESS_RATE

    tax_brackets: list[TaxBracket] | None = None


@dataclass(frozen=True)
class TaxSummary:
    annual_income: float
    annual_tax: float
    monthly_provision: float


def annualize(period_income: float, periods_per_year: int = MONTHS_PER_YEAR) -> float:
    return period_income * periods_per_year


def summarize(result: TaxResult, annual_income: float) -> TaxSummary:
    return TaxSummary(
        annual_income=annual_income,
        annual_tax=result.total_tax,
        monthly_provision=result.total_tax / MONTHS_PER_YEAR,
    )


class TaxEstimator:
    """Derived tax estimate, recomputed when the income it depends on changes."""

    def __init__(self, inputs: EstimatorInputs | None = None):
        self.inputs = inputs or EstimatorInputs()
        if self.inputs.tax_brackets is not None:
            validate_brackets(self.inputs.tax_brackets)
        self._brackets = self.inputs.tax_brackets or DEFAULT_TAX_BRACKETS
        self._auto_update = self.inputs.auto_update
        self._period_income = 0.0
        self._annual_income: float | None = None
        self._result: TaxResult | None = None
        self._subscribers: list[Callable[[TaxResult], None]] = []

    @property
    def result(self) -> TaxResult | None:
        return self._result

    @property
    def auto_update(self) -> bool:
        return self._auto_update

    @property
    def summary(self) -> TaxSummary | None:
        if self._result is None:
            return None
        return summarize(self._result, self._annual_income)

    def subscribe(self, callback: Callable[[TaxResult], None]) -> Callable[[], None]:
        """Register callback for every new result; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set_period_income(self, total_income: float) -> TaxResult | None:
        """Income-changed event. Recomputes when positive and auto-update is on."""
        self._period_income = total_income
        if total_income > 0 and self._auto_update:
            return self._recompute(annualize(total_income, self.inputs.periods_per_year))
        return None

    def set_auto_update(self, enabled: bool) -> TaxResult | None:
        self._auto_update = enabled
        if enabled and self._period_income > 0:
            return self._recompute(annualize(self._period_income, self.inputs.periods_per_year))
        return None

    def calculate_for_income(self, income: float) -> TaxResult | None:
        """Manual recalculation for an annual income; ignored unless positive."""
        if income > 0:
            return self._recompute(income)
        return None

    def calculate_from_text(self, raw: str) -> TaxResult:
        """Manual recalculation from user input.

        Raises:
            InvalidIncomeError: the text is not a usable number.
        """
        try:
            income = parse_income(raw)
        except InvalidIncomeError:
            logger.warning("Rejected manual income entry %r", raw)
            raise
        return self._recompute(income)

    def _recompute(self, annual_income: float) -> TaxResult:
        result = compute_tax(annual_income, self._brackets, self.inputs.cess_rate)
        logger.debug("Recomputed tax for annual income %.2f: %.2f", annual_income, result.total_tax)
        self._annual_income = annual_income
        self._result = result
        for callback in list(self._subscribers):
            callback(result)
        return result


def to_dataframe(result: TaxResult):
    try:
        import pandas as pd
    except Exception:
        raise RuntimeError("pandas is required to build a DataFrame output")
    return pd.DataFrame([asdict(line) for line in result.breakdown], columns=["label", "amount"])
