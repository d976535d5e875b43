"""
Stability/range normalization for incomenorm.

Purpose
-------
Turns a reported low/high income range into a single conservative figure the
budget can safely rely on. Two derivations exist and are kept separate on
purpose:

- `conservative_base`: the figure stored on the income record as
  `base_amount`. Seasonal incomes blend 60% of the lowest month with 40% of
  the highest; variable incomes use the lowest month as-is.
- `average_low`: the figure shown while the user is still editing the range.
  Seasonal incomes use 40% of (lowest + highest); variable incomes use the
  lowest month.

For the same seasonal range the two disagree (1000/3000 gives 1800 vs. 1600).
Both are reproduced as they are used by the product today.

Example
-------
>>> from incomenorm.stability import (
...     IncomeRange, average_low, conservative_base, validate_income_range,
... )
>>> r = IncomeRange(lowest=1000, highest=3000)
>>> conservative_base(r, "seasonal")
1800.0
>>> average_low(r, "seasonal")
1600.0
>>> validate_income_range(IncomeRange(lowest=500, highest=500))
['El ingreso más alto debe ser mayor que el más bajo.']
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List

from .constants import SEASONAL_HIGH_WEIGHT, SEASONAL_LOW_WEIGHT, SEASONAL_PREVIEW_WEIGHT

__all__ = [
    "IncomeRange",
    "conservative_base",
    "average_low",
    "with_range_average",
    "validate_income_range",
]


@dataclass(frozen=True)
class IncomeRange:
    """
    Reported income range for seasonal or variable sources.

    Parameters
    ----------
    lowest : float
        Amount received in a typical low period.
    highest : float
        Amount received in a typical high period.
    average_low : float, default 0.0
        Derived live-preview figure; see `with_range_average`.
    """

    lowest: float = 0.0
    highest: float = 0.0
    average_low: float = 0.0

    @property
    def is_complete(self) -> bool:
        return self.lowest > 0 and self.highest > 0


def conservative_base(income_range: IncomeRange, stability_pattern: str) -> float:
    """
    Conservative base amount persisted for a seasonal or variable income.

    Parameters
    ----------
    income_range : IncomeRange
        Reported range.
    stability_pattern : str
        "seasonal" blends 60/40 toward the low end; any other value
        (normally "variable") returns `lowest` unmodified.

    Returns
    -------
    float
    """
    if stability_pattern == "seasonal":
        return income_range.lowest * SEASONAL_LOW_WEIGHT + income_range.highest * SEASONAL_HIGH_WEIGHT
    return income_range.lowest


def average_low(income_range: IncomeRange, stability_pattern: str) -> float:
    """Live-editing preview figure: 40% of (lowest + highest) if seasonal, else lowest."""
    if stability_pattern == "seasonal":
        return (income_range.lowest + income_range.highest) * SEASONAL_PREVIEW_WEIGHT
    return income_range.lowest


def with_range_average(income_range: IncomeRange, stability_pattern: str) -> IncomeRange:
    """
    Return `income_range` with `average_low` derived from its bounds.

    The range is returned unchanged until both bounds are positive, so an
    in-progress edit keeps whatever preview value it last had.
    """
    if not income_range.is_complete:
        return income_range
    return replace(income_range, average_low=average_low(income_range, stability_pattern))


def validate_income_range(income_range: IncomeRange) -> List[str]:
    """
    Advisory checks on a reported range.

    Returns
    -------
    list of str
        Messages in display order; empty when the range is acceptable.
        Missing or non-positive bounds each produce one message; the ordering
        check only runs once both bounds are positive.
    """
    errors: List[str] = []

    if not income_range.lowest or income_range.lowest <= 0:
        errors.append("Ingresa tu ingreso más bajo.")

    if not income_range.highest or income_range.highest <= 0:
        errors.append("Ingresa tu ingreso más alto.")

    if income_range.is_complete and income_range.highest <= income_range.lowest:
        errors.append("El ingreso más alto debe ser mayor que el más bajo.")

    return errors
