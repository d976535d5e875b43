"""
Global constants for incomenorm.

Purpose
-------
Centralizes the multipliers, weights, limits and display labels used by the
income normalization engine. Tables are exposed as read-only mappings so the
catalogs behave as process-wide constants, never as mutable state.

Usage
-----
>>> from incomenorm.constants import SIMPLE_MONTHLY_MULTIPLIERS, MONTHS_PER_YEAR
>>> round(100 * SIMPLE_MONTHLY_MULTIPLIERS["weekly"], 2)
433.0

Categories
----------
- Time: months per year, pay periods per year
- Simple mode: per-frequency multipliers for single amounts
- Stability: conservative weighting for seasonal/variable ranges
- Cycles: per-frequency cycle limits
- Preview: illustrative month labels
- Display: localized frequency labels
"""

from types import MappingProxyType
from typing import Mapping, Tuple

__all__ = [
    # Time
    "MONTHS_PER_YEAR",
    "WEEKS_PER_YEAR",
    "BIWEEKLY_PERIODS_PER_YEAR",
    "QUARTERS_PER_YEAR",
    # Frequencies
    "FREQUENCIES",
    # Simple mode
    "SIMPLE_MONTHLY_MULTIPLIERS",
    # Stability
    "SEASONAL_LOW_WEIGHT",
    "SEASONAL_HIGH_WEIGHT",
    "SEASONAL_PREVIEW_WEIGHT",
    # Cycles
    "MAX_CYCLES_BY_FREQUENCY",
    "DEFAULT_MAX_CYCLES",
    "CYCLE_ID_PREFIX",
    # Preview
    "PREVIEW_MONTHS",
    # Display
    "FREQUENCY_LABELS",
]


# =============================================================================
# Time
# =============================================================================

MONTHS_PER_YEAR: int = 12
"""Number of months in a year (annualization factor)."""

WEEKS_PER_YEAR: int = 52
"""Weekly pay periods per year."""

BIWEEKLY_PERIODS_PER_YEAR: int = 26
"""Bi-weekly (every 14 days) pay periods per year."""

QUARTERS_PER_YEAR: int = 4
"""Quarterly pay periods per year."""


# =============================================================================
# Vocabularies
# =============================================================================

FREQUENCIES: Tuple[str, ...] = ("weekly", "bi-weekly", "monthly", "quarterly", "irregular")
"""Frequencies a user can report an income with."""


# =============================================================================
# Simple Mode
# =============================================================================

SIMPLE_MONTHLY_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "weekly": 4.33,
    "bi-weekly": 2.17,
    "monthly": 1.0,
    "quarterly": 1.0 / 3.0,
    "irregular": 1.0,
})
"""Per-frequency factors converting one payment into a monthly figure.

Frequencies missing from this table map to a monthly figure of 0.
"""


# =============================================================================
# Stability
# =============================================================================

SEASONAL_LOW_WEIGHT: float = 0.6
"""Weight of the lowest month in the seasonal conservative base."""

SEASONAL_HIGH_WEIGHT: float = 0.4
"""Weight of the highest month in the seasonal conservative base."""

SEASONAL_PREVIEW_WEIGHT: float = 0.4
"""Factor applied to (lowest + highest) for the live-editing seasonal preview."""


# =============================================================================
# Cycles
# =============================================================================

MAX_CYCLES_BY_FREQUENCY: Mapping[str, int] = MappingProxyType({
    "weekly": 4,
    "bi-weekly": 2,
    "monthly": 4,
    "quarterly": 3,
    "irregular": 6,
})
"""Maximum number of payment cycles a user may enter per frequency."""

DEFAULT_MAX_CYCLES: int = 4
"""Cycle limit for frequencies not listed above."""

CYCLE_ID_PREFIX: str = "cycle_"


# =============================================================================
# Preview
# =============================================================================

PREVIEW_MONTHS: Tuple[str, ...] = ("Enero", "Febrero", "Marzo")
"""Fixed illustrative month labels used by the calendar preview."""


# =============================================================================
# Display
# =============================================================================

FREQUENCY_LABELS: Mapping[str, str] = MappingProxyType({
    "weekly": "semanal",
    "bi-weekly": "quincenal",
    "monthly": "mensual",
    "quarterly": "trimestral",
    "irregular": "irregular",
})
"""Localized adjective for each frequency."""
