"""
Income normalization module for incomenorm.

Purpose
-------
Entry point for turning a user-reported income into the single monthly figure
the rest of a budgeting application plans around. Users describe income in
many shapes (a fixed salary, two different half-month payments, a seasonal
range, a weekly wage); this module converts any of them into one conservative
monthly estimate and its annual equivalent.

Key components
--------------
- IncomeSource:
    Immutable income record. At construction it resolves which of the four
    calculation strategies applies to it and stores that choice in
    `IncomeSource.strategy`, so the calculator never re-derives it from field
    presence.

- Strategies (tagged union `CalculationStrategy`):
    StructureStrategy      - a payment structure was selected
    StabilityBaseStrategy  - conservative base amount + stability pattern
    SimpleAmountStrategy   - one recurring amount at a frequency
    CycleListStrategy      - explicit list of differing cycle amounts

- monthly_income / annual_income:
    Pure calculators over an IncomeSource.

- total_income / primary_income / summarize_incomes / income_frame:
    Aggregation across several income sources.

Strategy priority
-----------------
When several optional fields are populated, the first match wins:

1. `payment_structure` present                  -> StructureStrategy
2. `base_amount` and `stability_pattern` present -> StabilityBaseStrategy
3. simple pattern, or no cycles                 -> SimpleAmountStrategy
4. otherwise (complex pattern with cycles)      -> CycleListStrategy

Design principles
-----------------
- Pure functions: inputs are never mutated; the same record always yields the
  same figure.
- Never raise on malformed numbers: missing amounts count as 0 and an
  unrecognized frequency yields 0 in simple mode.

Example
-------
>>> from incomenorm.income import IncomeSource, monthly_income, annual_income
>>> salary = IncomeSource(name="Trabajo principal", frequency="weekly", amount=100)
>>> round(monthly_income(salary), 2)
433.0
>>> round(annual_income(salary), 2)
5196.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Literal, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .constants import (
    BIWEEKLY_PERIODS_PER_YEAR,
    MONTHS_PER_YEAR,
    QUARTERS_PER_YEAR,
    SIMPLE_MONTHLY_MULTIPLIERS,
    WEEKS_PER_YEAR,
)
from .cycles import PaymentCycle, cycles_total, frequency_display
from .stability import IncomeRange, conservative_base, with_range_average
from .structures import PaymentSchedule, PaymentStructure
from .types import PaymentPattern, StabilityPattern

logger = logging.getLogger(__name__)

__all__ = [
    "IncomeSource",
    "StructureStrategy",
    "StabilityBaseStrategy",
    "SimpleAmountStrategy",
    "CycleListStrategy",
    "CalculationStrategy",
    "select_strategy",
    "monthly_income",
    "annual_income",
    "structure_monthly",
    "cycle_monthly",
    "simple_monthly",
    "total_income",
    "primary_income",
    "income_preview_text",
    "IncomeSummary",
    "summarize_incomes",
    "income_frame",
]


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StructureStrategy:
    """Scale the total received in one structure period to a month."""

    structure: PaymentStructure
    period_total: float


@dataclass(frozen=True)
class StabilityBaseStrategy:
    """Apply the simple frequency multiplier to a conservative base amount."""

    base_amount: float
    frequency: str


@dataclass(frozen=True)
class SimpleAmountStrategy:
    """Apply the simple frequency multiplier to a single recurring amount."""

    amount: float
    frequency: str


@dataclass(frozen=True)
class CycleListStrategy:
    """Convert the sum of explicit cycle amounts to a month."""

    cycles: Tuple[PaymentCycle, ...]
    frequency: str


CalculationStrategy = Union[
    StructureStrategy,
    StabilityBaseStrategy,
    SimpleAmountStrategy,
    CycleListStrategy,
]


def select_strategy(
    *,
    frequency: str,
    amount: float = 0.0,
    base_amount: Optional[float] = None,
    payment_pattern: PaymentPattern = "simple",
    payment_structure: Optional[PaymentStructure] = None,
    cycles: Sequence[PaymentCycle] = (),
    stability_pattern: Optional[StabilityPattern] = None,
) -> CalculationStrategy:
    """
    Resolve the calculation strategy for a set of income fields.

    A `base_amount` of 0 or None counts as absent, as does an empty
    `stability_pattern`; see the module docstring for the priority order.
    """
    if payment_structure is not None:
        if payment_pattern == "complex" and cycles:
            period_total = cycles_total(cycles)
        else:
            period_total = base_amount or amount or 0.0
        return StructureStrategy(structure=payment_structure, period_total=period_total)

    if base_amount and stability_pattern:
        return StabilityBaseStrategy(base_amount=base_amount, frequency=frequency)

    if payment_pattern == "simple" or not cycles:
        return SimpleAmountStrategy(amount=amount or 0.0, frequency=frequency)

    return CycleListStrategy(cycles=tuple(cycles), frequency=frequency)


# ---------------------------------------------------------------------------
# Income record
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class IncomeSource:
    """
    Immutable snapshot of one income source as reported by the user.

    Parameters
    ----------
    name : str
        Display name ("Trabajo principal", "Freelance").
    frequency : str
        "weekly", "bi-weekly", "monthly", "quarterly" or "irregular". Other
        values are accepted and handled by each strategy's default branch.
    amount : float, default 0.0
        Amount per payment in simple mode.
    base_amount : float, optional
        Conservative figure preferred over `amount` when present.
    payment_pattern : str, default "simple"
        "simple" (one recurring amount) or "complex" (explicit cycles).
    payment_structure : PaymentStructure, optional
        Selected catalog structure; takes priority over everything else.
    payment_schedule : PaymentSchedule, optional
        Selected calendar rule; informational, not used in calculations.
    cycles : sequence of PaymentCycle, default ()
        Cycle amounts for the complex pattern. Stored as a tuple.
    stability_pattern : str, optional
        "consistent", "seasonal" or "variable".
    income_range : IncomeRange, optional
        Reported range for seasonal/variable income.
    is_active, is_primary, is_foundational : bool
        Flags used by aggregation.
    id : str, default ""
        Caller-assigned identifier.

    Attributes
    ----------
    strategy : CalculationStrategy
        Strategy resolved at construction (not an init parameter).
    """

    name: str
    frequency: str
    amount: float = 0.0
    base_amount: Optional[float] = None
    payment_pattern: PaymentPattern = "simple"
    payment_structure: Optional[PaymentStructure] = None
    payment_schedule: Optional[PaymentSchedule] = None
    cycles: Tuple[PaymentCycle, ...] = ()
    stability_pattern: Optional[StabilityPattern] = None
    income_range: Optional[IncomeRange] = None
    is_active: bool = True
    is_primary: bool = False
    is_foundational: bool = False
    id: str = ""
    strategy: CalculationStrategy = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cycles", tuple(self.cycles))
        object.__setattr__(
            self,
            "strategy",
            select_strategy(
                frequency=self.frequency,
                amount=self.amount,
                base_amount=self.base_amount,
                payment_pattern=self.payment_pattern,
                payment_structure=self.payment_structure,
                cycles=self.cycles,
                stability_pattern=self.stability_pattern,
            ),
        )

    # -- Entry paths -------------------------------------------------------

    @classmethod
    def from_amount(
        cls,
        name: str,
        frequency: str,
        amount: float,
        **kwargs,
    ) -> "IncomeSource":
        """Consistent income paid as one recurring amount."""
        return cls(
            name=name,
            frequency=frequency,
            amount=amount,
            base_amount=amount,
            payment_pattern="simple",
            stability_pattern="consistent",
            **kwargs,
        )

    @classmethod
    def from_range(
        cls,
        name: str,
        frequency: str,
        stability_pattern: Literal["seasonal", "variable"],
        income_range: IncomeRange,
        **kwargs,
    ) -> "IncomeSource":
        """
        Seasonal or variable income described by a low/high range.

        `base_amount` (and `amount`) are set to the conservative base, and the
        stored range carries the derived live-preview figure.
        """
        base = conservative_base(income_range, stability_pattern)
        return cls(
            name=name,
            frequency=frequency,
            amount=base,
            base_amount=base,
            payment_pattern="simple",
            stability_pattern=stability_pattern,
            income_range=with_range_average(income_range, stability_pattern),
            **kwargs,
        )

    @classmethod
    def from_cycles(
        cls,
        name: str,
        frequency: str,
        cycles: Sequence[PaymentCycle],
        **kwargs,
    ) -> "IncomeSource":
        """Income received as a list of differing cycle amounts."""
        return cls(
            name=name,
            frequency=frequency,
            payment_pattern="complex",
            cycles=tuple(cycles),
            **kwargs,
        )


# ---------------------------------------------------------------------------
# Calculators
# ---------------------------------------------------------------------------

def structure_monthly(structure: PaymentStructure, period_total: float) -> float:
    """
    Convert the total of one structure period into a monthly figure.

    Monthly, bi-monthly and irregular totals already describe a month.
    """
    kind = structure.type
    if kind == "bi-weekly":
        return period_total * BIWEEKLY_PERIODS_PER_YEAR / MONTHS_PER_YEAR
    if kind == "weekly":
        return period_total * WEEKS_PER_YEAR / MONTHS_PER_YEAR
    if kind == "quarterly":
        return period_total * QUARTERS_PER_YEAR / MONTHS_PER_YEAR
    return period_total


def cycle_monthly(cycle_total: float, frequency: str) -> float:
    """
    Convert a cycle total into a monthly figure.

    Weekly totals are taken to span four weeks and bi-weekly totals two
    periods; quarterly totals are spread over three months. Anything else is
    already monthly.
    """
    if frequency == "weekly":
        return cycle_total * (WEEKS_PER_YEAR / MONTHS_PER_YEAR) / 4
    if frequency == "bi-weekly":
        return cycle_total * (BIWEEKLY_PERIODS_PER_YEAR / MONTHS_PER_YEAR) / 2
    if frequency == "quarterly":
        return cycle_total / 3
    return cycle_total


def simple_monthly(amount: float, frequency: str) -> float:
    """
    Convert one recurring payment into a monthly figure.

    Returns 0 for frequencies without a known multiplier.
    """
    multiplier = SIMPLE_MONTHLY_MULTIPLIERS.get(frequency)
    if multiplier is None:
        logger.debug("No monthly multiplier for frequency %r; using 0", frequency)
        return 0.0
    if frequency == "quarterly":
        return amount / 3
    return amount * multiplier


def monthly_income(income: IncomeSource) -> float:
    """
    Monthly estimate for an income source.

    Dispatches on the strategy resolved when the record was built.
    """
    strategy = income.strategy
    logger.debug("Monthly income for %r via %s", income.name, type(strategy).__name__)

    if isinstance(strategy, StructureStrategy):
        return structure_monthly(strategy.structure, strategy.period_total)
    if isinstance(strategy, StabilityBaseStrategy):
        return simple_monthly(strategy.base_amount, strategy.frequency)
    if isinstance(strategy, SimpleAmountStrategy):
        return simple_monthly(strategy.amount, strategy.frequency)
    if isinstance(strategy, CycleListStrategy):
        return cycle_monthly(cycles_total(strategy.cycles), strategy.frequency)
    raise TypeError(f"Unsupported calculation strategy: {strategy!r}")


def annual_income(income: IncomeSource) -> float:
    """Annual estimate: always `monthly_income(income) * 12`."""
    return monthly_income(income) * MONTHS_PER_YEAR


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def total_income(
    incomes: Iterable[IncomeSource],
    period: Literal["monthly", "yearly"] = "monthly",
) -> float:
    """
    Sum of monthly (or yearly) income over active sources only.

    Raises
    ------
    ValueError
        If `period` is not 'monthly' or 'yearly'.
    """
    if period not in ("monthly", "yearly"):
        raise ValueError(f"period must be 'monthly' or 'yearly', got: {period}")
    monthly = sum(monthly_income(i) for i in incomes if i.is_active)
    return monthly * MONTHS_PER_YEAR if period == "yearly" else monthly


def primary_income(incomes: Iterable[IncomeSource]) -> Optional[IncomeSource]:
    """First active source flagged as primary, or None."""
    return next((i for i in incomes if i.is_primary and i.is_active), None)


def _display_amount(value: float) -> str:
    # Thousands separators, up to three decimals, trailing zeros dropped.
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def income_preview_text(income: IncomeSource, currency_symbol: str = "$") -> str:
    """
    One-line description such as "quincenal fijo → $2,170/mes".

    The pattern reads "variable" only for complex incomes that carry cycles.
    The amount is not rounded to whole units: up to three decimals are kept
    ("$2,166.667/mes" for a bi-weekly structure paying 1,000).
    """
    pattern = "variable" if income.payment_pattern == "complex" and income.cycles else "fijo"
    amount = _display_amount(monthly_income(income))
    return f"{frequency_display(income.frequency)} {pattern} → {currency_symbol}{amount}/mes"


@dataclass(frozen=True)
class IncomeSummary:
    """Summary metrics over a list of income sources (monthly figures, active only)."""
    n_sources: int  # all sources, active or not
    n_active: int
    total_monthly: float
    total_annual: float
    foundational_monthly: float  # sources flagged foundational
    primary_monthly: float
    primary_share: float  # in [0,1]; 0 when there is no active income
    min_monthly: float
    max_monthly: float


def summarize_incomes(incomes: Sequence[IncomeSource]) -> IncomeSummary:
    """
    Portfolio-level metrics over a list of income sources.

    Totals, min and max consider active sources only.
    """
    active = [i for i in incomes if i.is_active]
    monthly = np.array([monthly_income(i) for i in active], dtype=float)

    if monthly.size == 0:
        return IncomeSummary(
            n_sources=len(incomes),
            n_active=0,
            total_monthly=0.0,
            total_annual=0.0,
            foundational_monthly=0.0,
            primary_monthly=0.0,
            primary_share=0.0,
            min_monthly=0.0,
            max_monthly=0.0,
        )

    foundational = np.array([i.is_foundational for i in active], dtype=bool)
    primary = np.array([i.is_primary for i in active], dtype=bool)

    total = float(monthly.sum())
    primary_monthly = float(monthly[primary].sum())

    return IncomeSummary(
        n_sources=len(incomes),
        n_active=len(active),
        total_monthly=total,
        total_annual=total * MONTHS_PER_YEAR,
        foundational_monthly=float(monthly[foundational].sum()),
        primary_monthly=primary_monthly,
        primary_share=(primary_monthly / total) if total > 0 else 0.0,
        min_monthly=float(monthly.min()),
        max_monthly=float(monthly.max()),
    )


def income_frame(incomes: Sequence[IncomeSource]) -> pd.DataFrame:
    """
    Tabular view of income sources, one row per source.

    Columns: name, frequency, strategy, monthly, annual, active, primary.
    """
    rows = [
        {
            "name": i.name,
            "frequency": i.frequency,
            "strategy": type(i.strategy).__name__,
            "monthly": monthly_income(i),
            "annual": annual_income(i),
            "active": i.is_active,
            "primary": i.is_primary,
        }
        for i in incomes
    ]
    columns = ["name", "frequency", "strategy", "monthly", "annual", "active", "primary"]
    return pd.DataFrame(rows, columns=columns)
