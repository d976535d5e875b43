"""
Type definitions for incomenorm.

Purpose
-------
Provides TypedDict definitions for the dictionary shapes exchanged with the
presentation layer and written to disk. The core itself works with frozen
dataclasses; these types document the plain-dict boundary used by
`serialization.py` and the CLI.

Type Definitions
----------------
PaymentCycleDict
    One user-edited payment: {"id", "amount", "description"}

IncomeRangeDict
    Reported low/high range: {"lowest", "highest", "averageLow"}

PaymentScheduleDict
    Calendar rule: {"type", "dates"?, "pattern"?, "description"}

IncomeSourceDict
    Full income record as saved to JSON (camelCase keys)

"""

from typing import List, Literal

from typing_extensions import TypedDict, NotRequired

__all__ = [
    "StructureType",
    "StabilityPattern",
    "PaymentPattern",
    "ScheduleType",
    "SchedulePattern",
    "PaymentCycleDict",
    "IncomeRangeDict",
    "PaymentScheduleDict",
    "IncomeSourceDict",
]


StructureType = Literal["monthly", "bi-monthly", "bi-weekly", "weekly", "quarterly", "irregular"]
StabilityPattern = Literal["consistent", "seasonal", "variable"]
PaymentPattern = Literal["simple", "complex"]
ScheduleType = Literal["fixed-dates", "day-pattern", "custom"]
SchedulePattern = Literal["first-friday", "last-friday", "every-friday", "bi-weekly-friday"]


class PaymentCycleDict(TypedDict):
    """
    One payment entry inside a period.

    Examples
    --------
    >>> cycle: PaymentCycleDict = {"id": "cycle_1f2e", "amount": 750.0,
    ...                            "description": "Primera quincena"}
    """

    id: str
    amount: float
    description: str


class IncomeRangeDict(TypedDict):
    """Low/high income range with the derived live-preview figure."""

    lowest: float
    highest: float
    averageLow: float


class PaymentScheduleDict(TypedDict):
    """
    Calendar placement rule for a structure.

    `dates` is present for "fixed-dates" schedules, `pattern` for
    "day-pattern" schedules; "custom" carries neither.
    """

    type: ScheduleType
    dates: NotRequired[List[int]]
    pattern: NotRequired[SchedulePattern]
    description: str


class IncomeSourceDict(TypedDict, total=False):
    """
    Income record as persisted or received from the onboarding flow.

    Only `name`, `frequency` and `amount` are required in practice; every
    other key is optional and selects the calculation strategy.

    Examples
    --------
    >>> record: IncomeSourceDict = {
    ...     "name": "Trabajo principal",
    ...     "frequency": "bi-weekly",
    ...     "amount": 1000.0,
    ...     "paymentPattern": "simple",
    ... }
    """

    id: str
    name: str
    frequency: str
    amount: float
    baseAmount: float
    paymentPattern: PaymentPattern
    paymentStructure: StructureType
    paymentSchedule: PaymentScheduleDict
    cycles: List[PaymentCycleDict]
    stabilityPattern: StabilityPattern
    incomeRange: IncomeRangeDict
    isActive: bool
    isPrimary: bool
    isFoundational: bool
