"""
incomenorm — Income Normalization Engine

Converts heterogeneous, user-reported income (fixed salary, twice-monthly or
bi-weekly pay, weekly wages, quarterly or irregular income, seasonal ranges)
into one conservative monthly figure for budget planning.

Modules
-------
- structures   : Payment structure and schedule catalogs
- stability    : Conservative figures from low/high income ranges
- cycles       : Payment cycle validation, defaults and editing
- income       : Income records and the monthly income calculator
- preview      : Three-month illustrative payment calendar
- config       : Pydantic input models and application settings
- serialization: JSON save/load of income records

"""

__version__ = "0.1.0"

from .cycles import PaymentCycle, default_cycles, validate_cycles
from .income import IncomeSource, annual_income, monthly_income
from .preview import schedule_preview
from .stability import IncomeRange, conservative_base, validate_income_range
from .structures import PaymentSchedule, PaymentStructure, schedule_options_for, structure_options
