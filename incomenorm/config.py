"""
Configuration management module for incomenorm.

Purpose
-------
Pydantic models that coerce and validate income records coming from JSON
files, the CLI or an onboarding flow before they reach the core dataclasses,
plus environment-driven application settings.

Design Principles
-----------------
- Type-safe: Pydantic enforces types, enum values and ranges
- Immutable: Frozen models prevent accidental mutation
- camelCase on the wire: field aliases match the presentation layer's keys
  (`baseAmount`, `paymentPattern`, ...); snake_case names are accepted too
- Structural only: amounts and names are not range-checked here. Advisory
  checks (positive cycle amounts, ordered ranges) stay in
  `cycles.validate_cycles` / `stability.validate_income_range`, so any
  record the core accepts can be saved and loaded back

Example
-------
>>> from incomenorm.config import IncomeSourceConfig
>>> from incomenorm.income import monthly_income
>>> cfg = IncomeSourceConfig.model_validate(
...     {"name": "Trabajo", "frequency": "bi-weekly", "amount": 1000,
...      "paymentStructure": "bi-weekly"}
... )
>>> income = cfg.to_income()
>>> round(monthly_income(income), 2)
2166.67
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from .cycles import PaymentCycle, new_cycle_id
from .income import IncomeSource
from .stability import IncomeRange
from .structures import PaymentSchedule, structure_for
from .types import (
    PaymentPattern,
    SchedulePattern,
    ScheduleType,
    StabilityPattern,
    StructureType,
)

__all__ = [
    "PaymentCycleConfig",
    "IncomeRangeConfig",
    "PaymentScheduleConfig",
    "IncomeSourceConfig",
    "AppSettings",
]


_WIRE_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


# ---------------------------------------------------------------------------
# Cycle / Range / Schedule
# ---------------------------------------------------------------------------

class PaymentCycleConfig(BaseModel):
    """
    One payment cycle as received from the outside.

    A missing `id` is generated on conversion.
    """

    model_config = _WIRE_CONFIG

    id: Optional[str] = Field(default=None, description="Cycle identifier")
    amount: float = Field(default=0.0, description="Payment amount")
    description: str = Field(default="", description="Payment label")

    def to_cycle(self) -> PaymentCycle:
        return PaymentCycle(
            id=self.id or new_cycle_id(),
            amount=self.amount,
            description=self.description,
        )


class IncomeRangeConfig(BaseModel):
    """Reported low/high range."""

    model_config = _WIRE_CONFIG

    lowest: float = Field(default=0.0, description="Typical low-period income")
    highest: float = Field(default=0.0, description="Typical high-period income")
    average_low: float = Field(default=0.0, description="Derived live-preview figure")

    def to_range(self) -> IncomeRange:
        return IncomeRange(lowest=self.lowest, highest=self.highest, average_low=self.average_low)


class PaymentScheduleConfig(BaseModel):
    """Calendar rule selected for a structure."""

    model_config = _WIRE_CONFIG

    type: ScheduleType
    description: str = Field(default="", description="Localized description")
    dates: Optional[List[int]] = Field(default=None, description="Days of month, 1..31")
    pattern: Optional[SchedulePattern] = None

    @field_validator("dates")
    @classmethod
    def validate_dates(cls, v):
        """Ensure every day of month lies within 1..31."""
        if v is not None and any(not 1 <= d <= 31 for d in v):
            raise ValueError(f"dates must be within 1..31, got {v}")
        return v

    def to_schedule(self) -> PaymentSchedule:
        return PaymentSchedule(
            type=self.type,
            description=self.description,
            dates=tuple(self.dates) if self.dates is not None else None,
            pattern=self.pattern,
        )


# ---------------------------------------------------------------------------
# Income Source
# ---------------------------------------------------------------------------

class IncomeSourceConfig(BaseModel):
    """
    Income record as supplied by a caller.

    `payment_structure` is the structure *type*; it is resolved against the
    catalog on conversion. `frequency` is free text so that records with an
    unrecognized frequency still load and go through the calculator's default
    branches.

    Examples
    --------
    >>> cfg = IncomeSourceConfig(name="Freelance", frequency="monthly",
    ...                          stability_pattern="variable",
    ...                          income_range={"lowest": 800, "highest": 2000})
    """

    model_config = _WIRE_CONFIG

    id: str = Field(default="", description="Caller-assigned identifier")
    name: str = Field(description="Income display name")
    frequency: str = Field(description="Payment frequency")
    amount: float = Field(default=0.0, description="Amount per payment")
    base_amount: Optional[float] = Field(default=None, description="Conservative base")
    payment_pattern: PaymentPattern = "simple"
    payment_structure: Optional[StructureType] = None
    payment_schedule: Optional[PaymentScheduleConfig] = None
    cycles: List[PaymentCycleConfig] = Field(default_factory=list)
    stability_pattern: Optional[StabilityPattern] = None
    income_range: Optional[IncomeRangeConfig] = None
    is_active: bool = True
    is_primary: bool = False
    is_foundational: bool = False

    def to_income(self) -> IncomeSource:
        """Build the core `IncomeSource` this configuration describes."""
        return IncomeSource(
            id=self.id,
            name=self.name,
            frequency=self.frequency,
            amount=self.amount,
            base_amount=self.base_amount,
            payment_pattern=self.payment_pattern,
            payment_structure=(
                structure_for(self.payment_structure) if self.payment_structure else None
            ),
            payment_schedule=(
                self.payment_schedule.to_schedule() if self.payment_schedule else None
            ),
            cycles=tuple(c.to_cycle() for c in self.cycles),
            stability_pattern=self.stability_pattern,
            income_range=self.income_range.to_range() if self.income_range else None,
            is_active=self.is_active,
            is_primary=self.is_primary,
            is_foundational=self.is_foundational,
        )


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Environment variables are prefixed with INCOMENORM_ (e.g.
    INCOMENORM_LOG_LEVEL=DEBUG). A local .env file is read when present.

    Attributes
    ----------
    debug : bool
        Enable debug mode (forces DEBUG logging)
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR"
    currency_symbol : str
        Symbol used when formatting amounts for display
    """

    model_config = SettingsConfigDict(
        env_prefix="INCOMENORM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )
    currency_symbol: str = Field(
        default="$",
        description="Currency symbol for display"
    )
