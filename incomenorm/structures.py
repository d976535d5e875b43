"""
Payment structure and schedule catalogs for incomenorm.

Purpose
-------
Static catalogs describing *how often* an income arrives (payment structures)
and *on which calendar days* it arrives (payment schedules). Both catalogs are
immutable, built once at import time, and are only ever read: selecting a
structure returns the catalog value itself, never a user-editable copy.

Key components
--------------
- PaymentStructure:
    Cardinality of an income source: payments per period and the period
    (month or year) that count refers to.

- PaymentSchedule:
    Calendar rule realizing a structure: fixed day-of-month dates, a weekday
    pattern such as "every Friday", or a custom placeholder.

- structure_options / structure_for / schedule_options_for:
    Catalog lookups used by the presentation layer.

Notes
-----
A schedule belongs to the structure it was listed under; nothing prevents a
caller from pairing a schedule with a different structure, and nothing here
checks for it.

Example
-------
>>> from incomenorm.structures import structure_for, schedule_options_for
>>> biweekly = structure_for("bi-weekly")
>>> biweekly.payments_per_year
26
>>> [s.description for s in schedule_options_for(biweekly)]
['Cada 14 días (viernes)', 'Todos los viernes (alternando semanas)']
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .exceptions import ConfigurationError
from .types import SchedulePattern, ScheduleType

__all__ = [
    "PaymentStructure",
    "PaymentSchedule",
    "StructureDetails",
    "STRUCTURE_TYPES",
    "structure_options",
    "structure_for",
    "structure_details",
    "payments_per_year_text",
    "amount_labels",
    "max_payments",
    "schedule_options_for",
    "schedule_summary",
]


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PaymentStructure:
    """
    Cardinality/timing family of an income source.

    Parameters
    ----------
    type : str
        One of "monthly", "bi-monthly", "bi-weekly", "weekly", "quarterly",
        "irregular".
    payments_per_period : int
        Number of payments in one `period`.
    period : str
        "month" or "year".
    description : str
        Short localized description shown on the selection card.
    """

    type: str
    payments_per_period: int
    period: str
    description: str

    @property
    def payments_per_year(self) -> int:
        """Payments per calendar year implied by the period cardinality."""
        if self.period == "month":
            return self.payments_per_period * 12
        return self.payments_per_period


@dataclass(frozen=True)
class PaymentSchedule:
    """
    Calendar rule placing a structure's payments on specific days.

    Parameters
    ----------
    type : str
        "fixed-dates", "day-pattern" or "custom".
    description : str
        Localized description; also the selection key in the UI.
    dates : tuple of int, optional
        Days of month in [1, 31] for "fixed-dates" schedules, in order.
    pattern : str, optional
        Weekday pattern for "day-pattern" schedules: "first-friday",
        "last-friday", "every-friday" or "bi-weekly-friday".
    """

    type: ScheduleType
    description: str
    dates: Optional[Tuple[int, ...]] = None
    pattern: Optional[SchedulePattern] = None

    def __post_init__(self) -> None:
        if self.dates is not None:
            if any(not 1 <= d <= 31 for d in self.dates):
                raise ValueError(f"schedule dates must be within 1..31 (got {self.dates}).")


@dataclass(frozen=True)
class StructureDetails:
    """Descriptive metadata shown next to a structure option."""

    examples: str
    payments_per_year: str
    guidance: str
    explanation: str


# ---------------------------------------------------------------------------
# Catalogs
# ---------------------------------------------------------------------------

_STRUCTURES: Tuple[PaymentStructure, ...] = (
    PaymentStructure("monthly", 1, "month", "Un pago al mes"),
    PaymentStructure("bi-monthly", 2, "month", "Dos pagos por mes"),
    PaymentStructure("bi-weekly", 26, "year", "Cada 14 días exactos"),
    PaymentStructure("weekly", 52, "year", "Cada semana"),
    PaymentStructure("quarterly", 4, "year", "Cada tres meses"),
    PaymentStructure("irregular", 12, "year", "Frecuencia variable"),
)

_STRUCTURES_BY_TYPE: Mapping[str, PaymentStructure] = MappingProxyType(
    {s.type: s for s in _STRUCTURES}
)

STRUCTURE_TYPES: Tuple[str, ...] = tuple(s.type for s in _STRUCTURES)

_DETAILS: Mapping[str, StructureDetails] = MappingProxyType({
    "monthly": StructureDetails(
        examples="Ej: El día 30 de cada mes",
        payments_per_year="12 pagos al año",
        guidance="Perfecto para salarios mensuales tradicionales",
        explanation="Un pago fijo cada mes",
    ),
    "bi-monthly": StructureDetails(
        examples="Ej: 1ro y 15, o quincenas",
        payments_per_year="24 pagos al año",
        guidance="Ideal para trabajos que pagan dos veces al mes",
        explanation="Dos pagos por mes = ingresos más consistentes",
    ),
    "bi-weekly": StructureDetails(
        examples="Ej: Viernes cada 14 días",
        payments_per_year="26 pagos al año",
        guidance="Común en empleos por horas y algunos salarios",
        explanation="Cada 14 días = algunos meses tendrás 3 pagos",
    ),
    "weekly": StructureDetails(
        examples="Ej: Todos los viernes",
        payments_per_year="52 pagos al año",
        guidance="Típico para trabajos por horas y empleos semanales",
        explanation="Cada semana = algunos meses tendrás 5 pagos",
    ),
    "quarterly": StructureDetails(
        examples="Ej: Bonos o dividendos trimestrales",
        payments_per_year="4 pagos al año",
        guidance="Para ingresos que llegan una vez por trimestre",
        explanation="Cada 3 meses = divide entre 3 para el promedio mensual",
    ),
    "irregular": StructureDetails(
        examples="Proyectos, comisiones",
        payments_per_year="Varía",
        guidance="Para freelancers, comisiones y proyectos",
        explanation="Frecuencia variable = usa este estimado mensual",
    ),
})

_AMOUNT_LABELS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "monthly": ("Pago mensual",),
    "bi-monthly": ("Primer pago (1-15)", "Segundo pago (16-31)"),
    "bi-weekly": ("Pago cada 14 días",),
    "weekly": ("Pago semanal",),
    "quarterly": ("Pago trimestral",),
    "irregular": ("Estimado mensual",),
})

_CUSTOM_SCHEDULE = PaymentSchedule(type="custom", description="Fechas personalizadas")

_SCHEDULES: Mapping[str, Tuple[PaymentSchedule, ...]] = MappingProxyType({
    "monthly": (
        PaymentSchedule("fixed-dates", "Último día del mes", dates=(30,)),
        PaymentSchedule("fixed-dates", "El día 15 de cada mes", dates=(15,)),
        PaymentSchedule("fixed-dates", "Primer día del mes", dates=(1,)),
        PaymentSchedule("day-pattern", "Último viernes del mes", pattern="last-friday"),
    ),
    "bi-monthly": (
        PaymentSchedule("fixed-dates", "1ro y 15 de cada mes", dates=(1, 15)),
        PaymentSchedule("fixed-dates", "15 y último día del mes", dates=(15, 30)),
        PaymentSchedule("fixed-dates", "10 y 25 de cada mes", dates=(10, 25)),
        PaymentSchedule("day-pattern", "Primer y tercer viernes", pattern="first-friday"),
    ),
    "bi-weekly": (
        PaymentSchedule("day-pattern", "Cada 14 días (viernes)", pattern="bi-weekly-friday"),
        PaymentSchedule(
            "day-pattern", "Todos los viernes (alternando semanas)", pattern="every-friday"
        ),
    ),
    "weekly": (
        PaymentSchedule("day-pattern", "Todos los viernes", pattern="every-friday"),
    ),
})

_PATTERN_SUMMARIES: Mapping[str, str] = MappingProxyType({
    "every-friday": "Viernes de cada semana",
    "bi-weekly-friday": "Viernes cada 14 días exactos",
    "first-friday": "Primer viernes + 2 semanas después",
    "last-friday": "Último viernes de cada mes",
})


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def structure_options() -> Tuple[PaymentStructure, ...]:
    """Return every supported payment structure, in display order."""
    return _STRUCTURES


def structure_for(structure_type: str) -> PaymentStructure:
    """
    Return the catalog entry for `structure_type`.

    Raises
    ------
    ConfigurationError
        If the type is not part of the catalog.
    """
    try:
        return _STRUCTURES_BY_TYPE[structure_type]
    except KeyError:
        raise ConfigurationError(
            f"Unknown payment structure {structure_type!r}. "
            f"Expected one of: {', '.join(STRUCTURE_TYPES)}."
        ) from None


def structure_details(structure: PaymentStructure) -> StructureDetails:
    """Descriptive metadata for a structure (empty strings if uncatalogued)."""
    return _DETAILS.get(structure.type, StructureDetails("", "", "", ""))


def payments_per_year_text(structure: PaymentStructure) -> str:
    """Display text for the yearly payment count, e.g. "26 pagos al año"."""
    return structure_details(structure).payments_per_year


def amount_labels(structure: PaymentStructure) -> Tuple[str, ...]:
    """Labels for the amount inputs a structure asks the user to fill in."""
    return _AMOUNT_LABELS.get(structure.type, ("Monto",))


def max_payments(structure: PaymentStructure) -> int:
    """Number of distinct amounts a structure accepts during amount entry."""
    return len(amount_labels(structure))


def schedule_options_for(structure: PaymentStructure) -> Tuple[PaymentSchedule, ...]:
    """
    Calendar rules available for a structure.

    Quarterly, irregular and uncatalogued structures only offer the custom
    placeholder schedule.
    """
    return _SCHEDULES.get(structure.type, (_CUSTOM_SCHEDULE,))


def schedule_summary(schedule: PaymentSchedule) -> str:
    """
    One-line human description of where a schedule lands in the month.

    Examples
    --------
    >>> schedule_summary(PaymentSchedule("fixed-dates", "x", dates=(1, 15)))
    'Días 1 y 15 de cada mes'
    """
    if schedule.type == "fixed-dates" and schedule.dates:
        if len(schedule.dates) == 1:
            day = schedule.dates[0]
            if day == 30:
                return "28, 29, 30 o 31 (último día disponible)"
            return f"Día {day} de cada mes"
        if len(schedule.dates) == 2:
            return f"Días {schedule.dates[0]} y {schedule.dates[1]} de cada mes"
        return schedule.description
    if schedule.type == "day-pattern" and schedule.pattern:
        return _PATTERN_SUMMARIES.get(schedule.pattern, schedule.description)
    return schedule.description
