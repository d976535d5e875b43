"""
Payment cycle modeling and validation for incomenorm.

Purpose
-------
A *cycle* is one user-edited payment within a period ("Primera quincena",
"Semana 3"). Users who are paid different amounts across a period describe
their income as a list of cycles; this module validates such lists, builds
starter lists for each frequency, and applies the add/update/remove edits the
onboarding flow performs.

Key components
--------------
- PaymentCycle:
    Immutable payment entry (id, amount, description).

- validate_cycles:
    Advisory validation returning ordered, human-readable messages.

- default_cycles:
    Frequency-appropriate starter list pre-filled with a base amount.

- add_cycle / update_cycle / remove_cycle:
    Edits returning a new tuple; each enforces the list invariants and raises
    `ValidationError` when an edit would break them.

Notes
-----
Identifiers are random UUIDs, which makes them unique within any list the
caller builds. `add_cycle` additionally regenerates on the (practically
impossible) event of a clash with an existing id in the same list.

Example
-------
>>> from incomenorm.cycles import default_cycles, validate_cycles
>>> cycles = default_cycles("bi-weekly", 750.0)
>>> [c.description for c in cycles]
['Primera quincena', 'Segunda quincena']
>>> validate_cycles(cycles, "bi-weekly")
[]
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from typing import Iterable, List, Sequence, Tuple

from .constants import (
    CYCLE_ID_PREFIX,
    DEFAULT_MAX_CYCLES,
    FREQUENCY_LABELS,
    MAX_CYCLES_BY_FREQUENCY,
)
from .exceptions import ValidationError

__all__ = [
    "PaymentCycle",
    "new_cycle_id",
    "frequency_display",
    "max_cycles_for_frequency",
    "validate_cycles",
    "default_cycles",
    "cycles_total",
    "add_cycle",
    "update_cycle",
    "remove_cycle",
]


@dataclass(frozen=True)
class PaymentCycle:
    """
    One payment entry within a period.

    Parameters
    ----------
    id : str
        Identifier, unique within the owning list.
    amount : float
        Payment amount; must be > 0 once the list is finalized.
    description : str
        Label for the payment; must be non-blank once finalized.
    """

    id: str
    amount: float = 0.0
    description: str = ""


def new_cycle_id() -> str:
    """Fresh collision-resistant cycle identifier."""
    return f"{CYCLE_ID_PREFIX}{uuid.uuid4().hex}"


def frequency_display(frequency: str) -> str:
    """Localized adjective for a frequency ("bi-weekly" -> "quincenal")."""
    return FREQUENCY_LABELS.get(frequency, frequency)


def max_cycles_for_frequency(frequency: str) -> int:
    """Maximum number of cycles a user may enter for `frequency`."""
    return MAX_CYCLES_BY_FREQUENCY.get(frequency, DEFAULT_MAX_CYCLES)


def validate_cycles(cycles: Sequence[PaymentCycle], frequency: str) -> List[str]:
    """
    Advisory validation of a cycle list.

    Parameters
    ----------
    cycles : sequence of PaymentCycle
        Cycles as currently entered.
    frequency : str
        Frequency the cycles belong to; selects the count limit.

    Returns
    -------
    list of str
        Messages in display order; empty means valid. An empty list of cycles
        yields a single message and nothing else is checked. Otherwise the
        count check comes first, followed by each failing cycle's messages
        (1-indexed), amount before description.
    """
    errors: List[str] = []

    if not cycles:
        errors.append("Debe configurar al menos un pago.")
        return errors

    limit = max_cycles_for_frequency(frequency)
    if len(cycles) > limit:
        errors.append(
            f"Solo puede tener {limit} pagos para frecuencia {frequency_display(frequency)}."
        )

    for index, cycle in enumerate(cycles, start=1):
        if not cycle.amount or cycle.amount <= 0:
            errors.append(f"El pago {index} debe tener un monto válido.")
        if not (cycle.description or "").strip():
            errors.append(f"El pago {index} debe tener una descripción.")

    return errors


def default_cycles(frequency: str, base_amount: float) -> Tuple[PaymentCycle, ...]:
    """
    Starter cycle list for a frequency, every cycle pre-filled with `base_amount`.

    Weekly gets four weeks, bi-weekly two halves of the month, monthly a single
    payment, and anything else one generic payment.
    """
    if frequency == "weekly":
        descriptions = [f"Semana {n}" for n in range(1, 5)]
    elif frequency == "bi-weekly":
        descriptions = ["Primera quincena", "Segunda quincena"]
    elif frequency == "monthly":
        descriptions = ["Pago mensual"]
    else:
        descriptions = ["Pago 1"]

    return tuple(
        PaymentCycle(id=new_cycle_id(), amount=base_amount, description=d)
        for d in descriptions
    )


def cycles_total(cycles: Iterable[PaymentCycle]) -> float:
    """Sum of cycle amounts; missing amounts count as 0."""
    return sum((c.amount or 0.0) for c in cycles)


# ---------------------------------------------------------------------------
# Editing
# ---------------------------------------------------------------------------

def add_cycle(
    cycles: Sequence[PaymentCycle],
    frequency: str,
    *,
    amount: float = 0.0,
    description: str = "",
) -> Tuple[PaymentCycle, ...]:
    """
    Append a new cycle with a fresh identifier.

    Raises
    ------
    ValidationError
        If the list already holds the maximum number of cycles for `frequency`.
    """
    limit = max_cycles_for_frequency(frequency)
    if len(cycles) >= limit:
        raise ValidationError(
            f"Cannot add cycle: {frequency!r} allows at most {limit} cycles."
        )

    taken = {c.id for c in cycles}
    cycle_id = new_cycle_id()
    while cycle_id in taken:
        cycle_id = new_cycle_id()

    return tuple(cycles) + (PaymentCycle(id=cycle_id, amount=amount, description=description),)


def update_cycle(
    cycles: Sequence[PaymentCycle],
    index: int,
    **changes: object,
) -> Tuple[PaymentCycle, ...]:
    """
    Replace fields of the cycle at `index` (0-based).

    Only `amount` and `description` may change; the identifier is stable.

    Raises
    ------
    ValidationError
        If `index` is out of range or an unsupported field is given.
    """
    _check_index(cycles, index)
    unknown = set(changes) - {"amount", "description"}
    if unknown:
        raise ValidationError(f"Cannot update cycle fields: {sorted(unknown)}.")

    updated = list(cycles)
    updated[index] = replace(updated[index], **changes)
    return tuple(updated)


def remove_cycle(cycles: Sequence[PaymentCycle], index: int) -> Tuple[PaymentCycle, ...]:
    """
    Remove the cycle at `index` (0-based).

    Raises
    ------
    ValidationError
        If `index` is out of range or the removal would empty the list.
    """
    _check_index(cycles, index)
    if len(cycles) <= 1:
        raise ValidationError("At least one payment cycle is required.")
    return tuple(c for i, c in enumerate(cycles) if i != index)


def _check_index(cycles: Sequence[PaymentCycle], index: int) -> None:
    if not 0 <= index < len(cycles):
        raise ValidationError(
            f"Cycle index {index} out of range for {len(cycles)} cycles."
        )
