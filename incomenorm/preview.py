"""
Calendar preview projection for incomenorm.

Purpose
-------
Builds a short, illustrative forecast of when payments land and how much each
month receives, so users can see that a bi-weekly salary sometimes pays three
times in a month and a weekly wage sometimes five. The projection is not a
payroll calendar: it always covers the same three generic months
(January-March) and uses fixed date labels.

Layout per structure
--------------------
- monthly    : one payment ("Fin de mes") of amounts[0]
- bi-monthly : two payments ("1ro", "15") of amounts[0] and amounts[1]
               (amounts[1] falls back to amounts[0])
- bi-weekly  : two payments of amounts[0]; the second month gets a third
- weekly     : four payments of amounts[0]; the first and third months get a fifth
- quarterly, irregular and anything else: no payments (total 0)

No validation happens here. Callers skip the preview when `amounts` is empty
or all zero; `has_previewable_amounts` implements that check.

Example
-------
>>> from incomenorm.structures import structure_for
>>> from incomenorm.preview import schedule_preview
>>> months = schedule_preview(structure_for("weekly"), [100])
>>> [m.total for m in months]
[500, 400, 500]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import pandas as pd

from .constants import PREVIEW_MONTHS
from .structures import PaymentStructure, structure_details

__all__ = [
    "ScheduledPayment",
    "MonthPreview",
    "schedule_preview",
    "has_previewable_amounts",
    "schedule_explanation",
    "preview_frame",
]


@dataclass(frozen=True)
class ScheduledPayment:
    amount: float
    date: str


@dataclass(frozen=True)
class MonthPreview:
    """One month of the preview: its label, payments and their total."""

    month: str
    payments: Tuple[ScheduledPayment, ...]

    @property
    def total(self) -> float:
        return sum(p.amount for p in self.payments)


def _month_payments(structure_type: str, amounts: Sequence[float], index: int) -> List[ScheduledPayment]:
    if structure_type == "monthly":
        return [ScheduledPayment(amounts[0], "Fin de mes")]

    if structure_type == "bi-monthly":
        second = amounts[1] if len(amounts) > 1 else amounts[0]
        return [ScheduledPayment(amounts[0], "1ro"), ScheduledPayment(second, "15")]

    if structure_type == "bi-weekly":
        labels = ["Viernes 1", "Viernes 2"]
        if index == 1:
            labels.append("Viernes 3 (extra)")
        return [ScheduledPayment(amounts[0], label) for label in labels]

    if structure_type == "weekly":
        labels = [f"Semana {n}" for n in range(1, 5)]
        if index in (0, 2):
            labels.append("Semana 5 (extra)")
        return [ScheduledPayment(amounts[0], label) for label in labels]

    return []


def schedule_preview(structure: PaymentStructure, amounts: Sequence[float]) -> List[MonthPreview]:
    """
    Three-month illustrative payment projection.

    Parameters
    ----------
    structure : PaymentStructure
        Structure whose layout to project.
    amounts : sequence of float
        Amount per payment; only bi-monthly reads a second entry.

    Returns
    -------
    list of MonthPreview
        Exactly three entries, one per preview month.
    """
    return [
        MonthPreview(month=month, payments=tuple(_month_payments(structure.type, amounts, i)))
        for i, month in enumerate(PREVIEW_MONTHS)
    ]


def has_previewable_amounts(amounts: Sequence[float]) -> bool:
    """True when at least one amount is positive."""
    return any(a > 0 for a in amounts)


def schedule_explanation(structure: PaymentStructure) -> str:
    """Short note shown under the preview ("Cada 14 días = algunos meses tendrás 3 pagos")."""
    return structure_details(structure).explanation


def preview_frame(previews: Sequence[MonthPreview]) -> pd.DataFrame:
    """
    Flatten a preview into one row per payment.

    Columns: month, date, amount, month_total. Months without payments keep
    no rows.
    """
    rows = [
        {"month": m.month, "date": p.date, "amount": p.amount, "month_total": m.total}
        for m in previews
        for p in m.payments
    ]
    return pd.DataFrame(rows, columns=["month", "date", "amount", "month_total"])
