"""
Serialization utilities for incomenorm.

Purpose
-------
Save and load income records to/from JSON files so they can be inspected or
recomputed from the command line. Records are written with the same camelCase
keys the presentation layer uses, and read back through the pydantic models
in `config.py`.

File layout
-----------
{
    "schema_version": "0.1.0",
    "incomes": [ {IncomeSourceDict}, ... ]
}

Example
-------
>>> from pathlib import Path
>>> from incomenorm.income import IncomeSource
>>> from incomenorm.serialization import save_incomes, load_incomes
>>> save_incomes(Path("incomes.json"), [IncomeSource.from_amount("Trabajo", "monthly", 2500)])
>>> [i.name for i in load_incomes(Path("incomes.json"))]
['Trabajo']
"""

from __future__ import annotations

import json
import warnings
from pathlib import Path
from typing import Any, Dict, List, Sequence

from pydantic import ValidationError as PydanticValidationError

from .config import IncomeSourceConfig
from .exceptions import SchemaError
from .income import IncomeSource
from .types import IncomeSourceDict

__all__ = [
    "SCHEMA_VERSION",
    "income_to_dict",
    "income_from_dict",
    "save_incomes",
    "load_incomes",
]


# ---------------------------------------------------------------------------
# Schema Version
# ---------------------------------------------------------------------------

SCHEMA_VERSION = "0.1.0"


# ---------------------------------------------------------------------------
# Income Serialization
# ---------------------------------------------------------------------------

def income_to_dict(income: IncomeSource) -> IncomeSourceDict:
    """
    Convert an IncomeSource to its camelCase dictionary representation.

    Optional fields that are unset are omitted.
    """
    result: Dict[str, Any] = {
        "id": income.id,
        "name": income.name,
        "frequency": income.frequency,
        "amount": income.amount,
        "paymentPattern": income.payment_pattern,
        "isActive": income.is_active,
        "isPrimary": income.is_primary,
        "isFoundational": income.is_foundational,
    }

    if income.base_amount is not None:
        result["baseAmount"] = income.base_amount

    if income.payment_structure is not None:
        result["paymentStructure"] = income.payment_structure.type

    if income.payment_schedule is not None:
        schedule = income.payment_schedule
        schedule_data: Dict[str, Any] = {
            "type": schedule.type,
            "description": schedule.description,
        }
        if schedule.dates is not None:
            schedule_data["dates"] = list(schedule.dates)
        if schedule.pattern is not None:
            schedule_data["pattern"] = schedule.pattern
        result["paymentSchedule"] = schedule_data

    if income.cycles:
        result["cycles"] = [
            {"id": c.id, "amount": c.amount, "description": c.description}
            for c in income.cycles
        ]

    if income.stability_pattern is not None:
        result["stabilityPattern"] = income.stability_pattern

    if income.income_range is not None:
        result["incomeRange"] = {
            "lowest": income.income_range.lowest,
            "highest": income.income_range.highest,
            "averageLow": income.income_range.average_low,
        }

    return result  # type: ignore[return-value]


def income_from_dict(data: Dict[str, Any]) -> IncomeSource:
    """
    Create an IncomeSource from its dictionary representation.

    Raises
    ------
    pydantic.ValidationError
        If the dictionary does not describe a valid income record.
    """
    return IncomeSourceConfig.model_validate(data).to_income()


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------

def save_incomes(path: Path, incomes: Sequence[IncomeSource]) -> None:
    """Write income records to a JSON file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    payload = {
        "schema_version": SCHEMA_VERSION,
        "incomes": [income_to_dict(i) for i in incomes],
    }

    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)


def load_incomes(path: Path) -> List[IncomeSource]:
    """
    Load income records from a JSON file.

    Raises
    ------
    SchemaError
        If the file has no "incomes" list or any entry fails validation.
    """
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)

    if not isinstance(payload, dict) or not isinstance(payload.get("incomes"), list):
        raise SchemaError(f"{path}: expected an object with an 'incomes' list.")

    schema_version = payload.get("schema_version", "0.0.0")
    if schema_version != SCHEMA_VERSION:
        warnings.warn(
            f"Income file schema version {schema_version} differs from current "
            f"version {SCHEMA_VERSION}. May encounter compatibility issues.",
            UserWarning,
        )

    incomes: List[IncomeSource] = []
    for position, entry in enumerate(payload["incomes"]):
        try:
            incomes.append(income_from_dict(entry))
        except PydanticValidationError as e:
            raise SchemaError(f"{path}: income #{position + 1} is invalid: {e}") from e
    return incomes
