"""
Pytest configuration and fixtures for the incomenorm test suite.

Fixtures build the catalog structures and the typical income records each
onboarding entry path produces.
"""

import json

import pytest

from incomenorm.cycles import PaymentCycle
from incomenorm.income import IncomeSource
from incomenorm.stability import IncomeRange
from incomenorm.structures import PaymentStructure, structure_for


# ---------------------------------------------------------------------------
# Structure Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def monthly_structure() -> PaymentStructure:
    return structure_for("monthly")


@pytest.fixture
def bimonthly_structure() -> PaymentStructure:
    return structure_for("bi-monthly")


@pytest.fixture
def biweekly_structure() -> PaymentStructure:
    return structure_for("bi-weekly")


@pytest.fixture
def weekly_structure() -> PaymentStructure:
    return structure_for("weekly")


# ---------------------------------------------------------------------------
# Cycle Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def half_month_cycles() -> tuple:
    """Two differing half-month payments totalling 1,550."""
    return (
        PaymentCycle(id="c1", amount=750.0, description="Primera quincena"),
        PaymentCycle(id="c2", amount=800.0, description="Segunda quincena"),
    )


# ---------------------------------------------------------------------------
# Income Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def weekly_wage() -> IncomeSource:
    """Simple weekly wage of 100 per week."""
    return IncomeSource(name="Turnos", frequency="weekly", amount=100, payment_pattern="simple")


@pytest.fixture
def seasonal_range() -> IncomeRange:
    """Seasonal income between 1,000 and 3,000."""
    return IncomeRange(lowest=1000, highest=3000)


@pytest.fixture
def income_records() -> list:
    """Three sources: a primary salary, a freelance range, an inactive side job."""
    return [
        IncomeSource.from_amount(
            "Trabajo principal", "monthly", 2500, is_primary=True, is_foundational=True
        ),
        IncomeSource.from_range(
            "Freelance", "monthly", "variable", IncomeRange(lowest=400, highest=1200)
        ),
        IncomeSource(name="Tienda", frequency="weekly", amount=50, is_active=False),
    ]


@pytest.fixture
def incomes_file(tmp_path):
    """JSON file holding two camelCase income records."""
    payload = {
        "schema_version": "0.1.0",
        "incomes": [
            {
                "name": "Trabajo principal",
                "frequency": "bi-weekly",
                "amount": 1000,
                "paymentStructure": "bi-weekly",
                "isPrimary": True,
            },
            {
                "name": "Clases",
                "frequency": "weekly",
                "amount": 100,
                "paymentPattern": "simple",
            },
        ],
    }
    path = tmp_path / "incomes.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f)
    return path
