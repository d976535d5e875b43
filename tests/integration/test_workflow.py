"""
Integration tests for the income onboarding workflows.

Each test walks one entry path end to end: collect the user's inputs, build
the income record, compute its monthly figure, persist it and recompute from
disk.
"""

import pytest
from click.testing import CliRunner

from incomenorm.cli import main
from incomenorm.cycles import default_cycles, update_cycle, validate_cycles
from incomenorm.income import (
    IncomeSource,
    annual_income,
    income_preview_text,
    monthly_income,
    summarize_incomes,
    total_income,
)
from incomenorm.preview import schedule_preview
from incomenorm.serialization import load_incomes, save_incomes
from incomenorm.stability import IncomeRange, validate_income_range
from incomenorm.structures import (
    amount_labels,
    schedule_options_for,
    schedule_summary,
    structure_for,
)


@pytest.mark.integration
class TestOnboardingWorkflow:
    """End-to-end flows for the three entry paths."""

    def test_structure_path(self, tmp_path):
        """
        Bi-monthly salary: pick the structure and a schedule, enter the two
        amounts, preview, then compute and persist.
        """
        structure = structure_for("bi-monthly")
        assert amount_labels(structure) == ("Primer pago (1-15)", "Segundo pago (16-31)")

        schedule = schedule_options_for(structure)[0]
        assert schedule_summary(schedule) == "Días 1 y 15 de cada mes"

        months = schedule_preview(structure, [1200, 900])
        assert [m.total for m in months] == [2100, 2100, 2100]

        income = IncomeSource(
            name="Salario",
            frequency="monthly",
            amount=2100,
            payment_structure=structure,
            payment_schedule=schedule,
            is_primary=True,
        )
        assert monthly_income(income) == 2100
        assert annual_income(income) == 25200

        path = tmp_path / "incomes.json"
        save_incomes(path, [income])
        restored = load_incomes(path)[0]
        assert restored.payment_schedule == schedule
        assert monthly_income(restored) == 2100

    def test_range_path(self):
        """Seasonal worker: validate the range, then use the conservative base."""
        incomplete = IncomeRange(lowest=1000)
        assert validate_income_range(incomplete) == ["Ingresa tu ingreso más alto."]

        reported = IncomeRange(lowest=1000, highest=3000)
        assert validate_income_range(reported) == []

        income = IncomeSource.from_range("Temporada", "monthly", "seasonal", reported)
        assert monthly_income(income) == pytest.approx(1800)
        assert income_preview_text(income) == "mensual fijo → $1,800/mes"

    def test_cycle_path(self):
        """Two differing half-month payments entered as cycles."""
        cycles = default_cycles("bi-weekly", 1000)
        cycles = update_cycle(cycles, 1, amount=1200)
        assert validate_cycles(cycles, "bi-weekly") == []

        income = IncomeSource.from_cycles("Quincenas", "bi-weekly", cycles)
        assert monthly_income(income) == pytest.approx(2200 * (26 / 12) / 2)

    def test_household_totals_from_cli(self, tmp_path, monkeypatch):
        """Mixed records saved to disk and recomputed through the CLI."""
        monkeypatch.delenv("INCOMENORM_CURRENCY_SYMBOL", raising=False)
        incomes = [
            IncomeSource.from_amount("Trabajo", "bi-weekly", 1000, is_primary=True),
            IncomeSource.from_range("Freelance", "monthly", "variable", IncomeRange(400, 1200)),
            IncomeSource(name="Antiguo", frequency="weekly", amount=80, is_active=False),
        ]
        summary = summarize_incomes(incomes)
        assert summary.total_monthly == pytest.approx(2170 + 400)
        assert summary.primary_share == pytest.approx(2170 / 2570)

        path = tmp_path / "household.json"
        save_incomes(path, incomes)

        result = CliRunner().invoke(main, ["-q", "monthly", "-f", str(path)])
        assert result.exit_code == 0
        assert "Total monthly: $2,570.00" in result.output
        assert total_income(load_incomes(path)) == pytest.approx(2570)
