"""
Unit tests for structures.py module.

Tests the payment structure and schedule catalogs.
"""

import pytest

from incomenorm.exceptions import ConfigurationError
from incomenorm.structures import (
    STRUCTURE_TYPES,
    PaymentSchedule,
    PaymentStructure,
    amount_labels,
    max_payments,
    payments_per_year_text,
    schedule_options_for,
    schedule_summary,
    structure_details,
    structure_for,
    structure_options,
)


# ============================================================================
# STRUCTURE CATALOG TESTS
# ============================================================================

class TestStructureCatalog:
    """Test structure_options() and structure_for()."""

    def test_all_types_present_in_order(self):
        types = [s.type for s in structure_options()]
        assert types == ["monthly", "bi-monthly", "bi-weekly", "weekly", "quarterly", "irregular"]
        assert STRUCTURE_TYPES == tuple(types)

    @pytest.mark.parametrize(
        "structure_type, per_period, period",
        [
            ("monthly", 1, "month"),
            ("bi-monthly", 2, "month"),
            ("bi-weekly", 26, "year"),
            ("weekly", 52, "year"),
            ("irregular", 12, "year"),
        ],
    )
    def test_cardinality_is_fixed_per_type(self, structure_type, per_period, period):
        structure = structure_for(structure_type)
        assert structure.payments_per_period == per_period
        assert structure.period == period

    def test_payments_per_year(self):
        assert structure_for("monthly").payments_per_year == 12
        assert structure_for("bi-monthly").payments_per_year == 24
        assert structure_for("bi-weekly").payments_per_year == 26
        assert structure_for("quarterly").payments_per_year == 4

    def test_selection_returns_catalog_value(self):
        assert structure_for("weekly") is structure_for("weekly")

    def test_unknown_type_raises(self):
        with pytest.raises(ConfigurationError, match="fortnightly"):
            structure_for("fortnightly")

    def test_structures_are_immutable(self):
        structure = structure_for("monthly")
        with pytest.raises(Exception):
            structure.payments_per_period = 3


class TestStructureMetadata:
    """Test descriptive metadata and amount-entry helpers."""

    def test_payments_per_year_text(self):
        assert payments_per_year_text(structure_for("bi-weekly")) == "26 pagos al año"
        assert payments_per_year_text(structure_for("irregular")) == "Varía"

    def test_uncatalogued_structure_has_empty_details(self):
        custom = PaymentStructure("daily", 365, "year", "Cada día")
        details = structure_details(custom)
        assert details.examples == ""
        assert details.explanation == ""

    def test_bimonthly_accepts_two_amounts(self):
        structure = structure_for("bi-monthly")
        assert max_payments(structure) == 2
        assert amount_labels(structure) == ("Primer pago (1-15)", "Segundo pago (16-31)")

    def test_other_structures_accept_one_amount(self):
        for structure_type in ("monthly", "bi-weekly", "weekly", "quarterly", "irregular"):
            assert max_payments(structure_for(structure_type)) == 1


# ============================================================================
# SCHEDULE CATALOG TESTS
# ============================================================================

class TestScheduleCatalog:
    """Test schedule_options_for()."""

    def test_monthly_options(self):
        options = schedule_options_for(structure_for("monthly"))
        assert len(options) == 4
        assert options[0].type == "fixed-dates"
        assert options[0].dates == (30,)
        assert options[-1].pattern == "last-friday"

    def test_bimonthly_fixed_dates_are_ordered_pairs(self):
        options = schedule_options_for(structure_for("bi-monthly"))
        fixed = [o for o in options if o.type == "fixed-dates"]
        assert [o.dates for o in fixed] == [(1, 15), (15, 30), (10, 25)]

    def test_weekly_every_friday(self):
        options = schedule_options_for(structure_for("weekly"))
        assert [o.pattern for o in options] == ["every-friday"]

    @pytest.mark.parametrize("structure_type", ["quarterly", "irregular"])
    def test_custom_only_for_uncalendared_structures(self, structure_type):
        options = schedule_options_for(structure_for(structure_type))
        assert len(options) == 1
        assert options[0].type == "custom"
        assert options[0].dates is None
        assert options[0].pattern is None

    def test_schedule_dates_must_be_days_of_month(self):
        with pytest.raises(ValueError, match="1..31"):
            PaymentSchedule("fixed-dates", "bad", dates=(0, 15))
        with pytest.raises(ValueError):
            PaymentSchedule("fixed-dates", "bad", dates=(32,))


class TestScheduleSummary:
    """Test schedule_summary()."""

    def test_single_date(self):
        assert schedule_summary(PaymentSchedule("fixed-dates", "x", dates=(15,))) == "Día 15 de cada mes"

    def test_last_day_of_month(self):
        summary = schedule_summary(PaymentSchedule("fixed-dates", "x", dates=(30,)))
        assert "último día" in summary

    def test_two_dates(self):
        summary = schedule_summary(PaymentSchedule("fixed-dates", "x", dates=(10, 25)))
        assert summary == "Días 10 y 25 de cada mes"

    def test_day_pattern(self):
        summary = schedule_summary(PaymentSchedule("day-pattern", "x", pattern="every-friday"))
        assert summary == "Viernes de cada semana"

    def test_custom_falls_back_to_description(self):
        schedule = PaymentSchedule("custom", "Fechas personalizadas")
        assert schedule_summary(schedule) == "Fechas personalizadas"
