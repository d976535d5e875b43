"""
Unit tests for config.py Pydantic models.

Tests validation, aliases and conversion of input models, and AppSettings.
"""

import pytest
from pydantic import ValidationError

from incomenorm.config import (
    AppSettings,
    IncomeRangeConfig,
    IncomeSourceConfig,
    PaymentCycleConfig,
    PaymentScheduleConfig,
)
from incomenorm.income import CycleListStrategy, StructureStrategy, monthly_income


class TestPaymentCycleConfig:
    """Tests for PaymentCycleConfig."""

    def test_generates_missing_id(self):
        cycle = PaymentCycleConfig(amount=500, description="Semana 1").to_cycle()
        assert cycle.id.startswith("cycle_")

    def test_keeps_given_id(self):
        assert PaymentCycleConfig(id="abc", amount=1).to_cycle().id == "abc"

    def test_unfinished_amount_accepted(self):
        cycle = PaymentCycleConfig(id="a", amount=-1).to_cycle()
        assert cycle.amount == -1

    def test_non_numeric_amount_rejected(self):
        with pytest.raises(ValidationError):
            PaymentCycleConfig(amount="mucho")


class TestIncomeRangeConfig:
    """Tests for IncomeRangeConfig."""

    def test_camel_case_alias(self):
        cfg = IncomeRangeConfig.model_validate({"lowest": 1, "highest": 2, "averageLow": 1.2})
        assert cfg.to_range().average_low == 1.2

    def test_extra_keys_forbidden(self):
        with pytest.raises(ValidationError):
            IncomeRangeConfig.model_validate({"lowest": 1, "median": 2})


class TestPaymentScheduleConfig:
    """Tests for PaymentScheduleConfig."""

    def test_fixed_dates(self):
        schedule = PaymentScheduleConfig(type="fixed-dates", dates=[1, 15]).to_schedule()
        assert schedule.dates == (1, 15)

    def test_dates_out_of_range(self):
        with pytest.raises(ValidationError, match="1..31"):
            PaymentScheduleConfig(type="fixed-dates", dates=[0])

    def test_unknown_pattern(self):
        with pytest.raises(ValidationError):
            PaymentScheduleConfig(type="day-pattern", pattern="every-monday")


class TestIncomeSourceConfig:
    """Tests for IncomeSourceConfig."""

    def test_minimal(self):
        income = IncomeSourceConfig(name="Trabajo", frequency="monthly", amount=2000).to_income()
        assert income.payment_pattern == "simple"
        assert income.is_active is True
        assert monthly_income(income) == 2000

    def test_structure_resolved_from_catalog(self):
        cfg = IncomeSourceConfig.model_validate(
            {"name": "T", "frequency": "bi-weekly", "baseAmount": 1000, "paymentStructure": "bi-weekly"}
        )
        income = cfg.to_income()
        assert isinstance(income.strategy, StructureStrategy)
        assert income.payment_structure.payments_per_period == 26
        assert monthly_income(income) == pytest.approx(2166.67, abs=0.01)

    def test_complex_with_cycles(self):
        cfg = IncomeSourceConfig.model_validate({
            "name": "T",
            "frequency": "monthly",
            "paymentPattern": "complex",
            "cycles": [{"amount": 700, "description": "A"}, {"amount": 300, "description": "B"}],
        })
        income = cfg.to_income()
        assert isinstance(income.strategy, CycleListStrategy)
        assert monthly_income(income) == 1000

    def test_unknown_frequency_accepted(self):
        income = IncomeSourceConfig(name="T", frequency="daily", amount=10).to_income()
        assert monthly_income(income) == 0

    def test_unknown_structure_rejected(self):
        with pytest.raises(ValidationError):
            IncomeSourceConfig.model_validate({"name": "T", "frequency": "monthly", "paymentStructure": "daily"})

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            IncomeSourceConfig.model_validate({"name": "T", "frequency": "monthly", "salary": 5})

    def test_invalid_stability_rejected(self):
        with pytest.raises(ValidationError):
            IncomeSourceConfig(name="T", frequency="monthly", stability_pattern="chaotic")

    def test_immutable(self):
        cfg = IncomeSourceConfig(name="T", frequency="monthly")
        with pytest.raises(Exception):
            cfg.amount = 5


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("INCOMENORM_LOG_LEVEL", raising=False)
        monkeypatch.delenv("INCOMENORM_DEBUG", raising=False)
        settings = AppSettings(_env_file=None)
        assert settings.debug is False
        assert settings.log_level == "WARNING"
        assert settings.currency_symbol == "$"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("INCOMENORM_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("INCOMENORM_CURRENCY_SYMBOL", "₡")
        settings = AppSettings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.currency_symbol == "₡"

    def test_invalid_level(self, monkeypatch):
        monkeypatch.setenv("INCOMENORM_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)
