"""Unit tests for billing strategies."""

from decimal import Decimal

import pytest

from smartcare_billing.billing.strategies import (
    STRATEGY_CALCULATORS,
    BillingStrategy,
    apply_strategy,
    corporate_insurance,
    normal_billing,
    senior_citizen_discount,
)


class TestStrategyCalculators:
    """Test the pure strategy functions."""

    @pytest.mark.parametrize("base", ["0", "0.01", "100.00", "600.00", "12345.67"])
    def test_normal_is_identity(self, base):
        assert normal_billing(Decimal(base)) == Decimal(base)

    @pytest.mark.parametrize("base", ["0", "0.01", "100.00", "600.00", "12345.67"])
    def test_corporate_insurance_is_seventy_percent(self, base):
        assert corporate_insurance(Decimal(base)) == Decimal(base) * Decimal("0.70")

    @pytest.mark.parametrize("base", ["0", "0.01", "100.00", "600.00", "12345.67"])
    def test_senior_citizen_is_eighty_five_percent(self, base):
        assert senior_citizen_discount(Decimal(base)) == Decimal(base) * Decimal("0.85")

    def test_every_strategy_has_a_calculator(self):
        """Test the lookup table covers the closed set of strategies."""
        assert set(STRATEGY_CALCULATORS) == set(BillingStrategy)


class TestFromCode:
    """Test menu code resolution."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("1", BillingStrategy.NORMAL),
            ("2", BillingStrategy.CORPORATE_INSURANCE),
            ("3", BillingStrategy.SENIOR_CITIZEN),
        ],
    )
    def test_known_codes(self, code, expected):
        assert BillingStrategy.from_code(code) is expected

    @pytest.mark.parametrize("code", ["", "9", "0", "abc", "22", " 2", "3 ", None])
    def test_unrecognized_codes_fall_back_to_normal(self, code):
        """Test unrecognized input silently selects normal billing."""
        assert BillingStrategy.from_code(code) is BillingStrategy.NORMAL


class TestApplyStrategy:
    """Test strategy application on a base charge of 100.00."""

    @pytest.mark.parametrize(
        "code,expected",
        [("2", Decimal("70.00")), ("3", Decimal("85.00")), ("9", Decimal("100.00"))],
    )
    def test_codes_on_one_hundred(self, code, expected):
        # Arrange
        strategy = BillingStrategy.from_code(code)

        # Act
        final = apply_strategy(strategy, Decimal("100.00"))

        # Assert
        assert final == expected

    def test_inpatient_corporate_example(self):
        """Test 600.00 with corporate insurance is 420.00."""
        assert apply_strategy(
            BillingStrategy.CORPORATE_INSURANCE, Decimal("600.00")
        ) == Decimal("420.00")


class TestFromName:
    """Test CLI name resolution."""

    def test_name_is_case_insensitive(self):
        assert BillingStrategy.from_name("Senior-Citizen") is BillingStrategy.SENIOR_CITIZEN

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown billing strategy"):
            BillingStrategy.from_name("platinum")

    def test_display_names(self):
        assert BillingStrategy.NORMAL.display_name == "Normal"
        assert BillingStrategy.CORPORATE_INSURANCE.display_name == "Corporate Insurance"
        assert BillingStrategy.SENIOR_CITIZEN.display_name == "Senior Citizen Discount"
