"""Tests for fare module."""

from fractions import Fraction

import pytest

from subway.config import AgeDiscount, FarePolicy
from subway.fare.calculator import FareCalculator


@pytest.fixture
def calculator():
    return FareCalculator()


class TestDistanceFare:
    """Tests for the distance-based fare."""

    @pytest.mark.parametrize(
        "distance, expected",
        [
            (0, 1250),
            (8, 1250),
            (10, 1250),
            (11, 1350),
            (15, 1350),
            (16, 1450),
            (50, 2050),
            (51, 2150),
            (58, 2150),
            (59, 2250),
        ],
    )
    def test_distance_bands(self, calculator, distance, expected):
        assert calculator.distance_fare(distance) == expected

    def test_adult_fare_is_distance_fare(self, calculator):
        assert calculator.calculate(8) == 1250
        assert calculator.calculate(8, age=30) == 1250


class TestSurcharge:
    """Tests for the line surcharge."""

    def test_surcharge_added(self, calculator):
        assert calculator.calculate(9, 900, 30) == 2150

    def test_surcharge_then_rounding(self, calculator):
        assert calculator.calculate(8, 55, 30) == 1300

    def test_negative_inputs_rejected(self, calculator):
        with pytest.raises(ValueError):
            calculator.calculate(-1, 0, 30)
        with pytest.raises(ValueError):
            calculator.calculate(5, -100, 30)
        with pytest.raises(ValueError):
            calculator.calculate(5, 0, -1)


class TestAgeDiscount:
    """Tests for age discounts."""

    @pytest.mark.parametrize(
        "age, expected",
        [
            (5, 1250),
            (6, 800),
            (12, 800),
            (13, 1070),
            (18, 1070),
            (19, 1250),
            (65, 1250),
        ],
    )
    def test_discount_by_age(self, calculator, age, expected):
        assert calculator.calculate(8, 0, age) == expected

    def test_discount_applies_to_surcharge(self, calculator):
        # (2150 - 350) / 2 = 900 off
        assert calculator.calculate(9, 900, 10) == 1250
        # (2150 - 350) / 5 = 360 off
        assert calculator.calculate(9, 900, 15) == 1790

    def test_discounted_fare_rounded_down(self, calculator):
        # 1255 - (905 / 5 = 181) = 1074
        assert calculator.calculate(8, 5, 15) == 1070

    def test_breakdown(self, calculator):
        breakdown = calculator.breakdown(19, 900, 10)
        assert breakdown.distance_fare == 1450
        assert breakdown.surcharge == 900
        assert breakdown.discount == 1000
        assert breakdown.total_fare == 1350
        assert breakdown.age_discount.label == "child"

    def test_no_rule_outside_ranges(self, calculator):
        assert calculator.find_age_discount(40) is None
        assert calculator.breakdown(8, 0, 40).age_discount is None

    def test_first_matching_rule_wins(self):
        policy = FarePolicy(
            age_discounts=(
                AgeDiscount(0, 18, Fraction(1, 10), "first"),
                AgeDiscount(6, 12, Fraction(1, 2), "second"),
            )
        )
        calculator = FareCalculator(policy)
        assert calculator.find_age_discount(10).label == "first"
        # 1250 - 900 / 10 = 1160
        assert calculator.calculate(8, 0, 10) == 1160


class TestFarePolicy:
    """Tests for custom tariffs."""

    def test_custom_policy(self):
        policy = FarePolicy(
            base_fare=1000,
            first_threshold=5,
            first_increment_distance=1,
            first_increment_fare=50,
            age_discounts=(),
        )
        calculator = FareCalculator(policy)
        assert calculator.calculate(8, 0, 10) == 1150

    def test_custom_rounding_unit(self):
        calculator = FareCalculator(FarePolicy(rounding_unit=100))
        assert calculator.calculate(8, 55, 30) == 1300
        assert calculator.calculate(8, 0, 15) == 1000
