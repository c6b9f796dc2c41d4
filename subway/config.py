"""
Subway Path - Configuration
===========================
Paths, environment settings and the fare tariff.
"""

import os
from dataclasses import dataclass, field
from fractions import Fraction
from pathlib import Path

# ============================================================================
# PATHS
# ============================================================================
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
LINES_FILE = Path(os.getenv("SUBWAY_LINES_FILE", DATA_DIR / "lines.csv"))

LOG_LEVEL = os.getenv("SUBWAY_LOG_LEVEL", "WARNING").upper()

# ============================================================================
# FARE TARIFF
# ============================================================================
BASE_FARE = 1250

FIRST_THRESHOLD_KM = 10
SECOND_THRESHOLD_KM = 50
FIRST_INCREMENT_KM = 5
SECOND_INCREMENT_KM = 8
FIRST_INCREMENT_FARE = 100
SECOND_INCREMENT_FARE = 100

# Age discounts apply to the part of the fare above this amount
DEDUCTION_BASE = 350
ROUNDING_UNIT = 10


@dataclass(frozen=True)
class AgeDiscount:
    """Discount rate for riders aged min_age..max_age (inclusive)."""

    min_age: int
    max_age: int
    rate: Fraction
    label: str = ""

    def matches(self, age: int) -> bool:
        return self.min_age <= age <= self.max_age


# Evaluated top-down, first match wins
AGE_DISCOUNTS = (
    AgeDiscount(6, 12, Fraction(1, 2), "child"),
    AgeDiscount(13, 18, Fraction(1, 5), "teenager"),
)


@dataclass(frozen=True)
class FarePolicy:
    """Tariff used by the fare calculator."""

    base_fare: int = BASE_FARE
    first_threshold: int = FIRST_THRESHOLD_KM
    second_threshold: int = SECOND_THRESHOLD_KM
    first_increment_distance: int = FIRST_INCREMENT_KM
    second_increment_distance: int = SECOND_INCREMENT_KM
    first_increment_fare: int = FIRST_INCREMENT_FARE
    second_increment_fare: int = SECOND_INCREMENT_FARE
    deduction_base: int = DEDUCTION_BASE
    rounding_unit: int = ROUNDING_UNIT
    age_discounts: tuple[AgeDiscount, ...] = field(default=AGE_DISCOUNTS)


DEFAULT_FARE_POLICY = FarePolicy()
