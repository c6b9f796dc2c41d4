"""Fare calculation from route distance, line surcharge and rider age."""

import math
from dataclasses import dataclass

from ..config import DEFAULT_FARE_POLICY, AgeDiscount, FarePolicy


@dataclass
class FareBreakdown:
    """Detailed breakdown of fare components."""

    distance_fare: int
    surcharge: int
    discount: int
    total_fare: int
    age_discount: AgeDiscount | None = None


class FareCalculator:
    """
    Calculates subway fares.

    The distance fare is the base fare up to the first threshold, plus one
    increment per started distance step beyond it (a longer step applies past
    the second threshold). The highest line surcharge of the route is added,
    then the age discount is taken off the part of the fare above the
    deduction base, and the result is rounded down to the rounding unit.
    """

    def __init__(self, policy: FarePolicy = DEFAULT_FARE_POLICY):
        self.policy = policy

    def calculate(self, distance: int, surcharge: int = 0, age: int | None = None) -> int:
        """Calculate the fare owed for a route."""
        return self.breakdown(distance, surcharge, age).total_fare

    def breakdown(
        self, distance: int, surcharge: int = 0, age: int | None = None
    ) -> FareBreakdown:
        """Calculate the fare with each of its components."""
        if distance < 0:
            raise ValueError("Distance must be non-negative")
        if surcharge < 0:
            raise ValueError("Surcharge must be non-negative")
        if age is not None and age < 0:
            raise ValueError("Age must be non-negative")

        distance_fare = self.distance_fare(distance)
        fare = distance_fare + surcharge

        rule = self.find_age_discount(age) if age is not None else None
        discount = 0
        if rule is not None:
            discount = math.floor(max(fare - self.policy.deduction_base, 0) * rule.rate)

        unit = self.policy.rounding_unit
        total_fare = (fare - discount) // unit * unit

        return FareBreakdown(
            distance_fare=distance_fare,
            surcharge=surcharge,
            discount=discount,
            total_fare=total_fare,
            age_discount=rule,
        )

    def distance_fare(self, distance: int) -> int:
        """Distance-based fare, before surcharge and discount."""
        policy = self.policy
        fare = policy.base_fare

        first_band = min(distance, policy.second_threshold) - policy.first_threshold
        if first_band > 0:
            steps = math.ceil(first_band / policy.first_increment_distance)
            fare += steps * policy.first_increment_fare

        second_band = distance - policy.second_threshold
        if second_band > 0:
            steps = math.ceil(second_band / policy.second_increment_distance)
            fare += steps * policy.second_increment_fare

        return fare

    def find_age_discount(self, age: int) -> AgeDiscount | None:
        """First discount rule matching the age, or None."""
        for rule in self.policy.age_discounts:
            if rule.matches(age):
                return rule
        return None
