"""Fare module for pricing subway routes."""

from .calculator import FareBreakdown, FareCalculator

__all__ = ["FareCalculator", "FareBreakdown"]
