"""
Fare Policies  (Strategy Pattern)
=================================

A trip's fare is computed exactly once, when the registry creates the
trip, by the registry's ``FarePolicy``.  The only policy shipped is a flat
fare; distance- or demand-based policies plug in by implementing
``FarePolicy.calculate``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class FarePolicy(ABC):
    @abstractmethod
    def calculate(self, start_location: str, destination: str) -> float: ...


class FixedFare(FarePolicy):
    """Every trip costs the same regardless of route."""

    def __init__(self, amount: float = 25.0):
        if amount < 0:
            raise ValueError("Fare amount must not be negative")
        self.amount = round(amount, 2)

    def calculate(self, start_location: str, destination: str) -> float:
        return self.amount


def format_fare(amount: float, currency_symbol: str = "$") -> str:
    """Render *amount* as currency, e.g. ``$25.00``."""
    return f"{currency_symbol}{amount:,.2f}"
