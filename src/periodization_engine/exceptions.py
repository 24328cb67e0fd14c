"""Exception hierarchy for the periodization engine.

Only configuration problems raise. Numeric calculators return sentinel
zeros and planning gaps are logged, so a partial plan is still a plan.
"""

from __future__ import annotations


class PeriodizationError(Exception):
    """Base exception for all periodization_engine errors."""


class ConfigurationError(PeriodizationError, ValueError):
    """A MesocycleConfig failed boundary validation."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__("; ".join(problems))
        self.problems = list(problems)
