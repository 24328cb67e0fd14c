"""Ordered registry of progression rules."""

from __future__ import annotations

from typing import Iterable

from periodization_engine.rules.base import ProgressionRule
from periodization_engine.rules.progression import DEFAULT_PROGRESSION_RULES


class RuleRegistry:
    """Holds the progression cascade, keyed by rule_id and sorted by order.

    The default cascade is registered explicitly rather than discovered, so
    precedence is visible in one place and tests can build a registry from
    a subset of rules.
    """

    def __init__(self, rules: Iterable[ProgressionRule] = ()) -> None:
        self._rules: dict[str, ProgressionRule] = {}
        for rule in rules:
            self.register(rule)

    @classmethod
    def default(cls) -> RuleRegistry:
        return cls(DEFAULT_PROGRESSION_RULES)

    def register(self, rule: ProgressionRule) -> None:
        """Register a rule instance by its rule_id (replaces an existing id)."""
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> ProgressionRule | None:
        """Retrieve a rule by its rule_id."""
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[ProgressionRule]:
        """Return all registered rules in cascade order (lowest order first)."""
        return sorted(self._rules.values(), key=lambda r: r.order)

    @property
    def rule_ids(self) -> list[str]:
        """Rule ids in cascade order."""
        return [rule.rule_id for rule in self.get_all_rules()]
