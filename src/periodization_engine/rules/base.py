"""Abstract base class and evaluation context for progression rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from periodization_engine.models.enums import (
    COMPOUND_LOAD_INCREMENT_KG,
    DEFAULT_LOGGED_RIR,
    ISOLATION_LOAD_INCREMENT_KG,
    MAX_RPE,
)
from periodization_engine.models.strength import (
    ExercisePerformance,
    ProgressionResult,
    SetPerformance,
)


@dataclass(frozen=True)
class ProgressionContext:
    """Everything a progression rule may look at for one exercise.

    Averages are computed once over the working sets. Sets logged without
    reserve reps count as RIR 2.
    """

    performance: ExercisePerformance
    current_weight: float
    is_compound: bool = True

    @property
    def working_sets(self) -> tuple[SetPerformance, ...]:
        return self.performance.working_sets

    @property
    def increment(self) -> float:
        return COMPOUND_LOAD_INCREMENT_KG if self.is_compound else ISOLATION_LOAD_INCREMENT_KG

    @property
    def reps(self) -> np.ndarray:
        return np.array([s.reps for s in self.working_sets], dtype=float)

    @property
    def reserve_reps(self) -> np.ndarray:
        return np.array(
            [DEFAULT_LOGGED_RIR if s.rir is None else s.rir for s in self.working_sets],
            dtype=float,
        )

    @property
    def avg_reps(self) -> float:
        if not self.working_sets:
            return 0.0
        return float(np.mean(self.reps))

    @property
    def avg_rir(self) -> float:
        if not self.working_sets:
            return float(DEFAULT_LOGGED_RIR)
        return float(np.mean(self.reserve_reps))

    @property
    def avg_rpe(self) -> float:
        return MAX_RPE - self.avg_rir


class ProgressionRule(ABC):
    """One step of the next-session progression cascade.

    Rules are evaluated in ascending ``order``; the first rule that returns
    a result decides. A rule returns None when it does not apply so later
    rules can cover the residual cases.

    Subclasses must define:
        rule_id: unique identifier (e.g. "top_of_range")
        version: semantic version string
        order: position in the cascade (lower runs first)
        evaluate(): the rule's decision logic
    """

    rule_id: str
    version: str
    order: int

    @abstractmethod
    def evaluate(self, context: ProgressionContext) -> ProgressionResult | None:
        """Evaluate this rule against one exercise's logged performance."""
        ...
