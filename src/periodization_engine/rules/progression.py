"""Double progression with RPE autoregulation, as an ordered rule list.

1. Double progression: add reps inside the target range, then add load once
   every working set reaches the top of the range near failure.
2. RPE adjustment: cut load when sessions feel much harder than prescribed,
   add load when they feel much easier and reps are near the ceiling.

References:
    Helms et al. (2018). RPE vs. percentage 1RM loading in periodized
        programs matched for sets and repetitions. Front Physiol 9:247.
    Israetel, Hoffmann & Smith (2021). Scientific Principles of
        Hypertrophy Training, ch. 6 (load progression).
"""

from __future__ import annotations

from periodization_engine.math.rounding import round_to_increment
from periodization_engine.models.enums import (
    RPE_OVERSHOOT_LOAD_FRACTION,
    RPE_OVERSHOOT_TOLERANCE,
    RPE_UNDERSHOOT_TOLERANCE,
    TOP_OF_RANGE_MAX_RIR,
    Confidence,
    ProgressionAction,
)
from periodization_engine.models.strength import ProgressionResult
from periodization_engine.rules.base import ProgressionContext, ProgressionRule


class NoWorkingSetsRule(ProgressionRule):
    """Nothing to judge: hold the current load."""

    rule_id = "no_working_sets"
    version = "1.0.0"
    order = 1

    def evaluate(self, context: ProgressionContext) -> ProgressionResult | None:
        if context.working_sets:
            return None
        return ProgressionResult(
            action=ProgressionAction.MAINTAIN,
            next_weight=context.current_weight,
            reason="No working sets logged",
            confidence=Confidence.LOW,
            rule_id=self.rule_id,
        )


class TopOfRangeRule(ProgressionRule):
    """Every working set hit the rep ceiling at ≤1 RIR: add one increment."""

    rule_id = "top_of_range"
    version = "1.0.0"
    order = 2

    def evaluate(self, context: ProgressionContext) -> ProgressionResult | None:
        ceiling = context.performance.rep_range_max
        hit = (context.reps >= ceiling) & (context.reserve_reps <= TOP_OF_RANGE_MAX_RIR)
        if not hit.all():
            return None
        return ProgressionResult(
            action=ProgressionAction.INCREASE_WEIGHT,
            next_weight=round_to_increment(
                context.current_weight + context.increment, context.increment
            ),
            reason=(
                f"All sets hit {ceiling} reps with {context.avg_rir:.1f} RIR average"
            ),
            confidence=Confidence.HIGH,
            rule_id=self.rule_id,
        )


class FailedSetsRule(ProgressionRule):
    """At least half the working sets fell short of the rep floor."""

    rule_id = "failed_sets"
    version = "1.0.0"
    order = 3

    def evaluate(self, context: ProgressionContext) -> ProgressionResult | None:
        total = len(context.working_sets)
        failed = int((context.reps < context.performance.rep_range_min).sum())
        if failed == 0 or failed < total / 2:
            return None
        return ProgressionResult(
            action=ProgressionAction.DECREASE_WEIGHT,
            next_weight=round_to_increment(
                context.current_weight - context.increment, context.increment
            ),
            reason=f"{failed}/{total} sets below target range",
            confidence=Confidence.HIGH,
            rule_id=self.rule_id,
        )


class RPEOvershootRule(ProgressionRule):
    """Average RPE more than 1 above target: cut load to ~95%."""

    rule_id = "rpe_overshoot"
    version = "1.0.0"
    order = 4

    def evaluate(self, context: ProgressionContext) -> ProgressionResult | None:
        target = context.performance.target_rpe
        if context.avg_rpe - target <= RPE_OVERSHOOT_TOLERANCE:
            return None
        return ProgressionResult(
            action=ProgressionAction.DECREASE_WEIGHT,
            next_weight=round_to_increment(
                context.current_weight * RPE_OVERSHOOT_LOAD_FRACTION, context.increment
            ),
            reason=f"RPE {context.avg_rpe:.1f} vs target {target} - too hard",
            confidence=Confidence.MEDIUM,
            rule_id=self.rule_id,
        )


class RPEUndershootRule(ProgressionRule):
    """Average RPE well below target with reps near the ceiling: add load."""

    rule_id = "rpe_undershoot"
    version = "1.0.0"
    order = 5

    def evaluate(self, context: ProgressionContext) -> ProgressionResult | None:
        target = context.performance.target_rpe
        near_ceiling = context.avg_reps >= context.performance.rep_range_max - 1
        if context.avg_rpe - target >= -RPE_UNDERSHOOT_TOLERANCE or not near_ceiling:
            return None
        return ProgressionResult(
            action=ProgressionAction.INCREASE_WEIGHT,
            next_weight=round_to_increment(
                context.current_weight + context.increment, context.increment
            ),
            reason=f"RPE {context.avg_rpe:.1f} well below target {target}",
            confidence=Confidence.MEDIUM,
            rule_id=self.rule_id,
        )


class RepProgressionRule(ProgressionRule):
    """Still below the rep ceiling: keep the load and chase reps."""

    rule_id = "rep_progression"
    version = "1.0.0"
    order = 6

    def evaluate(self, context: ProgressionContext) -> ProgressionResult | None:
        ceiling = context.performance.rep_range_max
        if context.avg_reps >= ceiling:
            return None
        return ProgressionResult(
            action=ProgressionAction.INCREASE_REPS,
            next_weight=context.current_weight,
            reason=(
                f"Avg {context.avg_reps:.1f} reps - aim for {ceiling} before adding weight"
            ),
            confidence=Confidence.HIGH,
            rule_id=self.rule_id,
        )


class MaintainRule(ProgressionRule):
    """Catch-all: performance on track."""

    rule_id = "maintain"
    version = "1.0.0"
    order = 7

    def evaluate(self, context: ProgressionContext) -> ProgressionResult | None:
        return ProgressionResult(
            action=ProgressionAction.MAINTAIN,
            next_weight=context.current_weight,
            reason="Performance on track - continue current progression",
            confidence=Confidence.MEDIUM,
            rule_id=self.rule_id,
        )


DEFAULT_PROGRESSION_RULES: tuple[ProgressionRule, ...] = (
    NoWorkingSetsRule(),
    TopOfRangeRule(),
    FailedSetsRule(),
    RPEOvershootRule(),
    RPEUndershootRule(),
    RepProgressionRule(),
    MaintainRule(),
)
