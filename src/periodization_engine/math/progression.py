"""Next-session load progression and related autoregulation helpers.

References:
    Helms et al. (2016). Application of the repetitions in reserve-based
        rating of perceived exertion scale for resistance training.
        Strength Cond J 38(4):42-49.
    Israetel, Hoffmann & Smith (2021). Scientific Principles of
        Hypertrophy Training.
"""

from __future__ import annotations

from dataclasses import dataclass

from periodization_engine.math.rounding import round_to_increment
from periodization_engine.models.enums import (
    COMPOUND_LOAD_INCREMENT_KG,
    ISOLATION_LOAD_INCREMENT_KG,
)
from periodization_engine.models.strength import ExercisePerformance, ProgressionResult
from periodization_engine.registry import RuleRegistry
from periodization_engine.rules.base import ProgressionContext

# Starting-load table for a brand-new exercise (%TM by RPE)
_STARTING_WEIGHT_PERCENTAGE: dict[float, float] = {
    6.0: 0.60,
    7.0: 0.70,
    7.5: 0.75,
    8.0: 0.80,
    8.5: 0.85,
    9.0: 0.90,
    9.5: 0.95,
    10.0: 1.00,
}
_DEFAULT_STARTING_PERCENTAGE = 0.75

# Relative intensity (%TM) ramps across the loading weeks, deload drops it
_BASE_WEEKLY_INTENSITY = 0.70
_PEAK_WEEKLY_INTENSITY = 0.85
_DELOAD_WEEKLY_INTENSITY = 0.60

_DEFAULT_REGISTRY = RuleRegistry.default()


def recommend_progression(
    performance: ExercisePerformance,
    current_weight: float,
    is_compound: bool = True,
    registry: RuleRegistry | None = None,
) -> ProgressionResult:
    """Recommend the next-session load for one exercise.

    Rules are evaluated in cascade order and the first one that applies
    decides; see ``periodization_engine.rules.progression`` for the list.

    Args:
        performance: Sets logged for this exercise plus the prescription.
        current_weight: Load used this session (kg).
        is_compound: Compound lifts move in 2.5 kg steps, others 1.25 kg.
        registry: Alternative rule set (tests, experiments).

    Returns:
        ProgressionResult naming the rule that decided.
    """
    context = ProgressionContext(
        performance=performance,
        current_weight=current_weight,
        is_compound=is_compound,
    )
    rules = (registry or _DEFAULT_REGISTRY).get_all_rules()
    for rule in rules:
        result = rule.evaluate(context)
        if result is not None:
            return result
    raise LookupError("progression rule set has no catch-all rule")


def suggested_starting_weight(
    training_max_kg: float | None, target_rpe: float, is_compound: bool = True
) -> float:
    """First-session load for an exercise with a known training max (0 if unknown)."""
    if not training_max_kg or training_max_kg <= 0:
        return 0.0
    percentage = _STARTING_WEIGHT_PERCENTAGE.get(float(target_rpe), _DEFAULT_STARTING_PERCENTAGE)
    increment = COMPOUND_LOAD_INCREMENT_KG if is_compound else ISOLATION_LOAD_INCREMENT_KG
    return round_to_increment(training_max_kg * percentage, increment)


def weekly_intensity_modifier(week_number: int, total_weeks: int = 5) -> float:
    """Fraction of TM for a mesocycle week: 0.70 → 0.85, deload 0.60."""
    if week_number >= total_weeks:
        return _DELOAD_WEEKLY_INTENSITY
    if total_weeks <= 2:
        return _BASE_WEEKLY_INTENSITY
    progress = (week_number - 1) / (total_weeks - 2)
    return _BASE_WEEKLY_INTENSITY + progress * (_PEAK_WEEKLY_INTENSITY - _BASE_WEEKLY_INTENSITY)


@dataclass(frozen=True)
class PRCheck:
    is_pr: bool
    improvement: float


def check_for_pr(current_e1rm: float, previous_best_e1rm: float | None) -> PRCheck:
    """Compare a new E1RM against the best on record. The first record is always a PR."""
    if not previous_best_e1rm or previous_best_e1rm <= 0:
        return PRCheck(is_pr=True, improvement=0.0)
    return PRCheck(
        is_pr=current_e1rm > previous_best_e1rm,
        improvement=current_e1rm - previous_best_e1rm,
    )


def fatigue_accumulation(
    week_number: int,
    total_weeks: int,
    completed_sessions: int,
    planned_sessions: int,
) -> float:
    """Accumulated fatigue factor (0-1) scaled by session compliance."""
    if total_weeks <= 1:
        return 0.0
    weekly = (week_number - 1) / (total_weeks - 1)
    compliance = completed_sessions / planned_sessions if planned_sessions > 0 else 1.0
    return weekly * compliance


def in_session_autoregulation(
    performed_rpe: float, target_rpe: float, exercises_remaining: int
) -> float:
    """Volume multiplier for the rest of a session given how hard it is going.

    Returns < 1 when running hot (more than 0.5 RPE over target), 1.05 when
    well under target with more than two exercises left, else 1.0.
    """
    diff = performed_rpe - target_rpe
    if diff > 0.5 and exercises_remaining > 0:
        return 0.90 + 0.10 / exercises_remaining
    if diff < -1 and exercises_remaining > 2:
        return 1.05
    return 1.0
