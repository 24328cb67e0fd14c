"""Training max (TM) derivation and RPE-based load prescription.

The training max is a deliberately submaximal fraction of E1RM (85-90%)
used as the base for working weights, leaving a buffer for consistent
progress.

References:
    Wendler (2011). 5/3/1: The Simplest and Most Effective Training System
        for Raw Strength, 2nd ed.
    Zourdos et al. (2016). Novel resistance training-specific rating of
        perceived exertion scale measuring repetitions in reserve.
        J Strength Cond Res 30(1):267-275.
"""

from __future__ import annotations

from dataclasses import dataclass

from periodization_engine.math.e1rm import estimate_one_rep_max
from periodization_engine.math.rounding import round_to_increment
from periodization_engine.models.enums import (
    COMPOUND_LOAD_INCREMENT_KG,
    DEFAULT_TM_PERCENTAGE,
    UNKNOWN_LIFT_BODYWEIGHT_RATIO,
    Confidence,
    Equipment,
    LiftMaxMethod,
    MovementPattern,
    MuscleGroup,
    TrainingLevel,
)
from periodization_engine.models.strength import LiftMaxEntry

# Approximate %TM sustainable for a working set at each RPE
RPE_TO_TM_PERCENTAGE: dict[float, float] = {
    6.0: 0.65,    # 4+ RIR
    6.5: 0.68,
    7.0: 0.72,    # 3 RIR
    7.5: 0.76,
    8.0: 0.80,    # 2 RIR
    8.5: 0.85,
    9.0: 0.90,    # 1 RIR
    9.5: 0.95,
    10.0: 1.00,   # 0 RIR
}

# E1RM as a multiple of bodyweight, by training level
BODYWEIGHT_STRENGTH_RATIOS: dict[str, dict[TrainingLevel, float]] = {
    "bench_press": {
        TrainingLevel.BEGINNER: 0.5,
        TrainingLevel.INTERMEDIATE: 1.0,
        TrainingLevel.ADVANCED: 1.5,
        TrainingLevel.ELITE: 2.0,
    },
    "squat": {
        TrainingLevel.BEGINNER: 0.75,
        TrainingLevel.INTERMEDIATE: 1.25,
        TrainingLevel.ADVANCED: 1.75,
        TrainingLevel.ELITE: 2.5,
    },
    "deadlift": {
        TrainingLevel.BEGINNER: 1.0,
        TrainingLevel.INTERMEDIATE: 1.5,
        TrainingLevel.ADVANCED: 2.0,
        TrainingLevel.ELITE: 3.0,
    },
    "overhead_press": {
        TrainingLevel.BEGINNER: 0.35,
        TrainingLevel.INTERMEDIATE: 0.65,
        TrainingLevel.ADVANCED: 1.0,
        TrainingLevel.ELITE: 1.35,
    },
    "barbell_row": {
        TrainingLevel.BEGINNER: 0.5,
        TrainingLevel.INTERMEDIATE: 0.85,
        TrainingLevel.ADVANCED: 1.2,
        TrainingLevel.ELITE: 1.5,
    },
}

# Beginners and elites use a more conservative TM
_SUGGESTED_TM_PERCENTAGE: dict[TrainingLevel, float] = {
    TrainingLevel.BEGINNER: 0.85,
    TrainingLevel.INTERMEDIATE: 0.90,
    TrainingLevel.ADVANCED: 0.90,
    TrainingLevel.ELITE: 0.85,
}


@dataclass(frozen=True)
class KeyLift:
    """A lift assessed during onboarding and tracked by training max."""

    key: str
    name: str
    muscle: MuscleGroup
    pattern: MovementPattern
    equipment: frozenset[Equipment]


KEY_LIFTS: tuple[KeyLift, ...] = (
    KeyLift("bench_press", "Bench Press", MuscleGroup.CHEST, MovementPattern.PUSH,
            frozenset({Equipment.BARBELL, Equipment.BENCH})),
    KeyLift("overhead_press", "Overhead Press", MuscleGroup.FRONT_DELTS, MovementPattern.PUSH,
            frozenset({Equipment.BARBELL})),
    KeyLift("squat", "Back Squat", MuscleGroup.QUADS, MovementPattern.SQUAT,
            frozenset({Equipment.BARBELL, Equipment.SQUAT_RACK})),
    KeyLift("deadlift", "Deadlift", MuscleGroup.HAMSTRINGS, MovementPattern.HINGE,
            frozenset({Equipment.BARBELL})),
    KeyLift("barbell_row", "Barbell Row", MuscleGroup.BACK, MovementPattern.PULL,
            frozenset({Equipment.BARBELL})),
)


def training_max(e1rm: float, percentage: float = DEFAULT_TM_PERCENTAGE) -> float:
    """Training max = E1RM × percentage, rounded to the nearest 2.5 kg.

    Returns 0 for e1rm <= 0 or a percentage outside (0, 1].
    """
    if e1rm <= 0 or percentage <= 0 or percentage > 1:
        return 0.0
    return round_to_increment(e1rm * percentage, COMPOUND_LOAD_INCREMENT_KG)


def training_max_from_performance(
    weight: float,
    reps: int,
    reserve_reps: int = 0,
    percentage: float = DEFAULT_TM_PERCENTAGE,
) -> tuple[float, float]:
    """(E1RM, training max) from a single logged set."""
    e1rm = estimate_one_rep_max(weight, reps, reserve_reps).value
    return e1rm, training_max(e1rm, percentage)


def suggested_tm_percentage(level: TrainingLevel) -> float:
    return _SUGGESTED_TM_PERCENTAGE.get(level, DEFAULT_TM_PERCENTAGE)


def tm_percentage_for_rpe(target_rpe: float) -> float:
    """Nearest-match lookup in the RPE → %TM table (ties go to the lower RPE)."""
    closest = min(RPE_TO_TM_PERCENTAGE, key=lambda rpe: (abs(rpe - target_rpe), rpe))
    return RPE_TO_TM_PERCENTAGE[closest]


def weight_from_tm_percentage(
    training_max_kg: float, percentage: float, increment: float = COMPOUND_LOAD_INCREMENT_KG
) -> float:
    return round_to_increment(training_max_kg * percentage, increment)


def weight_for_rpe(
    training_max_kg: float,
    target_rpe: float,
    increment: float = COMPOUND_LOAD_INCREMENT_KG,
) -> float:
    """Working weight for a target RPE, scaled from the training max.

    Returns 0 when no training max is known.
    """
    if training_max_kg <= 0:
        return 0.0
    return weight_from_tm_percentage(
        training_max_kg, tm_percentage_for_rpe(target_rpe), increment
    )


def estimate_from_bodyweight(
    exercise_key: str, bodyweight_kg: float, level: TrainingLevel
) -> float:
    """Rough starting E1RM from bodyweight ratios.

    Known lifts are rounded to the nearest 2.5 kg. Unknown exercise keys
    use a conservative 0.5 × bodyweight, returned unrounded.
    """
    if bodyweight_kg <= 0:
        return 0.0
    ratios = BODYWEIGHT_STRENGTH_RATIOS.get(exercise_key)
    if not ratios:
        return bodyweight_kg * UNKNOWN_LIFT_BODYWEIGHT_RATIO
    return round_to_increment(bodyweight_kg * ratios[level], COMPOUND_LOAD_INCREMENT_KG)


def initial_training_max_from_bodyweight(
    exercise_key: str, bodyweight_kg: float, level: TrainingLevel
) -> float:
    e1rm = estimate_from_bodyweight(exercise_key, bodyweight_kg, level)
    return training_max(e1rm, suggested_tm_percentage(level))


# ---------------------------------------------------------------------------
# LiftMaxEntry builders
# ---------------------------------------------------------------------------


def lift_max_from_test(
    exercise_key: str, tested_max_kg: float, percentage: float = DEFAULT_TM_PERCENTAGE
) -> LiftMaxEntry:
    """Entry for a true 1RM test."""
    return LiftMaxEntry(
        exercise_key=exercise_key,
        method=LiftMaxMethod.TESTED,
        e1rm=float(tested_max_kg),
        training_max=training_max(tested_max_kg, percentage),
        confidence=Confidence.HIGH,
    )


def lift_max_from_set(
    exercise_key: str,
    weight: float,
    reps: int,
    reserve_reps: int = 0,
    percentage: float = DEFAULT_TM_PERCENTAGE,
) -> LiftMaxEntry:
    """Entry calculated from a logged submaximal set."""
    result = estimate_one_rep_max(weight, reps, reserve_reps)
    return LiftMaxEntry(
        exercise_key=exercise_key,
        method=LiftMaxMethod.CALCULATED,
        e1rm=result.value,
        training_max=training_max(result.value, percentage),
        confidence=result.confidence,
    )


def lift_max_from_bodyweight(
    exercise_key: str, bodyweight_kg: float, level: TrainingLevel
) -> LiftMaxEntry:
    """Entry estimated from bodyweight when nothing better is known."""
    e1rm = estimate_from_bodyweight(exercise_key, bodyweight_kg, level)
    return LiftMaxEntry(
        exercise_key=exercise_key,
        method=LiftMaxMethod.ESTIMATED,
        e1rm=e1rm,
        training_max=training_max(e1rm, suggested_tm_percentage(level)),
        confidence=Confidence.LOW,
    )


def best_lift_max(
    current: LiftMaxEntry | None, candidate: LiftMaxEntry
) -> LiftMaxEntry:
    """Keep whichever entry has the higher E1RM (current wins ties)."""
    if current is None or candidate.e1rm > current.e1rm:
        return candidate
    return current
