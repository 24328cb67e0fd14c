"""Estimated one-rep max (E1RM) from submaximal sets.

Uses the Epley relation extended with reps-in-reserve: a set of ``reps``
stopped ``rir`` reps short of failure is treated as ``reps + rir`` reps to
failure.

References:
    Epley (1985). Poundage Chart. Boyd Epley Workout.
    Helms et al. (2016). Application of the repetitions in reserve-based
        rating of perceived exertion scale for resistance training.
        Strength Cond J 38(4):42-49.
"""

from __future__ import annotations

from typing import Iterable

from periodization_engine.math.rounding import round_half_up, round_int, round_to_increment
from periodization_engine.models.enums import (
    E1RM_HIGH_CONFIDENCE_MAX_REPS,
    E1RM_MEDIUM_CONFIDENCE_MAX_REPS,
    EPLEY_DIVISOR,
    MAX_RPE,
    Confidence,
)
from periodization_engine.models.strength import E1RMResult, SetPerformance

_PERCENTAGE_TABLE_STEPS = (100, 95, 90, 85, 80, 75, 70, 65, 60, 55, 50)

# Typical rep window at each RPE
_REP_RANGE_BY_RPE: dict[float, tuple[int, int]] = {
    6.0: (6, 15),
    7.0: (5, 12),
    7.5: (4, 10),
    8.0: (3, 8),
    8.5: (2, 6),
    9.0: (1, 5),
    9.5: (1, 3),
    10.0: (1, 2),
}
_DEFAULT_REP_RANGE = (3, 8)


def _confidence_for(effective_reps: float) -> Confidence:
    if effective_reps <= E1RM_HIGH_CONFIDENCE_MAX_REPS:
        return Confidence.HIGH
    if effective_reps <= E1RM_MEDIUM_CONFIDENCE_MAX_REPS:
        return Confidence.MEDIUM
    return Confidence.LOW


def estimate_one_rep_max(
    weight: float, reps: int, reserve_reps: float = 0
) -> E1RMResult:
    """Estimate 1RM from a single set.

    E1RM = weight × (1 + (reps + reserve_reps) / 30), rounded to 2 dp.

    Confidence degrades with effective reps (reps + reserve_reps): HIGH up to
    5, MEDIUM up to 10, LOW beyond. The formula over-predicts at high rep
    counts, so callers should surface LOW confidence rather than hide it.

    Args:
        weight: Load lifted (kg).
        reps: Completed reps (>= 1).
        reserve_reps: Reps left in reserve (RIR); fractional values are kept.

    Returns:
        E1RMResult. Invalid input (weight <= 0 or reps < 1) yields value 0
        with formula "invalid"; this function never raises.
    """
    if weight <= 0 or reps < 1:
        return E1RMResult(value=0.0, formula="invalid", confidence=Confidence.LOW)

    if reps == 1 and reserve_reps == 0:
        return E1RMResult(value=float(weight), formula="direct", confidence=Confidence.HIGH)

    effective_reps = reps + reserve_reps
    e1rm = weight * (1 + effective_reps / EPLEY_DIVISOR)
    return E1RMResult(
        value=round_half_up(e1rm, 2),
        formula="epley",
        confidence=_confidence_for(effective_reps),
    )


def estimate_one_rep_max_from_rpe(weight: float, reps: int, rpe: float) -> E1RMResult:
    """Same as estimate_one_rep_max with RIR derived from RPE (RIR = 10 − RPE).

    RIR is not rounded, so RPE 8.5 counts as 1.5 reps in reserve.
    """
    rir = max(0.0, MAX_RPE - rpe)
    return estimate_one_rep_max(weight, reps, rir)


def best_e1rm_from_sets(sets: Iterable[SetPerformance]) -> E1RMResult | None:
    """Highest E1RM among working sets, or None when no working set exists.

    Sets logged without RIR are treated as taken to failure (RIR 0).
    """
    best: E1RMResult | None = None
    for performed in sets:
        if not performed.is_working:
            continue
        result = estimate_one_rep_max(
            performed.weight_kg, performed.reps, performed.rir or 0
        )
        if best is None or result.value > best.value:
            best = result
    return best


def percentage_table(e1rm: float, increment: float = 2.5) -> dict[int, float]:
    """Working loads at 100%..50% of E1RM in 5% steps."""
    return {
        pct: round_to_increment(e1rm * pct / 100, increment)
        for pct in _PERCENTAGE_TABLE_STEPS
    }


def estimate_reps_at_percentage(percentage: float) -> int:
    """Inverse Epley: reps to failure possible at ``percentage`` % of 1RM."""
    if percentage <= 0:
        return 0
    return round_int(EPLEY_DIVISOR * (100 / percentage - 1))


def rep_range_for_rpe(rpe: float) -> tuple[int, int]:
    """Typical (min, max) rep window for a target RPE."""
    return _REP_RANGE_BY_RPE.get(float(rpe), _DEFAULT_REP_RANGE)
