"""Mesocycle periodization math: weekly volume/intensity ramps and calendar.

A mesocycle is N weeks of accumulation (volume 1.0× → 1.8× of MEV-based
prescriptions, RPE climbing half a point per week) followed by one deload
week at half volume and RPE 6.

References:
    Israetel, Hoffmann & Smith (2021). Scientific Principles of Hypertrophy
        Training, ch. 8 (mesocycle design).
    Pritchard et al. (2015). Tapering practices of strength athletes.
        J Strength Cond Res 29(8):2154-2162.
"""

from __future__ import annotations

from datetime import date, timedelta

from periodization_engine.math.rounding import round_int
from periodization_engine.models.enums import (
    BASE_VOLUME_MULTIPLIER,
    BASE_WEEK_RPE,
    DEFAULT_SESSION_RPE,
    DELOAD_RPE,
    DELOAD_VOLUME_MULTIPLIER,
    MAX_RPE,
    MIN_TABLE_RPE,
    PEAK_VOLUME_MULTIPLIER,
    SESSION_RPE_BY_WEEK,
    WEEKLY_RPE_STEP,
    WeekDay,
)


def is_deload_week(week_number: int, total_weeks: int, include_deload: bool = True) -> bool:
    """The final week is the deload, when the mesocycle has one."""
    return include_deload and week_number == total_weeks


def volume_multiplier_for_week(
    week_number: int, total_weeks: int, include_deload: bool = True
) -> float:
    """Set-volume multiplier for a week.

    Deload → 0.5. Otherwise linear from 1.0 (week 1) to 1.8 (last loading
    week). A single loading week stays at 1.0.
    """
    if is_deload_week(week_number, total_weeks, include_deload):
        return DELOAD_VOLUME_MULTIPLIER
    loading_weeks = total_weeks - 1 if include_deload else total_weeks
    if loading_weeks <= 1:
        return BASE_VOLUME_MULTIPLIER
    progress = (week_number - 1) / (loading_weeks - 1)
    return BASE_VOLUME_MULTIPLIER + progress * (PEAK_VOLUME_MULTIPLIER - BASE_VOLUME_MULTIPLIER)


def target_rpe_for_week(
    week_number: int, total_weeks: int, include_deload: bool = True
) -> float:
    """Week-level RPE: 6.5 + 0.5 × week, clamped to 6-10; deload → 6."""
    if is_deload_week(week_number, total_weeks, include_deload):
        return DELOAD_RPE
    rpe = BASE_WEEK_RPE + WEEKLY_RPE_STEP * week_number
    return min(MAX_RPE, max(MIN_TABLE_RPE, rpe))


def session_rpe_for_week(week_number: int, is_deload: bool = False) -> float:
    """RPE prescribed to every exercise of a strength session that week."""
    if is_deload:
        return DELOAD_RPE
    return SESSION_RPE_BY_WEEK.get(week_number, DEFAULT_SESSION_RPE)


def rpe_to_rir(rpe: float) -> int:
    """Reps in reserve implied by an RPE (RIR = 10 − RPE, half-up, never negative)."""
    return max(0, round_int(MAX_RPE - rpe))


# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------


def monday_of(day: date) -> date:
    """Monday of the ISO week containing ``day``."""
    return day - timedelta(days=day.weekday())


def week_start_for(start_date: date, week_number: int) -> date:
    """Monday of mesocycle week ``week_number`` (1-based)."""
    return monday_of(start_date) + timedelta(weeks=week_number - 1)


def date_for_day(week_start: date, day: WeekDay) -> date:
    return week_start + timedelta(days=day.offset)
