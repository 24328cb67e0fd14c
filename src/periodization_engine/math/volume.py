"""Weekly set volume against RP volume landmarks.

A mesocycle starts each muscle at MEV in week 1, ramps linearly to MAV in
the last loading week, then deloads to about half of MEV.

    MV  - maintenance volume
    MEV - minimum effective volume
    MAV - maximum adaptive volume
    MRV - maximum recoverable volume

References:
    Israetel, Hoffmann & Smith (2021). Scientific Principles of Hypertrophy
        Training, ch. 3 (volume landmarks).
    Schoenfeld, Ogborn & Krieger (2017). Dose-response relationship between
        weekly resistance training volume and increases in muscle mass.
        J Sports Sci 35(11):1073-1082.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

import numpy as np

from periodization_engine.math.rounding import round_int
from periodization_engine.models.enums import (
    DELOAD_MEV_FRACTION,
    MIN_MESOCYCLE_WEEKS,
    MuscleGroup,
    TrainingLevel,
    VolumeStatus,
)
from periodization_engine.models.session import PlannedExercise
from periodization_engine.models.strength import MuscleVolume, VolumeLandmarks

DEFAULT_VOLUME_LANDMARKS: Mapping[MuscleGroup, VolumeLandmarks] = MappingProxyType({
    MuscleGroup.CHEST: VolumeLandmarks(mv=6, mev=10, mav=18, mrv=22),
    MuscleGroup.BACK: VolumeLandmarks(mv=6, mev=10, mav=20, mrv=25),
    MuscleGroup.FRONT_DELTS: VolumeLandmarks(mv=0, mev=6, mav=12, mrv=16),   # pressing covers most
    MuscleGroup.SIDE_DELTS: VolumeLandmarks(mv=6, mev=8, mav=20, mrv=26),
    MuscleGroup.REAR_DELTS: VolumeLandmarks(mv=0, mev=6, mav=16, mrv=22),
    MuscleGroup.BICEPS: VolumeLandmarks(mv=4, mev=8, mav=18, mrv=26),
    MuscleGroup.TRICEPS: VolumeLandmarks(mv=4, mev=6, mav=14, mrv=20),       # pressing covers most
    MuscleGroup.QUADS: VolumeLandmarks(mv=6, mev=8, mav=16, mrv=20),
    MuscleGroup.HAMSTRINGS: VolumeLandmarks(mv=4, mev=6, mav=14, mrv=18),
    MuscleGroup.GLUTES: VolumeLandmarks(mv=0, mev=4, mav=12, mrv=16),        # compounds cover most
    MuscleGroup.CALVES: VolumeLandmarks(mv=6, mev=8, mav=14, mrv=20),
    MuscleGroup.CORE: VolumeLandmarks(mv=0, mev=6, mav=16, mrv=20),
    MuscleGroup.TRAPS: VolumeLandmarks(mv=0, mev=6, mav=16, mrv=22),
    MuscleGroup.FOREARMS: VolumeLandmarks(mv=0, mev=4, mav=12, mrv=18),
})

# Beginners need less volume, advanced lifters tolerate more
_LEVEL_VOLUME_MULTIPLIER: dict[TrainingLevel, float] = {
    TrainingLevel.BEGINNER: 0.7,
    TrainingLevel.INTERMEDIATE: 1.0,
    TrainingLevel.ADVANCED: 1.2,
    TrainingLevel.ELITE: 1.3,
}

# Planned volume this far above MAV is allowed but flagged
_MAV_WARNING_MARGIN = 2


@dataclass(frozen=True)
class VolumeValidation:
    is_valid: bool
    message: str
    suggestion: int | None = None


def scale_landmarks(base: VolumeLandmarks, level: TrainingLevel) -> VolumeLandmarks:
    """Scale one muscle's landmarks by training level (half-up rounding)."""
    mult = _LEVEL_VOLUME_MULTIPLIER.get(level, 1.0)
    return VolumeLandmarks(
        mv=round_int(base.mv * mult),
        mev=round_int(base.mev * mult),
        mav=round_int(base.mav * mult),
        mrv=round_int(base.mrv * mult),
    )


def adjusted_landmarks(
    level: TrainingLevel,
    base: Mapping[MuscleGroup, VolumeLandmarks] | None = None,
) -> dict[MuscleGroup, VolumeLandmarks]:
    """Landmarks for every muscle in ``base`` (defaults) scaled by level."""
    source = DEFAULT_VOLUME_LANDMARKS if base is None else base
    return {muscle: scale_landmarks(lm, level) for muscle, lm in source.items()}


def classify_volume(
    current_sets: int,
    landmarks: VolumeLandmarks,
    week_number: int | None = None,
    total_weeks: int | None = None,
) -> VolumeStatus:
    """Status of a weekly set count relative to the landmarks.

    below MEV → LOW; MEV..MAV → OPTIMAL; above MAV up to MRV → HIGH;
    above MRV → EXCESSIVE. Week position does not move the thresholds;
    the arguments are accepted so call sites can pass the same week
    context they pass to ``target_sets_for_week``.
    """
    if current_sets < landmarks.mev:
        return VolumeStatus.LOW
    if current_sets <= landmarks.mav:
        return VolumeStatus.OPTIMAL
    if current_sets <= landmarks.mrv:
        return VolumeStatus.HIGH
    return VolumeStatus.EXCESSIVE


def target_sets_for_week(
    landmarks: VolumeLandmarks,
    week_number: int,
    total_weeks: int,
    include_deload: bool = True,
) -> int:
    """Weekly set target for one muscle.

    With a deload, weeks 1..N-1 ramp linearly MEV → MAV and week N (or any
    later week) returns round(MEV × 0.5). Without one, the ramp spans all N
    weeks.

    Raises:
        ValueError: total_weeks < 3 (the ramp is undefined).
    """
    if total_weeks < MIN_MESOCYCLE_WEEKS:
        raise ValueError(
            f"target_sets_for_week needs at least {MIN_MESOCYCLE_WEEKS} weeks, got {total_weeks}"
        )
    if include_deload and week_number >= total_weeks:
        return round_int(landmarks.mev * DELOAD_MEV_FRACTION)

    last_loading_week = total_weeks - 1 if include_deload else total_weeks
    week = min(max(week_number, 1), last_loading_week)
    progress = (week - 1) / (last_loading_week - 1)
    return round_int(landmarks.mev + progress * (landmarks.mav - landmarks.mev))


def distribute_sets_across_sessions(weekly_target: int, sessions_per_week: int) -> list[int]:
    """Split a weekly set target over sessions, extra sets on earlier sessions."""
    if sessions_per_week <= 0:
        return []
    base, remainder = divmod(weekly_target, sessions_per_week)
    return [base + (1 if i < remainder else 0) for i in range(sessions_per_week)]


def validate_volume(
    planned_sets: int,
    landmarks: VolumeLandmarks,
    week_number: int,
    total_weeks: int,
) -> VolumeValidation:
    """Check a planned weekly set count against the landmarks for that week."""
    if week_number >= total_weeks:
        if planned_sets > landmarks.mev:
            return VolumeValidation(
                is_valid=False,
                message="Deload volume too high",
                suggestion=round_int(landmarks.mev * DELOAD_MEV_FRACTION),
            )
        return VolumeValidation(is_valid=True, message="Appropriate deload volume")

    if planned_sets < landmarks.mev:
        return VolumeValidation(
            is_valid=False,
            message=f"Below MEV ({landmarks.mev} sets)",
            suggestion=landmarks.mev,
        )
    if planned_sets > landmarks.mrv:
        return VolumeValidation(
            is_valid=False,
            message=f"Exceeds MRV ({landmarks.mrv} sets)",
            suggestion=landmarks.mav,
        )
    if planned_sets > landmarks.mav + _MAV_WARNING_MARGIN:
        return VolumeValidation(
            is_valid=True,
            message=f"Volume ({planned_sets}) above MAV ({landmarks.mav}) - monitor fatigue",
        )
    return VolumeValidation(is_valid=True, message="Volume within range")


def calculate_weekly_volume(
    exercises: Iterable[PlannedExercise],
) -> dict[MuscleGroup, int]:
    """Sum sets per targeted muscle; untrained muscles are reported as 0."""
    planned = list(exercises)
    muscles = np.array([int(ex.muscle) for ex in planned], dtype=int)
    sets = np.array([ex.sets for ex in planned], dtype=int)
    volume: dict[MuscleGroup, int] = {}
    for muscle in MuscleGroup:
        volume[muscle] = int(sets[muscles == int(muscle)].sum()) if planned else 0
    return volume


def volume_report(
    weekly_volume: Mapping[MuscleGroup, int],
    landmarks: Mapping[MuscleGroup, VolumeLandmarks],
    week_number: int,
    total_weeks: int,
    include_deload: bool = True,
) -> tuple[MuscleVolume, ...]:
    """One MuscleVolume row per muscle, in MuscleGroup order.

    Muscles without an entry in ``landmarks`` use the defaults.
    """
    rows = []
    for muscle in MuscleGroup:
        lm = landmarks.get(muscle, DEFAULT_VOLUME_LANDMARKS[muscle])
        sets = int(weekly_volume.get(muscle, 0))
        rows.append(
            MuscleVolume(
                muscle=muscle,
                sets=sets,
                target=target_sets_for_week(lm, week_number, total_weeks, include_deload),
                status=classify_volume(sets, lm, week_number, total_weeks),
            )
        )
    return tuple(rows)


def recommended_frequency(weekly_target: int) -> int:
    """Sessions per week to spread a muscle's weekly sets over (6-10 per session)."""
    if weekly_target <= 6:
        return 1
    if weekly_target <= 12:
        return 2
    if weekly_target <= 18:
        return 3
    return min(4, math.ceil(weekly_target / 6))
