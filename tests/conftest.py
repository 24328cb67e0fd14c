"""Shared test fixtures: athlete configs, a small fixture catalog, deterministic ids."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Callable

import pytest

from periodization_engine.catalog.exercise_library import ExerciseCatalog, default_catalog
from periodization_engine.identity import CounterIdentitySource
from periodization_engine.models.config import MesocycleConfig
from periodization_engine.models.enums import (
    DomainPriority,
    Equipment,
    ExerciseCategory,
    FatigueLevel,
    MovementPattern,
    MuscleGroup,
    WeekDay,
)
from periodization_engine.models.exercise import Exercise
from periodization_engine.models.strength import VolumeLandmarks

FULL_GYM = frozenset({
    Equipment.BARBELL,
    Equipment.DUMBBELLS,
    Equipment.CABLE_MACHINE,
    Equipment.PULL_UP_BAR,
    Equipment.BENCH,
    Equipment.SQUAT_RACK,
    Equipment.MACHINES,
})

FIXED_NOW = datetime(2026, 1, 5, 6, 30, tzinfo=timezone.utc)


@pytest.fixture
def chest_landmarks() -> VolumeLandmarks:
    """Default chest landmarks: MV 6, MEV 10, MAV 18, MRV 22."""
    return VolumeLandmarks(mv=6, mev=10, mav=18, mrv=22)


@pytest.fixture
def hybrid_config() -> MesocycleConfig:
    """5-week strength-primary block: Mon/Tue/Thu/Fri/Sat, up to two sessions per day."""
    return MesocycleConfig(
        name="Spring Block",
        total_weeks=5,
        start_date=date(2026, 1, 7),  # a Wednesday; week 1 starts Mon 5 Jan
        available_days=(
            WeekDay.MONDAY,
            WeekDay.TUESDAY,
            WeekDay.THURSDAY,
            WeekDay.FRIDAY,
            WeekDay.SATURDAY,
        ),
        strength_priority=DomainPriority.PRIMARY,
        rucking_priority=DomainPriority.SECONDARY,
        cardio_priority=DomainPriority.MAINTENANCE,
        preferred_session_duration_min=60.0,
        max_sessions_per_day=2,
        equipment=FULL_GYM,
        training_maxes={"bench_press": 100.0, "squat": 140.0},
    )


@pytest.fixture
def minimal_config() -> MesocycleConfig:
    """Three days, one session per day, bodyweight only."""
    return MesocycleConfig(
        name="Travel Block",
        total_weeks=4,
        start_date=date(2026, 3, 2),
        available_days=(WeekDay.MONDAY, WeekDay.WEDNESDAY, WeekDay.FRIDAY),
        max_sessions_per_day=1,
        equipment=frozenset({Equipment.BODYWEIGHT}),
    )


@pytest.fixture
def make_config(hybrid_config: MesocycleConfig) -> Callable[..., MesocycleConfig]:
    """Factory: hybrid_config with field overrides."""
    import dataclasses

    def _make(**overrides) -> MesocycleConfig:
        return dataclasses.replace(hybrid_config, **overrides)

    return _make


@pytest.fixture
def id_source() -> CounterIdentitySource:
    return CounterIdentitySource()


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def full_catalog() -> ExerciseCatalog:
    return default_catalog()


@pytest.fixture
def small_catalog() -> ExerciseCatalog:
    """Four exercises: enough to exercise ranking and the compound-first rule."""
    return ExerciseCatalog([
        Exercise(
            id="press",
            name="Press",
            category=ExerciseCategory.COMPOUND,
            movement_pattern=MovementPattern.PUSH,
            primary_muscles=frozenset({MuscleGroup.CHEST}),
            secondary_muscles=frozenset({MuscleGroup.TRICEPS}),
            equipment=frozenset({Equipment.BARBELL, Equipment.BENCH}),
            stimulus_to_fatigue_ratio=5,
            systemic_fatigue=FatigueLevel.HIGH,
            rep_range_min=5,
            rep_range_max=8,
            cues=("Brace",),
        ),
        Exercise(
            id="fly",
            name="Fly",
            category=ExerciseCategory.CABLE,
            movement_pattern=MovementPattern.PUSH,
            primary_muscles=frozenset({MuscleGroup.CHEST}),
            equipment=frozenset({Equipment.CABLE_MACHINE}),
            stimulus_to_fatigue_ratio=9,
            systemic_fatigue=FatigueLevel.LOW,
            rep_range_min=12,
            rep_range_max=15,
        ),
        Exercise(
            id="pushup",
            name="Push-Up",
            category=ExerciseCategory.BODYWEIGHT,
            movement_pattern=MovementPattern.PUSH,
            primary_muscles=frozenset({MuscleGroup.CHEST}),
            secondary_muscles=frozenset({MuscleGroup.TRICEPS}),
            equipment=frozenset({Equipment.BODYWEIGHT}),
            stimulus_to_fatigue_ratio=7,
            systemic_fatigue=FatigueLevel.LOW,
            rep_range_min=10,
            rep_range_max=20,
            cues=("Body straight", "Chest to floor"),
        ),
        Exercise(
            id="pushdown",
            name="Pushdown",
            category=ExerciseCategory.CABLE,
            movement_pattern=MovementPattern.PUSH,
            primary_muscles=frozenset({MuscleGroup.TRICEPS}),
            equipment=frozenset({Equipment.CABLE_MACHINE}),
            stimulus_to_fatigue_ratio=8,
            systemic_fatigue=FatigueLevel.LOW,
            rep_range_min=10,
            rep_range_max=15,
        ),
    ])
