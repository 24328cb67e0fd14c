"""Tests for SessionBuilder: template expansion into one week's exercises."""

from __future__ import annotations

import logging

import pytest

from periodization_engine.catalog.exercise_library import ExerciseCatalog
from periodization_engine.catalog.selector import ExerciseSelector, equipment_satisfied
from periodization_engine.models.enums import Equipment, MuscleGroup, TargetPriority, TemplateId
from periodization_engine.workout_builder.builder import (
    SessionBuilder,
    rest_seconds_for,
    sets_for_target,
)
from periodization_engine.workout_builder.session_templates import MuscleTarget, get_template

ALL_SMALL = {Equipment.BARBELL, Equipment.BENCH, Equipment.CABLE_MACHINE, Equipment.BODYWEIGHT}


@pytest.fixture
def small_builder(small_catalog: ExerciseCatalog) -> SessionBuilder:
    return SessionBuilder(ExerciseSelector(small_catalog))


@pytest.fixture
def full_builder(full_catalog: ExerciseCatalog) -> SessionBuilder:
    return SessionBuilder(ExerciseSelector(full_catalog))


class TestSetsForTarget:
    @pytest.mark.parametrize(
        "priority,multiplier,expected",
        [
            (TargetPriority.PRIMARY, 1.0, 3),
            (TargetPriority.PRIMARY, 1.5, 5),   # 4.5 rounds half-up
            (TargetPriority.PRIMARY, 1.8, 5),
            (TargetPriority.SECONDARY, 1.0, 2),
            (TargetPriority.SECONDARY, 1.8, 4),
            (TargetPriority.PRIMARY, 0.5, 2),   # floor of two sets
            (TargetPriority.SECONDARY, 0.5, 2),
        ],
    )
    def test_scaling(
        self, priority: TargetPriority, multiplier: float, expected: int
    ) -> None:
        target = MuscleTarget(MuscleGroup.CHEST, priority, 1)
        assert sets_for_target(target, multiplier) == expected


class TestExpand:
    def test_upper_push_week_one(self, small_builder: SessionBuilder) -> None:
        session = small_builder.expand(get_template(TemplateId.UPPER_PUSH), ALL_SMALL, 1, 1.0)
        assert [(ex.exercise.id, ex.muscle) for ex in session.exercises] == [
            ("press", MuscleGroup.CHEST),
            ("fly", MuscleGroup.CHEST),
            ("press", MuscleGroup.TRICEPS),
            ("pushdown", MuscleGroup.TRICEPS),
        ]
        assert [ex.sets for ex in session.exercises] == [3, 3, 2, 2]
        assert session.total_sets == 10
        assert session.estimated_duration_min == 25
        assert session.target_rpe == 7.0
        assert all(ex.target_rpe == 7.0 for ex in session.exercises)

    def test_prescription_details(self, small_builder: SessionBuilder) -> None:
        session = small_builder.expand(get_template(TemplateId.UPPER_PUSH), ALL_SMALL, 1, 1.0)
        press, fly = session.exercises[0], session.exercises[1]
        assert press.rest_seconds == 180
        assert fly.rest_seconds == 90
        assert (press.rep_range_min, press.rep_range_max) == (5, 8)
        assert press.notes == "Brace"
        assert fly.notes == ""
        assert press.target_rir == 3

    def test_unfilled_targets_are_skipped_and_logged(
        self, small_builder: SessionBuilder, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="periodization_engine.workout_builder.builder"):
            session = small_builder.expand(
                get_template(TemplateId.UPPER_PUSH), ALL_SMALL, 1, 1.0
            )
        assert session.unfilled_muscles == (MuscleGroup.FRONT_DELTS, MuscleGroup.SIDE_DELTS)
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert any("FRONT_DELTS" in m and "UPPER_PUSH" in m for m in messages)
        assert any("SIDE_DELTS" in m for m in messages)

    def test_late_week_volume_and_rpe(self, small_builder: SessionBuilder) -> None:
        session = small_builder.expand(get_template(TemplateId.UPPER_PUSH), ALL_SMALL, 4, 1.8)
        assert [ex.sets for ex in session.exercises] == [5, 5, 4, 4]
        assert session.target_rpe == 8.5

    def test_deload(self, small_builder: SessionBuilder) -> None:
        session = small_builder.expand(
            get_template(TemplateId.UPPER_PUSH), ALL_SMALL, 5, 0.5, is_deload=True
        )
        assert all(ex.sets == 2 for ex in session.exercises)
        assert session.target_rpe == 6.0

    def test_suggested_weight_from_training_max(self, small_builder: SessionBuilder) -> None:
        session = small_builder.expand(
            get_template(TemplateId.UPPER_PUSH), ALL_SMALL, 1, 1.0,
            training_maxes={"press": 100.0},
        )
        by_id = {ex.exercise.id: ex for ex in session.exercises}
        # RPE 7 → 72% of TM → 72 kg → 72.5 on a 2.5 kg increment
        assert by_id["press"].suggested_weight_kg == 72.5
        assert by_id["fly"].suggested_weight_kg is None

    def test_no_equipment_at_all(
        self, small_builder: SessionBuilder, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            session = small_builder.expand(get_template(TemplateId.LOWER), set(), 1, 1.0)
        assert session.exercises == ()
        assert session.total_sets == 0
        assert session.estimated_duration_min == 0
        assert len(caplog.records) == 4


class TestBodyweightLowerBody:
    def test_only_bodyweight_exercises(
        self, full_builder: SessionBuilder, caplog: pytest.LogCaptureFixture
    ) -> None:
        equipment = {Equipment.BODYWEIGHT}
        with caplog.at_level(logging.WARNING):
            session = full_builder.expand(get_template(TemplateId.LOWER), equipment, 1, 1.0)
        assert session.exercises
        for planned in session.exercises:
            assert equipment_satisfied(planned.exercise, equipment)
            assert planned.exercise.equipment <= {Equipment.BODYWEIGHT}
        # Any target left empty must have been logged
        warned = " ".join(r.getMessage() for r in caplog.records)
        for muscle in session.unfilled_muscles:
            assert muscle.name in warned

    def test_every_lower_target_covered(self, full_builder: SessionBuilder) -> None:
        session = full_builder.expand(
            get_template(TemplateId.LOWER), {Equipment.BODYWEIGHT}, 1, 1.0
        )
        assert session.unfilled_muscles == ()


class TestRestSeconds:
    def test_compound_vs_other(self, full_catalog: ExerciseCatalog) -> None:
        assert rest_seconds_for(full_catalog.get("squat")) == 180
        assert rest_seconds_for(full_catalog.get("leg_extension")) == 90
