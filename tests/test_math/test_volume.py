"""Tests for weekly volume targets, classification and reporting."""

from __future__ import annotations

import pytest

from periodization_engine.catalog.exercise_library import default_catalog
from periodization_engine.math.volume import (
    DEFAULT_VOLUME_LANDMARKS,
    adjusted_landmarks,
    calculate_weekly_volume,
    classify_volume,
    distribute_sets_across_sessions,
    recommended_frequency,
    scale_landmarks,
    target_sets_for_week,
    validate_volume,
    volume_report,
)
from periodization_engine.models.enums import MuscleGroup, TrainingLevel, VolumeStatus
from periodization_engine.models.session import PlannedExercise
from periodization_engine.models.strength import VolumeLandmarks


def _planned(exercise_id: str, muscle: MuscleGroup, sets: int) -> PlannedExercise:
    exercise = default_catalog().get(exercise_id)
    return PlannedExercise(
        exercise=exercise,
        muscle=muscle,
        sets=sets,
        rep_range_min=exercise.rep_range_min,
        rep_range_max=exercise.rep_range_max,
        target_rpe=8.0,
        rest_seconds=90,
    )


class TestTargetSetsForWeek:
    def test_five_week_block(self, chest_landmarks: VolumeLandmarks) -> None:
        targets = [target_sets_for_week(chest_landmarks, w, 5) for w in range(1, 6)]
        assert targets == [10, 13, 15, 18, 5]

    @pytest.mark.parametrize("total_weeks", [3, 4, 5, 6, 8, 12])
    def test_ramp_boundaries(self, chest_landmarks: VolumeLandmarks, total_weeks: int) -> None:
        assert target_sets_for_week(chest_landmarks, 1, total_weeks) == chest_landmarks.mev
        assert (
            target_sets_for_week(chest_landmarks, total_weeks - 1, total_weeks)
            == chest_landmarks.mav
        )
        assert target_sets_for_week(chest_landmarks, total_weeks, total_weeks) == 5

    def test_deload_rounds_half_up(self) -> None:
        landmarks = VolumeLandmarks(mv=4, mev=7, mav=14, mrv=18)
        assert target_sets_for_week(landmarks, 4, 4) == 4

    def test_weeks_past_end_are_deload(self, chest_landmarks: VolumeLandmarks) -> None:
        assert target_sets_for_week(chest_landmarks, 9, 5) == 5

    def test_without_deload_ramp_spans_all_weeks(self, chest_landmarks: VolumeLandmarks) -> None:
        targets = [
            target_sets_for_week(chest_landmarks, w, 5, include_deload=False)
            for w in range(1, 6)
        ]
        assert targets == [10, 12, 14, 16, 18]

    def test_too_short_raises(self, chest_landmarks: VolumeLandmarks) -> None:
        with pytest.raises(ValueError):
            target_sets_for_week(chest_landmarks, 1, 2)


class TestClassifyVolume:
    @pytest.mark.parametrize(
        "sets,expected",
        [
            (0, VolumeStatus.LOW),
            (9, VolumeStatus.LOW),
            (10, VolumeStatus.OPTIMAL),
            (18, VolumeStatus.OPTIMAL),
            (19, VolumeStatus.HIGH),
            (22, VolumeStatus.HIGH),
            (23, VolumeStatus.EXCESSIVE),
        ],
    )
    def test_thresholds(
        self, chest_landmarks: VolumeLandmarks, sets: int, expected: VolumeStatus
    ) -> None:
        assert classify_volume(sets, chest_landmarks) == expected

    def test_week_position_does_not_move_thresholds(
        self, chest_landmarks: VolumeLandmarks
    ) -> None:
        assert classify_volume(5, chest_landmarks, 5, 5) == VolumeStatus.LOW


class TestLandmarks:
    def test_defaults_cover_every_muscle(self) -> None:
        assert set(DEFAULT_VOLUME_LANDMARKS) == set(MuscleGroup)
        assert all(lm.is_ordered for lm in DEFAULT_VOLUME_LANDMARKS.values())

    def test_defaults_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_VOLUME_LANDMARKS[MuscleGroup.CHEST] = VolumeLandmarks(0, 0, 0, 0)  # type: ignore[index]

    def test_beginner_scaling(self, chest_landmarks: VolumeLandmarks) -> None:
        assert scale_landmarks(chest_landmarks, TrainingLevel.BEGINNER) == VolumeLandmarks(
            mv=4, mev=7, mav=13, mrv=15
        )

    def test_intermediate_unchanged(self) -> None:
        assert adjusted_landmarks(TrainingLevel.INTERMEDIATE) == dict(DEFAULT_VOLUME_LANDMARKS)

    def test_custom_base(self, chest_landmarks: VolumeLandmarks) -> None:
        result = adjusted_landmarks(
            TrainingLevel.ADVANCED, {MuscleGroup.CHEST: chest_landmarks}
        )
        assert result == {MuscleGroup.CHEST: VolumeLandmarks(mv=7, mev=12, mav=22, mrv=26)}


class TestValidateVolume:
    def test_below_mev(self, chest_landmarks: VolumeLandmarks) -> None:
        result = validate_volume(8, chest_landmarks, 1, 5)
        assert not result.is_valid
        assert result.suggestion == 10

    def test_above_mrv(self, chest_landmarks: VolumeLandmarks) -> None:
        result = validate_volume(24, chest_landmarks, 3, 5)
        assert not result.is_valid
        assert result.suggestion == 18

    def test_above_mav_warns(self, chest_landmarks: VolumeLandmarks) -> None:
        result = validate_volume(21, chest_landmarks, 3, 5)
        assert result.is_valid
        assert "monitor fatigue" in result.message

    def test_in_range(self, chest_landmarks: VolumeLandmarks) -> None:
        assert validate_volume(14, chest_landmarks, 2, 5).is_valid

    def test_heavy_deload_flagged(self, chest_landmarks: VolumeLandmarks) -> None:
        result = validate_volume(12, chest_landmarks, 5, 5)
        assert not result.is_valid
        assert result.suggestion == 5


class TestWeeklyVolume:
    def test_sums_sets_per_muscle(self) -> None:
        volume = calculate_weekly_volume([
            _planned("bench_press", MuscleGroup.CHEST, 3),
            _planned("cable_fly", MuscleGroup.CHEST, 2),
            _planned("squat", MuscleGroup.QUADS, 4),
        ])
        assert volume[MuscleGroup.CHEST] == 5
        assert volume[MuscleGroup.QUADS] == 4

    def test_every_muscle_present(self) -> None:
        volume = calculate_weekly_volume([_planned("squat", MuscleGroup.QUADS, 4)])
        assert set(volume) == set(MuscleGroup)
        assert volume[MuscleGroup.BACK] == 0

    def test_empty(self) -> None:
        assert sum(calculate_weekly_volume([]).values()) == 0

    def test_report_rows(self) -> None:
        volume = {MuscleGroup.CHEST: 12}
        report = volume_report(volume, DEFAULT_VOLUME_LANDMARKS, 2, 5)
        assert [row.muscle for row in report] == list(MuscleGroup)
        chest = report[0]
        assert chest.sets == 12
        assert chest.target == 13
        assert chest.status == VolumeStatus.OPTIMAL

    def test_report_falls_back_to_defaults(self) -> None:
        report = volume_report({}, {}, 1, 5)
        assert report[0].target == DEFAULT_VOLUME_LANDMARKS[MuscleGroup.CHEST].mev


class TestDistribution:
    def test_extra_sets_go_first(self) -> None:
        assert distribute_sets_across_sessions(10, 3) == [4, 3, 3]

    def test_no_sessions(self) -> None:
        assert distribute_sets_across_sessions(10, 0) == []

    @pytest.mark.parametrize(
        "sets,expected", [(4, 1), (6, 1), (10, 2), (16, 3), (22, 4), (40, 4)]
    )
    def test_recommended_frequency(self, sets: int, expected: int) -> None:
        assert recommended_frequency(sets) == expected
