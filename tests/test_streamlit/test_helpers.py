"""Tests for the plan viewer's pure helpers."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Callable

import pytest

import helpers
from helpers import (
    build_mesocycle_config,
    format_duration,
    format_rep_range,
    format_rest,
    format_weight,
    label,
    lift_max_entries,
    list_profiles,
    load_profile,
    mesocycle_frame,
    save_profile,
    volume_frame,
)
from periodization_engine.engine import MesocycleGenerator
from periodization_engine.identity import CounterIdentitySource
from periodization_engine.models.config import MesocycleConfig
from periodization_engine.models.enums import (
    DomainPriority,
    Equipment,
    LiftMaxMethod,
    TrainingLevel,
    WeekDay,
)


@pytest.fixture
def profile() -> dict:
    return {
        "name": "Base Block",
        "total_weeks": 6,
        "start_date": "2026-02-04",
        "available_days": ["MONDAY", "WEDNESDAY", "FRIDAY", "SATURDAY"],
        "strength_priority": "SECONDARY",
        "rucking_priority": "PRIMARY",
        "cardio_priority": "MAINTENANCE",
        "session_duration_min": 45,
        "max_sessions_per_day": 2,
        "equipment": ["BARBELL", "SQUAT_RACK", "BENCH"],
        "training_level": "INTERMEDIATE",
        "bodyweight_kg": 80,
        "lifts": {
            "bench_press": {"tested_kg": 120},
            "squat": {"weight_kg": 100, "reps": 5, "rir": 2},
        },
    }


@pytest.fixture(autouse=True)
def profiles_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setattr(helpers, "PROFILES_DIR", tmp_path / "profiles")
    return tmp_path / "profiles"


class TestFormatting:
    @pytest.mark.parametrize(
        "minutes, expected",
        [(0, "0m"), (45, "45m"), (60, "1h"), (90.0, "1h 30m")],
    )
    def test_duration(self, minutes: float, expected: str) -> None:
        assert format_duration(minutes) == expected

    def test_weight(self) -> None:
        assert format_weight(102.5) == "102.5 kg"
        assert format_weight(100.0) == "100 kg"
        assert format_weight(None) == "--"
        assert format_weight(0) == "--"

    def test_rest(self) -> None:
        assert format_rest(150) == "2:30"
        assert format_rest(60) == "1:00"
        assert format_rest(0) == "--"

    def test_rep_range(self) -> None:
        assert format_rep_range(8, 12) == "8-12"
        assert format_rep_range(5, 5) == "5"

    def test_label(self) -> None:
        assert label(Equipment.PULL_UP_BAR) == "Pull Up Bar"
        assert label(WeekDay.MONDAY) == "Monday"


class TestLiftMaxEntries:
    def test_tested_max(self, profile: dict) -> None:
        entry = lift_max_entries(profile)["bench_press"]
        assert entry.method == LiftMaxMethod.TESTED
        assert entry.training_max == 107.5  # 120 × 0.9 = 108 -> nearest 2.5

    def test_logged_set(self, profile: dict) -> None:
        assert lift_max_entries(profile)["squat"].method == LiftMaxMethod.CALCULATED

    def test_bodyweight_fallback(self, profile: dict) -> None:
        entry = lift_max_entries(profile)["barbell_row"]
        assert entry.method == LiftMaxMethod.ESTIMATED
        assert entry.e1rm == 67.5  # 80 × 0.85 = 68 -> nearest 2.5

    def test_no_data_no_entry(self, profile: dict) -> None:
        profile["bodyweight_kg"] = 0
        entries = lift_max_entries(profile)
        assert set(entries) == {"bench_press", "squat"}

    def test_null_rir_counts_as_failure(self, profile: dict) -> None:
        profile["lifts"]["squat"]["rir"] = None
        entry = lift_max_entries(profile)["squat"]
        assert entry.e1rm == 116.67  # 100 × (1 + 5 / 30)

    def test_best_of_test_and_set(self, profile: dict) -> None:
        profile["lifts"]["bench_press"].update(weight_kg=60, reps=5, rir=0)
        assert lift_max_entries(profile)["bench_press"].method == LiftMaxMethod.TESTED


class TestBuildConfig:
    def test_fields(self, profile: dict) -> None:
        config = build_mesocycle_config(profile)
        assert config.name == "Base Block"
        assert config.total_weeks == 6
        assert config.start_date == date(2026, 2, 4)
        assert config.available_days == (
            WeekDay.MONDAY, WeekDay.WEDNESDAY, WeekDay.FRIDAY, WeekDay.SATURDAY,
        )
        assert config.rucking_priority == DomainPriority.PRIMARY
        assert config.preferred_session_duration_min == 45.0
        assert config.equipment == frozenset(
            {Equipment.BARBELL, Equipment.SQUAT_RACK, Equipment.BENCH}
        )
        assert config.training_level == TrainingLevel.INTERMEDIATE
        assert config.include_deload

    def test_training_maxes_keyed_by_catalog_id(self, profile: dict) -> None:
        maxes = build_mesocycle_config(profile).training_maxes
        assert maxes["bench_press"] == 107.5
        assert "ohp" in maxes
        assert "overhead_press" not in maxes

    def test_accepts_date_objects(self, profile: dict) -> None:
        profile["start_date"] = date(2026, 5, 1)
        assert build_mesocycle_config(profile).start_date == date(2026, 5, 1)


class TestFrames:
    @pytest.fixture
    def plan(self, hybrid_config: MesocycleConfig, fixed_clock: Callable[[], datetime]):
        generator = MesocycleGenerator(id_source=CounterIdentitySource(), clock=fixed_clock)
        return generator.generate(hybrid_config)

    def test_mesocycle_frame(self, plan) -> None:
        df = mesocycle_frame(plan)
        assert list(df.columns) == [
            "Week", "Date", "Day", "Session", "Domain", "Sets", "RPE", "Duration",
        ]
        assert len(df) == len(plan.sessions)
        assert set(df["Domain"]) == {"Strength", "Rucking", "Cardio"}
        assert df.iloc[0]["Day"] == "Mon"

    def test_volume_frame(self, plan) -> None:
        df = volume_frame(plan.weeks[0])
        assert df.index.name == "Muscle"
        assert list(df.columns) == ["Sets", "Target", "Status"]
        assert "Chest" in df.index
        assert df.loc["Chest", "Target"] == plan.weeks[0].volume_report[0].target


class TestProfiles:
    def test_save_and_load(self, profile: dict, profiles_dir: Path) -> None:
        profile["start_date"] = date(2026, 2, 4)
        path = save_profile("Base Block", profile)
        assert path == profiles_dir / "Base Block.json"
        loaded = load_profile("Base Block")
        assert loaded["start_date"] == date(2026, 2, 4)
        assert loaded["lifts"] == profile["lifts"]

    def test_filename_sanitised(self, profile: dict, profiles_dir: Path) -> None:
        assert save_profile("a/b:c", profile).name == "abc.json"
        assert save_profile("///", profile).name == "profile.json"

    def test_list_profiles(self, profile: dict) -> None:
        assert list_profiles() == []
        save_profile("zeta", profile)
        save_profile("alpha", profile)
        assert list_profiles() == ["alpha", "zeta"]
