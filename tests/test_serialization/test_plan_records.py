"""Tests for row-shaped plan serialization."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Callable

import pytest

from periodization_engine.engine import MesocycleGenerator
from periodization_engine.identity import CounterIdentitySource
from periodization_engine.models.config import MesocycleConfig
from periodization_engine.models.enums import MuscleGroup
from periodization_engine.models.mesocycle import Mesocycle
from periodization_engine.models.strength import VolumeLandmarks
from periodization_engine.serialization import to_plan_json_string, to_plan_records


@pytest.fixture
def plan(hybrid_config: MesocycleConfig, fixed_clock: Callable[[], datetime]) -> Mesocycle:
    generator = MesocycleGenerator(id_source=CounterIdentitySource(), clock=fixed_clock)
    return generator.generate(hybrid_config)


class TestMesocycleRow:
    def test_header(self, plan: Mesocycle) -> None:
        row = to_plan_records(plan)["mesocycle"]
        assert row["id"] == "meso_1"
        assert row["name"] == "Spring Block"
        assert row["start_date"] == "2026-01-05"
        assert row["end_date"] == "2026-02-08"
        assert row["total_weeks"] == 5
        assert row["deload_week"] == 5
        assert row["status"] == "active"
        assert row["created_at"] == "2026-01-05T06:30:00+00:00"

    def test_config_snapshot(self, plan: Mesocycle) -> None:
        config = to_plan_records(plan)["mesocycle"]["config"]
        assert config["available_days"] == [
            "monday", "tuesday", "thursday", "friday", "saturday",
        ]
        assert config["strength_priority"] == "primary"
        assert "barbell" in config["equipment"]
        assert config["equipment"] == sorted(config["equipment"])
        assert config["training_maxes"] == {"bench_press": 100.0, "squat": 140.0}
        assert config["volume_landmarks"] == {}
        assert config["require_single_primary"] is True

    def test_landmark_overrides_persisted(
        self,
        make_config: Callable[..., MesocycleConfig],
        fixed_clock: Callable[[], datetime],
    ) -> None:
        config = make_config(
            volume_landmarks={
                MuscleGroup.TRICEPS: VolumeLandmarks(mv=4, mev=6, mav=12, mrv=18),
                MuscleGroup.CHEST: VolumeLandmarks(mv=2, mev=4, mav=8, mrv=10),
            },
            require_single_primary=False,
        )
        generator = MesocycleGenerator(id_source=CounterIdentitySource(), clock=fixed_clock)
        snapshot = to_plan_records(generator.generate(config))["mesocycle"]["config"]
        assert snapshot["volume_landmarks"] == {
            "chest": {"mv": 2, "mev": 4, "mav": 8, "mrv": 10},
            "triceps": {"mv": 4, "mev": 6, "mav": 12, "mrv": 18},
        }
        assert list(snapshot["volume_landmarks"]) == ["chest", "triceps"]
        assert snapshot["require_single_primary"] is False


class TestSessionRows:
    def test_one_row_per_session(self, plan: Mesocycle) -> None:
        rows = to_plan_records(plan)["sessions"]
        assert [r["id"] for r in rows] == [s.id for s in plan.sessions]
        assert all(r["mesocycle_id"] == "meso_1" for r in rows)
        assert all(r["status"] == "planned" for r in rows)

    def test_session_fields(self, plan: Mesocycle) -> None:
        first = to_plan_records(plan)["sessions"][0]
        session = plan.sessions[0]
        assert first["week_number"] == 1
        assert first["day_of_week"] == session.day.name.lower()
        assert first["scheduled_date"] == session.date.isoformat()
        assert first["domain"] == session.domain.name.lower()
        assert first["target_rpe"] == 7.0
        assert first["target_rir"] == 3

    def test_deload_rir(self, plan: Mesocycle) -> None:
        rows = to_plan_records(plan)["sessions"]
        deload = [r for r in rows if r["week_number"] == 5]
        assert {r["target_rir"] for r in deload} == {4}

    def test_endurance_has_no_template(self, plan: Mesocycle) -> None:
        rows = to_plan_records(plan)["sessions"]
        for row in rows:
            if row["domain"] == "strength":
                assert row["template"] is not None
            else:
                assert row["template"] is None
                assert row["estimated_total_sets"] == 0


class TestExerciseRows:
    def test_rows_point_at_sessions(self, plan: Mesocycle) -> None:
        records = to_plan_records(plan)
        session_ids = {r["id"] for r in records["sessions"]}
        assert records["exercises"]
        assert all(r["session_id"] in session_ids for r in records["exercises"])

    def test_order_starts_at_one(self, plan: Mesocycle) -> None:
        records = to_plan_records(plan)
        first_session = plan.sessions[0]
        rows = [r for r in records["exercises"] if r["session_id"] == first_session.id]
        assert [r["exercise_order"] for r in rows] == list(range(1, len(rows) + 1))
        assert [r["exercise_id"] for r in rows] == [p.exercise.id for p in first_session.exercises]

    def test_row_count_matches_plan(self, plan: Mesocycle) -> None:
        total = sum(len(s.exercises) for s in plan.sessions)
        assert len(to_plan_records(plan)["exercises"]) == total

    def test_muscle_lower_cased(self, plan: Mesocycle) -> None:
        rows = to_plan_records(plan)["exercises"]
        assert all(r["target_muscle"] == r["target_muscle"].lower() for r in rows)


class TestJson:
    def test_json_string_parses(self, plan: Mesocycle) -> None:
        text = to_plan_json_string(plan)
        assert json.loads(text) == to_plan_records(plan)

    def test_compact(self, plan: Mesocycle) -> None:
        assert "\n" not in to_plan_json_string(plan, indent=None)
