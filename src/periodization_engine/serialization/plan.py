"""Row-shaped serialization of a Mesocycle for a persistence collaborator.

Produces one mesocycle row, one row per session and one row per planned
exercise. Session rows carry the engine's own ids, so exercise rows point at
them directly and nothing has to be matched back by date or type.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from enum import Enum

from periodization_engine.math.periodization import rpe_to_rir
from periodization_engine.models.mesocycle import Mesocycle, MesocycleSession
from periodization_engine.models.session import PlannedExercise

_PLANNED_STATUS = "planned"


def _key(value: Enum) -> str:
    return value.name.lower()


def to_plan_records(mesocycle: Mesocycle) -> dict:
    """Convert a Mesocycle into ``{"mesocycle", "sessions", "exercises"}`` rows."""
    config = mesocycle.config
    sessions = []
    exercises = []
    for session in mesocycle.sessions:
        sessions.append(_session_row(mesocycle.id, session))
        for order, planned in enumerate(session.exercises, start=1):
            exercises.append(_exercise_row(session.id, order, planned))

    deload = mesocycle.deload_weeks
    return {
        "mesocycle": {
            "id": mesocycle.id,
            "name": config.name,
            "start_date": mesocycle.start_date.isoformat() if mesocycle.start_date else None,
            "end_date": mesocycle.end_date.isoformat() if mesocycle.end_date else None,
            "total_weeks": config.total_weeks,
            "deload_week": deload[0].week_number if deload else None,
            "status": _key(mesocycle.status),
            "created_at": mesocycle.created_at.isoformat(),
            "config": _config_dict(mesocycle),
        },
        "sessions": sessions,
        "exercises": exercises,
    }


def to_plan_json_string(mesocycle: Mesocycle, indent: int = 2) -> str:
    """Convert a Mesocycle to a JSON string of plan records."""
    return json.dumps(to_plan_records(mesocycle), indent=indent)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _session_row(mesocycle_id: str, session: MesocycleSession) -> dict:
    return {
        "id": session.id,
        "mesocycle_id": mesocycle_id,
        "week_number": session.week_number,
        "day_of_week": _key(session.day),
        "scheduled_date": session.date.isoformat(),
        "session_type": session.session_type,
        "domain": _key(session.domain),
        "template": _key(session.template.id) if session.template else None,
        "order": session.order,
        "target_rpe": session.target_rpe,
        "target_rir": rpe_to_rir(session.target_rpe),
        "estimated_duration_mins": session.estimated_duration_min,
        "estimated_total_sets": session.total_sets,
        "status": _PLANNED_STATUS,
    }


def _exercise_row(session_id: str, order: int, planned: PlannedExercise) -> dict:
    return {
        "session_id": session_id,
        "exercise_id": planned.exercise.id,
        "exercise_name": planned.exercise.name,
        "exercise_order": order,
        "target_muscle": _key(planned.muscle),
        "sets": planned.sets,
        "rep_range_min": planned.rep_range_min,
        "rep_range_max": planned.rep_range_max,
        "target_rpe": planned.target_rpe,
        "target_rir": planned.target_rir,
        "rest_seconds": planned.rest_seconds,
        "suggested_weight_kg": planned.suggested_weight_kg,
        "notes": planned.notes or None,
    }


def _config_dict(mesocycle: Mesocycle) -> dict:
    config = mesocycle.config
    return {
        "available_days": [_key(d) for d in config.available_days],
        "strength_priority": _key(config.strength_priority),
        "rucking_priority": _key(config.rucking_priority),
        "cardio_priority": _key(config.cardio_priority),
        "preferred_session_duration_min": config.preferred_session_duration_min,
        "max_sessions_per_day": config.max_sessions_per_day,
        "equipment": sorted(_key(e) for e in config.equipment),
        "training_level": _key(config.training_level),
        "include_deload": config.include_deload,
        "training_maxes": dict(config.training_maxes),
        "volume_landmarks": {
            _key(muscle): {"mv": lm.mv, "mev": lm.mev, "mav": lm.mav, "mrv": lm.mrv}
            for muscle, lm in sorted(config.volume_landmarks.items())
        },
        "require_single_primary": config.require_single_primary,
    }
