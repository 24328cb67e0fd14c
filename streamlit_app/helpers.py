"""Utility helpers bridging the Streamlit UI and the periodization engine.

Pure functions for formatting, config construction from the profile form,
table building, and profile persistence.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pandas as pd

from config import PROFILES_DIR
from periodization_engine.math.training_max import (
    KEY_LIFTS,
    best_lift_max,
    lift_max_from_bodyweight,
    lift_max_from_set,
    lift_max_from_test,
)
from periodization_engine.models.config import MesocycleConfig
from periodization_engine.models.enums import (
    DomainPriority,
    Equipment,
    TrainingDomain,
    TrainingLevel,
    VolumeStatus,
    WeekDay,
)
from periodization_engine.models.mesocycle import Mesocycle, MesocycleWeek
from periodization_engine.models.strength import LiftMaxEntry

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(minutes: float) -> str:
    """Convert minutes to human string. e.g. 90.0 -> '1h 30m'."""
    if minutes <= 0:
        return "0m"
    h = int(minutes) // 60
    m = int(minutes) % 60
    if h > 0 and m > 0:
        return f"{h}h {m}m"
    if h > 0:
        return f"{h}h"
    return f"{m}m"


def format_weight(weight_kg: float | None) -> str:
    """e.g. 102.5 -> '102.5 kg', 100.0 -> '100 kg'. Missing or zero -> '--'."""
    if not weight_kg or weight_kg <= 0:
        return "--"
    return f"{weight_kg:g} kg"


def format_rest(seconds: int) -> str:
    """Rest interval as 'M:SS'. e.g. 150 -> '2:30'."""
    if seconds <= 0:
        return "--"
    return f"{seconds // 60}:{seconds % 60:02d}"


def format_rep_range(low: int, high: int) -> str:
    return f"{low}" if low == high else f"{low}-{high}"


# ---------------------------------------------------------------------------
# Color maps
# ---------------------------------------------------------------------------

DOMAIN_COLORS: dict[TrainingDomain, str] = {
    TrainingDomain.STRENGTH: "#E74C3C",   # red
    TrainingDomain.RUCKING: "#A67C52",    # tan
    TrainingDomain.CARDIO: "#3498DB",     # blue
}

VOLUME_STATUS_COLORS: dict[VolumeStatus, str] = {
    VolumeStatus.LOW: "#AED6F1",
    VolumeStatus.OPTIMAL: "#82E0AA",
    VolumeStatus.HIGH: "#F5B041",
    VolumeStatus.EXCESSIVE: "#E74C3C",
}

DOMAIN_LABELS: dict[TrainingDomain, str] = {
    TrainingDomain.STRENGTH: "Strength",
    TrainingDomain.RUCKING: "Rucking",
    TrainingDomain.CARDIO: "Cardio",
}

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def label(member: object) -> str:
    """Enum member name as a UI label. e.g. PULL_UP_BAR -> 'Pull Up Bar'."""
    return member.name.replace("_", " ").title()  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# Config construction
# ---------------------------------------------------------------------------

# Key lifts whose catalog exercise id differs from the lift key
_KEY_LIFT_EXERCISE_IDS: dict[str, str] = {"overhead_press": "ohp"}


def _parse_date(value: date | str | None) -> date:
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        return date.fromisoformat(value)
    return date.today()


def lift_max_entries(profile: dict) -> dict[str, LiftMaxEntry]:
    """Best-known max per key lift from the onboarding fields.

    ``profile["lifts"]`` maps a key-lift key to either ``{"tested_kg": ...}``
    or ``{"weight_kg": ..., "reps": ..., "rir": ...}``. Lifts without usable
    data fall back to a bodyweight estimate when ``bodyweight_kg`` is set.
    """
    level = TrainingLevel[profile.get("training_level", "INTERMEDIATE")]
    bodyweight = float(profile.get("bodyweight_kg", 0) or 0)
    lifts = profile.get("lifts", {})

    entries: dict[str, LiftMaxEntry] = {}
    for lift in KEY_LIFTS:
        data = lifts.get(lift.key, {})
        entry: LiftMaxEntry | None = None
        if data.get("tested_kg"):
            entry = lift_max_from_test(lift.key, float(data["tested_kg"]))
        if data.get("weight_kg") and data.get("reps"):
            logged = lift_max_from_set(
                lift.key,
                float(data["weight_kg"]),
                int(data["reps"]),
                int(data.get("rir") or 0),
            )
            if logged.e1rm > 0:
                entry = best_lift_max(entry, logged)
        if entry is None and bodyweight > 0:
            entry = lift_max_from_bodyweight(lift.key, bodyweight, level)
        if entry is not None and entry.training_max > 0:
            entries[lift.key] = entry
    return entries


def build_mesocycle_config(profile: dict) -> MesocycleConfig:
    """Convert a UI form dict into a frozen MesocycleConfig.

    Enum fields are stored by member name so profiles survive a JSON round
    trip. Training maxes are keyed by catalog exercise id.
    """
    maxes = {
        _KEY_LIFT_EXERCISE_IDS.get(key, key): entry.training_max
        for key, entry in lift_max_entries(profile).items()
    }
    return MesocycleConfig(
        name=profile.get("name", "Mesocycle"),
        total_weeks=int(profile.get("total_weeks", 5)),
        start_date=_parse_date(profile.get("start_date")),
        available_days=tuple(WeekDay[d] for d in profile.get("available_days", [])),
        strength_priority=DomainPriority[profile.get("strength_priority", "PRIMARY")],
        rucking_priority=DomainPriority[profile.get("rucking_priority", "SECONDARY")],
        cardio_priority=DomainPriority[profile.get("cardio_priority", "MAINTENANCE")],
        preferred_session_duration_min=float(profile.get("session_duration_min", 60)),
        max_sessions_per_day=int(profile.get("max_sessions_per_day", 1)),
        equipment=frozenset(Equipment[e] for e in profile.get("equipment", [])),
        training_maxes=maxes,
        training_level=TrainingLevel[profile.get("training_level", "INTERMEDIATE")],
        include_deload=bool(profile.get("include_deload", True)),
    )


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def mesocycle_frame(mesocycle: Mesocycle) -> pd.DataFrame:
    """One row per session across the whole mesocycle."""
    rows = [
        {
            "Week": s.week_number,
            "Date": s.date,
            "Day": DAY_NAMES[s.day.offset],
            "Session": s.session_type,
            "Domain": DOMAIN_LABELS[s.domain],
            "Sets": s.total_sets,
            "RPE": s.target_rpe,
            "Duration": format_duration(s.estimated_duration_min),
        }
        for s in mesocycle.sessions
    ]
    return pd.DataFrame(
        rows, columns=["Week", "Date", "Day", "Session", "Domain", "Sets", "RPE", "Duration"]
    )


def volume_frame(week: MesocycleWeek) -> pd.DataFrame:
    """Weekly sets per muscle against the week's target, indexed by muscle."""
    df = pd.DataFrame(
        [
            {
                "Muscle": label(row.muscle),
                "Sets": row.sets,
                "Target": row.target,
                "Status": label(row.status),
            }
            for row in week.volume_report
        ],
        columns=["Muscle", "Sets", "Target", "Status"],
    )
    return df.set_index("Muscle")


# ---------------------------------------------------------------------------
# Profile persistence
# ---------------------------------------------------------------------------


def _ensure_profiles_dir() -> Path:
    PROFILES_DIR.mkdir(parents=True, exist_ok=True)
    return PROFILES_DIR


def save_profile(name: str, profile: dict) -> Path:
    """Save a profile dict as JSON. Returns the file path."""
    d = _ensure_profiles_dir()
    # Sanitise filename
    safe = "".join(c if c.isalnum() or c in "-_ " else "" for c in name).strip()
    if not safe:
        safe = "profile"
    path = d / f"{safe}.json"
    serializable = {
        k: v.isoformat() if isinstance(v, date) else v for k, v in profile.items()
    }
    with open(path, "w") as f:
        json.dump(serializable, f, indent=2)
    return path


def load_profile(name: str) -> dict:
    """Load a profile dict from JSON. ``start_date`` comes back as a date."""
    path = PROFILES_DIR / f"{name}.json"
    with open(path) as f:
        data = json.load(f)
    if isinstance(data.get("start_date"), str):
        data["start_date"] = date.fromisoformat(data["start_date"])
    return data


def list_profiles() -> list[str]:
    """List available profile names (without .json extension)."""
    d = _ensure_profiles_dir()
    return sorted(p.stem for p in d.glob("*.json"))
