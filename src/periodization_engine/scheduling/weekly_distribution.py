"""Weekly distribution: place each domain's sessions on the athlete's days.

Greedy and per-domain: the highest-priority domain is spread first for the
best recovery spacing, lower-priority domains fill what is left. This is a
heuristic, not an optimal solver; it knows nothing about muscles or fatigue
beyond "don't stack the same day too often".
"""

from __future__ import annotations

import logging
from typing import Sequence

from periodization_engine.identity import IdentitySource, UuidIdentitySource
from periodization_engine.models.config import DomainConfig, MesocycleConfig
from periodization_engine.models.enums import (
    LOAD_SCORE_WEIGHT,
    SPACING_SCORE_WEIGHT,
    TrainingDomain,
    WeekDay,
)
from periodization_engine.models.session import PlannedSession, WeekTemplate

logger = logging.getLogger(__name__)

# (session type label, description), cycled per domain
SESSION_LABELS: dict[TrainingDomain, tuple[tuple[str, str], ...]] = {
    TrainingDomain.STRENGTH: (
        ("Upper Push", "Chest, shoulders, triceps focus"),
        ("Lower", "Quads, hamstrings, glutes focus"),
        ("Upper Pull", "Back, biceps, rear delts focus"),
        ("Full Body", "Compound movements all muscle groups"),
    ),
    TrainingDomain.RUCKING: (
        ("Endurance Ruck", "Longer duration, moderate load"),
        ("Heavy Ruck", "Shorter duration, heavier load"),
        ("Recovery Ruck", "Light load, easy pace"),
    ),
    TrainingDomain.CARDIO: (
        ("Easy Cardio", "Zone 2, conversational pace"),
        ("Tempo", "Moderate-high intensity, sustained"),
        ("Intervals", "High intensity intervals"),
        ("Long Session", "Extended duration, low intensity"),
    ),
}


def _day_score(
    day: WeekDay, last_index: int, ideal_spacing: int, load: int, max_per_day: int
) -> int:
    spacing = min(abs(day.offset - last_index), ideal_spacing)
    return SPACING_SCORE_WEIGHT * spacing + LOAD_SCORE_WEIGHT * (max_per_day - load)


def distribute_sessions(
    domains: Sequence[DomainConfig],
    available_days: Sequence[WeekDay],
    max_sessions_per_day: int,
    session_duration_min: float,
    id_source: IdentitySource | None = None,
) -> list[PlannedSession]:
    """Assign every domain's weekly sessions to days.

    Algorithm, per domain in priority order (PRIMARY first, stable):
    1. ideal_spacing = available day count // sessions needed
    2. Score each day with free capacity:
       10 × min(|day − last assigned day|, ideal_spacing) + 5 × free slots;
       best score wins, ties go to the earlier weekday.
    3. Give the winner the domain's next session label (cyclic) and
       advance the last assigned day.

    Sessions that cannot be placed because every day is full are dropped
    and logged at WARNING.

    Args:
        domains: Domain priority tiers (session counts derive from them).
        available_days: Days the athlete can train.
        max_sessions_per_day: Per-day cap.
        session_duration_min: Duration stamped on every session.
        id_source: Identity source for session ids.

    Returns:
        Sessions sorted by weekday, then intra-day order.
    """
    ids = id_source or UuidIdentitySource()
    days = sorted(set(available_days))
    load: dict[WeekDay, int] = {day: 0 for day in days}
    sessions: list[PlannedSession] = []

    for config in sorted(domains, key=lambda d: d.priority):
        needed = config.sessions_per_week
        if needed <= 0 or not days:
            continue
        labels = SESSION_LABELS[config.domain]
        ideal_spacing = len(days) // needed
        last_index = -ideal_spacing
        assigned = 0

        for _ in range(needed):
            open_days = [d for d in days if load[d] < max_sessions_per_day]
            if not open_days:
                break
            # max() keeps the first of equal scores; days are in weekday order
            best = max(
                open_days,
                key=lambda d: _day_score(d, last_index, ideal_spacing, load[d], max_sessions_per_day),
            )
            session_type, description = labels[assigned % len(labels)]
            load[best] += 1
            sessions.append(
                PlannedSession(
                    id=ids.next_id("session"),
                    day=best,
                    domain=config.domain,
                    session_type=session_type,
                    description=description,
                    estimated_duration_min=session_duration_min,
                    order=load[best],
                )
            )
            last_index = best.offset
            assigned += 1

        if assigned < needed:
            logger.warning(
                "Dropped %d of %d %s sessions: %d days x %d per day are full",
                needed - assigned,
                needed,
                config.domain.name,
                len(days),
                max_sessions_per_day,
            )

    return sorted(sessions, key=lambda s: (s.day, s.order))


def generate_week_template(
    config: MesocycleConfig, id_source: IdentitySource | None = None
) -> WeekTemplate:
    """One-week schedule for a mesocycle config."""
    sessions = distribute_sessions(
        config.domain_configs,
        config.available_days,
        config.max_sessions_per_day,
        config.preferred_session_duration_min,
        id_source,
    )
    return WeekTemplate(
        sessions=tuple(sessions),
        session_duration_min=config.preferred_session_duration_min,
    )
