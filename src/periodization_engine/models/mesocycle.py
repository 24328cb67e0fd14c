"""Mesocycle models: the fully materialized multi-week plan.

A Mesocycle is a read-mostly snapshot. Completion tracking belongs to the
logging collaborator; ``with_session_completed`` returns a new snapshot
keyed by session id rather than mutating in place.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING

from periodization_engine.models.config import MesocycleConfig
from periodization_engine.models.enums import MesocycleStatus, TrainingDomain, WeekDay
from periodization_engine.models.session import PlannedExercise
from periodization_engine.models.strength import MuscleVolume

if TYPE_CHECKING:
    from periodization_engine.workout_builder.session_templates import SessionTemplate


@dataclass(frozen=True)
class MesocycleSession:
    """A templated session bound to a calendar date for one week.

    Non-strength sessions are placeholders: no template, no exercises.
    ``completed`` is always False when produced by the engine.
    """

    id: str
    week_number: int
    day: WeekDay
    date: date
    session_type: str
    domain: TrainingDomain
    template: SessionTemplate | None = None
    exercises: tuple[PlannedExercise, ...] = field(default_factory=tuple)
    total_sets: int = 0
    estimated_duration_min: float = 0.0
    target_rpe: float = 7.0
    order: int = 1
    completed: bool = False

    @property
    def is_strength(self) -> bool:
        return self.domain == TrainingDomain.STRENGTH


@dataclass(frozen=True)
class MesocycleWeek:
    """One week of the mesocycle with its progression parameters."""

    week_number: int
    start_date: date
    end_date: date
    is_deload: bool
    volume_multiplier: float
    target_rpe: float
    sessions: tuple[MesocycleSession, ...] = field(default_factory=tuple)
    volume_report: tuple[MuscleVolume, ...] = field(default_factory=tuple)

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    @property
    def total_sets(self) -> int:
        return sum(s.total_sets for s in self.sessions)

    @property
    def total_duration_min(self) -> float:
        return sum(s.estimated_duration_min for s in self.sessions)


@dataclass(frozen=True)
class MesocycleProgress:
    total_sessions: int
    completed_sessions: int
    percent_complete: int
    current_week: int
    total_weeks: int


@dataclass(frozen=True)
class Mesocycle:
    """Output of MesocycleGenerator.generate()."""

    id: str
    config: MesocycleConfig
    weeks: tuple[MesocycleWeek, ...]
    created_at: datetime
    status: MesocycleStatus = MesocycleStatus.ACTIVE

    @property
    def sessions(self) -> tuple[MesocycleSession, ...]:
        return tuple(s for w in self.weeks for s in w.sessions)

    @property
    def start_date(self) -> date | None:
        return self.weeks[0].start_date if self.weeks else None

    @property
    def end_date(self) -> date | None:
        return self.weeks[-1].end_date if self.weeks else None

    @property
    def deload_weeks(self) -> tuple[MesocycleWeek, ...]:
        return tuple(w for w in self.weeks if w.is_deload)

    def sessions_for_date(self, day: date) -> tuple[MesocycleSession, ...]:
        """All sessions scheduled on a calendar date, in intra-day order."""
        return tuple(s for s in self.sessions if s.date == day)

    def session_for_date(self, day: date) -> MesocycleSession | None:
        """First session scheduled on a date, or None."""
        for session in self.sessions:
            if session.date == day:
                return session
        return None

    def week_for_date(self, day: date) -> MesocycleWeek | None:
        """The week whose date range contains ``day`` (the current week for today)."""
        for week in self.weeks:
            if week.contains(day):
                return week
        return None

    def session_by_id(self, session_id: str) -> MesocycleSession | None:
        for session in self.sessions:
            if session.id == session_id:
                return session
        return None

    def progress(self, today: date) -> MesocycleProgress:
        sessions = self.sessions
        completed = sum(1 for s in sessions if s.completed)
        total = len(sessions)
        week = self.week_for_date(today)
        return MesocycleProgress(
            total_sessions=total,
            completed_sessions=completed,
            percent_complete=int(completed * 100 / total + 0.5) if total else 0,
            current_week=week.week_number if week else 1,
            total_weeks=len(self.weeks),
        )

    def with_session_completed(self, session_id: str, completed: bool = True) -> Mesocycle:
        """Return a copy with one session's completion flag set.

        Raises:
            KeyError: If no session has that id.
        """
        if self.session_by_id(session_id) is None:
            raise KeyError(session_id)
        weeks = tuple(
            dataclasses.replace(
                week,
                sessions=tuple(
                    dataclasses.replace(s, completed=completed) if s.id == session_id else s
                    for s in week.sessions
                ),
            )
            for week in self.weeks
        )
        return dataclasses.replace(self, weeks=weeks)


def format_session_summary(session: MesocycleSession) -> str:
    """One-line summary, e.g. ``'18 sets · RPE 7.5 · ~45min'``."""
    rpe = f"{session.target_rpe:g}"
    duration = f"~{session.estimated_duration_min:.0f}min"
    if session.is_strength:
        return f"{session.total_sets} sets · RPE {rpe} · {duration}"
    return f"RPE {rpe} · {duration}"
