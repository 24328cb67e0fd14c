"""Session-level models: the weekly template and materialized exercise blocks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from periodization_engine.models.enums import MAX_RPE, MuscleGroup, TrainingDomain, WeekDay
from periodization_engine.models.exercise import Exercise

if TYPE_CHECKING:
    from periodization_engine.workout_builder.session_templates import SessionTemplate


@dataclass(frozen=True)
class PlannedSession:
    """One slot of the weekly template produced by the scheduler.

    ``order`` is 1-based and only matters when a day holds more than one
    session.
    """

    id: str
    day: WeekDay
    domain: TrainingDomain
    session_type: str
    description: str
    estimated_duration_min: float
    order: int = 1


@dataclass(frozen=True)
class PlannedExercise:
    """A concrete exercise prescription inside one week's session.

    Built fresh for every week because ``sets`` scales with that week's
    volume multiplier.
    """

    exercise: Exercise
    muscle: MuscleGroup
    sets: int
    rep_range_min: int
    rep_range_max: int
    target_rpe: float
    rest_seconds: int
    notes: str = ""
    suggested_weight_kg: float | None = None

    @property
    def target_rir(self) -> int:
        return int(MAX_RPE - self.target_rpe + 0.5)


@dataclass(frozen=True)
class GeneratedSession:
    """Output of SessionBuilder.expand() for one strength session."""

    template: SessionTemplate
    exercises: tuple[PlannedExercise, ...] = field(default_factory=tuple)
    total_sets: int = 0
    estimated_duration_min: int = 0
    target_rpe: float = 8.0

    @property
    def unfilled_muscles(self) -> tuple[MuscleGroup, ...]:
        """Template targets that produced no exercise."""
        covered = {ex.muscle for ex in self.exercises}
        return tuple(
            t.muscle for t in self.template.muscle_targets if t.muscle not in covered
        )


@dataclass(frozen=True)
class WeekTemplate:
    """The canonical one-week schedule replicated across a mesocycle."""

    sessions: tuple[PlannedSession, ...]
    session_duration_min: float

    @property
    def total_sessions(self) -> int:
        return len(self.sessions)

    @property
    def total_hours(self) -> float:
        return self.total_sessions * self.session_duration_min / 60

    @property
    def domain_breakdown(self) -> dict[TrainingDomain, int]:
        """Session count per domain (every domain present, zero if unscheduled)."""
        counts = {domain: 0 for domain in TrainingDomain}
        for session in self.sessions:
            counts[session.domain] += 1
        return counts

    def sessions_for_day(self, day: WeekDay) -> tuple[PlannedSession, ...]:
        return tuple(s for s in self.sessions if s.day == day)
