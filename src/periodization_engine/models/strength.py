"""Strength-calculation value types: E1RM, lift maxes, landmarks, progression."""

from __future__ import annotations

from dataclasses import dataclass, field

from periodization_engine.models.enums import (
    Confidence,
    LiftMaxMethod,
    MuscleGroup,
    ProgressionAction,
    SetType,
    VolumeStatus,
)


@dataclass(frozen=True)
class E1RMResult:
    """Estimated one-rep max plus how far it can be trusted.

    ``value == 0`` is the sentinel for invalid input; check it before using
    the value as a divisor or multiplier.
    """

    value: float
    formula: str  # "direct", "epley" or "invalid"
    confidence: Confidence

    @property
    def is_valid(self) -> bool:
        return self.value > 0


@dataclass(frozen=True)
class LiftMaxEntry:
    """Best-known max for one lift. The engine never stores history."""

    exercise_key: str
    method: LiftMaxMethod
    e1rm: float
    training_max: float
    confidence: Confidence = Confidence.MEDIUM


@dataclass(frozen=True)
class VolumeLandmarks:
    """Weekly set landmarks for one muscle group (MV ≤ MEV ≤ MAV ≤ MRV)."""

    mv: int
    mev: int
    mav: int
    mrv: int

    @property
    def is_ordered(self) -> bool:
        return self.mv <= self.mev <= self.mav <= self.mrv


@dataclass(frozen=True)
class MuscleVolume:
    """One row of a weekly volume report."""

    muscle: MuscleGroup
    sets: int
    target: int
    status: VolumeStatus


@dataclass(frozen=True)
class SetPerformance:
    """A single logged set. ``rir=None`` means reserve reps were not recorded."""

    weight_kg: float
    reps: int
    rir: int | None = None
    set_type: SetType | None = None

    @property
    def is_working(self) -> bool:
        return self.set_type is None or self.set_type == SetType.WORKING


@dataclass(frozen=True)
class ExercisePerformance:
    """All sets of one exercise in one session, with the prescription they chased."""

    exercise_id: str
    sets: tuple[SetPerformance, ...] = field(default_factory=tuple)
    rep_range_min: int = 8
    rep_range_max: int = 12
    target_rpe: float = 8.0

    @property
    def working_sets(self) -> tuple[SetPerformance, ...]:
        return tuple(s for s in self.sets if s.is_working)


@dataclass(frozen=True)
class ProgressionResult:
    """Next-session load recommendation for one exercise."""

    action: ProgressionAction
    next_weight: float
    reason: str
    confidence: Confidence
    rule_id: str = ""
