"""Frozen mesocycle configuration, the engine's only inbound value."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping

from periodization_engine.models.enums import (
    SESSIONS_BY_PRIORITY,
    DomainPriority,
    Equipment,
    MuscleGroup,
    TrainingDomain,
    TrainingLevel,
    WeekDay,
)
from periodization_engine.models.strength import VolumeLandmarks


def _empty_mapping() -> dict:
    return {}


@dataclass(frozen=True)
class DomainConfig:
    """Priority tier for one training domain."""

    domain: TrainingDomain
    priority: DomainPriority

    @property
    def sessions_per_week(self) -> int:
        return SESSIONS_BY_PRIORITY[self.priority]


@dataclass(frozen=True)
class MesocycleConfig:
    """Immutable snapshot of everything needed to generate one mesocycle.

    Each generate() call should receive its own config; nothing in here is
    mutated by the engine. The mapping fields are copied into plain dicts on
    construction so the config (and any Mesocycle holding it) pickles for
    worker processes. Treat them as read-only.

    Attributes:
        start_date: Any date in the first week; normalised to its Monday.
        volume_landmarks: Per-muscle overrides of the default RP landmarks.
        training_maxes: Training max (kg) keyed by exercise id; used to attach
            a suggested working weight to planned exercises.
        include_deload: When False, every week is a loading week.
        require_single_primary: Reject configs without exactly one PRIMARY
            domain. Set False for deliberately balanced plans.
    """

    name: str
    total_weeks: int
    start_date: date
    available_days: tuple[WeekDay, ...]
    strength_priority: DomainPriority = DomainPriority.PRIMARY
    rucking_priority: DomainPriority = DomainPriority.SECONDARY
    cardio_priority: DomainPriority = DomainPriority.MAINTENANCE
    preferred_session_duration_min: float = 60.0
    max_sessions_per_day: int = 1
    equipment: frozenset[Equipment] = field(default_factory=frozenset)
    volume_landmarks: Mapping[MuscleGroup, VolumeLandmarks] = field(
        default_factory=_empty_mapping
    )
    training_maxes: Mapping[str, float] = field(default_factory=_empty_mapping)
    training_level: TrainingLevel = TrainingLevel.INTERMEDIATE
    include_deload: bool = True
    require_single_primary: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "volume_landmarks", dict(self.volume_landmarks))
        object.__setattr__(self, "training_maxes", dict(self.training_maxes))

    @property
    def domain_configs(self) -> tuple[DomainConfig, ...]:
        return (
            DomainConfig(TrainingDomain.STRENGTH, self.strength_priority),
            DomainConfig(TrainingDomain.RUCKING, self.rucking_priority),
            DomainConfig(TrainingDomain.CARDIO, self.cardio_priority),
        )

    @property
    def requested_sessions_per_week(self) -> int:
        return sum(d.sessions_per_week for d in self.domain_configs)

    @property
    def weekly_capacity(self) -> int:
        return len(set(self.available_days)) * self.max_sessions_per_day
