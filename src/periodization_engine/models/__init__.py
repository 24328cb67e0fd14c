"""Data models for the periodization engine."""

from periodization_engine.models.config import DomainConfig, MesocycleConfig
from periodization_engine.models.enums import (
    Confidence,
    DomainPriority,
    Equipment,
    ExerciseCategory,
    FatigueLevel,
    LiftMaxMethod,
    MesocycleStatus,
    MovementPattern,
    MuscleGroup,
    ProgressionAction,
    SetType,
    TargetPriority,
    TemplateId,
    TrainingDomain,
    TrainingLevel,
    VolumeStatus,
    WeekDay,
)
from periodization_engine.models.exercise import Exercise
from periodization_engine.models.mesocycle import (
    Mesocycle,
    MesocycleProgress,
    MesocycleSession,
    MesocycleWeek,
)
from periodization_engine.models.session import (
    GeneratedSession,
    PlannedExercise,
    PlannedSession,
    WeekTemplate,
)
from periodization_engine.models.strength import (
    E1RMResult,
    ExercisePerformance,
    LiftMaxEntry,
    MuscleVolume,
    ProgressionResult,
    SetPerformance,
    VolumeLandmarks,
)

__all__ = [
    "Confidence",
    "DomainConfig",
    "DomainPriority",
    "E1RMResult",
    "Equipment",
    "Exercise",
    "ExerciseCategory",
    "ExercisePerformance",
    "FatigueLevel",
    "GeneratedSession",
    "LiftMaxEntry",
    "LiftMaxMethod",
    "Mesocycle",
    "MesocycleConfig",
    "MesocycleProgress",
    "MesocycleSession",
    "MesocycleStatus",
    "MesocycleWeek",
    "MovementPattern",
    "MuscleGroup",
    "MuscleVolume",
    "PlannedExercise",
    "PlannedSession",
    "ProgressionAction",
    "ProgressionResult",
    "SetPerformance",
    "SetType",
    "TargetPriority",
    "TemplateId",
    "TrainingDomain",
    "TrainingLevel",
    "VolumeLandmarks",
    "VolumeStatus",
    "WeekDay",
    "WeekTemplate",
]
