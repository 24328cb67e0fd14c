"""Exercise catalog and selection."""

from periodization_engine.catalog.exercise_library import (
    EXERCISE_LIBRARY,
    ExerciseCatalog,
    default_catalog,
)
from periodization_engine.catalog.selector import (
    ExerciseSelector,
    equipment_satisfied,
    exercises_for_equipment,
)

__all__ = [
    "EXERCISE_LIBRARY",
    "ExerciseCatalog",
    "ExerciseSelector",
    "default_catalog",
    "equipment_satisfied",
    "exercises_for_equipment",
]
