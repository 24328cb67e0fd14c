"""Workout builder: expands strength session templates into exercises."""

from periodization_engine.workout_builder.builder import SessionBuilder
from periodization_engine.workout_builder.session_templates import (
    SESSION_TEMPLATES,
    MuscleTarget,
    SessionTemplate,
    SessionTemplateCatalog,
    get_template,
)

__all__ = [
    "MuscleTarget",
    "SESSION_TEMPLATES",
    "SessionBuilder",
    "SessionTemplate",
    "SessionTemplateCatalog",
    "get_template",
]
