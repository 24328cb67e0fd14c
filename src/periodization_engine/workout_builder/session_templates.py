"""Strength session templates: which muscles a session trains and how hard.

Each template lists muscle targets with a volume tier and an exercise
quota. The SessionBuilder expands a template into concrete exercises for a
given week.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from periodization_engine.models.enums import (
    FatigueLevel,
    MuscleGroup,
    TargetPriority,
    TemplateId,
)


@dataclass(frozen=True)
class MuscleTarget:
    """One muscle a session trains.

    Attributes:
        priority: PRIMARY targets get 3 base sets per exercise, SECONDARY 2.
        exercise_count: How many exercises to select for this muscle.
    """

    muscle: MuscleGroup
    priority: TargetPriority
    exercise_count: int


@dataclass(frozen=True)
class SessionTemplate:
    """Complete template for a strength session.

    Attributes:
        id: Template key.
        name: Display name.
        description: One-line focus summary.
        muscle_targets: Targets in expansion order.
        estimated_duration_min: Nominal session length.
        fatigue_level: Systemic cost, used when spacing hard days.
    """

    id: TemplateId
    name: str
    description: str
    muscle_targets: tuple[MuscleTarget, ...]
    estimated_duration_min: int
    fatigue_level: FatigueLevel


def _primary(muscle: MuscleGroup, count: int) -> MuscleTarget:
    return MuscleTarget(muscle, TargetPriority.PRIMARY, count)


def _secondary(muscle: MuscleGroup, count: int) -> MuscleTarget:
    return MuscleTarget(muscle, TargetPriority.SECONDARY, count)


# ---------------------------------------------------------------------------
# Template definitions: upper/lower, full body, and push/pull/legs
# ---------------------------------------------------------------------------

SESSION_TEMPLATES: Mapping[TemplateId, SessionTemplate] = MappingProxyType({
    TemplateId.UPPER_PUSH: SessionTemplate(
        id=TemplateId.UPPER_PUSH,
        name="Upper Push",
        description="Chest, shoulders, and triceps focused",
        muscle_targets=(
            _primary(MuscleGroup.CHEST, 2),
            _secondary(MuscleGroup.FRONT_DELTS, 1),
            _secondary(MuscleGroup.SIDE_DELTS, 1),
            _secondary(MuscleGroup.TRICEPS, 2),
        ),
        estimated_duration_min=60,
        fatigue_level=FatigueLevel.MEDIUM,
    ),
    TemplateId.UPPER_PULL: SessionTemplate(
        id=TemplateId.UPPER_PULL,
        name="Upper Pull",
        description="Back, rear delts, and biceps focused",
        muscle_targets=(
            _primary(MuscleGroup.BACK, 3),
            _secondary(MuscleGroup.REAR_DELTS, 1),
            _secondary(MuscleGroup.BICEPS, 2),
        ),
        estimated_duration_min=60,
        fatigue_level=FatigueLevel.MEDIUM,
    ),
    TemplateId.LOWER: SessionTemplate(
        id=TemplateId.LOWER,
        name="Lower Body",
        description="Quads, hamstrings, glutes, and calves",
        muscle_targets=(
            _primary(MuscleGroup.QUADS, 2),
            _primary(MuscleGroup.HAMSTRINGS, 2),
            _secondary(MuscleGroup.GLUTES, 1),
            _secondary(MuscleGroup.CALVES, 1),
        ),
        estimated_duration_min=60,
        fatigue_level=FatigueLevel.HIGH,
    ),
    TemplateId.FULL_BODY: SessionTemplate(
        id=TemplateId.FULL_BODY,
        name="Full Body",
        description="All major muscle groups",
        muscle_targets=(
            _primary(MuscleGroup.CHEST, 1),
            _primary(MuscleGroup.BACK, 1),
            _primary(MuscleGroup.QUADS, 1),
            _secondary(MuscleGroup.HAMSTRINGS, 1),
            _secondary(MuscleGroup.SIDE_DELTS, 1),
            _secondary(MuscleGroup.BICEPS, 1),
            _secondary(MuscleGroup.TRICEPS, 1),
        ),
        estimated_duration_min=75,
        fatigue_level=FatigueLevel.HIGH,
    ),
    TemplateId.PUSH: SessionTemplate(
        id=TemplateId.PUSH,
        name="Push Day",
        description="Chest, shoulders, and triceps",
        muscle_targets=(
            _primary(MuscleGroup.CHEST, 3),
            _secondary(MuscleGroup.FRONT_DELTS, 1),
            _secondary(MuscleGroup.SIDE_DELTS, 2),
            _secondary(MuscleGroup.TRICEPS, 2),
        ),
        estimated_duration_min=70,
        fatigue_level=FatigueLevel.MEDIUM,
    ),
    TemplateId.PULL: SessionTemplate(
        id=TemplateId.PULL,
        name="Pull Day",
        description="Back, rear delts, and biceps",
        muscle_targets=(
            _primary(MuscleGroup.BACK, 4),
            _secondary(MuscleGroup.REAR_DELTS, 2),
            _secondary(MuscleGroup.BICEPS, 2),
        ),
        estimated_duration_min=70,
        fatigue_level=FatigueLevel.MEDIUM,
    ),
    TemplateId.LEGS: SessionTemplate(
        id=TemplateId.LEGS,
        name="Leg Day",
        description="Complete lower body workout",
        muscle_targets=(
            _primary(MuscleGroup.QUADS, 3),
            _primary(MuscleGroup.HAMSTRINGS, 2),
            _secondary(MuscleGroup.GLUTES, 1),
            _secondary(MuscleGroup.CALVES, 2),
        ),
        estimated_duration_min=75,
        fatigue_level=FatigueLevel.HIGH,
    ),
})

# Scheduler session labels → template; anything else gets FULL_BODY
SESSION_LABEL_TEMPLATES: Mapping[str, TemplateId] = MappingProxyType({
    "Upper Push": TemplateId.UPPER_PUSH,
    "Upper Pull": TemplateId.UPPER_PULL,
    "Lower": TemplateId.LOWER,
    "Full Body": TemplateId.FULL_BODY,
    "Push": TemplateId.PUSH,
    "Pull": TemplateId.PULL,
    "Legs": TemplateId.LEGS,
})

DEFAULT_TEMPLATE_ID = TemplateId.FULL_BODY


class SessionTemplateCatalog:
    """Immutable set of templates plus the session-label mapping.

    The default catalog wraps SESSION_TEMPLATES; tests may pass their own.
    """

    def __init__(
        self,
        templates: Iterable[SessionTemplate] | None = None,
        label_map: Mapping[str, TemplateId] | None = None,
        default_id: TemplateId = DEFAULT_TEMPLATE_ID,
    ) -> None:
        source = SESSION_TEMPLATES.values() if templates is None else templates
        self._templates = {t.id: t for t in source}
        self._label_map = dict(SESSION_LABEL_TEMPLATES if label_map is None else label_map)
        if default_id not in self._templates:
            raise ValueError(f"default template {default_id.name} not in catalog")
        self._default_id = default_id

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[SessionTemplate]:
        return iter(self._templates.values())

    def get(self, template_id: TemplateId) -> SessionTemplate:
        """Look up a template.

        Raises:
            KeyError: If the catalog has no such template.
        """
        return self._templates[template_id]

    def for_session_label(self, label: str) -> SessionTemplate:
        """Template for a scheduler label such as "Upper Push"; unknown → default."""
        template_id = self._label_map.get(label, self._default_id)
        return self._templates.get(template_id, self._templates[self._default_id])


def get_template(template_id: TemplateId) -> SessionTemplate:
    """Look up a built-in template.

    Raises:
        KeyError: If no template is defined for the id.
    """
    return SESSION_TEMPLATES[template_id]
