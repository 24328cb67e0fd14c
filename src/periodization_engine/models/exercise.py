"""Exercise catalog entry. Static, never mutated at runtime."""

from __future__ import annotations

from dataclasses import dataclass, field

from periodization_engine.models.enums import (
    Equipment,
    ExerciseCategory,
    FatigueLevel,
    MovementPattern,
    MuscleGroup,
)


@dataclass(frozen=True)
class Exercise:
    """A single movement with RP-style selection metadata.

    Attributes:
        stimulus_to_fatigue_ratio: 1-10, higher = more muscle stimulus per
            unit of systemic fatigue. Used to rank candidates.
        equipment: Items required to perform the movement.
        rep_range_min / rep_range_max: Default working rep range. Timed holds
            (e.g. plank) store seconds here.
    """

    id: str
    name: str
    category: ExerciseCategory
    movement_pattern: MovementPattern
    primary_muscles: frozenset[MuscleGroup]
    secondary_muscles: frozenset[MuscleGroup] = field(default_factory=frozenset)
    equipment: frozenset[Equipment] = field(default_factory=frozenset)
    stimulus_to_fatigue_ratio: int = 5
    systemic_fatigue: FatigueLevel = FatigueLevel.MEDIUM
    rep_range_min: int = 8
    rep_range_max: int = 12
    cues: tuple[str, ...] = field(default_factory=tuple)
    is_unilateral: bool = False

    @property
    def is_compound(self) -> bool:
        return self.category == ExerciseCategory.COMPOUND

    def targets(self, muscle: MuscleGroup) -> bool:
        """True if the muscle is trained as a primary or secondary mover."""
        return muscle in self.primary_muscles or muscle in self.secondary_muscles
