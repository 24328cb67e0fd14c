"""Equipment-aware exercise selection ranked by stimulus-to-fatigue ratio."""

from __future__ import annotations

import math
from typing import Collection

from periodization_engine.catalog.exercise_library import ExerciseCatalog
from periodization_engine.models.enums import Equipment, MuscleGroup
from periodization_engine.models.exercise import Exercise

# Exercises needing this many items or fewer require all of them
_STRICT_EQUIPMENT_MAX_ITEMS = 2
# Exercises needing more than that require at least this many
_LENIENT_EQUIPMENT_MIN_MATCH = 2


def _match_count(exercise: Exercise, available: Collection[Equipment]) -> int:
    return sum(1 for item in exercise.equipment if item in available)


def equipment_satisfied(exercise: Exercise, available: Collection[Equipment]) -> bool:
    """Lenient equipment check used for session expansion.

    One or two required items must all be available; three or more need
    any two, so minimal-equipment athletes are not starved of options.
    """
    required = len(exercise.equipment)
    if required == 0:
        return True
    if required <= _STRICT_EQUIPMENT_MAX_ITEMS:
        threshold = required
    else:
        threshold = _LENIENT_EQUIPMENT_MIN_MATCH
    return _match_count(exercise, available) >= threshold


class ExerciseSelector:
    """Picks exercises for a muscle from an injected catalog."""

    def __init__(self, catalog: ExerciseCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> ExerciseCatalog:
        return self._catalog

    def select_for_muscle(
        self,
        muscle: MuscleGroup,
        equipment: Collection[Equipment],
        include_primary: bool = True,
        include_secondary: bool = True,
        min_ratio: float = 0,
    ) -> list[Exercise]:
        """Exercises that train ``muscle`` with the given equipment, best SFR first.

        Ties keep catalog order.
        """
        matches = []
        for exercise in self._catalog:
            if not equipment_satisfied(exercise, equipment):
                continue
            is_primary = muscle in exercise.primary_muscles
            is_secondary = muscle in exercise.secondary_muscles
            if not ((include_primary and is_primary) or (include_secondary and is_secondary)):
                continue
            if exercise.stimulus_to_fatigue_ratio < min_ratio:
                continue
            matches.append(exercise)
        return sorted(matches, key=lambda ex: ex.stimulus_to_fatigue_ratio, reverse=True)

    def select_balanced(
        self,
        muscle: MuscleGroup,
        equipment: Collection[Equipment],
        count: int = 3,
    ) -> list[Exercise]:
        """Up to ``count`` exercises: one compound first, then the best isolations.

        Falls back to further compounds when isolation supply runs out. May
        return fewer than ``count`` (including none); callers treat that as
        a normal outcome.
        """
        available = self.select_for_muscle(muscle, equipment)
        if len(available) <= count:
            return available

        compounds = [ex for ex in available if ex.is_compound]
        others = [ex for ex in available if not ex.is_compound]

        selected: list[Exercise] = []
        if compounds and count > 0:
            selected.append(compounds[0])
        for candidates in (others, compounds):
            for exercise in candidates:
                if len(selected) >= count:
                    break
                if exercise not in selected:
                    selected.append(exercise)
        return selected


def exercises_for_equipment(
    catalog: ExerciseCatalog, equipment: Collection[Equipment]
) -> list[Exercise]:
    """Whole-catalog listing: all items for 1-2 requirements, at least half for more."""
    result = []
    for exercise in catalog:
        required = len(exercise.equipment)
        if required == 0:
            result.append(exercise)
            continue
        if required <= _STRICT_EQUIPMENT_MAX_ITEMS:
            threshold = required
        else:
            threshold = math.ceil(required / 2)
        if _match_count(exercise, equipment) >= threshold:
            result.append(exercise)
    return result
