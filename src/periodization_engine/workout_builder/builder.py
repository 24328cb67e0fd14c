"""SessionBuilder expands a strength template into one week's exercises.

For every muscle target: pick exercises with the selector, scale base sets
by the week's volume multiplier, attach the week's RPE, rest interval,
coaching cues and (when a training max is known) a suggested load.
"""

from __future__ import annotations

import logging
from typing import Collection, Mapping

from periodization_engine.catalog.selector import ExerciseSelector
from periodization_engine.math.periodization import session_rpe_for_week
from periodization_engine.math.rounding import round_int
from periodization_engine.math.training_max import weight_for_rpe
from periodization_engine.models.enums import (
    COMPOUND_LOAD_INCREMENT_KG,
    COMPOUND_REST_SECONDS,
    DEFAULT_REST_SECONDS,
    ISOLATION_LOAD_INCREMENT_KG,
    MIN_SETS_PER_EXERCISE,
    MINUTES_PER_SET,
    PRIMARY_TARGET_BASE_SETS,
    SECONDARY_TARGET_BASE_SETS,
    Equipment,
    TargetPriority,
)
from periodization_engine.models.exercise import Exercise
from periodization_engine.models.session import GeneratedSession, PlannedExercise
from periodization_engine.workout_builder.session_templates import (
    MuscleTarget,
    SessionTemplate,
)

logger = logging.getLogger(__name__)


def sets_for_target(target: MuscleTarget, volume_multiplier: float) -> int:
    """Sets per exercise: max(2, round(base × multiplier)), base 3 primary / 2 secondary."""
    base = (
        PRIMARY_TARGET_BASE_SETS
        if target.priority == TargetPriority.PRIMARY
        else SECONDARY_TARGET_BASE_SETS
    )
    return max(MIN_SETS_PER_EXERCISE, round_int(base * volume_multiplier))


def rest_seconds_for(exercise: Exercise) -> int:
    return COMPOUND_REST_SECONDS if exercise.is_compound else DEFAULT_REST_SECONDS


class SessionBuilder:
    """Builds GeneratedSessions from templates.

    Usage::

        builder = SessionBuilder(ExerciseSelector(default_catalog()))
        session = builder.expand(template, equipment, week_number=2,
                                 volume_multiplier=1.27)
    """

    def __init__(self, selector: ExerciseSelector) -> None:
        self._selector = selector

    def expand(
        self,
        template: SessionTemplate,
        equipment: Collection[Equipment],
        week_number: int,
        volume_multiplier: float,
        is_deload: bool = False,
        training_maxes: Mapping[str, float] | None = None,
    ) -> GeneratedSession:
        """Expand ``template`` into concrete exercises for one week.

        A target for which no exercise matches the equipment contributes
        nothing and is logged at WARNING; the rest of the session is still
        built.

        Args:
            template: Strength session template.
            equipment: Equipment the athlete has.
            week_number: 1-based mesocycle week (drives the RPE table).
            volume_multiplier: Set scaling for the week.
            is_deload: Deload weeks run at RPE 6 regardless of week number.
            training_maxes: Training max (kg) keyed by exercise id.

        Returns:
            GeneratedSession with totals filled in.
        """
        target_rpe = session_rpe_for_week(week_number, is_deload)
        maxes = training_maxes or {}
        exercises: list[PlannedExercise] = []

        for target in template.muscle_targets:
            chosen = self._selector.select_balanced(
                target.muscle, equipment, target.exercise_count
            )
            logger.debug(
                "Template %s, muscle %s: requested %d, found %d",
                template.id.name, target.muscle.name, target.exercise_count, len(chosen),
            )
            if not chosen:
                logger.warning(
                    "No exercises for %s in template %s with equipment [%s]",
                    target.muscle.name,
                    template.id.name,
                    ", ".join(sorted(e.name for e in equipment)),
                )
                continue

            sets = sets_for_target(target, volume_multiplier)
            for exercise in chosen:
                exercises.append(
                    PlannedExercise(
                        exercise=exercise,
                        muscle=target.muscle,
                        sets=sets,
                        rep_range_min=exercise.rep_range_min,
                        rep_range_max=exercise.rep_range_max,
                        target_rpe=target_rpe,
                        rest_seconds=rest_seconds_for(exercise),
                        notes=". ".join(exercise.cues),
                        suggested_weight_kg=self._suggested_weight(
                            exercise, maxes, target_rpe
                        ),
                    )
                )

        total_sets = sum(ex.sets for ex in exercises)
        return GeneratedSession(
            template=template,
            exercises=tuple(exercises),
            total_sets=total_sets,
            estimated_duration_min=round_int(total_sets * MINUTES_PER_SET),
            target_rpe=target_rpe,
        )

    @staticmethod
    def _suggested_weight(
        exercise: Exercise, maxes: Mapping[str, float], target_rpe: float
    ) -> float | None:
        training_max_kg = maxes.get(exercise.id)
        if not training_max_kg or training_max_kg <= 0:
            return None
        increment = (
            COMPOUND_LOAD_INCREMENT_KG if exercise.is_compound else ISOLATION_LOAD_INCREMENT_KG
        )
        return weight_for_rpe(training_max_kg, target_rpe, increment)
