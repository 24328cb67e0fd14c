"""MesocycleGenerator: orchestrator that materializes a multi-week plan."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Callable

from periodization_engine.catalog.exercise_library import ExerciseCatalog, default_catalog
from periodization_engine.catalog.selector import ExerciseSelector
from periodization_engine.identity import IdentitySource, UuidIdentitySource
from periodization_engine.math.periodization import (
    date_for_day,
    is_deload_week,
    target_rpe_for_week,
    volume_multiplier_for_week,
    week_start_for,
)
from periodization_engine.math.volume import (
    adjusted_landmarks,
    calculate_weekly_volume,
    volume_report,
)
from periodization_engine.models.config import MesocycleConfig
from periodization_engine.models.enums import (
    ENDURANCE_DELOAD_RPE,
    ENDURANCE_RPE,
    MuscleGroup,
    TrainingDomain,
)
from periodization_engine.models.mesocycle import Mesocycle, MesocycleSession, MesocycleWeek
from periodization_engine.models.session import PlannedSession, WeekTemplate
from periodization_engine.models.strength import VolumeLandmarks
from periodization_engine.scheduling.weekly_distribution import generate_week_template
from periodization_engine.validation import validate_config
from periodization_engine.workout_builder.builder import SessionBuilder
from periodization_engine.workout_builder.session_templates import SessionTemplateCatalog

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MesocycleGenerator:
    """Builds a complete Mesocycle from a MesocycleConfig.

    Pipeline:
    1. Validate the config.
    2. Schedule one canonical week.
    3. For each week: deload flag, volume multiplier, target RPE, dates.
    4. Expand strength sessions into exercises; rucking and cardio become
       placeholders with a duration and RPE only.
    5. Attach a per-muscle volume report to each week.

    Catalogs are immutable and may be shared between generators and
    threads. Each generate() call builds fresh objects.

    Usage:
        generator = MesocycleGenerator()
        mesocycle = generator.generate(config)
        today = mesocycle.session_for_date(date.today())
    """

    def __init__(
        self,
        exercise_catalog: ExerciseCatalog | None = None,
        template_catalog: SessionTemplateCatalog | None = None,
        id_source: IdentitySource | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.exercise_catalog = default_catalog() if exercise_catalog is None else exercise_catalog
        self.template_catalog = (
            SessionTemplateCatalog() if template_catalog is None else template_catalog
        )
        self.id_source = id_source or UuidIdentitySource()
        self.clock = clock or _utc_now
        self.builder = SessionBuilder(ExerciseSelector(self.exercise_catalog))

    def generate(self, config: MesocycleConfig) -> Mesocycle:
        """Generate every week of the mesocycle.

        Args:
            config: Frozen athlete configuration.

        Returns:
            A fully materialized Mesocycle with stable session ids.

        Raises:
            ConfigurationError: If the config fails boundary validation.
        """
        validate_config(config)

        mesocycle_id = self.id_source.next_id("meso")
        week_template = generate_week_template(config, self.id_source)
        landmarks = self._landmarks_for(config)

        weeks = tuple(
            self._build_week(mesocycle_id, config, week_template, landmarks, week_number)
            for week_number in range(1, config.total_weeks + 1)
        )
        mesocycle = Mesocycle(
            id=mesocycle_id,
            config=config,
            weeks=weeks,
            created_at=self.clock(),
        )
        logger.info(
            "Generated mesocycle %s '%s': %d weeks, %d sessions (%d strength), starting %s",
            mesocycle.id,
            config.name,
            len(weeks),
            len(mesocycle.sessions),
            sum(1 for s in mesocycle.sessions if s.is_strength),
            mesocycle.start_date,
        )
        return mesocycle

    @staticmethod
    def _landmarks_for(config: MesocycleConfig) -> dict[MuscleGroup, VolumeLandmarks]:
        """Defaults scaled by training level, with per-muscle overrides on top."""
        landmarks = adjusted_landmarks(config.training_level)
        landmarks.update(config.volume_landmarks)
        return landmarks

    def _build_week(
        self,
        mesocycle_id: str,
        config: MesocycleConfig,
        week_template: WeekTemplate,
        landmarks: dict[MuscleGroup, VolumeLandmarks],
        week_number: int,
    ) -> MesocycleWeek:
        total_weeks = config.total_weeks
        deload = is_deload_week(week_number, total_weeks, config.include_deload)
        multiplier = volume_multiplier_for_week(week_number, total_weeks, config.include_deload)
        week_rpe = target_rpe_for_week(week_number, total_weeks, config.include_deload)
        start = week_start_for(config.start_date, week_number)

        sessions = tuple(
            self._build_session(
                session_id=f"{mesocycle_id}_w{week_number}_s{index}",
                planned=planned,
                config=config,
                week_number=week_number,
                week_start=start,
                deload=deload,
                multiplier=multiplier,
            )
            for index, planned in enumerate(week_template.sessions, start=1)
        )

        weekly_volume = calculate_weekly_volume(
            ex for session in sessions for ex in session.exercises
        )
        return MesocycleWeek(
            week_number=week_number,
            start_date=start,
            end_date=start + timedelta(days=6),
            is_deload=deload,
            volume_multiplier=multiplier,
            target_rpe=week_rpe,
            sessions=sessions,
            volume_report=volume_report(
                weekly_volume, landmarks, week_number, total_weeks, config.include_deload
            ),
        )

    def _build_session(
        self,
        session_id: str,
        planned: PlannedSession,
        config: MesocycleConfig,
        week_number: int,
        week_start: date,
        deload: bool,
        multiplier: float,
    ) -> MesocycleSession:
        session_date = date_for_day(week_start, planned.day)

        if planned.domain != TrainingDomain.STRENGTH:
            return MesocycleSession(
                id=session_id,
                week_number=week_number,
                day=planned.day,
                date=session_date,
                session_type=planned.session_type,
                domain=planned.domain,
                estimated_duration_min=planned.estimated_duration_min,
                target_rpe=ENDURANCE_DELOAD_RPE if deload else ENDURANCE_RPE,
                order=planned.order,
            )

        template = self.template_catalog.for_session_label(planned.session_type)
        generated = self.builder.expand(
            template,
            config.equipment,
            week_number,
            multiplier,
            is_deload=deload,
            training_maxes=config.training_maxes,
        )
        logger.debug(
            "Week %d %s %s: %d exercises, %d sets",
            week_number,
            planned.day.name,
            template.name,
            len(generated.exercises),
            generated.total_sets,
        )
        return MesocycleSession(
            id=session_id,
            week_number=week_number,
            day=planned.day,
            date=session_date,
            session_type=planned.session_type,
            domain=planned.domain,
            template=template,
            exercises=generated.exercises,
            total_sets=generated.total_sets,
            estimated_duration_min=generated.estimated_duration_min,
            target_rpe=generated.target_rpe,
            order=planned.order,
        )
