"""Boundary validation for MesocycleConfig.

All problems are collected and raised together so a form can show every
error at once.
"""

from __future__ import annotations

from periodization_engine.exceptions import ConfigurationError
from periodization_engine.models.config import MesocycleConfig
from periodization_engine.models.enums import (
    MAX_SESSIONS_PER_DAY_LIMIT,
    MIN_AVAILABLE_DAYS,
    MIN_MESOCYCLE_WEEKS,
    DomainPriority,
)


def config_problems(config: MesocycleConfig) -> list[str]:
    """Every reason ``config`` cannot be planned; empty when valid."""
    problems: list[str] = []

    days = list(config.available_days)
    if len(set(days)) != len(days):
        problems.append("available_days contains duplicates")
    if len(set(days)) < MIN_AVAILABLE_DAYS:
        problems.append(
            f"at least {MIN_AVAILABLE_DAYS} available days required, got {len(set(days))}"
        )
    if not 1 <= config.max_sessions_per_day <= MAX_SESSIONS_PER_DAY_LIMIT:
        problems.append(
            f"max_sessions_per_day must be 1-{MAX_SESSIONS_PER_DAY_LIMIT}, "
            f"got {config.max_sessions_per_day}"
        )
    if config.total_weeks < MIN_MESOCYCLE_WEEKS:
        problems.append(
            f"total_weeks must be at least {MIN_MESOCYCLE_WEEKS}, got {config.total_weeks}"
        )
    if config.preferred_session_duration_min <= 0:
        problems.append("preferred_session_duration_min must be positive")

    for muscle, landmarks in config.volume_landmarks.items():
        if not landmarks.is_ordered:
            problems.append(
                f"volume landmarks for {muscle.name} must satisfy MV <= MEV <= MAV <= MRV"
            )

    if config.require_single_primary:
        primaries = sum(
            1 for d in config.domain_configs if d.priority == DomainPriority.PRIMARY
        )
        if primaries != 1:
            problems.append(f"exactly one PRIMARY domain required, got {primaries}")

    return problems


def validate_config(config: MesocycleConfig) -> None:
    """Raise ConfigurationError listing every problem with ``config``."""
    problems = config_problems(config)
    if problems:
        raise ConfigurationError(problems)
