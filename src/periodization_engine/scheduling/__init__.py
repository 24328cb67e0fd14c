"""Weekly session distribution across training domains."""

from periodization_engine.scheduling.weekly_distribution import (
    SESSION_LABELS,
    distribute_sessions,
    generate_week_template,
)

__all__ = ["SESSION_LABELS", "distribute_sessions", "generate_week_template"]
