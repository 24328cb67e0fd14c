"""Enumerations and training constants for the periodization engine.

Volume, intensity and load constants follow Renaissance Periodization
(Israetel, Hoffmann & Smith, *Scientific Principles of Hypertrophy
Training*, 2021) unless noted otherwise.
"""

from datetime import date
from enum import IntEnum, auto


class TrainingDomain(IntEnum):
    """Training modalities that share the weekly recovery budget."""

    STRENGTH = auto()
    RUCKING = auto()
    CARDIO = auto()


class DomainPriority(IntEnum):
    """Per-domain priority tier. Lower value is scheduled first."""

    PRIMARY = auto()
    SECONDARY = auto()
    MAINTENANCE = auto()


class WeekDay(IntEnum):
    """ISO weekdays (Monday = 1). Always referenced by name."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def offset(self) -> int:
        """Days after Monday (0-6)."""
        return self.value - 1

    @classmethod
    def from_date(cls, day: date) -> "WeekDay":
        return cls(day.isoweekday())


class MuscleGroup(IntEnum):
    CHEST = auto()
    BACK = auto()
    FRONT_DELTS = auto()
    SIDE_DELTS = auto()
    REAR_DELTS = auto()
    BICEPS = auto()
    TRICEPS = auto()
    QUADS = auto()
    HAMSTRINGS = auto()
    GLUTES = auto()
    CALVES = auto()
    CORE = auto()
    TRAPS = auto()
    FOREARMS = auto()


class Equipment(IntEnum):
    BARBELL = auto()
    DUMBBELLS = auto()
    CABLE_MACHINE = auto()
    PULL_UP_BAR = auto()
    BENCH = auto()
    SQUAT_RACK = auto()
    LEG_PRESS = auto()
    MACHINES = auto()
    KETTLEBELLS = auto()
    BANDS = auto()
    BODYWEIGHT = auto()
    EZ_BAR = auto()
    ROWING_MACHINE = auto()
    AIR_BIKE = auto()
    SPIN_BIKE = auto()
    GYMNASTIC_RINGS = auto()
    DIP_STATION = auto()


class MovementPattern(IntEnum):
    PUSH = auto()
    PULL = auto()
    SQUAT = auto()
    HINGE = auto()
    LUNGE = auto()
    CARRY = auto()
    ROTATION = auto()
    CORE = auto()


class ExerciseCategory(IntEnum):
    COMPOUND = auto()
    ISOLATION = auto()
    MACHINE = auto()
    BODYWEIGHT = auto()
    CABLE = auto()


class FatigueLevel(IntEnum):
    """Systemic fatigue cost of an exercise or session."""

    LOW = auto()
    MEDIUM = auto()
    HIGH = auto()


class TargetPriority(IntEnum):
    """Volume tier of a muscle target within a session template."""

    PRIMARY = auto()
    SECONDARY = auto()


class Confidence(IntEnum):
    HIGH = auto()
    MEDIUM = auto()
    LOW = auto()


class ProgressionAction(IntEnum):
    INCREASE_WEIGHT = auto()
    MAINTAIN = auto()
    DECREASE_WEIGHT = auto()
    INCREASE_REPS = auto()


class VolumeStatus(IntEnum):
    """Weekly set volume relative to the MEV/MAV/MRV landmarks."""

    LOW = auto()
    OPTIMAL = auto()
    HIGH = auto()
    EXCESSIVE = auto()


class TrainingLevel(IntEnum):
    BEGINNER = auto()
    INTERMEDIATE = auto()
    ADVANCED = auto()
    ELITE = auto()


class LiftMaxMethod(IntEnum):
    """How a lift max was acquired."""

    TESTED = auto()
    CALCULATED = auto()   # From a logged submaximal set
    ESTIMATED = auto()    # From bodyweight ratios


class MesocycleStatus(IntEnum):
    ACTIVE = auto()
    COMPLETED = auto()
    ARCHIVED = auto()


class SetType(IntEnum):
    WARMUP = auto()
    WORKING = auto()
    DROP = auto()


class TemplateId(IntEnum):
    """Strength session templates (upper/lower and push/pull/legs splits)."""

    UPPER_PUSH = auto()
    UPPER_PULL = auto()
    LOWER = auto()
    FULL_BODY = auto()
    PUSH = auto()
    PULL = auto()
    LEGS = auto()


# ---------------------------------------------------------------------------
# Weekly distribution
# ---------------------------------------------------------------------------

# Sessions per week by domain priority (RP concurrent-training guidance)
SESSIONS_BY_PRIORITY: dict[DomainPriority, int] = {
    DomainPriority.PRIMARY: 4,
    DomainPriority.SECONDARY: 2,
    DomainPriority.MAINTENANCE: 1,
}

# Day-scoring weights for the greedy scheduler
SPACING_SCORE_WEIGHT = 10
LOAD_SCORE_WEIGHT = 5

# Boundary validation (mirrors the onboarding form limits)
MIN_AVAILABLE_DAYS = 3
MAX_SESSIONS_PER_DAY_LIMIT = 3
MIN_MESOCYCLE_WEEKS = 3

# ---------------------------------------------------------------------------
# E1RM / training max
# ---------------------------------------------------------------------------

# Epley (1985): 1RM = w × (1 + reps / 30)
EPLEY_DIVISOR = 30.0
E1RM_HIGH_CONFIDENCE_MAX_REPS = 5
E1RM_MEDIUM_CONFIDENCE_MAX_REPS = 10

# Wendler 5/3/1: training max = 85-90% of 1RM
DEFAULT_TM_PERCENTAGE = 0.90

# Smallest practical plate jumps (kg)
COMPOUND_LOAD_INCREMENT_KG = 2.5
ISOLATION_LOAD_INCREMENT_KG = 1.25

# Unknown lifts fall back to a conservative bodyweight multiple
UNKNOWN_LIFT_BODYWEIGHT_RATIO = 0.5

# Missing reserve-reps in a logged set are assumed to be ~RPE 8
DEFAULT_LOGGED_RIR = 2

# Helms et al. (2016): RPE = 10 - RIR
MAX_RPE = 10.0
MIN_TABLE_RPE = 6.0

# ---------------------------------------------------------------------------
# Progression thresholds
# ---------------------------------------------------------------------------

TOP_OF_RANGE_MAX_RIR = 1
RPE_OVERSHOOT_TOLERANCE = 1.0
RPE_UNDERSHOOT_TOLERANCE = 1.5
RPE_OVERSHOOT_LOAD_FRACTION = 0.95

# ---------------------------------------------------------------------------
# Mesocycle progression: MEV (week 1) → MAV (last loading week) → deload
# ---------------------------------------------------------------------------

BASE_VOLUME_MULTIPLIER = 1.0
PEAK_VOLUME_MULTIPLIER = 1.8
DELOAD_VOLUME_MULTIPLIER = 0.5
DELOAD_MEV_FRACTION = 0.5

DELOAD_RPE = 6.0
BASE_WEEK_RPE = 6.5
WEEKLY_RPE_STEP = 0.5

# Per-week RPE used when expanding strength sessions
SESSION_RPE_BY_WEEK: dict[int, float] = {
    1: 7.0,   # 3 RIR
    2: 7.5,   # 2-3 RIR
    3: 8.0,   # 2 RIR
    4: 8.5,   # 1-2 RIR
}
DEFAULT_SESSION_RPE = 8.0

# Placeholder intensity for rucking / cardio slots
ENDURANCE_RPE = 7.0
ENDURANCE_DELOAD_RPE = 6.0

# ---------------------------------------------------------------------------
# Session expansion
# ---------------------------------------------------------------------------

PRIMARY_TARGET_BASE_SETS = 3
SECONDARY_TARGET_BASE_SETS = 2
MIN_SETS_PER_EXERCISE = 2
COMPOUND_REST_SECONDS = 180
DEFAULT_REST_SECONDS = 90
# Execution + rest time cost per working set (minutes)
MINUTES_PER_SET = 2.5
