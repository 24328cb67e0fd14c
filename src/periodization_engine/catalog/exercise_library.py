"""Exercise catalog with RP-style selection metadata.

Each exercise carries a stimulus-to-fatigue ratio (SFR, 1-10, higher means
more muscle stimulus per unit of systemic fatigue), its systemic fatigue
cost, required equipment and the movement pattern used to balance sessions.

SFR ratings follow RP heuristics: isolation and machine work usually rates
higher than free-weight compounds, which buy more total stimulus at a
higher fatigue cost.

Reference:
    Israetel, Hoffmann & Smith (2021). Scientific Principles of Hypertrophy
        Training, ch. 5 (exercise selection).
"""

from __future__ import annotations

from typing import Iterable, Iterator

from periodization_engine.models.enums import (
    Equipment,
    ExerciseCategory,
    FatigueLevel,
    MovementPattern,
    MuscleGroup,
)
from periodization_engine.models.exercise import Exercise


class ExerciseCatalog:
    """Immutable, ordered collection of exercises keyed by id.

    Build one per process with ``default_catalog()`` and hand it to the
    selector; tests construct small fixture catalogs directly.
    """

    def __init__(self, exercises: Iterable[Exercise]) -> None:
        by_id: dict[str, Exercise] = {}
        for exercise in exercises:
            if exercise.id in by_id:
                raise ValueError(f"duplicate exercise id: {exercise.id}")
            by_id[exercise.id] = exercise
        self._by_id = by_id
        self._ordered = tuple(by_id.values())

    def __iter__(self) -> Iterator[Exercise]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._by_id

    def get(self, exercise_id: str) -> Exercise | None:
        return self._by_id.get(exercise_id)

    @property
    def exercises(self) -> tuple[Exercise, ...]:
        return self._ordered

    @property
    def ids(self) -> list[str]:
        return list(self._by_id)


def _exercise(
    exercise_id: str,
    name: str,
    category: ExerciseCategory,
    pattern: MovementPattern,
    *,
    primary: tuple[MuscleGroup, ...],
    secondary: tuple[MuscleGroup, ...],
    equipment: tuple[Equipment, ...],
    sfr: int,
    fatigue: FatigueLevel,
    reps: tuple[int, int],
    cues: tuple[str, ...],
    unilateral: bool = False,
) -> Exercise:
    return Exercise(
        id=exercise_id,
        name=name,
        category=category,
        movement_pattern=pattern,
        primary_muscles=frozenset(primary),
        secondary_muscles=frozenset(secondary),
        equipment=frozenset(equipment),
        stimulus_to_fatigue_ratio=sfr,
        systemic_fatigue=fatigue,
        rep_range_min=reps[0],
        rep_range_max=reps[1],
        cues=cues,
        is_unilateral=unilateral,
    )


EXERCISE_LIBRARY: tuple[Exercise, ...] = (
    # Chest
    _exercise(
        "bench_press", "Barbell Bench Press", ExerciseCategory.COMPOUND, MovementPattern.PUSH,
        primary=(MuscleGroup.CHEST,),
        secondary=(MuscleGroup.FRONT_DELTS, MuscleGroup.TRICEPS),
        equipment=(Equipment.BARBELL, Equipment.BENCH),
        sfr=6, fatigue=FatigueLevel.HIGH, reps=(5, 12),
        cues=("Arch back slightly", "Retract scapula", "Bar path slight diagonal"),
    ),
    _exercise(
        "db_bench_press", "Dumbbell Bench Press", ExerciseCategory.COMPOUND, MovementPattern.PUSH,
        primary=(MuscleGroup.CHEST,),
        secondary=(MuscleGroup.FRONT_DELTS, MuscleGroup.TRICEPS),
        equipment=(Equipment.DUMBBELLS, Equipment.BENCH),
        sfr=7, fatigue=FatigueLevel.MEDIUM, reps=(6, 15),
        cues=("Full stretch at bottom", "Press up and slightly in"),
    ),
    _exercise(
        "incline_db_press", "Incline Dumbbell Press", ExerciseCategory.COMPOUND, MovementPattern.PUSH,
        primary=(MuscleGroup.CHEST, MuscleGroup.FRONT_DELTS),
        secondary=(MuscleGroup.TRICEPS,),
        equipment=(Equipment.DUMBBELLS, Equipment.BENCH),
        sfr=7, fatigue=FatigueLevel.MEDIUM, reps=(8, 15),
        cues=("30-45 degree incline", "Focus on upper chest stretch"),
    ),
    _exercise(
        "cable_fly", "Cable Fly", ExerciseCategory.CABLE, MovementPattern.PUSH,
        primary=(MuscleGroup.CHEST,),
        secondary=(),
        equipment=(Equipment.CABLE_MACHINE,),
        sfr=9, fatigue=FatigueLevel.LOW, reps=(10, 20),
        cues=("Slight bend in elbows", "Squeeze at peak contraction"),
    ),
    _exercise(
        "push_ups", "Push-Ups", ExerciseCategory.BODYWEIGHT, MovementPattern.PUSH,
        primary=(MuscleGroup.CHEST,),
        secondary=(MuscleGroup.FRONT_DELTS, MuscleGroup.TRICEPS, MuscleGroup.CORE),
        equipment=(Equipment.BODYWEIGHT,),
        sfr=7, fatigue=FatigueLevel.LOW, reps=(8, 25),
        cues=("Full range of motion", "Core tight"),
    ),
    _exercise(
        "dips", "Dips", ExerciseCategory.BODYWEIGHT, MovementPattern.PUSH,
        primary=(MuscleGroup.CHEST, MuscleGroup.TRICEPS),
        secondary=(MuscleGroup.FRONT_DELTS,),
        equipment=(Equipment.DIP_STATION,),
        sfr=6, fatigue=FatigueLevel.MEDIUM, reps=(6, 15),
        cues=("Lean forward for chest", "Upright for triceps"),
    ),
    # Back
    _exercise(
        "barbell_row", "Barbell Row", ExerciseCategory.COMPOUND, MovementPattern.PULL,
        primary=(MuscleGroup.BACK,),
        secondary=(MuscleGroup.BICEPS, MuscleGroup.REAR_DELTS),
        equipment=(Equipment.BARBELL,),
        sfr=5, fatigue=FatigueLevel.HIGH, reps=(6, 12),
        cues=("Hinge at hips", "Pull to lower chest", "Squeeze shoulder blades"),
    ),
    _exercise(
        "db_row", "Dumbbell Row", ExerciseCategory.COMPOUND, MovementPattern.PULL,
        primary=(MuscleGroup.BACK,),
        secondary=(MuscleGroup.BICEPS, MuscleGroup.REAR_DELTS),
        equipment=(Equipment.DUMBBELLS,),
        sfr=8, fatigue=FatigueLevel.LOW, reps=(8, 15),
        cues=("Full stretch at bottom", "Pull to hip"),
        unilateral=True,
    ),
    _exercise(
        "pull_ups", "Pull-Ups", ExerciseCategory.BODYWEIGHT, MovementPattern.PULL,
        primary=(MuscleGroup.BACK,),
        secondary=(MuscleGroup.BICEPS,),
        equipment=(Equipment.PULL_UP_BAR,),
        sfr=6, fatigue=FatigueLevel.MEDIUM, reps=(5, 15),
        cues=("Full dead hang at bottom", "Chin over bar"),
    ),
    _exercise(
        "lat_pulldown", "Lat Pulldown", ExerciseCategory.CABLE, MovementPattern.PULL,
        primary=(MuscleGroup.BACK,),
        secondary=(MuscleGroup.BICEPS,),
        equipment=(Equipment.CABLE_MACHINE,),
        sfr=8, fatigue=FatigueLevel.LOW, reps=(8, 15),
        cues=("Lean back slightly", "Pull to upper chest"),
    ),
    _exercise(
        "cable_row", "Seated Cable Row", ExerciseCategory.CABLE, MovementPattern.PULL,
        primary=(MuscleGroup.BACK,),
        secondary=(MuscleGroup.BICEPS, MuscleGroup.REAR_DELTS),
        equipment=(Equipment.CABLE_MACHINE,),
        sfr=8, fatigue=FatigueLevel.LOW, reps=(8, 15),
        cues=("Full stretch forward", "Pull to belly button"),
    ),
    # Shoulders
    _exercise(
        "ohp", "Overhead Press", ExerciseCategory.COMPOUND, MovementPattern.PUSH,
        primary=(MuscleGroup.FRONT_DELTS,),
        secondary=(MuscleGroup.TRICEPS, MuscleGroup.SIDE_DELTS),
        equipment=(Equipment.BARBELL,),
        sfr=5, fatigue=FatigueLevel.HIGH, reps=(5, 10),
        cues=("Brace core", "Press straight up", "Head through at top"),
    ),
    _exercise(
        "db_shoulder_press", "Dumbbell Shoulder Press", ExerciseCategory.COMPOUND, MovementPattern.PUSH,
        primary=(MuscleGroup.FRONT_DELTS,),
        secondary=(MuscleGroup.TRICEPS, MuscleGroup.SIDE_DELTS),
        equipment=(Equipment.DUMBBELLS,),
        sfr=7, fatigue=FatigueLevel.MEDIUM, reps=(8, 12),
        cues=("Seated or standing", "Full range of motion"),
    ),
    _exercise(
        "lateral_raise", "Lateral Raise", ExerciseCategory.ISOLATION, MovementPattern.PUSH,
        primary=(MuscleGroup.SIDE_DELTS,),
        secondary=(),
        equipment=(Equipment.DUMBBELLS,),
        sfr=9, fatigue=FatigueLevel.LOW, reps=(12, 20),
        cues=("Lead with elbows", "Slight forward lean"),
    ),
    _exercise(
        "cable_lateral_raise", "Cable Lateral Raise", ExerciseCategory.CABLE, MovementPattern.PUSH,
        primary=(MuscleGroup.SIDE_DELTS,),
        secondary=(),
        equipment=(Equipment.CABLE_MACHINE,),
        sfr=10, fatigue=FatigueLevel.LOW, reps=(12, 20),
        cues=("Constant tension", "Control the negative"),
        unilateral=True,
    ),
    _exercise(
        "face_pull", "Face Pull", ExerciseCategory.CABLE, MovementPattern.PULL,
        primary=(MuscleGroup.REAR_DELTS,),
        secondary=(MuscleGroup.TRAPS,),
        equipment=(Equipment.CABLE_MACHINE,),
        sfr=9, fatigue=FatigueLevel.LOW, reps=(12, 20),
        cues=("Pull to face level", "External rotate at end"),
    ),
    _exercise(
        "reverse_fly", "Reverse Fly", ExerciseCategory.ISOLATION, MovementPattern.PULL,
        primary=(MuscleGroup.REAR_DELTS,),
        secondary=(),
        equipment=(Equipment.DUMBBELLS,),
        sfr=8, fatigue=FatigueLevel.LOW, reps=(12, 20),
        cues=("Bent over position", "Lead with elbows"),
    ),
    # Arms
    _exercise(
        "barbell_curl", "Barbell Curl", ExerciseCategory.ISOLATION, MovementPattern.PULL,
        primary=(MuscleGroup.BICEPS,),
        secondary=(MuscleGroup.FOREARMS,),
        equipment=(Equipment.BARBELL,),
        sfr=7, fatigue=FatigueLevel.LOW, reps=(8, 15),
        cues=("Keep elbows pinned", "Control the negative"),
    ),
    _exercise(
        "db_curl", "Dumbbell Curl", ExerciseCategory.ISOLATION, MovementPattern.PULL,
        primary=(MuscleGroup.BICEPS,),
        secondary=(MuscleGroup.FOREARMS,),
        equipment=(Equipment.DUMBBELLS,),
        sfr=8, fatigue=FatigueLevel.LOW, reps=(8, 15),
        cues=("Supinate at top", "Full stretch at bottom"),
    ),
    _exercise(
        "hammer_curl", "Hammer Curl", ExerciseCategory.ISOLATION, MovementPattern.PULL,
        primary=(MuscleGroup.BICEPS,),
        secondary=(MuscleGroup.FOREARMS,),
        equipment=(Equipment.DUMBBELLS,),
        sfr=8, fatigue=FatigueLevel.LOW, reps=(8, 15),
        cues=("Neutral grip", "Targets brachialis"),
    ),
    _exercise(
        "cable_curl", "Cable Curl", ExerciseCategory.CABLE, MovementPattern.PULL,
        primary=(MuscleGroup.BICEPS,),
        secondary=(),
        equipment=(Equipment.CABLE_MACHINE,),
        sfr=9, fatigue=FatigueLevel.LOW, reps=(10, 15),
        cues=("Constant tension", "Squeeze at top"),
    ),
    _exercise(
        "tricep_pushdown", "Tricep Pushdown", ExerciseCategory.CABLE, MovementPattern.PUSH,
        primary=(MuscleGroup.TRICEPS,),
        secondary=(),
        equipment=(Equipment.CABLE_MACHINE,),
        sfr=9, fatigue=FatigueLevel.LOW, reps=(10, 20),
        cues=("Elbows pinned to sides", "Full extension"),
    ),
    _exercise(
        "overhead_tricep_ext", "Overhead Tricep Extension", ExerciseCategory.ISOLATION, MovementPattern.PUSH,
        primary=(MuscleGroup.TRICEPS,),
        secondary=(),
        equipment=(Equipment.CABLE_MACHINE,),
        sfr=9, fatigue=FatigueLevel.LOW, reps=(10, 15),
        cues=("Stretch at bottom", "Targets long head"),
    ),
    _exercise(
        "skull_crushers", "Skull Crushers", ExerciseCategory.ISOLATION, MovementPattern.PUSH,
        primary=(MuscleGroup.TRICEPS,),
        secondary=(),
        equipment=(Equipment.DUMBBELLS,),
        sfr=7, fatigue=FatigueLevel.LOW, reps=(8, 15),
        cues=("Lower to forehead", "Keep elbows in"),
    ),
    # Quads
    _exercise(
        "squat", "Barbell Back Squat", ExerciseCategory.COMPOUND, MovementPattern.SQUAT,
        primary=(MuscleGroup.QUADS, MuscleGroup.GLUTES),
        secondary=(MuscleGroup.HAMSTRINGS, MuscleGroup.CORE),
        equipment=(Equipment.BARBELL,),
        sfr=4, fatigue=FatigueLevel.HIGH, reps=(5, 12),
        cues=("Brace core", "Knees track over toes", "Depth to parallel or below"),
    ),
    _exercise(
        "front_squat", "Front Squat", ExerciseCategory.COMPOUND, MovementPattern.SQUAT,
        primary=(MuscleGroup.QUADS,),
        secondary=(MuscleGroup.GLUTES, MuscleGroup.CORE),
        equipment=(Equipment.BARBELL,),
        sfr=5, fatigue=FatigueLevel.HIGH, reps=(5, 10),
        cues=("Elbows high", "Upright torso", "More quad dominant"),
    ),
    _exercise(
        "leg_press", "Leg Press", ExerciseCategory.MACHINE, MovementPattern.SQUAT,
        primary=(MuscleGroup.QUADS, MuscleGroup.GLUTES),
        secondary=(MuscleGroup.HAMSTRINGS,),
        equipment=(Equipment.LEG_PRESS,),
        sfr=7, fatigue=FatigueLevel.MEDIUM, reps=(8, 20),
        cues=("Full depth", "Don't lock knees"),
    ),
    _exercise(
        "leg_extension", "Leg Extension", ExerciseCategory.MACHINE, MovementPattern.SQUAT,
        primary=(MuscleGroup.QUADS,),
        secondary=(),
        equipment=(Equipment.MACHINES,),
        sfr=9, fatigue=FatigueLevel.LOW, reps=(10, 20),
        cues=("Full contraction at top", "Control the negative"),
    ),
    _exercise(
        "walking_lunge", "Walking Lunge", ExerciseCategory.COMPOUND, MovementPattern.LUNGE,
        primary=(MuscleGroup.QUADS, MuscleGroup.GLUTES),
        secondary=(MuscleGroup.HAMSTRINGS,),
        equipment=(Equipment.DUMBBELLS,),
        sfr=6, fatigue=FatigueLevel.MEDIUM, reps=(8, 15),
        cues=("Long stride", "Front knee tracks over toe"),
        unilateral=True,
    ),
    _exercise(
        "bulgarian_split_squat", "Bulgarian Split Squat", ExerciseCategory.COMPOUND, MovementPattern.LUNGE,
        primary=(MuscleGroup.QUADS, MuscleGroup.GLUTES),
        secondary=(MuscleGroup.HAMSTRINGS,),
        equipment=(Equipment.DUMBBELLS,),
        sfr=7, fatigue=FatigueLevel.MEDIUM, reps=(8, 12),
        cues=("Rear foot elevated", "Torso upright"),
        unilateral=True,
    ),
    # Hamstrings / glutes
    _exercise(
        "rdl", "Romanian Deadlift", ExerciseCategory.COMPOUND, MovementPattern.HINGE,
        primary=(MuscleGroup.HAMSTRINGS, MuscleGroup.GLUTES),
        secondary=(MuscleGroup.BACK,),
        equipment=(Equipment.BARBELL,),
        sfr=5, fatigue=FatigueLevel.HIGH, reps=(6, 12),
        cues=("Hinge at hips", "Slight knee bend", "Feel hamstring stretch"),
    ),
    _exercise(
        "db_rdl", "Dumbbell RDL", ExerciseCategory.COMPOUND, MovementPattern.HINGE,
        primary=(MuscleGroup.HAMSTRINGS, MuscleGroup.GLUTES),
        secondary=(MuscleGroup.BACK,),
        equipment=(Equipment.DUMBBELLS,),
        sfr=7, fatigue=FatigueLevel.MEDIUM, reps=(8, 15),
        cues=("Weights close to legs", "Push hips back"),
    ),
    _exercise(
        "leg_curl", "Leg Curl", ExerciseCategory.MACHINE, MovementPattern.HINGE,
        primary=(MuscleGroup.HAMSTRINGS,),
        secondary=(),
        equipment=(Equipment.MACHINES,),
        sfr=9, fatigue=FatigueLevel.LOW, reps=(10, 15),
        cues=("Full range of motion", "Squeeze at top"),
    ),
    _exercise(
        "hip_thrust", "Hip Thrust", ExerciseCategory.COMPOUND, MovementPattern.HINGE,
        primary=(MuscleGroup.GLUTES,),
        secondary=(MuscleGroup.HAMSTRINGS,),
        equipment=(Equipment.BENCH,),
        sfr=8, fatigue=FatigueLevel.MEDIUM, reps=(8, 15),
        cues=("Back on bench", "Drive through heels", "Squeeze at top"),
    ),
    _exercise(
        "cable_pull_through", "Cable Pull Through", ExerciseCategory.CABLE, MovementPattern.HINGE,
        primary=(MuscleGroup.GLUTES, MuscleGroup.HAMSTRINGS),
        secondary=(),
        equipment=(Equipment.CABLE_MACHINE,),
        sfr=8, fatigue=FatigueLevel.LOW, reps=(12, 20),
        cues=("Hinge pattern", "Squeeze glutes at top"),
    ),
    # Calves
    _exercise(
        "standing_calf_raise", "Standing Calf Raise", ExerciseCategory.ISOLATION, MovementPattern.SQUAT,
        primary=(MuscleGroup.CALVES,),
        secondary=(),
        equipment=(Equipment.MACHINES,),
        sfr=8, fatigue=FatigueLevel.LOW, reps=(10, 20),
        cues=("Full stretch at bottom", "Pause at top"),
    ),
    _exercise(
        "seated_calf_raise", "Seated Calf Raise", ExerciseCategory.ISOLATION, MovementPattern.SQUAT,
        primary=(MuscleGroup.CALVES,),
        secondary=(),
        equipment=(Equipment.MACHINES,),
        sfr=9, fatigue=FatigueLevel.LOW, reps=(12, 20),
        cues=("Targets soleus", "Slow negatives"),
    ),
    # Core
    _exercise(
        "cable_crunch", "Cable Crunch", ExerciseCategory.CABLE, MovementPattern.CORE,
        primary=(MuscleGroup.CORE,),
        secondary=(),
        equipment=(Equipment.CABLE_MACHINE,),
        sfr=8, fatigue=FatigueLevel.LOW, reps=(12, 20),
        cues=("Crunch down", "Don't pull with arms"),
    ),
    _exercise(
        "hanging_leg_raise", "Hanging Leg Raise", ExerciseCategory.BODYWEIGHT, MovementPattern.CORE,
        primary=(MuscleGroup.CORE,),
        secondary=(),
        equipment=(Equipment.PULL_UP_BAR,),
        sfr=7, fatigue=FatigueLevel.LOW, reps=(8, 15),
        cues=("Control the swing", "Legs to parallel or higher"),
    ),
    _exercise(
        "plank", "Plank", ExerciseCategory.BODYWEIGHT, MovementPattern.CORE,
        primary=(MuscleGroup.CORE,),
        secondary=(),
        equipment=(Equipment.BODYWEIGHT,),
        sfr=6, fatigue=FatigueLevel.LOW, reps=(30, 60),
        cues=("Straight line from head to heels", "Brace abs"),
    ),
    _exercise(
        "ab_wheel", "Ab Wheel Rollout", ExerciseCategory.BODYWEIGHT, MovementPattern.CORE,
        primary=(MuscleGroup.CORE,),
        secondary=(),
        equipment=(Equipment.BODYWEIGHT,),
        sfr=7, fatigue=FatigueLevel.LOW, reps=(8, 15),
        cues=("Keep core tight", "Don't let hips sag"),
    ),
    # Bodyweight alternatives for minimal-equipment athletes
    _exercise(
        "pike_pushup", "Pike Push-Up", ExerciseCategory.BODYWEIGHT, MovementPattern.PUSH,
        primary=(MuscleGroup.FRONT_DELTS,),
        secondary=(MuscleGroup.TRICEPS, MuscleGroup.CHEST),
        equipment=(Equipment.BODYWEIGHT,),
        sfr=7, fatigue=FatigueLevel.LOW, reps=(8, 15),
        cues=("Hips high", "Head toward floor", "Vertical pressing motion"),
    ),
    _exercise(
        "diamond_pushup", "Diamond Push-Up", ExerciseCategory.BODYWEIGHT, MovementPattern.PUSH,
        primary=(MuscleGroup.TRICEPS,),
        secondary=(MuscleGroup.CHEST, MuscleGroup.FRONT_DELTS),
        equipment=(Equipment.BODYWEIGHT,),
        sfr=7, fatigue=FatigueLevel.LOW, reps=(8, 20),
        cues=("Hands form diamond shape", "Elbows close to body", "Full extension"),
    ),
    _exercise(
        "wide_pushup", "Wide Push-Up", ExerciseCategory.BODYWEIGHT, MovementPattern.PUSH,
        primary=(MuscleGroup.CHEST,),
        secondary=(MuscleGroup.FRONT_DELTS, MuscleGroup.TRICEPS),
        equipment=(Equipment.BODYWEIGHT,),
        sfr=7, fatigue=FatigueLevel.LOW, reps=(8, 20),
        cues=("Hands wider than shoulders", "Feel stretch in chest", "Core tight"),
    ),
    _exercise(
        "incline_pushup", "Incline Push-Up", ExerciseCategory.BODYWEIGHT, MovementPattern.PUSH,
        primary=(MuscleGroup.CHEST,),
        secondary=(MuscleGroup.FRONT_DELTS, MuscleGroup.TRICEPS),
        equipment=(Equipment.BODYWEIGHT,),
        sfr=6, fatigue=FatigueLevel.LOW, reps=(10, 25),
        cues=("Hands on elevated surface", "Good for beginners", "Full range of motion"),
    ),
    _exercise(
        "bodyweight_squat", "Bodyweight Squat", ExerciseCategory.BODYWEIGHT, MovementPattern.SQUAT,
        primary=(MuscleGroup.QUADS, MuscleGroup.GLUTES),
        secondary=(MuscleGroup.HAMSTRINGS,),
        equipment=(Equipment.BODYWEIGHT,),
        sfr=5, fatigue=FatigueLevel.LOW, reps=(15, 30),
        cues=("Knees track over toes", "Depth to parallel", "Core braced"),
    ),
    _exercise(
        "reverse_lunge", "Reverse Lunge", ExerciseCategory.BODYWEIGHT, MovementPattern.LUNGE,
        primary=(MuscleGroup.QUADS, MuscleGroup.GLUTES),
        secondary=(MuscleGroup.HAMSTRINGS,),
        equipment=(Equipment.BODYWEIGHT,),
        sfr=6, fatigue=FatigueLevel.LOW, reps=(10, 15),
        cues=("Step back", "Knee to floor", "Upright torso"),
        unilateral=True,
    ),
    _exercise(
        "glute_bridge", "Glute Bridge", ExerciseCategory.BODYWEIGHT, MovementPattern.HINGE,
        primary=(MuscleGroup.GLUTES,),
        secondary=(MuscleGroup.HAMSTRINGS,),
        equipment=(Equipment.BODYWEIGHT,),
        sfr=7, fatigue=FatigueLevel.LOW, reps=(12, 20),
        cues=("Drive through heels", "Squeeze at top", "Full hip extension"),
    ),
    _exercise(
        "single_leg_rdl", "Single Leg Romanian Deadlift", ExerciseCategory.BODYWEIGHT, MovementPattern.HINGE,
        primary=(MuscleGroup.HAMSTRINGS, MuscleGroup.GLUTES),
        secondary=(MuscleGroup.CORE,),
        equipment=(Equipment.BODYWEIGHT,),
        sfr=7, fatigue=FatigueLevel.LOW, reps=(8, 12),
        cues=("Hinge at hips", "Back leg extends", "Feel hamstring stretch"),
        unilateral=True,
    ),
    _exercise(
        "inverted_row", "Inverted Row", ExerciseCategory.BODYWEIGHT, MovementPattern.PULL,
        primary=(MuscleGroup.BACK,),
        secondary=(MuscleGroup.BICEPS, MuscleGroup.REAR_DELTS),
        equipment=(Equipment.BODYWEIGHT,),
        sfr=7, fatigue=FatigueLevel.LOW, reps=(8, 15),
        cues=("Body straight", "Pull chest to bar", "Squeeze shoulder blades"),
    ),
    _exercise(
        "bodyweight_tricep_ext", "Bodyweight Tricep Extension", ExerciseCategory.BODYWEIGHT, MovementPattern.PUSH,
        primary=(MuscleGroup.TRICEPS,),
        secondary=(),
        equipment=(Equipment.BODYWEIGHT,),
        sfr=7, fatigue=FatigueLevel.LOW, reps=(10, 15),
        cues=("Hands on elevated surface", "Lower forehead to hands", "Keep elbows in"),
    ),
    _exercise(
        "chin_up", "Chin-Up", ExerciseCategory.BODYWEIGHT, MovementPattern.PULL,
        primary=(MuscleGroup.BICEPS, MuscleGroup.BACK),
        secondary=(),
        equipment=(Equipment.PULL_UP_BAR,),
        sfr=7, fatigue=FatigueLevel.MEDIUM, reps=(5, 12),
        cues=("Supinated grip", "Chin over bar", "More bicep focus"),
    ),
    _exercise(
        "lateral_raise_band", "Banded Lateral Raise", ExerciseCategory.ISOLATION, MovementPattern.PUSH,
        primary=(MuscleGroup.SIDE_DELTS,),
        secondary=(),
        equipment=(Equipment.BANDS,),
        sfr=8, fatigue=FatigueLevel.LOW, reps=(12, 20),
        cues=("Stand on band", "Lead with elbows", "Control the movement"),
    ),
    _exercise(
        "side_lying_lateral_raise", "Side Lying Lateral Raise", ExerciseCategory.BODYWEIGHT, MovementPattern.PUSH,
        primary=(MuscleGroup.SIDE_DELTS,),
        secondary=(),
        equipment=(Equipment.BODYWEIGHT,),
        sfr=6, fatigue=FatigueLevel.LOW, reps=(12, 20),
        cues=("Lie on side", "Raise arm to ceiling", "Control movement"),
        unilateral=True,
    ),
    _exercise(
        "band_pull_apart", "Band Pull Apart", ExerciseCategory.ISOLATION, MovementPattern.PULL,
        primary=(MuscleGroup.REAR_DELTS,),
        secondary=(MuscleGroup.TRAPS,),
        equipment=(Equipment.BANDS,),
        sfr=8, fatigue=FatigueLevel.LOW, reps=(15, 25),
        cues=("Arms straight", "Pull band apart", "Squeeze shoulder blades"),
    ),
    _exercise(
        "bodyweight_calf_raise", "Bodyweight Calf Raise", ExerciseCategory.BODYWEIGHT, MovementPattern.SQUAT,
        primary=(MuscleGroup.CALVES,),
        secondary=(),
        equipment=(Equipment.BODYWEIGHT,),
        sfr=6, fatigue=FatigueLevel.LOW, reps=(15, 30),
        cues=("Full stretch at bottom", "Rise onto toes", "Pause at top"),
    ),
)


def default_catalog() -> ExerciseCatalog:
    """The built-in exercise library as a catalog."""
    return ExerciseCatalog(EXERCISE_LIBRARY)
