"""Data models for Hevy Trainer."""

from .hevy import (
    ExerciseEntry,
    ExerciseTemplate,
    Page,
    Routine,
    SetEntry,
    SetType,
    Workout,
)
from .analytics import (
    ExerciseInfo,
    ExerciseProgress,
    ExerciseSummary,
    LiftRecord,
    MuscleGroupFrequencyEntry,
    MuscleVolumeEntry,
    ProgressSession,
    RepRecord,
    SessionSet,
    VolumeAnalysis,
    WorkoutStats,
)

__all__ = [
    # Hevy API
    "ExerciseEntry",
    "ExerciseTemplate",
    "Page",
    "Routine",
    "SetEntry",
    "SetType",
    "Workout",
    # Analytics
    "ExerciseInfo",
    "ExerciseProgress",
    "ExerciseSummary",
    "LiftRecord",
    "MuscleGroupFrequencyEntry",
    "MuscleVolumeEntry",
    "ProgressSession",
    "RepRecord",
    "SessionSet",
    "VolumeAnalysis",
    "WorkoutStats",
]
