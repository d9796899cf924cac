"""Workout analytics: progress, records, exercise summaries and volume."""

from .exercise_summary import (
    build_exercise_summaries,
    filter_templates,
    filter_workouts_by_date,
)
from .muscle_volume import aggregate_muscle_volume, analyze_muscle_group_frequency
from .progress import (
    analyze_progress,
    build_exercise_progress,
    build_session,
    calculate_records_by_reps,
)
from .records import RepRecordTable
from .workout_stats import calculate_workout_stats

__all__ = [
    "build_exercise_summaries",
    "filter_templates",
    "filter_workouts_by_date",
    "aggregate_muscle_volume",
    "analyze_muscle_group_frequency",
    "analyze_progress",
    "build_exercise_progress",
    "build_session",
    "calculate_records_by_reps",
    "RepRecordTable",
    "calculate_workout_stats",
]
