"""Summary statistics for a single workout."""

from ..models.analytics import WorkoutStats
from ..models.hevy import Workout


def calculate_workout_stats(workout: Workout) -> WorkoutStats:
    """Duration (whole minutes), exercise and set counts, and working volume."""
    duration_minutes = 0
    if workout.end_time is not None:
        seconds = (workout.end_time - workout.start_time).total_seconds()
        duration_minutes = max(0, round(seconds / 60))

    total_sets = 0
    total_volume = 0.0
    for entry in workout.exercises:
        total_sets += len(entry.sets)
        total_volume += sum(s.volume for s in entry.sets if not s.is_warmup)

    return WorkoutStats(
        duration_minutes=duration_minutes,
        exercise_count=len(workout.exercises),
        total_sets=total_sets,
        total_volume=total_volume,
    )
