"""Per-exercise progress history and personal records.

For one exercise template:
- every workout that contains it becomes a ``ProgressSession`` with its sets
  and per-session maxima (volume, weight, reps)
- all sessions fold into a best-weight-per-rep-count table

Warm-up sets are shown in sessions but never count toward maxima or records.
"""

from typing import Iterable, List

from ..models.analytics import (
    ExerciseInfo,
    ExerciseProgress,
    ProgressSession,
    RepRecord,
    SessionSet,
)
from ..models.hevy import ExerciseTemplate, SetEntry, SetType, Workout
from .records import RepRecordTable


def build_session(workout: Workout, sets: List[SetEntry]) -> ProgressSession:
    """Reduce one workout's sets of an exercise to a session."""
    working = [s for s in sets if not s.is_warmup]

    # The three maxima are independent; they need not come from the same set.
    return ProgressSession(
        workout_id=workout.id,
        date=workout.start_time,
        sets=[
            SessionSet(index=s.index, type=s.type, weight_kg=s.weight_kg, reps=s.reps)
            for s in sets
        ],
        max_volume=max((s.volume for s in working), default=0.0),
        max_weight=max((s.weight_kg or 0.0 for s in working), default=0.0),
        max_reps=max((s.reps or 0 for s in working), default=0),
    )


def analyze_progress(exercise_id: str, workouts: Iterable[Workout]) -> List[ProgressSession]:
    """
    Extract every session of an exercise, oldest first.

    An exercise logged twice in the same workout yields a single session
    holding both entries' sets.
    """
    sessions: List[ProgressSession] = []
    for workout in workouts:
        entries = workout.entries_for(exercise_id)
        if not entries:
            continue
        sets = [set_entry for entry in entries for set_entry in entry.sets]
        sessions.append(build_session(workout, sets))

    sessions.sort(key=lambda session: session.date)
    return sessions


def calculate_records_by_reps(sessions: Iterable[ProgressSession]) -> List[RepRecord]:
    """Heaviest working-set weight for each rep count, ascending by reps."""
    table = RepRecordTable()
    for session in sessions:
        for session_set in session.sets:
            if session_set.type == SetType.WARMUP:
                continue
            table.add(session_set.reps, session_set.weight_kg, session.date)
    return table.records()


def build_exercise_progress(
    exercise: ExerciseTemplate,
    workouts: Iterable[Workout],
    limit: int = 10,
) -> ExerciseProgress:
    """
    Personal records over the full history plus the latest sessions.

    Records are computed from every session; ``sessions`` holds only the
    ``limit`` most recent ones, newest first.
    """
    sessions = analyze_progress(exercise.id, workouts)
    records = calculate_records_by_reps(sessions)
    recent = list(reversed(sessions))[:max(limit, 0)]

    return ExerciseProgress(
        exercise=ExerciseInfo.from_template(exercise),
        personal_records=records,
        sessions=recent,
    )
