"""Pytest configuration and fixtures."""

from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest

from hevy_trainer.models.hevy import ExerciseTemplate, Workout


SetRow = Tuple[Any, ...]  # (weight, reps) or (weight, reps, type)


def build_workout(
    workout_id: str,
    start_time: str,
    exercises: Sequence[Tuple[str, Sequence[SetRow]]],
    end_time: Optional[str] = None,
    title: str = "Workout",
) -> Workout:
    """Build a Workout from the same JSON shape the Hevy API returns."""
    exercise_payloads: List[Dict[str, Any]] = []
    for index, (template_id, sets) in enumerate(exercises):
        set_payloads = []
        for set_index, row in enumerate(sets):
            weight, reps = row[0], row[1]
            set_type = row[2] if len(row) > 2 else "normal"
            set_payloads.append({
                "index": set_index,
                "type": set_type,
                "weight_kg": weight,
                "reps": reps,
                "distance_meters": None,
                "duration_seconds": None,
                "rpe": None,
                "custom_metric": None,
            })
        exercise_payloads.append({
            "index": index,
            "title": template_id.title(),
            "notes": "",
            "exercise_template_id": template_id,
            "superset_id": None,
            "sets": set_payloads,
        })

    return Workout.model_validate({
        "id": workout_id,
        "title": title,
        "description": "",
        "start_time": start_time,
        "end_time": end_time,
        "created_at": start_time,
        "updated_at": start_time,
        "exercises": exercise_payloads,
    })


@pytest.fixture
def make_workout():
    """Factory for workouts: make_workout(id, start, [(template_id, [(kg, reps), ...])])."""
    return build_workout


@pytest.fixture
def templates() -> List[ExerciseTemplate]:
    """A small exercise catalogue."""
    return [
        ExerciseTemplate(
            id="bench",
            title="Bench Press (Barbell)",
            type="weight_reps",
            primary_muscle_group="chest",
            secondary_muscle_groups=["triceps", "shoulders"],
            equipment="barbell",
        ),
        ExerciseTemplate(
            id="squat",
            title="Squat (Barbell)",
            type="weight_reps",
            primary_muscle_group="quadriceps",
            secondary_muscle_groups=["glutes", "hamstrings"],
            equipment="barbell",
        ),
        ExerciseTemplate(
            id="incline",
            title="Incline Bench Press (Dumbbell)",
            type="weight_reps",
            primary_muscle_group="chest",
            secondary_muscle_groups=["shoulders"],
            equipment="dumbbell",
        ),
        ExerciseTemplate(
            id="row",
            title="Bent Over Row (Barbell)",
            type="weight_reps",
            primary_muscle_group="upper_back",
            secondary_muscle_groups=["biceps"],
            equipment="barbell",
        ),
    ]


@pytest.fixture
def history(make_workout) -> List[Workout]:
    """Two workouts of bench press plus some squats and rows."""
    return [
        make_workout(
            "w1",
            "2024-01-01T10:00:00Z",
            [
                ("bench", [(60, 10, "warmup"), (100, 8), (110, 5)]),
                ("squat", [(140, 5), (140, 5)]),
            ],
            end_time="2024-01-01T11:00:00Z",
        ),
        make_workout(
            "w2",
            "2024-01-08T10:00:00Z",
            [
                ("bench", [(90, 10)]),
                ("row", [(80, 8)]),
            ],
            end_time="2024-01-08T10:45:00Z",
        ),
    ]
