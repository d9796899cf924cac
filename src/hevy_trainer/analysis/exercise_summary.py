"""
Exercise summaries: usage frequency and strength records per template.

Used for exercise search and for picking the most trained exercises when
building prompts.
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

from ..models.analytics import ExerciseSummary
from ..models.hevy import ExerciseTemplate, Workout
from ..utils.dates import ensure_aware, is_within_range
from .records import RepRecordTable


def filter_templates(
    templates: Iterable[ExerciseTemplate],
    search_term: Optional[str] = None,
) -> List[ExerciseTemplate]:
    """Templates whose title contains ``search_term`` (case-insensitive)."""
    if not search_term:
        return list(templates)
    needle = search_term.lower()
    return [t for t in templates if needle in t.title.lower()]


def filter_workouts_by_date(
    workouts: Iterable[Workout],
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
) -> List[Workout]:
    """Workouts whose start time falls inside the inclusive range."""
    start = ensure_aware(start_date) if start_date else None
    end = ensure_aware(end_date) if end_date else None
    return [w for w in workouts if is_within_range(w.start_time, start, end)]


def build_exercise_summaries(
    templates: Sequence[ExerciseTemplate],
    workouts: Sequence[Workout],
    search_term: Optional[str] = None,
    exclude_unused: bool = False,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
) -> List[ExerciseSummary]:
    """
    Summarize each (matching) template against the workout history.

    Args:
        templates: Exercise templates to summarize
        workouts: Workout history
        search_term: Case-insensitive substring filter on template title
        exclude_unused: Drop templates never performed in the range
        start_date: Inclusive lower bound on workout start time
        end_date: Inclusive upper bound on workout start time

    Returns:
        Summaries sorted by frequency, most used first. Templates with equal
        frequency keep their input order.
    """
    matched = filter_templates(templates, search_term)
    if not matched:
        return []

    in_range = filter_workouts_by_date(workouts, start_date, end_date)
    wanted = {t.id for t in matched}

    frequency: Dict[str, int] = {template_id: 0 for template_id in wanted}
    tables: Dict[str, RepRecordTable] = {template_id: RepRecordTable() for template_id in wanted}

    for workout in in_range:
        for template_id in workout.template_ids & wanted:
            frequency[template_id] += 1
        for entry in workout.exercises:
            table = tables.get(entry.exercise_template_id)
            if table is not None:
                table.add_sets(entry.sets, workout.start_time)

    summaries = []
    for template in matched:
        table = tables[template.id]
        summaries.append(
            ExerciseSummary(
                id=template.id,
                name=template.title,
                frequency=frequency[template.id],
                actual_1rm=table.heaviest(),
                estimated_1rm=table.best_estimate(),
                records_by_reps=table.records(),
                type=template.type,
                primary_muscle_group=template.primary_muscle_group,
                secondary_muscle_groups=list(template.secondary_muscle_groups),
                equipment=template.equipment,
                is_custom=template.is_custom,
            )
        )

    summaries.sort(key=lambda summary: summary.frequency, reverse=True)

    if exclude_unused:
        summaries = [s for s in summaries if s.frequency > 0]

    return summaries
