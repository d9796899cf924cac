"""Training volume and frequency per primary muscle group."""

import logging
from datetime import datetime
from typing import Dict, Iterable, List

from ..models.analytics import MuscleGroupFrequencyEntry, MuscleVolumeEntry
from ..models.hevy import ExerciseTemplate, Workout

logger = logging.getLogger(__name__)


def _template_index(templates: Iterable[ExerciseTemplate]) -> Dict[str, ExerciseTemplate]:
    return {template.id: template for template in templates}


def aggregate_muscle_volume(
    workouts: Iterable[Workout],
    templates: Iterable[ExerciseTemplate],
) -> List[MuscleVolumeEntry]:
    """
    Sum weight x reps and count sets per primary muscle group.

    Exercises whose template is unknown (deleted or custom templates missing
    from the catalogue) are skipped. Templates without a primary muscle group
    are skipped too. Warm-up sets count as sets but add no volume.

    Returns:
        Entries sorted by volume, highest first
    """
    index = _template_index(templates)
    volume: Dict[str, float] = {}
    sets: Dict[str, int] = {}
    skipped = 0

    for workout in workouts:
        for entry in workout.exercises:
            template = index.get(entry.exercise_template_id)
            if template is None or not template.primary_muscle_group:
                skipped += 1
                continue

            group = template.primary_muscle_group
            volume.setdefault(group, 0.0)
            sets.setdefault(group, 0)

            for set_entry in entry.sets:
                sets[group] += 1
                if not set_entry.is_warmup:
                    volume[group] += set_entry.volume

    if skipped:
        logger.debug(f"Skipped {skipped} exercise entries with no known muscle group")

    entries = [
        MuscleVolumeEntry(muscle_group=group, volume=volume[group], sets=sets[group])
        for group in volume
    ]
    entries.sort(key=lambda entry: entry.volume, reverse=True)
    return entries


def analyze_muscle_group_frequency(
    workouts: Iterable[Workout],
    templates: Iterable[ExerciseTemplate],
) -> List[MuscleGroupFrequencyEntry]:
    """
    How many exercise entries hit each primary muscle group, and when last.

    Returns:
        Entries sorted by frequency, most trained first
    """
    index = _template_index(templates)
    frequency: Dict[str, int] = {}
    last_seen: Dict[str, datetime] = {}

    for workout in workouts:
        for entry in workout.exercises:
            template = index.get(entry.exercise_template_id)
            if template is None or not template.primary_muscle_group:
                continue

            group = template.primary_muscle_group
            frequency[group] = frequency.get(group, 0) + 1
            if group not in last_seen or workout.start_time > last_seen[group]:
                last_seen[group] = workout.start_time

    entries = [
        MuscleGroupFrequencyEntry(
            muscle_group=group,
            frequency=count,
            last_worked_out=last_seen[group],
        )
        for group, count in frequency.items()
    ]
    entries.sort(key=lambda entry: entry.frequency, reverse=True)
    return entries
