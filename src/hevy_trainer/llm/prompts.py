"""LLM prompt templates for Hevy Trainer."""

import logging
from typing import Any, List, Sequence

from ..exceptions import HevyTrainerError
from ..models.analytics import ExerciseSummary
from ..models.hevy import Routine
from ..services.hevy_service import HevyService

logger = logging.getLogger(__name__)

TOP_EXERCISE_COUNT = 10

# ============================================================================
# ROUTINE BUILDER PROMPT
# ============================================================================

ROUTINE_BUILDER_PROMPT = """Here are your saved routines and their exercises:

{routine_list}
And here are your most frequently used exercises and their estimated one-rep maxes:

{exercise_list}
Would you like me to create a new routine based on these exercises?"""

ROUTINE_BUILDER_ERROR = (
    "I encountered an error while trying to analyze your workouts. "
    "Please try again later."
)


def _format_weight(weight: Any) -> str:
    if weight is None:
        return "-"
    weight = float(weight)
    return f"{weight:g}"


def _format_routine_exercise(exercise: Any) -> str:
    """One routine exercise with its planned working sets."""
    if not isinstance(exercise, dict):
        return f"  • {exercise}"

    title = exercise.get("title") or exercise.get("exercise_template_id") or "Unknown exercise"
    sets = []
    for set_entry in exercise.get("sets") or []:
        if not isinstance(set_entry, dict) or set_entry.get("type") == "warmup":
            continue
        reps = set_entry.get("reps")
        sets.append(
            f"{_format_weight(set_entry.get('weight_kg'))} kg x "
            f"{reps if reps is not None else '-'} reps"
        )
    return f"  • {title} ({', '.join(sets)})"


def format_routine_list(routines: Sequence[Routine]) -> str:
    """Routines with their exercises, warm-up sets left out."""
    blocks: List[str] = []
    for routine in routines:
        lines = [f"{routine.title or 'Untitled routine'}:"]
        lines.extend(_format_routine_exercise(e) for e in routine.exercises)
        blocks.append("\n".join(lines) + "\n")
    return "\n".join(blocks)


def format_exercise_list(summaries: Sequence[ExerciseSummary]) -> str:
    """Top exercises by frequency with their estimated 1RM."""
    blocks: List[str] = []
    for summary in summaries[:TOP_EXERCISE_COUNT]:
        estimated = summary.estimated_1rm.weight_kg if summary.estimated_1rm else 0
        blocks.append(f"{summary.name}\n• Estimated 1RM: {estimated:g} kg\n")
    return "\n".join(blocks)


async def create_routine_builder_prompt(service: HevyService) -> str:
    """
    Build the assistant message that opens a routine-building conversation.

    Lists the saved routines and the ten most trained exercises. Hevy API
    failures produce an apology message instead of raising.
    """
    try:
        summaries = await service.get_exercise_summaries(exclude_unused=True)
        routines = await service.fetch_all_routines()
    except HevyTrainerError as e:
        logger.warning(f"Routine builder prompt failed: {e.message}")
        return ROUTINE_BUILDER_ERROR

    return ROUTINE_BUILDER_PROMPT.format(
        routine_list=format_routine_list(routines),
        exercise_list=format_exercise_list(summaries.data or []),
    )
