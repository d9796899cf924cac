"""LangChain tools for querying Hevy workout data."""

from .documentation import format_tool_documentation, get_tools_documentation
from .query_tools import (
    analyze_workout_volume,
    get_exercise_progress_by_ids,
    get_exercises,
    get_hevy_service,
    get_routines,
    get_workout_details,
    get_workouts,
    set_hevy_service,
)

# Convenience list for query tools
QUERY_TOOLS = [
    get_workouts,
    get_workout_details,
    get_exercise_progress_by_ids,
    get_exercises,
    get_routines,
    analyze_workout_volume,
]


def get_query_tools():
    """Get all query tools for use in LangChain agents."""
    return QUERY_TOOLS


def get_query_tools_documentation():
    """Markdown documentation resource for QUERY_TOOLS."""
    return get_tools_documentation(QUERY_TOOLS)


__all__ = [
    "get_workouts",
    "get_workout_details",
    "get_exercise_progress_by_ids",
    "get_exercises",
    "get_routines",
    "analyze_workout_volume",
    "get_hevy_service",
    "set_hevy_service",
    "QUERY_TOOLS",
    "get_query_tools",
    "format_tool_documentation",
    "get_tools_documentation",
    "get_query_tools_documentation",
]
