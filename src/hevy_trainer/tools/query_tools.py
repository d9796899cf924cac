"""
LangChain-compatible tools for querying Hevy workout data.

These tools let an AI agent query training history on demand. Each tool is
decorated with @tool from langchain_core.tools and can be used directly in
LangChain agents.

Tools:
- get_workouts: Recent workouts with stats and set breakdown
- get_workout_details: A single workout with full set data
- get_exercise_progress_by_ids: Progress and personal records per exercise
- get_exercises: Exercise summaries sorted by how often they are trained
- get_routines: Saved routines
- analyze_workout_volume: Volume and frequency per muscle group

Every tool returns a dictionary envelope:
- {"success": True, "status": "ok", ...payload}
- {"success": True, "status": "no_data", "message": ...} when nothing matched
- {"success": False, "status": "error", "error_code": ..., "message": ...}

Tools never raise: invalid arguments and Hevy API failures are reported in
the envelope and logged.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from langchain_core.tools import tool

from ..analysis import calculate_workout_stats
from ..exceptions import ErrorCode, HevyTrainerError, InvalidInputError, UpstreamFetchError
from ..models.hevy import Workout
from ..services.base import ResultStatus, ServiceResult
from ..services.hevy_service import HevyService

logger = logging.getLogger(__name__)


# ============================================================================
# Service access
# ============================================================================

_service: Optional[HevyService] = None


def get_hevy_service() -> HevyService:
    """Get the shared HevyService, creating it from settings on first use."""
    global _service
    if _service is None:
        _service = HevyService.from_settings()
    return _service


def set_hevy_service(service: Optional[HevyService]) -> None:
    """Replace the shared HevyService (None resets it)."""
    global _service
    _service = service


# ============================================================================
# Envelopes
# ============================================================================


def _ok(**payload: Any) -> Dict[str, Any]:
    return {"success": True, "status": ResultStatus.OK.value, **payload}


def _no_data(message: str) -> Dict[str, Any]:
    return {"success": True, "status": ResultStatus.NO_DATA.value, "message": message}


def _error(message: str, error_code: ErrorCode, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    envelope: Dict[str, Any] = {
        "success": False,
        "status": ResultStatus.ERROR.value,
        "error_code": error_code.value,
        "message": message,
    }
    if details:
        envelope["details"] = details
    return envelope


async def _run_tool(
    tool_name: str,
    operation: Callable[[HevyService], Awaitable[Dict[str, Any]]],
) -> Dict[str, Any]:
    """Run a tool body against the shared service and map errors to envelopes."""
    try:
        return await operation(get_hevy_service())

    except InvalidInputError as e:
        logger.info(f"{tool_name} rejected input: {e.message}")
        return _error(e.message, ErrorCode.VALIDATION_ERROR, e.details)

    except UpstreamFetchError as e:
        logger.warning(f"{tool_name} failed to fetch from Hevy: {e.message}")
        details = dict(e.details)
        details["reason"] = e.code.value
        return _error(e.message, ErrorCode.UPSTREAM_FETCH_ERROR, details)

    except HevyTrainerError as e:
        logger.warning(f"{tool_name} failed: {e.message}")
        return _error(e.message, e.code, e.details)

    except Exception as e:
        logger.error(f"{tool_name} failed unexpectedly: {e}", exc_info=True)
        return _error(f"{tool_name} failed: {e}", ErrorCode.INTERNAL_ERROR)


def _from_result(result: ServiceResult, **payload: Any) -> Dict[str, Any]:
    if result.status == ResultStatus.NO_DATA:
        return _no_data(result.message or "No data found")
    return _ok(**payload)


# ============================================================================
# Formatting
# ============================================================================


def _format_workout(workout: Workout, include_details: bool = False) -> Dict[str, Any]:
    """Condense a workout to stats plus a per-exercise set breakdown."""
    stats = calculate_workout_stats(workout)
    formatted: Dict[str, Any] = {
        "id": workout.id,
        "title": workout.title,
        "date": workout.start_time.isoformat(),
        **stats.to_dict(),
        "exercises": [
            {
                "id": exercise.exercise_template_id,
                "name": exercise.title,
                "sets": [
                    {
                        "index": s.index,
                        "type": s.type.value,
                        "weightKg": s.weight_kg,
                        "reps": s.reps,
                    }
                    for s in exercise.sets
                ],
            }
            for exercise in workout.exercises
        ],
    }

    if include_details:
        formatted["description"] = workout.description
        formatted["endTime"] = workout.end_time.isoformat() if workout.end_time else None
        formatted["exercises"] = [
            {
                "id": exercise.exercise_template_id,
                "name": exercise.title,
                "notes": exercise.notes,
                "supersetId": exercise.superset_id,
                "sets": [
                    {
                        "index": s.index,
                        "type": s.type.value,
                        "weightKg": s.weight_kg,
                        "reps": s.reps,
                        "distanceMeters": s.distance_meters,
                        "durationSeconds": s.duration_seconds,
                        "rpe": s.rpe,
                    }
                    for s in exercise.sets
                ],
            }
            for exercise in workout.exercises
        ]

    return formatted


# ============================================================================
# Tools
# ============================================================================


@tool
async def get_workouts(
    limit: int = 10,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> Dict[str, Any]:
    """Get recent workouts with stats and a per-exercise set breakdown.

    Use this tool to see what the user trained recently. Results are sorted by
    date descending (most recent first).

    Args:
        limit: Maximum number of workouts to return (1-10, default 10).
        start_date: Only include workouts on or after this date
            (ISO format: YYYY-MM-DD). Example: "2024-01-01"
        end_date: Only include workouts on or before this date
            (ISO format: YYYY-MM-DD). The whole day is included.

    Returns:
        Dictionary containing:
        - workouts: List of workouts, each with id, title, date,
          durationMinutes, exerciseCount, totalSets, totalVolume (kg) and
          exercises (id, name, sets with weightKg and reps)
        - totalWorkouts: Number of workouts in the date range
        - returnedWorkouts: Number of workouts returned
    """
    async def operation(service: HevyService) -> Dict[str, Any]:
        result = await service.get_recent_workouts(limit, start_date, end_date)
        if result.status == ResultStatus.NO_DATA:
            return _no_data(result.message or "No workouts found")
        workouts, total = result.data
        return _ok(
            workouts=[_format_workout(w) for w in workouts],
            totalWorkouts=total,
            returnedWorkouts=len(workouts),
        )

    return await _run_tool("get_workouts", operation)


@tool
async def get_workout_details(workout_id: str) -> Dict[str, Any]:
    """Get detailed information about a single workout.

    Use this after get_workouts when the user asks about one specific
    session. Includes notes, supersets, RPE and distance/duration sets.

    Args:
        workout_id: The workout ID. Get this from get_workouts results.

    Returns:
        Dictionary containing:
        - workout: id, title, description, date, endTime, durationMinutes,
          exerciseCount, totalSets, totalVolume and full exercise/set data
    """
    async def operation(service: HevyService) -> Dict[str, Any]:
        if not workout_id:
            raise InvalidInputError("workout_id is required", field="workoutId")
        result = await service.get_workout_details(workout_id)
        if result.status == ResultStatus.NO_DATA:
            return _no_data(result.message or f"No workout found with ID: {workout_id}")
        return _ok(workout=_format_workout(result.data, include_details=True))

    return await _run_tool("get_workout_details", operation)


@tool
async def get_exercise_progress_by_ids(
    exercise_ids: List[str],
    limit: int = 10,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> Dict[str, Any]:
    """Get progress history and personal records for specific exercises.

    Use this tool to answer "am I getting stronger at X?". Get exercise IDs
    from get_exercises first.

    Personal records are the heaviest weight ever lifted for each exact rep
    count (warm-up sets excluded), computed over every session in the date
    range. Sessions list only the most recent ones.

    Args:
        exercise_ids: Exercise template IDs to analyze.
        limit: Number of most recent sessions to include per exercise
            (0-10, default 10). Use 0 for records only.
        start_date: Only include workouts on or after this date (YYYY-MM-DD).
        end_date: Only include workouts on or before this date (YYYY-MM-DD).

    Returns:
        Dictionary containing:
        - exerciseProgress: List of entries, one per matched exercise:
            - exercise: {id, title, type, primaryMuscleGroup,
              secondaryMuscleGroups, equipment, isCustom}
            - personalRecords: [{reps, weightKg, date}] sorted by reps
            - sessions: [{workoutId, date, sets, maxVolume, maxWeight,
              maxReps}] most recent first
    """
    async def operation(service: HevyService) -> Dict[str, Any]:
        result = await service.get_exercise_progress(exercise_ids, limit, start_date, end_date)
        if result.status == ResultStatus.NO_DATA:
            return _no_data(result.message or "No exercises found")
        return _ok(exerciseProgress=[p.to_dict() for p in result.data])

    return await _run_tool("get_exercise_progress_by_ids", operation)


@tool
async def get_exercises(
    search_term: Optional[str] = None,
    exclude_unused: bool = True,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> Dict[str, Any]:
    """Get exercises with usage frequency and strength records.

    Use this tool to find exercise IDs, to see which exercises the user
    trains most, or to look up their best lifts. Results are sorted by
    frequency (most used first).

    Args:
        search_term: Only include exercises whose name contains this text
            (case-insensitive). Example: "bench"
        exclude_unused: Leave out exercises never performed in the date
            range (default True).
        start_date: Only count workouts on or after this date (YYYY-MM-DD).
        end_date: Only count workouts on or before this date (YYYY-MM-DD).

    Returns:
        Dictionary containing:
        - exercises: List of summaries, each with:
            - id, name, type, primaryMuscleGroup, secondaryMuscleGroups,
              equipment, isCustom
            - frequency: Number of workouts containing the exercise
            - actual1RM: Heaviest weight lifted at any rep count {weightKg, date}
            - estimated1RM: Highest Brzycki estimate {weightKg, date}
            - recordsByReps: [{reps, weightKg, date}] sorted by reps
    """
    async def operation(service: HevyService) -> Dict[str, Any]:
        result = await service.get_exercise_summaries(
            search_term, exclude_unused, start_date, end_date
        )
        return _from_result(
            result,
            exercises=[s.to_dict() for s in result.data or []],
        )

    return await _run_tool("get_exercises", operation)


@tool
async def get_routines() -> Dict[str, Any]:
    """Get the user's saved workout routines.

    Returns:
        Dictionary containing:
        - routines: List of routines with their exercises and planned sets
    """
    async def operation(service: HevyService) -> Dict[str, Any]:
        routines = await service.fetch_all_routines()
        if not routines:
            return _no_data("No routines found")
        return _ok(routines=[r.model_dump(mode="json") for r in routines])

    return await _run_tool("get_routines", operation)


@tool
async def analyze_workout_volume(timeframe: str = "week") -> Dict[str, Any]:
    """Analyze training volume and frequency per muscle group.

    Use this tool to check training balance, e.g. "am I neglecting legs?".
    Volume is the sum of weight x reps of working sets, credited to each
    exercise's primary muscle group.

    Args:
        timeframe: Look-back window. Options: "week", "month", "quarter",
            "year", "all". Default "week".

    Returns:
        Dictionary containing:
        - analysis:
            - timeframe, startDate, workoutCount
            - volumeByMuscleGroup: [{muscleGroup, volume, sets}] highest first
            - muscleGroupFrequency: [{muscleGroup, frequency, lastWorkedOut}]
    """
    async def operation(service: HevyService) -> Dict[str, Any]:
        result = await service.analyze_workout_volume(timeframe)
        if result.status == ResultStatus.NO_DATA:
            return _no_data(result.message or "No workouts found")
        return _ok(analysis=result.data.to_dict())

    return await _run_tool("analyze_workout_volume", operation)
