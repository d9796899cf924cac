"""
Hevy workout service.

Handles:
- Fetching complete workout, routine and exercise template histories
- Date filtering of workouts
- Exercise progress, exercise summaries and muscle volume analysis
- Warming the response cache
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from ..analysis import (
    aggregate_muscle_volume,
    analyze_muscle_group_frequency,
    build_exercise_progress,
    build_exercise_summaries,
    filter_templates,
    filter_workouts_by_date,
)
from ..cache import CacheProtocol, ResponseCache
from ..config import Settings, get_settings
from ..exceptions import InvalidInputError
from ..integrations.hevy import HevyClient
from ..models.analytics import ExerciseProgress, ExerciseSummary, VolumeAnalysis
from ..models.hevy import ExerciseTemplate, Routine, Workout
from ..utils.dates import DateLike, Timeframe, get_start_date_for_timeframe, parse_date_bound
from ..utils.validation import MAX_PAGE_SIZE, validate_limit, validate_search_term
from .base import BaseService, ServiceResult
from .pagination import PagedFetcher


class HevyService(BaseService):
    """
    Service over a Hevy account's data.

    Every analysis starts from the complete history, fetched page by page
    through ``PagedFetcher``. Upstream and validation errors propagate to
    the caller; an empty result is returned as ``ServiceResult.no_data``.
    """

    def __init__(
        self,
        client: HevyClient,
        cache: Optional[CacheProtocol] = None,
        logger: Optional[logging.Logger] = None,
        page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        super().__init__(cache=cache, logger=logger)
        self._client = client
        self._page_size = page_size

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "HevyService":
        """Build a service with its own client and response cache."""
        settings = settings or get_settings()
        cache = ResponseCache(
            ttl_seconds=settings.cache_ttl_seconds,
            max_size=settings.cache_max_size,
        )
        client = HevyClient.from_settings(settings, cache=cache)
        return cls(client, cache=cache)

    @property
    def client(self) -> HevyClient:
        return self._client

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> "HevyService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # =========================================================================
    # Full-history fetches
    # =========================================================================

    async def fetch_all_workouts(self) -> List[Workout]:
        fetcher = PagedFetcher(
            "workouts", self._client.get_workouts, self._page_size, self._logger
        )
        return await fetcher.fetch_all()

    async def fetch_all_exercise_templates(self) -> List[ExerciseTemplate]:
        fetcher = PagedFetcher(
            "exercise templates", self._client.get_exercise_templates, self._page_size, self._logger
        )
        return await fetcher.fetch_all()

    async def fetch_all_routines(self) -> List[Routine]:
        fetcher = PagedFetcher(
            "routines", self._client.get_routines, self._page_size, self._logger
        )
        return await fetcher.fetch_all()

    # =========================================================================
    # Workouts
    # =========================================================================

    async def get_workouts(
        self,
        start_date: DateLike = None,
        end_date: DateLike = None,
    ) -> List[Workout]:
        """
        Workouts within an inclusive date range, newest first.

        A date-only ``end_date`` includes the whole of that day.
        """
        start = parse_date_bound(start_date)
        end = parse_date_bound(end_date, end_of_day=True)

        workouts = filter_workouts_by_date(await self.fetch_all_workouts(), start, end)
        workouts.sort(key=lambda workout: workout.start_time, reverse=True)
        return workouts

    async def get_recent_workouts(
        self,
        limit: int = MAX_PAGE_SIZE,
        start_date: DateLike = None,
        end_date: DateLike = None,
    ) -> ServiceResult[Tuple[List[Workout], int]]:
        """
        The ``limit`` most recent workouts in range, plus the total in range.

        Raises:
            InvalidInputError: If limit is outside 1..10 or a date is invalid
        """
        limit = validate_limit(limit, 1, MAX_PAGE_SIZE)
        workouts = await self.get_workouts(start_date, end_date)
        if not workouts:
            return ServiceResult.no_data("No workouts found in the requested range")
        return ServiceResult.ok((workouts[:limit], len(workouts)))

    async def get_workout_details(self, workout_id: str) -> ServiceResult[Workout]:
        """Find a single workout by id."""
        for workout in await self.fetch_all_workouts():
            if workout.id == workout_id:
                return ServiceResult.ok(workout)
        return ServiceResult.no_data(f"No workout found with ID: {workout_id}")

    # =========================================================================
    # Exercises
    # =========================================================================

    async def search_exercise_templates(
        self,
        search_term: Optional[str] = None,
    ) -> List[ExerciseTemplate]:
        """Exercise templates whose title contains the search term."""
        search_term = validate_search_term(search_term)
        return filter_templates(await self.fetch_all_exercise_templates(), search_term)

    async def get_exercise_progress(
        self,
        exercise_ids: Sequence[str],
        limit: int = MAX_PAGE_SIZE,
        start_date: DateLike = None,
        end_date: DateLike = None,
    ) -> ServiceResult[List[ExerciseProgress]]:
        """
        Progress and personal records for each requested exercise template.

        Unknown ids are ignored. Entries follow the order of ``exercise_ids``.

        Raises:
            InvalidInputError: If limit is outside 0..10 or a date is invalid
        """
        limit = validate_limit(limit, 0, MAX_PAGE_SIZE)
        workouts = await self.get_workouts(start_date, end_date)
        templates = await self.fetch_all_exercise_templates()

        by_id: Dict[str, ExerciseTemplate] = {t.id: t for t in templates}
        matched = []
        for exercise_id in dict.fromkeys(exercise_ids):
            template = by_id.get(exercise_id)
            if template is not None:
                matched.append(template)

        if not matched:
            return ServiceResult.no_data("No exercises found matching the provided IDs")

        progress = [build_exercise_progress(t, workouts, limit) for t in matched]
        self._logger.debug(f"Built progress for {len(progress)} exercise(s)")
        return ServiceResult.ok(progress)

    async def get_exercise_summaries(
        self,
        search_term: Optional[str] = None,
        exclude_unused: bool = True,
        start_date: DateLike = None,
        end_date: DateLike = None,
    ) -> ServiceResult[List[ExerciseSummary]]:
        """Exercise summaries sorted by frequency, most used first."""
        search_term = validate_search_term(search_term)
        start = parse_date_bound(start_date)
        end = parse_date_bound(end_date, end_of_day=True)

        templates = await self.fetch_all_exercise_templates()
        workouts = await self.fetch_all_workouts()

        summaries = build_exercise_summaries(
            templates,
            workouts,
            search_term=search_term,
            exclude_unused=exclude_unused,
            start_date=start,
            end_date=end,
        )
        if not summaries:
            message = (
                f"No exercises found matching: {search_term}"
                if search_term
                else "No exercise data found"
            )
            return ServiceResult.no_data(message)
        return ServiceResult.ok(summaries)

    # =========================================================================
    # Volume
    # =========================================================================

    async def analyze_workout_volume(
        self,
        timeframe: str = Timeframe.WEEK.value,
        now: Optional[datetime] = None,
    ) -> ServiceResult[VolumeAnalysis]:
        """
        Volume and frequency per primary muscle group over a look-back window.

        Raises:
            InvalidInputError: If timeframe is not week, month, quarter, year or all
        """
        try:
            window = Timeframe(timeframe)
        except ValueError:
            options = ", ".join(t.value for t in Timeframe)
            raise InvalidInputError(
                f"Timeframe must be one of: {options}",
                field="timeframe",
            ) from None

        start = get_start_date_for_timeframe(window, now)
        workouts = filter_workouts_by_date(await self.fetch_all_workouts(), start)
        if not workouts:
            return ServiceResult.no_data(f"No workouts found for timeframe: {window.value}")

        templates = await self.fetch_all_exercise_templates()
        return ServiceResult.ok(
            VolumeAnalysis(
                timeframe=window.value,
                start_date=start,
                workout_count=len(workouts),
                volume_by_muscle_group=aggregate_muscle_volume(workouts, templates),
                muscle_group_frequency=analyze_muscle_group_frequency(workouts, templates),
            )
        )

    # =========================================================================
    # Cache
    # =========================================================================

    async def populate_cache(self) -> Dict[str, int]:
        """Fetch every resource once so later calls are served from cache."""
        workouts = await self.fetch_all_workouts()
        templates = await self.fetch_all_exercise_templates()
        routines = await self.fetch_all_routines()

        counts = {
            "workouts": len(workouts),
            "exercise_templates": len(templates),
            "routines": len(routines),
        }
        self._logger.info(
            f"Cache populated: {counts['workouts']} workouts, "
            f"{counts['exercise_templates']} exercise templates, "
            f"{counts['routines']} routines"
        )
        return counts
