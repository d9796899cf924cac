"""
Hevy public API client.

Implements:
- Paginated listing of workouts, routines and exercise templates
- Response caching through an injected cache (GET only)
- Rate limit handling with Retry-After

Every list endpoint is capped at 10 items per page upstream; callers that
need everything should go through ``PagedFetcher``.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..cache import CacheProtocol, build_cache_key
from ..config import Settings
from ..exceptions import MalformedResponseError, RateLimitError, UpstreamFetchError
from ..models.hevy import ExerciseTemplate, Page, Routine, Workout
from ..utils.validation import MAX_PAGE_SIZE, validate_pagination
from .base import IntegrationClient

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class HevyClient(IntegrationClient):
    """
    Client for the Hevy API v1.

    Usage:
        async with HevyClient(api_key, cache=ResponseCache()) as client:
            page = await client.get_workouts(page=1, page_size=10)
    """

    provider = "hevy"
    base_url = "https://api.hevyapp.com/v1"

    # Retry-After is honoured up to this many seconds
    MAX_RETRY_WAIT_SECONDS = 60

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        cache: Optional[CacheProtocol] = None,
        cache_ttl_seconds: Optional[int] = None,
        timeout: float = 30.0,
        max_retries: int = 3,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(timeout=timeout, http_client=http_client)
        self.api_key = api_key
        if base_url:
            self.base_url = base_url.rstrip("/")
        self._cache = cache
        self._cache_ttl_seconds = cache_ttl_seconds
        self._max_retries = max(1, max_retries)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        cache: Optional[CacheProtocol] = None,
    ) -> "HevyClient":
        """Build a client from application settings."""
        return cls(
            api_key=settings.hevy_api_key,
            base_url=settings.hevy_api_base_url,
            cache=cache,
            cache_ttl_seconds=settings.cache_ttl_seconds,
            timeout=settings.request_timeout_seconds,
            max_retries=settings.max_retries,
        )

    def get_auth_headers(self) -> Dict[str, str]:
        return {
            "api-key": self.api_key,
            "Accept": "application/json",
        }

    async def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET an endpoint, serving from cache when a fresh copy exists."""
        url = f"{self.base_url}/{endpoint}"
        cache_key = build_cache_key(url, params)

        if self._cache is not None:
            cached = await self._cache.get(cache_key)
            if cached is not None:
                logger.debug(f"Cache hit: {cache_key}")
                return cached
            logger.debug(f"Cache miss: {cache_key}")

        data = await self._request("GET", url, endpoint, params)

        if self._cache is not None:
            await self._cache.set(cache_key, data, self._cache_ttl_seconds)

        return data

    async def _request(
        self,
        method: str,
        url: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make an API request with rate limit handling.

        Raises:
            RateLimitError: If still rate limited after all retries
            MalformedResponseError: If the body is not JSON
            UpstreamFetchError: For transport errors and other non-2xx responses
        """
        client = await self._get_client()

        for attempt in range(self._max_retries):
            try:
                response = await client.request(
                    method,
                    url,
                    headers=self.get_auth_headers(),
                    params=params,
                )
            except httpx.HTTPError as e:
                raise UpstreamFetchError(
                    f"Hevy API request failed: {e}",
                    endpoint=endpoint,
                ) from e

            if response.is_success:
                try:
                    return response.json()
                except ValueError as e:
                    raise MalformedResponseError(
                        "Hevy API returned a non-JSON body",
                        endpoint=endpoint,
                    ) from e

            if response.status_code == 429:
                retry_after = self._get_retry_after(response)
                if attempt < self._max_retries - 1:
                    logger.warning(
                        f"Rate limited on {endpoint}, retrying in {retry_after}s "
                        f"(attempt {attempt + 1}/{self._max_retries})"
                    )
                    await asyncio.sleep(min(retry_after, self.MAX_RETRY_WAIT_SECONDS))
                    continue
                raise RateLimitError(endpoint=endpoint, retry_after=retry_after)

            try:
                error_data = response.json()
                error_msg = error_data.get("error") or error_data.get("message") or str(error_data)
            except (ValueError, AttributeError):
                error_msg = response.text or f"HTTP {response.status_code}"

            raise UpstreamFetchError(
                f"Hevy API error: {error_msg}",
                endpoint=endpoint,
                status_code=response.status_code,
            )

        # Only reachable with max_retries < 1, which __init__ prevents
        raise UpstreamFetchError("Max retries exceeded", endpoint=endpoint)

    def _get_retry_after(self, response: httpx.Response) -> int:
        """Get retry-after time from a rate limit response."""
        retry_after = response.headers.get("Retry-After")
        if retry_after:
            try:
                return max(0, int(retry_after))
            except ValueError:
                pass
        return self.MAX_RETRY_WAIT_SECONDS

    async def _get_page(
        self,
        endpoint: str,
        items_key: str,
        model: Type[M],
        page: int,
        page_size: int,
    ) -> Page[M]:
        """Fetch and parse one page of a list endpoint."""
        page, page_size = validate_pagination(page, page_size)
        data = await self._get(endpoint, {"page": page, "pageSize": page_size})

        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Expected an object from {endpoint}, got {type(data).__name__}",
                endpoint=endpoint,
            )

        raw_items = data.get(items_key) or []
        if not isinstance(raw_items, list):
            raise MalformedResponseError(
                f"'{items_key}' is not a list",
                endpoint=endpoint,
            )

        try:
            items: List[M] = [model.model_validate(item) for item in raw_items]
            return Page[model](
                items=items,
                page=int(data.get("page", page)),
                page_count=int(data["page_count"]),
            )
        except KeyError as e:
            raise MalformedResponseError(
                f"Missing {e} in {endpoint} response",
                endpoint=endpoint,
            ) from e
        except (ValidationError, TypeError, ValueError) as e:
            raise MalformedResponseError(
                f"Unexpected {endpoint} payload: {e}",
                endpoint=endpoint,
            ) from e

    async def get_workouts(self, page: int = 1, page_size: int = MAX_PAGE_SIZE) -> Page[Workout]:
        """Get one page of workouts (newest first upstream)."""
        return await self._get_page("workouts", "workouts", Workout, page, page_size)

    async def get_routines(self, page: int = 1, page_size: int = MAX_PAGE_SIZE) -> Page[Routine]:
        """Get one page of routines."""
        return await self._get_page("routines", "routines", Routine, page, page_size)

    async def get_exercise_templates(
        self,
        page: int = 1,
        page_size: int = MAX_PAGE_SIZE,
    ) -> Page[ExerciseTemplate]:
        """Get one page of exercise templates."""
        return await self._get_page(
            "exercise_templates", "exercise_templates", ExerciseTemplate, page, page_size
        )
