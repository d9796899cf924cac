"""Tests for the Hevy API client."""

import asyncio

import httpx
import pytest

from hevy_trainer.cache import ResponseCache
from hevy_trainer.config import Settings
from hevy_trainer.exceptions import (
    ErrorCode,
    InvalidInputError,
    MalformedResponseError,
    RateLimitError,
    UpstreamFetchError,
)
from hevy_trainer.integrations.hevy import HevyClient
from hevy_trainer.models.hevy import SetType


WORKOUT_JSON = {
    "id": "w1",
    "title": "Push Day",
    "description": "",
    "start_time": "2024-01-01T10:00:00Z",
    "end_time": "2024-01-01T11:00:00Z",
    "updated_at": "2024-01-01T11:05:00Z",
    "created_at": "2024-01-01T11:05:00Z",
    "exercises": [
        {
            "index": 0,
            "title": "Bench Press (Barbell)",
            "notes": "",
            "exercise_template_id": "79D0BB3A",
            "superset_id": None,
            "sets": [
                {
                    "index": 0,
                    "type": "warmup",
                    "weight_kg": 60,
                    "reps": 10,
                    "distance_meters": None,
                    "duration_seconds": None,
                    "rpe": None,
                    "custom_metric": None,
                },
                {
                    "index": 1,
                    "type": "normal",
                    "weight_kg": 100,
                    "reps": 5,
                    "distance_meters": None,
                    "duration_seconds": None,
                    "rpe": 8.5,
                    "custom_metric": None,
                },
            ],
        }
    ],
}


class Recorder:
    """MockTransport handler that replays queued responses and records requests."""

    def __init__(self, *responses: httpx.Response):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        template = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        return httpx.Response(
            template.status_code,
            headers=template.headers,
            content=template.content,
        )


def make_client(handler, **kwargs) -> HevyClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HevyClient("test-key", http_client=http_client, **kwargs)


class TestHevyClient:
    """Tests for HevyClient requests."""

    def test_auth_headers(self):
        client = HevyClient("secret")

        headers = client.get_auth_headers()

        assert headers["api-key"] == "secret"
        assert headers["Accept"] == "application/json"

    def test_from_settings(self):
        settings = Settings(
            hevy_api_key="from-env",
            hevy_api_base_url="https://example.test/v1/",
            max_retries=5,
        )

        client = HevyClient.from_settings(settings)

        assert client.api_key == "from-env"
        assert client.base_url == "https://example.test/v1"

    @pytest.mark.asyncio
    async def test_get_workouts_parses_page(self):
        recorder = Recorder(httpx.Response(
            200, json={"page": 1, "page_count": 3, "workouts": [WORKOUT_JSON]}
        ))
        client = make_client(recorder)

        page = await client.get_workouts(page=1, page_size=10)

        assert page.page == 1
        assert page.page_count == 3
        assert len(page.items) == 1
        workout = page.items[0]
        assert workout.id == "w1"
        assert workout.exercises[0].sets[0].type == SetType.WARMUP
        assert workout.exercises[0].sets[1].weight_kg == 100

        request = recorder.requests[0]
        assert request.url.path == "/v1/workouts"
        assert request.url.params["page"] == "1"
        assert request.url.params["pageSize"] == "10"
        assert request.headers["api-key"] == "test-key"

    @pytest.mark.asyncio
    async def test_get_exercise_templates(self):
        recorder = Recorder(httpx.Response(200, json={
            "page": 1,
            "page_count": 1,
            "exercise_templates": [{
                "id": "79D0BB3A",
                "title": "Bench Press (Barbell)",
                "type": "weight_reps",
                "primary_muscle_group": "chest",
                "secondary_muscle_groups": ["triceps"],
                "equipment": "barbell",
                "is_custom": False,
            }],
        }))
        client = make_client(recorder)

        page = await client.get_exercise_templates()

        assert page.items[0].primary_muscle_group == "chest"
        assert recorder.requests[0].url.path == "/v1/exercise_templates"

    @pytest.mark.asyncio
    async def test_get_routines_accepts_name_alias(self):
        recorder = Recorder(httpx.Response(200, json={
            "page": 1,
            "page_count": 1,
            "routines": [{"id": "r1", "name": "Upper A", "exercises": [], "folder_id": None}],
        }))
        client = make_client(recorder)

        page = await client.get_routines()

        assert page.items[0].title == "Upper A"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page,page_size", [(0, 10), (1, 11), (1, 0)])
    async def test_invalid_pagination_makes_no_request(self, page, page_size):
        recorder = Recorder(httpx.Response(200, json={}))
        client = make_client(recorder)

        with pytest.raises(InvalidInputError):
            await client.get_workouts(page=page, page_size=page_size)

        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_non_2xx_raises_upstream_error(self):
        recorder = Recorder(httpx.Response(401, json={"error": "Invalid api key"}))
        client = make_client(recorder)

        with pytest.raises(UpstreamFetchError) as exc_info:
            await client.get_workouts()

        assert exc_info.value.status_code == 401
        assert "Invalid api key" in exc_info.value.message
        assert exc_info.value.code == ErrorCode.UPSTREAM_FETCH_ERROR

    @pytest.mark.asyncio
    async def test_transport_error_chained(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)

        with pytest.raises(UpstreamFetchError) as exc_info:
            await client.get_workouts()

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        client = make_client(Recorder(httpx.Response(200, text="<html>oops</html>")))

        with pytest.raises(MalformedResponseError):
            await client.get_workouts()

    @pytest.mark.asyncio
    async def test_missing_page_count(self):
        client = make_client(Recorder(httpx.Response(200, json={"page": 1, "workouts": []})))

        with pytest.raises(MalformedResponseError) as exc_info:
            await client.get_workouts()

        assert isinstance(exc_info.value, UpstreamFetchError)

    @pytest.mark.asyncio
    async def test_invalid_item(self):
        client = make_client(Recorder(httpx.Response(
            200, json={"page": 1, "page_count": 1, "workouts": [{"title": "no id"}]}
        )))

        with pytest.raises(MalformedResponseError):
            await client.get_workouts()

    @pytest.mark.asyncio
    async def test_rate_limit_retried(self):
        recorder = Recorder(
            httpx.Response(429, headers={"Retry-After": "0"}),
            httpx.Response(200, json={"page": 1, "page_count": 1, "workouts": []}),
        )
        client = make_client(recorder)

        page = await client.get_workouts()

        assert page.items == []
        assert len(recorder.requests) == 2

    @pytest.mark.asyncio
    async def test_rate_limit_exhausted(self):
        recorder = Recorder(httpx.Response(429, headers={"Retry-After": "0"}))
        client = make_client(recorder, max_retries=2)

        with pytest.raises(RateLimitError) as exc_info:
            await client.get_workouts()

        assert exc_info.value.status_code == 429
        assert exc_info.value.retry_after == 0
        assert len(recorder.requests) == 2


class TestHevyClientCaching:
    """Tests for response caching."""

    @pytest.mark.asyncio
    async def test_second_call_served_from_cache(self):
        recorder = Recorder(httpx.Response(
            200, json={"page": 1, "page_count": 1, "workouts": [WORKOUT_JSON]}
        ))
        client = make_client(recorder, cache=ResponseCache())

        first = await client.get_workouts()
        second = await client.get_workouts()

        assert len(recorder.requests) == 1
        assert first.items[0].id == second.items[0].id

    @pytest.mark.asyncio
    async def test_different_params_not_shared(self):
        recorder = Recorder(httpx.Response(200, json={"page": 1, "page_count": 2, "workouts": []}))
        client = make_client(recorder, cache=ResponseCache())

        await client.get_workouts(page=1)
        await client.get_workouts(page=2)

        assert len(recorder.requests) == 2

    @pytest.mark.asyncio
    async def test_errors_not_cached(self):
        recorder = Recorder(
            httpx.Response(500, json={"error": "boom"}),
            httpx.Response(200, json={"page": 1, "page_count": 1, "workouts": []}),
        )
        client = make_client(recorder, cache=ResponseCache())

        with pytest.raises(UpstreamFetchError):
            await client.get_workouts()
        page = await client.get_workouts()

        assert page.items == []
        assert len(recorder.requests) == 2


class TestClientLifecycle:
    """Tests for the lazily created HTTP client."""

    def test_client_reused_within_one_loop(self):
        client = HevyClient("test-key")

        async def get_twice():
            first = await client._get_client()
            second = await client._get_client()
            await client.close()
            return first, second

        first, second = asyncio.run(get_twice())

        assert first is second

    def test_new_client_for_each_event_loop(self):
        """A client from a finished loop is never reused by the next one."""
        client = HevyClient("test-key")

        first = asyncio.run(client._get_client())
        second = asyncio.run(client._get_client())

        assert first is not second

    def test_injected_client_kept_across_loops(self):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        client = HevyClient("test-key", http_client=http_client)

        assert asyncio.run(client._get_client()) is http_client
        assert asyncio.run(client._get_client()) is http_client

    @pytest.mark.asyncio
    async def test_close_then_reopen(self):
        client = HevyClient("test-key")
        first = await client._get_client()

        await client.close()
        second = await client._get_client()

        assert first.is_closed
        assert second is not first
        await client.close()
