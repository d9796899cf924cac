"""Tests for the exception hierarchy and settings."""

from hevy_trainer.config import Settings
from hevy_trainer.exceptions import (
    ErrorCode,
    HevyTrainerError,
    InvalidInputError,
    MalformedResponseError,
    RateLimitError,
    UpstreamFetchError,
)


class TestExceptions:
    """Tests for error codes and serialization."""

    def test_to_dict(self):
        error = InvalidInputError("Page must be a number greater than 0", field="page")

        assert error.to_dict() == {
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Page must be a number greater than 0",
                "details": {"field": "page"},
            }
        }

    def test_upstream_details(self):
        error = UpstreamFetchError("boom", endpoint="workouts", status_code=502)

        assert error.status_code == 502
        assert error.details == {"endpoint": "workouts", "status_code": 502}

    def test_hierarchy(self):
        assert issubclass(RateLimitError, UpstreamFetchError)
        assert issubclass(MalformedResponseError, UpstreamFetchError)
        assert issubclass(InvalidInputError, HevyTrainerError)

    def test_rate_limit(self):
        error = RateLimitError(endpoint="routines", retry_after=30)

        assert error.code == ErrorCode.UPSTREAM_RATE_LIMITED
        assert error.status_code == 429
        assert error.details["retry_after_seconds"] == 30


class TestSettings:
    """Tests for Settings defaults."""

    def test_defaults(self):
        settings = Settings(hevy_api_key="")

        assert settings.hevy_api_base_url == "https://api.hevyapp.com/v1"
        assert settings.cache_ttl_seconds == 300
        assert not settings.is_configured

    def test_configured(self):
        assert Settings(hevy_api_key="abc").is_configured
