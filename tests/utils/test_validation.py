"""Tests for request parameter validation."""

import pytest

from hevy_trainer.exceptions import ErrorCode, InvalidInputError
from hevy_trainer.utils.validation import (
    validate_limit,
    validate_pagination,
    validate_search_term,
)


class TestValidatePagination:
    """Tests for validate_pagination."""

    def test_defaults(self):
        assert validate_pagination() == (1, 10)

    def test_valid_values(self):
        assert validate_pagination(3, 5) == (3, 5)

    def test_whole_floats_accepted(self):
        assert validate_pagination(2.0, 10.0) == (2, 10)

    @pytest.mark.parametrize("page", [0, -1, 1.5, "abc", None, True])
    def test_invalid_page(self, page):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_pagination(page, 10)

        assert exc_info.value.message == "Page must be a number greater than 0"
        assert exc_info.value.details["field"] == "page"
        assert exc_info.value.code == ErrorCode.VALIDATION_ERROR

    @pytest.mark.parametrize("page_size", [0, 11, -5, 2.5])
    def test_invalid_page_size(self, page_size):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_pagination(1, page_size)

        assert exc_info.value.message == "PageSize must be a number between 1 and 10"
        assert exc_info.value.details["field"] == "pageSize"


class TestValidateLimit:
    """Tests for validate_limit."""

    def test_in_range(self):
        assert validate_limit(5, 1, 10) == 5

    def test_bounds_inclusive(self):
        assert validate_limit(0, 0, 10) == 0
        assert validate_limit(10, 0, 10) == 10

    def test_out_of_range(self):
        with pytest.raises(InvalidInputError):
            validate_limit(11, 1, 10)
        with pytest.raises(InvalidInputError):
            validate_limit(0, 1, 10)


class TestValidateSearchTerm:
    """Tests for validate_search_term."""

    def test_none(self):
        assert validate_search_term(None) is None

    def test_blank_is_no_filter(self):
        assert validate_search_term("   ") is None

    def test_stripped(self):
        assert validate_search_term("  bench ") == "bench"

    def test_non_string(self):
        with pytest.raises(InvalidInputError):
            validate_search_term(42)
