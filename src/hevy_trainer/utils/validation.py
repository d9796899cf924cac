"""Request parameter validation.

Everything here runs before a request is issued, so an out-of-range value
never reaches the network.
"""

from typing import Any, Optional, Tuple

from ..exceptions import InvalidInputError


MAX_PAGE_SIZE = 10


def _as_int(value: Any, field: str, message: str) -> int:
    if isinstance(value, bool):
        raise InvalidInputError(message, field=field)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(message, field=field) from None
    if not number.is_integer():
        raise InvalidInputError(message, field=field)
    return int(number)


def validate_pagination(page: Any = 1, page_size: Any = MAX_PAGE_SIZE) -> Tuple[int, int]:
    """
    Validate page and pageSize for a Hevy list endpoint.

    Returns:
        (page, page_size) as ints

    Raises:
        InvalidInputError: If page < 1 or page_size is outside 1..10
    """
    page_message = "Page must be a number greater than 0"
    page_number = _as_int(page, "page", page_message)
    if page_number < 1:
        raise InvalidInputError(page_message, field="page")

    size_message = f"PageSize must be a number between 1 and {MAX_PAGE_SIZE}"
    size = _as_int(page_size, "pageSize", size_message)
    if size < 1 or size > MAX_PAGE_SIZE:
        raise InvalidInputError(size_message, field="pageSize")

    return page_number, size


def validate_limit(
    limit: Any,
    minimum: int,
    maximum: int,
    field: str = "limit",
) -> int:
    """Validate an integer result limit within [minimum, maximum]."""
    message = f"{field} must be a whole number between {minimum} and {maximum}"
    value = _as_int(limit, field, message)
    if value < minimum or value > maximum:
        raise InvalidInputError(message, field=field)
    return value


def validate_search_term(search_term: Optional[str]) -> Optional[str]:
    """Normalise an optional search term; blank means no filter."""
    if search_term is None:
        return None
    if not isinstance(search_term, str):
        raise InvalidInputError("searchTerm must be a string", field="searchTerm")
    search_term = search_term.strip()
    return search_term or None
