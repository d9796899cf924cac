"""Workout analytics for the Hevy fitness API."""

from .cache import ResponseCache
from .config import Settings, get_settings
from .integrations import HevyClient
from .metrics import OneRepMaxFormula, estimate_one_rep_max
from .services import HevyService, PagedFetcher, ServiceResult

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Configuration
    "Settings",
    "get_settings",
    # Client and cache
    "HevyClient",
    "ResponseCache",
    # Services
    "HevyService",
    "PagedFetcher",
    "ServiceResult",
    # Metrics
    "OneRepMaxFormula",
    "estimate_one_rep_max",
]
