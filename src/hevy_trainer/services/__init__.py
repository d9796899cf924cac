"""
Service layer for Hevy Trainer.

Services combine the API client, pagination and analytics:
- PagedFetcher: merges every page of a list endpoint
- HevyService: the operations exposed to tools and the CLI
"""

from .base import BaseService, ResultStatus, ServiceResult
from .hevy_service import HevyService
from .pagination import PagedFetcher, fetch_all_pages

__all__ = [
    "BaseService",
    "ResultStatus",
    "ServiceResult",
    "HevyService",
    "PagedFetcher",
    "fetch_all_pages",
]
