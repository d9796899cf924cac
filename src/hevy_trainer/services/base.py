"""
Base service classes.

Defines the shared base class and result wrapper for services.
"""

import logging
from abc import ABC
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from ..cache import CacheProtocol


T = TypeVar("T")


class ResultStatus(str, Enum):
    """Outcome of a service operation."""
    OK = "ok"
    NO_DATA = "no_data"
    ERROR = "error"


class BaseService(ABC):
    """
    Abstract base class for services.

    Provides common functionality:
    - Logging setup
    - Cache integration
    """

    def __init__(
        self,
        cache: Optional[CacheProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._cache = cache
        self._logger = logger or logging.getLogger(self.__class__.__name__)

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger

    @property
    def cache(self) -> Optional[CacheProtocol]:
        """Get the cache instance."""
        return self._cache


class ServiceResult(BaseModel, Generic[T]):
    """
    Wrapper for service operation results.

    ``no_data`` is a successful outcome with nothing to show (an unknown
    exercise id, an empty date range); it is not an error.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    success: bool
    status: ResultStatus = ResultStatus.OK
    data: Optional[T] = None
    message: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @property
    def has_data(self) -> bool:
        return self.status == ResultStatus.OK

    @classmethod
    def ok(
        cls,
        data: T,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[T]":
        """Create a successful result."""
        return cls(success=True, status=ResultStatus.OK, data=data, metadata=metadata)

    @classmethod
    def no_data(
        cls,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[T]":
        """Create a successful result that found nothing."""
        return cls(
            success=True,
            status=ResultStatus.NO_DATA,
            message=message,
            metadata=metadata,
        )

    @classmethod
    def fail(
        cls,
        error: str,
        error_code: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[T]":
        """Create a failed result."""
        return cls(
            success=False,
            status=ResultStatus.ERROR,
            error=error,
            error_code=error_code,
            metadata=metadata,
        )
