"""
Base class for external API clients.

Owns the lazily created ``httpx.AsyncClient`` and its lifecycle so concrete
clients only describe endpoints.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Dict, Optional

import httpx


class IntegrationClient(ABC):
    """
    Abstract base class for integration API clients.

    A client created here is bound to the event loop that first used it.
    Pooled connections cannot outlive their loop, so a call from another
    loop (e.g. one ``asyncio.run`` per tool call) gets a fresh client.
    """

    provider: str = "base"
    base_url: str = ""

    def __init__(
        self,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._timeout = timeout
        self._http_client = http_client
        self._owns_client = http_client is None
        self._client_loop: Optional[asyncio.AbstractEventLoop] = None

    @abstractmethod
    def get_auth_headers(self) -> Dict[str, str]:
        """Get authorization headers for API requests."""
        pass

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client for the running event loop."""
        loop = asyncio.get_running_loop()

        if (
            self._owns_client
            and self._http_client is not None
            and self._client_loop is not None
            and self._client_loop is not loop
        ):
            # The old loop's connections are unusable; drop them without aclose()
            self._http_client = None

        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True

        self._client_loop = loop
        return self._http_client

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if (
            self._owns_client
            and self._http_client is not None
            and not self._http_client.is_closed
        ):
            await self._http_client.aclose()
            self._http_client = None
            self._client_loop = None

    async def __aenter__(self) -> "IntegrationClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
