from __future__ import annotations

from typing import Optional
from urllib.parse import urljoin

import httpx

from ..core.errors import ResourceFetchError
from .surfaces import TextBuffer


class CircuitSourceProvider:
    """
    Supplies the circuit text to execute: either the live buffer as the user
    left it, or a sample circuit fetched over HTTP and written into the buffer.
    """

    def __init__(
        self,
        buffer: TextBuffer,
        base_url: str = "http://localhost:8000/",
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._buffer = buffer
        self._base_url = base_url
        self._timeout = timeout
        self._client = client

    def read_current_circuit(self) -> str:
        """Snapshot of the live buffer. No validation; empty text is passed through."""
        return self._buffer.value

    async def load_example_circuit(self, resource_path: str) -> str:
        """
        Fetch *resource_path* (relative to the base URL), install it in the buffer
        and return it.

        Raises
        ------
        ResourceFetchError
            On an unusable URL, a transport failure or a non-2xx response.
            The buffer is left untouched.
        """
        try:
            url = urljoin(self._base_url, resource_path)
            if self._client is not None:
                response = await self._client.get(url)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            raise ResourceFetchError(resource_path, reason=str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise ResourceFetchError(resource_path, status_code=response.status_code)

        text = response.text
        self._buffer.set(text)
        return text
