"""
Shared pytest fixtures used across the modular test suite.
"""

from __future__ import annotations

from typing import Callable, List, Optional
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from qsim_console.core.models import ControllerConfig
from qsim_console.engine import RuntimeLoader, ScriptedEngine
from qsim_console.ui import CircuitController, CircuitSourceProvider, TextBuffer

BASE_URL = "http://example.test/"


def make_transport(status_code: int = 200, text: str = "h 0\ncx 0 1\n") -> httpx.MockTransport:
    """MockTransport that answers every request with *status_code* and *text*."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=text)

    return httpx.MockTransport(handler)


def make_http_client(status_code: int = 200, text: str = "h 0\ncx 0 1\n") -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=make_transport(status_code, text))


def make_patched_async_client(status_code: int = 200, text: str = "") -> MagicMock:
    """Return a mock httpx.AsyncClient usable as an async context manager."""
    response = httpx.Response(status_code, text=text, request=httpx.Request("GET", BASE_URL))

    client = MagicMock()
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    client.get = AsyncMock(return_value=response)
    return client


def make_controller(
    engine: ScriptedEngine,
    config: ControllerConfig,
    http_client: Optional[httpx.AsyncClient] = None,
    diagnostics: Optional[Callable[[str], None]] = None,
    buffer_text: str = "",
) -> CircuitController:
    """CircuitController around a scripted engine and a mocked HTTP origin."""
    buffer = TextBuffer(element_id=config.circuit_element_id, value=buffer_text)
    source = CircuitSourceProvider(
        buffer,
        base_url=config.base_url,
        client=http_client or make_http_client(),
    )
    return CircuitController(
        loader=RuntimeLoader(engine.loader(), diagnostics=lambda _: None),
        config=config,
        buffer=buffer,
        source=source,
        diagnostics=diagnostics or (lambda _: None),
    )


@pytest.fixture
def config() -> ControllerConfig:
    return ControllerConfig(bit_width=3, base_url=BASE_URL, example_path="bell.crc")


@pytest.fixture
def diagnostics() -> List[str]:
    """Captured diagnostic lines; pass ``diagnostics.append`` as the channel."""
    return []
