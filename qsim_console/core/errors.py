"""Error taxonomy for the circuit controller."""

from __future__ import annotations

from typing import Optional


class ControllerError(Exception):
    """Base class for every failure a gesture can report."""


class EngineUnavailable(ControllerError):
    """The simulation engine could not be initialised. Fatal until reload."""


class ResourceFetchError(ControllerError):
    """Fetching a static resource (the example circuit) failed."""

    def __init__(self, path: str, status_code: Optional[int] = None, reason: str = "") -> None:
        self.path = path
        self.status_code = status_code
        self.reason = reason
        detail = f"HTTP {status_code}" if status_code is not None else reason or "transport error"
        super().__init__(f"Failed to fetch {path!r}: {detail}")


class EngineExecutionError(ControllerError):
    """The engine rejected the circuit or failed while executing it."""


class RunInProgress(ControllerError):
    """A run was requested while another is outstanding and runs are serialised."""
