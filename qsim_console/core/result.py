"""
Typed outcomes for awaited controller tasks.

Each suspending step (load, execute, fetch) can be wrapped with ``attempt`` so
the caller matches on ``Ok`` / ``Err`` instead of relying on exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Generic, TypeVar, Union

from .errors import ControllerError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: ControllerError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


TaskResult = Union[Ok[T], Err]


async def attempt(awaitable: Awaitable[T]) -> TaskResult[T]:
    """
    Await *awaitable* and capture a ControllerError as ``Err``.

    Anything that is not a ControllerError is a programming error and still
    propagates.
    """
    try:
        return Ok(await awaitable)
    except ControllerError as exc:
        return Err(exc)
