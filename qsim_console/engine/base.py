from __future__ import annotations

from typing import Any, Awaitable, Callable, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ExecutionEngine(Protocol):
    """
    Boundary to the compiled circuit simulator.

    ``run`` takes the circuit text as its only input and returns the outcome
    distribution as a sequence of records: ``(index, probability)`` pairs or
    objects with ``entry_idx``/``probability``. The controller never looks
    inside the engine.
    """

    async def run(self, circuit: str) -> Sequence[Any]: ...


# Initialises the engine module and hands back a ready engine.
EngineModuleLoader = Callable[[], Awaitable[ExecutionEngine]]
