from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional, Sequence

from .base import EngineModuleLoader


class ScriptedEngine:
    """
    Stand-in for the compiled simulator that returns programmed distributions.

    ``distribution`` is returned for every circuit unless ``by_circuit`` has an
    entry for the exact circuit text. ``delay`` simulates engine latency and
    ``error`` makes every run raise it.
    """

    def __init__(
        self,
        distribution: Sequence[Any] = (),
        by_circuit: Optional[Dict[str, Sequence[Any]]] = None,
        delay: float = 0.0,
        error: Optional[BaseException] = None,
    ) -> None:
        self._distribution = list(distribution)
        self._by_circuit = dict(by_circuit or {})
        self._delay = delay
        self.error = error
        self.calls: List[str] = []
        self.init_count: int = 0

    async def run(self, circuit: str) -> List[Any]:
        self.calls.append(circuit)
        if self._delay:
            await asyncio.sleep(self._delay)
        if self.error is not None:
            raise self.error
        return list(self._by_circuit.get(circuit, self._distribution))

    def loader(self, delay: float = 0.0, error: Optional[BaseException] = None) -> EngineModuleLoader:
        """Module loader that initialises this engine, counting each initialisation."""

        async def load() -> "ScriptedEngine":
            self.init_count += 1
            if delay:
                await asyncio.sleep(delay)
            if error is not None:
                raise error
            return self

        return load
