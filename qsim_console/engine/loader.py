from __future__ import annotations

import asyncio
from typing import Callable, Optional

from ..core.errors import EngineUnavailable
from .base import EngineModuleLoader, ExecutionEngine


class RuntimeLoader:
    """
    Produces the engine handle exactly once for the lifetime of the loader.

    The first ``load()`` starts initialisation as a task; concurrent callers
    await that same task, later callers get the memoised handle. A failed
    initialisation is memoised too: every later ``load()`` raises the same
    EngineUnavailable, and only a fresh RuntimeLoader can try again.
    """

    def __init__(
        self,
        module_loader: EngineModuleLoader,
        diagnostics: Callable[[str], None] = print,
    ) -> None:
        self._module_loader = module_loader
        self._diagnostics = diagnostics
        self._task: Optional[asyncio.Task] = None

    @property
    def is_ready(self) -> bool:
        task = self._task
        if task is None or not task.done() or task.cancelled():
            return False
        return task.exception() is None

    async def load(self) -> ExecutionEngine:
        if self._task is None:
            self._task = asyncio.ensure_future(self._initialise())
        # a cancelled caller leaves initialisation running for the others
        return await asyncio.shield(self._task)

    async def _initialise(self) -> ExecutionEngine:
        try:
            engine = await self._module_loader()
        except Exception as exc:
            self._diagnostics(f"[RuntimeLoader] Engine failed to initialise: {exc}")
            raise EngineUnavailable(f"Engine failed to initialise: {exc}") from exc
        if engine is None:
            self._diagnostics("[RuntimeLoader] Engine module produced no handle.")
            raise EngineUnavailable("Engine module produced no handle")
        self._diagnostics("[RuntimeLoader] Engine loaded.")
        return engine
