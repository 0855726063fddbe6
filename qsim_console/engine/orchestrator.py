from __future__ import annotations

import asyncio
import time
from typing import Callable, Optional

from ..core.errors import EngineExecutionError, RunInProgress
from ..core.models import ExecutionResult, to_outcome
from .base import ExecutionEngine


class ExecutionOrchestrator:
    """
    Drives one request/response cycle against the engine and times it.

    The clock is read immediately before the engine call and immediately after
    its result is available; elapsed time is reported in fractional
    milliseconds. Engine failures surface as EngineExecutionError and no
    partial result is ever returned.

    Overlapping runs are allowed by default and each is an independent engine
    call. With ``serialize_runs=True`` a run requested while another is
    outstanding raises RunInProgress instead. With ``run_timeout_seconds`` set
    the engine call is abandoned after that many seconds.
    """

    def __init__(
        self,
        run_timeout_seconds: Optional[float] = None,
        serialize_runs: bool = False,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._run_timeout_seconds = run_timeout_seconds
        self._serialize_runs = serialize_runs
        self._clock = clock
        self._pending_runs: int = 0

    @property
    def pending_runs(self) -> int:
        return self._pending_runs

    async def execute(self, circuit: str, engine: ExecutionEngine) -> ExecutionResult:
        """
        Run *circuit* on *engine* and return its distribution with the elapsed time.

        Raises
        ------
        EngineExecutionError
            If the engine raises, times out, or returns malformed records.
        RunInProgress
            If runs are serialised and another run is outstanding.
        """
        if self._serialize_runs and self._pending_runs:
            raise RunInProgress("A run is already in progress")

        self._pending_runs += 1
        try:
            start = self._clock()
            records = await self._invoke(circuit, engine)
            end = self._clock()
        finally:
            self._pending_runs -= 1

        try:
            outcomes = [to_outcome(record) for record in records]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise EngineExecutionError(f"Engine returned malformed results: {exc}") from exc

        return ExecutionResult(outcomes=outcomes, elapsed_ms=(end - start) * 1000.0)

    async def _invoke(self, circuit: str, engine: ExecutionEngine):
        if self._run_timeout_seconds is None:
            return await self._call_engine(circuit, engine)
        try:
            return await asyncio.wait_for(
                self._call_engine(circuit, engine), self._run_timeout_seconds
            )
        except asyncio.TimeoutError as exc:
            raise EngineExecutionError(
                f"Engine did not finish within {self._run_timeout_seconds}s"
            ) from exc

    async def _call_engine(self, circuit: str, engine: ExecutionEngine):
        # wraps the engine's own TimeoutError before wait_for can see it
        try:
            return await engine.run(circuit)
        except EngineExecutionError:
            raise
        except Exception as exc:
            raise EngineExecutionError(str(exc) or type(exc).__name__) from exc
