"""Tests for the ExecutionOrchestrator (qsim_console.engine.orchestrator)."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from qsim_console.core import EngineExecutionError, Outcome, RunInProgress
from qsim_console.engine import ExecutionOrchestrator, ScriptedEngine


def fixed_clock(*readings: float):
    """Clock returning *readings* in order (seconds)."""
    it = iter(readings)
    return lambda: next(it)


@pytest.mark.asyncio
class TestExecute:
    async def test_returns_outcomes_in_engine_order(self):
        engine = ScriptedEngine(distribution=[(3, 0.25), (0, 0.75)])
        result = await ExecutionOrchestrator().execute("h 0", engine)
        assert result.outcomes == [
            Outcome(index=3, probability=0.25),
            Outcome(index=0, probability=0.75),
        ]

    async def test_circuit_is_sole_input(self):
        engine = ScriptedEngine(distribution=[(0, 1.0)])
        await ExecutionOrchestrator().execute("x 0\n", engine)
        assert engine.calls == ["x 0\n"]

    async def test_empty_circuit_passed_through(self):
        engine = ScriptedEngine(distribution=[(0, 1.0)])
        await ExecutionOrchestrator().execute("", engine)
        assert engine.calls == [""]

    async def test_elapsed_is_fractional_milliseconds(self):
        orchestrator = ExecutionOrchestrator(clock=fixed_clock(10.0, 10.0125))
        result = await orchestrator.execute("h 0", ScriptedEngine(distribution=[(0, 1.0)]))
        assert result.elapsed_ms == pytest.approx(12.5)

    async def test_elapsed_covers_engine_latency(self):
        engine = ScriptedEngine(distribution=[(0, 1.0)], delay=0.02)
        result = await ExecutionOrchestrator().execute("h 0", engine)
        assert result.elapsed_ms >= 15.0

    async def test_probability_rounded_above_one_is_clamped(self):
        engine = ScriptedEngine(distribution=[(0, 1.0000001)])
        result = await ExecutionOrchestrator().execute("id 0", engine)
        assert result.outcomes == [Outcome(index=0, probability=1.0)]

    async def test_accepts_engine_record_objects(self):
        engine = AsyncMock()
        engine.run = AsyncMock(return_value=[SimpleNamespace(entry_idx=1, probability=1.0)])
        result = await ExecutionOrchestrator().execute("x 0", engine)
        assert result.outcomes == [Outcome(index=1, probability=1.0)]


@pytest.mark.asyncio
class TestExecuteFailures:
    async def test_engine_execution_error_passes_through_unchanged(self):
        error = EngineExecutionError("Line 1: unknown op 'foo'")
        engine = ScriptedEngine(error=error)
        with pytest.raises(EngineExecutionError) as info:
            await ExecutionOrchestrator().execute("foo 0", engine)
        assert info.value is error

    async def test_other_engine_errors_are_wrapped(self):
        engine = ScriptedEngine(error=RuntimeError("device lost"))
        with pytest.raises(EngineExecutionError, match="device lost") as info:
            await ExecutionOrchestrator().execute("h 0", engine)
        assert isinstance(info.value.__cause__, RuntimeError)

    async def test_malformed_records_are_execution_errors(self):
        engine = ScriptedEngine(distribution=[(0, 1.5)])
        with pytest.raises(EngineExecutionError, match="malformed"):
            await ExecutionOrchestrator().execute("h 0", engine)

    async def test_engine_timeout_error_is_not_a_deadline(self):
        engine = ScriptedEngine(error=TimeoutError("adapter request timed out"))
        with pytest.raises(EngineExecutionError, match="adapter request timed out") as info:
            await ExecutionOrchestrator().execute("h 0", engine)
        assert isinstance(info.value.__cause__, TimeoutError)

    async def test_engine_timeout_error_with_deadline_configured(self):
        engine = ScriptedEngine(error=TimeoutError("adapter request timed out"))
        orchestrator = ExecutionOrchestrator(run_timeout_seconds=5.0)
        with pytest.raises(EngineExecutionError, match="adapter request timed out"):
            await orchestrator.execute("h 0", engine)

    async def test_timeout_when_configured(self):
        engine = ScriptedEngine(distribution=[(0, 1.0)], delay=1.0)
        orchestrator = ExecutionOrchestrator(run_timeout_seconds=0.01)
        with pytest.raises(EngineExecutionError, match="did not finish"):
            await orchestrator.execute("h 0", engine)
        assert orchestrator.pending_runs == 0

    async def test_pending_count_restored_after_failure(self):
        orchestrator = ExecutionOrchestrator()
        with pytest.raises(EngineExecutionError):
            await orchestrator.execute("h 0", ScriptedEngine(error=RuntimeError("x")))
        assert orchestrator.pending_runs == 0


@pytest.mark.asyncio
class TestOverlappingRuns:
    async def test_overlapping_runs_are_independent_by_default(self):
        engine = ScriptedEngine(by_circuit={"a": [(0, 1.0)], "b": [(1, 1.0)]}, delay=0.02)
        orchestrator = ExecutionOrchestrator()
        first, second = await asyncio.gather(
            orchestrator.execute("a", engine),
            orchestrator.execute("b", engine),
        )
        assert first.outcomes[0].index == 0
        assert second.outcomes[0].index == 1
        assert engine.calls == ["a", "b"]

    async def test_serialised_runs_reject_second_run(self):
        engine = ScriptedEngine(distribution=[(0, 1.0)], delay=0.05)
        orchestrator = ExecutionOrchestrator(serialize_runs=True)
        first = asyncio.ensure_future(orchestrator.execute("a", engine))
        await asyncio.sleep(0)
        assert orchestrator.pending_runs == 1
        with pytest.raises(RunInProgress):
            await orchestrator.execute("b", engine)
        await first
        assert engine.calls == ["a"]

    async def test_serialised_runs_allow_sequential_runs(self):
        engine = ScriptedEngine(distribution=[(0, 1.0)])
        orchestrator = ExecutionOrchestrator(serialize_runs=True)
        await orchestrator.execute("a", engine)
        await orchestrator.execute("b", engine)
        assert engine.calls == ["a", "b"]
