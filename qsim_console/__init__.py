"""
Quantum circuit console: public API.

Importing from ``qsim_console`` gives access to all stable interfaces:

    from qsim_console import CircuitController, RuntimeLoader, ControllerConfig
"""

from .core import (
    ControllerConfig,
    ControllerError,
    EngineExecutionError,
    EngineUnavailable,
    Err,
    ExecutionReport,
    ExecutionResult,
    Ok,
    Outcome,
    ResourceFetchError,
    ResultRenderer,
    RunInProgress,
    attempt,
)
from .demo import main, run_main
from .engine import ExecutionEngine, ExecutionOrchestrator, RuntimeLoader, ScriptedEngine
from .ui import LOAD_EXAMPLE, RUN, CircuitController, CircuitSourceProvider, DisplaySurface, TextBuffer

__all__ = [
    "CircuitController",
    "CircuitSourceProvider",
    "ControllerConfig",
    "ControllerError",
    "DisplaySurface",
    "EngineExecutionError",
    "EngineUnavailable",
    "Err",
    "ExecutionEngine",
    "ExecutionOrchestrator",
    "ExecutionReport",
    "ExecutionResult",
    "LOAD_EXAMPLE",
    "Ok",
    "Outcome",
    "RUN",
    "ResourceFetchError",
    "ResultRenderer",
    "RunInProgress",
    "RuntimeLoader",
    "ScriptedEngine",
    "TextBuffer",
    "attempt",
    "main",
    "run_main",
]
