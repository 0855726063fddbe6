"""Core domain: models, errors, typed task results and the renderer."""

from .errors import (
    ControllerError,
    EngineExecutionError,
    EngineUnavailable,
    ResourceFetchError,
    RunInProgress,
)
from .models import (
    ControllerConfig,
    ExecutionReport,
    ExecutionResult,
    Outcome,
    to_outcome,
)
from .renderer import (
    ResultRenderer,
    format_header,
    format_outcome_label,
    format_percentage,
)
from .result import Err, Ok, TaskResult, attempt

__all__ = [
    "ControllerConfig",
    "ControllerError",
    "EngineExecutionError",
    "EngineUnavailable",
    "Err",
    "ExecutionReport",
    "ExecutionResult",
    "Ok",
    "Outcome",
    "ResourceFetchError",
    "ResultRenderer",
    "RunInProgress",
    "TaskResult",
    "attempt",
    "format_header",
    "format_outcome_label",
    "format_percentage",
    "to_outcome",
]
