"""Engine boundary: runtime loader, execution orchestrator and a scripted fake."""

from .base import EngineModuleLoader, ExecutionEngine
from .fake import ScriptedEngine
from .loader import RuntimeLoader
from .orchestrator import ExecutionOrchestrator

__all__ = [
    "EngineModuleLoader",
    "ExecutionEngine",
    "ExecutionOrchestrator",
    "RuntimeLoader",
    "ScriptedEngine",
]
