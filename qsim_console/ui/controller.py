from __future__ import annotations

from typing import Awaitable, Callable, Dict, Optional

from ..core.errors import ControllerError
from ..core.models import ControllerConfig, ExecutionReport
from ..core.renderer import ResultRenderer
from ..core.result import Err, TaskResult, attempt
from ..engine.base import ExecutionEngine
from ..engine.loader import RuntimeLoader
from ..engine.orchestrator import ExecutionOrchestrator
from .source import CircuitSourceProvider
from .surfaces import DisplaySurface, TextBuffer

RUN = "run"
LOAD_EXAMPLE = "load-example"


class CircuitController:
    """
    Page-level controller: wires the "run" and "load example" gestures to the
    source provider, orchestrator and renderer.

    Lifecycle
    ---------
    1. ``start()`` waits for the RuntimeLoader and then attaches the bindings.
    2. ``dispatch(RUN)`` reads the buffer, executes it and renders the report.
    3. ``dispatch(LOAD_EXAMPLE)`` fetches the sample circuit into the buffer
       without executing it.

    Gesture handlers never raise ControllerError. Failures are written to the
    diagnostic channel and returned as ``Err``; the display surface is only
    written once a run has fully succeeded.
    """

    def __init__(
        self,
        loader: RuntimeLoader,
        config: ControllerConfig = ControllerConfig(),
        buffer: Optional[TextBuffer] = None,
        display: Optional[DisplaySurface] = None,
        source: Optional[CircuitSourceProvider] = None,
        diagnostics: Callable[[str], None] = print,
    ) -> None:
        self._loader = loader
        self._config = config
        self._diagnostics = diagnostics

        self.buffer = buffer or TextBuffer(element_id=config.circuit_element_id)
        self.display = display or DisplaySurface(element_id=config.output_element_id)

        # Composed components
        self._source = source or CircuitSourceProvider(
            self.buffer,
            base_url=config.base_url,
            timeout=config.fetch_timeout_seconds,
        )
        self._orchestrator = ExecutionOrchestrator(
            run_timeout_seconds=config.run_timeout_seconds,
            serialize_runs=config.serialize_runs,
        )
        self._renderer = ResultRenderer(threshold=config.display_threshold)

        self._bindings: Dict[str, Callable[[], Awaitable[TaskResult]]] = {}

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> TaskResult[ExecutionEngine]:
        """Wait for the engine, then attach the gesture bindings."""
        loaded = await attempt(self._loader.load())
        if isinstance(loaded, Err):
            self._report("startup", loaded.error)
            return loaded
        self._bindings = {
            RUN: self.on_run,
            LOAD_EXAMPLE: self.on_load_example,
        }
        return loaded

    @property
    def bindings(self) -> Dict[str, Callable[[], Awaitable[TaskResult]]]:
        return dict(self._bindings)

    async def dispatch(self, gesture: str) -> TaskResult:
        """Trigger a bound gesture by name. Raises KeyError if it is not bound."""
        try:
            handler = self._bindings[gesture]
        except KeyError:
            raise KeyError(f"No handler bound for gesture {gesture!r}") from None
        return await handler()

    # ------------------------------------------------------------------
    # Gestures
    # ------------------------------------------------------------------

    async def on_run(self) -> TaskResult[ExecutionReport]:
        result = await attempt(self.run_circuit())
        if isinstance(result, Err):
            self._report(RUN, result.error)
        return result

    async def on_load_example(self, resource_path: Optional[str] = None) -> TaskResult[str]:
        path = resource_path or self._config.example_path
        result = await attempt(self._source.load_example_circuit(path))
        if isinstance(result, Err):
            self._report(LOAD_EXAMPLE, result.error)
        else:
            self._diagnostics(f"[CircuitController] Loaded example circuit {path!r}.")
        return result

    async def run_circuit(self) -> ExecutionReport:
        """Read, execute and render the current circuit. Raises on failure."""
        circuit = self._source.read_current_circuit()
        engine = await self._loader.load()
        result = await self._orchestrator.execute(circuit, engine)
        return self._renderer.render(
            result.outcomes,
            result.elapsed_ms,
            self._config.bit_width,
            self.display,
        )

    def _report(self, gesture: str, error: ControllerError) -> None:
        self._diagnostics(
            f"[CircuitController] {gesture} failed ({type(error).__name__}): {error}"
        )
