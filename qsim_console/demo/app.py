from __future__ import annotations

import asyncio
import os
from typing import Optional

from ..core.models import ControllerConfig
from ..engine import RuntimeLoader, ScriptedEngine
from ..ui import RUN, CircuitController

BELL_CIRCUIT = "h 0\ncx 0 1\n"
BELL_DISTRIBUTION = [(0, 0.5), (3, 0.5)]
BELL_BIT_WIDTH = 2


def build_config() -> ControllerConfig:
    """
    ControllerConfig for the Bell walkthrough (2 qubits), with overrides taken
    from QSIM_* environment variables.
    """
    overrides = {"bit_width": BELL_BIT_WIDTH}
    if "QSIM_BIT_WIDTH" in os.environ:
        overrides["bit_width"] = int(os.environ["QSIM_BIT_WIDTH"])
    if "QSIM_BASE_URL" in os.environ:
        overrides["base_url"] = os.environ["QSIM_BASE_URL"]
    if "QSIM_EXAMPLE_PATH" in os.environ:
        overrides["example_path"] = os.environ["QSIM_EXAMPLE_PATH"]
    return ControllerConfig(**overrides)


async def main(engine: Optional[ScriptedEngine] = None) -> str:
    """
    End-to-end demo against a scripted Bell-state engine.

    Loads the engine, puts a Bell circuit in the buffer, triggers the "run"
    gesture and prints the rendered report.
    """
    config = build_config()
    engine = engine or ScriptedEngine(distribution=BELL_DISTRIBUTION, delay=0.01)

    controller = CircuitController(
        loader=RuntimeLoader(engine.loader()),
        config=config,
    )
    await controller.start()

    controller.buffer.set(BELL_CIRCUIT)
    await controller.dispatch(RUN)

    print(controller.display.text)
    return controller.display.text


def run_main() -> None:
    """Synchronous entry point for the console script."""
    asyncio.run(main())  # pragma: no cover - exercised by console script


if __name__ == "__main__":  # pragma: no cover
    run_main()
