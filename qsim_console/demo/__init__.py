"""Demo: scripted-engine walkthrough and console entry point."""

from .app import build_config, main, run_main

__all__ = [
    "build_config",
    "main",
    "run_main",
]
