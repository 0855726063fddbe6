"""UI layer: text surfaces, circuit source provider and gesture bindings."""

from .controller import LOAD_EXAMPLE, RUN, CircuitController
from .source import CircuitSourceProvider
from .surfaces import DisplaySurface, TextBuffer

__all__ = [
    "CircuitController",
    "CircuitSourceProvider",
    "DisplaySurface",
    "LOAD_EXAMPLE",
    "RUN",
    "TextBuffer",
]
