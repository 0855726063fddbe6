from __future__ import annotations


class TextBuffer:
    """Editable multi-line buffer holding the circuit source."""

    def __init__(self, element_id: str = "circuit", value: str = "") -> None:
        self.element_id = element_id
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def set(self, value: str) -> None:
        self._value = value


class DisplaySurface:
    """Write-only text sink. Each write replaces the previous content in full."""

    def __init__(self, element_id: str = "output") -> None:
        self.element_id = element_id
        self._text = ""
        self._writes: int = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def writes(self) -> int:
        return self._writes

    def write(self, text: str) -> None:
        self._text = text
        self._writes += 1
