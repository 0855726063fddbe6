from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# f32 rounding slack on engine probabilities
PROBABILITY_TOLERANCE = 1e-6


class Outcome(BaseModel):
    """One measurement outcome reported by the engine."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="Outcome index (basis state as an integer)")
    probability: float = Field(ge=0.0, le=1.0)

    @field_validator("probability", mode="before")
    @classmethod
    def clamp_rounding_error(cls, v):
        if isinstance(v, (int, float)):
            if 1.0 < v <= 1.0 + PROBABILITY_TOLERANCE:
                return 1.0
            if -PROBABILITY_TOLERANCE <= v < 0.0:
                return 0.0
        return v


class ExecutionResult(BaseModel):
    """
    Raw output of a single execution: the outcome distribution in engine order
    plus the wall-clock time the engine call took.
    """

    outcomes: List[Outcome]
    elapsed_ms: float = Field(ge=0.0)


class ExecutionReport(BaseModel):
    """Rendered, human-readable form of an ExecutionResult."""

    elapsed_ms: float
    header: str
    lines: List[str]

    @property
    def text(self) -> str:
        return "\n".join([self.header, *self.lines])


class ControllerConfig(BaseModel):
    """Dependency-injected configuration for CircuitController."""

    # must match the qubit count of the circuits being run; the default
    # example is the 5x5 Ising circuit on 25 qubits
    bit_width: int = Field(default=25, ge=1)
    display_threshold: float = 0.0001  # 0.01 %
    example_path: str = "ising5x5.crc"
    base_url: str = "http://localhost:8000/"
    fetch_timeout_seconds: float = Field(default=30.0, gt=0.0)

    # None keeps the engine call unbounded
    run_timeout_seconds: Optional[float] = None
    # True rejects a second run while one is outstanding
    serialize_runs: bool = False

    output_element_id: str = "output"
    circuit_element_id: str = "circuit"

    @field_validator("display_threshold")
    @classmethod
    def threshold_must_be_a_fraction(cls, v: float) -> float:
        if not 0.0 <= v < 1.0:
            raise ValueError("display_threshold must be in [0, 1)")
        return v

    @field_validator("run_timeout_seconds")
    @classmethod
    def timeout_must_be_positive(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("run_timeout_seconds must be positive")
        return v

    @field_validator("example_path")
    @classmethod
    def example_path_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("example_path must not be empty")
        return v


def to_outcome(record) -> Outcome:
    """
    Normalise one engine record into an Outcome.

    Accepts an ``(index, probability)`` pair, an object exposing
    ``entry_idx``/``probability`` attributes, or a mapping with those keys.
    """
    if isinstance(record, Outcome):
        return record
    if isinstance(record, dict):
        return Outcome(index=record["entry_idx"], probability=record["probability"])
    if hasattr(record, "entry_idx"):
        return Outcome(index=record.entry_idx, probability=record.probability)
    index, probability = record
    return Outcome(index=index, probability=probability)
