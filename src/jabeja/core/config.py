"""
Run configuration for the partitioning engine.

JabejaConfig is the read-only record every component reads its
parameters from. Defaults follow the reference Ja-be-Ja experiments:
T0 = 2, linear cooling by 0.003 per round, alpha = 2, hybrid node
selection with 3 sampled neighbors and 6 uniformly sampled peers.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, fields
from typing import Any, Literal

NodeSelectionPolicy = Literal["local", "random", "hybrid"]
InitColorPolicy = Literal["round_robin", "random", "batch"]
AcceptancePolicy = Literal["linear", "metropolis"]
CoolingPolicy = Literal["linear", "exponential"]

NODE_SELECTION_POLICIES = ("local", "random", "hybrid")
INIT_COLOR_POLICIES = ("round_robin", "random", "batch")
ACCEPTANCE_POLICIES = ("linear", "metropolis")
COOLING_POLICIES = ("linear", "exponential")


@dataclass(frozen=True)
class JabejaConfig:
    """Configuration for one simulation run."""

    rounds: int = 1000
    temperature: float = 2.0  # Initial temperature T0
    delta: float = 0.003  # Cooling step (linear) or factor (exponential)
    alpha: float = 2.0  # Benefit exponent, > 0
    node_selection_policy: NodeSelectionPolicy = "hybrid"
    neighbor_sample_size: int = 3  # k for local sampling
    uniform_sample_size: int = 6  # k for uniform sampling
    num_partitions: int = 4
    init_color_policy: InitColorPolicy = "round_robin"
    seed: int = 0

    # Alternate rules, off by default. "linear" is the rule the round loop runs.
    acceptance: AcceptancePolicy = "linear"
    cooling: CoolingPolicy = "linear"

    def __post_init__(self):
        if self.rounds < 0:
            raise ValueError(f"rounds must be >= 0, got {self.rounds}")
        if self.temperature <= 0:
            raise ValueError(f"temperature must be > 0, got {self.temperature}")
        if self.cooling == "linear" and self.temperature < 1.0:
            raise ValueError(f"linear cooling needs temperature >= 1, got {self.temperature}")
        if self.delta < 0:
            raise ValueError(f"delta must be >= 0, got {self.delta}")
        if self.alpha <= 0:
            raise ValueError(f"alpha must be > 0, got {self.alpha}")
        if self.neighbor_sample_size < 1 or self.uniform_sample_size < 1:
            raise ValueError("sample sizes must be >= 1")
        if self.num_partitions < 1:
            raise ValueError(f"num_partitions must be >= 1, got {self.num_partitions}")
        _check_choice("node_selection_policy", self.node_selection_policy, NODE_SELECTION_POLICIES)
        _check_choice("init_color_policy", self.init_color_policy, INIT_COLOR_POLICIES)
        _check_choice("acceptance", self.acceptance, ACCEPTANCE_POLICIES)
        _check_choice("cooling", self.cooling, COOLING_POLICIES)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JabejaConfig:
        """Build a config from a plain mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _check_choice(name: str, value: str, choices: tuple[str, ...]):
    if value not in choices:
        raise ValueError(f"{name} must be one of {choices}, got {value!r}")
