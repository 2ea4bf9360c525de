"""
Simulated annealing: acceptance test and cooling schedule.

Active rule ("linear"):
    accept q  iff  new · T > old  and  new > best new seen so far
    cool:     T ← max(1, T − δ) once per round

With T > 1 a node accepts swaps that do not strictly improve its
neighborhood, which lets the system escape local optima early on. Once T
reaches 1 the test is strict improvement and stays that way.

Alternate rules, selected by name in JabejaConfig:
- "metropolis" acceptance: new > best and P > u, u ~ U[0, 1),
  P = min(1, exp(((new − old) / (new + old)) / T))
- "exponential" cooling: T ← T · δ, floored at T_MIN
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from jabeja.core.config import AcceptancePolicy, CoolingPolicy, JabejaConfig

logger = logging.getLogger(__name__)

LINEAR_FLOOR = 1.0
T_MIN = 1e-5


@dataclass
class AnnealingState:
    """Temperature state. Seeded before round 0, never reset."""

    temperature: float
    delta: float
    floor: float = LINEAR_FLOOR

    @classmethod
    def from_config(cls, config: "JabejaConfig") -> AnnealingState:
        floor = LINEAR_FLOOR if config.cooling == "linear" else T_MIN
        return cls(temperature=config.temperature, delta=config.delta, floor=floor)


class AnnealingController:
    """Owns the temperature and decides which candidates are accepted."""

    def __init__(
        self,
        state: AnnealingState,
        acceptance: "AcceptancePolicy" = "linear",
        cooling: "CoolingPolicy" = "linear",
        rng: np.random.Generator | None = None,
    ):
        if acceptance == "metropolis" and rng is None:
            raise ValueError("metropolis acceptance needs a random generator")
        self.state = state
        self.acceptance = acceptance
        self.cooling = cooling
        self.rng = rng

    @property
    def temperature(self) -> float:
        return self.state.temperature

    def accepts(self, new_benefit: float, old_benefit: float, best_benefit: float) -> bool:
        """
        Acceptance test for one candidate of a sampling pass.

        Args:
            new_benefit: benefit after the hypothetical swap
            old_benefit: benefit before it
            best_benefit: highest new_benefit accepted so far in this pass (0 initially)

        Ties with best_benefit are rejected, so the first of equal candidates wins.
        """
        if not new_benefit > best_benefit:
            return False
        if self.acceptance == "linear":
            return new_benefit * self.state.temperature > old_benefit
        return self.acceptance_probability(new_benefit, old_benefit) > self.rng.random()

    def acceptance_probability(self, new_benefit: float, old_benefit: float) -> float:
        """Metropolis-style probability, normalized by the pair's total benefit."""
        t = self.state.temperature
        if new_benefit == old_benefit:
            return min(1.0, t)
        p = math.exp(((new_benefit - old_benefit) / (new_benefit + old_benefit)) / t)
        return min(1.0, p)

    def cool_down(self):
        """Apply one round of cooling."""
        state = self.state
        if self.cooling == "linear":
            if state.temperature > state.floor:
                state.temperature -= state.delta
            if state.temperature < state.floor:
                state.temperature = state.floor
        else:
            state.temperature = max(state.floor, state.temperature * state.delta)
        logger.debug("temperature now %.6f", state.temperature)
