"""Mutable per-run counters, owned by the RoundOrchestrator."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class RunState:
    """
    Round counters passed through the round-execution call chain.

    round_index is monotonic over 0..rounds-1; swaps_this_round is reset
    at the start of every round and incremented by SwapExecutor only.
    """

    round_index: int = 0
    swaps_this_round: int = 0
    total_swaps: int = 0

    def start_round(self, round_index: int):
        self.round_index = round_index
        self.swaps_this_round = 0
