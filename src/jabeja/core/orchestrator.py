"""
Round orchestrator: drives the Ja-be-Ja simulation.

Each round:
1. Every node, in the fixed graph order, gets one sample-and-swap turn
2. The temperature cools once
3. Edge cut, swaps and migrations are reported

A round is a barrier: cooling and reporting only happen after every node
has had its turn. Nodes act on the current colors, including swaps made
earlier in the same round, the way independent agents would act on a
slightly stale view of their neighborhood.

Phases: init → running → terminated.
"""

from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, field
from typing import Literal, TYPE_CHECKING

import numpy as np

from jabeja.core.annealing import AnnealingController, AnnealingState
from jabeja.core.benefit import BenefitEvaluator
from jabeja.core.metrics import MetricsReporter, RoundReport
from jabeja.core.sampling import NodeSelector
from jabeja.core.state import RunState
from jabeja.core.swap import SwapExecutor

if TYPE_CHECKING:
    from jabeja.core.config import JabejaConfig
    from jabeja.core.graph import Graph
    from jabeja.io.sink import ResultSink

logger = logging.getLogger(__name__)

Phase = Literal["init", "running", "terminated"]


def make_rng(seed: int | None) -> np.random.Generator:
    """The run's single source of randomness."""
    return np.random.default_rng(seed)


@dataclass
class RoundOrchestrator:
    """
    Owns the graph and the run state for the lifetime of a simulation.

    The random generator defaults to one seeded from config.seed; pass the
    generator used to build the initial coloring to keep a single stream.
    """

    graph: "Graph"
    config: "JabejaConfig"
    sink: "ResultSink | None" = None  # MemorySink when omitted
    rng: np.random.Generator | None = None

    state: RunState = field(default_factory=RunState, init=False)
    phase: Phase = field(default="init", init=False)
    _stop: threading.Event = field(default_factory=threading.Event, init=False)

    def __post_init__(self):
        if self.sink is None:
            from jabeja.io.sink import MemorySink
            self.sink = MemorySink()
        if self.rng is None:
            self.rng = make_rng(self.config.seed)
        cfg = self.config
        self.selector = NodeSelector(self.graph, self.rng)
        self.evaluator = BenefitEvaluator(self.graph, cfg.alpha)
        self.annealing = AnnealingController(
            AnnealingState.from_config(cfg),
            acceptance=cfg.acceptance,
            cooling=cfg.cooling,
            rng=self.rng,
        )
        self.swapper = SwapExecutor(self.graph)
        self.reporter = MetricsReporter(self.graph, self.sink)

    @property
    def temperature(self) -> float:
        return self.annealing.temperature

    def stop(self):
        """Ask a running simulation to stop before the next node's turn."""
        self._stop.set()

    def run(self) -> list[RoundReport]:
        """
        Run config.rounds rounds.

        Returns:
            The records emitted to the sink, one per completed round.
            Empty when rounds == 0 or a stop arrives during round 0.
        """
        if self.phase != "init":
            raise RuntimeError(f"simulation already {self.phase}")
        self.phase = "running"
        logger.info(
            "starting %d rounds on %d nodes (policy=%s, T0=%.3f, alpha=%.2f)",
            self.config.rounds, len(self.graph), self.config.node_selection_policy,
            self.temperature, self.config.alpha,
        )

        reports: list[RoundReport] = []
        for round_index in range(self.config.rounds):
            if not self._run_round(round_index):
                logger.info("stop requested during round %d, partial round discarded", round_index)
                break
            reports.append(self.reporter.report(self.state))

        self.phase = "terminated"
        logger.info("finished after %d rounds, %d swaps", len(reports), self.state.total_swaps)
        return reports

    def _run_round(self, round_index: int) -> bool:
        """Give every node one turn, then cool. Returns False if stopped mid-round."""
        self.state.start_round(round_index)
        for node_id in self.graph.node_ids:
            if self._stop.is_set():
                return False
            self.sample_and_swap(node_id)
        self.annealing.cool_down()
        return True

    def sample_and_swap(self, node_id: int) -> int | None:
        """
        One node's turn: find the best acceptable partner and swap with it.

        Returns:
            The partner's id, or None if no swap happened
        """
        policy = self.config.node_selection_policy
        partner = None

        if policy in ("local", "hybrid"):
            candidates = self.selector.local_sample(node_id, self.config.neighbor_sample_size)
            partner = self.find_partner(node_id, candidates)

        if policy in ("random", "hybrid") and partner is None:
            candidates = self.selector.uniform_sample(node_id, self.config.uniform_sample_size)
            partner = self.find_partner(node_id, candidates)

        if partner is not None:
            self.swapper.swap(node_id, partner, self.state)
        return partner

    def find_partner(self, node_id: int, candidates: list[int]) -> int | None:
        """Best candidate passing the acceptance test, or None."""
        best_partner = None
        best_benefit = 0.0
        for candidate in candidates:
            score = self.evaluator.score(node_id, candidate)
            if self.annealing.accepts(score.new_benefit, score.old_benefit, best_benefit):
                best_partner = candidate
                best_benefit = score.new_benefit
        return best_partner
