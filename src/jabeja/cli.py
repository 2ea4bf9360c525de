"""Console entrypoint for the ``jabeja`` command."""

from __future__ import annotations

import argparse
import logging
from dataclasses import fields
from typing import List, Optional

import yaml

from jabeja.analysis import partition_sizes, summarize_run
from jabeja.core import JabejaConfig, JabejaError, RoundOrchestrator, build_topology, load_graph, make_rng
from jabeja.core.config import (
    ACCEPTANCE_POLICIES,
    COOLING_POLICIES,
    INIT_COLOR_POLICIES,
    NODE_SELECTION_POLICIES,
)
from jabeja.io import MemorySink, TabularFileSink, load_config

logger = logging.getLogger(__name__)

_CHOICES = {
    "node_selection_policy": NODE_SELECTION_POLICIES,
    "init_color_policy": INIT_COLOR_POLICIES,
    "acceptance": ACCEPTANCE_POLICIES,
    "cooling": COOLING_POLICIES,
}


def _add_config_args(parser: argparse.ArgumentParser) -> None:
    """Add one ``--flag`` per JabejaConfig field. Unset flags stay ``None``."""
    defaults = JabejaConfig()
    for f in fields(JabejaConfig):
        default = getattr(defaults, f.name)
        flag = "--" + f.name.replace("_", "-")
        if f.name in _CHOICES:
            parser.add_argument(flag, dest=f.name, choices=_CHOICES[f.name], help=f"default: {default}")
        else:
            parser.add_argument(flag, dest=f.name, type=type(default), help=f"default: {default}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jabeja")
    sub = parser.add_subparsers(dest="command", required=True)

    run_p = sub.add_parser("run", help="Run a partitioning simulation")
    run_p.add_argument(
        "--graph", required=True, help="Graph to partition: ring:N, grid:NXxNY or random:N:P"
    )
    run_p.add_argument("--config", help="YAML config file; flags override its values")
    run_p.add_argument("--output", help="Tab-separated result file, one row per round")
    run_p.add_argument("--plot", help="Save a PNG of the run history")
    run_p.add_argument(
        "--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )
    _add_config_args(run_p)
    return parser


def _config_from_args(args: argparse.Namespace) -> JabejaConfig:
    overrides = {f.name: getattr(args, f.name) for f in fields(JabejaConfig)}
    if args.config:
        return load_config(args.config, overrides)
    return JabejaConfig.from_dict({k: v for k, v in overrides.items() if v is not None})


def run(args: argparse.Namespace) -> int:
    config = _config_from_args(args)
    rng = make_rng(config.seed)
    adjacency = build_topology(args.graph, rng)
    graph = load_graph(adjacency, config.num_partitions, config.init_color_policy, rng)

    sink = TabularFileSink(args.output) if args.output else MemorySink()
    orchestrator = RoundOrchestrator(graph=graph, config=config, sink=sink, rng=rng)
    reports = orchestrator.run()

    if not reports:
        print("no rounds run")
        return 0

    summary = summarize_run(reports, graph)
    print(
        f"edge cut {summary.final_edge_cut} (min {summary.min_edge_cut} at round {summary.best_round}), "
        f"swaps {summary.total_swaps}, migrations {summary.final_migrations}, "
        f"partition sizes {partition_sizes(graph)}"
    )

    if args.plot:
        # Import here so runs without --plot never touch matplotlib
        from jabeja.viz import plot_run_history, save_figure

        save_figure(plot_run_history(reports), args.plot)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Parse ``jabeja`` CLI arguments and dispatch."""

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command == "run":
        try:
            return run(args)
        except (JabejaError, ValueError, OSError, yaml.YAMLError) as exc:
            logger.error("run failed: %s", exc)
            return 1
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
