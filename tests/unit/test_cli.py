"""Tests for the ``jabeja`` command line."""

import matplotlib

matplotlib.use("Agg")

import pytest

from jabeja.cli import build_parser, main


def test_flags_default_to_none():
    args = build_parser().parse_args(["run", "--graph", "ring:10"])
    assert args.rounds is None
    assert args.node_selection_policy is None
    assert args.log_level == "INFO"


def test_flags_are_typed():
    args = build_parser().parse_args(
        ["run", "--graph", "ring:10", "--rounds", "7", "--temperature", "3", "--cooling", "exponential"]
    )
    assert args.rounds == 7
    assert args.temperature == 3.0
    assert args.cooling == "exponential"


def test_invalid_choice_exits():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["run", "--graph", "ring:10", "--node-selection-policy", "greedy"])


def test_run_writes_result_file(tmp_path, capsys):
    out = tmp_path / "results" / "ring.txt"
    code = main([
        "run", "--graph", "ring:20", "--rounds", "5", "--num-partitions", "2",
        "--output", str(out), "--log-level", "WARNING",
    ])
    assert code == 0
    lines = out.read_text().splitlines()
    assert lines[2] == "Round\tEdge-Cut\tSwaps\tMigrations"
    assert [line.split("\t")[0] for line in lines[3:]] == ["0", "1", "2", "3", "4"]
    assert "edge cut" in capsys.readouterr().out


def test_run_with_config_file_and_plot(tmp_path):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("rounds: 50\nnode_selection_policy: local\nseed: 3\n")
    plot = tmp_path / "history.png"
    code = main([
        "run", "--graph", "grid:4x4", "--config", str(cfg), "--rounds", "3",
        "--plot", str(plot), "--log-level", "WARNING",
    ])
    assert code == 0
    assert plot.exists()


def test_zero_rounds(tmp_path, capsys):
    out = tmp_path / "never.txt"
    code = main(["run", "--graph", "ring:5", "--rounds", "0", "--output", str(out), "--log-level", "WARNING"])
    assert code == 0
    assert not out.exists()
    assert "no rounds run" in capsys.readouterr().out


def test_bad_graph_description_fails():
    assert main(["run", "--graph", "torus:4", "--log-level", "ERROR"]) == 1


def test_bad_config_value_fails():
    assert main(["run", "--graph", "ring:5", "--alpha", "-1", "--log-level", "ERROR"]) == 1


def test_unwritable_output_fails(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    code = main([
        "run", "--graph", "ring:5", "--rounds", "2", "--output", str(blocker / "out.txt"),
        "--log-level", "ERROR",
    ])
    assert code == 1


def test_missing_config_file_fails(tmp_path):
    assert main(["run", "--graph", "ring:6", "--config", str(tmp_path / "absent.yaml"), "--log-level", "ERROR"]) == 1


def test_malformed_config_file_fails(tmp_path):
    cfg = tmp_path / "broken.yaml"
    cfg.write_text("rounds: [1\n")
    assert main(["run", "--graph", "ring:6", "--config", str(cfg), "--log-level", "ERROR"]) == 1


def test_linear_temperature_below_one_fails():
    assert main(["run", "--graph", "ring:6", "--temperature", "0.5", "--log-level", "ERROR"]) == 1
