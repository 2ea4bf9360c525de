"""Unit tests for JabejaConfig and YAML loading."""

import pytest

from jabeja.core.config import JabejaConfig
from jabeja.io.config_file import load_config


class TestJabejaConfig:
    """Tests for JabejaConfig."""

    def test_default_config(self):
        cfg = JabejaConfig()
        assert cfg.rounds == 1000
        assert cfg.temperature == 2.0
        assert cfg.delta == 0.003
        assert cfg.alpha == 2.0
        assert cfg.node_selection_policy == "hybrid"
        assert cfg.neighbor_sample_size == 3
        assert cfg.uniform_sample_size == 6
        assert cfg.acceptance == "linear"
        assert cfg.cooling == "linear"

    def test_frozen(self):
        cfg = JabejaConfig()
        with pytest.raises(AttributeError):
            cfg.rounds = 5

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"rounds": -1},
            {"temperature": 0.0},
            {"delta": -0.1},
            {"alpha": 0.0},
            {"neighbor_sample_size": 0},
            {"uniform_sample_size": 0},
            {"num_partitions": 0},
            {"node_selection_policy": "greedy"},
            {"init_color_policy": "spiral"},
            {"acceptance": "boltzmann"},
            {"cooling": "log"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            JabejaConfig(**kwargs)

    def test_zero_rounds_allowed(self):
        assert JabejaConfig(rounds=0).rounds == 0

    def test_from_dict_rejects_unknown(self):
        with pytest.raises(ValueError, match="unknown config keys"):
            JabejaConfig.from_dict({"rounds": 5, "temprature": 3.0})

    def test_dict_roundtrip(self):
        cfg = JabejaConfig(rounds=10, alpha=1.5, node_selection_policy="local")
        assert JabejaConfig.from_dict(cfg.to_dict()) == cfg


class TestLoadConfig:
    """Tests for YAML config files."""

    def test_load(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("rounds: 50\nalpha: 3.0\nnode_selection_policy: random\n")
        cfg = load_config(path)
        assert cfg.rounds == 50
        assert cfg.alpha == 3.0
        assert cfg.node_selection_policy == "random"
        assert cfg.temperature == 2.0

    def test_overrides_win_and_none_ignored(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("rounds: 50\nalpha: 3.0\n")
        cfg = load_config(path, {"rounds": 7, "alpha": None})
        assert cfg.rounds == 7
        assert cfg.alpha == 3.0

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == JabejaConfig()

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_config(path)
