import argparse

from scripts.simulate_games import build_config, load_yaml_config


def test_load_yaml_config(tmp_path):
    path = tmp_path / "simulate.yaml"
    path.write_text("episodes: 5\ngame:\n  cell_states: 60\n  max_moves: 100\n", encoding="utf-8")

    cfg = load_yaml_config(str(path))

    assert cfg["episodes"] == 5
    assert load_yaml_config(str(tmp_path / "missing.yaml")) == {}


def test_build_config_prefers_cli_flags():
    cfg = {"game": {"cell_states": 60, "max_moves": 100}}
    args = argparse.Namespace(max_moves=10)

    config = build_config(args, cfg)

    assert config.cell_states == 60
    assert config.max_moves == 10
