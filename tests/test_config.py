import pytest
from pydantic import ValidationError

from tenpin.config import FullConfig, load_config


def test_defaults():
    cfg = FullConfig()
    assert cfg.seed == 42
    assert cfg.sim.n_games == 200
    assert 0.0 <= cfg.bowler.strike_rate <= 1.0


def test_load_yaml(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("seed: 5\nbowler:\n  strike_rate: 0.5\nsim:\n  n_games: 12\n")
    cfg = load_config(str(p))
    assert cfg.seed == 5
    assert cfg.bowler.strike_rate == 0.5
    assert cfg.bowler.skill == 0.7
    assert cfg.sim.n_games == 12


def test_empty_yaml(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    assert load_config(str(p)) == FullConfig()


def test_out_of_range_rate(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("bowler:\n  spare_rate: 1.5\n")
    with pytest.raises(ValidationError):
        load_config(str(p))
