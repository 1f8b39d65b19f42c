import pytest

from echoStateNetwork.config import ESNConfig, load_config


def test_defaults_follow_reference_demo():
    cfg = ESNConfig()
    assert (cfg.n_inputs, cfg.n_reservoir, cfg.n_outputs) == (1, 10, 1)
    assert cfg.leak_rate == 0.3
    assert cfg.input_scale == 0.5
    assert cfg.reservoir_scale == pytest.approx(0.45)
    assert cfg.ridge == 1e-2
    assert (cfg.train_len, cfg.test_len) == (100, 50)


@pytest.mark.parametrize(
    "overrides",
    [
        {"n_reservoir": 0},
        {"leak_rate": 0.0},
        {"leak_rate": 1.01},
        {"ridge": -0.1},
        {"input_scale": -1.0},
        {"washout": 100},
        {"test_len": 0},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValueError):
        ESNConfig(**overrides)


def test_load_config_round_trip_and_unknown_keys():
    cfg = load_config({"n_reservoir": "25", "ridge": 0.5, "seed": 3})
    assert cfg.n_reservoir == 25
    assert cfg.ridge == 0.5
    assert load_config(cfg.to_dict()) == cfg

    with pytest.raises(ValueError, match="unknown config keys"):
        load_config({"spectral_radius": 0.9})


@pytest.mark.parametrize("value", [2.7, "2.7", True, "ten"])
def test_load_config_rejects_non_integral_counts(value):
    with pytest.raises(ValueError, match="n_reservoir must be an integer"):
        load_config({"n_reservoir": value})


def test_load_config_accepts_integral_floats():
    cfg = load_config({"n_reservoir": 12.0, "train_len": "80", "seed": 7.0})
    assert cfg.n_reservoir == 12
    assert cfg.train_len == 80
    assert cfg.seed == 7
