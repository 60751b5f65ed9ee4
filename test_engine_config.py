import pytest

from engine_config import EngineConfig


def test_defaults():
    config = EngineConfig()
    assert config.samples == 20
    assert config.gravity == (0.0, -9.81)
    assert config.shear_divisor == 1.0


def test_values_are_normalised():
    config = EngineConfig(samples=8.0, gravity=[0, -2])
    assert config.samples == 8
    assert config.gravity == (0.0, -2.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"samples": 1},
        {"min_edge_span": -1.0},
        {"moment_divisor": 0.0},
        {"gravity": (0.0, -9.81, 0.0)},
    ],
)
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ValueError):
        EngineConfig(**kwargs)
