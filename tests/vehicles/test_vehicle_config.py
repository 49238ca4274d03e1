import math
import sys
import os

import numpy as np
import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from src.config import OpenSpaceConfig
from src.vehicles import VehicleConfig, AckermannConfig


def test_min_turning_radius_from_bicycle_model():
    config = AckermannConfig(wheelbase=2.8448, max_steer_deg=29.4)
    assert config.max_steer == pytest.approx(math.radians(29.4))
    assert config.min_turning_radius == pytest.approx(2.8448 / math.tan(math.radians(29.4)))
    # 约 5m
    assert 4.9 < config.min_turning_radius < 5.1


def test_defaults():
    config = AckermannConfig()
    assert isinstance(config, VehicleConfig)
    assert config.max_velocity == 2.0
    assert config.min_turning_radius == pytest.approx(2.5 / math.tan(math.radians(35.0)))


def test_outline_is_closed_rectangle():
    config = AckermannConfig(wheelbase=3.0, width=1.8, front_hang=1.0, rear_hang=0.5)
    outline = config.outline_coords
    assert outline.shape == (5, 2)
    np.testing.assert_allclose(outline[0], outline[-1])
    assert outline[:, 0].max() == pytest.approx(4.0)
    assert outline[:, 0].min() == pytest.approx(-0.5)
    assert outline[:, 1].max() == pytest.approx(0.9)


@pytest.mark.parametrize("kwargs", [
    {"wheelbase": 0.0},
    {"wheelbase": -1.0},
    {"max_steer_deg": 0.0},
    {"max_steer_deg": 90.0},
    {"max_steer_deg": -10.0},
])
def test_invalid_geometry(kwargs):
    with pytest.raises(ValueError):
        AckermannConfig(**kwargs)


def test_open_space_config():
    cfg = OpenSpaceConfig()
    assert cfg.step_size == 0.5
    assert cfg.debug_mode is False

    with pytest.raises(ValueError):
        OpenSpaceConfig(step_size=0.0)
    with pytest.raises(ValueError):
        OpenSpaceConfig(step_size=-0.1)
