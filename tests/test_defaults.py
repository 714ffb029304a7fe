import math

from marioforce.bounds import IsInBounds, MarioData
from marioforce.defaults import default_bounds, default_config, default_target, default_weights


def test_default_config_values():
    config = default_config()
    assert config.start_frame == 4801
    assert config.end_frame == 4831
    assert config.bound_penalty == 1000.0
    assert config.bound_correction is True
    assert config.thread_num == 1
    assert config.version == "us"


def test_default_weights_values_and_independence():
    weights = default_weights()
    assert weights.pos_weights == [10.0, 10.0, 10.0]
    assert weights.face_angle_weights == [0.0, 10.0, 0.0]
    weights.pos_weights[0] = 0.0
    assert default_weights().pos_weights[0] == 10.0


def test_default_target_values():
    target = default_target()
    assert tuple(target.pos) == (100.0, 200.0, 300.0)
    assert target.hspd == 48.0
    assert target.coins == 100


def test_default_bounds_limits():
    bounds = default_bounds()
    assert bounds.hspd_limits == (34.0, 1000.0)
    assert all(low == -math.inf and high == math.inf for low, high in bounds.pos_limits)
    assert tuple(bounds.face_angle_limits[1]) == (0, 65535)


def test_default_bounds_reject_slow_mario():
    bounds = default_bounds()
    assert not IsInBounds.from_mario_data(MarioData(forward_vel=10.0), bounds).all_true()
    assert IsInBounds.from_mario_data(MarioData(face_angle=(0, 100, 0), forward_vel=50.0), bounds).all_true()