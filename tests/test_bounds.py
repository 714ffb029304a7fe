import pytest

from marioforce.bounds import (
    Bounds,
    InAngleVelBounds,
    InFaceAngleBounds,
    InHspdBounds,
    InPosBounds,
    IsInBounds,
    MarioData,
)
from marioforce.params import Weights

INF = float("inf")


def _bounds(**overrides):
    values = dict(
        pos_limits=((-INF, INF), (-INF, INF), (-INF, INF)),
        face_angle_limits=((-32768, 32767), (0, 65535), (-32768, 32767)),
        angle_vel_limits=((-32768, 32767), (-32768, 32767), (-32768, 32767)),
        hspd_limits=(34.0, 1000.0),
    )
    values.update(overrides)
    return Bounds(**values)


class FakeGame:
    def __init__(self, values):
        self.values = values
        self.paths = []

    def read(self, path):
        self.paths.append(path)
        return self.values[path]


GAME_VALUES = {
    "gMarioState.pos": [100.0, 200.0, 300.0],
    "gMarioState.faceAngle": [0, -32768, 0],
    "gMarioState.angleVel": [1, 2, 3],
    "gMarioState.forwardVel": 48.0,
}


def _zero_weights():
    return Weights([0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0], 0.0)


def test_defaults_are_all_true():
    result = IsInBounds()
    assert result.all_true()
    assert list(InPosBounds()) == [True, True, True]
    assert InHspdBounds().hspd is True


def test_mario_data_from_game():
    game = FakeGame(GAME_VALUES)
    data = MarioData.from_game(game)
    assert data.pos == (100.0, 200.0, 300.0)
    assert data.face_angle == (0, -32768, 0)
    assert data.angle_vel == (1, 2, 3)
    assert data.forward_vel == 48.0
    assert "gMarioState.forwardVel" in game.paths


def test_is_in_bounds_from_game_matches_from_mario_data():
    game = FakeGame(GAME_VALUES)
    bounds = _bounds()
    from_game = IsInBounds.from_game(game, bounds)
    from_data = IsInBounds.from_mario_data(MarioData.from_game(game), bounds)
    assert from_game == from_data
    assert from_game.all_true()


@pytest.mark.parametrize("value, expected", [(0.0, False), (10.0, False), (5.0, True)])
def test_pos_limits_are_exclusive(value, expected):
    checks = InPosBounds()
    data = MarioData((value, 5.0, 5.0), (0, 0, 0), (0, 0, 0), 0.0)
    checks.evaluate(data, _bounds(pos_limits=((0.0, 10.0), (0.0, 10.0), (0.0, 10.0))))
    assert checks.pos_x is expected
    assert checks.pos_y is True
    assert checks.all_true() is expected


def test_pos_iteration_order():
    checks = InPosBounds(pos_x=True, pos_y=False, pos_z=True)
    assert list(checks) == [True, False, True]


def test_angle_vel_evaluate():
    checks = InAngleVelBounds()
    data = MarioData((0.0, 0.0, 0.0), (0, 0, 0), (-5, 0, 4), 0.0)
    checks.evaluate(data, _bounds(angle_vel_limits=((-5, 5), (-5, 5), (-5, 5))))
    assert list(checks) == [False, True, True]
    assert not checks.all_true()


def test_face_angle_yaw_is_unsigned():
    checks = InFaceAngleBounds()
    data = MarioData((0.0, 0.0, 0.0), (0, -32768, 0), (0, 0, 0), 0.0)
    checks.evaluate(data, _bounds(face_angle_limits=((-1, 1), (32767, 32769), (-1, 1))))
    assert list(checks) == [True, True, True]


def test_face_angle_yaw_negative_one_hits_upper_limit():
    checks = InFaceAngleBounds()
    data = MarioData((0.0, 0.0, 0.0), (0, -1, 0), (0, 0, 0), 0.0)
    checks.evaluate(data, _bounds())
    assert checks.face_angle_y is False
    assert checks.face_angle_x is True


def test_face_angle_pitch_is_signed():
    checks = InFaceAngleBounds()
    data = MarioData((0.0, 0.0, 0.0), (-100, 10, 0), (0, 0, 0), 0.0)
    checks.evaluate(data, _bounds(face_angle_limits=((-200, 0), (0, 65535), (-1, 1))))
    assert checks.face_angle_x is True


@pytest.mark.parametrize("speed, expected", [(34.0, False), (1000.0, False), (48.0, True)])
def test_hspd_limits(speed, expected):
    checks = InHspdBounds()
    checks.evaluate(MarioData(forward_vel=speed), _bounds())
    assert checks.all_true() is expected


def test_adjust_weights_only_failed_indices():
    weights = _zero_weights()
    InFaceAngleBounds(True, False, True).adjust_weights(weights, 7.0)
    assert weights.face_angle_weights == [0.0, 7.0, 0.0]
    assert weights.pos_weights == [0.0, 0.0, 0.0]


def test_hspd_adjust_weights_in_bounds_no_change():
    weights = _zero_weights()
    InHspdBounds(hspd=True).adjust_weights(weights, 1000.0)
    assert weights.hspd_weight == 0.0