"""Checks of Mario's state against configured limits."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator, Protocol

if TYPE_CHECKING:
    from marioforce.params import Weights


class _GameLike(Protocol):
    def read(self, path: str) -> Any: ...


def _between(limits: tuple[float, float], value: float) -> bool:
    low, high = limits
    return low < value < high


def _penalise(values: Iterator[bool], weights: list[float], bound_penalty: float) -> None:
    penalty = float(bound_penalty)
    for i, in_bounds in enumerate(values):
        if not in_bounds:
            weights[i] = (weights[i] + 1.0) * penalty


@dataclass
class MarioData:
    """The parts of Mario's state that bounds and scoring look at."""

    pos: tuple[float, float, float] = (0.0, 0.0, 0.0)
    face_angle: tuple[int, int, int] = (0, 0, 0)
    angle_vel: tuple[int, int, int] = (0, 0, 0)
    forward_vel: float = 0.0

    @classmethod
    def from_game(cls, game: _GameLike) -> MarioData:
        """Read Mario's state from a game object exposing ``read(path)``."""
        return cls(
            pos=tuple(float(v) for v in game.read("gMarioState.pos")),
            face_angle=tuple(int(v) for v in game.read("gMarioState.faceAngle")),
            angle_vel=tuple(int(v) for v in game.read("gMarioState.angleVel")),
            forward_vel=float(game.read("gMarioState.forwardVel")),
        )


@dataclass
class Bounds:
    """Exclusive lower and upper limits for each tracked variable."""

    pos_limits: tuple[tuple[float, float], ...]
    face_angle_limits: tuple[tuple[int, int], ...]
    angle_vel_limits: tuple[tuple[int, int], ...]
    hspd_limits: tuple[float, float]


@dataclass
class InPosBounds:
    """Whether each position component is within its limits."""

    pos_x: bool = True
    pos_y: bool = True
    pos_z: bool = True

    def evaluate(self, mario_data: MarioData, bounds: Bounds) -> None:
        pos = mario_data.pos
        limits = bounds.pos_limits
        self.pos_x = _between(limits[0], pos[0])
        self.pos_y = _between(limits[1], pos[1])
        self.pos_z = _between(limits[2], pos[2])

    def all_true(self) -> bool:
        return self.pos_x and self.pos_y and self.pos_z

    def adjust_weights(self, weights: Weights, bound_penalty: float) -> None:
        _penalise(iter(self), weights.pos_weights, bound_penalty)

    def __iter__(self) -> Iterator[bool]:
        return iter((self.pos_x, self.pos_y, self.pos_z))


@dataclass
class InAngleVelBounds:
    """Whether each angular velocity component is within its limits."""

    angle_vel_x: bool = True
    angle_vel_y: bool = True
    angle_vel_z: bool = True

    def evaluate(self, mario_data: MarioData, bounds: Bounds) -> None:
        vel = mario_data.angle_vel
        limits = bounds.angle_vel_limits
        self.angle_vel_x = _between(limits[0], vel[0])
        self.angle_vel_y = _between(limits[1], vel[1])
        self.angle_vel_z = _between(limits[2], vel[2])

    def all_true(self) -> bool:
        return self.angle_vel_x and self.angle_vel_y and self.angle_vel_z

    def adjust_weights(self, weights: Weights, bound_penalty: float) -> None:
        _penalise(iter(self), weights.angle_vel_weights, bound_penalty)

    def __iter__(self) -> Iterator[bool]:
        return iter((self.angle_vel_x, self.angle_vel_y, self.angle_vel_z))


@dataclass
class InFaceAngleBounds:
    """Whether each face angle component is within its limits.

    The yaw is compared as an unsigned 16-bit angle; pitch and roll as signed.
    """

    face_angle_x: bool = True
    face_angle_y: bool = True
    face_angle_z: bool = True

    def evaluate(self, mario_data: MarioData, bounds: Bounds) -> None:
        angle = mario_data.face_angle
        limits = bounds.face_angle_limits
        self.face_angle_x = _between(limits[0], angle[0])
        self.face_angle_y = _between(limits[1], angle[1] & 0xFFFF)
        self.face_angle_z = _between(limits[2], angle[2])

    def all_true(self) -> bool:
        return self.face_angle_x and self.face_angle_y and self.face_angle_z

    def adjust_weights(self, weights: Weights, bound_penalty: float) -> None:
        _penalise(iter(self), weights.face_angle_weights, bound_penalty)

    def __iter__(self) -> Iterator[bool]:
        return iter((self.face_angle_x, self.face_angle_y, self.face_angle_z))


@dataclass
class InHspdBounds:
    """Whether the forward speed is within its limits."""

    hspd: bool = True

    def evaluate(self, mario_data: MarioData, bounds: Bounds) -> None:
        self.hspd = _between(bounds.hspd_limits, mario_data.forward_vel)

    def all_true(self) -> bool:
        return self.hspd

    def adjust_weights(self, weights: Weights, bound_penalty: float) -> None:
        if not self.hspd:
            weights.hspd_weight = (weights.hspd_weight + 1.0) * float(bound_penalty)


@dataclass
class IsInBounds:
    """Combined in-bounds results for every tracked variable."""

    pos_limits: InPosBounds = field(default_factory=InPosBounds)
    angle_vel_limits: InAngleVelBounds = field(default_factory=InAngleVelBounds)
    face_angle_limits: InFaceAngleBounds = field(default_factory=InFaceAngleBounds)
    hspd_limits: InHspdBounds = field(default_factory=InHspdBounds)

    def update(self, mario_data: MarioData, bounds: Bounds) -> None:
        """Re-evaluate every check against new data."""
        self.pos_limits.evaluate(mario_data, bounds)
        self.face_angle_limits.evaluate(mario_data, bounds)
        self.angle_vel_limits.evaluate(mario_data, bounds)
        self.hspd_limits.evaluate(mario_data, bounds)

    @classmethod
    def from_game(cls, game: _GameLike, bounds: Bounds) -> IsInBounds:
        """Evaluate the bounds against the state currently held by ``game``."""
        return cls.from_mario_data(MarioData.from_game(game), bounds)

    @classmethod
    def from_mario_data(cls, mario_data: MarioData, bounds: Bounds) -> IsInBounds:
        """Evaluate the bounds against ``mario_data``."""
        result = cls()
        result.update(mario_data, bounds)
        return result

    def all_true(self) -> bool:
        return (
            self.pos_limits.all_true()
            and self.angle_vel_limits.all_true()
            and self.face_angle_limits.all_true()
            and self.hspd_limits.all_true()
        )