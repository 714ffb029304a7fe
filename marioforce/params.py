"""Parameters that drive a bruteforce run: configuration, targets and weights."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from marioforce.bounds import IsInBounds


@dataclass
class BruteforceConfig:
    """Everything a single bruteforce worker needs to know about its run."""

    start_frame: int
    end_frame: int
    perm_freq: float
    perm_size: int
    wafel_path: str
    version: str
    output_name: str
    thread_num: int
    bound_penalty: float
    bound_correction: bool


@dataclass
class Target:
    """Desired values of Mario's state at the end frame."""

    pos: tuple[float, float, float]
    face_angle: tuple[int, int, int]
    angle_vel: tuple[int, int, int]
    hspd: float
    coins: int


@dataclass
class Weights:
    """Per-variable weights used by the fitness function."""

    pos_weights: list[float]
    face_angle_weights: list[float]
    angle_vel_weights: list[float]
    hspd_weight: float

    def __post_init__(self) -> None:
        self.pos_weights = [float(w) for w in self.pos_weights]
        self.face_angle_weights = [float(w) for w in self.face_angle_weights]
        self.angle_vel_weights = [float(w) for w in self.angle_vel_weights]
        self.hspd_weight = float(self.hspd_weight)

    def penalise_bounds(self, in_bounds: IsInBounds, bound_penalty: float) -> None:
        """Raise the weight of every variable that is out of bounds.

        This penalises the score for leaving the bounds without rejecting it outright.
        """
        in_bounds.pos_limits.adjust_weights(self, bound_penalty)
        in_bounds.face_angle_limits.adjust_weights(self, bound_penalty)
        in_bounds.angle_vel_limits.adjust_weights(self, bound_penalty)
        in_bounds.hspd_limits.adjust_weights(self, bound_penalty)