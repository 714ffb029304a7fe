"""Default run settings: targets, limits and weights."""

from __future__ import annotations

import math

from marioforce.bounds import Bounds
from marioforce.params import BruteforceConfig, Target, Weights

NUM_THREADS = 4

WAFEL_PATH = "D:\\PATH\\TO\\WAFEL\\"
VERSION = "us"

START_FRAME = 4801
END_FRAME = 4831
MOVIE_LENGTH = END_FRAME - START_FRAME
INP_NAME = "C:\\Users\\PATH\\TO\\INP.m64"
OUT_NAME = "C:\\Users\\PATH\\TO\\INP.m64"

BOUND_CORRECTION = True
BOUND_PENALTY = 1000.0

PERM_FREQ = 0.1
PERM_SIZE = 10

DES_POS = (100.0, 200.0, 300.0)
DES_FACE_ANGLE = (32, 32, 32)
DES_ANGLE_VEL = (32, 32, 32)
DES_HSPD = 48.0

POS_LIMITS = ((-math.inf, math.inf), (-math.inf, math.inf), (-math.inf, math.inf))
FACE_ANGLE_LIMITS = ((-32768, 32767), (0, 65535), (-32768, 32767))
ANGLE_VEL_LIMITS = ((-32768, 32767), (-32768, 32767), (-32768, 32767))
HSPD_LIMITS = (34.0, 1000.0)
COIN_LIMIT = 100

POS_WEIGHTS = (10.0, 10.0, 10.0)
FACE_ANGLE_WEIGHTS = (0.0, 10.0, 0.0)
ANGLE_VEL_WEIGHTS = (0.0, 0.0, 0.0)
HSPD_WEIGHT = 10.0


def default_config() -> BruteforceConfig:
    """Configuration for a single worker using the default settings."""
    return BruteforceConfig(
        start_frame=START_FRAME,
        end_frame=END_FRAME,
        perm_freq=PERM_FREQ,
        perm_size=PERM_SIZE,
        wafel_path=WAFEL_PATH,
        version=VERSION,
        output_name=OUT_NAME,
        thread_num=1,
        bound_penalty=BOUND_PENALTY,
        bound_correction=BOUND_CORRECTION,
    )


def default_weights() -> Weights:
    """A fresh set of the default fitness weights."""
    return Weights(
        pos_weights=list(POS_WEIGHTS),
        face_angle_weights=list(FACE_ANGLE_WEIGHTS),
        angle_vel_weights=list(ANGLE_VEL_WEIGHTS),
        hspd_weight=HSPD_WEIGHT,
    )


def default_target() -> Target:
    """The default target state."""
    return Target(
        pos=DES_POS,
        face_angle=DES_FACE_ANGLE,
        angle_vel=DES_ANGLE_VEL,
        hspd=DES_HSPD,
        coins=COIN_LIMIT,
    )


def default_bounds() -> Bounds:
    """The default limits on Mario's state."""
    return Bounds(
        pos_limits=POS_LIMITS,
        face_angle_limits=FACE_ANGLE_LIMITS,
        angle_vel_limits=ANGLE_VEL_LIMITS,
        hspd_limits=HSPD_LIMITS,
    )