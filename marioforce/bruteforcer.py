"""Random-perturbation bruteforcer that drives a game toward a target state."""

from __future__ import annotations

import copy
import random
import shutil
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, Protocol, Sequence

from marioforce.bounds import Bounds, IsInBounds, MarioData
from marioforce.params import BruteforceConfig, Target, Weights

STICK_MIN = -128
STICK_MAX = 127
SAVE_INTERVAL = 10000


class _Game(Protocol):
    def read(self, path: str) -> Any: ...

    def write(self, path: str, value: int) -> None: ...

    def advance(self) -> None: ...

    def save_state(self) -> Any: ...

    def load_state(self, state: Any) -> None: ...


@dataclass(frozen=True)
class Input:
    """Controller input for one frame."""

    stick_x: int = 0
    stick_y: int = 0
    buttons: int = 0


def _library_path(wafel_path: str | Path, name: str) -> Path:
    return Path(wafel_path) / "libsm64" / name


def copy_libraries(wafel_path: str | Path, version: str, num_threads: int) -> list[Path]:
    """Give each extra worker its own copy of the game library.

    Existing copies are left alone. Returns the paths of the copies made.
    """
    print("spawning DLLs...")
    source = _library_path(wafel_path, f"sm64_{version}.dll")
    created = []
    for i in range(num_threads - 1):
        target = _library_path(wafel_path, f"sm64_{version}{i}.dll")
        if not target.is_file():
            print(i)
            shutil.copyfile(source, target)
            created.append(target)
    return created


def set_inputs(game: _Game, inp: Input) -> None:
    """Write one frame's controller input into the game."""
    game.write("gControllerPads[0].stick_x", int(inp.stick_x))
    game.write("gControllerPads[0].stick_y", int(inp.stick_y))
    game.write("gControllerPads[0].button", int(inp.buttons))


def calculate_score(mario_data: MarioData, weights: Weights, target: Target) -> float:
    """Weighted distance between Mario's state and the target; lower is better."""
    result = 0.0
    for i in range(3):
        result += abs(target.pos[i] - mario_data.pos[i]) * weights.pos_weights[i]
        result += abs(target.angle_vel[i] - mario_data.angle_vel[i]) * weights.angle_vel_weights[i]
    result += abs(target.hspd - mario_data.forward_vel) * weights.hspd_weight
    result += abs(target.face_angle[0] - mario_data.face_angle[0]) * weights.face_angle_weights[0]
    result += (
        abs(target.face_angle[1] - (mario_data.face_angle[1] & 0xFFFF))
        * weights.face_angle_weights[1]
    )
    result += abs(target.face_angle[2] - mario_data.face_angle[2]) * weights.face_angle_weights[2]
    return float(result)


def calculate_score_bound_correction(
    bound_correction: bool,
    bound_penalty: float,
    mario_data: MarioData,
    weights: Weights,
    target: Target,
    in_bounds: IsInBounds,
) -> float:
    """Score Mario's state, handling out-of-bounds values.

    With bound correction the weights of out-of-bounds variables are penalised;
    without it any out-of-bounds value makes the score infinite.
    """
    if bound_correction:
        penalised = copy.deepcopy(weights)
        penalised.penalise_bounds(in_bounds, bound_penalty)
        return calculate_score(mario_data, penalised, target)
    if in_bounds.all_true():
        return calculate_score(mario_data, weights, target)
    return float("inf")


def _saturate(value: int) -> int:
    return max(STICK_MIN, min(STICK_MAX, value))


def perturb_inputs(
    inputs: Sequence[Input],
    start_frame: int,
    end_frame: int,
    perm_size: int,
    perm_freq: float,
    rng: random.Random | None = None,
) -> list[Input]:
    """Return a copy of ``inputs`` with random stick nudges in ``[start_frame, end_frame)``.

    Each frame is nudged with probability ``perm_freq`` by an offset in
    ``[-perm_size, perm_size)`` on each axis, saturating at the stick limits.
    """
    source = rng if rng is not None else random
    result = list(inputs)
    for frame in range(start_frame, end_frame):
        if source.random() > perm_freq:
            continue
        rand_x = source.randrange(-perm_size, perm_size)
        rand_y = source.randrange(-perm_size, perm_size)
        current = result[frame]
        result[frame] = replace(
            current,
            stick_x=_saturate(current.stick_x + rand_x),
            stick_y=_saturate(current.stick_y + rand_y),
        )
    return result


def _report(thread_num: int, label: str, score: float, frame: int, data: MarioData) -> None:
    print(f"Thread {thread_num}: {label}: {score}, at frame {frame}")
    print(
        f"Position: {list(data.pos)}, Face Angle: {list(data.face_angle)}, "
        f"Angle Vel: {list(data.angle_vel)}, Forward Vel: {data.forward_vel}"
    )


def bruteforce_main(
    game: _Game,
    inputs: Sequence[Input],
    weights: Weights,
    target: Target,
    config: BruteforceConfig,
    bounds: Bounds | None = None,
    save: Callable[[str, list[Input]], None] | None = None,
    max_iterations: int | None = None,
) -> tuple[float, list[Input]]:
    """Search for inputs that bring Mario closer to ``target`` at ``config.end_frame``.

    Runs forever unless ``max_iterations`` is given. ``save`` is called with the
    output name and the best inputs every 10000 iterations. Returns the best
    score and the inputs that reached it.
    """
    if bounds is None:
        from marioforce.defaults import default_bounds

        bounds = default_bounds()

    best = list(inputs)
    start_state = game.save_state()
    for frame in range(config.end_frame + 1):
        set_inputs(game, best[frame])
        game.advance()
        if frame == config.start_frame - 1:
            start_state = game.save_state()

    mario_data = MarioData.from_game(game)
    in_bounds = IsInBounds.from_mario_data(mario_data, bounds)
    result = calculate_score_bound_correction(
        config.bound_correction, config.bound_penalty, mario_data, weights, target, in_bounds
    )
    _report(config.thread_num, "Initial score", result, config.end_frame, mario_data)

    rng = random.Random()
    count = 0
    while max_iterations is None or count < max_iterations:
        game.load_state(start_state)
        candidate = perturb_inputs(
            best, config.start_frame, config.end_frame + 1, config.perm_size, config.perm_freq, rng
        )
        for frame in range(config.start_frame, config.end_frame + 1):
            set_inputs(game, candidate[frame])
            game.advance()
        mario_data = MarioData.from_game(game)
        in_bounds.update(mario_data, bounds)
        new_score = calculate_score_bound_correction(
            config.bound_correction, config.bound_penalty, mario_data, weights, target, in_bounds
        )
        if new_score < result:
            result = new_score
            _report(config.thread_num, "New best score", result, config.end_frame, mario_data)
            best = candidate
        count += 1
        if count % SAVE_INTERVAL == 0:
            if save is not None:
                save(config.output_name, best)
            print(f"Thread {config.thread_num}: Saved m64 after {count} iterations")
    return result, best