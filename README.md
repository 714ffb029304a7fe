# marioforce

A bruteforcer for Mario movement. It replays an input sequence up to a
chosen frame window. It then nudges the joystick inputs inside that
window at random, over and over. It keeps any variation that brings
Mario closer to a target position, facing angle, angular velocity and
forward speed at the window's last frame.

## How it scores

At the end frame, Mario's state is read into a `MarioData` and compared
with a `Target`. The absolute difference for each field is multiplied
by the matching entry in `Weights`, and the products are summed. Lower
is better (`calculate_score`).

`Bounds` gives open (exclusive) intervals that each field should lie
within. `IsInBounds` records, field by field, whether a state is inside
them.

With bound correction off, a state outside the bounds scores infinity.
With bound correction on, a copy of the weights is penalised instead.
Each out-of-bounds field has its weight raised to
`(weight + 1) * bound_penalty`. This pulls the search back inside the
bounds rather than rejecting the state outright. See
`calculate_score_bound_correction` and `Weights.penalise_bounds`.

The yaw (second face angle) is compared as an unsigned 16-bit value,
from 0 to 65535. Pitch and roll are compared as given.

## The game object

The bruteforcer drives a game object that you supply. The object must
provide these methods:

- `read(path)` returns values for the following paths:
  - `"gMarioState.pos"`, `"gMarioState.faceAngle"` and
    `"gMarioState.angleVel"` each return three numbers.
  - `"gMarioState.forwardVel"` returns one number.
- `write(path, value)` takes an integer for each of these paths:
  - `"gControllerPads[0].stick_x"`
  - `"gControllerPads[0].stick_y"`
  - `"gControllerPads[0].button"`
- `advance()` runs one frame.
- `save_state()` returns a state object.
- `load_state(state)` restores a state object.

## Usage

```python
from marioforce.bruteforcer import Input, bruteforce_main
from marioforce.defaults import (
    default_bounds,
    default_config,
    default_target,
    default_weights,
)

inputs = [...]            # one Input(stick_x, stick_y, buttons) per frame
game = ...                # an object as described above

def save(output_name, best_inputs):
    ...                   # write the current best inputs somewhere

score, best = bruteforce_main(
    game,
    inputs,
    default_weights(),
    default_target(),
    default_config(),
    default_bounds(),
    save,
    max_iterations=100_000,
)
```

### What `bruteforce_main` does

1. It replays frames `0` through `config.end_frame`. It saves the state
   reached after frame `config.start_frame - 1`.
2. It prints the initial score.
3. Each iteration loads that saved state and perturbs the best inputs
   found so far. It then replays the window up to and including
   `config.end_frame` and scores the result.
4. When a score is strictly lower than the best so far, it keeps the
   new inputs and prints the new best.

If `bounds` is `None`, `default_bounds()` is used.

Every 10,000 iterations, `save` is called with `config.output_name` and
the best inputs so far.

Without `max_iterations`, the loop never ends. When the loop does end,
the function returns the best score and its input list.

### Defaults

`marioforce.defaults` provides `default_config`, `default_weights`,
`default_target` and `default_bounds`. The settings they give are:

- **Frame window:** frames 4801 to 4831.
- **Perturbation:** a 10% chance of perturbing each frame, by an offset
  of up to 10 stick units.
- **Bound correction:** on, with a penalty of 1000.
- **Forward speed limits:** between 34 and 1000.
- **Target:** position (100, 200, 300) with a forward speed of 48.

Build your own `BruteforceConfig`, `Target`, `Weights` and `Bounds` from
`marioforce.params` and `marioforce.bounds` to change any of this.

### Lower-level pieces

- `perturb_inputs(inputs, start_frame, end_frame, perm_size, perm_freq, rng)`
  returns a new list; it does not change `inputs`.
  - Each frame in `[start_frame, end_frame)` is nudged with probability
    `perm_freq`.
  - On each axis the offset lies in `[-perm_size, perm_size)`.
  - Results are clamped to -128..127.
  - You can pass a `random.Random` as `rng` for reproducible runs.
- `set_inputs(game, inp)` writes one `Input` to the first controller.
- `IsInBounds.from_mario_data(mario_data, bounds)` and
  `IsInBounds.from_game(game, bounds)` evaluate every bounds check.
  `all_true()` reports whether all of them pass.
- `MarioData.from_game(game)` reads Mario's state from a game object.
- `copy_libraries(wafel_path, version, num_threads)` copies
  `libsm64/sm64_<version>.dll` to `sm64_<version><i>.dll`, one copy for
  each extra worker. Copies that already exist are skipped. It returns
  the paths of the copies it made.

## What it does not do

This package does not provide any of the following:

- an emulator or game object;
- a command-line program;
- code to read or write `.m64` movie files;
- code to run several workers in parallel.

You supply the game object, the input list and the `save` callback.

## Running the tests

Install the `test` extra, then run `pytest` from the project directory.