# irondome

A small arcade game for the terminal. A pitcher on the right of the field
throws a plate into the air every two seconds. A cannon on the left fires a
rocket each time you press Enter. The rocket aims at the oldest plate still in
flight and leads the shot so that it meets the plate.

## Installing

```
pip install .
```

## Playing

```
irondome
```

Press Enter to fire. Every line read from standard input counts as one shot.
A round lasts 60 seconds. About ten times a second the screen is cleared with
ANSI escape codes and the 40 × 120 character field is drawn again. When the
round ends, the game prints a summary like this:

```
=== Game Over ===
Score:          412
Hits/Shots:     6 / 9
Accuracy:       66.7%
Avg time to hit:1.8s
Best streak:    4
```

A rocket counts as a miss when it leaves the field or has flown for more than
ten seconds. A plate that leaves the field is removed without counting as
anything. By default a hit scores more the farther the plate is from the
bottom-left corner of the field, up to about 100 points.

## Using the pieces

The game is built from parts that can be used on their own:

- `irondome.config` holds the game's constants (field size, gravity, timings,
  speeds) and `deg_to_rad()`.
- `irondome.trajectory` defines `Pos`, `Velocity` and `Trajectory`. A
  trajectory follows `x = x0 + vx·t`, `y = y0 + vy·t + ½·g·t²`;
  `exact_position()` gives the unrounded point and `calculate_position()` the
  grid cell. Each trajectory takes a `clock` callable, `time.monotonic` by
  default.
- `irondome.entities` defines `Cannon`, `Pitcher`, `Plate` and `Rocket`, each
  with `pos()`, `bounding_box()` and `draw_on_grid(grid)`.
  `Rocket.is_expired()` tells whether a rocket has left the field or outlived
  its lifetime.
- `irondome.grid.Grid` holds the entities, draws them into its buffer with
  `refresh()`, turns the buffer into text with `render()` or writes it with
  `draw(stream)`, and resolves collisions with `check_hits()`, which returns a
  `CheckHitsResult` of `HitInfo` records and the number of missed rockets.
  `intersects()` and `is_off_screen()` are available as functions.
- `irondome.scoring.ScoreCalculator` scores a hit with its `strategy`:
  `DistanceBasedStrategy` (the default), `SpeedBasedStrategy` or
  `TimeBasedStrategy`. With `strategy` set to `None` every hit scores 0.
- `irondome.statistics.GameStatistics` keeps the total score, hits, shots,
  accuracy, average time to hit, the best streak of hits and the hit history,
  and can `reset()`.
- `irondome.game.intercept_angle(plate)` works out the firing angle that meets
  a plate in flight, and `irondome.game.Game` runs a round. `Game` accepts
  `clock`, `rng`, `sleep`, `stdin` and `stdout`, so a round can be driven
  without a terminal; `fire_rocket()`, `spawn_plate()` and `tick()` perform
  single steps of the loop that `play()` runs.

```python
from irondome.scoring import ScoreCalculator, TimeBasedStrategy
from irondome.statistics import GameStatistics

calculator = ScoreCalculator()
calculator.strategy = TimeBasedStrategy()

stats = GameStatistics()
stats.record_hit(calculator.calculate_score(None, None, 1.0), 1.0)
stats.record_miss()
print(stats.formatted_stats())
```

## What it does not do

The `irondome` command takes no options: the round length, field size and
scoring strategy are fixed by the constants in `irondome.config` and the
defaults of `Game`. Scores are printed at the end of a round and not kept
anywhere, so there is no high-score table.

## Running the tests

```
pip install ".[test]"
pytest
```