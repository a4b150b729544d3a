# quadplay

This package holds game logic with no window, renderer or input device
attached. Each part is plain Python state. You move it forward step by step
and inspect it as you go. It suits tests, bots and tools, and it can sit
behind a renderer of your own. Where randomness is involved, you can pass in
a `random.Random` instance to get repeatable runs.

## Contents

- `quadplay.geometry`
  - `Vec2` is an immutable 2D vector. It supports `+`, `-`, `*` and `/`, and
    has `length()`, `normalize()` (which raises `ValueError` on a zero vector)
    and `dot()`.
  - `Rect` is an axis-aligned rectangle with `overlaps()` and `contains()`.
  - `polar_to_cartesian()` converts polar coordinates to a vector.
- `quadplay.platformer`
  - This module is pixel-stepped platformer physics.
  - A `World` holds three kinds of object:
    - static tile layers, made of `Tile` values;
    - moving solids, referred to by `Solid` handles;
    - actors, referred to by `Actor` handles.
  - Actors move with `move_h` and `move_v`, which carry sub-pixel remainders.
    They can descend through jump-through tiles.
  - Solids move with `solid_move`. A moving solid carries the actors riding
    on it and pushes the actors in its way. An actor that is pushed into an
    obstacle is reported by `squished()`.
  - Queries: `collide_check`, `collide_solids`, `collide_tag`, `solid_at`,
    `tag_at`, `actor_pos` and `solid_pos`.
- `quadplay.curves`
  - These are the building blocks used by the emitters:
    - `Curve`, which samples into a `BatchedCurve` with `batch()`, read back
      with `sample(t)`;
    - `Color`, with `lerp`, and `ColorCurve`, with `color_at`;
    - the emission shapes `EmissionPoint`, `EmissionRect` and
      `EmissionSphere`;
    - `AtlasConfig`, with `frame_uv`;
    - the particle meshes `RectangleShape`, `CircleShape` and `CustomMesh`;
    - `BlendMode`.
  - Only linear interpolation is supported. A `Curve` set to
    `Interpolation.BEZIER` raises `ValueError` from `batch()`.
- `quadplay.emitter`
  - An `Emitter` is driven by an `EmitterConfig`. Its methods are `update(dt)`,
    `step(pos, dt)`, `emit(pos, n)`, `reset()`, `rebuild_size_curve()` and
    `update_particle_mesh()`.
  - Live particles are the `Particle` records in `Emitter.particles`.
  - `EmittersCache` keeps a pool of emitters that share one config. Start one
    with `spawn(pos)` and advance them all with `update(dt)`. Emitters that
    have finished go back to the pool.
  - The presets `explosion()`, `smoke()` and `fire()` return ready-made
    configs.
- `quadplay.life`
  - Conway's Game of Life on a bounded grid: `Life`, `CellState` and
    `next_state`.
  - `Life.random()` seeds each cell as alive with probability 1/5.
- `quadplay.snake`
  - `SnakeGame` is played on a square board, 16×16 by default.
  - `steer()` changes `Direction`. It refuses to reverse the snake, and it
    refuses a second turn before the next move.
  - `tick()` moves the snake one square. `update(now)` calls it when `speed`
    seconds have passed.
  - `restart(now)` starts a new game.
- `quadplay.arkanoid`
  - `Arkanoid` has a paddle, a ball and a 10×10 wall of blocks in a 20×20
    world.
  - `update(dt, left, right, launch)` advances one frame.
  - `remaining_blocks()` counts the blocks left.
- `quadplay.asteroids`
  - `AsteroidsGame` is played with a `Ship`, `Bullet`s and `Asteroid`s that
    split when hit.
  - It has `update(now, thrust, fire, turn)`, `restart()`, and
    `ship_vertices()` for drawing. The `wrap_around` helper is also here.
- `quadplay.camera_math`
  - `short_angle_dist` and `angle_lerp` are the angle helpers.
  - `CameraControls` turns mouse-wheel input into zoom or rotation through
    `apply_wheel`. It eases the displayed rotation with `smooth`.
- `quadplay.inventory`
  - `Inventory` keeps the items bought and a fixed set of labelled `Slot`s.
  - It is driven by `Fit`, `Unfit` and `Refit` commands through `apply()`.

## What it does not do

Nothing in this package draws, plays sound or reads the keyboard, mouse or
touch screen. There is no game loop, window or command to run. The caller
supplies input flags and time, and reads positions back for rendering.
Emitters produce particle state and mesh data. They do not handle textures,
shaders or GPU buffers. Tile layers are passed in as lists of `Tile` values.
Map files are not loaded.

## Install

```
pip install .
```

## Example: a platformer world

```python
from quadplay.geometry import Vec2
from quadplay.platformer import Tile, World

world = World()
floor = [Tile.EMPTY] * 40 * 4 + [Tile.SOLID] * 40
world.add_static_tiled_layer(floor, 8.0, 8.0, 40, 1)

player = world.add_actor(Vec2(16.0, 8.0), 8, 8)
while not world.collide_check(player, world.actor_pos(player) + Vec2(0.0, 1.0)):
    world.move_v(player, 1.0)
print(world.actor_pos(player))  # Vec2(x=16.0, y=24.0)
```

## Example: particles

```python
from quadplay.emitter import Emitter, explosion
from quadplay.geometry import Vec2

emitter = Emitter(explosion())
emitter.config.emitting = True
for _ in range(10):
    emitter.step(Vec2(100.0, 100.0), 1 / 60)
print(len(emitter.particles))
```

## Running the tests

```
pip install .[test]
pytest
```