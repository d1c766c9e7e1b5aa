# blastgame

A small shooter built on pygame. You move a player around a 1920x1080 window and
fire bullets to the left or right. An enemy with 100 hit points stands at
position (500, 0); each bullet that touches it takes away 30 hit points, and an
entity whose hit points reach zero is removed from the game. The player has 300
hit points.

## Installation

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Playing

```
blastgame
```

The command takes no options apart from `--help`. It opens the window, runs at
up to 144 frames per second on a red background, and stops when the window is
closed or `Escape` is pressed.

Images are loaded from `resources/` relative to the current directory:

- `resources/Player/idle.png`, `left.png`, `right.png`, `up.png` for the player
  (the enemy uses `idle.png` as well)
- `resources/Projectiles/bullet.png` for bullets, drawn and collided at half size

An image that cannot be read gives an empty 0x0 texture: nothing is drawn for it
and a warning is logged, but the game still runs.

Controls:

| Input              | Action                                            |
|--------------------|---------------------------------------------------|
| `A` (held)         | Move left and aim left                            |
| `D` (held)         | Move right and aim right                          |
| `W` (held)         | Move up and aim right                             |
| `S` (held)         | Move down and aim right                           |
| `F` or left click  | Fire a bullet from the centre of the player       |
| `Escape`           | Quit                                              |

Bullets fly at 1000 pixels per second and are dropped once their x position
leaves the range -5000 to 5000.

## Using the pieces

- `blastgame.entity`
  - `Texture(width, height, surface=None)`: image plus the size used for drawing
    and collision; `halved()` returns a copy with half the width and height.
  - `load_texture(path)`: load an image into a `Texture`.
  - `Entity(texture, name, hp)`: `texture` is a `Texture` or a path. Has `name`,
    `hp`, `velocity` (default 100), `alive` and a `position` vector.
    `update(dt)` calls `on_update(dt)`; `draw(surface)` blits the texture at the
    position and then calls `on_draw(surface)`. `collides_with(other)` tests
    bounding boxes (touching edges count, never itself) and logs `"Hit!"` on a
    hit; `check_collision(others)` stops at the first hit. `take_damage(damage)`
    subtracts the absolute value and sets `alive` to `False` at zero or below.
- `blastgame.bullet`
  - `Bullet(parent, velocity, positive_x_direction=False, texture=None)`: moves
    along x each update, towards smaller x when `positive_x_direction` is true.
    `collides_with` ignores the parent and itself; on a hit it deals 30 damage
    to the other entity and sets its own `alive` to `False`.
    `check_collision(others)` hits at most one entity.
- `blastgame.player`
  - `Controls(left, right, up, down, fire)`: one frame of input, all `False` by
    default.
  - `PlayerTextures(idle, left, right, up)`, with `PlayerTextures.load()` reading
    the files listed above.
  - `Player(textures=None, bullet_texture=None)`: set `player.controls` before
    each `update(dt)`. `fire()` adds a bullet to `player.bullets` and returns it;
    `on_draw` draws the bullets.
- `blastgame.game`
  - `Game(width, height, title)`: holds `entities`; `update(dt)` advances each
    entity, checks collisions, removes bullets that hit something and drops dead
    entities; `draw(surface)` draws them in list order; `run()` opens the window
    and runs the loop.
  - `main(argv=None)`: the `blastgame` command.

## What it does not do

The enemy does not move, shoot or take part in the game beyond being a target.
There is no score, no win or game-over screen, no sound, no menu and no saved
state. Window size, speeds and damage are fixed in the code rather than set by
options.

## Running the tests

```
pytest
```