# sandsnake

A classic snake arcade game. You steer a snake around a 20 × 15 field and eat the golden
food. Each piece of food adds one point and makes the snake one cell longer. After every
fifth point the game speeds up: each step starts at 150 ms and gets 10 ms shorter, down to
a minimum of 50 ms. The game ends if you hit a wall or the snake's own body. Your best
score is saved between sessions.

## Installing

```
pip install .
```

## Playing

```
sandsnake
```

The game opens with a **Play** button. You can also start by pressing any direction key.

| Key                | Action      |
|--------------------|-------------|
| Up / W             | Move up     |
| Right / D          | Move right  |
| Down / S           | Move down   |
| Left / A           | Move left   |

- The snake cannot turn straight back on itself.
- **Restart** appears when the game ends. Pressing a direction key also starts a new game.
- **Mute** switches the background music off and on.
- The game pauses when the window loses focus. It resumes when the window gets focus back.

### Background image and sound

The game looks for these optional files in the assets directory. By default this is the
current working directory. Pass `--assets DIR` to choose another one:

```
sandsnake --assets path/to/assets
```

- `background.JPG` is drawn behind the playing field.
- `music.mp3` loops during play.
- `coffin.mp3` plays when the snake dies.

If a file is missing or cannot be loaded, the game runs without it. Without the image, the
game draws a plain sandy background.

## High score

The best score is kept in a small JSON file in your user data directory.
`sandsnake.highscore.default_path()` returns its location. `HighScoreStore` reads the file
when the game starts. It writes the best score back when the window is closed. If the file
is missing or unreadable, the high score starts at 0.

## Using the game logic

The rules are separate from the window, so you can drive them directly with
`sandsnake.game.Game`:

```python
import random
from sandsnake.game import Game, Direction

game = Game(20, 15, random.Random(1))
game.start()
game.steer(Direction.RIGHT)
outcome = game.tick()
print(game.head(), outcome)
```

- `Game.start()` resets the snake, the score and the speed.
- `Game.steer()` queues a turn for the next tick. It returns `False` if the turn is refused.
- `Game.tick()` moves the snake one cell. It returns an `Outcome`: `IDLE`, `MOVED`, `ATE` or `DIED`.
- `Game.interval` holds the current step length in milliseconds.
- `head_triangle()` and `food_diamond()` return the pixel corners used to draw the head and the food.

## Running the tests

```
pip install ".[test]"
pytest
```