import random

import pytest

from sandsnake.game import (
    DOT_SIZE,
    MIN_INTERVAL,
    SPEEDUP_STEP,
    START_INTERVAL,
    Direction,
    Game,
    Outcome,
    food_diamond,
    head_triangle,
)


def make_game(seed=1):
    game = Game(rng=random.Random(seed))
    game.start()
    return game


def test_start_places_snake_moving_down():
    game = make_game()
    assert game.snake == [(5, 7), (5, 6), (5, 5)]
    assert game.direction is Direction.DOWN
    assert game.score == 0
    assert game.running is True
    assert game.interval == START_INTERVAL == 150
    assert game.head() == (5, 7)


def test_food_is_on_a_free_cell_inside_the_field():
    for seed in range(50):
        game = make_game(seed)
        x, y = game.food
        assert 0 <= x < game.width
        assert 0 <= y < game.height
        assert game.food not in game.snake


def test_tick_moves_head_and_keeps_length():
    game = make_game()
    game.food = (19, 14)
    old = list(game.snake)
    assert game.tick() is Outcome.MOVED
    assert game.head() == Direction.DOWN.step(*old[0])
    assert game.snake[1:] == old[:-1]


def test_steer_refuses_reverse_and_same_direction():
    game = make_game()
    assert game.steer(Direction.UP) is False
    assert game.steer(Direction.DOWN) is False
    assert game.pending is None


def test_steer_applies_on_next_tick():
    game = make_game()
    game.food = (19, 14)
    start = game.head()
    assert game.steer(Direction.RIGHT) is True
    assert game.direction is Direction.DOWN
    game.tick()
    assert game.direction is Direction.RIGHT
    assert game.head() == Direction.RIGHT.step(*start)
    assert game.pending is None


def test_eating_grows_snake_and_scores():
    game = make_game()
    game.food = Direction.DOWN.step(*game.head())
    length = len(game.snake)
    assert game.tick() is Outcome.ATE
    assert game.score == 1
    assert len(game.snake) == length + 1
    assert game.food not in game.snake
    assert game.interval == START_INTERVAL


def test_every_fifth_point_speeds_up():
    game = make_game()
    game.score = 4
    game.food = Direction.DOWN.step(*game.head())
    game.tick()
    assert game.score == 5
    assert game.interval == START_INTERVAL - SPEEDUP_STEP


def test_speed_never_drops_below_minimum():
    game = make_game()
    game.score = 4
    game.interval = MIN_INTERVAL + 5
    game.food = Direction.DOWN.step(*game.head())
    game.tick()
    assert game.interval == MIN_INTERVAL


def test_leaving_the_field_ends_the_game():
    game = make_game()
    game.food = (19, 14)
    game.steer(Direction.LEFT)
    outcomes = []
    while game.running:
        outcomes.append(game.tick())
    assert outcomes[-1] is Outcome.DIED
    assert all(o is Outcome.MOVED for o in outcomes[:-1])
    assert game.head()[0] < 0
    assert game.tick() is Outcome.IDLE


def test_running_into_own_body_ends_the_game():
    game = make_game()
    game.snake = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)]
    game.direction = Direction.DOWN
    game.food = (0, 0)
    assert game.tick() is Outcome.DIED
    assert game.running is False


def test_tick_before_start_is_idle():
    game = Game(rng=random.Random(0))
    assert game.tick() is Outcome.IDLE
    assert game.snake == []


@pytest.mark.parametrize(
    "direction, opposite",
    [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ],
)
def test_opposite(direction, opposite):
    assert direction.opposite() is opposite


@pytest.mark.parametrize(
    "name, expected",
    [
        ("UP", (3, 3)),
        ("DOWN", (3, 5)),
        ("LEFT", (2, 4)),
        ("RIGHT", (4, 4)),
    ],
)
def test_step_and_back_returns_to_start(name, expected):
    direction = Direction[name]
    moved = Direction.step(direction, 3, 4)
    assert moved == expected
    back = Direction.opposite(direction)
    assert Direction.step(back, *moved) == (3, 4)


def test_head_triangle_pointing_down():
    assert head_triangle((0, 0), Direction.DOWN, DOT_SIZE) == [
        (DOT_SIZE // 2, DOT_SIZE),
        (0, 0),
        (DOT_SIZE, 0),
    ]


@pytest.mark.parametrize("direction", list(Direction))
def test_head_triangle_stays_inside_cell(direction):
    cell = (3, 2)
    points = head_triangle(cell, direction, DOT_SIZE)
    assert len(set(points)) == 3
    for px, py in points:
        assert cell[0] * DOT_SIZE <= px <= (cell[0] + 1) * DOT_SIZE
        assert cell[1] * DOT_SIZE <= py <= (cell[1] + 1) * DOT_SIZE


def test_food_diamond_touches_each_cell_edge():
    cell = (4, 6)
    top, right, bottom, left = food_diamond(cell, DOT_SIZE)
    assert top[1] == cell[1] * DOT_SIZE
    assert bottom[1] == (cell[1] + 1) * DOT_SIZE
    assert left[0] == cell[0] * DOT_SIZE
    assert right[0] == (cell[0] + 1) * DOT_SIZE
    assert top[0] == bottom[0]
    assert left[1] == right[1]