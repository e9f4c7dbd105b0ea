import pygame
import pytest

from blockbreaker.entities import Colour, InputSnapshot
from blockbreaker.game import Anchor, Game, GameMode

START = InputSnapshot(start_pressed=True)
IDLE = InputSnapshot()


@pytest.fixture
def game(screen, rng):
    return Game(screen, rng)


def assert_fresh_round(game):
    assert game.round.lives == 3
    assert game.round.score == 0
    assert len(game.round.balls) == 1
    assert len(game.round.blocks) == 30
    assert game.round.paddle.box.x == 325


def lose_every_ball(game):
    for ball in game.round.balls:
        ball.box.y = 700
    game.update(0.0, IDLE)


def test_starts_in_the_menu(game):
    assert game.mode is GameMode.MENU
    assert_fresh_round(game)


def test_menu_runs_no_physics(game):
    ball = game.round.balls[0]
    before = (ball.box.x, ball.box.y)

    game.update(1.0, InputSnapshot(left=True))

    assert game.mode is GameMode.MENU
    assert (ball.box.x, ball.box.y) == before
    assert game.round.paddle.box.x == 325


def test_start_enters_play(game):
    game.update(0.016, START)

    assert game.mode is GameMode.GAME
    assert_fresh_round(game)


def test_losing_three_balls_in_a_row_is_fatal(game):
    game.update(0.0, START)

    lose_every_ball(game)
    lose_every_ball(game)
    assert game.mode is GameMode.GAME
    assert game.round.lives == 1

    lose_every_ball(game)
    assert game.mode is GameMode.DEAD
    assert game.round.lives == 0


def test_dead_waits_for_start_then_resets(game):
    game.update(0.0, START)
    for _ in range(3):
        lose_every_ball(game)
    game.round.score = 40

    game.update(1.0, IDLE)
    assert game.mode is GameMode.DEAD
    assert game.round.score == 40

    game.update(0.0, START)
    assert game.mode is GameMode.MENU
    assert_fresh_round(game)


def test_breaking_every_block_wins_with_full_score(game):
    game.update(0.0, START)

    for _ in range(60):
        if not game.round.blocks:
            break
        target = game.round.blocks[0]
        target.lives = 1
        ball = game.round.balls[0]
        ball.box.x = target.box.x + 25
        ball.box.y = target.box.bottom - 10
        game.update(0.0, IDLE)

    assert game.mode is GameMode.WON
    assert game.round.score == 300

    game.update(0.0, START)
    assert game.mode is GameMode.MENU
    assert_fresh_round(game)


def test_start_is_ignored_during_play(game):
    game.update(0.0, START)
    game.update(0.0, START)
    assert game.mode is GameMode.GAME


def test_sprites_are_paddle_then_blocks_then_balls(game):
    sprites = list(game.sprites())

    assert len(sprites) == 1 + 30 + 1
    assert sprites[0].colour is Colour.BLACK
    assert sprites[-1].colour is Colour.WHITE
    assert {sprite.colour for sprite in sprites[1:-1]} <= {Colour.RED, Colour.GREEN}


def test_overlay_for_each_mode(game):
    (menu,) = game.overlay()
    assert menu.text == "Press SPACE to start"
    assert menu.anchor is Anchor.CENTRE

    game.update(0.0, START)
    game.round.score = 20
    score, lives = game.overlay()
    assert score.text == "Score: 20"
    assert score.anchor is Anchor.TOP_CENTRE
    assert lives.text == "Lives: 3"
    assert lives.anchor is Anchor.TOP_LEFT

    game.mode = GameMode.WON
    assert game.overlay()[0].text == "You won with a score of 20!"

    game.mode = GameMode.DEAD
    assert game.overlay()[0].text == "You lost with a score of 20!"


def test_first_round_and_later_rounds_serve_from_different_spots(game):
    assert game.round.balls[0].box.topleft == pygame.Vector2(400, 360)

    game.update(0.0, START)
    for _ in range(3):
        lose_every_ball(game)
    game.update(0.0, START)

    assert game.round.balls[0].box.topleft == pygame.Vector2(375, 300)
