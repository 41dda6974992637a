import pytest

from fruitslots import constants
from fruitslots.game import Game, GameController, calculate_prize, generate_reels
from fruitslots.rng import get_engine
from fruitslots.symbol import SymbolType

C, B, O = SymbolType.CHERRY, SymbolType.BANANA, SymbolType.ORANGE


def _run_to_rest(game, dt=1 / 60, limit=20000):
    for _ in range(limit):
        game.update(dt)
        game.decrease_spinning_speed(dt)
        if game.are_reels_stopped():
            return True
    return False


def test_generate_reels_count_and_layout():
    reels = generate_reels(constants.REELS_COUNT)
    assert len(reels) == constants.REELS_COUNT
    assert reels[0].x == constants.FIRST_REEL_X
    assert all(r.y == constants.REELS_Y for r in reels)
    assert all(r.width == constants.REEL_WIDTH for r in reels)
    assert all(r.height == constants.REEL_HEIGHT for r in reels)
    gaps = {b.x - a.x for a, b in zip(reels, reels[1:])}
    assert gaps == {constants.REEL_WIDTH + constants.REELS_SPACER}


def test_left_reels_reach_higher_top_speed():
    reels = generate_reels(constants.REELS_COUNT)
    for r in reels:
        r.increase_speed(1000.0)
    speeds = [r.speed for r in reels]
    assert all(a > b for a, b in zip(speeds, speeds[1:]))
    assert all(s > constants.BASIC_MAX_SPEED for s in speeds)
    assert all(r.is_max_speed() for r in reels)


def test_prize_all_same():
    assert calculate_prize([C] * 5) == 100000


def test_prize_no_run():
    assert calculate_prize([C, B, C, B, O]) == 10


def test_prize_run_of_three():
    assert calculate_prize([C, C, B, B, B]) == 1000


def test_prize_counts_only_adjacent_runs():
    assert calculate_prize([C, B, C, B, C]) == calculate_prize([O])


def test_prize_longer_run_pays_more():
    assert calculate_prize([C, C, B, O, O]) < calculate_prize([C, C, C, O, B])


def test_prize_empty_line_rejected():
    with pytest.raises(ValueError):
        calculate_prize([])


def test_game_buttons():
    game = Game()
    assert game.start_button.label == "Start"
    assert game.stop_button.label == "Stop"
    assert game.start_button.position == constants.START_BUTTON_POSITION
    assert game.stop_button.position == constants.STOP_BUTTON_POSITION
    assert game.prize_message_box.ok_button.label == "Ok"


def test_game_is_a_controller_and_starts_at_rest():
    game = Game()
    assert isinstance(game, GameController)
    assert game.are_reels_stopped() is True
    assert game.showing_prize is False
    assert len(game.reels) == constants.REELS_COUNT


def test_start_spinning_moves_reels():
    game = Game()
    game.start_spinning()
    assert game.are_reels_stopped() is False
    before = [s.offset for s in game.reels[0].symbols]
    game.increase_spinning_speed(0.01)
    game.update(0.01)
    after = [s.offset for s in game.reels[0].symbols]
    assert before != after


def test_stop_spinning_records_result_line():
    game = Game()
    game.start_spinning()
    game.increase_spinning_speed(0.5)
    game.stop_spinning()
    assert game.result_line == [r.result.type for r in game.reels]


def test_showing_prize_sets_text_and_flag():
    game = Game()
    game.start_spinning()
    game.increase_spinning_speed(0.5)
    game.stop_spinning()
    game.start_showing_prize()
    assert game.showing_prize is True
    assert game.prize == calculate_prize(game.result_line)
    assert game.prize_message_box.text == f"YOU WON {game.prize}$!!!"
    game.stop_showing_prize()
    assert game.showing_prize is False


def test_full_spin_settles_on_centre():
    get_engine().seed(2024)
    game = Game()
    game.start_spinning()
    for _ in range(70):
        game.update(1 / 60)
        game.increase_spinning_speed(1 / 60)
    game.stop_spinning()
    assert _run_to_rest(game) is True
    for reel in game.reels:
        assert reel.result.offset == pytest.approx(constants.REEL_CENTER_PERCENT, abs=0.1)