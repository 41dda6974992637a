import pytest

from fruitslots import constants
from fruitslots.symbol import Symbol, SymbolType, symbol_offset


def test_symbol_types_are_three_fruits():
    assert SymbolType(0) is SymbolType.CHERRY
    assert SymbolType(1) is SymbolType.BANANA
    assert SymbolType(2) is SymbolType.ORANGE
    with pytest.raises(ValueError):
        SymbolType(3)


def test_offset_of_middle_symbol_is_reel_center():
    assert symbol_offset(1) == constants.REEL_CENTER_PERCENT


def test_offsets_are_truncated():
    assert symbol_offset(0) == 16.0
    assert symbol_offset(2) == 83.0


def test_offsets_are_whole_and_increasing():
    offsets = [symbol_offset(i) for i in range(constants.SYMBOLS_COUNT)]
    assert offsets == sorted(offsets)
    assert all(o == int(o) for o in offsets)


def test_increase_offset_without_wrap():
    s = Symbol(SymbolType.CHERRY, 40.0)
    s.increase_offset(25.0)
    assert s.offset == pytest.approx(65.0)
    assert s.type is SymbolType.CHERRY


def test_increase_offset_just_below_wrap_threshold():
    start = 100.0
    s = Symbol(SymbolType.BANANA, start)
    s.increase_offset(10.0)
    assert s.offset == pytest.approx(start + 10.0)


def test_increase_offset_wraps_past_bottom():
    start = 100.0
    s = Symbol(SymbolType.ORANGE, start)
    s.increase_offset(20.0)
    assert s.offset == pytest.approx(start + 20.0 - constants.REEL_HEIGHT_PERCENT)


def test_increase_offset_wraps_only_once():
    s = Symbol(SymbolType.ORANGE, 50.0)
    s.increase_offset(300.0)
    assert s.offset == pytest.approx(250.0)


def test_negative_distance_moves_up():
    s = Symbol(SymbolType.CHERRY, 50.0)
    s.increase_offset(-10.0)
    assert s.offset == pytest.approx(40.0)