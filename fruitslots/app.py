"""Command-line entry point that runs the slot machine window."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional

from .game import Game
from .input import InputManager
from .renderer import PygameInputHandler, PygameRenderer, Renderer
from .states import Idle, StateMachine


def run_loop(game: Game, renderer: Renderer, input_handler: InputManager) -> StateMachine:
    """Run frames until the player quits; return the state machine used."""
    machine = StateMachine(game)
    machine.transition_to(Idle(machine))

    renderer.init()
    try:
        while not input_handler.should_exit():
            machine.handle_input(input_handler)
            machine.update(renderer.get_dt())
            renderer.draw(game)
    finally:
        renderer.deinit()
    return machine


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the slot machine window and play until it is closed."""
    parser = argparse.ArgumentParser(
        prog="fruitslots", description="Spin a five-reel fruit slot machine."
    )
    parser.parse_args(argv)

    game = Game()
    renderer = PygameRenderer()
    handler = PygameInputHandler(
        game.start_button,
        game.stop_button,
        game.prize_message_box.ok_button,
    )
    run_loop(game, renderer, handler)
    return 0