"""The state machine that runs one round of the slot machine."""

from __future__ import annotations

from . import constants
from .game import GameController
from .input import InputManager


class State:
    """A phase of a round; the default reactions do nothing."""

    def __init__(self, state_machine: StateMachine) -> None:
        self.state_machine = state_machine

    @property
    def controller(self) -> GameController:
        return self.state_machine.game_controller

    def enter(self) -> None:
        """Called when the machine switches to this state."""

    def exit(self) -> None:
        """Called when the machine leaves this state."""

    def handle_input(self, manager: InputManager) -> None:
        """React to the player's input."""

    def update(self, dt: float) -> None:
        """Advance the state by ``dt`` seconds."""


class StateMachine:
    """Holds the current state and forwards input and time to it."""

    def __init__(self, game_controller: GameController) -> None:
        self.game_controller = game_controller
        self._current: State | None = None

    @property
    def current_state(self) -> State | None:
        return self._current

    def transition_to(self, new_state: State) -> None:
        if self._current is not None:
            self._current.exit()
        self._current = new_state
        new_state.enter()

    def handle_input(self, manager: InputManager) -> None:
        if self._current is not None:
            self._current.handle_input(manager)

    def update(self, dt: float) -> None:
        if self._current is not None:
            self._current.update(dt)


class Idle(State):
    """Waiting for the player to press Start."""

    def handle_input(self, manager: InputManager) -> None:
        if manager.should_start():
            manager.clear_input()
            self.state_machine.transition_to(SpeedingUp(self.state_machine))


class SpeedingUp(State):
    """Reels accelerate for a fixed time; input is ignored."""

    def __init__(self, state_machine: StateMachine) -> None:
        super().__init__(state_machine)
        self._timer = 0.0

    def enter(self) -> None:
        self.controller.start_spinning()
        self._timer = 0.0

    def update(self, dt: float) -> None:
        self.controller.update(dt)
        self.controller.increase_spinning_speed(dt)
        if self._timer >= constants.SPEED_UP_TIME:
            self.state_machine.transition_to(Spinning(self.state_machine))
        self._timer += dt


class Spinning(State):
    """Reels spin at full speed until Stop is pressed or time runs out."""

    def __init__(self, state_machine: StateMachine) -> None:
        super().__init__(state_machine)
        self._timer = 0.0

    def enter(self) -> None:
        self._timer = 0.0

    def handle_input(self, manager: InputManager) -> None:
        if manager.should_stop() or self._timer >= constants.AUTO_STOP_TIME:
            manager.clear_input()
            self.state_machine.transition_to(SlowingDown(self.state_machine))

    def update(self, dt: float) -> None:
        self.controller.update(dt)
        self._timer += dt


class SlowingDown(State):
    """Reels brake and settle; clicks are discarded."""

    def enter(self) -> None:
        self.controller.stop_spinning()

    def handle_input(self, manager: InputManager) -> None:
        manager.clear_input()

    def update(self, dt: float) -> None:
        self.controller.update(dt)
        self.controller.decrease_spinning_speed(dt)
        if self.controller.are_reels_stopped():
            self.state_machine.transition_to(ShowingResults(self.state_machine))


class ShowingResults(State):
    """The prize is on screen until the player presses Ok."""

    def enter(self) -> None:
        self.controller.start_showing_prize()

    def exit(self) -> None:
        self.controller.stop_showing_prize()

    def handle_input(self, manager: InputManager) -> None:
        if manager.should_hide_prize_message_box():
            manager.clear_input()
            self.state_machine.transition_to(Idle(self.state_machine))