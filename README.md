# fruitslots

A small fruit slot machine game. There are five reels and each one carries
three fruit symbols: cherry, banana and orange. Press **Start** and the reels
speed up for one second. Each reel spins faster than its right-hand
neighbour. Press **Stop**, or wait ten seconds, and each reel brakes and
settles on one symbol in the centre line.

The prize depends on the longest run of equal symbols next to each other in
that line. A run of length *n* pays 10 to the power *n* dollars. A line with
no neighbouring matches pays 10, and five of a kind pays 100000. A message box
shows `YOU WON <prize>$!!!`. Press **Ok** to close it and spin again.

## Installing

```
pip install .
```

The game draws its window with pygame.

## Playing

```
fruitslots
```

This opens a 1500×750 window titled "Slots". Click a button to press it.
Press Escape or close the window to quit. The command takes no options apart
from `--help`.

## Using the pieces

The game logic works without a window.

- `fruitslots.game.Game` holds the reels (`reels`), the `start_button`, the
  `stop_button` and the `prize_message_box`. After a round it exposes
  `result_line`, `prize` and `showing_prize`.
- `fruitslots.states.StateMachine` moves a game through the `Idle`,
  `SpeedingUp`, `Spinning`, `SlowingDown` and `ShowingResults` states.
- `fruitslots.input.InputManager` reads the button clicks for the state
  machine. Subclasses provide `should_exit`.

```python
from fruitslots.game import Game
from fruitslots.input import InputManager
from fruitslots.states import Idle, StateMachine


class Buttons(InputManager):
    def should_exit(self):
        return False


game = Game()
manager = Buttons(game.start_button, game.stop_button,
                  game.prize_message_box.ok_button)
machine = StateMachine(game)
machine.transition_to(Idle(machine))

game.start_button.register_click()
machine.handle_input(manager)   # Idle -> SpeedingUp; the reels start spinning
machine.update(1 / 60)
```

`fruitslots.app.run_loop(game, renderer, input_handler)` runs this loop
frame by frame until the input handler asks to exit. It uses any
`fruitslots.renderer.Renderer` and returns the state machine it used.
`fruitslots.renderer.PygameRenderer` and
`fruitslots.renderer.PygameInputHandler` are the pygame versions.

`fruitslots.game.calculate_prize` scores a result line on its own. It raises
`ValueError` when the line is empty:

```python
from fruitslots.game import calculate_prize
from fruitslots.symbol import SymbolType

calculate_prize([SymbolType.CHERRY] * 3 + [SymbolType.BANANA] * 2)  # 1000
```

Random choices come from one shared engine, `fruitslots.rng.get_engine()`.
This covers the shuffle of each reel and the symbol it stops on. You can pass
a `Reel` its own `random.Random` through the `rng` argument.

## What it does not do

There is no credit balance and there are no bets. A spin costs nothing, and
the prize is only shown. It is not added to any account or saved anywhere.

## Running the tests

```
pip install .[test]
pytest
```