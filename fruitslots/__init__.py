"""A five-reel fruit slot machine game with a pygame front end."""

__version__ = "0.1.0"