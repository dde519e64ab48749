"""Terminal Diner Dash and tic-tac-toe games and the small containers they use."""

__version__ = "0.1.0"