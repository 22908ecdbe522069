"""
Session Module - One play-through of the guessing game.

A session:
- Is created when the game begins, with its secret drawn
- Tracks guesses and the loop state
- Ends on a correct guess or when the player quits

Sessions are EPHEMERAL: nothing outlives the process.
"""

from .state import Session, LoopState, Outcome, TurnResult, TERMINAL_STATES
from .guess import parse_guess, compare_guess
from .game_loop import GuessingGame

__all__ = [
    "Session",
    "LoopState",
    "Outcome",
    "TurnResult",
    "TERMINAL_STATES",
    "parse_guess",
    "compare_guess",
    "GuessingGame",
]
