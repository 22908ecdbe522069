"""
Guessing Game - Interactive number-guessing console game.

One session per run:
- A secret integer is drawn from [1, 100]
- The player submits guesses, one per line
- Each guess is reported as too small, too large, or correct
- Any input that is not a number quits the game
"""

__version__ = "0.1.0"
