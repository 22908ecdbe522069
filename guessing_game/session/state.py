"""
Session state - The transient per-run game entity.

A session lives for one play-through:
- Created when the game starts, with its secret already drawn
- Updated on every parsed guess
- Discarded when the process exits

Nothing is persisted.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class LoopState(Enum):
    """Position of the guessing loop."""
    AWAITING_INPUT = "awaiting_input"
    EVALUATING = "evaluating"
    WON = "won"  # Terminal
    QUIT = "quit"  # Terminal


TERMINAL_STATES = frozenset({LoopState.WON, LoopState.QUIT})


class Outcome(Enum):
    """What a single line of input led to."""
    TOO_SMALL = "too_small"
    TOO_LARGE = "too_large"
    CORRECT = "correct"
    QUIT = "quit"


@dataclass
class Session:
    """
    One game session.

    The secret is fixed at construction and never changes.
    """
    secret: int
    low: int = 1
    high: int = 100

    state: LoopState = LoopState.AWAITING_INPUT

    # Parsed guesses, in order
    guesses: list[int] = field(default_factory=list)

    @property
    def terminated(self) -> bool:
        """True once the session has been won or quit."""
        return self.state in TERMINAL_STATES

    @property
    def attempts(self) -> int:
        """Number of parsed guesses so far."""
        return len(self.guesses)

    @property
    def won(self) -> bool:
        return self.state == LoopState.WON


@dataclass
class TurnResult:
    """
    Result of processing one line of input.

    Contains the outcome, the resulting loop state and the
    messages shown to the player.
    """
    outcome: Outcome
    loop_state: LoopState
    guess: int | None = None
    attempts: int = 0
    messages: list[str] = field(default_factory=list)

    @property
    def terminated(self) -> bool:
        return self.loop_state in TERMINAL_STATES
