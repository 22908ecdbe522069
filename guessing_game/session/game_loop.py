"""
Game Loop - The interactive guessing loop.

The loop:
1. Draw the secret
2. Announce the range and how to quit
3. Read a line
4. Parse it; anything that is not a number quits
5. Compare with the secret and report
6. Repeat until the guess is correct or the player quits

States: AWAITING_INPUT -> EVALUATING -> {AWAITING_INPUT, WON, QUIT}
"""

from __future__ import annotations
import logging

from ..config import GameConfig
from ..console import Console, LineSource, StreamLineSource
from ..secret_source import RandomSecretSource, SecretSource
from .guess import compare_guess, parse_guess
from .state import LoopState, Outcome, Session, TurnResult


logger = logging.getLogger(__name__)


PROMPT = "Please input your guess."

FEEDBACK = {
    Outcome.TOO_SMALL: "Too small!",
    Outcome.TOO_LARGE: "Too large!",
}

QUIT_MESSAGE = "Quitting.."


class GuessingGame:
    """
    The guessing game driver.

    Usage:
        game = GuessingGame()
        session = game.start()  # blocks on stdin until won or quit

    Or, one line at a time:
        game = GuessingGame(secret_source=FixedSecretSource(50))
        game.begin()
        result = game.step("42")
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        secret_source: SecretSource | None = None,
        line_source: LineSource | None = None,
        console: Console | None = None,
    ):
        self.config = config or GameConfig()
        self.secret_source = secret_source or RandomSecretSource(self.config.seed)
        self.line_source = line_source or StreamLineSource()
        self.console = console or Console()
        self.session: Session | None = None

    def begin(self) -> Session:
        """
        Draw the secret and announce the game.

        Returns:
            Fresh session waiting for its first guess
        """
        low, high = self.config.low, self.config.high
        secret = self.secret_source.draw(low, high)
        self.session = Session(secret=secret, low=low, high=high)
        logger.debug(
            "Secret %d drawn from [%d, %d] by %s",
            secret, low, high, self.secret_source.get_name(),
        )

        if self.config.reveal_secret:
            self.console.say(f"Secret Number: {secret}")
        self.console.say("Guess the number!")
        self.console.say(
            f"The number is between {low} and {high}. "
            "Enter anything that is not a number to quit."
        )
        return self.session

    def start(self) -> Session:
        """
        Run a whole game against the line source.

        Returns:
            The terminated session
        """
        session = self.begin()
        while not session.terminated:
            self.console.say(PROMPT)
            self.step(self.line_source.read_line())
        logger.debug(
            "Session ended in state %s after %d attempt(s)",
            session.state.value, session.attempts,
        )
        return session

    def step(self, line: str | None) -> TurnResult:
        """
        Process one line of input.

        Args:
            line: Raw input line, or None for end-of-input

        Returns:
            TurnResult describing what happened
        """
        session = self.session
        if session is None:
            raise RuntimeError("Game has not begun; call begin() or start() first")
        if session.terminated:
            raise RuntimeError(f"Session already finished ({session.state.value})")

        session.state = LoopState.EVALUATING
        guess = parse_guess(line)

        if guess is None:
            session.state = LoopState.QUIT
            logger.debug("Unparseable input %r, quitting", line)
            return self._report(Outcome.QUIT, None, [QUIT_MESSAGE])

        session.guesses.append(guess)
        messages = [f"You guessed: {guess}"]
        outcome = compare_guess(guess, session.secret)

        if outcome == Outcome.CORRECT:
            session.state = LoopState.WON
            noun = "attempt" if session.attempts == 1 else "attempts"
            messages.append(f"Bingo! You got it in {session.attempts} {noun}.")
        else:
            session.state = LoopState.AWAITING_INPUT
            messages.append(FEEDBACK[outcome])

        logger.debug("Guess %d -> %s", guess, outcome.value)
        return self._report(outcome, guess, messages)

    def _report(self, outcome: Outcome, guess: int | None, messages: list[str]) -> TurnResult:
        for message in messages:
            self.console.say(message)
        return TurnResult(
            outcome=outcome,
            loop_state=self.session.state,
            guess=guess,
            attempts=self.session.attempts,
            messages=messages,
        )
