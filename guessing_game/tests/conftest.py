"""
Pytest fixtures for guessing game tests.
"""

import logging

import pytest

from ..config import GameConfig
from ..console import Console, ScriptedLineSource
from ..secret_source import FixedSecretSource
from ..session import GuessingGame


@pytest.fixture
def console() -> Console:
    """Console that records messages without printing."""
    return Console(write=lambda message: None)


@pytest.fixture
def make_game(console):
    """
    Factory for a game with a pinned secret and scripted input.

    Returns (game, line_source) so tests can check read counts.
    """
    def _make(secret: int, lines, config: GameConfig | None = None):
        source = ScriptedLineSource(lines)
        game = GuessingGame(
            config=config,
            secret_source=FixedSecretSource(secret),
            line_source=source,
            console=console,
        )
        return game, source

    return _make


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo any handler setup done by the CLI."""
    logger = logging.getLogger("guessing_game")
    handlers = list(logger.handlers)
    level, propagate = logger.level, logger.propagate
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
