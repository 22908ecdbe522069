"""
Secret Source - Where the hidden number comes from.

The game never calls the random module directly. It asks a SecretSource
for a number, so tests can pin the secret and replays can fix a seed.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import random


class SecretSource(ABC):
    """
    Abstract uniform-integer generator.

    Implementations return a value in the inclusive range [low, high].
    """

    @abstractmethod
    def draw(self, low: int, high: int) -> int:
        """
        Draw a secret.

        Args:
            low: Smallest allowed value (inclusive)
            high: Largest allowed value (inclusive)

        Returns:
            Integer in [low, high]
        """
        pass

    def get_name(self) -> str:
        """Get the source's name/identifier."""
        return self.__class__.__name__


class RandomSecretSource(SecretSource):
    """
    Uniform random secret.

    Uses a private Random instance so a seed only affects this source.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self.rng = random.Random(seed)

    def draw(self, low: int, high: int) -> int:
        return self.rng.randint(low, high)


class FixedSecretSource(SecretSource):
    """
    Always returns the same secret.

    Used for:
    - Testing
    - Scripted demos
    """

    def __init__(self, value: int):
        self.value = value

    def draw(self, low: int, high: int) -> int:
        if not low <= self.value <= high:
            raise ValueError(
                f"Fixed secret {self.value} outside range [{low}, {high}]"
            )
        return self.value
