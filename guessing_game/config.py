"""
Game configuration.

Settings are validated with Pydantic. Defaults reproduce the classic
game: secret in [1, 100], drawn at random, never shown to the player.

Environment:
    GUESSING_GAME_REVEAL_SECRET   Print the secret at start ("1", "true", "yes")
    GUESSING_GAME_SEED            Integer seed for the secret
"""

from typing import Optional
import os

from pydantic import BaseModel, Field, model_validator


TRUTHY = {"1", "true", "yes", "on"}


class GameConfig(BaseModel):
    """Validated settings for one game session."""
    low: int = Field(default=1, description="Smallest possible secret")
    high: int = Field(default=100, description="Largest possible secret")
    reveal_secret: bool = Field(
        default=False,
        description="Print the secret at start (debugging aid)",
    )
    seed: Optional[int] = Field(default=None, description="Seed for the secret")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_range(self) -> "GameConfig":
        # Guesses are parsed as unsigned, so a negative secret could never be hit
        if self.low < 0:
            raise ValueError(f"low must be >= 0, got {self.low}")
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must not exceed high ({self.high})")
        return self

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None, **overrides) -> "GameConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)
            **overrides: Explicit values, e.g. from CLI flags; None is ignored

        Returns:
            Validated GameConfig
        """
        env = os.environ if environ is None else environ
        values = {}

        reveal = env.get("GUESSING_GAME_REVEAL_SECRET")
        if reveal is not None:
            values["reveal_secret"] = reveal.strip().lower() in TRUTHY

        seed = env.get("GUESSING_GAME_SEED")
        if seed:
            values["seed"] = seed.strip()

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
