"""Configuration classes."""

import os
from dataclasses import dataclass, field
from pathlib import Path


def _expanded_path(path) -> Path:
    """Return a user-expanded, absolute path."""
    return Path(path).expanduser().resolve()


@dataclass
class PlayerConfig:
    """Configuration for SoundPlayer."""

    assets_dir: Path = field(default_factory=lambda: _expanded_path("assets"))
    """Directory holding the bundled audio files."""

    extension: str = "mp3"
    """File extension of the bundled audio files, without the dot."""

    volume: float = 1.0
    """Initial playback volume (0.0 to 1.0)."""

    raise_errors: bool = False
    """Raise ResourceError from play() instead of only logging it."""

    def __post_init__(self):
        self.assets_dir = _expanded_path(self.assets_dir)
        self.extension = self.extension.lstrip(".").lower()

    @classmethod
    def from_env(cls, **overrides) -> "PlayerConfig":
        """
        Build a config from SLEEPSOUNDS_ASSETS_DIR and SLEEPSOUNDS_ASSET_EXT.

        Keyword overrides take precedence over the environment.
        """
        values = {
            "assets_dir": os.getenv("SLEEPSOUNDS_ASSETS_DIR", "assets"),
            "extension": os.getenv("SLEEPSOUNDS_ASSET_EXT", "mp3"),
        }
        values.update(overrides)
        return cls(**values)


@dataclass
class EstimatorConfig:
    """Configuration for BedtimeEstimator."""

    model_path: Path = field(
        default_factory=lambda: _expanded_path(Path("models") / "SleepCalc.joblib")
    )
    """Path to the joblib-persisted regression model."""

    def __post_init__(self):
        self.model_path = _expanded_path(self.model_path)

    @classmethod
    def from_env(cls, **overrides) -> "EstimatorConfig":
        """Build a config from SLEEPSOUNDS_MODEL_PATH."""
        values = {
            "model_path": os.getenv(
                "SLEEPSOUNDS_MODEL_PATH", str(Path("models") / "SleepCalc.joblib")
            ),
        }
        values.update(overrides)
        return cls(**values)
