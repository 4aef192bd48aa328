"""Sound and PlaybackHandle classes."""

from dataclasses import dataclass
from pathlib import Path
from sleepsounds.core.models import SoundData, SoundOption


@dataclass(frozen=True)
class PlaybackHandle:
    """Handle for the player's single active playback."""

    id: str
    """Unique identifier for this playback."""

    option: SoundOption
    """Sound being played."""

    loop: bool = True
    """Whether playback repeats indefinitely."""

    def __str__(self) -> str:
        return f"PlaybackHandle({self.id}, {self.option.asset_id})"


class Sound:
    """Represents a decoded audio asset."""

    def __init__(self, data: SoundData, path: Path, option: SoundOption):
        self._data = data
        self._path = path
        self._option = option

    @property
    def data(self) -> SoundData:
        """Get audio data."""
        return self._data

    @property
    def path(self) -> Path:
        """Get source file path."""
        return self._path

    @property
    def option(self) -> SoundOption:
        """Get the sound option this asset belongs to."""
        return self._option

    @property
    def duration(self) -> float:
        """Get duration in seconds."""
        return self._data.duration_seconds
