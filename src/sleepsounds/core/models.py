"""Data models."""

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sleepsounds.core.exceptions import EstimationError
from sleepsounds.utils.validate import (
    validate_coffee_cups,
    validate_sleep_hours,
    validate_wake_time,
)


class SoundOption(Enum):
    """Bundled ambient sounds, in picker order."""

    SERENE = "serene"
    RAIN = "rain"
    OCEAN = "ocean"

    @property
    def asset_id(self) -> str:
        """Name of the bundled audio file, without extension."""
        return _ASSET_IDS[self]

    @property
    def display_name(self) -> str:
        """Name shown in the sound picker ("Serene-Harmony", "Rain", ...)."""
        return "-".join(word.capitalize() for word in self.asset_id.split("-"))

    @classmethod
    def from_name(cls, name: str) -> "SoundOption":
        """
        Look up an option by enum name, value or asset identifier.

        Raises:
            ValueError: If nothing matches.
        """
        key = name.strip().lower()
        for option in cls:
            if key in (option.name.lower(), option.value, option.asset_id):
                return option
        raise ValueError(
            f"Unknown sound: {name!r} "
            f"(choose from {', '.join(option.asset_id for option in cls)})"
        )


_ASSET_IDS = {
    SoundOption.SERENE: "serene-harmony",
    SoundOption.RAIN: "rain",
    SoundOption.OCEAN: "ocean-waves",
}


class PlaybackState(Enum):
    """Playback state enumeration."""

    STOPPED = "stopped"
    PLAYING = "playing"


@dataclass
class AudioFormat:
    """Audio format specification."""

    sample_rate: int
    """Sample rate in Hz."""

    channels: int
    """Number of channels (1=mono, 2=stereo)."""

    bits_per_sample: int
    """Bits per sample (always 16 after decoding)."""

    @property
    def frame_size(self) -> int:
        """Frame size in bytes."""
        return self.channels * self.bytes_per_sample

    @property
    def bytes_per_sample(self) -> int:
        """Bytes per sample."""
        return self.bits_per_sample // 8


@dataclass
class SoundData:
    """Decoded audio data."""

    format: AudioFormat
    """Audio format specification."""

    data: bytes
    """Raw PCM audio data."""

    duration_seconds: float
    """Duration in seconds."""

    @property
    def num_frames(self) -> int:
        """Number of audio frames."""
        return len(self.data) // self.format.frame_size


@dataclass
class VoiceParams:
    """Parameters for voice creation."""

    volume: float = 1.0
    """Volume (0.0 to 1.0)."""

    loop: bool = True
    """Repeat indefinitely instead of playing once."""


@dataclass(frozen=True)
class EstimationInput:
    """Validated inputs of one bedtime estimation."""

    wake_time: datetime.time
    sleep_hours: float
    coffee_cups: int

    def __post_init__(self):
        object.__setattr__(self, "wake_time", validate_wake_time(self.wake_time))
        object.__setattr__(self, "sleep_hours", validate_sleep_hours(self.sleep_hours))
        object.__setattr__(self, "coffee_cups", validate_coffee_cups(self.coffee_cups))

    @property
    def wake_seconds(self) -> int:
        """Wake time as seconds since midnight (seconds of the minute ignored)."""
        return self.wake_time.hour * 3600 + self.wake_time.minute * 60


@dataclass(frozen=True)
class SleepPrediction:
    """Regression model output."""

    actual_sleep: float
    """Predicted sleep needed, in seconds."""


@dataclass(frozen=True)
class BedtimeResult:
    """Outcome of a bedtime calculation: a bedtime or the error that prevented it."""

    bedtime: Optional[datetime.datetime] = None
    predicted_sleep: Optional[float] = None
    error: Optional[EstimationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, bedtime: datetime.datetime, predicted_sleep: float) -> "BedtimeResult":
        return cls(bedtime=bedtime, predicted_sleep=predicted_sleep)

    @classmethod
    def failure(cls, error: EstimationError) -> "BedtimeResult":
        return cls(error=error)
