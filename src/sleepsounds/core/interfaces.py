"""Protocol interfaces for the audio backend and the regression model."""

from typing import Protocol
from sleepsounds.core.models import (
    AudioFormat,
    PlaybackState,
    SleepPrediction,
    SoundData,
    VoiceParams,
)


class IVoice(Protocol):
    """Interface for an audio voice (playback instance)."""

    def start(self) -> None:
        """Start playback."""
        ...

    def stop(self) -> None:
        """Stop playback."""
        ...

    def set_volume(self, volume: float) -> None:
        """Set volume (0.0 to 1.0)."""
        ...

    def get_state(self) -> PlaybackState:
        """Get current playback state."""
        ...

    def destroy(self) -> None:
        """Destroy the voice and free resources."""
        ...


class IAudioBackend(Protocol):
    """Interface for audio backend implementation."""

    def initialize(self) -> None:
        """Initialize the backend."""
        ...

    def create_source_voice(
        self, format: AudioFormat, data: bytes, params: VoiceParams
    ) -> IVoice:
        """Create a source voice for playback (not yet started)."""
        ...

    def shutdown(self) -> None:
        """Shutdown the backend and free all resources."""
        ...


class IAudioFormat(Protocol):
    """Interface for audio format parsers."""

    @property
    def extensions(self) -> tuple[str, ...]:
        """
        File extensions supported by this format (e.g., ('.wav', '.wave')).

        Returns:
            Tuple of supported file extensions (lowercase, with dot).
        """
        ...

    def load(self, path: str) -> SoundData:
        """
        Load an audio file and return SoundData.

        Raises:
            AudioFormatError: If format is not supported.
            FileNotFoundError: If file does not exist.
        """
        ...


class IRegressionModel(Protocol):
    """Interface for the pre-trained bedtime model."""

    def predict(
        self, wake: float, estimated_sleep: float, coffee: float
    ) -> SleepPrediction:
        """
        Predict the sleep actually needed.

        Args:
            wake: Wake time in seconds since midnight.
            estimated_sleep: Desired sleep in hours.
            coffee: Daily coffee intake in cups.
        """
        ...
