"""Null backend for testing (no actual audio output)."""

import time
from typing import Dict
from sleepsounds.core.models import AudioFormat, PlaybackState, VoiceParams
from sleepsounds.utils.log import get_logger

logger = get_logger(__name__)


class NullVoice:
    """Voice that tracks state and elapsed time without producing sound."""

    def __init__(self, voice_id: str, format: AudioFormat, data: bytes, params: VoiceParams):
        self.voice_id = voice_id
        self.format = format
        self.data = data
        self.params = params
        self.destroyed = False
        self._state = PlaybackState.STOPPED
        self._start_time: float = 0.0

    @property
    def duration(self) -> float:
        """Length of one pass over the data, in seconds."""
        return len(self.data) / (self.format.sample_rate * self.format.frame_size)

    def start(self) -> None:
        """Start playback."""
        self._start_time = time.monotonic()
        self._state = PlaybackState.PLAYING
        logger.debug(f"NullVoice {self.voice_id}: started")

    def stop(self) -> None:
        """Stop playback."""
        self._state = PlaybackState.STOPPED
        logger.debug(f"NullVoice {self.voice_id}: stopped")

    def set_volume(self, volume: float) -> None:
        """Set volume."""
        self.params.volume = volume
        logger.debug(f"NullVoice {self.voice_id}: volume={volume}")

    def get_state(self) -> PlaybackState:
        """Get playback state."""
        if self._state == PlaybackState.PLAYING and not self.params.loop:
            # Simulate completion of a single pass
            if time.monotonic() - self._start_time >= self.duration:
                self._state = PlaybackState.STOPPED
        return self._state

    def destroy(self) -> None:
        """Destroy voice."""
        self.destroyed = True
        logger.debug(f"NullVoice {self.voice_id}: destroyed")


class NullBackend:
    """Null backend implementation for testing."""

    def __init__(self):
        self.initialized = False
        self.voices: Dict[str, NullVoice] = {}
        self._next_voice_id = 0

    def initialize(self) -> None:
        """Initialize backend."""
        if self.initialized:
            return
        self.initialized = True
        logger.info("NullBackend initialized")

    def create_source_voice(
        self, format: AudioFormat, data: bytes, params: VoiceParams
    ) -> NullVoice:
        """Create a source voice."""
        voice_id = f"null_{self._next_voice_id}"
        self._next_voice_id += 1
        voice = NullVoice(voice_id, format, data, params)
        self.voices[voice_id] = voice
        logger.debug(f"Created NullVoice {voice_id}")
        return voice

    def shutdown(self) -> None:
        """Shutdown backend."""
        for voice in self.voices.values():
            voice.destroy()
        self.voices.clear()
        self.initialized = False
        logger.info("NullBackend shut down")
