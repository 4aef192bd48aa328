"""Audio output through PortAudio using sounddevice."""

import threading
from typing import Optional

import numpy as np
import sounddevice as sd

from sleepsounds.core.exceptions import BackendError
from sleepsounds.core.models import AudioFormat, PlaybackState, VoiceParams
from sleepsounds.utils.log import get_logger

logger = get_logger(__name__)


def pcm16_to_float32(data: bytes, channels: int) -> np.ndarray:
    """Convert interleaved 16-bit PCM to a (frames, channels) float32 array in [-1, 1)."""
    samples = np.frombuffer(data, dtype="<i2")
    frames = len(samples) // channels
    samples = samples[: frames * channels].reshape(frames, channels)
    return samples.astype(np.float32) / 32768.0


class SoundDeviceVoice:
    """
    One playback instance rendered by a sounddevice output stream.

    The stream callback runs on PortAudio's thread; the read position and
    the volume are shared with it under a lock.
    """

    def __init__(self, format: AudioFormat, data: bytes, params: VoiceParams, device=None):
        self.format = format
        self.params = params
        self._device = device
        self._samples = pcm16_to_float32(data, format.channels)
        self._position = 0
        self._lock = threading.Lock()
        self._stream: Optional[sd.OutputStream] = None
        self._finished = threading.Event()

    def _callback(self, outdata: np.ndarray, frames: int, time_info, status) -> None:
        if status:
            logger.warning(f"Output stream status: {status}")

        with self._lock:
            volume = self.params.volume
            total = len(self._samples)
            written = 0
            while written < frames and total:
                chunk = min(frames - written, total - self._position)
                outdata[written:written + chunk] = self._samples[
                    self._position:self._position + chunk
                ] * volume
                written += chunk
                self._position += chunk
                if self._position >= total:
                    if not self.params.loop:
                        break
                    self._position = 0

        if written < frames:
            outdata[written:] = 0
            raise sd.CallbackStop

    def start(self) -> None:
        """Open the output stream and start playback."""
        if self._stream is not None:
            return
        self._finished.clear()
        try:
            self._stream = sd.OutputStream(
                samplerate=self.format.sample_rate,
                channels=self.format.channels,
                dtype="float32",
                device=self._device,
                callback=self._callback,
                finished_callback=self._finished.set,
            )
            self._stream.start()
        except Exception as e:
            self._close_stream()
            raise BackendError(str(e), device=self._device) from e

    def stop(self) -> None:
        """Stop playback and release the stream."""
        if self._stream is None:
            return
        try:
            self._stream.abort()
        except sd.PortAudioError as e:
            logger.warning(f"Error aborting output stream: {e}")
        self._close_stream()
        with self._lock:
            self._position = 0

    def set_volume(self, volume: float) -> None:
        """Set volume (0.0 to 1.0)."""
        with self._lock:
            self.params.volume = volume

    def get_state(self) -> PlaybackState:
        """Get current playback state."""
        if self._stream is None or self._finished.is_set():
            return PlaybackState.STOPPED
        return PlaybackState.PLAYING

    def destroy(self) -> None:
        """Destroy the voice and free resources."""
        self.stop()
        self._samples = self._samples[:0]

    def _close_stream(self) -> None:
        if self._stream is None:
            return
        try:
            self._stream.close()
        except sd.PortAudioError as e:
            logger.warning(f"Error closing output stream: {e}")
        self._stream = None


class SoundDeviceBackend:
    """Audio backend writing to the default (or a chosen) PortAudio output device."""

    def __init__(self, device=None):
        self._device = device
        self._initialized = False

    def initialize(self) -> None:
        """Check that an output device is available."""
        if self._initialized:
            return
        try:
            info = sd.query_devices(self._device, kind="output")
        except Exception as e:
            raise BackendError(f"No usable output device: {e}", device=self._device) from e
        self._initialized = True
        logger.info(f"SoundDeviceBackend initialized on {info['name']}")

    def create_source_voice(
        self, format: AudioFormat, data: bytes, params: VoiceParams
    ) -> SoundDeviceVoice:
        """Create a source voice for playback."""
        if format.bits_per_sample != 16:
            raise BackendError(f"Unsupported sample width: {format.bits_per_sample} bits")
        return SoundDeviceVoice(format, data, params, device=self._device)

    def shutdown(self) -> None:
        """Shutdown the backend."""
        self._initialized = False
        logger.info("SoundDeviceBackend shut down")
