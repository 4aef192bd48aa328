"""Tests for the sounddevice voice's render callback (no stream is opened)."""

import struct
import numpy as np
import pytest

try:
    import sounddevice as sd
    from sleepsounds.backends.sounddevice_backend import SoundDeviceVoice, pcm16_to_float32
except OSError as e:  # PortAudio shared library missing
    pytest.skip(f"sounddevice unavailable: {e}", allow_module_level=True)

from sleepsounds.core.models import AudioFormat, PlaybackState, VoiceParams

MONO = AudioFormat(sample_rate=44100, channels=1, bits_per_sample=16)


def pcm(*samples: int) -> bytes:
    return struct.pack(f"<{len(samples)}h", *samples)


def test_pcm16_to_float32():
    """Interleaved samples become (frames, channels) floats."""
    out = pcm16_to_float32(pcm(0, 16384, -32768, 32767), channels=2)

    assert out.shape == (2, 2)
    assert out.dtype == np.float32
    assert out[0].tolist() == [0.0, 0.5]
    assert out[1, 0] == -1.0


def test_callback_loops():
    """A looping voice wraps around to the start of the data."""
    voice = SoundDeviceVoice(MONO, pcm(8192, 16384, 24576), VoiceParams(volume=1.0, loop=True))
    outdata = np.zeros((7, 1), dtype=np.float32)

    voice._callback(outdata, 7, None, None)

    assert outdata[:, 0].tolist() == [0.25, 0.5, 0.75, 0.25, 0.5, 0.75, 0.25]


def test_callback_plays_once():
    """A non-looping voice pads with silence and stops the stream."""
    voice = SoundDeviceVoice(MONO, pcm(16384, 16384), VoiceParams(volume=0.5, loop=False))
    outdata = np.ones((4, 1), dtype=np.float32)

    with pytest.raises(sd.CallbackStop):
        voice._callback(outdata, 4, None, None)

    assert outdata[:, 0].tolist() == [0.25, 0.25, 0.0, 0.0]


def test_voice_not_started_is_stopped():
    voice = SoundDeviceVoice(MONO, pcm(0), VoiceParams())

    assert voice.get_state() == PlaybackState.STOPPED
    voice.stop()
    voice.destroy()
