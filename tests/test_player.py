"""Tests for SoundPlayer (using NullBackend)."""

import logging
import struct
import time
import pytest
from sleepsounds.api.player import SoundPlayer
from sleepsounds.backends.null_backend import NullBackend
from sleepsounds.core.config import PlayerConfig
from sleepsounds.core.exceptions import BackendError, ResourceError
from sleepsounds.core.models import SoundOption


def write_wav(path, num_frames: int = 4410, sample_rate: int = 44100) -> None:
    """Write a silent 16-bit stereo WAV file."""
    data_size = num_frames * 4
    header = b"RIFF" + struct.pack("<I", 36 + data_size) + b"WAVE"
    fmt = b"fmt " + struct.pack("<IHHIIHH", 16, 1, 2, sample_rate, sample_rate * 4, 4, 16)
    path.write_bytes(header + fmt + b"data" + struct.pack("<I", data_size) + b"\x00" * data_size)


def create_player(tmp_path, options=tuple(SoundOption), **config) -> tuple[SoundPlayer, NullBackend]:
    """Create a player over a temporary asset directory holding WAV files."""
    for option in options:
        write_wav(tmp_path / f"{option.asset_id}.wav")
    backend = NullBackend()
    player = SoundPlayer(PlayerConfig(assets_dir=tmp_path, extension="wav", **config), backend=backend)
    return player, backend


def live_voices(backend: NullBackend):
    return [voice for voice in backend.voices.values() if not voice.destroyed]


def test_play_stop(tmp_path):
    """Test basic play and stop."""
    player, backend = create_player(tmp_path)

    handle = player.play(SoundOption.RAIN)

    assert handle is not None
    assert handle.option is SoundOption.RAIN
    assert handle.loop
    assert player.current == handle
    assert player.is_playing

    player.stop()
    assert player.current is None
    assert not player.is_playing
    assert live_voices(backend) == []


def test_play_loops_by_default(tmp_path):
    """Playback repeats indefinitely unless asked to play once."""
    player, backend = create_player(tmp_path)

    player.play(SoundOption.OCEAN)

    (voice,) = live_voices(backend)
    assert voice.params.loop


def test_play_once(tmp_path):
    """A non-looping sound stops by itself after one pass."""
    player, backend = create_player(tmp_path)
    write_wav(tmp_path / "rain.wav", num_frames=1)

    handle = player.play(SoundOption.RAIN, loop=False)

    assert handle is not None
    assert not handle.loop
    (voice,) = live_voices(backend)
    assert not voice.params.loop
    time.sleep(0.01)
    assert not player.is_playing


def test_play_replaces_previous(tmp_path):
    """play(A) then play(B) leaves exactly one active handle, playing B."""
    player, backend = create_player(tmp_path)

    first = player.play(SoundOption.SERENE)
    first_voice = backend.voices["null_0"]
    second = player.play(SoundOption.RAIN)

    assert second is not None
    assert second.id != first.id
    assert player.current == second
    assert player.current.option is SoundOption.RAIN
    assert first_voice.destroyed
    assert len(live_voices(backend)) == 1


def test_stop_is_idempotent(tmp_path):
    """stop() with nothing playing is a no-op."""
    player, backend = create_player(tmp_path)

    player.stop()
    player.play(SoundOption.RAIN)
    player.stop()
    player.stop()

    assert player.current is None
    assert live_voices(backend) == []


def test_missing_asset_is_logged(tmp_path, caplog):
    """A missing asset leaves no handle and raises nothing."""
    player, backend = create_player(tmp_path, options=(SoundOption.SERENE,))
    player.play(SoundOption.SERENE)

    with caplog.at_level(logging.ERROR):
        handle = player.play(SoundOption.OCEAN)

    assert handle is None
    assert player.current is None
    assert live_voices(backend) == []
    assert "ocean-waves" in caplog.text


def test_undecodable_asset_is_logged(tmp_path):
    """A corrupt asset behaves like a missing one."""
    player, backend = create_player(tmp_path)
    (tmp_path / "rain.wav").write_bytes(b"not a wav file")

    assert player.play(SoundOption.RAIN) is None
    assert player.current is None


def test_missing_asset_raises_when_configured(tmp_path):
    """raise_errors surfaces resource errors to the caller."""
    player, backend = create_player(tmp_path, options=(), raise_errors=True)

    with pytest.raises(ResourceError):
        player.play(SoundOption.RAIN)
    assert player.current is None


class FailingBackend(NullBackend):
    """Backend whose voices cannot start."""

    def create_source_voice(self, format, data, params):
        voice = super().create_source_voice(format, data, params)

        def fail():
            raise BackendError("device unavailable")

        voice.start = fail
        return voice


def test_backend_failure_leaves_no_handle(tmp_path):
    """A voice that fails to start is destroyed and not tracked."""
    write_wav(tmp_path / "rain.wav")
    backend = FailingBackend()
    player = SoundPlayer(PlayerConfig(assets_dir=tmp_path, extension="wav"), backend=backend)

    assert player.play(SoundOption.RAIN) is None
    assert player.current is None
    assert all(voice.destroyed for voice in backend.voices.values())


def test_sounds_are_decoded_once(tmp_path):
    """Replaying a sound reuses the decoded asset."""
    player, backend = create_player(tmp_path)

    first = player.load(SoundOption.RAIN)
    player.play(SoundOption.RAIN)

    assert player.load(SoundOption.RAIN) is first
    assert first.duration == pytest.approx(0.1)


def test_set_volume(tmp_path):
    """Volume is clamped and applies to the current and later voices."""
    player, backend = create_player(tmp_path)
    player.play(SoundOption.RAIN)

    player.set_volume(2.0)
    assert player.volume == 1.0
    player.set_volume(0.25)
    assert backend.voices["null_0"].params.volume == 0.25

    player.play(SoundOption.OCEAN)
    assert backend.voices["null_1"].params.volume == 0.25


def test_context_manager(tmp_path):
    """Leaving the context stops playback and shuts the backend down."""
    player, backend = create_player(tmp_path)

    with player:
        player.play(SoundOption.SERENE)
        assert backend.initialized

    assert player.current is None
    assert not backend.initialized


def test_corrupt_mp3_is_logged(tmp_path, caplog):
    """The default mp3 assets go through the MP3 decoder; bad data is only logged."""
    (tmp_path / "rain.mp3").write_bytes(b"\x00" * 512)
    backend = NullBackend()
    player = SoundPlayer(PlayerConfig(assets_dir=tmp_path), backend=backend)

    with caplog.at_level(logging.ERROR):
        handle = player.play(SoundOption.RAIN)

    assert player.config.extension == "mp3"
    assert handle is None
    assert player.current is None
    assert backend.voices == {}
    assert "Could not play rain" in caplog.text
