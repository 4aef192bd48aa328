"""SoundPlayer - plays one ambient sound at a time."""

import uuid
from typing import Optional
from sleepsounds.api.sound import PlaybackHandle, Sound
from sleepsounds.core.assets import resolve_asset
from sleepsounds.core.config import PlayerConfig
from sleepsounds.core.exceptions import BackendError, ResourceError
from sleepsounds.core.interfaces import IAudioBackend, IVoice
from sleepsounds.core.models import PlaybackState, SoundOption, VoiceParams
from sleepsounds.formats import load_audio
from sleepsounds.utils.log import get_logger
from sleepsounds.utils.validate import validate_volume

logger = get_logger(__name__)


class SoundPlayer:
    """
    Plays bundled ambient sounds, holding at most one active playback.

    Starting a sound always stops the previous one. Missing or undecodable
    assets are logged and leave the player silent; set
    ``PlayerConfig.raise_errors`` to have ``play()`` raise them instead.
    """

    def __init__(
        self, config: Optional[PlayerConfig] = None, backend: Optional[IAudioBackend] = None
    ):
        """
        Initialize SoundPlayer.

        Args:
            config: Player configuration (default: from environment).
            backend: Optional backend implementation (default: SoundDeviceBackend).
        """
        self._config = config if config is not None else PlayerConfig.from_env()
        self._backend = backend
        if self._backend is None:
            # Lazy import to avoid loading PortAudio on import
            from sleepsounds.backends.sounddevice_backend import SoundDeviceBackend
            self._backend = SoundDeviceBackend()

        self._volume = validate_volume(self._config.volume)
        self._handle: Optional[PlaybackHandle] = None
        self._voice: Optional[IVoice] = None
        self._sounds: dict[SoundOption, Sound] = {}

    @property
    def config(self) -> PlayerConfig:
        return self._config

    @property
    def current(self) -> Optional[PlaybackHandle]:
        """The active playback handle, or None."""
        return self._handle

    @property
    def is_playing(self) -> bool:
        """Whether the active playback is still producing sound."""
        if self._voice is None:
            return False
        return self._voice.get_state() == PlaybackState.PLAYING

    @property
    def volume(self) -> float:
        return self._volume

    def load(self, option: SoundOption) -> Sound:
        """
        Decode the asset for ``option``, caching the result.

        Raises:
            ResourceError: If the asset is missing or cannot be decoded.
        """
        sound = self._sounds.get(option)
        if sound is not None:
            return sound

        path = resolve_asset(option, self._config)
        try:
            data = load_audio(str(path))
        except FileNotFoundError as e:
            raise ResourceError(f"Sound asset not found: {path}") from e
        except OSError as e:
            raise ResourceError(f"Cannot read sound asset {path}: {e}") from e

        sound = Sound(data, path, option)
        self._sounds[option] = sound
        return sound

    def play(self, option: SoundOption, loop: bool = True) -> Optional[PlaybackHandle]:
        """
        Stop any current playback and start ``option``.

        Args:
            option: Sound to play.
            loop: Repeat indefinitely (default) or play once.

        Returns:
            The new PlaybackHandle, or None if the sound could not be started.

        Raises:
            ResourceError: Only when ``config.raise_errors`` is set.
        """
        self.stop()

        voice = None
        try:
            sound = self.load(option)
            logger.info(f"Playing sound from {sound.path}")
            self._backend.initialize()
            params = VoiceParams(volume=self._volume, loop=loop)
            voice = self._backend.create_source_voice(
                sound.data.format, sound.data.data, params
            )
            voice.start()
        except (ResourceError, BackendError) as e:
            if voice is not None:
                voice.destroy()
            logger.error(f"Could not play {option.asset_id}: {e}")
            if self._config.raise_errors:
                if isinstance(e, ResourceError):
                    raise
                raise ResourceError(str(e)) from e
            return None

        self._voice = voice
        self._handle = PlaybackHandle(str(uuid.uuid4()), option, loop)
        logger.info(f"{option.asset_id} playing")
        return self._handle

    def stop(self) -> None:
        """Stop the current playback, if any."""
        if self._voice is None:
            return

        handle, voice = self._handle, self._voice
        self._handle = None
        self._voice = None
        try:
            voice.stop()
        finally:
            voice.destroy()
        logger.debug(f"Stopped playback {handle}")

    def set_volume(self, volume: float) -> None:
        """Set volume for the current and subsequent playbacks (clamped to [0, 1])."""
        self._volume = validate_volume(volume)
        if self._voice is not None:
            self._voice.set_volume(self._volume)

    def close(self) -> None:
        """Stop playback and shut the backend down."""
        self.stop()
        self._sounds.clear()
        self._backend.shutdown()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
