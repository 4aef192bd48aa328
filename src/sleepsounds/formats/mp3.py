"""MP3 decoder (pydub + ffmpeg)."""

from pathlib import Path
from sleepsounds.core.exceptions import AudioFormatError
from sleepsounds.core.models import AudioFormat, SoundData
from sleepsounds.utils.log import get_logger

logger = get_logger(__name__)

try:
    from pydub import AudioSegment
    PYDUB_AVAILABLE = True
    PYDUB_ERROR = None
except ImportError as e:
    PYDUB_AVAILABLE = False
    PYDUB_ERROR = str(e)


class Mp3Format:
    """MP3 format decoder implementing IAudioFormat."""

    @property
    def extensions(self) -> tuple[str, ...]:
        """Supported file extensions."""
        return (".mp3",)

    def load(self, path: str) -> SoundData:
        """
        Decode an MP3 file to 16-bit PCM SoundData.

        Channel layouts beyond stereo are downmixed to stereo; the source
        sample rate is kept.

        Raises:
            AudioFormatError: If the file cannot be decoded, or pydub/ffmpeg
                are unavailable.
            FileNotFoundError: If file does not exist.
        """
        path_obj = Path(path)
        if not path_obj.exists():
            raise FileNotFoundError(f"MP3 file not found: {path}")

        if not PYDUB_AVAILABLE:
            message = "pydub is required for MP3 support."
            if PYDUB_ERROR and "audioop" in PYDUB_ERROR.lower():
                # audioop left the standard library in Python 3.13
                message += " Install audioop-lts: pip install audioop-lts"
            elif PYDUB_ERROR:
                message += f" Import error: {PYDUB_ERROR}"
            raise AudioFormatError(message)

        try:
            audio = AudioSegment.from_mp3(str(path_obj))
        except FileNotFoundError as e:
            # The file exists, so this is pydub failing to spawn ffmpeg
            raise AudioFormatError(
                "ffmpeg is required for MP3 decoding with pydub; "
                "make sure 'ffmpeg' and 'ffprobe' are on PATH"
            ) from e
        except Exception as e:
            raise AudioFormatError(f"Failed to decode MP3 file {path}: {e}") from e

        if audio.sample_width != 2:
            audio = audio.set_sample_width(2)

        if audio.channels not in (1, 2):
            logger.warning(f"MP3 has {audio.channels} channels, converting to stereo")
            audio = audio.set_channels(2)

        format = AudioFormat(
            sample_rate=audio.frame_rate,
            channels=audio.channels,
            bits_per_sample=audio.sample_width * 8,
        )
        duration_seconds = len(audio) / 1000.0  # pydub lengths are in milliseconds

        logger.info(
            f"Loaded MP3: {format.channels}ch, {format.sample_rate}Hz, "
            f"{format.bits_per_sample}bit, {duration_seconds:.2f}s"
        )

        return SoundData(
            format=format,
            data=audio.raw_data,
            duration_seconds=duration_seconds,
        )


# Format instance for registration
mp3_format = Mp3Format()
