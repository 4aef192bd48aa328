"""Audio decoders, looked up by file extension."""

from pathlib import Path
from typing import Dict, Optional
from sleepsounds.core.exceptions import AudioFormatError
from sleepsounds.core.interfaces import IAudioFormat
from sleepsounds.formats.mp3 import mp3_format
from sleepsounds.formats.wav import wav_format
from sleepsounds.utils.log import get_logger

logger = get_logger(__name__)

# Registry of all available formats, keyed by lowercase extension
_format_registry: Dict[str, IAudioFormat] = {}


def register_format(format: IAudioFormat) -> None:
    """
    Register an audio format.

    Args:
        format: Format instance implementing IAudioFormat.
    """
    for ext in format.extensions:
        ext_lower = ext.lower()
        if ext_lower in _format_registry:
            logger.warning(
                f"Format with extension {ext_lower} already registered, "
                f"overwriting with {type(format).__name__}"
            )
        _format_registry[ext_lower] = format
    logger.debug(f"Registered format {type(format).__name__} for extensions: {format.extensions}")


def get_format_for_file(path: str) -> Optional[IAudioFormat]:
    """Return the decoder registered for the file's extension, if any."""
    return _format_registry.get(Path(path).suffix.lower())


def load_audio(path: str):
    """
    Decode an audio file with the decoder matching its extension.

    Args:
        path: Path to audio file.

    Returns:
        SoundData with format and PCM data.

    Raises:
        AudioFormatError: If no decoder handles the extension or decoding fails.
        FileNotFoundError: If file does not exist.
    """
    format = get_format_for_file(path)
    if format is None:
        raise AudioFormatError(
            f"No suitable format handler found for file: {path}. "
            f"Supported extensions: {', '.join(sorted(_format_registry))}"
        )
    return format.load(path)


register_format(wav_format)
register_format(mp3_format)

__all__ = ["load_audio", "get_format_for_file", "register_format", "IAudioFormat"]
