"""RIFF WAV file parser."""

import struct
from pathlib import Path
from typing import BinaryIO
from sleepsounds.core.exceptions import AudioFormatError
from sleepsounds.core.models import AudioFormat, SoundData
from sleepsounds.utils.log import get_logger

logger = get_logger(__name__)


class WavFormat:
    """WAV format parser implementing IAudioFormat."""

    @property
    def extensions(self) -> tuple[str, ...]:
        """Supported file extensions."""
        return (".wav", ".wave")

    def load(self, path: str) -> SoundData:
        """
        Load a WAV file and return SoundData.

        Supports 16-bit PCM, mono or stereo, at any sample rate.

        Raises:
            AudioFormatError: If format is not supported.
            FileNotFoundError: If file does not exist.
        """
        path_obj = Path(path)
        if not path_obj.exists():
            raise FileNotFoundError(f"WAV file not found: {path}")

        with open(path_obj, "rb") as f:
            return _parse_wav(f)


def _read_u32(f: BinaryIO) -> int:
    raw = f.read(4)
    if len(raw) < 4:
        raise AudioFormatError("Truncated WAV file")
    return struct.unpack("<I", raw)[0]


def _parse_wav(f: BinaryIO) -> SoundData:
    """Parse WAV file from file handle."""
    if f.read(4) != b"RIFF":
        raise AudioFormatError("Not a RIFF file")

    _read_u32(f)  # RIFF size, unreliable in the wild

    if f.read(4) != b"WAVE":
        raise AudioFormatError("Not a WAVE file")

    fmt_data = None
    data_chunk = None

    while True:
        chunk_id = f.read(4)
        if len(chunk_id) < 4:
            break

        chunk_size = _read_u32(f)

        if chunk_id == b"fmt ":
            fmt_data = f.read(chunk_size)
        elif chunk_id == b"data":
            data_chunk = f.read(chunk_size)
            break
        else:
            # Chunks are word aligned
            f.seek(chunk_size + (chunk_size & 1), 1)

    if fmt_data is None:
        raise AudioFormatError("Missing fmt chunk")

    if data_chunk is None:
        raise AudioFormatError("Missing data chunk")

    if len(fmt_data) < 16:
        raise AudioFormatError("Invalid fmt chunk size")

    audio_format, num_channels, sample_rate, _byte_rate, _block_align, bits_per_sample = (
        struct.unpack("<HHIIHH", fmt_data[:16])
    )

    if audio_format != 1:  # PCM
        raise AudioFormatError(
            f"Unsupported audio format: {audio_format} (only PCM=1 is supported)"
        )

    if bits_per_sample != 16:
        raise AudioFormatError(
            f"Unsupported bits per sample: {bits_per_sample} (only 16-bit is supported)"
        )

    if num_channels not in (1, 2):
        raise AudioFormatError(
            f"Unsupported channel count: {num_channels} (only mono=1 or stereo=2)"
        )

    if sample_rate == 0:
        raise AudioFormatError("Invalid sample rate: 0 Hz")

    format = AudioFormat(
        sample_rate=sample_rate,
        channels=num_channels,
        bits_per_sample=bits_per_sample,
    )

    # Drop a trailing partial frame
    usable = len(data_chunk) - len(data_chunk) % format.frame_size
    data_chunk = data_chunk[:usable]
    duration_seconds = (usable // format.frame_size) / sample_rate

    logger.info(
        f"Loaded WAV: {num_channels}ch, {sample_rate}Hz, {bits_per_sample}bit, "
        f"{duration_seconds:.2f}s"
    )

    return SoundData(
        format=format,
        data=data_chunk,
        duration_seconds=duration_seconds,
    )


# Format instance for registration
wav_format = WavFormat()
