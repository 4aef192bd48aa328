"""Resolution of sound options to bundled audio files."""

from pathlib import Path
from sleepsounds.core.config import PlayerConfig
from sleepsounds.core.exceptions import ResourceError
from sleepsounds.core.models import SoundOption


def asset_path(option: SoundOption, config: PlayerConfig) -> Path:
    """Return where the audio file for ``option`` is expected."""
    return config.assets_dir / f"{option.asset_id}.{config.extension}"


def resolve_asset(option: SoundOption, config: PlayerConfig) -> Path:
    """
    Locate the audio file for ``option``.

    Raises:
        ResourceError: If the file does not exist.
    """
    path = asset_path(option, config)
    if not path.is_file():
        raise ResourceError(f"Sound asset not found: {path}")
    return path


def missing_assets(config: PlayerConfig) -> list[SoundOption]:
    """List the options whose audio file is absent."""
    return [option for option in SoundOption if not asset_path(option, config).is_file()]
