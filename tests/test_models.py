"""Tests for data models, configuration and asset resolution."""

import datetime
import pytest
from sleepsounds.core.assets import asset_path, missing_assets, resolve_asset
from sleepsounds.core.config import EstimatorConfig, PlayerConfig
from sleepsounds.core.exceptions import ResourceError
from sleepsounds.core.models import EstimationInput, SoundOption


def test_sound_option_assets():
    """Each option maps to its bundled file name."""
    assert [option.asset_id for option in SoundOption] == ["serene-harmony", "rain", "ocean-waves"]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("rain", SoundOption.RAIN),
        ("RAIN", SoundOption.RAIN),
        ("serene-harmony", SoundOption.SERENE),
        ("Serene-Harmony", SoundOption.SERENE),
        ("ocean", SoundOption.OCEAN),
        (" ocean-waves ", SoundOption.OCEAN),
    ],
)
def test_sound_option_from_name(name, expected):
    assert SoundOption.from_name(name) is expected


def test_sound_option_unknown():
    with pytest.raises(ValueError):
        SoundOption.from_name("whale-song")


def test_estimation_input_wake_seconds():
    inputs = EstimationInput(datetime.time(7, 0), 8.0, 1)
    assert inputs.wake_seconds == 25200
    assert EstimationInput(datetime.time(23, 59, 30), 4, 20).wake_seconds == 86340


@pytest.mark.parametrize("hours", [3.5, 12.5, 7.25, float("nan")])
def test_estimation_input_rejects_sleep_hours(hours):
    with pytest.raises(ValueError):
        EstimationInput(datetime.time(7, 0), hours, 1)


@pytest.mark.parametrize("cups", [0, 21, 2.5, True, float("inf"), float("nan")])
def test_estimation_input_rejects_coffee(cups):
    with pytest.raises(ValueError):
        EstimationInput(datetime.time(7, 0), 8.0, cups)


def test_asset_resolution(tmp_path):
    tmp_path = tmp_path.resolve()
    config = PlayerConfig(assets_dir=tmp_path, extension=".MP3")
    (tmp_path / "rain.mp3").write_bytes(b"")

    assert config.extension == "mp3"
    assert asset_path(SoundOption.OCEAN, config) == tmp_path / "ocean-waves.mp3"
    assert resolve_asset(SoundOption.RAIN, config) == tmp_path / "rain.mp3"
    assert missing_assets(config) == [SoundOption.SERENE, SoundOption.OCEAN]
    with pytest.raises(ResourceError):
        resolve_asset(SoundOption.SERENE, config)


def test_config_from_env(tmp_path, monkeypatch):
    tmp_path = tmp_path.resolve()
    monkeypatch.setenv("SLEEPSOUNDS_ASSETS_DIR", str(tmp_path / "sounds"))
    monkeypatch.setenv("SLEEPSOUNDS_ASSET_EXT", "wav")
    monkeypatch.setenv("SLEEPSOUNDS_MODEL_PATH", str(tmp_path / "m.joblib"))

    player_config = PlayerConfig.from_env(raise_errors=True)
    assert player_config.assets_dir == tmp_path / "sounds"
    assert player_config.extension == "wav"
    assert player_config.raise_errors
    assert EstimatorConfig.from_env().model_path == tmp_path / "m.joblib"


def test_config_overrides_win(tmp_path, monkeypatch):
    tmp_path = tmp_path.resolve()
    monkeypatch.setenv("SLEEPSOUNDS_ASSETS_DIR", "/nowhere")

    assert PlayerConfig.from_env(assets_dir=tmp_path).assets_dir == tmp_path


def test_estimation_input_datetime_wake():
    inputs = EstimationInput(datetime.datetime(2024, 1, 1, 6, 30), 8.0, 1)

    assert inputs.wake_time == datetime.time(6, 30)
    assert inputs.wake_seconds == 23400


def test_estimation_input_rejects_wake():
    with pytest.raises(ValueError):
        EstimationInput("07:00", 8.0, 1)
