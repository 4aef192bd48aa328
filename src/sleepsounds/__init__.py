"""
sleepsounds - ambient sleep sounds and a model-based bedtime calculator.

This package provides a sound player that loops one of three bundled
ambient sounds, an estimator that asks a pre-trained regression model how
much sleep is needed and derives a bedtime from it, and a headless
controller for the form that ties both together.
"""

from sleepsounds.api.player import SoundPlayer
from sleepsounds.api.sound import Sound, PlaybackHandle
from sleepsounds.core.config import EstimatorConfig, PlayerConfig
from sleepsounds.core.models import BedtimeResult, EstimationInput, SoundOption
from sleepsounds.core.exceptions import (
    SleepSoundsError,
    ResourceError,
    AudioFormatError,
    BackendError,
    EstimationError,
)
from sleepsounds.estimator import BedtimeEstimator, SleepModel
from sleepsounds.ui.form import Alert, SleepForm

__version__ = "0.1.0"

__all__ = [
    "SoundPlayer",
    "Sound",
    "PlaybackHandle",
    "PlayerConfig",
    "EstimatorConfig",
    "SoundOption",
    "EstimationInput",
    "BedtimeResult",
    "SleepSoundsError",
    "ResourceError",
    "AudioFormatError",
    "BackendError",
    "EstimationError",
    "BedtimeEstimator",
    "SleepModel",
    "Alert",
    "SleepForm",
]
