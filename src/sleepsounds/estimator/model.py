"""Wrapper around the pre-trained bedtime regression model."""

from pathlib import Path
from typing import Dict, Union

import joblib
import numpy as np

from sleepsounds.core.exceptions import ModelError, ModelLoadError
from sleepsounds.core.models import SleepPrediction
from sleepsounds.utils.log import get_logger

logger = get_logger(__name__)

# Feature order the model was trained with
FEATURES = ("wake", "estimatedSleep", "coffee")

_cache: Dict[Path, object] = {}


def load_regressor(path: Union[str, Path], use_cache: bool = True):
    """
    Load a joblib-persisted regressor.

    Raises:
        ModelLoadError: If the file is missing, cannot be unpickled, or the
            model was fitted on a different number of features.
    """
    path = Path(path)
    if use_cache and path in _cache:
        return _cache[path]

    if not path.is_file():
        raise ModelLoadError(f"Model file not found: {path}")
    try:
        regressor = joblib.load(path)
    except Exception as e:
        raise ModelLoadError(f"Could not load model {path}: {e}") from e
    if not hasattr(regressor, "predict"):
        raise ModelLoadError(f"Object in {path} has no predict(): {type(regressor).__name__}")
    n_features = getattr(regressor, "n_features_in_", None)
    if n_features is not None and n_features != len(FEATURES):
        raise ModelLoadError(
            f"Model {path} expects {n_features} features, not {len(FEATURES)} "
            f"({', '.join(FEATURES)})"
        )

    logger.info(f"Loaded model {type(regressor).__name__} from {path}")
    if use_cache:
        _cache[path] = regressor
    return regressor


def clear_cache() -> None:
    """Forget every loaded model."""
    _cache.clear()


class SleepModel:
    """Predicts the sleep actually needed from wake time, desired sleep and coffee."""

    def __init__(self, regressor):
        self._regressor = regressor

    @classmethod
    def from_file(cls, path: Union[str, Path], use_cache: bool = True) -> "SleepModel":
        return cls(load_regressor(path, use_cache=use_cache))

    def predict(self, wake: float, estimated_sleep: float, coffee: float) -> SleepPrediction:
        """
        Run one forward pass.

        Args:
            wake: Wake time in seconds since midnight.
            estimated_sleep: Desired sleep in hours.
            coffee: Daily coffee intake in cups.

        Raises:
            ModelError: If the regressor fails or returns no finite value.
        """
        x = np.array([[wake, estimated_sleep, coffee]], dtype=np.float64)
        try:
            y = np.asarray(self._regressor.predict(x), dtype=np.float64).ravel()
        except Exception as e:
            inputs = ", ".join(f"{name}={value:g}" for name, value in zip(FEATURES, x[0]))
            raise ModelError(f"Prediction failed for {inputs}: {e}") from e

        if y.size == 0 or not np.isfinite(y[0]):
            raise ModelError(f"Model returned no usable prediction: {y!r}")
        return SleepPrediction(actual_sleep=float(y[0]))
