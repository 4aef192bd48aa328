"""BedtimeEstimator - derives a bedtime from the sleep model."""

import datetime
import math
from typing import Callable, Optional
from sleepsounds.core.config import EstimatorConfig
from sleepsounds.core.exceptions import EstimationError
from sleepsounds.core.interfaces import IRegressionModel
from sleepsounds.core.models import BedtimeResult, EstimationInput
from sleepsounds.estimator.model import SleepModel
from sleepsounds.utils.log import get_logger
from sleepsounds.utils.validate import validate_wake_time

logger = get_logger(__name__)


class BedtimeEstimator:
    """
    Estimates an ideal bedtime.

    bedtime = wake time - predicted sleep duration. Every failure surfaces
    as an EstimationError carrying the fixed user-facing message.
    """

    def __init__(
        self,
        config: Optional[EstimatorConfig] = None,
        model: Optional[IRegressionModel] = None,
        model_factory: Optional[Callable[[], IRegressionModel]] = None,
    ):
        """
        Initialize BedtimeEstimator.

        Args:
            config: Estimator configuration (default: from environment).
            model: Ready model to use for every call.
            model_factory: Callable building the model on each call
                (default: load ``config.model_path`` with joblib).
        """
        self._config = config if config is not None else EstimatorConfig.from_env()
        if model is not None:
            self._model_factory = lambda: model
        elif model_factory is not None:
            self._model_factory = model_factory
        else:
            self._model_factory = lambda: SleepModel.from_file(self._config.model_path)

    def estimate(self, wake_time: datetime.time, sleep_hours: float, coffee_cups: int) -> float:
        """
        Predict the sleep duration needed, in seconds.

        Raises:
            EstimationError: If the inputs are invalid or the model fails.
        """
        try:
            inputs = EstimationInput(wake_time, sleep_hours, coffee_cups)
            model = self._model_factory()
            prediction = model.predict(
                float(inputs.wake_seconds), float(inputs.sleep_hours), float(inputs.coffee_cups)
            )
            actual_sleep = float(prediction.actual_sleep)
        except Exception as e:
            logger.error(f"Bedtime estimation failed: {e}")
            raise EstimationError() from e

        if not math.isfinite(actual_sleep):
            logger.error(f"Model predicted a non-finite sleep duration: {actual_sleep}")
            raise EstimationError()

        logger.debug(
            f"Predicted {actual_sleep:.0f}s of sleep for wake={inputs.wake_seconds}s, "
            f"sleep={inputs.sleep_hours}h, coffee={inputs.coffee_cups}"
        )
        return actual_sleep

    def _bedtime(self, wake_time, sleep_hours, coffee_cups, on):
        predicted = self.estimate(wake_time, sleep_hours, coffee_cups)
        if on is None:
            # A full datetime wakes on its own day
            if isinstance(wake_time, datetime.datetime):
                on = wake_time.date()
            else:
                on = datetime.date.today()
        wake = datetime.datetime.combine(on, validate_wake_time(wake_time))
        try:
            return wake - datetime.timedelta(seconds=predicted), predicted
        except OverflowError as e:
            logger.error(f"Predicted sleep duration out of range: {predicted}")
            raise EstimationError() from e

    def bedtime(
        self,
        wake_time: datetime.time,
        sleep_hours: float,
        coffee_cups: int,
        on: Optional[datetime.date] = None,
    ) -> datetime.datetime:
        """
        Compute the bedtime for waking at ``wake_time`` on day ``on``.

        ``on`` defaults to the date of ``wake_time`` when it is a datetime,
        otherwise to today.

        The result falls on the previous day when the predicted sleep
        reaches back past midnight.

        Raises:
            EstimationError: If the duration cannot be estimated.
        """
        return self._bedtime(wake_time, sleep_hours, coffee_cups, on)[0]

    def calculate(
        self,
        wake_time: datetime.time,
        sleep_hours: float,
        coffee_cups: int,
        on: Optional[datetime.date] = None,
    ) -> BedtimeResult:
        """Like bedtime(), but reports failure in the result instead of raising."""
        try:
            bedtime, predicted = self._bedtime(wake_time, sleep_hours, coffee_cups, on)
        except EstimationError as e:
            return BedtimeResult.failure(e)
        return BedtimeResult.success(bedtime, predicted)
