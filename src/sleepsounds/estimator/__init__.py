"""Bedtime estimation on top of the pre-trained sleep model."""

from sleepsounds.estimator.bedtime import BedtimeEstimator
from sleepsounds.estimator.model import SleepModel

__all__ = ["BedtimeEstimator", "SleepModel"]
