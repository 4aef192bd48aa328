"""Headless controller for the single-screen sleep form."""

import datetime
from dataclasses import dataclass
from typing import Optional
from sleepsounds.api.player import SoundPlayer
from sleepsounds.api.sound import PlaybackHandle
from sleepsounds.core.models import SoundOption
from sleepsounds.estimator.bedtime import BedtimeEstimator
from sleepsounds.utils.log import get_logger
from sleepsounds.utils.validate import (
    COFFEE_CUPS_MAX,
    COFFEE_CUPS_MIN,
    SLEEP_HOURS_MAX,
    SLEEP_HOURS_MIN,
    SLEEP_HOURS_STEP,
    validate_coffee_cups,
    validate_sleep_hours,
)

logger = get_logger(__name__)

TITLE = "Sleep Sounds"
WAKE_HEADING = "When do you want to wake up"
SLEEP_HEADING = "Desired amount of sleep"
COFFEE_HEADING = "Daily coffee intake"
SOUND_HEADING = "Select sleep sound"

BEDTIME_TITLE = "Your ideal bedtime is..."
ERROR_TITLE = "error"

DEFAULT_WAKE_TIME = datetime.time(7, 0)
DEFAULT_SLEEP_HOURS = 8.0
DEFAULT_COFFEE_CUPS = 1


def format_short_time(value: datetime.datetime) -> str:
    """Format a time of day the short way, e.g. "22:15"."""
    return value.strftime("%H:%M")


def format_hours(hours: float) -> str:
    """Format a sleep amount without a trailing ".0"."""
    return f"{hours:g}"


@dataclass(frozen=True)
class Alert:
    """Modal message shown after "Calculate"."""

    title: str
    message: str


class SleepForm:
    """
    State and actions of the sleep form.

    The sound player and the estimator are injected; the form owns neither.
    """

    def __init__(self, player: SoundPlayer, estimator: BedtimeEstimator):
        self._player = player
        self._estimator = estimator
        self.wake_time = DEFAULT_WAKE_TIME
        self._sleep_hours = DEFAULT_SLEEP_HOURS
        self._coffee_cups = DEFAULT_COFFEE_CUPS
        self.selected_sound = SoundOption.SERENE
        self.alert: Optional[Alert] = None

    @property
    def sleep_hours(self) -> float:
        return self._sleep_hours

    @sleep_hours.setter
    def sleep_hours(self, value: float) -> None:
        self._sleep_hours = validate_sleep_hours(value)

    @property
    def coffee_cups(self) -> int:
        return self._coffee_cups

    @coffee_cups.setter
    def coffee_cups(self, value: int) -> None:
        self._coffee_cups = validate_coffee_cups(value)

    @property
    def showing_alert(self) -> bool:
        return self.alert is not None

    # Steppers stop at their bounds

    def increment_sleep(self) -> None:
        self._sleep_hours = min(self._sleep_hours + SLEEP_HOURS_STEP, SLEEP_HOURS_MAX)

    def decrement_sleep(self) -> None:
        self._sleep_hours = max(self._sleep_hours - SLEEP_HOURS_STEP, SLEEP_HOURS_MIN)

    def increment_coffee(self) -> None:
        self._coffee_cups = min(self._coffee_cups + 1, COFFEE_CUPS_MAX)

    def decrement_coffee(self) -> None:
        self._coffee_cups = max(self._coffee_cups - 1, COFFEE_CUPS_MIN)

    @property
    def sleep_label(self) -> str:
        return f"{format_hours(self._sleep_hours)} hours"

    @property
    def coffee_label(self) -> str:
        return "1 cup" if self._coffee_cups == 1 else f"{self._coffee_cups} cups"

    @staticmethod
    def sound_names() -> list[str]:
        """Picker entries, in order."""
        return [option.display_name for option in SoundOption]

    def select_sound(self, name) -> None:
        """Select a sound by SoundOption, display name or asset identifier."""
        if isinstance(name, SoundOption):
            self.selected_sound = name
        else:
            self.selected_sound = SoundOption.from_name(name)

    def play_sound(self) -> Optional[PlaybackHandle]:
        return self._player.play(self.selected_sound)

    def stop_sound(self) -> None:
        self._player.stop()

    def calculate(self, on: Optional[datetime.date] = None) -> Alert:
        """Estimate the bedtime and raise the alert describing the outcome."""
        result = self._estimator.calculate(
            self.wake_time, self._sleep_hours, self._coffee_cups, on=on
        )
        if result.ok:
            self.alert = Alert(BEDTIME_TITLE, format_short_time(result.bedtime))
        else:
            self.alert = Alert(ERROR_TITLE, result.error.message)
        logger.info(f"Calculate: {self.alert.title} {self.alert.message}")
        return self.alert

    def dismiss_alert(self) -> None:
        self.alert = None
