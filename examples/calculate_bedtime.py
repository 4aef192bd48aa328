"""Example: calculate the ideal bedtime from the command line."""

import datetime
import logging
import sys

from sleepsounds import BedtimeEstimator, EstimatorConfig
from sleepsounds.ui.form import BEDTIME_TITLE, ERROR_TITLE, format_short_time
from sleepsounds.utils.log import set_level

if __name__ == "__main__":
    args = [arg for arg in sys.argv[1:] if arg != "-v"]
    if "-v" in sys.argv:
        set_level(logging.INFO)

    if len(args) < 3:
        print("Usage: python calculate_bedtime.py [-v] <HH:MM> <sleep_hours> <coffee_cups> [model_path]")
        sys.exit(1)

    try:
        wake_time = datetime.datetime.strptime(args[0], "%H:%M").time()
        sleep_hours = float(args[1])
        coffee_cups = int(args[2])
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    overrides = {}
    if len(args) > 3:
        overrides["model_path"] = args[3]
    estimator = BedtimeEstimator(EstimatorConfig.from_env(**overrides))

    result = estimator.calculate(wake_time, sleep_hours, coffee_cups)
    if result.ok:
        print(f"{BEDTIME_TITLE} {format_short_time(result.bedtime)}")
    else:
        print(f"{ERROR_TITLE}: {result.error.message}")
        sys.exit(1)
