"""Exception classes for sleepsounds."""

ESTIMATION_FAILED_MESSAGE = "sorry, there was a problem calculating bedtime"


class SleepSoundsError(Exception):
    """Base exception for sleepsounds errors."""
    pass


class ResourceError(SleepSoundsError):
    """Raised when a bundled audio asset is missing or cannot be read."""
    pass


class AudioFormatError(ResourceError):
    """Raised when audio format is not supported or cannot be decoded."""
    pass


class BackendError(SleepSoundsError):
    """Raised when the audio output device fails."""

    def __init__(self, message: str, device=None):
        self.device = device
        self.message = message
        if device is not None:
            super().__init__(f"Backend error (device: {device}): {message}")
        else:
            super().__init__(f"Backend error: {message}")


class ModelError(SleepSoundsError):
    """Raised when the regression model cannot produce a prediction."""
    pass


class ModelLoadError(ModelError):
    """Raised when the regression model artifact cannot be loaded."""
    pass


class EstimationError(SleepSoundsError):
    """
    Raised when a bedtime cannot be estimated.

    The message is always the fixed, user-facing text; the underlying
    failure is available as ``__cause__``.
    """

    def __init__(self, message: str = ESTIMATION_FAILED_MESSAGE):
        self.message = message
        super().__init__(message)
