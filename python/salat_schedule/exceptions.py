"""Error kinds raised by the schedule calculator."""


class SalatScheduleError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(SalatScheduleError):
    """A required schedule input is missing."""


class MissingDateError(ConfigurationError):
    def __init__(self, message: str = "date is not set"):
        super().__init__(message)


class MissingLatitudeError(ConfigurationError):
    def __init__(self, message: str = "latitude is not set"):
        super().__init__(message)


class MissingLongitudeError(ConfigurationError):
    def __init__(self, message: str = "longitude is not set"):
        super().__init__(message)


class MissingFajrZenithError(ConfigurationError):
    def __init__(self, message: str = "fajr zenith is not set"):
        super().__init__(message)


class MissingIshaZenithError(ConfigurationError):
    def __init__(self, message: str = "isha zenith is not set"):
        super().__init__(message)


class MissingMazhabError(ConfigurationError):
    def __init__(self, message: str = "mazhab is not set"):
        super().__init__(message)


class DivisionByZeroError(SalatScheduleError, ZeroDivisionError):
    """An angle was divided by zero."""


class MalformedAngleTextError(SalatScheduleError, ValueError):
    """Angle text could not be parsed."""

    def __init__(self, text):
        self.text = text
        super().__init__(f"malformed angle text: {text!r}")


class UnsolvableHourAngleError(SalatScheduleError):
    """The hour-angle equation has no real solution.

    Raised when the acos argument falls outside [-1, 1], which happens near
    the poles when the sun never reaches the requested zenith.
    """

    def __init__(self, argument: float):
        self.argument = argument
        super().__init__(
            f"hour angle has no solution: acos argument {argument:.6f} outside [-1, 1]"
        )
