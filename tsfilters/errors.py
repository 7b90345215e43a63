"""Exception hierarchy for the time-series filter library."""


class TsfError(Exception):
    """Base class for every error raised by the library."""

    default_message = "Unknown"

    def __init__(self, message=None):
        self.message = self.default_message if message is None else message
        super().__init__(self.message)

    def __str__(self):
        return self.message


class TsfIoError(TsfError):
    """Raised when reading or writing a backing store fails."""

    default_message = "I/O Exception"


class MethodNotValidError(TsfError):
    """Raised when an operation is not valid for the object it is called on."""

    default_message = "Method not Valid"


class IncompatibleComponentError(TsfError):
    """Raised when two components cannot be connected to each other."""

    default_message = "Component not compatible"


class DimensionMismatchError(TsfError):
    """Raised when a value is converted between units of different dimension."""

    default_message = "Units are not dimensionally consistent"