"""Exception hierarchy for counter and timestamp operations."""


class CounterError(Exception):
    """Base exception for counter errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class MissingReferenceError(CounterError):
    """Raised when moving a start or end point that is not set."""


class TimeOverflowError(CounterError):
    """Raised when timestamp arithmetic leaves the representable range."""


class TimeParseError(CounterError):
    """Raised when a timestamp, duration or clock string cannot be parsed."""


class InvalidDirectionError(CounterError):
    """Raised when a direction name is not recognized."""


# Sanitized user-facing error message constants
ERR_MSG_MISSING_START = "counter has no start to move"
ERR_MSG_MISSING_END = "counter has no end to move"
ERR_MSG_TIME_OVERFLOW = "time could not be added due to an overflow"
ERR_MSG_INVALID_TIMESTAMP = "tried to parse invalid time string"
ERR_MSG_INVALID_DURATION = "tried to parse invalid duration string"
ERR_MSG_INVALID_CLOCK = "tried to parse invalid clock string"
ERR_MSG_INVALID_DIRECTION = "invalid direction"
