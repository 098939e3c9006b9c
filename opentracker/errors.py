class TrackerError(Exception):
    """Base class for tracker errors."""


class TrackerStartupError(TrackerError):
    """The listener could not be bound or started."""
