"""Custom exceptions for dirpick."""


class DirpickError(Exception):
    """Base exception for all dirpick errors.

    All dirpick-specific exceptions inherit from this class, allowing
    callers to catch all dirpick errors with a single except clause.
    """

    pass


class PresentationError(DirpickError):
    """A prompt backend failed or returned no usable answer."""

    def __init__(self, message: str, strategy: str | None = None):
        super().__init__(message)
        self.strategy = strategy


class CapabilityError(DirpickError):
    """A UI capability probe could not complete."""

    pass
