"""Exception types raised by StrKit."""


class StrKitError(Exception):
    """Base class for all StrKit errors."""


class InvalidArgumentError(StrKitError, TypeError):
    """Raised when an argument has a shape the operation does not accept."""
