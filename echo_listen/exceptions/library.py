"""Library and vocabulary related exceptions."""

from .base import EchoListenException


class NotFoundError(EchoListenException):
    """Raised when a saved word or session does not exist."""

    pass


class StorageError(EchoListenException):
    """Raised when the library file cannot be read or written."""

    pass
