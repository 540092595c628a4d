"""Custom exceptions for EchoListen."""

from .base import EchoListenException
from .library import NotFoundError, StorageError
from .transcript import InvalidInputError, TranscriptParseError, UnsupportedMethodError

__all__ = [
    "EchoListenException",
    "InvalidInputError",
    "UnsupportedMethodError",
    "TranscriptParseError",
    "NotFoundError",
    "StorageError",
]
