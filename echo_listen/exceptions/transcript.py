"""Transcript and segmentation exceptions."""

from .base import EchoListenException


class InvalidInputError(EchoListenException):
    """Raised when word timings or slicing parameters are malformed."""

    pass


class UnsupportedMethodError(EchoListenException):
    """Raised when an unknown slicing method is requested."""

    pass


class TranscriptParseError(EchoListenException):
    """Raised when a transcript file cannot be read or understood."""

    pass
