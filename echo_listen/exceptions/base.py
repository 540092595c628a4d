"""Base exception classes for EchoListen."""


class EchoListenException(Exception):
    """Base exception for all EchoListen errors.

    All custom exceptions in the echo_listen package should inherit
    from this base class for consistent error handling.
    """

    pass
