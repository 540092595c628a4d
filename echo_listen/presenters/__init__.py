"""Console and silent presenters used by the CLI and the test suite."""

from .console_presenter import ConsolePresenter, ConsoleProgressCallback
from .null_presenter import NullPresenter, NullProgressCallback

__all__ = [
    "ConsolePresenter",
    "ConsoleProgressCallback",
    "NullPresenter",
    "NullProgressCallback",
]
