"""Progress callback protocol for import progress reporting."""

from typing import Protocol


class ProgressCallback(Protocol):
    """Interface for reporting progress through the import stages.

    Lets the import pipeline report parse/slice/save steps without knowing
    whether they end up on a console or are discarded.
    """

    def on_start(self, total: int, description: str) -> None:
        """Called when an operation starts.

        Args:
            total: Total number of steps
            description: Description of the operation
        """
        ...

    def on_progress(self, current: int, item_description: str) -> None:
        """Called when a step finishes.

        Args:
            current: Current step number (1-based)
            item_description: Description of the step
        """
        ...

    def on_complete(self) -> None:
        """Called when the operation completes."""
        ...

    def on_error(self, item_description: str, error_message: str) -> None:
        """Called when a step fails.

        Args:
            item_description: Description of the failed step
            error_message: Error message
        """
        ...
