"""Presenter protocol for output abstraction."""

from typing import Protocol

from echo_listen.models import AudioSession, DialogueBlock, ImportResult, VocabularyFolder


class PresenterProtocol(Protocol):
    """Where user-facing output goes.

    Services and the import pipeline only talk to this protocol; the CLI
    passes a console presenter and tests pass a silent one.
    """

    def show_info(self, message: str) -> None:
        """Display a plain message."""
        ...

    def show_success(self, message: str) -> None:
        """Display a message about a completed action."""
        ...

    def show_warning(self, message: str) -> None:
        """Display a recoverable problem."""
        ...

    def show_error(self, message: str) -> None:
        """Display a failure."""
        ...

    def show_import_result(self, result: ImportResult) -> None:
        """Display the outcome of importing a transcript.

        Args:
            result: Import result, successful or not
        """
        ...

    def show_transcript(self, session: AudioSession, blocks: list[DialogueBlock]) -> None:
        """Display a session transcript grouped into dialogue blocks.

        Args:
            session: The session being shown
            blocks: Dialogue blocks computed from the session segments
        """
        ...

    def show_vocabulary(self, folders: list[VocabularyFolder], due_count: int) -> None:
        """Display saved vocabulary grouped by session.

        Args:
            folders: Saved words grouped per session
            due_count: Number of words currently due for review
        """
        ...
