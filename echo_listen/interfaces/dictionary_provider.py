"""Protocol for dictionary lookup providers."""

from typing import Protocol

from echo_listen.models import WordDefinition


class DictionaryProvider(Protocol):
    """A source of definitions for words clicked in a transcript.

    Providers never raise on lookup failures; a miss or an unreachable
    backend both come back as None.
    """

    @property
    def name(self) -> str:
        """Human-readable name for this provider."""
        ...

    def is_available(self) -> bool:
        """Check if this provider is ready to serve lookups."""
        ...

    def lookup(self, word: str) -> WordDefinition | None:
        """Look up a single word.

        Args:
            word: Cleaned, lowercase word.

        Returns:
            Definition data, or None if not found.
        """
        ...
