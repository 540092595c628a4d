"""Service for looking up words clicked in a transcript."""

import logging
from dataclasses import replace

from echo_listen.exceptions import InvalidInputError
from echo_listen.interfaces import DictionaryProvider
from echo_listen.models import WordDefinition
from echo_listen.utils import clean_word

logger = logging.getLogger(__name__)


class WordLookupService:
    """Look up transcript tokens through a dictionary provider.

    Results are cached per cleaned word for the lifetime of the service,
    including misses, so repeated clicks do not hit the provider again.
    """

    def __init__(self, provider: DictionaryProvider | None = None):
        """Initialize the lookup service.

        Args:
            provider: Dictionary backend; lookups return None without one
        """
        self.provider = provider
        self._cache: dict[str, WordDefinition | None] = {}

    def lookup(self, token: str, sentence: str | None = None) -> WordDefinition | None:
        """Look up a clicked token.

        Args:
            token: Token as it appears in the transcript (punctuation allowed)
            sentence: Segment text the token was clicked in, kept as example

        Returns:
            Definition for the cleaned word, or None if not found

        Raises:
            InvalidInputError: If nothing is left after cleaning the token
        """
        word = clean_word(token)
        if not word:
            raise InvalidInputError(f"Nothing to look up in token {token!r}")

        if word not in self._cache:
            self._cache[word] = self._fetch(word)

        result = self._cache[word]
        if result is None:
            return None
        return replace(result, example=sentence) if sentence else result

    def is_cached(self, token: str) -> bool:
        """Check if a token's cleaned word has already been looked up."""
        return clean_word(token) in self._cache

    def clear_cache(self) -> None:
        self._cache.clear()

    def _fetch(self, word: str) -> WordDefinition | None:
        if self.provider is None or not self.provider.is_available():
            return None
        result = self.provider.lookup(word)
        if result is None:
            logger.debug(f"No definition found for '{word}' via {self.provider.name}")
        return result
