"""Free Dictionary API provider."""

import logging
from urllib.parse import quote

import requests

from echo_listen.models import WordDefinition

logger = logging.getLogger(__name__)


class FreeDictionaryProvider:
    """Online dictionary provider using a dictionaryapi.dev-style endpoint.

    Implements DictionaryProvider protocol.
    """

    MAX_SENSES = 3

    def __init__(
        self,
        api_url: str = "https://api.dictionaryapi.dev/api/v2/entries",
        language: str = "en",
        timeout: float = 10.0,
    ):
        """Initialize with API URL and language.

        Args:
            api_url: Base entries endpoint.
            language: Dictionary language code.
            timeout: Request timeout in seconds.
        """
        self._api_url = api_url.rstrip("/")
        self._language = language
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "Free Dictionary API"

    def is_available(self) -> bool:
        return True

    def lookup(self, word: str) -> WordDefinition | None:
        """Look up a word via the API.

        Args:
            word: Cleaned word to look up.

        Returns:
            Definition with phonetic, or None on any failure.
        """
        url = f"{self._api_url}/{self._language}/{quote(word)}"
        try:
            response = requests.get(url, timeout=self._timeout)

            if response.status_code != 200:
                logger.debug(f"Dictionary lookup for '{word}' returned {response.status_code}")
                return None

            entries = response.json()
            if not isinstance(entries, list) or not entries:
                return None

            return self._parse_entry(word, entries[0])

        except requests.exceptions.Timeout:
            logger.warning(f"Dictionary lookup timed out for '{word}'")
            return None
        except (requests.RequestException, ValueError, KeyError, TypeError, AttributeError):
            logger.debug(f"Dictionary lookup failed for '{word}'", exc_info=True)
            return None

    def _parse_entry(self, word: str, entry: dict) -> WordDefinition | None:
        """Build a WordDefinition from the first API entry."""
        senses = []
        for meaning in entry.get("meanings", []):
            part_of_speech = meaning.get("partOfSpeech", "")
            for definition in meaning.get("definitions", []):
                text = definition.get("definition")
                if text:
                    senses.append(f"({part_of_speech}) {text}" if part_of_speech else text)

        if not senses:
            return None

        phonetic = entry.get("phonetic")
        if not phonetic:
            phonetic = next(
                (p["text"] for p in entry.get("phonetics", []) if p.get("text")),
                None,
            )

        numbered = [f"{i}. {s}" for i, s in enumerate(senses[: self.MAX_SENSES], 1)]
        return WordDefinition(
            word=entry.get("word", word),
            definition="\n".join(numbered),
            phonetic=phonetic,
        )
