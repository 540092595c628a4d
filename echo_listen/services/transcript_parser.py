"""Service for reading word-level transcripts produced by a speech engine."""

import json
import logging
from pathlib import Path
from typing import Any

from echo_listen.exceptions import InvalidInputError, TranscriptParseError
from echo_listen.models import WordTiming

logger = logging.getLogger(__name__)


class TranscriptParserService:
    """Turn a saved ASR response into word timings (stateless service).

    Two layouts are understood:

    - a Deepgram-style response, words under
      ``results.channels[0].alternatives[0].words``
    - a bare list of ``{"word", "start", "end", "speaker"}`` objects
      (optionally wrapped as ``{"words": [...]}``)

    Tokens prefer ``punctuated_word`` over ``word`` so the transcript keeps
    its punctuation and casing.
    """

    def parse_file(self, transcript_file: Path) -> list[WordTiming]:
        """Parse a transcript JSON file.

        Args:
            transcript_file: Path to the JSON file

        Returns:
            Word timings in file order

        Raises:
            TranscriptParseError: If the file is missing, not JSON, or in an
                unknown layout
            InvalidInputError: If a word lacks timing information
        """
        try:
            with Path(transcript_file).open("r", encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError as e:
            raise TranscriptParseError(f"Transcript file not found: {transcript_file}") from e
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TranscriptParseError(f"Failed to read transcript file: {e}") from e

        words = self.parse_payload(payload)
        logger.info(f"Parsed {len(words)} words from {Path(transcript_file).name}")
        return words

    def parse_payload(self, payload: Any) -> list[WordTiming]:
        """Parse an already-decoded transcript payload.

        Args:
            payload: Decoded JSON (dict or list)

        Returns:
            Word timings in payload order
        """
        raw_words = self._extract_raw_words(payload)
        return [self._to_word_timing(index, raw) for index, raw in enumerate(raw_words)]

    @staticmethod
    def _extract_raw_words(payload: Any) -> list[Any]:
        """Locate the word list inside a payload."""
        if isinstance(payload, list):
            return payload

        if isinstance(payload, dict):
            if "results" in payload:
                try:
                    words = payload["results"]["channels"][0]["alternatives"][0].get("words", [])
                except (KeyError, IndexError, TypeError, AttributeError) as e:
                    raise TranscriptParseError(f"Malformed ASR response: {e!r}") from e
                if not isinstance(words, list):
                    raise TranscriptParseError("ASR response 'words' is not a list")
                return words
            if isinstance(payload.get("words"), list):
                return payload["words"]

        raise TranscriptParseError("Unrecognized transcript layout (no word list found)")

    @staticmethod
    def _to_word_timing(index: int, raw: Any) -> WordTiming:
        """Convert one raw word object, validating its fields."""
        if not isinstance(raw, dict):
            raise InvalidInputError(f"Word {index} is not an object: {raw!r}")

        token = str(raw.get("punctuated_word") or "").strip() or str(raw.get("word") or "").strip()
        if not token:
            raise InvalidInputError(f"Word {index} has no text")
        if len(token.split()) != 1:
            raise InvalidInputError(f"Word {index} ({token!r}) contains whitespace")

        for name in ("start", "end"):
            if raw.get(name) is None:
                raise InvalidInputError(f"Word {index} ({token!r}) is missing '{name}'")

        try:
            start = float(raw["start"])
            end = float(raw["end"])
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Word {index} ({token!r}) has non-numeric timing") from e

        speaker = raw.get("speaker")
        if speaker is not None:
            try:
                speaker = int(speaker)
            except (TypeError, ValueError):
                logger.warning(f"Ignoring non-integer speaker {speaker!r} on word {index}")
                speaker = None

        return WordTiming(word=str(token), start=start, end=end, speaker=speaker)
