"""Service for the user's saved vocabulary set."""

import logging
from collections.abc import Sequence
from dataclasses import fields, replace

from echo_listen.exceptions import InvalidInputError, NotFoundError
from echo_listen.models import (
    AudioSession,
    SavedWord,
    VocabularyFolder,
    VocabularyStats,
    WordDefinition,
)
from echo_listen.services.review_scheduler import ReviewScheduler
from echo_listen.utils import now_ms, word_key

logger = logging.getLogger(__name__)

# Fields callers may change through update(); "word" is the key
_UPDATABLE_FIELDS = {f.name for f in fields(SavedWord)} - {"word"}


class VocabularyService:
    """Toggle, update and summarize saved words (stateless service).

    Words are keyed case-insensitively. Every operation returns a new list
    and leaves its input untouched, so callers can persist the result as
    one unit.
    """

    def __init__(self, scheduler: ReviewScheduler):
        """Initialize the vocabulary service.

        Args:
            scheduler: Scheduler providing the initial review state
        """
        self.scheduler = scheduler

    def toggle(
        self,
        saved_words: Sequence[SavedWord],
        word: str,
        session_id: str,
        definition: WordDefinition | None = None,
        now: int | None = None,
    ) -> list[SavedWord]:
        """Save a word, or remove it if it is already saved.

        Removal matches case-insensitively regardless of stored casing or
        session. A new entry keeps the original casing.

        Args:
            saved_words: Current saved vocabulary
            word: Word to toggle
            session_id: Session the word was found in
            definition: Optional lookup result to copy onto a new entry
            now: Current time in epoch ms

        Returns:
            The new saved-word list
        """
        key = word_key(word)
        if any(w.key == key for w in saved_words):
            logger.debug(f"Removing saved word '{word}'")
            return [w for w in saved_words if w.key != key]

        now = now_ms() if now is None else now
        stage, next_review = self.scheduler.initial_state(now)
        new_word = SavedWord(
            word=word,
            session_id=session_id,
            added_at=now,
            next_review=next_review,
            stage=stage,
            definition=definition.definition if definition else None,
            translation=definition.translation if definition else None,
            phonetic=definition.phonetic if definition else None,
        )
        logger.debug(f"Saving word '{word}' from session {session_id}")
        return [*saved_words, new_word]

    def update(
        self, saved_words: Sequence[SavedWord], word: str, /, **updates
    ) -> list[SavedWord]:
        """Merge field updates into the matching saved word.

        Args:
            saved_words: Current saved vocabulary
            word: Word to update (matched case-insensitively)
            **updates: Field values, e.g. ``stage=2`` or ``definition="..."``

        Returns:
            The new saved-word list

        Raises:
            InvalidInputError: If an update names an unknown field or the key
            NotFoundError: If the word is not saved
        """
        unknown = set(updates) - _UPDATABLE_FIELDS
        if unknown:
            raise InvalidInputError(f"Cannot update saved word fields: {', '.join(sorted(unknown))}")

        key = word_key(word)
        for index, entry in enumerate(saved_words):
            if entry.key == key:
                result = list(saved_words)
                result[index] = replace(entry, **updates)
                return result
        raise NotFoundError(f"Word not in saved vocabulary: {word}")

    @staticmethod
    def find(saved_words: Sequence[SavedWord], word: str) -> SavedWord | None:
        """Return the saved entry for a word, if any."""
        key = word_key(word)
        return next((w for w in saved_words if w.key == key), None)

    def is_saved(self, saved_words: Sequence[SavedWord], word: str) -> bool:
        """Check if a word is in the saved set."""
        return self.find(saved_words, word) is not None

    @staticmethod
    def folders(
        saved_words: Sequence[SavedWord], sessions: Sequence[AudioSession]
    ) -> list[VocabularyFolder]:
        """Group saved words by the session they came from.

        Folders appear in order of their first word. Words whose session no
        longer exists get a folder with ``session`` set to None.
        """
        by_id = {s.id: s for s in sessions}
        folders: dict[str, VocabularyFolder] = {}
        for w in saved_words:
            folder = folders.get(w.session_id)
            if folder is None:
                folder = VocabularyFolder(session_id=w.session_id, session=by_id.get(w.session_id))
                folders[w.session_id] = folder
            folder.words.append(w)
        return list(folders.values())

    def stats(self, saved_words: Sequence[SavedWord], now: int | None = None) -> VocabularyStats:
        """Summarize the saved set."""
        return VocabularyStats(
            total_words=len(saved_words),
            due_words=len(self.scheduler.due_words(saved_words, now)),
        )
