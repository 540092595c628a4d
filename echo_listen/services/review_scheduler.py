"""Spaced-repetition scheduling for saved vocabulary."""

import logging
from collections.abc import Sequence
from dataclasses import replace

from echo_listen.config import EchoListenConfig
from echo_listen.exceptions import NotFoundError
from echo_listen.models import ReviewOutcome, SavedWord
from echo_listen.utils import days_to_ms, now_ms, word_key

logger = logging.getLogger(__name__)


class ReviewScheduler:
    """Compute review stage transitions and due dates (stateless service).

    ``stage`` indexes the interval table. A known answer moves one stage up
    (capped at the last interval), a forgotten one resets to stage 0, and the
    next review is due ``intervals[stage]`` days after the answer.
    """

    def __init__(self, config: EchoListenConfig):
        """Initialize the scheduler.

        Args:
            config: Configuration holding the interval table
        """
        self.config = config
        self.intervals = tuple(config.review_intervals)

    @property
    def last_stage(self) -> int:
        """Highest reachable stage."""
        return len(self.intervals) - 1

    def initial_state(self, now: int | None = None) -> tuple[int, int]:
        """Return ``(stage, next_review)`` for a freshly saved word.

        New words are not immediately due; they enter the schedule one
        configured delay after being saved.
        """
        now = now_ms() if now is None else now
        return 0, now + days_to_ms(self.config.new_word_delay_days)

    def next_stage(self, stage: int, outcome: ReviewOutcome) -> int:
        """Compute the stage after answering.

        Args:
            stage: Current stage (clamped into the table)
            outcome: Review answer

        Returns:
            New stage index
        """
        if outcome is ReviewOutcome.FORGOT:
            return 0
        current = min(max(stage, 0), self.last_stage)
        return min(current + 1, self.last_stage)

    def due_at(self, stage: int, now: int) -> int:
        """Timestamp (ms) at which a word at ``stage`` becomes due."""
        return now + days_to_ms(self.intervals[stage])

    def review(
        self, word: SavedWord, outcome: ReviewOutcome | str, now: int | None = None
    ) -> SavedWord:
        """Apply a review answer to a word.

        Args:
            word: Word being reviewed
            outcome: KNOWN or FORGOT
            now: Answer time in epoch ms (defaults to the current time)

        Returns:
            A new SavedWord with updated stage and next_review
        """
        outcome = ReviewOutcome(outcome)
        now = now_ms() if now is None else now
        stage = self.next_stage(word.stage, outcome)
        return replace(word, stage=stage, next_review=self.due_at(stage, now))

    def review_in(
        self,
        saved_words: Sequence[SavedWord],
        word: str,
        outcome: ReviewOutcome | str,
        now: int | None = None,
    ) -> list[SavedWord]:
        """Apply a review answer to the matching entry of a saved-word list.

        Args:
            saved_words: Current saved vocabulary
            word: Word to review (matched case-insensitively)
            outcome: KNOWN or FORGOT
            now: Answer time in epoch ms

        Returns:
            New list with the reviewed entry replaced

        Raises:
            NotFoundError: If the word is not saved
        """
        key = word_key(word)
        for index, entry in enumerate(saved_words):
            if entry.key == key:
                updated = list(saved_words)
                updated[index] = self.review(entry, outcome, now)
                logger.debug(
                    f"Reviewed '{entry.word}': stage {entry.stage} -> {updated[index].stage}"
                )
                return updated
        raise NotFoundError(f"Word not in saved vocabulary: {word}")

    @staticmethod
    def due_words(saved_words: Sequence[SavedWord], now: int | None = None) -> list[SavedWord]:
        """Return words whose next review has passed, in insertion order."""
        now = now_ms() if now is None else now
        return [w for w in saved_words if w.is_due(now)]

    def start_session(
        self, saved_words: Sequence[SavedWord], now: int | None = None
    ) -> "ReviewSession":
        """Open a review pass over the words due at ``now``."""
        return ReviewSession(self, self.due_words(saved_words, now))


class ReviewSession:
    """One pass over a fixed snapshot of due words.

    Words that become due while the pass is running are not added; each
    answer advances to the next word until the snapshot is exhausted.
    """

    def __init__(self, scheduler: ReviewScheduler, due: Sequence[SavedWord]):
        self._scheduler = scheduler
        self._queue = list(due)
        self._index = 0
        self.answered: list[SavedWord] = []

    @property
    def total(self) -> int:
        return len(self._queue)

    @property
    def position(self) -> int:
        """1-based position of the current word."""
        return min(self._index + 1, self.total)

    @property
    def finished(self) -> bool:
        return self._index >= self.total

    @property
    def current(self) -> SavedWord | None:
        """Word awaiting an answer, or None when the pass is over."""
        return None if self.finished else self._queue[self._index]

    def answer(self, outcome: ReviewOutcome | str, now: int | None = None) -> SavedWord:
        """Record an answer for the current word and advance.

        Returns:
            The rescheduled word

        Raises:
            NotFoundError: If the pass is already finished
        """
        word = self.current
        if word is None:
            raise NotFoundError("No word left to review in this session")
        updated = self._scheduler.review(word, outcome, now)
        self.answered.append(updated)
        self._index += 1
        return updated

    def apply_to(self, saved_words: Sequence[SavedWord]) -> list[SavedWord]:
        """Merge the answered words back into a saved-word list.

        Words removed from the list during the pass are skipped.
        """
        answered = {w.key: w for w in self.answered}
        return [answered.get(w.key, w) for w in saved_words]
