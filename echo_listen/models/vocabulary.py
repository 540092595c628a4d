"""Data models for saved vocabulary and reviews."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .session import AudioSession


class ReviewOutcome(str, Enum):
    """Answer given for a word during review."""

    KNOWN = "KNOWN"
    FORGOT = "FORGOT"


@dataclass
class WordDefinition:
    """Result of looking up a word clicked in a transcript."""

    word: str
    definition: str | None = None
    translation: str | None = None
    phonetic: str | None = None
    example: str | None = None  # Sentence the word was clicked in

    def __str__(self) -> str:
        return f"{self.word}: {self.definition[:50] if self.definition else 'No definition'}"


@dataclass
class SavedWord:
    """A word in the user's vocabulary with its review schedule.

    Timestamps are epoch milliseconds. Uniqueness is by ``word.lower()``.
    """

    word: str
    session_id: str
    added_at: int
    next_review: int
    stage: int = 0
    definition: str | None = None
    translation: str | None = None
    phonetic: str | None = None

    @property
    def key(self) -> str:
        """Case-insensitive identity of this word."""
        return self.word.lower()

    def is_due(self, now: int) -> bool:
        """Check if the word should be reviewed at ``now``."""
        return self.next_review <= now

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "word": self.word,
            "sessionId": self.session_id,
            "addedAt": self.added_at,
            "nextReview": self.next_review,
            "stage": self.stage,
        }
        for name in ("definition", "translation", "phonetic"):
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SavedWord:
        return cls(
            word=data["word"],
            session_id=data.get("sessionId", ""),
            added_at=int(data.get("addedAt", 0)),
            next_review=int(data.get("nextReview", 0)),
            stage=int(data.get("stage", 0)),
            definition=data.get("definition"),
            translation=data.get("translation"),
            phonetic=data.get("phonetic"),
        )

    def __str__(self) -> str:
        return f"{self.word} (stage {self.stage})"


@dataclass
class VocabularyFolder:
    """Saved words collected from one session."""

    session_id: str
    session: AudioSession | None = None  # None once the session is deleted
    words: list[SavedWord] = field(default_factory=list)

    @property
    def title(self) -> str:
        return self.session.title if self.session else "Unknown Session"


@dataclass
class VocabularyStats:
    """Totals shown on the vocabulary overview."""

    total_words: int = 0
    due_words: int = 0
