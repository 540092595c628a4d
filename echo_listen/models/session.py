"""Data models for imported audio sessions."""

from dataclasses import dataclass, field
from typing import Any

from .transcript import Segment
from .vocabulary import SavedWord


@dataclass
class AudioSession:
    """An imported audio file with its segmented transcript."""

    id: str
    title: str
    subtitle: str = ""
    cover_url: str = ""
    segments: list[Segment] = field(default_factory=list)
    duration: float = 0.0  # Seconds
    last_played: str = ""
    status: str = "ready"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "subtitle": self.subtitle,
            "coverUrl": self.cover_url,
            "segments": [s.to_dict() for s in self.segments],
            "duration": self.duration,
            "lastPlayed": self.last_played,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AudioSession":
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            subtitle=data.get("subtitle", ""),
            cover_url=data.get("coverUrl", ""),
            segments=[Segment.from_dict(s) for s in data.get("segments", [])],
            duration=data.get("duration", 0.0),
            last_played=data.get("lastPlayed", ""),
            status=data.get("status", "ready"),
        )

    def __str__(self) -> str:
        return f"{self.title} ({len(self.segments)} segments)"


@dataclass
class LibraryState:
    """Everything the repository persists: sessions and saved words."""

    sessions: list[AudioSession] = field(default_factory=list)
    saved_words: list[SavedWord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sessions": [s.to_dict() for s in self.sessions],
            "savedWords": [w.to_dict() for w in self.saved_words],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LibraryState":
        return cls(
            sessions=[AudioSession.from_dict(s) for s in data.get("sessions", [])],
            saved_words=[SavedWord.from_dict(w) for w in data.get("savedWords", [])],
        )


@dataclass
class ImportResult:
    """Result of importing a transcript as a new session."""

    session: AudioSession | None
    word_count: int = 0
    segment_count: int = 0
    errors: list[str] = field(default_factory=list)
    elapsed_time: float = 0.0

    @property
    def success(self) -> bool:
        """Check if the import produced a session without errors."""
        return self.session is not None and len(self.errors) == 0

    def __str__(self) -> str:
        return (
            f"ImportResult(words={self.word_count}, "
            f"segments={self.segment_count}, time={self.elapsed_time:.1f}s)"
        )
