"""Data models for timed transcripts and their segments."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SlicingMethod(str, Enum):
    """Policy used to cut a word stream into segments."""

    DURATION = "DURATION"  # Fixed length, rule value in minutes
    TURNS = "TURNS"  # Number of speaker changes
    PARAGRAPH = "PARAGRAPH"  # Speaker change after a sustained monologue


@dataclass
class WordTiming:
    """A single recognized word with its position in the audio."""

    word: str
    start: float  # Seconds
    end: float  # Seconds
    speaker: int | None = None  # Zero-based speaker id from the ASR engine

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"word": self.word, "start": self.start, "end": self.end}
        if self.speaker is not None:
            data["speaker"] = self.speaker
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WordTiming":
        return cls(
            word=data["word"],
            start=data["start"],
            end=data["end"],
            speaker=data.get("speaker"),
        )


@dataclass
class Segment:
    """A contiguous span of transcript attributed to one speaker.

    ``speaker`` is the 1-based display index. ``words`` is absent for
    segments that did not come from word-level timings.
    """

    id: str
    start_time: float
    end_time: float
    text: str
    speaker: int = 1
    words: list[WordTiming] | None = None

    @property
    def duration(self) -> float:
        """Length of the segment in seconds."""
        return self.end_time - self.start_time

    @property
    def has_word_timings(self) -> bool:
        """Check if word timings line up one-to-one with the text tokens."""
        return self.words is not None and len(self.words) == len(self.text.split())

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "text": self.text,
            "speaker": self.speaker,
        }
        if self.words is not None:
            data["words"] = [w.to_dict() for w in self.words]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Segment":
        words = data.get("words")
        return cls(
            id=data["id"],
            start_time=data["startTime"],
            end_time=data["endTime"],
            text=data["text"],
            speaker=data.get("speaker", 1),
            words=[WordTiming.from_dict(w) for w in words] if words is not None else None,
        )

    def __str__(self) -> str:
        return f"[{self.start_time:.2f}-{self.end_time:.2f}] Speaker {self.speaker}: {self.text}"


@dataclass
class DialogueBlock:
    """Consecutive segments spoken by the same speaker (derived, never stored)."""

    speaker: int
    segments: list[Segment] = field(default_factory=list)
    start_idx: int = 0

    @property
    def end_idx(self) -> int:
        """Index one past the last segment of this block."""
        return self.start_idx + len(self.segments)

    def contains(self, index: int) -> bool:
        """Check if a segment index falls inside this block."""
        return self.start_idx <= index < self.end_idx
