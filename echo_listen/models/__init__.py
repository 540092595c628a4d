"""Data models for EchoListen."""

from .playback import PlaybackMode
from .session import AudioSession, ImportResult, LibraryState
from .transcript import DialogueBlock, Segment, SlicingMethod, WordTiming
from .vocabulary import (
    ReviewOutcome,
    SavedWord,
    VocabularyFolder,
    VocabularyStats,
    WordDefinition,
)

__all__ = [
    "WordTiming",
    "Segment",
    "DialogueBlock",
    "SlicingMethod",
    "AudioSession",
    "LibraryState",
    "ImportResult",
    "SavedWord",
    "WordDefinition",
    "ReviewOutcome",
    "VocabularyFolder",
    "VocabularyStats",
    "PlaybackMode",
]
