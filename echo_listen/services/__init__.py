"""Business logic services for EchoListen."""

from .dialogue_grouper import DialogueGrouper
from .export_service import ExportService
from .library_store import JsonLibraryStore
from .playback_service import PlaybackService
from .providers import FreeDictionaryProvider
from .review_scheduler import ReviewScheduler, ReviewSession
from .segment_slicer import SegmentSlicer
from .session_service import SessionService
from .transcript_parser import TranscriptParserService
from .vocabulary_service import VocabularyService
from .word_lookup_service import WordLookupService

__all__ = [
    "SegmentSlicer",
    "DialogueGrouper",
    "ReviewScheduler",
    "ReviewSession",
    "VocabularyService",
    "TranscriptParserService",
    "SessionService",
    "JsonLibraryStore",
    "WordLookupService",
    "FreeDictionaryProvider",
    "PlaybackService",
    "ExportService",
]
