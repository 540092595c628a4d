"""Service for creating and editing audio sessions."""

import logging
import uuid
from collections.abc import Sequence
from dataclasses import replace

from echo_listen.config import EchoListenConfig
from echo_listen.exceptions import InvalidInputError, NotFoundError
from echo_listen.models import AudioSession, Segment

logger = logging.getLogger(__name__)

COVER_URL_TEMPLATE = "https://picsum.photos/seed/{seed}/400/400"


class SessionService:
    """Build sessions from segments and apply list edits (stateless service).

    List operations return new lists; sessions themselves are replaced,
    never mutated in place.
    """

    def __init__(self, config: EchoListenConfig):
        """Initialize the session service.

        Args:
            config: Configuration (provides the transcript source label)
        """
        self.config = config

    def create_session(
        self,
        title: str,
        segments: Sequence[Segment],
        duration: float | None = None,
        session_id: str | None = None,
    ) -> AudioSession:
        """Create a session for a freshly sliced transcript.

        Args:
            title: Display title (usually the audio file name)
            segments: Slicer output
            duration: Audio length in seconds; falls back to the end of the
                last segment when unknown or zero
            session_id: Explicit id, random when omitted

        Returns:
            New AudioSession with status "ready"
        """
        session_id = session_id or uuid.uuid4().hex[:9]
        if not duration:
            duration = segments[-1].end_time if segments else 0.0

        return AudioSession(
            id=session_id,
            title=title,
            subtitle=f"{len(segments)} segments • {self.config.transcript_source}",
            cover_url=COVER_URL_TEMPLATE.format(seed=session_id),
            segments=list(segments),
            duration=duration,
            last_played="Just now",
            status="ready",
        )

    @staticmethod
    def add(sessions: Sequence[AudioSession], session: AudioSession) -> list[AudioSession]:
        """Insert a session at the front of the list (newest first)."""
        return [session, *sessions]

    @staticmethod
    def get(sessions: Sequence[AudioSession], session_id: str) -> AudioSession:
        """Return the session with the given id.

        Raises:
            NotFoundError: If no session has that id
        """
        for session in sessions:
            if session.id == session_id:
                return session
        raise NotFoundError(f"Session not found: {session_id}")

    def update(
        self, sessions: Sequence[AudioSession], session_id: str, **updates
    ) -> list[AudioSession]:
        """Replace fields of one session.

        Raises:
            NotFoundError: If no session has that id
        """
        target = self.get(sessions, session_id)
        updated = replace(target, **updates)
        return [updated if s.id == session_id else s for s in sessions]

    def delete(self, sessions: Sequence[AudioSession], session_id: str) -> list[AudioSession]:
        """Remove a session.

        Saved words pointing at it are left alone and keep the dangling
        ``session_id``.

        Raises:
            NotFoundError: If no session has that id
        """
        self.get(sessions, session_id)
        logger.info(f"Deleting session {session_id}")
        return [s for s in sessions if s.id != session_id]

    @staticmethod
    def search(sessions: Sequence[AudioSession], query: str) -> list[AudioSession]:
        """Filter sessions whose title or subtitle contains the query."""
        needle = query.lower()
        return [s for s in sessions if needle in s.title.lower() or needle in s.subtitle.lower()]

    @staticmethod
    def edit_segment_text(session: AudioSession, index: int, text: str) -> AudioSession:
        """Replace the text of one segment, keeping its timings and words.

        Args:
            session: Session to edit
            index: 0-based segment index
            text: Replacement text

        Returns:
            New session with the edited segment

        Raises:
            InvalidInputError: If the index is out of range
        """
        if not 0 <= index < len(session.segments):
            raise InvalidInputError(
                f"Segment index {index} out of range (session has {len(session.segments)})"
            )
        segments = list(session.segments)
        segments[index] = replace(segments[index], text=text)
        return replace(session, segments=segments)
