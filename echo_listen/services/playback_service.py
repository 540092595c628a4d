"""Segment navigation for synchronized playback."""

import random
from collections.abc import Sequence

from echo_listen.config import EchoListenConfig
from echo_listen.models import PlaybackMode, Segment
from echo_listen.utils import split_tokens

_MODE_CYCLE = (PlaybackMode.LIST_LOOP, PlaybackMode.SINGLE_LOOP, PlaybackMode.SHUFFLE)


class PlaybackService:
    """Map playhead positions to segments and tokens (stateless service)."""

    def __init__(self, config: EchoListenConfig, rng: random.Random | None = None):
        """Initialize the playback service.

        Args:
            config: Configuration (provides latency compensation)
            rng: Random source for shuffle mode
        """
        self.config = config
        self._rng = rng or random.Random()

    def locate_segment(
        self, segments: Sequence[Segment], time: float, playing: bool = False
    ) -> int:
        """Find the segment under the playhead.

        While playing, the position is pushed forward by the latency
        compensation so highlighting does not trail the audio.

        Args:
            segments: Session segments
            time: Playhead position in seconds
            playing: Whether audio is currently playing

        Returns:
            Index of the segment whose [start, end) holds the time, or -1
        """
        adjusted = time + (self.config.latency_compensation if playing else 0.0)
        for index, segment in enumerate(segments):
            if segment.start_time <= adjusted < segment.end_time:
                return index
        return -1

    def next_segment(self, mode: PlaybackMode, active_idx: int, count: int) -> int | None:
        """Pick the segment to play after the active one ends.

        Args:
            mode: Current playback mode
            active_idx: Index of the segment that just finished
            count: Number of segments in the session

        Returns:
            Next index, or None when list playback reached the end
        """
        if count <= 0:
            return None
        if mode is PlaybackMode.SINGLE_LOOP:
            return active_idx
        if mode is PlaybackMode.SHUFFLE:
            return self._rng.randrange(count)
        if active_idx < count - 1:
            return active_idx + 1
        return None

    @staticmethod
    def cycle_mode(mode: PlaybackMode) -> PlaybackMode:
        """Return the mode that follows ``mode`` (list → single → shuffle → list)."""
        return _MODE_CYCLE[(_MODE_CYCLE.index(mode) + 1) % len(_MODE_CYCLE)]

    @staticmethod
    def token_boundaries(segment: Segment) -> list[tuple[float, float]]:
        """Compute the (start, end) time of every text token.

        Uses the word timings when they line up with the tokens (they may not
        after a text edit); otherwise spreads the segment duration over the
        tokens in proportion to their character length.
        """
        tokens = split_tokens(segment.text)
        if segment.has_word_timings:
            return [(w.start, w.end) for w in segment.words or []]

        total_chars = len(segment.text) or 1
        total_duration = max(0.1, segment.end_time - segment.start_time)
        boundaries = []
        running_chars = 0
        for token in tokens:
            start = segment.start_time + (running_chars / total_chars) * total_duration
            running_chars += len(token) + 1
            end = segment.start_time + (running_chars / total_chars) * total_duration
            boundaries.append((start, end))
        return boundaries

    def active_token_index(self, segment: Segment, time: float) -> int:
        """Index of the token being spoken at ``time``, or -1."""
        for index, (start, end) in enumerate(self.token_boundaries(segment)):
            if start <= time < end:
                return index
        return -1
