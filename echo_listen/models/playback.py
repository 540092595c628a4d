"""Playback mode model."""

from enum import Enum


class PlaybackMode(str, Enum):
    """What happens when the current segment finishes playing."""

    LIST_LOOP = "LIST_LOOP"  # Advance to the next segment, stop after the last
    SINGLE_LOOP = "SINGLE_LOOP"  # Repeat the current segment
    SHUFFLE = "SHUFFLE"  # Jump to a random segment
