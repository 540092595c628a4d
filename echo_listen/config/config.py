"""Configuration classes for EchoListen."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class EchoListenConfig:
    """Immutable configuration for transcript study operations.

    All configuration is frozen (immutable) so that services built from
    it cannot drift apart during a run.
    """

    # Storage settings
    library_path: Path = field(
        default_factory=lambda: Path.home() / ".echo_listen" / "library.json"
    )

    # Slicing settings
    default_slicing_method: str = "TURNS"
    default_rule_value: int = 10
    turns_min_duration: float = 2.0  # Seconds a segment must run before a turn can close it
    paragraph_min_duration: float = 8.0  # Seconds of monologue before a speaker flip closes it

    # Review settings
    review_intervals: tuple[int, ...] = (0, 1, 2, 4, 7, 15, 30, 90)  # Days, indexed by stage
    new_word_delay_days: int = 1

    # Playback settings
    latency_compensation: float = 0.05  # Seconds added to the playhead while playing

    # Transcript settings
    transcript_source: str = "Deepgram"

    # Dictionary settings
    use_online_dictionary: bool = True
    dictionary_api_url: str = "https://api.dictionaryapi.dev/api/v2/entries"
    dictionary_language: str = "en"
    dictionary_timeout: float = 10.0

    def __post_init__(self):
        """Normalize values loaded from JSON or passed as plain types."""
        if isinstance(self.library_path, str):
            object.__setattr__(self, "library_path", Path(self.library_path))
        if isinstance(self.review_intervals, list):
            object.__setattr__(self, "review_intervals", tuple(self.review_intervals))
        if not self.review_intervals:
            raise ValueError("review_intervals must contain at least one interval")
