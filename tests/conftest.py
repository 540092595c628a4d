"""Pytest configuration and shared fixtures."""

import json

import pytest

from echo_listen.config import ConfigManager, EchoListenConfig
from echo_listen.models import AudioSession, SavedWord, Segment, WordTiming
from echo_listen.presenters import NullPresenter, NullProgressCallback
from echo_listen.utils import DAY_MS

# Fixed "now" for scheduling tests (2026-01-01T00:00:00Z in epoch ms)
NOW = 1_767_225_600_000


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths."""
    return EchoListenConfig(
        library_path=temp_dir / "library.json",
        use_online_dictionary=False,
    )


@pytest.fixture
def isolated_config_file(temp_dir, monkeypatch):
    """Point ConfigManager at a temporary config file."""
    config_file = temp_dir / "config.json"
    monkeypatch.setattr(ConfigManager, "CONFIG_FILE", config_file)
    return config_file


@pytest.fixture
def now():
    """Provide a fixed timestamp in epoch milliseconds."""
    return NOW


@pytest.fixture
def day_ms():
    return DAY_MS


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def null_progress():
    """Provide a null progress callback for testing."""
    return NullProgressCallback()


@pytest.fixture
def make_words():
    """Factory fixture turning (word, start, end, speaker) tuples into WordTimings."""

    def _make(*rows):
        return [WordTiming(word=w, start=s, end=e, speaker=sp) for w, s, e, sp in rows]

    return _make


@pytest.fixture
def make_segment():
    """Factory fixture for creating Segment instances with sensible defaults."""

    def _make(
        id="seg-0",
        start_time=0.0,
        end_time=2.0,
        text="hello world",
        speaker=1,
        words=None,
    ):
        return Segment(
            id=id,
            start_time=start_time,
            end_time=end_time,
            text=text,
            speaker=speaker,
            words=words,
        )

    return _make


@pytest.fixture
def make_saved_word():
    """Factory fixture for creating SavedWord instances with sensible defaults."""

    def _make(
        word="echo",
        session_id="s1",
        added_at=NOW,
        next_review=NOW + DAY_MS,
        stage=0,
        definition=None,
        translation=None,
        phonetic=None,
    ):
        return SavedWord(
            word=word,
            session_id=session_id,
            added_at=added_at,
            next_review=next_review,
            stage=stage,
            definition=definition,
            translation=translation,
            phonetic=phonetic,
        )

    return _make


@pytest.fixture
def sample_session(make_segment):
    """Provide a small two-speaker session."""
    return AudioSession(
        id="sample-1",
        title="The Future of AI Architecture",
        subtitle="Technology • Podcast S01E04",
        segments=[
            make_segment(id="s1", start_time=0, end_time=6, text="In today's session we explore.", speaker=1),
            make_segment(id="s2", start_time=6, end_time=13, text="The primary challenge remains.", speaker=1),
            make_segment(id="s3", start_time=13, end_time=20, text="Wait, isn't that solved?", speaker=2),
            make_segment(id="s4", start_time=20, end_time=28, text="Exactly. By approximating the kernel.", speaker=1),
        ],
        duration=28,
        last_played="1d ago",
    )


class RecordingProgress:
    """A real ProgressCallback implementation that records all calls for assertion."""

    def __init__(self):
        self.starts = []
        self.progresses = []
        self.completes = 0
        self.errors = []

    def on_start(self, total: int, description: str) -> None:
        self.starts.append((total, description))

    def on_progress(self, current: int, item_description: str) -> None:
        self.progresses.append((current, item_description))

    def on_complete(self) -> None:
        self.completes += 1

    def on_error(self, item_description: str, error_message: str) -> None:
        self.errors.append((item_description, error_message))


@pytest.fixture
def recording_progress():
    """Provide a progress callback that records all calls for assertion."""
    return RecordingProgress()


@pytest.fixture
def deepgram_payload():
    """Provide a minimal Deepgram-style response with two speakers."""
    return {
        "metadata": {"request_id": "test"},
        "results": {
            "channels": [
                {
                    "alternatives": [
                        {
                            "transcript": "hello there hi back",
                            "words": [
                                {"word": "hello", "punctuated_word": "Hello", "start": 0.0, "end": 1.0, "speaker": 0},
                                {"word": "there", "punctuated_word": "there.", "start": 1.0, "end": 3.5, "speaker": 0},
                                {"word": "hi", "punctuated_word": "Hi", "start": 3.5, "end": 4.0, "speaker": 1},
                                {"word": "back", "punctuated_word": "back!", "start": 4.0, "end": 5.0, "speaker": 1},
                            ],
                        }
                    ]
                }
            ]
        },
    }


@pytest.fixture
def deepgram_file(temp_dir, deepgram_payload):
    """Write the Deepgram-style response to a JSON file."""
    path = temp_dir / "interview.json"
    path.write_text(json.dumps(deepgram_payload), encoding="utf-8")
    return path
