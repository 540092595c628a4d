"""Tests for SegmentSlicer."""

import pytest

from echo_listen.exceptions import InvalidInputError, UnsupportedMethodError
from echo_listen.models import SlicingMethod, WordTiming
from echo_listen.services.segment_slicer import SegmentSlicer


@pytest.fixture
def slicer(test_config):
    """Provide a SegmentSlicer instance."""
    return SegmentSlicer(test_config)


def _flatten_words(segments):
    return [w for seg in segments for w in seg.words]


class TestBasics:
    """Tests for input handling common to all methods."""

    def test_empty_input_returns_empty_list(self, slicer):
        """Empty word list is not an error."""
        assert slicer.slice([], SlicingMethod.TURNS, 1) == []

    def test_single_word_yields_one_segment(self, slicer, make_words):
        """A single word is flushed as one segment."""
        words = make_words(("hello", 0.5, 1.2, 0))

        segments = slicer.slice(words, SlicingMethod.DURATION, 1)

        assert len(segments) == 1
        seg = segments[0]
        assert seg.start_time == 0.5
        assert seg.end_time == 1.2
        assert seg.text == "hello"
        assert seg.speaker == 1
        assert seg.words == words

    def test_missing_speaker_maps_to_speaker_one(self, slicer, make_words):
        """Words without a speaker id are attributed to display speaker 1."""
        words = make_words(("a", 0, 1, None), ("b", 1, 2, None))
        segments = slicer.slice(words, SlicingMethod.TURNS, 1)
        assert [s.speaker for s in segments] == [1]

    def test_segment_ids_are_sequential(self, slicer, make_words):
        """Segments are numbered seg-0, seg-1, ..."""
        words = make_words(("a", 0, 10, 0), ("b", 10, 20, 1), ("c", 20, 30, 0))
        segments = slicer.slice(words, SlicingMethod.PARAGRAPH, 1)
        assert [s.id for s in segments] == [f"seg-{i}" for i in range(len(segments))]

    def test_method_accepts_string_name(self, slicer, make_words):
        """Method names are accepted case-insensitively."""
        words = make_words(("a", 0, 1, 0))
        assert len(slicer.slice(words, "turns", 1)) == 1
        assert len(slicer.slice(words, "DURATION", 1)) == 1

    def test_input_list_not_mutated(self, slicer, make_words):
        """Slicing does not alter the caller's list."""
        words = make_words(("a", 0, 3, 0), ("b", 3, 6, 1), ("c", 6, 9, 0))
        snapshot = list(words)

        slicer.slice(words, SlicingMethod.TURNS, 1)

        assert words == snapshot


class TestPartition:
    """Tests for the partitioning guarantees."""

    @pytest.mark.parametrize(
        "method,rule",
        [
            (SlicingMethod.DURATION, 1),
            (SlicingMethod.TURNS, 1),
            (SlicingMethod.TURNS, 3),
            (SlicingMethod.PARAGRAPH, 1),
        ],
    )
    def test_every_word_in_exactly_one_segment(self, slicer, make_words, method, rule):
        """Concatenated segment words equal the input, in order."""
        words = make_words(
            ("so", 0.0, 4.0, 0),
            ("today", 4.0, 9.5, 0),
            ("we", 9.5, 12.0, 1),
            ("talk", 12.0, 30.0, 1),
            ("about", 30.0, 45.0, 0),
            ("attention", 45.0, 70.0, 0),
            ("right", 70.0, 71.0, 1),
            ("yes", 71.0, 140.0, 0),
        )

        segments = slicer.slice(words, method, rule)

        assert _flatten_words(segments) == words
        assert all(len(s.words) == len(s.text.split()) for s in segments)

    def test_first_segment_starts_at_first_word(self, slicer, make_words):
        """The first segment starts where the first word starts, even after 0."""
        words = make_words(("late", 5.0, 6.0, 0), ("start", 6.0, 7.0, 0))
        segments = slicer.slice(words, SlicingMethod.TURNS, 1)
        assert segments[0].start_time == 5.0

    def test_each_segment_ends_at_its_last_word(self, slicer, make_words):
        """end_time equals the end of the last covered word."""
        words = make_words(
            ("a", 0, 5, 0), ("b", 5, 10, 0), ("c", 10, 11, 1), ("d", 11, 12, 1), ("e", 12, 25, 0)
        )

        segments = slicer.slice(words, SlicingMethod.PARAGRAPH, 1)

        for seg in segments:
            assert seg.end_time == seg.words[-1].end

    def test_next_segment_starts_where_previous_ended(self, slicer, make_words):
        """Silence gaps are absorbed into the following segment."""
        words = make_words(("a", 0, 61, 0), ("b", 65, 66, 0), ("c", 66, 67, 0))

        segments = slicer.slice(words, SlicingMethod.DURATION, 1)

        assert len(segments) == 2
        assert segments[1].start_time == segments[0].end_time == 61
        assert segments[1].words[0].start == 65


class TestDurationMethod:
    """Tests for DURATION slicing."""

    def test_splits_at_seventy_second_mark(self, slicer, make_words):
        """With m=1 and words 70s apart the only split is at the 70s word."""
        words = make_words(("one", 0, 1, 0), ("two", 70, 71, 0), ("three", 71, 72, 0))

        segments = slicer.slice(words, SlicingMethod.DURATION, 1)

        assert len(segments) == 2
        assert [w.word for w in segments[0].words] == ["one", "two"]
        assert segments[0].end_time == 71
        assert [w.word for w in segments[1].words] == ["three"]

    def test_boundary_is_inclusive(self, slicer, make_words):
        """A segment reaching exactly m*60 seconds splits."""
        words = make_words(("a", 0, 30, 0), ("b", 30, 60, 0), ("c", 60, 61, 0))
        segments = slicer.slice(words, SlicingMethod.DURATION, 1)
        assert segments[0].end_time == 60
        assert len(segments) == 2

    def test_non_final_segments_reach_the_duration(self, slicer, make_words):
        """Every non-final segment is at least m minutes long."""
        words = make_words(*[(f"w{i}", i * 20.0, i * 20.0 + 19.0, 0) for i in range(20)])

        segments = slicer.slice(words, SlicingMethod.DURATION, 2)

        assert len(segments) > 1
        for seg in segments[:-1]:
            assert seg.end_time - seg.start_time >= 120

    def test_ignores_speaker_changes(self, slicer, make_words):
        """Speaker flips alone never cut a DURATION segment."""
        words = make_words(("a", 0, 5, 0), ("b", 5, 10, 1), ("c", 10, 15, 0))
        assert len(slicer.slice(words, SlicingMethod.DURATION, 1)) == 1


class TestTurnsMethod:
    """Tests for TURNS slicing."""

    def test_quick_turn_is_deferred_to_final_word(self, slicer, make_words):
        """the/cat/sat/down: the turn comes after only 2s, so no early split."""
        words = make_words(
            ("the", 0, 1, 1),
            ("cat", 1, 2, 1),
            ("sat", 2, 3, 2),
            ("down", 3, 4, 2),
        )

        segments = slicer.slice(words, SlicingMethod.TURNS, 1)

        assert len(segments) == 1
        assert segments[0].text == "the cat sat down"
        assert segments[0].start_time == 0
        assert segments[0].end_time == 4
        assert segments[0].speaker == 2

    def test_splits_on_turn_after_min_duration(self, slicer, make_words):
        """The turn-triggering word closes the segment it belongs to."""
        words = make_words(("a", 0, 1, 0), ("b", 1, 3, 0), ("c", 3, 4, 1), ("d", 4, 5, 1))

        segments = slicer.slice(words, SlicingMethod.TURNS, 1)

        assert [s.text for s in segments] == ["a b c", "d"]
        assert segments[0].speaker == 1
        assert segments[1].speaker == 2
        assert segments[1].start_time == 4

    def test_flip_back_counts_as_two_turns(self, slicer, make_words):
        """A -> B -> A counts two turns."""
        words = make_words(("a", 0, 3, 0), ("b", 3, 6, 1), ("c", 6, 9, 0), ("d", 9, 12, 1))

        segments = slicer.slice(words, SlicingMethod.TURNS, 2)

        assert [s.text for s in segments] == ["a b c", "d"]
        assert segments[1].speaker == 2

    def test_single_speaker_never_splits(self, slicer, make_words):
        """Without turn-taking everything ends up in one trailing segment."""
        words = make_words(*[(f"w{i}", i * 10.0, i * 10.0 + 10.0, 3) for i in range(30)])

        segments = slicer.slice(words, SlicingMethod.TURNS, 1)

        assert len(segments) == 1
        assert segments[0].speaker == 4
        assert segments[0].end_time == 300

    def test_non_final_segments_contain_enough_turns(self, slicer, make_words):
        """No boundary occurs with fewer than k speaker changes inside the segment."""
        rows = []
        for i in range(24):
            rows.append((f"w{i}", i * 3.0, i * 3.0 + 3.0, i % 2 if i % 3 else 0))
        words = make_words(*rows)

        segments = slicer.slice(words, SlicingMethod.TURNS, 2)

        previous = words[0].speaker
        for seg in segments[:-1]:
            changes = 0
            for w in seg.words:
                if w.speaker != previous:
                    changes += 1
                previous = w.speaker
            assert changes >= 2


class TestParagraphMethod:
    """Tests for PARAGRAPH slicing."""

    def test_splits_on_speaker_change_after_long_monologue(self, slicer, make_words):
        """A speaker flip after more than 8 seconds closes the paragraph."""
        words = make_words(
            ("a", 0, 5, 0), ("b", 5, 9, 0), ("c", 9, 10, 1), ("d", 10, 11, 1), ("e", 11, 12, 0)
        )

        segments = slicer.slice(words, SlicingMethod.PARAGRAPH, 1)

        assert [s.text for s in segments] == ["a b c", "d e"]
        assert segments[1].speaker == 2
        assert segments[1].start_time == 10

    def test_short_exchanges_do_not_split(self, slicer, make_words):
        """Speaker flips inside the first 8 seconds are not cut points."""
        words = make_words(("a", 0, 1, 0), ("b", 1, 2, 1), ("c", 2, 3, 0))
        assert len(slicer.slice(words, SlicingMethod.PARAGRAPH, 1)) == 1

    def test_long_monologue_without_change_does_not_split(self, slicer, make_words):
        """Duration alone never triggers a PARAGRAPH split."""
        words = make_words(("a", 0, 50, 0), ("b", 50, 100, 0))
        assert len(slicer.slice(words, SlicingMethod.PARAGRAPH, 1)) == 1


class TestValidation:
    """Tests for error handling."""

    def test_unknown_method_raises(self, slicer, make_words):
        """An unknown method is rejected rather than defaulted."""
        with pytest.raises(UnsupportedMethodError, match="SENTENCES"):
            slicer.slice(make_words(("a", 0, 1, 0)), "SENTENCES", 1)

    def test_non_string_method_raises(self, slicer, make_words):
        with pytest.raises(UnsupportedMethodError):
            slicer.slice(make_words(("a", 0, 1, 0)), 3, 1)

    @pytest.mark.parametrize("rule", [0, -1, 0.5])
    def test_rule_value_below_one_raises(self, slicer, make_words, rule):
        """Rule values must be at least 1."""
        with pytest.raises(InvalidInputError, match="at least 1"):
            slicer.slice(make_words(("a", 0, 1, 0)), SlicingMethod.TURNS, rule)

    def test_missing_start_raises(self, slicer):
        """A word without a start time is malformed input."""
        words = [WordTiming("a", 0, 1, 0), WordTiming("b", None, 2, 0)]
        with pytest.raises(InvalidInputError, match="missing 'start'"):
            slicer.slice(words, SlicingMethod.TURNS, 1)

    def test_missing_end_raises(self, slicer):
        words = [WordTiming("a", 0, None, 0)]
        with pytest.raises(InvalidInputError, match="missing 'end'"):
            slicer.slice(words, SlicingMethod.DURATION, 1)

    def test_non_numeric_time_raises(self, slicer):
        words = [WordTiming("a", "0", 1, 0)]
        with pytest.raises(InvalidInputError, match="non-numeric"):
            slicer.slice(words, SlicingMethod.DURATION, 1)

    def test_reversed_timing_raises(self, slicer):
        """A word may not end before it starts."""
        words = [WordTiming("a", 2.0, 1.0, 0)]
        with pytest.raises(InvalidInputError, match="ends before it starts"):
            slicer.slice(words, SlicingMethod.DURATION, 1)

    def test_overlapping_words_are_tolerated(self, slicer, make_words):
        """Overlaps between consecutive words are not an error."""
        words = make_words(("a", 0, 2, 0), ("b", 1.5, 3, 0))
        segments = slicer.slice(words, SlicingMethod.TURNS, 1)
        assert _flatten_words(segments) == words

    @pytest.mark.parametrize("rule", ["10", None, True, float("nan")])
    def test_non_numeric_rule_value_raises(self, slicer, make_words, rule):
        with pytest.raises(InvalidInputError, match="at least 1"):
            slicer.slice(make_words(("a", 0, 1, 0)), SlicingMethod.TURNS, rule)

    @pytest.mark.parametrize("token", ["New York", "", "   ", " a", "a\tb", None, 7])
    def test_invalid_token_raises(self, slicer, make_words, token):
        """Each word must be one whitespace-free token."""
        words = make_words(("a", 0, 1, 0), (token, 1, 2, 0), ("b", 2, 3, 0))
        with pytest.raises(InvalidInputError, match="invalid token"):
            slicer.slice(words, SlicingMethod.TURNS, 1)

    @pytest.mark.parametrize("speaker", ["A", 1.0, True])
    def test_non_integer_speaker_raises(self, slicer, make_words, speaker):
        words = make_words(("a", 0, 1, speaker))
        with pytest.raises(InvalidInputError, match="non-integer speaker"):
            slicer.slice(words, SlicingMethod.DURATION, 1)


class TestTokenAlignment:
    """Tests that segment text and word timings line up token for token."""

    @pytest.mark.parametrize(
        "method,rule",
        [
            (SlicingMethod.DURATION, 1),
            (SlicingMethod.TURNS, 1),
            (SlicingMethod.TURNS, 2),
            (SlicingMethod.PARAGRAPH, 1),
        ],
    )
    def test_word_count_matches_text_tokens(self, slicer, make_words, method, rule):
        words = make_words(
            ("Well,", 0.0, 3.0, 0),
            ("it's", 3.0, 6.0, 1),
            ("state-of-the-art.", 6.0, 40.0, 0),
            ("Really?", 40.0, 61.0, 1),
            ("Yes!", 61.0, 75.0, 0),
            ("“Quote”", 75.0, 80.0, 1),
        )

        segments = slicer.slice(words, method, rule)

        for seg in segments:
            assert len(seg.words) == len(seg.text.split())
            assert seg.text.split() == [w.word for w in seg.words]
            assert seg.has_word_timings
