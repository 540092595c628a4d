"""Service for slicing word-timed transcripts into study segments."""

import logging
import math
from collections.abc import Sequence

from echo_listen.config import EchoListenConfig
from echo_listen.exceptions import InvalidInputError, UnsupportedMethodError
from echo_listen.models import Segment, SlicingMethod, WordTiming

logger = logging.getLogger(__name__)


class SegmentSlicer:
    """Partition a flat word stream into segments (stateless service).

    Every input word lands in exactly one segment, in order. The word that
    triggers a split closes the segment it belongs to, and the next segment
    starts where that word ended.
    """

    def __init__(self, config: EchoListenConfig):
        """Initialize the slicer.

        Args:
            config: Configuration holding the split thresholds
        """
        self.config = config

    def slice(
        self,
        words: Sequence[WordTiming],
        method: SlicingMethod | str,
        rule_value: float,
    ) -> list[Segment]:
        """Slice word timings into segments.

        Args:
            words: Time-ordered word timings from the speech engine
            method: Slicing policy (DURATION, TURNS or PARAGRAPH)
            rule_value: Minutes for DURATION, speaker changes for TURNS;
                must be at least 1

        Returns:
            Ordered segments whose ``words`` partition the input

        Raises:
            UnsupportedMethodError: If the method is unknown
            InvalidInputError: If rule_value is not a number >= 1, or a word
                has bad timings, a malformed token or a non-integer speaker
        """
        method = self.resolve_method(method)
        if (
            isinstance(rule_value, bool)
            or not isinstance(rule_value, (int, float))
            or not rule_value >= 1
        ):
            raise InvalidInputError(f"Rule value must be at least 1, got {rule_value}")
        if not words:
            return []
        self._validate_words(words)

        segments: list[Segment] = []
        current_tokens: list[str] = []
        current_words: list[WordTiming] = []
        current_start = words[0].start
        active_speaker = words[0].speaker
        previous_speaker = words[0].speaker
        turn_counter = 0
        last_index = len(words) - 1

        for i, word in enumerate(words):
            current_tokens.append(word.word)
            current_words.append(word)

            speaker_changed = word.speaker != previous_speaker
            previous_speaker = word.speaker
            if speaker_changed:
                turn_counter += 1

            should_split = self._should_split(
                method, rule_value, word, current_start, turn_counter, speaker_changed
            )

            if should_split or i == last_index:
                segments.append(
                    Segment(
                        id=f"seg-{len(segments)}",
                        start_time=current_start,
                        end_time=word.end,
                        text=" ".join(current_tokens),
                        speaker=(active_speaker or 0) + 1,
                        words=list(current_words),
                    )
                )
                current_tokens = []
                current_words = []
                current_start = word.end
                turn_counter = 0
                if i < last_index:
                    active_speaker = words[i + 1].speaker

        logger.info(
            f"Sliced {len(words)} words into {len(segments)} segments "
            f"({method.value}, rule={rule_value})"
        )
        return segments

    @staticmethod
    def resolve_method(method: SlicingMethod | str) -> SlicingMethod:
        """Turn a method name into a SlicingMethod.

        Args:
            method: Enum member or its name, case-insensitive

        Returns:
            The matching SlicingMethod

        Raises:
            UnsupportedMethodError: If the name is not a known method
        """
        if isinstance(method, SlicingMethod):
            return method
        if isinstance(method, str):
            try:
                return SlicingMethod(method.strip().upper())
            except ValueError:
                pass
        supported = ", ".join(m.value for m in SlicingMethod)
        raise UnsupportedMethodError(
            f"Unsupported slicing method: {method!r} (expected one of {supported})"
        )

    def _should_split(
        self,
        method: SlicingMethod,
        rule_value: float,
        word: WordTiming,
        current_start: float,
        turn_counter: int,
        speaker_changed: bool,
    ) -> bool:
        """Decide whether ``word`` closes the open segment.

        DURATION and PARAGRAPH measure up to the word's end. The TURNS time
        guard measures up to the word's start instead, so a turn taken
        exactly ``turns_min_duration`` into a segment does not close it.
        """
        if method is SlicingMethod.DURATION:
            return word.end - current_start >= rule_value * 60
        if method is SlicingMethod.TURNS:
            # Time already spoken in the open segment when this word starts
            elapsed = word.start - current_start
            return turn_counter >= rule_value and elapsed > self.config.turns_min_duration
        # PARAGRAPH
        return speaker_changed and word.end - current_start > self.config.paragraph_min_duration

    @staticmethod
    def _validate_words(words: Sequence[WordTiming]) -> None:
        """Reject word timings that would produce garbage segments.

        Raises:
            InvalidInputError: On missing, non-numeric or reversed times, a
                token that is empty or contains whitespace, or a speaker
                that is not an integer
        """
        for index, word in enumerate(words):
            token = getattr(word, "word", None)
            # Exactly one whitespace-delimited token, so text.split() lines up with words
            if not isinstance(token, str) or token.split() != [token]:
                raise InvalidInputError(
                    f"Word {index} has an invalid token {token!r} "
                    f"(expected non-empty text without whitespace)"
                )
            speaker = getattr(word, "speaker", None)
            if speaker is not None and (isinstance(speaker, bool) or not isinstance(speaker, int)):
                raise InvalidInputError(
                    f"Word {index} ({token!r}) has non-integer speaker {speaker!r}"
                )
            for name in ("start", "end"):
                value = getattr(word, name, None)
                if value is None:
                    raise InvalidInputError(f"Word {index} ({word.word!r}) is missing '{name}'")
                if (
                    isinstance(value, bool)
                    or not isinstance(value, (int, float))
                    or not math.isfinite(value)
                ):
                    raise InvalidInputError(
                        f"Word {index} ({word.word!r}) has non-numeric '{name}': {value!r}"
                    )
            if word.end < word.start:
                raise InvalidInputError(
                    f"Word {index} ({word.word!r}) ends before it starts "
                    f"({word.start} > {word.end})"
                )
