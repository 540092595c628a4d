"""Group consecutive same-speaker segments into dialogue blocks."""

from collections.abc import Iterable, Sequence

from echo_listen.models import DialogueBlock, Segment


class DialogueGrouper:
    """Derive dialogue blocks from a segment list (stateless service)."""

    DEFAULT_SPEAKER = 1

    @classmethod
    def group(cls, segments: Sequence[Segment]) -> list[DialogueBlock]:
        """Group segments into blocks of consecutive same-speaker segments.

        Same-speaker blocks that are not adjacent are never merged.

        Args:
            segments: Segments in playback order

        Returns:
            Blocks whose segments, concatenated, equal the input
        """
        blocks: list[DialogueBlock] = []
        for index, segment in enumerate(segments):
            speaker = cls.speaker_of(segment)
            if blocks and blocks[-1].speaker == speaker:
                blocks[-1].segments.append(segment)
            else:
                blocks.append(DialogueBlock(speaker=speaker, segments=[segment], start_idx=index))
        return blocks

    @staticmethod
    def flatten(blocks: Iterable[DialogueBlock]) -> list[Segment]:
        """Expand blocks back into the flat segment list."""
        return [segment for block in blocks for segment in block.segments]

    @classmethod
    def speaker_of(cls, segment: Segment) -> int:
        """Return the segment speaker, defaulting missing or odd values to 1."""
        speaker = segment.speaker
        if isinstance(speaker, bool) or not isinstance(speaker, int):
            return cls.DEFAULT_SPEAKER
        return speaker

    @staticmethod
    def block_for_index(blocks: Sequence[DialogueBlock], index: int) -> DialogueBlock | None:
        """Find the block containing a segment index, if any."""
        for block in blocks:
            if block.contains(index):
                return block
        return None
