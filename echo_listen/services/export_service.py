"""Export service for transcripts and vocabulary."""

import csv
import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

import pysubs2

from echo_listen.models import AudioSession, SavedWord
from echo_listen.services.dialogue_grouper import DialogueGrouper
from echo_listen.utils import format_clock

logger = logging.getLogger(__name__)

SUBTITLE_FORMATS = ("srt", "vtt", "ass")
TRANSCRIPT_FORMATS = (*SUBTITLE_FORMATS, "txt")


class ExportService:
    """Export session transcripts to subtitle/text files and vocabulary to CSV."""

    def export_subtitles(self, session: AudioSession, output_path: Path, fmt: str = "srt") -> int:
        """Write session segments as a subtitle file.

        Args:
            session: Session to export
            output_path: Destination file
            fmt: One of "srt", "vtt" or "ass"

        Returns:
            Number of subtitle events written

        Raises:
            ValueError: If the format is not a subtitle format
        """
        if fmt not in SUBTITLE_FORMATS:
            raise ValueError(f"Unsupported subtitle format: {fmt}")

        subs = self.build_subtitles(session)
        subs.save(str(output_path), format_=fmt)
        logger.info(f"Exported {len(subs)} events to {output_path}")
        return len(subs)

    @staticmethod
    def build_subtitles(session: AudioSession) -> pysubs2.SSAFile:
        """Build an in-memory subtitle file, one event per segment."""
        subs = pysubs2.SSAFile()
        for segment in session.segments:
            subs.append(
                pysubs2.SSAEvent(
                    start=int(round(segment.start_time * 1000)),
                    end=int(round(segment.end_time * 1000)),
                    text=segment.text.replace("\n", "\\N"),
                    name=f"Speaker {DialogueGrouper.speaker_of(segment)}",
                )
            )
        return subs

    def export_text(self, session: AudioSession, output_path: Path) -> int:
        """Write a readable transcript with one heading per dialogue block.

        Returns:
            Number of dialogue blocks written
        """
        blocks = DialogueGrouper.group(session.segments)
        lines = [session.title, ""]
        for block in blocks:
            lines.append(f"Speaker {block.speaker}:")
            for segment in block.segments:
                lines.append(f"  [{format_clock(segment.start_time)}] {segment.text}")
            lines.append("")

        output_path.write_text("\n".join(lines), encoding="utf-8")
        return len(blocks)

    def export_session(self, session: AudioSession, output_path: Path, fmt: str) -> int:
        """Export a session in any supported transcript format."""
        if fmt == "txt":
            return self.export_text(session, output_path)
        return self.export_subtitles(session, output_path, fmt)

    def export_vocabulary_csv(
        self,
        saved_words: Sequence[SavedWord],
        output_path: Path,
        sessions: Sequence[AudioSession] = (),
    ) -> int:
        """Export saved words to CSV.

        Args:
            saved_words: Words to export
            output_path: Path for the output CSV file
            sessions: Sessions used to resolve source titles

        Returns:
            Number of rows written (excluding header)
        """
        titles = {s.id: s.title for s in sessions}
        header = [
            "Word",
            "Translation",
            "Definition",
            "Phonetic",
            "Session",
            "Stage",
            "Added",
            "Next Review",
        ]

        with open(output_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(header)
            for w in saved_words:
                writer.writerow(
                    [
                        w.word,
                        w.translation or "",
                        w.definition or "",
                        w.phonetic or "",
                        titles.get(w.session_id, w.session_id),
                        w.stage,
                        self._iso(w.added_at),
                        self._iso(w.next_review),
                    ]
                )

        return len(saved_words)

    @staticmethod
    def _iso(timestamp_ms: int) -> str:
        return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).isoformat()
