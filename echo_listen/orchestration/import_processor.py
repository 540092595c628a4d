"""Orchestrator for importing a transcript as a new session."""

import logging
import time
from pathlib import Path

from echo_listen.config import EchoListenConfig
from echo_listen.exceptions import EchoListenException, InvalidInputError
from echo_listen.interfaces import LibraryRepository, PresenterProtocol, ProgressCallback
from echo_listen.models import ImportResult, SlicingMethod
from echo_listen.services import SegmentSlicer, SessionService, TranscriptParserService

logger = logging.getLogger(__name__)

IMPORT_STEPS = 4


class ImportProcessor:
    """Orchestrate parse → slice → create session → save.

    Nothing is written to the repository unless every earlier step
    succeeded; a failed import leaves the stored library untouched.
    """

    def __init__(
        self,
        config: EchoListenConfig,
        transcript_parser: TranscriptParserService,
        segment_slicer: SegmentSlicer,
        session_service: SessionService,
        repository: LibraryRepository,
        presenter: PresenterProtocol,
    ):
        """Initialize the import processor.

        Args:
            config: Configuration
            transcript_parser: Reads word timings from the transcript file
            segment_slicer: Slices word timings into segments
            session_service: Builds the session and updates the session list
            repository: Library persistence
            presenter: Output presenter
        """
        self.config = config
        self.transcript_parser = transcript_parser
        self.segment_slicer = segment_slicer
        self.session_service = session_service
        self.repository = repository
        self.presenter = presenter

    def process_import(
        self,
        transcript_file: Path,
        title: str | None = None,
        method: SlicingMethod | str | None = None,
        rule_value: float | None = None,
        duration: float | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> ImportResult:
        """Import one transcript.

        Args:
            transcript_file: Saved ASR response (JSON)
            title: Session title, defaults to the file stem
            method: Slicing method, defaults to the configured one
            rule_value: Slicing rule value, defaults to the configured one
            duration: Audio length in seconds, if known
            progress_callback: Optional progress reporting

        Returns:
            ImportResult; on failure ``session`` is None and ``errors`` says why
        """
        start = time.time()
        method = method or self.config.default_slicing_method
        rule_value = rule_value if rule_value is not None else self.config.default_rule_value
        title = title or Path(transcript_file).stem

        if progress_callback:
            progress_callback.on_start(IMPORT_STEPS, f"Importing {Path(transcript_file).name}")

        step = "Parsing transcript"
        try:
            words = self.transcript_parser.parse_file(transcript_file)
            if not words:
                raise InvalidInputError("No transcription data found in transcript file")
            if all(w.speaker is None for w in words):
                self.presenter.show_warning(
                    "Transcript has no speaker ids, all segments go to Speaker 1"
                )
            self._advance(progress_callback, 1, f"{step} ({len(words)} words)")

            step = "Slicing segments"
            segments = self.segment_slicer.slice(words, method, rule_value)
            self._advance(progress_callback, 2, f"{step} ({len(segments)} segments)")

            step = "Creating session"
            session = self.session_service.create_session(title, segments, duration)
            self._advance(progress_callback, 3, step)

            step = "Saving library"
            state = self.repository.load()
            state.sessions = self.session_service.add(state.sessions, session)
            self.repository.save(state)
            self._advance(progress_callback, 4, step)

        except EchoListenException as e:
            logger.warning(f"Import of {transcript_file} failed at '{step}': {e}")
            if progress_callback:
                progress_callback.on_error(step, str(e))
            return ImportResult(session=None, errors=[str(e)], elapsed_time=time.time() - start)

        if progress_callback:
            progress_callback.on_complete()

        return ImportResult(
            session=session,
            word_count=len(words),
            segment_count=len(segments),
            elapsed_time=time.time() - start,
        )

    @staticmethod
    def _advance(progress_callback: ProgressCallback | None, current: int, description: str):
        if progress_callback:
            progress_callback.on_progress(current, description)
