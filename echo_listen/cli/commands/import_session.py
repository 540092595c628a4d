"""CLI command for importing a transcript."""

from pathlib import Path

from echo_listen.config import ConfigManager
from echo_listen.orchestration import ImportProcessor
from echo_listen.presenters import ConsolePresenter, ConsoleProgressCallback
from echo_listen.services import (
    JsonLibraryStore,
    SegmentSlicer,
    SessionService,
    TranscriptParserService,
)


def import_command(args) -> int:
    """Execute the import subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = ConfigManager.load_config()

    presenter = ConsolePresenter()
    progress = ConsoleProgressCallback()

    transcript_file = Path(args.transcript)
    if not transcript_file.exists():
        presenter.show_error(f"Transcript file not found: {transcript_file}")
        return 1

    processor = ImportProcessor(
        config=config,
        transcript_parser=TranscriptParserService(),
        segment_slicer=SegmentSlicer(config),
        session_service=SessionService(config),
        repository=JsonLibraryStore(config.library_path),
        presenter=presenter,
    )

    result = processor.process_import(
        transcript_file=transcript_file,
        title=args.title,
        method=args.method,
        rule_value=args.rule,
        duration=args.duration,
        progress_callback=progress,
    )
    presenter.show_import_result(result)

    return 0 if result.success else 1
