"""CLI commands for browsing and editing sessions."""

from pathlib import Path

from echo_listen.config import ConfigManager
from echo_listen.exceptions import EchoListenException
from echo_listen.presenters import ConsolePresenter
from echo_listen.services import (
    DialogueGrouper,
    ExportService,
    JsonLibraryStore,
    PlaybackService,
    SessionService,
)
from echo_listen.utils import format_clock, safe_filename, split_tokens


def list_command(args) -> int:
    """List stored sessions, newest first."""
    config = ConfigManager.load_config()
    presenter = ConsolePresenter()

    try:
        state = JsonLibraryStore(config.library_path).load()
    except EchoListenException as e:
        presenter.show_error(str(e))
        return 1

    found = SessionService.search(state.sessions, args.search) if args.search else state.sessions
    if not found:
        presenter.show_info("No sessions found")
        return 0

    for session in found:
        presenter.show_info(
            f"{session.id}  {session.title}  ({session.subtitle}, {format_clock(session.duration)})"
        )
    return 0


def show_command(args) -> int:
    """Print a session transcript grouped by speaker."""
    config = ConfigManager.load_config()
    presenter = ConsolePresenter()

    try:
        state = JsonLibraryStore(config.library_path).load()
        session = SessionService.get(state.sessions, args.session_id)
    except EchoListenException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_transcript(session, DialogueGrouper.group(session.segments))

    if args.at is not None:
        playback = PlaybackService(config)
        index = playback.locate_segment(session.segments, args.at)
        if index == -1:
            presenter.show_warning(f"No segment at {format_clock(args.at)}")
            return 0
        segment = session.segments[index]
        tokens = split_tokens(segment.text)
        token_index = playback.active_token_index(segment, args.at)
        word = tokens[token_index] if token_index != -1 else "-"
        presenter.show_info(f"\nAt {args.at:.2f}s: segment {index}, word '{word}'")
    return 0


def edit_command(args) -> int:
    """Replace the text of one segment and save."""
    config = ConfigManager.load_config()
    presenter = ConsolePresenter()
    store = JsonLibraryStore(config.library_path)
    service = SessionService(config)

    try:
        state = store.load()
        session = service.get(state.sessions, args.session_id)
        edited = service.edit_segment_text(session, args.index, args.text)
        state.sessions = service.update(state.sessions, session.id, segments=edited.segments)
        store.save(state)
    except EchoListenException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_success(f"Segment {args.index} updated")
    return 0


def delete_command(args) -> int:
    """Delete a session (saved words from it are kept)."""
    config = ConfigManager.load_config()
    presenter = ConsolePresenter()
    store = JsonLibraryStore(config.library_path)
    service = SessionService(config)

    try:
        state = store.load()
        state.sessions = service.delete(state.sessions, args.session_id)
        store.save(state)
    except EchoListenException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_success(f"Session {args.session_id} deleted")
    return 0


def export_command(args) -> int:
    """Export a session transcript to a subtitle or text file."""
    config = ConfigManager.load_config()
    presenter = ConsolePresenter()

    try:
        state = JsonLibraryStore(config.library_path).load()
        session = SessionService.get(state.sessions, args.session_id)
    except EchoListenException as e:
        presenter.show_error(str(e))
        return 1

    output = Path(args.output) if args.output else Path(f"{safe_filename(session.title)}.{args.fmt}")

    try:
        count = ExportService().export_session(session, output, args.fmt)
    except (OSError, ValueError) as e:
        presenter.show_error(f"Export failed: {e}")
        return 1

    presenter.show_success(f"Exported {count} entries to {output}")
    return 0
