"""Main CLI entry point for echo_listen."""

import argparse
import sys

from echo_listen import __version__
from echo_listen.cli.commands import import_session, sessions, settings, vocabulary
from echo_listen.models import SlicingMethod
from echo_listen.services.export_service import TRANSCRIPT_FORMATS


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="echo_listen",
        description="Study spoken audio through segmented transcripts and vocabulary review",
        epilog="Use 'echo_listen <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # echo_listen import <transcript>
    import_parser = subparsers.add_parser(
        "import",
        help="Import a word-timed transcript as a new session",
        description="Slice a saved ASR response (JSON) into segments and store it as a session",
    )
    import_parser.add_argument("transcript", help="Path to transcript JSON file")
    import_parser.add_argument("--title", help="Session title (default: file name)")
    import_parser.add_argument(
        "--method",
        choices=[m.value for m in SlicingMethod],
        type=str.upper,
        help="Slicing method (default: from settings)",
    )
    import_parser.add_argument(
        "--rule",
        type=int,
        help="Rule value: minutes for DURATION, speaker changes for TURNS",
    )
    import_parser.add_argument(
        "--duration",
        type=float,
        help="Audio length in seconds (default: end of last segment)",
    )

    # echo_listen sessions
    list_parser = subparsers.add_parser("sessions", help="List imported sessions")
    list_parser.add_argument("--search", default="", help="Filter by title or subtitle")

    # echo_listen show <id>
    show_parser = subparsers.add_parser("show", help="Show a session transcript")
    show_parser.add_argument("session_id", help="Session id")
    show_parser.add_argument(
        "--at",
        type=float,
        help="Highlight the segment and word at this time (seconds)",
    )

    # echo_listen edit <id> <index> <text>
    edit_parser = subparsers.add_parser("edit", help="Replace the text of one segment")
    edit_parser.add_argument("session_id", help="Session id")
    edit_parser.add_argument("index", type=int, help="Segment index (as shown by 'show')")
    edit_parser.add_argument("text", help="Replacement text")

    # echo_listen delete <id>
    delete_parser = subparsers.add_parser("delete", help="Delete a session")
    delete_parser.add_argument("session_id", help="Session id")

    # echo_listen export <id> <output>
    export_parser = subparsers.add_parser("export", help="Export a session transcript")
    export_parser.add_argument("session_id", help="Session id")
    export_parser.add_argument("output", nargs="?", help="Output file (default: <title>.<format>)")
    export_parser.add_argument(
        "--format", dest="fmt", choices=TRANSCRIPT_FORMATS, default="srt", help="Output format"
    )

    # echo_listen lookup <word>
    lookup_parser = subparsers.add_parser("lookup", help="Look up a word")
    lookup_parser.add_argument("word", help="Word as it appears in the transcript")
    lookup_parser.add_argument("--context", help="Sentence the word appears in")

    # echo_listen save <word> <session>
    save_parser = subparsers.add_parser(
        "save",
        help="Save a word, or remove it if already saved",
    )
    save_parser.add_argument("word", help="Word to toggle")
    save_parser.add_argument("session_id", help="Session the word comes from")
    save_parser.add_argument(
        "--no-lookup",
        action="store_true",
        help="Do not fetch a definition for newly saved words",
    )

    # echo_listen vocab
    vocab_parser = subparsers.add_parser("vocab", help="List saved vocabulary")
    vocab_parser.add_argument("--export", metavar="CSV", help="Also export words to a CSV file")

    # echo_listen review
    subparsers.add_parser("review", help="Review words that are due")

    # echo_listen settings
    settings_parser = subparsers.add_parser("settings", help="Show or change settings")
    settings_parser.add_argument(
        "--method", choices=[m.value for m in SlicingMethod], type=str.upper
    )
    settings_parser.add_argument("--rule", type=int, help="Default rule value")
    settings_parser.add_argument("--language", help="Dictionary language code")
    settings_parser.add_argument("--library", help="Path of the library JSON file")
    settings_parser.add_argument("--reset", action="store_true", help="Restore defaults")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {
        "import": import_session.import_command,
        "sessions": sessions.list_command,
        "show": sessions.show_command,
        "edit": sessions.edit_command,
        "delete": sessions.delete_command,
        "export": sessions.export_command,
        "lookup": vocabulary.lookup_command,
        "save": vocabulary.save_command,
        "vocab": vocabulary.vocab_command,
        "review": vocabulary.review_command,
        "settings": settings.settings_command,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
