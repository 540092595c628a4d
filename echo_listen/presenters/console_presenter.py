"""Console presenter for CLI output."""

from echo_listen.models import AudioSession, DialogueBlock, ImportResult, VocabularyFolder
from echo_listen.utils import format_clock


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_import_result(self, result: ImportResult) -> None:
        """Display the result of importing a transcript."""
        print("\nImport Complete:" if result.success else "\nImport Failed:")
        if result.session:
            print(f"  Session: {result.session.title} [{result.session.id}]")
        print(f"  Words: {result.word_count}")
        print(f"  Segments: {result.segment_count}")
        print(f"  Time elapsed: {result.elapsed_time:.1f}s")

        if result.errors:
            print("\nErrors:")
            for error in result.errors:
                print(f"  {error}")

    def show_transcript(self, session: AudioSession, blocks: list[DialogueBlock]) -> None:
        """Display a session transcript grouped into dialogue blocks."""
        print(f"\n{session.title}")
        print(f"{session.subtitle}  ({format_clock(session.duration)})")
        print("=" * 60)

        for block in blocks:
            print(f"\nSpeaker {block.speaker}")
            for offset, segment in enumerate(block.segments):
                index = block.start_idx + offset
                print(f"  {index:3d} [{format_clock(segment.start_time)}] {segment.text}")

    def show_vocabulary(self, folders: list[VocabularyFolder], due_count: int) -> None:
        """Display saved vocabulary grouped by session."""
        total = sum(len(f.words) for f in folders)
        print(f"\nVocabulary: {total} words, {due_count} due")

        if not folders:
            print("  Library is empty")
            return

        for folder in folders:
            print(f"\n  {folder.title}")
            for w in folder.words:
                gloss = w.translation or w.definition or ""
                gloss = gloss.splitlines()[0] if gloss else ""
                print(f"    {w.word:20s} stage {w.stage}  {gloss}")


class ConsoleProgressCallback:
    """Console implementation of progress callback."""

    def __init__(self):
        """Initialize the progress callback."""
        self.total = 0
        self.current = 0
        self.description = ""

    def on_start(self, total: int, description: str) -> None:
        """Called when an operation starts."""
        self.total = total
        self.current = 0
        self.description = description
        print(f"\n{description}...")

    def on_progress(self, current: int, item_description: str) -> None:
        """Called when a step finishes."""
        self.current = current
        print(f"  [{current}/{self.total}] {item_description}")

    def on_complete(self) -> None:
        """Called when an operation completes."""
        print(f"  [OK] Complete: {self.current}/{self.total}")

    def on_error(self, item_description: str, error_message: str) -> None:
        """Called when a step fails."""
        print(f"  [ERROR] {item_description}: {error_message}")
