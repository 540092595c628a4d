"""Silent presenter and progress callback, used by tests and library callers."""

from echo_listen.models import AudioSession, DialogueBlock, ImportResult, VocabularyFolder


class NullPresenter:
    """Presenter that discards every message."""

    def show_info(self, message: str) -> None:
        pass

    def show_success(self, message: str) -> None:
        pass

    def show_warning(self, message: str) -> None:
        pass

    def show_error(self, message: str) -> None:
        pass

    def show_import_result(self, result: ImportResult) -> None:
        pass

    def show_transcript(self, session: AudioSession, blocks: list[DialogueBlock]) -> None:
        pass

    def show_vocabulary(self, folders: list[VocabularyFolder], due_count: int) -> None:
        pass


class NullProgressCallback:
    """Progress callback that ignores every step."""

    def on_start(self, total: int, description: str) -> None:
        pass

    def on_progress(self, current: int, item_description: str) -> None:
        pass

    def on_complete(self) -> None:
        pass

    def on_error(self, item_description: str, error_message: str) -> None:
        pass
