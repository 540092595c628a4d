"""CLI commands for word lookup, saved vocabulary and review."""

from collections.abc import Callable
from pathlib import Path

from echo_listen.config import ConfigManager, EchoListenConfig
from echo_listen.exceptions import EchoListenException
from echo_listen.models import ReviewOutcome
from echo_listen.presenters import ConsolePresenter
from echo_listen.services import (
    ExportService,
    FreeDictionaryProvider,
    JsonLibraryStore,
    ReviewScheduler,
    VocabularyService,
    WordLookupService,
)


def create_lookup_service(config: EchoListenConfig) -> WordLookupService:
    """Create a lookup service wired to the configured dictionary."""
    provider = None
    if config.use_online_dictionary:
        provider = FreeDictionaryProvider(
            api_url=config.dictionary_api_url,
            language=config.dictionary_language,
            timeout=config.dictionary_timeout,
        )
    return WordLookupService(provider)


def lookup_command(args) -> int:
    """Look up a word and show whether it is saved."""
    config = ConfigManager.load_config()
    presenter = ConsolePresenter()

    try:
        definition = create_lookup_service(config).lookup(args.word, args.context)
        state = JsonLibraryStore(config.library_path).load()
    except EchoListenException as e:
        presenter.show_error(str(e))
        return 1

    if definition is None:
        presenter.show_warning(f"No definition found for '{args.word}'")
        return 1

    vocabulary = VocabularyService(ReviewScheduler(config))
    saved = vocabulary.is_saved(state.saved_words, definition.word)

    presenter.show_info(f"\n{definition.word}  {definition.phonetic or ''}")
    if definition.translation:
        presenter.show_info(definition.translation)
    presenter.show_info(definition.definition or "")
    if definition.example:
        presenter.show_info(f"\n  \"{definition.example}\"")
    presenter.show_info(f"\n{'Saved' if saved else 'Not saved'}")
    return 0


def save_command(args) -> int:
    """Toggle a word in the saved vocabulary."""
    config = ConfigManager.load_config()
    presenter = ConsolePresenter()
    store = JsonLibraryStore(config.library_path)
    vocabulary = VocabularyService(ReviewScheduler(config))

    try:
        state = store.load()
        definition = None
        if not args.no_lookup and not vocabulary.is_saved(state.saved_words, args.word):
            definition = create_lookup_service(config).lookup(args.word)
            if definition is None:
                presenter.show_warning(f"No definition found for '{args.word}', saving without one")

        before = len(state.saved_words)
        state.saved_words = vocabulary.toggle(
            state.saved_words, args.word, args.session_id, definition
        )
        store.save(state)
    except EchoListenException as e:
        presenter.show_error(str(e))
        return 1

    if len(state.saved_words) > before:
        presenter.show_success(f"Saved '{args.word}'")
    else:
        presenter.show_success(f"Removed '{args.word}'")
    return 0


def vocab_command(args) -> int:
    """Show saved words grouped by session."""
    config = ConfigManager.load_config()
    presenter = ConsolePresenter()
    vocabulary = VocabularyService(ReviewScheduler(config))

    try:
        state = JsonLibraryStore(config.library_path).load()
    except EchoListenException as e:
        presenter.show_error(str(e))
        return 1

    stats = vocabulary.stats(state.saved_words)
    presenter.show_vocabulary(vocabulary.folders(state.saved_words, state.sessions), stats.due_words)

    if args.export:
        output = Path(args.export)
        try:
            count = ExportService().export_vocabulary_csv(state.saved_words, output, state.sessions)
        except OSError as e:
            presenter.show_error(f"Export failed: {e}")
            return 1
        presenter.show_success(f"Exported {count} words to {output}")
    return 0


def review_command(args, input_func: Callable[[str], str] | None = None) -> int:
    """Run an interactive review pass over due words.

    Each answer is written back to the library immediately.
    """
    input_func = input_func or input
    config = ConfigManager.load_config()
    presenter = ConsolePresenter()
    store = JsonLibraryStore(config.library_path)
    scheduler = ReviewScheduler(config)

    try:
        session = scheduler.start_session(store.load().saved_words)
    except EchoListenException as e:
        presenter.show_error(str(e))
        return 1

    if session.finished:
        presenter.show_info("Nothing to review")
        return 0

    while not session.finished:
        word = session.current
        presenter.show_info(f"\nReviewing {session.position} / {session.total}")
        presenter.show_info(f"  {word.word}  {word.phonetic or ''}")
        input_func("  Press Enter to reveal the answer...")
        presenter.show_info(f"  {word.translation or ''}")
        presenter.show_info(f"  {word.definition or '(no definition saved)'}")

        answer = ""
        while answer not in ("k", "f", "q"):
            answer = input_func("  [k] I knew it  [f] I forgot  [q] quit: ").strip().lower()
        if answer == "q":
            break

        outcome = ReviewOutcome.KNOWN if answer == "k" else ReviewOutcome.FORGOT
        session.answer(outcome)
        try:
            state = store.load()
            state.saved_words = session.apply_to(state.saved_words)
            store.save(state)
        except EchoListenException as e:
            presenter.show_error(str(e))
            return 1

    presenter.show_success(f"Reviewed {len(session.answered)} of {session.total} words")
    return 0
