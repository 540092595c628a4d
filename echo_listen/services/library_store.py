"""JSON file repository for sessions and saved words."""

import json
import logging
import os
import tempfile
from pathlib import Path

from echo_listen.exceptions import StorageError
from echo_listen.models import LibraryState
from echo_listen.utils import ensure_directory

logger = logging.getLogger(__name__)


class JsonLibraryStore:
    """Persist the library as a single JSON document.

    Implements the LibraryRepository protocol. Writes go to a temporary
    file that replaces the target, so a crash never leaves half a library.
    """

    def __init__(self, path: Path):
        """Initialize the store.

        Args:
            path: Location of the library JSON file
        """
        self.path = Path(path)

    def exists(self) -> bool:
        """Check if a library file has been written."""
        return self.path.exists()

    def load(self) -> LibraryState:
        """Load the library.

        Returns:
            Stored state, or an empty LibraryState if no file exists yet

        Raises:
            StorageError: If the file cannot be read or decoded
        """
        if not self.path.exists():
            return LibraryState()

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            return LibraryState.from_dict(data)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Failed to read library {self.path}: {e}") from e
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise StorageError(f"Library file {self.path} has an invalid layout: {e!r}") from e

    def save(self, state: LibraryState) -> None:
        """Write the library, replacing the previous file atomically.

        Raises:
            StorageError: If the file cannot be written
        """
        try:
            ensure_directory(self.path.parent)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=".library-", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(state.to_dict(), f, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write library {self.path}: {e}") from e

        logger.debug(
            f"Saved library ({len(state.sessions)} sessions, "
            f"{len(state.saved_words)} words) to {self.path}"
        )
