"""Protocol for library persistence."""

from typing import Protocol

from echo_listen.models import LibraryState


class LibraryRepository(Protocol):
    """Interface for loading and saving the whole library.

    Core services never call this; callers read the state, compute the new
    state with the services, then save it back as one unit.
    """

    def load(self) -> LibraryState:
        """Return the stored library, or an empty one if nothing is stored."""
        ...

    def save(self, state: LibraryState) -> None:
        """Persist the given library state, replacing what was stored."""
        ...
