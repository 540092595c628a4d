"""Interface protocols for EchoListen."""

from .dictionary_provider import DictionaryProvider
from .presenter import PresenterProtocol
from .progress import ProgressCallback
from .repository import LibraryRepository

__all__ = ["DictionaryProvider", "PresenterProtocol", "ProgressCallback", "LibraryRepository"]
