"""Dictionary provider implementations."""

from .free_dictionary_provider import FreeDictionaryProvider

__all__ = ["FreeDictionaryProvider"]
