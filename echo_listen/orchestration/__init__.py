"""Orchestration layer for multi-step workflows."""

from .import_processor import ImportProcessor

__all__ = ["ImportProcessor"]
