"""Orchestration layer for coordinating lookup workflows."""

from .lookup_processor import LookupProcessor

__all__ = ["LookupProcessor"]
