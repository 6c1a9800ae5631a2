"""
Service interfaces for dependency inversion.
Allows swapping implementations without changing business logic.
"""

from .event_resolver import EventResolver

__all__ = ['EventResolver']
