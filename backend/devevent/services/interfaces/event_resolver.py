"""
Event lookup interface used by the booking pipeline.
Keeps the booking checks independent of how events are stored.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class EventResolver(ABC):
    """
    Resolve an event by identity.

    Implementations:
    - SqlEventResolver: looks the event up through an AsyncSession
    """

    @abstractmethod
    async def resolve(self, event_id: int) -> Optional[Any]:
        """
        Look up an event.

        Args:
            event_id: Identity of the referenced event

        Returns:
            The event, or None when no event has that identity
        """
        pass
