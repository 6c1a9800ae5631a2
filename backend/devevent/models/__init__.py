from devevent.models.event import Event
from devevent.models.booking import Booking

__all__ = ["Event", "Booking"]
