from devevent.schemas.event import EventCreate, EventUpdate, EventResponse, EventListResponse
from devevent.schemas.booking import BookingCreate, BookingUpdate, BookingResponse
from devevent.schemas.content import SeedEvent, NavLink, Navigation

__all__ = [
    "EventCreate", "EventUpdate", "EventResponse", "EventListResponse",
    "BookingCreate", "BookingUpdate", "BookingResponse",
    "SeedEvent", "NavLink", "Navigation",
]
