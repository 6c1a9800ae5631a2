"""
Event endpoints.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from devevent.db.session import get_db
from devevent.schemas.booking import BookingResponse
from devevent.schemas.event import EventCreate, EventUpdate, EventResponse, EventListResponse
from devevent.services.booking_service import list_event_bookings
from devevent.services.event_service import create_event, update_event, get_event_by_slug, list_events

router = APIRouter(prefix="/events", tags=["Events"])


@router.post("/", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event_endpoint(
    event_data: EventCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create an event. The slug, date and time are normalized before saving."""
    return await create_event(db, event_data)


@router.get("/", response_model=EventListResponse)
async def list_events_endpoint(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    events, total = await list_events(db, page, page_size)
    return EventListResponse(
        events=[EventResponse.model_validate(e) for e in events],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/{slug}", response_model=EventResponse)
async def get_event_endpoint(
    slug: str,
    db: AsyncSession = Depends(get_db),
):
    return await get_event_by_slug(db, slug)


@router.patch("/{event_id}", response_model=EventResponse)
async def update_event_endpoint(
    event_id: int,
    event_data: EventUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Partially update an event. The slug only changes when the title does."""
    return await update_event(db, event_id, event_data)


@router.get("/{event_id}/bookings", response_model=list[BookingResponse])
async def list_event_bookings_endpoint(
    event_id: int,
    db: AsyncSession = Depends(get_db),
):
    return await list_event_bookings(db, event_id)
