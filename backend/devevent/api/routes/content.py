"""
Static content endpoints: featured events and navigation.
"""

from fastapi import APIRouter

from devevent.content import FEATURED_EVENTS, NAVIGATION, get_featured_event
from devevent.core.errors import NotFoundError
from devevent.schemas.content import Navigation, SeedEvent

router = APIRouter(tags=["Content"])


@router.get("/featured-events", response_model=list[SeedEvent])
async def featured_events():
    return list(FEATURED_EVENTS)


@router.get("/featured-events/{event_id}", response_model=SeedEvent)
async def featured_event(event_id: str):
    event = get_featured_event(event_id)
    if event is None:
        raise NotFoundError(f"Featured event '{event_id}' not found")
    return event


@router.get("/navigation", response_model=Navigation)
async def navigation():
    return NAVIGATION
