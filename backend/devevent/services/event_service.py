"""
Event service: the storage side of the event pipeline.

Every write runs prepare_event() (normalize -> validate) before touching the
session, so the rules live in devevent.domain.events and this module only
decides what changed and persists the result.
"""

from typing import Any, Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from devevent.core.errors import DuplicateSlugError, NotFoundError, ValidationError
from devevent.core.logging import get_logger
from devevent.core.metrics import record_persisted, record_validation_failure
from devevent.domain.events import EVENT_FIELDS, changed_fields, prepare_event
from devevent.models.event import Event
from devevent.schemas.event import EventCreate, EventUpdate
from devevent.services.interfaces import EventResolver

logger = get_logger(__name__)


class SqlEventResolver(EventResolver):
    """Resolve events by primary key through an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def resolve(self, event_id: int) -> Optional[Event]:
        return await self.db.get(Event, event_id)


def _document(event: Event) -> dict[str, Any]:
    return {name: getattr(event, name) for name in EVENT_FIELDS}


def _prepare(values: dict[str, Any], changed) -> dict[str, Any]:
    try:
        return prepare_event(values, changed)
    except ValidationError as e:
        record_validation_failure("event")
        logger.warning("event_rejected", field=e.field, reason=e.message)
        raise


async def _ensure_slug_available(db: AsyncSession, slug: str, exclude_id: Optional[int] = None) -> None:
    query = select(Event.id).where(Event.slug == slug)
    if exclude_id is not None:
        query = query.where(Event.id != exclude_id)
    if (await db.execute(query)).first() is not None:
        logger.warning("event_rejected", field="slug", reason="duplicate", slug=slug)
        raise DuplicateSlugError(slug)


async def _flush(db: AsyncSession, slug: str) -> None:
    # The unique index catches writers that raced past the pre-check
    try:
        await db.flush()
    except IntegrityError as e:
        raise DuplicateSlugError(slug) from e


async def create_event(db: AsyncSession, event_data: EventCreate) -> Event:
    """Normalize, validate and insert a new event."""
    doc = _prepare(event_data.model_dump(), changed=EVENT_FIELDS)
    await _ensure_slug_available(db, doc["slug"])

    event = Event(**doc)
    db.add(event)
    await _flush(db, doc["slug"])
    await db.refresh(event)

    record_persisted("events", "create")
    logger.info("event_created", event_id=event.id, slug=event.slug, date=event.date)
    return event


async def update_event(db: AsyncSession, event_id: int, event_data: EventUpdate) -> Event:
    """
    Apply a partial update and re-run the pipeline.

    Only fields whose value actually changes count as modified, so the
    stored slug is kept unless the title changes.
    """
    event = await get_event(db, event_id)
    current = _document(event)
    updates = event_data.model_dump(exclude_unset=True)
    changed = changed_fields(current, updates)

    doc = _prepare({**current, **updates}, changed)
    if doc["slug"] != event.slug:
        await _ensure_slug_available(db, doc["slug"], exclude_id=event.id)

    for name in EVENT_FIELDS:
        setattr(event, name, doc[name])
    await _flush(db, doc["slug"])
    await db.refresh(event)

    record_persisted("events", "update")
    logger.info("event_updated", event_id=event.id, slug=event.slug, fields=sorted(changed))
    return event


async def get_event(db: AsyncSession, event_id: int) -> Event:
    """Get a single event by ID."""
    event = await db.get(Event, event_id)
    if not event:
        raise NotFoundError(f"Event {event_id} not found")
    return event


async def get_event_by_slug(db: AsyncSession, slug: str) -> Event:
    result = await db.execute(select(Event).where(Event.slug == slug))
    event = result.scalar_one_or_none()
    if not event:
        raise NotFoundError(f"Event '{slug}' not found")
    return event


async def list_events(
    db: AsyncSession,
    page: int = 1,
    page_size: int = 20,
) -> tuple[list[Event], int]:
    """List events ordered by date, with pagination."""
    total = (await db.execute(select(func.count()).select_from(Event))).scalar()

    events_query = (
        select(Event)
        .order_by(Event.date.asc(), Event.id.asc())
        .offset((page - 1) * page_size)
        .limit(page_size)
    )
    result = await db.execute(events_query)
    events = list(result.scalars().all())

    return events, total
