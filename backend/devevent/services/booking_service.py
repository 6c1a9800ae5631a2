"""
Booking service: the storage side of the booking pipeline.

REFERENTIAL INTEGRITY
=====================

A booking may only be written while the event it points at exists. The
check runs in prepare_booking() whenever the event reference is new or has
changed, before anything is added to the session, so a rejected booking
leaves no row behind. The lookup goes through an EventResolver; by default
SqlEventResolver over the same session.
"""

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from devevent.core.errors import NotFoundError, ValidationError
from devevent.core.logging import get_logger
from devevent.core.metrics import record_persisted, record_validation_failure
from devevent.domain.bookings import prepare_booking
from devevent.domain.events import changed_fields
from devevent.models.booking import Booking
from devevent.schemas.booking import BookingCreate, BookingUpdate
from devevent.services.event_service import SqlEventResolver, get_event
from devevent.services.interfaces import EventResolver

logger = get_logger(__name__)

BOOKING_FIELDS = ("event_id", "email")


async def _prepare(
    values: dict[str, Any],
    changed,
    resolver: EventResolver,
) -> dict[str, Any]:
    try:
        return await prepare_booking(values, changed, resolver)
    except ValidationError as e:
        record_validation_failure("booking")
        logger.warning(
            "booking_rejected",
            field=e.field,
            reason=e.message,
            event_id=values.get("event_id"),
        )
        raise


async def create_booking(
    db: AsyncSession,
    booking_data: BookingCreate,
    resolver: Optional[EventResolver] = None,
) -> Booking:
    """Validate and insert a booking for an existing event."""
    resolver = resolver or SqlEventResolver(db)
    doc = await _prepare(booking_data.model_dump(), BOOKING_FIELDS, resolver)

    booking = Booking(**doc)
    db.add(booking)
    await db.flush()
    await db.refresh(booking)

    record_persisted("bookings", "create")
    logger.info("booking_created", booking_id=booking.id, event_id=booking.event_id)
    return booking


async def update_booking(
    db: AsyncSession,
    booking_id: int,
    booking_data: BookingUpdate,
    resolver: Optional[EventResolver] = None,
) -> Booking:
    """Change the event reference and/or email; the reference is re-checked only if it changed."""
    resolver = resolver or SqlEventResolver(db)
    booking = await get_booking(db, booking_id)
    current = {name: getattr(booking, name) for name in BOOKING_FIELDS}
    updates = booking_data.model_dump(exclude_unset=True)
    changed = changed_fields(current, updates)

    doc = await _prepare({**current, **updates}, changed, resolver)
    for name in BOOKING_FIELDS:
        setattr(booking, name, doc[name])
    await db.flush()
    await db.refresh(booking)

    record_persisted("bookings", "update")
    logger.info("booking_updated", booking_id=booking.id, fields=sorted(changed))
    return booking


async def get_booking(db: AsyncSession, booking_id: int) -> Booking:
    booking = await db.get(Booking, booking_id)
    if not booking:
        raise NotFoundError(f"Booking {booking_id} not found")
    return booking


async def list_event_bookings(db: AsyncSession, event_id: int) -> list[Booking]:
    """Get all bookings for an event, oldest first. Uses the event_id index."""
    await get_event(db, event_id)
    result = await db.execute(
        select(Booking)
        .where(Booking.event_id == event_id)
        .order_by(Booking.created_at.asc(), Booking.id.asc())
    )
    return list(result.scalars().all())
