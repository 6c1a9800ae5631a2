"""
Booking document pipeline: normalize -> validate -> check event reference.

The reference check takes an EventResolver instead of touching the events
table so bookings can be tested without event storage.
"""

import re
from typing import Any, Collection, Mapping

from devevent.core.errors import EventReferenceError, ValidationError
from devevent.services.interfaces import EventResolver

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


def normalize_booking(values: Mapping[str, Any]) -> dict[str, Any]:
    doc = dict(values)
    if isinstance(doc.get("email"), str):
        doc["email"] = doc["email"].strip().lower()
    return doc


def validate_booking(doc: Mapping[str, Any]) -> None:
    if doc.get("event_id") is None:
        raise ValidationError("Event ID is required", field="event_id")

    email = doc.get("email")
    if not email:
        raise ValidationError("Email is required", field="email")
    if not isinstance(email, str) or not EMAIL_PATTERN.fullmatch(email):
        raise ValidationError("Please provide a valid email address", field="email")


async def check_event_reference(event_id: int, resolver: EventResolver) -> None:
    """Raise EventReferenceError unless ``event_id`` resolves to an event."""
    event = await resolver.resolve(event_id)
    if event is None:
        raise EventReferenceError(event_id)


async def prepare_booking(
    values: Mapping[str, Any],
    changed: Collection[str],
    resolver: EventResolver,
) -> dict[str, Any]:
    """
    Normalize, validate and, when the event reference is new or changed,
    verify the event exists. Returns the document to persist.
    """
    doc = normalize_booking(values)
    validate_booking(doc)
    if "event_id" in changed:
        await check_event_reference(doc["event_id"], resolver)
    return doc
