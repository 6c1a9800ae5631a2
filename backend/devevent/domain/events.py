"""
Event document pipeline: normalize -> validate.

Both steps work on plain mappings of field name to value so they can be
exercised without a database. The storage layer (devevent.services.event_service)
runs prepare_event() and writes whatever it returns.
"""

from typing import Any, Collection, Mapping

from devevent.core.errors import ValidationError
from devevent.domain.normalize import generate_slug, normalize_date, normalize_time

EVENT_MODES = ("online", "offline", "hybrid")

# Free-text fields that must be present and must not trim to empty
REQUIRED_TEXT_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "audience",
    "organizer",
)

STRING_FIELDS = REQUIRED_TEXT_FIELDS + ("slug", "mode")
LIST_FIELDS = ("agenda", "tags")
EVENT_FIELDS = STRING_FIELDS + LIST_FIELDS

MAX_LENGTHS = {
    "title": 100,
    "slug": 100,
    "description": 1000,
    "overview": 1000,
    "image": 1000,
}


def changed_fields(current: Mapping[str, Any], updates: Mapping[str, Any]) -> set[str]:
    """Names in ``updates`` whose value differs from ``current``."""
    return {name for name, value in updates.items() if current.get(name) != value}


def _clean_items(items: list, unique: bool = False) -> list:
    cleaned = []
    for item in items:
        if isinstance(item, str):
            item = item.strip()
            if not item:
                continue
        if unique and item in cleaned:
            continue
        cleaned.append(item)
    return cleaned


def normalize_event(values: Mapping[str, Any], changed: Collection[str]) -> dict[str, Any]:
    """
    Return a normalized copy of an event document.

    ``changed`` names the fields that are new or modified in this write; on
    create that is every field. The slug is rebuilt only when the title
    changed or no slug is stored, so existing slugs survive unrelated edits.
    """
    doc = dict(values)

    for name in STRING_FIELDS:
        if isinstance(doc.get(name), str):
            doc[name] = doc[name].strip()

    if isinstance(doc.get("agenda"), list):
        doc["agenda"] = _clean_items(doc["agenda"])
    if isinstance(doc.get("tags"), list):
        doc["tags"] = _clean_items(doc["tags"], unique=True)

    if "title" in changed or not doc.get("slug"):
        title = doc.get("title")
        doc["slug"] = generate_slug(title) if isinstance(title, str) else ""

    if "date" in changed and isinstance(doc.get("date"), str):
        doc["date"] = normalize_date(doc["date"])

    if "time" in changed and isinstance(doc.get("time"), str):
        doc["time"] = normalize_time(doc["time"])

    return doc


def validate_event(doc: Mapping[str, Any]) -> None:
    """Raise ValidationError for the first field that breaks a constraint."""
    for name in REQUIRED_TEXT_FIELDS:
        value = doc.get(name)
        if value is None:
            raise ValidationError(f"Event {name} is required", field=name)
        if not isinstance(value, str):
            raise ValidationError(f"Field '{name}' must be a string", field=name)
        if value.strip() == "":
            raise ValidationError(f"Field '{name}' cannot be empty", field=name)

    if not doc.get("slug"):
        raise ValidationError(
            "Title must contain at least one letter or digit to build a slug",
            field="slug",
        )

    for name, limit in MAX_LENGTHS.items():
        if len(doc[name]) > limit:
            raise ValidationError(
                f"{name.capitalize()} must be less than {limit} characters", field=name
            )

    if doc.get("mode") not in EVENT_MODES:
        raise ValidationError("Mode must be either online, offline, or hybrid", field="mode")

    if doc.get("agenda") is None:
        raise ValidationError("Event agenda is required", field="agenda")
    if not doc["agenda"]:
        raise ValidationError("Agenda must contain at least one item", field="agenda")

    if doc.get("tags") is None:
        raise ValidationError("Event tags are required", field="tags")
    if not doc["tags"]:
        raise ValidationError("Tags must contain at least one item", field="tags")


def prepare_event(values: Mapping[str, Any], changed: Collection[str]) -> dict[str, Any]:
    """Normalize then validate; returns the document to persist."""
    doc = normalize_event(values, changed)
    validate_event(doc)
    return doc
