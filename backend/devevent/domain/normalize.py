"""
Field normalizers for event documents.

None of these raise: when a value cannot be canonicalized it is returned
unchanged and the validators in devevent.domain.events decide whether it is
acceptable.
"""

import re
from datetime import datetime, timezone

_SLUG_STRIP = re.compile(r"[^\w\s-]", re.ASCII)
_SLUG_SEPARATORS = re.compile(r"[\s_-]+", re.ASCII)

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2})?(?:\s*(am|pm))?$", re.IGNORECASE | re.ASCII)

# Written forms tried after ISO 8601
DATE_FORMATS = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%a, %d %b %Y",
    "%A, %B %d, %Y",
    "%m/%d/%Y",
    "%Y/%m/%d",
    "%Y.%m.%d",
)


def generate_slug(title: str) -> str:
    """
    Build a URL-safe slug from a title.

    "Next.js Conf 2026!!" -> "nextjs-conf-2026"
    """
    slug = title.lower().strip()
    slug = _SLUG_STRIP.sub("", slug)
    slug = _SLUG_SEPARATORS.sub("-", slug)
    return slug.strip("-")


def _parse_date(value: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        pass
    else:
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc)
        return parsed

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise ValueError(f"Unrecognized date: {value!r}")


def normalize_date(value: str) -> str:
    """Return ``YYYY-MM-DD`` for a parseable date, else the input unchanged."""
    cleaned = " ".join(value.split())
    if not cleaned:
        return value
    try:
        return _parse_date(cleaned).date().isoformat()
    except ValueError:
        return value


def normalize_time(value: str) -> str:
    """Return 24-hour ``HH:MM`` for a recognized time, else the input unchanged."""
    match = _TIME_PATTERN.match(value.strip())
    if not match:
        return value

    hours = int(match.group(1))
    minutes = int(match.group(2))
    period = (match.group(3) or "").lower()

    if period == "pm" and hours != 12:
        hours += 12
    elif period == "am" and hours == 12:
        hours = 0

    if 0 <= hours <= 23 and 0 <= minutes <= 59:
        return f"{hours:02d}:{minutes:02d}"
    return value
