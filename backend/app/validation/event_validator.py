"""
Event validation and normalization.

validate_event() runs before every Event create/update reaches storage.
Each step is a hard failure: the first violated invariant raises and no
normalized value is applied anywhere.

  1. Required text fields are non-empty strings (trimmed on output)
  2. agenda and tags are non-empty lists of non-blank strings
  3. date parses as a calendar date -> stored as YYYY-MM-DD
  4. time is H:MM / HH:MM within 0-23 / 0-59 -> stored as HH:MM
  5. slug is re-derived from the title when the title changed or no
     slug exists yet

Slug uniqueness is not checked here. The storage unique index rejects a
duplicate at commit time (DuplicateKeyError).
"""

import re
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Optional

from dateutil import parser as dtp

from app.core.errors import (
    InvalidArrayFieldError,
    InvalidDateError,
    InvalidSlugError,
    InvalidTimeError,
    MissingFieldError,
)
from app.validation.records import EventRecord
from app.validation.slug import slugify

# Stored trimmed
TEXT_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "mode",
    "audience",
    "organizer",
)
# Checked for presence in the same pass, normalized separately
REQUIRED_STRING_FIELDS = TEXT_FIELDS + ("date", "time")
ARRAY_FIELDS = ("agenda", "tags")

_TIME_RE = re.compile(r"^([0-9]{1,2}):([0-9]{1,2})$")

# Two fill-in dates that differ in every calendar component
_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2001, 2, 2)


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def _assert_non_empty_string(value: Any, field: str) -> None:
    if not _is_non_empty_string(value):
        raise MissingFieldError(field, value)


def _assert_non_empty_string_list(value: Any, field: str) -> None:
    # A bare string is a sequence too, but never a valid list of entries
    if (
        isinstance(value, (str, bytes))
        or not isinstance(value, (list, tuple))
        or len(value) == 0
        or not all(_is_non_empty_string(item) for item in value)
    ):
        raise InvalidArrayFieldError(field, value)


def normalize_date(value: str) -> str:
    """
    Parse a date string and return its canonical YYYY-MM-DD form.

    dateutil fills any component the input lacks from `default`, so the
    value is parsed against two defaults that differ in year, month and
    day. Inputs without a full calendar date ("10:30", "Monday", "March")
    give two different days and are rejected.
    """
    text = value.strip()
    try:
        parsed = dtp.parse(text, default=_DEFAULT_A)
        alternate = dtp.parse(text, default=_DEFAULT_B)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(value) from exc

    if parsed.date() != alternate.date():
        raise InvalidDateError(value)

    # Offset-aware inputs are pinned to their UTC calendar day
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def normalize_time(value: str) -> str:
    """Validate a 24-hour H:MM / HH:MM string and zero-pad it."""
    match = _TIME_RE.match(value.strip())
    if not match:
        raise InvalidTimeError(value)

    hours, minutes = int(match.group(1)), int(match.group(2))
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise InvalidTimeError(value, reason="Hours must be 0-23 and minutes 0-59.")
    return f"{hours:02d}:{minutes:02d}"


def validate_event(
    candidate: EventRecord,
    previous: Optional[EventRecord] = None,
) -> EventRecord:
    """
    Validate a candidate Event and return its normalized copy.

    Args:
        candidate: full record as it should look after the write
        previous: the stored record when updating, None when creating

    Raises:
        MissingFieldError, InvalidArrayFieldError, InvalidDateError,
        InvalidTimeError, InvalidSlugError
    """
    for field in REQUIRED_STRING_FIELDS:
        _assert_non_empty_string(getattr(candidate, field), field)

    for field in ARRAY_FIELDS:
        _assert_non_empty_string_list(getattr(candidate, field), field)

    date = normalize_date(candidate.date)
    time = normalize_time(candidate.time)

    trimmed = {field: getattr(candidate, field).strip() for field in TEXT_FIELDS}
    title = trimmed["title"]

    title_changed = previous is None or (previous.title or "").strip() != title
    slug = candidate.slug
    if title_changed or not slug:
        slug = slugify(title)
        if not slug:
            raise InvalidSlugError(title)

    return replace(
        candidate,
        **trimmed,
        slug=slug,
        date=date,
        time=time,
        agenda=list(candidate.agenda),
        tags=list(candidate.tags),
    )
