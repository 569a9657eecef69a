"""
Candidate records flowing through the write pipeline.

These are plain immutable values with no storage concerns. Raw input is
loaded with from_mapping(), which ignores keys the schema does not declare;
validators return a normalized copy instead of mutating their input.
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping, Optional, Self, Sequence


@dataclass(frozen=True)
class Record:
    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def merged(self, changes: Mapping[str, Any]) -> Self:
        """Copy with the declared fields in `changes` applied (partial update)."""
        known = {f.name for f in fields(self)}
        return replace(self, **{key: value for key, value in changes.items() if key in known})

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class EventRecord(Record):
    """Candidate Event as supplied by the caller (or as currently stored)."""

    title: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    overview: Optional[str] = None
    image: Optional[str] = None
    venue: Optional[str] = None
    location: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    mode: Optional[str] = None
    audience: Optional[str] = None
    agenda: Optional[Sequence[str]] = None
    organizer: Optional[str] = None
    tags: Optional[Sequence[str]] = None


@dataclass(frozen=True)
class BookingRecord(Record):
    """Candidate Booking. event_id is a weak reference by identifier."""

    event_id: Any = None
    email: Optional[str] = None
