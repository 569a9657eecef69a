"""
Booking persistence model.

Key design decisions:
- `event_id` is a weak reference: no foreign key, no cascade. Existence is
  checked once at write time by the booking validator
- Index on `event_id` for listing bookings of an event
- `email` is stored already trimmed and lowercased, as unbounded Text
"""

from sqlalchemy import Column, Integer, Text, Index

from app.db.base import Base, TimestampMixin


class Booking(Base, TimestampMixin):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, nullable=False)
    email = Column(Text, nullable=False)

    __table_args__ = (
        Index("ix_bookings_event_id", "event_id"),
    )

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, event={self.event_id}, email={self.email})>"
