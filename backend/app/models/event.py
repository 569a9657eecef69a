"""
Event persistence model.

Key design decisions:
- `slug` carries a unique index; a duplicate surfaces as IntegrityError and
  is mapped to DuplicateKeyError by the gateway
- `date` and `time` are stored as canonical strings (YYYY-MM-DD, HH:MM),
  not native types, so stored values are exactly what validation produced
- `agenda` and `tags` keep their order as JSON arrays
- Free-text fields are unbounded Text; validation sets no length limit, so
  the column must not either
- No relationship to bookings: they reference events by id only
"""

from sqlalchemy import Column, Integer, String, Text, JSON, Index

from app.db.base import Base, TimestampMixin


class Event(Base, TimestampMixin):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    slug = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    overview = Column(Text, nullable=False)
    image = Column(Text, nullable=False)
    venue = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    date = Column(String(10), nullable=False)
    time = Column(String(5), nullable=False)
    mode = Column(Text, nullable=False)
    audience = Column(Text, nullable=False)
    agenda = Column(JSON, nullable=False)
    organizer = Column(Text, nullable=False)
    tags = Column(JSON, nullable=False)

    __table_args__ = (
        Index("ix_events_slug", "slug", unique=True),
        # Listing upcoming events orders by the canonical date string
        Index("ix_events_date", "date"),
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, slug={self.slug}, date={self.date})>"
