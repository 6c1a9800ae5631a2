"""
Event model.

Key design decisions:
- `slug` is derived from the title by the event pipeline and carries a unique index
- `date` and `time` are stored as canonical strings (YYYY-MM-DD, HH:MM)
- `agenda` and `tags` are JSON lists; tags are de-duplicated before writing
"""

from sqlalchemy import Column, Integer, String, JSON, Index
from sqlalchemy.orm import relationship

from devevent.db.base import Base, TimestampMixin


class Event(Base, TimestampMixin):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), nullable=False)
    slug = Column(String(100), nullable=False)
    description = Column(String(1000), nullable=False)
    overview = Column(String(1000), nullable=False)
    image = Column(String(1000), nullable=False)
    venue = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    date = Column(String(255), nullable=False)
    time = Column(String(255), nullable=False)
    mode = Column(String(10), nullable=False)
    audience = Column(String(255), nullable=False)
    agenda = Column(JSON, nullable=False)
    organizer = Column(String(255), nullable=False)
    tags = Column(JSON, nullable=False)

    bookings = relationship("Booking", back_populates="event", lazy="noload")

    __table_args__ = (
        Index("ix_events_slug", "slug", unique=True),
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, slug={self.slug}, date={self.date})>"
