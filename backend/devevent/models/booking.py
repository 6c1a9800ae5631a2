"""
Booking model representing an email registration for an event.

Key design decisions:
- The event reference is verified by the booking pipeline before every write
  that sets or changes it; the foreign key is the database-side backstop
- Index on event_id for listing the bookings of one event
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from devevent.db.base import Base, TimestampMixin


class Booking(Base, TimestampMixin):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    email = Column(String(320), nullable=False)

    event = relationship("Event", back_populates="bookings", lazy="noload")

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, event={self.event_id}, email={self.email})>"
