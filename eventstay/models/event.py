"""
The event users register for. The platform serves a single current event.
"""

from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint

from eventstay.db.base import Base, TimestampMixin


class Event(Base, TimestampMixin):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    background_image_url = Column(String(500), nullable=False)
    logo_image_url = Column(String(500), nullable=False)
    starts_at = Column(DateTime(timezone=True), nullable=False)
    ends_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        CheckConstraint("ends_at > starts_at", name="check_event_dates_ordered"),
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title={self.title})>"
