"""
Payment for a ticket. Only the card issuer and last four digits are stored.
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from eventstay.db.base import Base, TimestampMixin


class Payment(Base, TimestampMixin):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    ticket_id = Column(Integer, ForeignKey("tickets.id"), nullable=False, index=True)
    value = Column(Integer, nullable=False)
    card_issuer = Column(String(100), nullable=False)
    card_last_digits = Column(String(4), nullable=False)

    ticket = relationship("Ticket", back_populates="payments")

    def __repr__(self) -> str:
        return f"<Payment(id={self.id}, ticket={self.ticket_id}, value={self.value})>"
