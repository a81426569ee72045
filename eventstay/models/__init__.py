from eventstay.models.user import User
from eventstay.models.event import Event
from eventstay.models.enrollment import Enrollment
from eventstay.models.ticket import Ticket, TicketStatus, TicketType
from eventstay.models.payment import Payment
from eventstay.models.hotel import Hotel, Room
from eventstay.models.booking import Booking

__all__ = [
    "User", "Event", "Enrollment",
    "Ticket", "TicketStatus", "TicketType", "Payment",
    "Hotel", "Room", "Booking",
]
