from eventstay.schemas.user import UserCreate, UserResponse, UserLogin, SessionResponse
from eventstay.schemas.event import EventResponse
from eventstay.schemas.enrollment import EnrollmentUpsert, EnrollmentResponse
from eventstay.schemas.ticket import TicketCreate, TicketResponse, TicketTypeResponse
from eventstay.schemas.payment import CardData, PaymentProcess, PaymentResponse
from eventstay.schemas.hotel import HotelResponse, HotelWithRoomsResponse, RoomResponse
from eventstay.schemas.booking import BookingRequest, BookingResponse, BookingIdResponse

__all__ = [
    "UserCreate", "UserResponse", "UserLogin", "SessionResponse",
    "EventResponse",
    "EnrollmentUpsert", "EnrollmentResponse",
    "TicketCreate", "TicketResponse", "TicketTypeResponse",
    "CardData", "PaymentProcess", "PaymentResponse",
    "HotelResponse", "HotelWithRoomsResponse", "RoomResponse",
    "BookingRequest", "BookingResponse", "BookingIdResponse",
]
