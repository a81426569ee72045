"""
Lightweight stand-ins for ORM rows returned by mocked repositories, and
helpers that insert real rows for the database-backed tests.
"""

from datetime import date
from types import SimpleNamespace
from eventstay.models import Booking, Enrollment, Hotel, Room, Ticket, TicketStatus, TicketType, User


def make_ticket(status: str = "PAID", includes_hotel: bool = True, is_remote: bool = False, **fields):
    ticket_type = SimpleNamespace(
        id=fields.pop("ticket_type_id", 3),
        name="In person + Hotel",
        price=fields.pop("price", 60000),
        is_remote=is_remote,
        includes_hotel=includes_hotel,
    )
    return SimpleNamespace(
        id=fields.pop("id", 9),
        status=status,
        ticket_type_id=ticket_type.id,
        enrollment_id=fields.pop("enrollment_id", 21),
        ticket_type=ticket_type,
        **fields,
    )


def make_room(room_id: int = 40, capacity: int = 3, hotel_id: int = 1):
    return SimpleNamespace(id=room_id, name=f"Room {room_id}", capacity=capacity, hotel_id=hotel_id)


def make_booking(booking_id: int = 20, room_id: int = 10, user_id: int = 35):
    return SimpleNamespace(id=booking_id, room_id=room_id, user_id=user_id, room=make_room(room_id))


# Rows for tests running on the db_session fixture

async def add_user(session, user_id: int) -> User:
    user = User(id=user_id, email=f"user{user_id}@example.com", hashed_password="unused")
    session.add(user)
    await session.flush()
    return user


async def add_ticket_holder(
    session,
    user_id: int,
    status: TicketStatus = TicketStatus.PAID,
    includes_hotel: bool = True,
    price: int = 60000,
) -> Ticket:
    """A user with an enrollment and a ticket; the defaults make the user eligible to book."""
    await add_user(session, user_id)
    enrollment = Enrollment(
        id=user_id,
        user_id=user_id,
        name=f"Guest {user_id}",
        cpf="12345678901",
        birthday=date(1990, 5, 17),
        phone="21999990000",
    )
    ticket_type = TicketType(name="In person + Hotel", price=price, is_remote=False, includes_hotel=includes_hotel)
    ticket = Ticket(ticket_type=ticket_type, enrollment=enrollment, status=status.value)
    session.add_all([enrollment, ticket])
    await session.flush()
    return ticket


async def add_room(session, room_id: int, capacity: int = 3) -> Room:
    hotel = Hotel(name="Resort", image="https://example.com/resort.png")
    room = Room(id=room_id, name=f"Room {room_id}", capacity=capacity, hotel=hotel)
    session.add(room)
    await session.flush()
    return room


async def add_booking(session, booking_id: int, user_id: int, room_id: int) -> Booking:
    booking = Booking(id=booking_id, user_id=user_id, room_id=room_id)
    session.add(booking)
    await session.flush()
    return booking
