"""
Booking, ticket and payment flows on a real database session.

These run the repositories for real: the row-locked room read, the booking
upsert, the unique keys on bookings.user_id and tickets.enrollment_id, and the
ticket status update.
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from eventstay.core.errors import CannotBookError, ConflictError, NotFoundError
from eventstay.models import TicketStatus
from eventstay.repositories import booking_repository, payment_repository, ticket_repository
from eventstay.schemas.payment import CardData
from eventstay.services import booking_service, payment_service, ticket_service
from factories import add_booking, add_room, add_ticket_holder, add_user

GUEST_ID = 35


@pytest.mark.asyncio
async def test_room_fills_up_at_capacity(db_session):
    await add_room(db_session, 40, capacity=3)
    for occupant_id in (1, 2):
        await add_user(db_session, occupant_id)
        await add_booking(db_session, booking_id=100 + occupant_id, user_id=occupant_id, room_id=40)
    await add_ticket_holder(db_session, GUEST_ID)
    await add_ticket_holder(db_session, GUEST_ID + 1)

    booking = await booking_service.book_room(db_session, GUEST_ID, 40)

    assert booking.room_id == 40
    assert booking.user_id == GUEST_ID
    with pytest.raises(CannotBookError):
        await booking_service.book_room(db_session, GUEST_ID + 1, 40)
    assert len(await booking_repository.find_by_room_id(db_session, 40)) == 3


@pytest.mark.asyncio
async def test_book_missing_room(db_session):
    await add_ticket_holder(db_session, GUEST_ID)

    with pytest.raises(NotFoundError):
        await booking_service.book_room(db_session, GUEST_ID, 40)


@pytest.mark.asyncio
async def test_book_room_with_unpaid_ticket(db_session):
    await add_room(db_session, 40)
    await add_ticket_holder(db_session, GUEST_ID, status=TicketStatus.RESERVED)

    with pytest.raises(CannotBookError):
        await booking_service.book_room(db_session, GUEST_ID, 40)
    assert await booking_repository.find_by_room_id(db_session, 40) == []


@pytest.mark.asyncio
async def test_change_booking_room_rewrites_the_booking(db_session):
    await add_room(db_session, 10)
    await add_room(db_session, 99)
    await add_user(db_session, GUEST_ID)
    await add_booking(db_session, booking_id=20, user_id=GUEST_ID, room_id=10)

    updated = await booking_service.change_booking_room(db_session, GUEST_ID, 99)

    assert updated.id == 20
    assert updated.room_id == 99
    booking = await booking_service.get_booking(db_session, GUEST_ID)
    assert booking.id == 20
    assert booking.room.id == 99
    assert await booking_repository.find_by_room_id(db_session, 10) == []


@pytest.mark.asyncio
async def test_second_booking_is_rejected(db_session):
    await add_room(db_session, 10)
    await add_room(db_session, 99)
    await add_ticket_holder(db_session, GUEST_ID)
    await booking_service.book_room(db_session, GUEST_ID, 10)

    with pytest.raises(CannotBookError):
        await booking_service.book_room(db_session, GUEST_ID, 99)


@pytest.mark.asyncio
async def test_concurrent_first_booking_hits_unique_key(db_session, monkeypatch):
    await add_room(db_session, 10)
    await add_room(db_session, 99)
    await add_ticket_holder(db_session, GUEST_ID)
    await add_booking(db_session, booking_id=20, user_id=GUEST_ID, room_id=10)
    # The other request's booking is not visible yet when this one checks
    monkeypatch.setattr(booking_repository, "find_by_user_id", AsyncMock(return_value=None))

    with pytest.raises(CannotBookError):
        await booking_service.book_room(db_session, GUEST_ID, 99)


@pytest.mark.asyncio
async def test_get_booking_endpoint_returns_room(db_client: AsyncClient, db_session, auth_headers, user_id):
    await add_room(db_session, 10, capacity=2)
    await add_user(db_session, user_id)
    await add_booking(db_session, booking_id=20, user_id=user_id, room_id=10)

    response = await db_client.get("/api/v1/booking", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 20
    assert data["room"]["id"] == 10
    assert data["room"]["capacity"] == 2


@pytest.mark.asyncio
async def test_create_ticket_twice_is_conflict(db_session):
    held = await add_ticket_holder(db_session, GUEST_ID, status=TicketStatus.RESERVED)

    with pytest.raises(ConflictError):
        await ticket_service.create_ticket(db_session, GUEST_ID, held.ticket_type_id)


@pytest.mark.asyncio
async def test_create_ticket_of_unknown_type(db_session):
    held = await add_ticket_holder(db_session, GUEST_ID)

    with pytest.raises(NotFoundError):
        await ticket_service.create_ticket(db_session, GUEST_ID, held.ticket_type_id + 100)


@pytest.mark.asyncio
async def test_process_payment_marks_ticket_paid(db_session):
    ticket = await add_ticket_holder(db_session, GUEST_ID, status=TicketStatus.RESERVED, price=60000)
    card_data = CardData(
        issuer="MASTERCARD",
        number="5555555555554444",
        name="Guest",
        expiration_date=date(2030, 1, 1),
        cvv="123",
    )

    payment = await payment_service.process_payment(db_session, ticket.id, GUEST_ID, card_data)

    assert payment.value == 60000
    assert payment.card_last_digits == "4444"
    await db_session.refresh(ticket)
    assert ticket.status == TicketStatus.PAID
    assert (await payment_repository.find_by_ticket_id(db_session, ticket.id)).id == payment.id

    with pytest.raises(ConflictError):
        await payment_service.process_payment(db_session, ticket.id, GUEST_ID, card_data)


@pytest.mark.asyncio
async def test_mark_as_paid(db_session):
    ticket = await add_ticket_holder(db_session, GUEST_ID, status=TicketStatus.RESERVED)

    await ticket_repository.mark_as_paid(db_session, ticket.id)

    reloaded = await ticket_repository.find_with_type_by_id(db_session, ticket.id)
    assert reloaded.status == TicketStatus.PAID.value
    assert reloaded.ticket_type.includes_hotel is True
