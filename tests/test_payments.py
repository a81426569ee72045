"""
Tests for payment endpoints.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from eventstay.core.errors import ConflictError, UnauthorizedError

CARD_DATA = {
    "issuer": "VISA",
    "number": "4111111111111234",
    "name": "Test User",
    "expiration_date": "2030-01-01",
    "cvv": "124",
}


@pytest.mark.asyncio
async def test_get_payment_of_another_user(client: AsyncClient, auth_headers, monkeypatch):
    monkeypatch.setattr(
        "eventstay.api.routes.payments.get_payment_by_ticket_id",
        AsyncMock(side_effect=UnauthorizedError("Ticket does not belong to the user")),
    )

    response = await client.get("/api/v1/payments?ticket_id=20", headers=auth_headers)

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_process_payment(client: AsyncClient, auth_headers, user_id, db, monkeypatch):
    payment = SimpleNamespace(id=1, ticket_id=20, value=1000, card_issuer="VISA", card_last_digits="1234")
    process = AsyncMock(return_value=payment)
    monkeypatch.setattr("eventstay.api.routes.payments.process_payment", process)

    response = await client.post(
        "/api/v1/payments/process",
        json={"ticket_id": 20, "card_data": CARD_DATA},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["card_last_digits"] == "1234"
    args = process.await_args.args
    assert args[:3] == (db, 20, user_id)
    assert args[3].issuer == "VISA"


@pytest.mark.asyncio
async def test_process_payment_of_paid_ticket(client: AsyncClient, auth_headers, monkeypatch):
    monkeypatch.setattr(
        "eventstay.api.routes.payments.process_payment",
        AsyncMock(side_effect=ConflictError("Ticket is already paid")),
    )

    response = await client.post(
        "/api/v1/payments/process",
        json={"ticket_id": 20, "card_data": CARD_DATA},
        headers=auth_headers,
    )

    assert response.status_code == 409
