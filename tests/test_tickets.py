"""
Tests for ticket endpoints.
"""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from eventstay.core.errors import ConflictError, NotFoundError
from factories import make_ticket


@pytest.mark.asyncio
async def test_get_ticket(client: AsyncClient, auth_headers, monkeypatch):
    monkeypatch.setattr(
        "eventstay.api.routes.tickets.get_ticket_by_user_id",
        AsyncMock(return_value=make_ticket(status="RESERVED")),
    )

    response = await client.get("/api/v1/tickets", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["status"] == "RESERVED"
    assert response.json()["ticket_type"]["includes_hotel"] is True


@pytest.mark.asyncio
async def test_reserve_ticket(client: AsyncClient, auth_headers, user_id, db, monkeypatch):
    create = AsyncMock(return_value=make_ticket(status="RESERVED", ticket_type_id=3))
    monkeypatch.setattr("eventstay.api.routes.tickets.create_ticket", create)

    response = await client.post("/api/v1/tickets", json={"ticket_type_id": 3}, headers=auth_headers)

    assert response.status_code == 201
    assert response.json()["status"] == "RESERVED"
    create.assert_awaited_once_with(db, user_id, 3)


@pytest.mark.asyncio
@pytest.mark.parametrize("error,status_code", [(ConflictError(), 409), (NotFoundError(), 404)])
async def test_reserve_ticket_error_status(client: AsyncClient, auth_headers, monkeypatch, error, status_code):
    monkeypatch.setattr("eventstay.api.routes.tickets.create_ticket", AsyncMock(side_effect=error))

    response = await client.post("/api/v1/tickets", json={"ticket_type_id": 3}, headers=auth_headers)

    assert response.status_code == status_code
    assert response.json()["kind"] == error.kind
