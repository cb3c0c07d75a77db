"""Test data helpers."""
from datetime import date
from decimal import Decimal

from httpx import AsyncClient

from app.db import models


async def register_user(client: AsyncClient, email: str = "asha@example.com", password: str = "secret") -> dict:
    """Register a user and return the headers the client sends afterwards."""
    response = await client.post(
        "/api/v1/auth/register",
        json={"username": email.split("@")[0], "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return {"User-Id": str(response.json()["id"])}


def make_transaction(amount, type="expense", category_id=4, day=1, id=None):
    """Unsaved ORM row, enough for the pure aggregation functions."""
    return models.Transaction(
        id=id,
        user_id=1,
        category_id=category_id,
        amount=Decimal(str(amount)),
        type=models.TransactionType(type),
        date=date(2025, 1, day),
    )


def make_budget(category_id, limit):
    return models.Budget(user_id=1, category_id=category_id, limit_amount=Decimal(str(limit)))
