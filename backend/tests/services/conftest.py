"""Service test fixtures — in-memory SQLite session manager + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys on
    - db_manager patched at module level so get_db_manager() and the readiness
      check both see the test manager
    - order_counts reads the tables directly, bypassing the service under test

Design Decisions:
    - SQLite in-memory: fast, no external dependency; the manager enables
      PRAGMA foreign_keys so cascade deletes match PostgreSQL
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from order_api.infrastructure.database import DatabaseSessionManager
import order_api.infrastructure.database as db_module
from order_api.main import app
from order_api.models.item import Item
from order_api.models.order import Order
from order_api.schemas.order import OrderCreate
from order_api.services.order_service import OrderService
from tests.services.order_payloads import make_payload


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
def order_service(db_manager):
    return OrderService(db_manager)


@pytest.fixture
async def seed_order(order_service):
    """Order 1001 with products 7 and 8."""
    await order_service.create_order(OrderCreate.model_validate(make_payload()))
    return "1001"


@pytest.fixture
def order_counts(db_manager):
    """Return (orders, items) row counts straight from the tables."""

    async def _counts(order_id: str | None = None) -> tuple[int, int]:
        orders_q = select(func.count()).select_from(Order)
        items_q = select(func.count()).select_from(Item)
        if order_id is not None:
            orders_q = orders_q.where(Order.order_id == order_id)
            items_q = items_q.where(Item.order_id == order_id)
        async with db_manager.session() as db:
            orders = (await db.execute(orders_q)).scalar_one()
            items = (await db.execute(items_q)).scalar_one()
        return orders, items

    return _counts


@pytest.fixture
async def client(db_manager, monkeypatch):
    """FastAPI test client wired to the test session manager."""
    monkeypatch.setattr(db_module, "db_manager", db_manager)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
