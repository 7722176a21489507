"""Order Repository — one parameterized statement per order/item operation.

Invariants:
    - Every function runs exactly one statement on the session it is given
    - Writes never commit or roll back (the caller owns the transaction)
    - Update/delete return the affected-row count; callers decide what zero means
    - A duplicate orderId surfaces as DuplicateOrderError from insert_order

Design Decisions:
    - Module-level async functions over a repository class: no state to hold,
      the session is the only dependency
    - synchronize_session=False: no ORM objects are loaded, nothing to refresh
"""

from typing import Sequence

from sqlalchemy import Row, delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from order_api.core.errors import DuplicateOrderError
from order_api.core.mapper import MappedHeader, MappedItem, MappedOrder
from order_api.models.item import Item
from order_api.models.order import Order
from order_api.schemas.order import ItemChanges

_ORDER_COLUMNS = (Order.order_id, Order.value, Order.creation_date)
_ITEM_COLUMNS = (Item.product_id, Item.quantity, Item.price)


async def insert_order(db: AsyncSession, order: MappedOrder) -> None:
    try:
        await db.execute(
            insert(Order).values(
                order_id=order.order_id,
                value=order.value,
                creation_date=order.creation_date,
            ),
        )
    except IntegrityError as e:
        raise DuplicateOrderError(order.order_id) from e


async def insert_order_item(
    db: AsyncSession, order_id: str, item: MappedItem,
) -> None:
    await db.execute(
        insert(Item).values(
            order_id=order_id,
            product_id=item.product_id,
            quantity=item.quantity,
            price=item.price,
        ),
    )


async def find_order_by_id(db: AsyncSession, order_id: str) -> Row | None:
    result = await db.execute(
        select(*_ORDER_COLUMNS).where(Order.order_id == order_id),
    )
    return result.one_or_none()


async def find_items_by_order_id(
    db: AsyncSession, order_id: str,
) -> Sequence[Row]:
    result = await db.execute(
        select(*_ITEM_COLUMNS)
        .where(Item.order_id == order_id)
        .order_by(Item.item_id),
    )
    return result.all()


async def find_all_orders(db: AsyncSession) -> Sequence[Row]:
    """All order headers, newest creation date first."""
    result = await db.execute(
        select(*_ORDER_COLUMNS).order_by(Order.creation_date.desc()),
    )
    return result.all()


async def update_order_header(
    db: AsyncSession, order_id: str, header: MappedHeader,
) -> int:
    result = await db.execute(
        update(Order)
        .where(Order.order_id == order_id)
        .values(value=header.value, creation_date=header.creation_date)
        .execution_options(synchronize_session=False),
    )
    return result.rowcount


async def update_order_item(
    db: AsyncSession, order_id: str, product_id: int, changes: ItemChanges,
) -> int:
    result = await db.execute(
        update(Item)
        .where(Item.order_id == order_id, Item.product_id == product_id)
        .values(quantity=changes.quantity, price=changes.price)
        .execution_options(synchronize_session=False),
    )
    return result.rowcount


async def delete_order_header(db: AsyncSession, order_id: str) -> int:
    """Delete the header row; items go with it via ON DELETE CASCADE."""
    result = await db.execute(
        delete(Order)
        .where(Order.order_id == order_id)
        .execution_options(synchronize_session=False),
    )
    return result.rowcount
