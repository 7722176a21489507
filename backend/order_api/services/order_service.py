"""Order Service — transactional workflows for orders and their items.

Invariants:
    - Every write runs inside db_manager.transaction(): BEGIN, statements,
      COMMIT on success, ROLLBACK before any error propagates
    - The session (and its pooled connection) is released on every exit path
    - Errors from the mapper and the repository propagate unwrapped;
      this layer only adds Not-Found and validation checks
    - Item inserts follow input order; the first failure aborts the rest

Design Decisions:
    - Header update trusts the UPDATE's affected-row count as its only existence
      check: a concurrent delete cannot slip between a check and the write
    - Item update verifies the order outside the transaction so a missing order
      and a missing item report different resources
    - Repository imported as a module: tests can patch single statements
"""

import logging

from order_api.core.errors import (
    ErrorContext, OrderValidationError, ResourceNotFoundError,
)
from order_api.core.mapper import map_header_update, map_to_database_format
from order_api.core.order_format import format_order_response, format_order_summary
from order_api.db import order_repository
from order_api.infrastructure.database import DatabaseSessionManager
from order_api.schemas.order import ItemChanges, OrderCreate, OrderHeaderUpdate

logger = logging.getLogger(__name__)

ORDER_RESOURCE = "Order"


def _order_not_found(order_id: str) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        ORDER_RESOURCE, order_id, ErrorContext(order_id=order_id),
    )


class OrderService:
    """Order workflows over an injected session manager."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def create_order(self, payload: OrderCreate) -> dict:
        """Insert the header and every item atomically.

        Returns {"orderId", "data"} where data is the mapped order as persisted.
        """
        mapped = map_to_database_format(payload)

        async with self._db.transaction() as db:
            await order_repository.insert_order(db, mapped)
            for item in mapped.items:
                await order_repository.insert_order_item(
                    db, mapped.order_id, item,
                )

        logger.info(
            f"Order {mapped.order_id} created",
            extra={"order_id": mapped.order_id, "item_count": len(mapped.items)},
        )
        return {"orderId": mapped.order_id, "data": mapped.to_dict()}

    async def get_order_details(self, order_id: str) -> dict:
        async with self._db.session() as db:
            order_row = await order_repository.find_order_by_id(db, order_id)
            if order_row is None:
                raise _order_not_found(order_id)
            item_rows = await order_repository.find_items_by_order_id(db, order_id)
        return format_order_response(order_row, list(item_rows))

    async def list_all_orders(self) -> list[dict]:
        async with self._db.session() as db:
            rows = await order_repository.find_all_orders(db)
        return [format_order_summary(row) for row in rows]

    async def update_order(self, order_id: str, payload: OrderHeaderUpdate) -> bool:
        """Replace value and creation date of an existing order header."""
        header = map_header_update(payload)

        async with self._db.transaction() as db:
            affected = await order_repository.update_order_header(
                db, order_id, header,
            )
            if affected == 0:
                raise _order_not_found(order_id)

        logger.info(
            f"Order {order_id} header updated", extra={"order_id": order_id},
        )
        return True

    async def update_item_order(
        self, order_id: str, product_id: int, changes: ItemChanges,
    ) -> bool:
        """Update quantity and price of one item, addressed by (order, product)."""
        if changes.quantity is None or changes.price is None:
            raise OrderValidationError(
                "Invalid item update data: 'quantidadeItem' (or 'quantity') and "
                "'valorItem' (or 'price') are required.",
                "quantity" if changes.quantity is None else "price",
                ErrorContext(order_id=order_id, product_id=product_id),
            )

        async with self._db.session() as db:
            order_row = await order_repository.find_order_by_id(db, order_id)
        if order_row is None:
            raise _order_not_found(order_id)

        async with self._db.transaction() as db:
            affected = await order_repository.update_order_item(
                db, order_id, product_id, changes,
            )
            if affected == 0:
                raise ResourceNotFoundError(
                    f"Item {product_id} in {ORDER_RESOURCE}", order_id,
                    ErrorContext(order_id=order_id, product_id=product_id),
                )

        logger.info(
            f"Item {product_id} of order {order_id} updated",
            extra={"order_id": order_id, "product_id": product_id},
        )
        return True

    async def delete_order(self, order_id: str) -> None:
        async with self._db.transaction() as db:
            affected = await order_repository.delete_order_header(db, order_id)
            if affected == 0:
                raise _order_not_found(order_id)

        logger.info(f"Order {order_id} deleted", extra={"order_id": order_id})
