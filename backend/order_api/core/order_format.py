"""Order Formatting — database rows to camelCase response payloads.

Invariants:
    - value and price always leave as float (Numeric columns return Decimal)
    - creationDate always leaves as ISO-8601 UTC with a Z suffix
    - Item order follows the row order handed in
"""

from typing import Any

from order_api.core.mapper import to_iso_utc


def format_order_summary(order_row: Any) -> dict:
    return {
        "orderId": order_row.order_id,
        "value": float(order_row.value),
        "creationDate": to_iso_utc(order_row.creation_date),
    }


def format_item(item_row: Any) -> dict:
    return {
        "productId": item_row.product_id,
        "quantity": item_row.quantity,
        "price": float(item_row.price),
    }


def format_order_response(order_row: Any, item_rows: list[Any]) -> dict:
    """Header fields plus the full item list."""
    return {
        **format_order_summary(order_row),
        "items": [format_item(item) for item in item_rows],
    }
