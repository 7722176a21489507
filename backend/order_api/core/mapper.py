"""Order Mapper — pure translation from the inbound payload to the database shape.

Invariants:
    - No IO, no side effects: same payload always yields the same MappedOrder
    - order_id is numeroPedido cut at the first hyphen ("1001-01" -> "1001")
    - creation_date is always timezone-aware UTC; naive input is read as UTC
    - Unparseable dates and non-integer item ids raise OrderValidationError here,
      at the point of failure

Design Decisions:
    - Frozen dataclasses for mapped values: hashable, comparable in tests
    - Wire rendering (to_dict) lives next to the type so the created-order
      response echoes exactly what was persisted
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from order_api.core.errors import ErrorContext, OrderValidationError
from order_api.schemas.order import (
    INT32_MAX, INT32_MIN, ORDER_ID_MAX_LENGTH,
    ItemPayload, OrderCreate, OrderHeaderUpdate,
)


@dataclass(frozen=True)
class MappedItem:
    product_id: int
    quantity: int
    price: float

    def to_dict(self) -> dict:
        return {
            "productId": self.product_id,
            "quantity": self.quantity,
            "price": self.price,
        }


@dataclass(frozen=True)
class MappedHeader:
    value: float
    creation_date: datetime


@dataclass(frozen=True)
class MappedOrder:
    order_id: str
    value: float
    creation_date: datetime
    items: tuple[MappedItem, ...]

    @property
    def header(self) -> MappedHeader:
        return MappedHeader(value=self.value, creation_date=self.creation_date)

    def to_dict(self) -> dict:
        return {
            "orderId": self.order_id,
            "value": self.value,
            "creationDate": to_iso_utc(self.creation_date),
            "items": [item.to_dict() for item in self.items],
        }


def to_iso_utc(value: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with millisecond precision and a Z suffix.

    Naive datetimes (SQLite drops the offset) are taken to already be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def strip_order_suffix(numero_pedido: str) -> str:
    order_id = numero_pedido.split("-", 1)[0].strip()
    if not order_id:
        raise OrderValidationError(
            f"Invalid order number '{numero_pedido}': empty before the first hyphen.",
            "numeroPedido",
        )
    if len(order_id) > ORDER_ID_MAX_LENGTH:
        raise OrderValidationError(
            f"Invalid order number: longer than {ORDER_ID_MAX_LENGTH} characters.",
            "numeroPedido",
        )
    return order_id


def parse_creation_date(raw: str) -> datetime:
    """Parse an ISO-8601 timestamp and normalize it to UTC.

    Offsets that push the instant past year 1 or year 9999 overflow on the
    UTC conversion and are rejected like any other unparseable date.
    """
    try:
        parsed = datetime.fromisoformat(raw.strip())
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        raise OrderValidationError(
            f"Invalid creation date '{raw}': expected an ISO-8601 timestamp.",
            "dataCriacao",
        ) from None


def map_item(item: ItemPayload) -> MappedItem:
    try:
        product_id = int(item.id_item)
    except ValueError:
        raise OrderValidationError(
            f"Invalid item id '{item.id_item}': expected an integer.",
            "idItem",
        ) from None
    if not INT32_MIN <= product_id <= INT32_MAX:
        raise OrderValidationError(
            f"Invalid item id '{item.id_item}': out of range.",
            "idItem",
        )
    return MappedItem(
        product_id=product_id,
        quantity=item.quantidade_item,
        price=item.valor_item,
    )


def map_to_database_format(payload: OrderCreate) -> MappedOrder:
    """Translate an inbound order into the shape the data access layer stores."""
    order_id = strip_order_suffix(payload.numero_pedido)
    try:
        items = tuple(map_item(item) for item in payload.items)
    except OrderValidationError as e:
        e.context = ErrorContext(order_id=order_id)
        raise
    return MappedOrder(
        order_id=order_id,
        value=payload.valor_total,
        creation_date=parse_creation_date(payload.data_criacao),
        items=items,
    )


def map_header_update(payload: OrderHeaderUpdate) -> MappedHeader:
    return MappedHeader(
        value=payload.valor_total,
        creation_date=parse_creation_date(payload.data_criacao),
    )
