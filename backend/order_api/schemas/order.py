"""Order Schemas — Pydantic models for the inbound order contract.

Invariants:
    - Inbound JSON keeps the client's camelCase Portuguese names
      (numeroPedido, dataCriacao, valorTotal, idItem, quantidadeItem, valorItem)
    - Python attributes are snake_case; aliases generated with to_camel
    - Missing required fields fail here (400) before any mapping or DB access

Design Decisions:
    - ItemUpdate accepts two spellings per field and normalizes them once
      (normalized()), so services never see the compatibility shim
    - idItem accepts str or int: clients send both, the mapper integer-parses it
    - Bounds mirror the column types (String(64), Numeric(12, 2), 32-bit Integer)
      so oversized input is a 400 here instead of a driver DataError
"""

from dataclasses import dataclass
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ORDER_ID_MAX_LENGTH = 64
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
# Numeric(12, 2): ten integer digits, two decimals
MONEY_MAX = 9_999_999_999.99

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
Money = Annotated[
    float, Field(ge=-MONEY_MAX, le=MONEY_MAX, allow_inf_nan=False),
]


class CamelModel(BaseModel):
    """Base for payloads whose wire names are camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ItemPayload(CamelModel):
    """One line item of an inbound order."""
    id_item: str | int
    quantidade_item: Int32
    valor_item: Money


class OrderCreate(CamelModel):
    """Order creation payload — header plus line items."""
    numero_pedido: str
    data_criacao: str
    valor_total: Money
    items: list[ItemPayload]


class OrderHeaderUpdate(CamelModel):
    """Header update payload. Order number and items are accepted but ignored."""
    numero_pedido: str | None = None
    data_criacao: str
    valor_total: Money
    items: list[ItemPayload] | None = None


@dataclass(frozen=True)
class ItemChanges:
    """Normalized item update — either value may still be missing."""
    quantity: int | None
    price: float | None


class ItemUpdate(CamelModel):
    """Item update payload — accepts quantidadeItem/quantity and valorItem/price."""
    quantidade_item: Int32 | None = None
    quantity: Int32 | None = None
    valor_item: Money | None = None
    price: Money | None = None

    def normalized(self) -> ItemChanges:
        """First non-null spelling wins for each field."""
        return ItemChanges(
            quantity=_first_present(self.quantidade_item, self.quantity),
            price=_first_present(self.valor_item, self.price),
        )


def _first_present(*values):
    for v in values:
        if v is not None:
            return v
    return None
