"""Item ORM — persists one order line item.

Invariants:
    - Always belongs to an Order (order_id FK)
    - (order_id, product_id) assumed unique per order for update targeting (not enforced)

Design Decisions:
    - ON DELETE CASCADE at the FK: deleting an order removes its items in the store,
      services never delete items explicitly
"""

from decimal import Decimal

from sqlalchemy import String, Integer, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from order_api.db.base import Base


class Item(Base):
    """Item entity — a product line within an order."""
    __tablename__ = "items"

    item_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    order_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("orders.order_id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    product_id: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
