"""Order ORM — persists the order header.

Invariants:
    - order_id is the client order number without its "-NN" suffix, primary key
    - value and creation_date are non-nullable

Design Decisions:
    - String primary key: order numbers come from the client, no surrogate id
    - Numeric for money: exact storage, services coerce to float on the way out
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, Numeric, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from order_api.db.base import Base


class Order(Base):
    """Order header — owns its items through the items.order_id cascade."""
    __tablename__ = "orders"

    order_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    creation_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True,
    )
