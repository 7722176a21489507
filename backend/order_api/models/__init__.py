"""ORM Models — SQLAlchemy declarative models for orders and items.

Invariants:
    - All models inherit from Base (db/base.py)
    - Order is the aggregate root; items scoped by order_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from order_api.models.order import Order  # noqa: F401
from order_api.models.item import Item  # noqa: F401
