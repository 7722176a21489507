"""Order Formatting — verifies row-to-response coercions."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from types import SimpleNamespace

from order_api.core.order_format import format_order_response, format_order_summary


def _order_row(**kwargs):
    defaults = dict(
        order_id="1001", value=Decimal("99.50"),
        creation_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def test_summary_coerces_decimal_and_date():
    summary = format_order_summary(_order_row())
    assert summary == {
        "orderId": "1001", "value": 99.5, "creationDate": "2024-01-01T00:00:00.000Z",
    }
    assert type(summary["value"]) is float


def test_summary_converts_aware_dates_to_utc():
    row = _order_row(
        creation_date=datetime(2024, 1, 1, 21, tzinfo=timezone(timedelta(hours=-3))),
    )
    assert format_order_summary(row)["creationDate"] == "2024-01-02T00:00:00.000Z"


def test_response_includes_items_in_row_order():
    items = [
        SimpleNamespace(product_id=8, quantity=1, price=Decimal("79.50")),
        SimpleNamespace(product_id=7, quantity=2, price=Decimal("10.00")),
    ]
    order = format_order_response(_order_row(), items)
    assert order["items"] == [
        {"productId": 8, "quantity": 1, "price": 79.5},
        {"productId": 7, "quantity": 2, "price": 10.0},
    ]


def test_response_with_no_items():
    assert format_order_response(_order_row(), [])["items"] == []
