"""Error Hierarchy — verifies codes, statuses and the REST envelope."""

from order_api.core.errors import (
    DatabaseError, DuplicateOrderError, ErrorCategory, ErrorContext,
    OrderServiceError, OrderValidationError, ResourceNotFoundError,
)


def test_not_found_interpolates_resource_and_identifier():
    err = ResourceNotFoundError("Order", "1001")
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert "Order" in err.message and '"1001"' in err.message


def test_error_variants_map_to_http_statuses():
    assert OrderValidationError("bad", "price").http_status == 400
    assert DuplicateOrderError("1001").http_status == 409
    assert DatabaseError("down", "query").http_status == 500


def test_all_variants_share_the_base_type():
    for err in (
        ResourceNotFoundError("Order", "1"),
        OrderValidationError("bad", "price"),
        DuplicateOrderError("1"),
        DatabaseError("down", "query"),
    ):
        assert isinstance(err, OrderServiceError)


def test_duplicate_order_records_order_id_in_context():
    assert DuplicateOrderError("1001").context.order_id == "1001"


def test_to_response_envelope():
    err = ResourceNotFoundError(
        "Item 7 in Order", "1001", ErrorContext(order_id="1001", product_id=7),
    )
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "error"
    assert body["context"] == {"order_id": "1001", "product_id": 7}
    assert body["timestamp"]
