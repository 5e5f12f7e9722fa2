import pytest

WOO = {"x-wgss-source": "woo"}


def test_reduce_eligible_product(client, make_product, fetch_products, procedure_calls):
    make_product("ABC", stock=10)

    response = client.post("/api/stock/reduce", json={"sku": "ABC", "qty": 2}, headers=WOO)

    assert response.status_code == 200
    assert response.json() == {"reduced": True}
    assert procedure_calls["reduce"] == [("ABC", 2)]
    product = fetch_products("ABC")[0]
    assert product.stock_quantity == "8"
    assert product.is_in_stock is True


def test_reduce_bundle_is_ignored(client, make_product, fetch_products, procedure_calls):
    make_product("ABC", stock=10, is_bundle=True)

    response = client.post("/api/stock/reduce", json={"sku": "ABC", "qty": 2}, headers=WOO)

    assert response.status_code == 200
    assert response.json() == {"ignored": True}
    assert procedure_calls["reduce"] == []
    assert fetch_products("ABC")[0].stock_quantity == "10"


def test_reduce_leaves_bundle_sharing_sku_untouched(client, make_product, fetch_products, fetch_logs):
    make_product("ABC", stock=10)
    make_product("ABC", stock=10, is_bundle=True)

    response = client.post("/api/stock/reduce", json={"sku": "ABC", "qty": 2}, headers=WOO)

    assert response.json() == {"reduced": True}
    single, bundle = fetch_products("ABC")
    assert single.stock_quantity == "8"
    assert bundle.stock_quantity == "10"
    assert fetch_logs("ABC")[0].success is True


def test_reduce_non_global_is_ignored(client, make_product, fetch_products, procedure_calls):
    make_product("ABC", stock=10, inventory_type="Location")

    response = client.post("/api/stock/reduce", json={"sku": "ABC", "qty": 2}, headers=WOO)

    assert response.json() == {"ignored": True}
    assert procedure_calls["reduce"] == []
    assert fetch_products("ABC")[0].stock_quantity == "10"


def test_reduce_unknown_sku_is_ignored(client, procedure_calls):
    response = client.post("/api/stock/reduce", json={"sku": "NOPE", "qty": 1}, headers=WOO)

    assert response.status_code == 200
    assert response.json() == {"ignored": True}
    assert procedure_calls["reduce"] == []


def test_reduce_ambiguous_sku_is_ignored(client, make_product, procedure_calls):
    make_product("DUP", stock=4)
    make_product("DUP", stock=6)

    response = client.post("/api/stock/reduce", json={"sku": "DUP", "qty": 1}, headers=WOO)

    assert response.json() == {"ignored": True}
    assert procedure_calls["reduce"] == []


def test_ignored_reduce_is_logged_as_non_global(client, make_product, fetch_logs):
    make_product("ABC", stock=10, is_bundle=True)

    client.post(
        "/api/stock/reduce",
        json={"sku": "ABC", "qty": 2, "order_id": "1042"},
        headers=WOO,
    )

    log = fetch_logs("ABC")[0]
    assert log.action == "reduce"
    assert log.success is False
    assert log.error_message == "Non-global product - no action taken"
    assert log.order_id == "1042"


def test_reduce_to_zero_marks_out_of_stock(client, make_product, fetch_products):
    make_product("ABC", stock=2)

    client.post("/api/stock/reduce", json={"sku": "ABC", "qty": 2}, headers=WOO)

    product = fetch_products("ABC")[0]
    assert product.stock_quantity == "0"
    assert product.is_in_stock is False


def test_reduce_applies_no_floor(client, make_product, fetch_products):
    make_product("ABC", stock=1)

    client.post("/api/stock/reduce", json={"sku": "ABC", "qty": 3}, headers=WOO)

    product = fetch_products("ABC")[0]
    assert product.stock_quantity == "-2"
    assert product.is_in_stock is False


@pytest.mark.parametrize("headers", [{}, {"x-wgss-source": "wordpress"}, {"x-wgss-source": "WOO"}])
def test_reduce_requires_source_header(client, make_product, fetch_products,
                                       procedure_calls, opened_sessions, headers):
    make_product("ABC", stock=10)

    response = client.post("/api/stock/reduce", json={"sku": "ABC", "qty": 2}, headers=headers)

    assert response.status_code == 401
    assert response.text == "Unauthorized"
    assert response.headers["content-type"].startswith("text/plain")
    assert procedure_calls["reduce"] == []
    assert opened_sessions == []
    assert fetch_products("ABC")[0].stock_quantity == "10"


def test_reduce_checks_header_before_body(client):
    response = client.post(
        "/api/stock/reduce",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 401
    assert response.text == "Unauthorized"


def test_reduce_rejects_invalid_body(client):
    response = client.post(
        "/api/stock/reduce",
        content=b"{not json",
        headers={"content-type": "application/json", **WOO},
    )

    assert response.status_code == 422
    assert response.json()["error"] == "Invalid request body"


def test_reduce_rejects_non_positive_qty(client, make_product, procedure_calls):
    make_product("ABC", stock=10)

    response = client.post("/api/stock/reduce", json={"sku": "ABC", "qty": 0}, headers=WOO)

    assert response.status_code == 422
    assert procedure_calls["reduce"] == []
