from app.repositories.product_repo import ProductRepository


def test_set_stock_returns_matched_rows(db, make_product):
    make_product("ABC", stock=1)
    repo = ProductRepository(db)

    assert repo.set_stock("ABC", 4) == 1
    assert repo.set_stock("NOPE", 4) == 0


def test_reduce_and_restore_scope_to_global(db, make_product, fetch_products):
    make_product("ABC", stock=10)
    make_product("ABC", stock=10, inventory_type="Location")
    repo = ProductRepository(db)

    repo.reduce_product_stock("ABC", 4)
    repo.restore_product_stock("ABC", 1)
    db.commit()

    global_row, location_row = fetch_products("ABC")
    assert global_row.stock_quantity == "7"
    assert location_row.stock_quantity == "10"


def test_get_reducible_product(db, make_product):
    make_product("ABC", stock=3)
    make_product("BUNDLE", stock=3, is_bundle=True)
    repo = ProductRepository(db)

    assert repo.get_reducible_product("ABC").sku == "ABC"
    assert repo.get_reducible_product("BUNDLE") is None
    assert repo.get_reducible_product("NOPE") is None


def test_global_product_exists(db, make_product):
    make_product("ABC")
    make_product("LOC", inventory_type="Location")
    repo = ProductRepository(db)

    assert repo.global_product_exists("ABC")
    assert not repo.global_product_exists("LOC")
