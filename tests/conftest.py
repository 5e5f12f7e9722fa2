import os
from datetime import datetime, timezone

# Doit précéder l'import de l'application (settings mis en cache)
os.environ.setdefault("ADMIN_API_KEY", "test-admin-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.main import app as fastapi_app
from app.models import Product, WooCommerceSite, StockSyncLog, InventoryType
from app.repositories.product_repo import ProductRepository

ADMIN_KEY = os.environ["ADMIN_API_KEY"]


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def opened_sessions():
    """Compte les sessions ouvertes par les requêtes"""
    return []


@pytest.fixture
def client(session_factory, opened_sessions):
    def override_get_db():
        session = session_factory()
        opened_sessions.append(session)
        try:
            yield session
        finally:
            session.close()

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield TestClient(fastapi_app)
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def procedure_calls(monkeypatch):
    """Espionne les appels aux procédures de stock"""
    calls = {"reduce": [], "restore": []}
    original_reduce = ProductRepository.reduce_product_stock
    original_restore = ProductRepository.restore_product_stock

    def spy_reduce(self, sku, qty):
        calls["reduce"].append((sku, qty))
        return original_reduce(self, sku, qty)

    def spy_restore(self, sku, qty):
        calls["restore"].append((sku, qty))
        return original_restore(self, sku, qty)

    monkeypatch.setattr(ProductRepository, "reduce_product_stock", spy_reduce)
    monkeypatch.setattr(ProductRepository, "restore_product_stock", spy_restore)
    return calls


@pytest.fixture
def make_product(db):
    def _make_product(sku, stock="10", inventory_type=InventoryType.GLOBAL.value, is_bundle=False):
        product = Product(
            sku=sku,
            inventory_type=inventory_type,
            is_bundle=is_bundle,
            stock_quantity=str(stock),
            is_in_stock=int(stock) > 0,
        )
        db.add(product)
        db.commit()
        return product
    return _make_product


@pytest.fixture
def make_site(db):
    def _make_site(site_url, api_key, created_at=None, is_active=True, is_primary=False):
        site = WooCommerceSite(
            site_url=site_url,
            site_name=site_url,
            api_key=api_key,
            is_active=is_active,
            is_primary=is_primary,
            created_at=created_at or datetime.now(timezone.utc),
        )
        db.add(site)
        db.commit()
        return site
    return _make_site


@pytest.fixture
def fetch_products(db):
    """Relire les produits d'un SKU depuis la base"""
    def _fetch(sku):
        db.expire_all()
        return list(db.scalars(select(Product).where(Product.sku == sku).order_by(Product.id)))
    return _fetch


@pytest.fixture
def fetch_logs(db):
    def _fetch(sku):
        db.expire_all()
        return list(db.scalars(
            select(StockSyncLog).where(StockSyncLog.product_sku == sku).order_by(StockSyncLog.id)
        ))
    return _fetch
