import os
from decimal import Decimal

# point the service at throwaway backends before anything imports settings
os.environ.setdefault("DATABASE_URL", "sqlite:///./storefront-test.db")
os.environ.setdefault("CATALOG_BACKEND", "sql")
os.environ.setdefault("CHECKOUT_LOCK_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

import storefront.data.models  # noqa: F401
from storefront.api import create_app
from storefront.api.deps import get_lock_service, get_notifier
from storefront.data.database import Base, get_db, make_engine
from storefront.data.models import ProductModel, ProfileModel
from storefront.domain.schemas import Product, ShippingInfo


class FakeCatalog:
    """In-memory catalog whose prices can be changed between calls."""

    def __init__(self, products=None):
        self.products = {p.id: p for p in (products or [])}

    def get_product(self, product_id):
        return self.products.get(product_id)

    def set_price(self, product_id, price):
        self.products[product_id] = self.products[product_id].model_copy(update={"price": price})

    def remove(self, product_id):
        self.products.pop(product_id, None)


class RecordingNotifier:
    def __init__(self):
        self.sent = []

    def send_order_confirmation(self, user_id, order_id):
        self.sent.append((user_id, order_id))
        return True


@pytest.fixture()
def engine(tmp_path):
    # file database so worker threads share it
    engine = make_engine(f"sqlite:///{tmp_path / 'storefront.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def products(db):
    rows = [
        ProductModel(id=1, name="Widget", price=Decimal("10.00"), category_id=1, stock=10),
        ProductModel(id=2, name="Gadget", price=Decimal("5.00"), category_id=1, stock=10),
        ProductModel(id=3, name="Gizmo", price=Decimal("9.99"), category_id=2, stock=3),
    ]
    db.add_all(rows)
    db.commit()
    return rows


@pytest.fixture()
def fake_catalog():
    return FakeCatalog(
        [
            Product(id=1, name="Widget", price=Decimal("10.00")),
            Product(id=2, name="Gadget", price=Decimal("5.00")),
            Product(id=3, name="Gizmo", price=Decimal("9.99")),
        ]
    )


@pytest.fixture()
def shipping_info():
    return ShippingInfo(address="1 Main St", city="Springfield", state="IL", zip="62701")


@pytest.fixture()
def profile(db):
    row = ProfileModel(
        user_id=1,
        first_name="Pat",
        last_name="Doe",
        address="1 Main St",
        city="Springfield",
        state="IL",
        zip="62701",
    )
    db.add(row)
    db.commit()
    return row


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def client(session_factory, notifier):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_lock_service] = lambda: None
    app.dependency_overrides[get_notifier] = lambda: notifier
    return TestClient(app)
