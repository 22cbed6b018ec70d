from __future__ import annotations

import pytest

from app import create_app
from config import TestConfig
from models import db
from repositories import ProductRepository, SalesOrderRepository, SalesItemRepository


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def products(app) -> ProductRepository:
    return ProductRepository(db.session)


@pytest.fixture()
def orders(app) -> SalesOrderRepository:
    return SalesOrderRepository(db.session)


@pytest.fixture()
def items(app) -> SalesItemRepository:
    return SalesItemRepository(db.session)
