"""Pytest configuration and fixtures"""
from decimal import Decimal

import pytest

from mappia import persistence
from mappia.cart import Cart
from mappia.models import MenuItem


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point preferences at a throwaway SQLite file"""
    path = tmp_path / "prefs" / "mappia.db"
    monkeypatch.setattr(persistence, "DB_PATH", str(path))
    persistence.bootstrap_schema()
    return path


@pytest.fixture
def burger():
    return MenuItem(id=1, name="Burger", unit_price=Decimal("5.00"))


@pytest.fixture
def fries():
    return MenuItem(id=2, name="Fries", unit_price=Decimal("2.50"))


@pytest.fixture
def cart():
    return Cart()
