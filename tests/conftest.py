"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import AsyncMock, Mock

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test_key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from storefront.cart import CartStore
from storefront.catalog.models import AddOn, CatalogItem, Variation


@pytest.fixture
def cart():
    """Fresh, empty cart store"""
    return CartStore()


@pytest.fixture
def plain_item():
    """P1: no variations, no add-ons"""
    return CatalogItem(id="p1", name="Paracetamol 500mg", base_price=100, category="pain-relief")


@pytest.fixture
def large():
    return Variation(id="v1", name="Large", price_delta=20)


@pytest.fixture
def sized_item(large):
    """P2: one variation (+20)"""
    return CatalogItem(
        id="p2",
        name="Vitamin C Syrup",
        base_price=50,
        category="vitamins",
        variations=[large],
    )


@pytest.fixture
def syringe():
    return AddOn(id="a1", name="Syringe", price=5, category="supplies")


@pytest.fixture
def cotton():
    return AddOn(id="a2", name="Cotton Balls", price="7.50", category="supplies")


@pytest.fixture
def addon_item(syringe, cotton):
    """P3: add-ons A1 (5) and A2 (7.50)"""
    return CatalogItem(
        id="p3",
        name="Insulin Pen",
        base_price=30,
        category="diabetes-care",
        add_ons=[syringe, cotton],
    )


@pytest.fixture
def sample_item_row():
    """menu_items row as returned by Supabase with embedded relations"""
    return {
        "id": "item-123",
        "name": "Amoxicillin 500mg",
        "description": "Antibiotic capsule",
        "base_price": 120.0,
        "discount_price": 99.5,
        "discount_active": True,
        "discount_start_date": None,
        "discount_end_date": None,
        "available": True,
        "category": "antibiotics",
        "popular": True,
        "image_url": None,
        "created_at": "2025-01-01T00:00:00Z",
        "variations": [
            {"id": "var-1", "name": "Box of 10", "price": 0},
            {"id": "var-2", "name": "Box of 20", "price": 110.0},
        ],
        "add_ons": [
            {"id": "addon-1", "name": "Pill Organizer", "price": 45.0, "category": "accessories"},
        ],
    }


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client"""
    client = Mock()

    table_mock = Mock()
    table_mock.select.return_value = table_mock
    table_mock.eq.return_value = table_mock
    table_mock.order.return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[]))

    client.table.return_value = table_mock
    return client
