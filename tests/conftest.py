"""Shared fixtures: a small catalog with two owners."""
import pytest

from src.models import Category, Product, User
from src.services.catalog_joiner import join_catalog


@pytest.fixture
def users():
    return [
        User(id=1, name="Roma", sex="m"),
        User(id=2, name="Anna", sex="f"),
        User(id=3, name="Max", sex="m"),
    ]


@pytest.fixture
def categories():
    return [
        Category(id=1, title="Grocery", icon="🍞", owner_id=2),
        Category(id=2, title="Drinks", icon="🍺", owner_id=1),
        Category(id=3, title="Fruits", icon="🍏", owner_id=2),
        Category(id=5, title="Clothes", icon="👚", owner_id=3),
    ]


@pytest.fixture
def products():
    return [
        Product(id=1, name="Milk", category_id=2),
        Product(id=2, name="Bread", category_id=1),
        Product(id=3, name="Eggs", category_id=1),
        Product(id=4, name="Jacket", category_id=5),
        Product(id=5, name="Apple", category_id=3),
        Product(id=6, name="Beer", category_id=2),
        Product(id=7, name="Sausage", category_id=1),
    ]


@pytest.fixture
def catalog(products, categories, users):
    return join_catalog(products, categories, users)
