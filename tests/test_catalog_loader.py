"""Tests for loading reference data from JSON files."""
import json

import pytest

from config import DATA_DIR
from src.models import Category, Product, User
from src.services.catalog_joiner import join_catalog
from src.services.catalog_loader import CatalogLoadError, load_reference_data


def _write(directory, users=None, categories=None, products=None):
    files = {
        "users.json": users if users is not None else [{"id": 1, "name": "Roma", "sex": "m"}],
        "categories.json": categories if categories is not None else [
            {"id": 1, "title": "Drinks", "icon": "🍺", "ownerId": 1},
        ],
        "products.json": products if products is not None else [
            {"id": 1, "name": "Milk", "categoryId": 1},
        ],
    }
    for name, content in files.items():
        text = content if isinstance(content, str) else json.dumps(content, ensure_ascii=False)
        (directory / name).write_text(text, encoding="utf-8")


class TestLoadReferenceData:

    def test_loads_records(self, tmp_path):
        _write(tmp_path)
        users, categories, products = load_reference_data(tmp_path)
        assert users == [User(id=1, name="Roma", sex="m")]
        assert categories == [Category(id=1, title="Drinks", icon="🍺", owner_id=1)]
        assert products == [Product(id=1, name="Milk", category_id=1)]

    def test_preserves_file_order(self, tmp_path):
        _write(tmp_path, products=[
            {"id": 3, "name": "C", "categoryId": 1},
            {"id": 1, "name": "A", "categoryId": 1},
            {"id": 2, "name": "B", "categoryId": 1},
        ])
        _, _, products = load_reference_data(tmp_path)
        assert [p.id for p in products] == [3, 1, 2]

    def test_missing_file(self, tmp_path):
        _write(tmp_path)
        (tmp_path / "categories.json").unlink()
        with pytest.raises(CatalogLoadError, match="categories.json"):
            load_reference_data(tmp_path)

    def test_invalid_json(self, tmp_path):
        _write(tmp_path, products="[{not json")
        with pytest.raises(CatalogLoadError, match="products.json"):
            load_reference_data(tmp_path)

    def test_top_level_must_be_array(self, tmp_path):
        _write(tmp_path, users={"id": 1})
        with pytest.raises(CatalogLoadError, match="JSON array"):
            load_reference_data(tmp_path)

    def test_missing_key(self, tmp_path):
        _write(tmp_path, categories=[{"id": 1, "title": "Drinks", "icon": "🍺"}])
        with pytest.raises(CatalogLoadError, match="ownerId"):
            load_reference_data(tmp_path)

    def test_non_integer_id(self, tmp_path):
        _write(tmp_path, products=[{"id": "one", "name": "Milk", "categoryId": 1}])
        with pytest.raises(CatalogLoadError, match="invalid value"):
            load_reference_data(tmp_path)

    @pytest.mark.parametrize("bad_id", [1.7, True, "2", None])
    def test_id_must_be_json_integer(self, tmp_path, bad_id):
        _write(tmp_path, products=[{"id": bad_id, "name": "Milk", "categoryId": 1}])
        with pytest.raises(CatalogLoadError, match="must be an integer"):
            load_reference_data(tmp_path)

    @pytest.mark.parametrize("bad_ref", [1.0, False, "1"])
    def test_reference_must_be_json_integer(self, tmp_path, bad_ref):
        _write(tmp_path, categories=[
            {"id": 1, "title": "Drinks", "icon": "x", "ownerId": bad_ref},
        ])
        with pytest.raises(CatalogLoadError, match="ownerId"):
            load_reference_data(tmp_path)

    def test_null_name_rejected(self, tmp_path):
        _write(tmp_path, products=[{"id": 1, "name": None, "categoryId": 1}])
        with pytest.raises(CatalogLoadError, match="must be a string"):
            load_reference_data(tmp_path)

    def test_non_string_title_rejected(self, tmp_path):
        _write(tmp_path, categories=[{"id": 1, "title": 5, "icon": "x", "ownerId": 1}])
        with pytest.raises(CatalogLoadError, match="title"):
            load_reference_data(tmp_path)

    def test_invalid_sex(self, tmp_path):
        _write(tmp_path, users=[{"id": 1, "name": "Roma", "sex": "x"}])
        with pytest.raises(CatalogLoadError, match="invalid sex"):
            load_reference_data(tmp_path)

    def test_zero_user_id_is_reserved(self, tmp_path):
        _write(tmp_path, users=[{"id": 0, "name": "Root", "sex": "m"}])
        with pytest.raises(CatalogLoadError, match="positive"):
            load_reference_data(tmp_path)

    def test_duplicate_ids(self, tmp_path):
        _write(tmp_path, products=[
            {"id": 1, "name": "Milk", "categoryId": 1},
            {"id": 1, "name": "Bread", "categoryId": 1},
        ])
        with pytest.raises(CatalogLoadError, match="duplicate id 1"):
            load_reference_data(tmp_path)


class TestShippedData:

    def test_bundled_data_joins_cleanly(self):
        users, categories, products = load_reference_data(DATA_DIR)
        catalog = join_catalog(products, categories, users)
        assert len(catalog) == len(products) > 0
        assert {u.sex for u in users} <= {"m", "f"}
