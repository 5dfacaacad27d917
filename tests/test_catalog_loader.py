"""Tests for catalog loading (JSON file / PostgreSQL)."""
import json
from unittest.mock import MagicMock, patch

import psycopg2
import pytest

from core.utils import load_catalog, load_products_from_db, load_products_from_file
from services.exceptions import InvalidArgumentError


def write_catalog(tmp_path, records):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return str(path)


class TestFileCatalog:

    def test_seed_catalog_is_valid(self, seed_catalog):
        ids = [p.id for p in seed_catalog]
        assert len(ids) == 14
        assert len(set(ids)) == len(ids)

    def test_defaults_for_optional_fields(self, tmp_path):
        path = write_catalog(tmp_path, [{"id": "x", "name": "Plain Cream", "brand": "B"}])
        product = load_products_from_file(path)[0]

        assert product.price_min is None
        assert product.rating is None
        assert product.review_count == 0
        assert product.currency == "EUR"

    def test_invalid_price_range(self, tmp_path):
        path = write_catalog(tmp_path, [
            {"id": "bad", "name": "N", "brand": "B", "price_min": 80, "price_max": 20},
        ])
        with pytest.raises(InvalidArgumentError, match="bad"):
            load_products_from_file(path)

    def test_rating_out_of_range(self, tmp_path):
        path = write_catalog(tmp_path, [{"id": "r", "name": "N", "brand": "B", "rating": 7}])
        with pytest.raises(InvalidArgumentError):
            load_products_from_file(path)

    def test_file_must_hold_array(self, tmp_path):
        path = write_catalog(tmp_path, {"id": "x"})
        with pytest.raises(InvalidArgumentError):
            load_products_from_file(path)


def mock_connection(rows):
    conn = MagicMock()
    cursor = conn.cursor.return_value
    cursor.__enter__.return_value = cursor
    cursor.__exit__.return_value = False
    cursor.fetchall.return_value = rows
    return conn


class TestDatabaseCatalog:

    def test_rows_are_converted(self):
        rows = [
            (1, "Moisturising Cream", "CeraVe", "moisturizer", 14.0, 19.0, "EUR", 4.7, 9800,
             '["Ceramides", "Hyaluronic Acid"]', '["Dry Skin"]', '["Dryness"]', None),
            (2, "Mystery Oil", None, None, None, None, None, None, None, None, None, None, None),
        ]
        with patch("core.utils.psycopg2.connect", return_value=mock_connection(rows)):
            products = load_products_from_db()

        assert [p.id for p in products] == ["1", "2"]
        assert products[0].key_ingredients == ["Ceramides", "Hyaluronic Acid"]
        assert products[0].skin_types == ["Dry Skin"]
        assert products[1].brand == ""
        assert products[1].review_count == 0
        assert products[1].concerns_addressed == []

    def test_empty_table(self):
        with patch("core.utils.psycopg2.connect", return_value=mock_connection([])):
            assert load_products_from_db() == []

    def test_connection_failure_returns_empty(self):
        with patch("core.utils.psycopg2.connect", side_effect=psycopg2.OperationalError("down")):
            assert load_products_from_db() == []

    def test_connection_closed_after_load(self):
        conn = mock_connection([])
        with patch("core.utils.psycopg2.connect", return_value=conn):
            load_products_from_db()
        conn.close.assert_called_once()

    def test_connection_closed_when_query_fails(self):
        conn = mock_connection([])
        conn.cursor.return_value.execute.side_effect = psycopg2.ProgrammingError("no such table")
        with patch("core.utils.psycopg2.connect", return_value=conn):
            assert load_products_from_db() == []
        conn.close.assert_called_once()

    def test_invalid_row_is_skipped(self):
        rows = [
            (1, "Good Serum", "B", "serum", 30.0, 40.0, "EUR", 4.5, 10, None, None, None, None),
            (2, "Bad Rating", "B", "serum", 30.0, 40.0, "EUR", 9.0, 10, None, None, None, None),
            (3, "Broken Json", "B", "serum", 30.0, 40.0, "EUR", 4.0, 10, "[not json", None, None, None),
            (4, "Other Serum", "B", "serum", 50.0, 60.0, "EUR", 4.0, 10, None, None, None, None),
        ]
        with patch("core.utils.psycopg2.connect", return_value=mock_connection(rows)):
            products = load_products_from_db()

        assert [p.id for p in products] == ["1", "4"]


class TestLoadCatalog:

    def test_dispatch(self):
        with patch("core.utils.load_products_from_db", return_value=["db"]) as db_loader:
            assert load_catalog("db") == ["db"]
        db_loader.assert_called_once()

        with patch("core.utils.load_products_from_file", return_value=["file"]):
            assert load_catalog("FILE") == ["file"]

    def test_unknown_source(self):
        with pytest.raises(InvalidArgumentError):
            load_catalog("ftp")
