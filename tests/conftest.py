"""Pytest configuration for test suite."""
import os
import sys
from pathlib import Path

import pytest

# 프로젝트 루트를 import 경로에 추가 (services, core, main 모듈)
project_root = Path(__file__).parent.parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

os.environ.setdefault("CATALOG_SOURCE", "file")

from services.models import Product  # noqa: E402


@pytest.fixture
def make_product():
    """기본값이 채워진 Product 생성 헬퍼"""
    def _make(**overrides):
        data = {
            "id": "p1",
            "name": "Test Serum",
            "brand": "Test Brand",
            "category": "serum",
            "price_min": 40.0,
            "price_max": 50.0,
            "review_count": 0,
            "key_ingredients": [],
            "skin_types": [],
            "concerns_addressed": [],
        }
        data.update(overrides)
        return Product(**data)
    return _make


@pytest.fixture
def seed_catalog():
    from core.utils import load_products_from_file
    return load_products_from_file(str(project_root / "data" / "products.json"))
