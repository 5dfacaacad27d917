# utils.py
"""
[유틸리티 및 데이터 처리 담당]
추천 엔진이 사용할 제품 카탈로그를 불러오는 모듈입니다.

기능 목록:
1. File: JSON 시드 카탈로그 로드
2. Database: PostgreSQL 'products' 테이블 로드
3. load_catalog: 환경변수(CATALOG_SOURCE)에 따라 소스 선택
"""

import json
import logging

import psycopg2
from pydantic import ValidationError

# 설정 파일 로드 (DB 접속 정보, 카탈로그 경로 등)
from services.config import CATALOG_PATH, CATALOG_SOURCE, DB_CONFIG, DEFAULT_CURRENCY
from services.exceptions import InvalidArgumentError
from services.models import Product

# 로깅 설정
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# ==============================================================================
# 1. 파일 카탈로그 (JSON)
# ==============================================================================

def load_products_from_file(path: str = CATALOG_PATH) -> list:
    """
    JSON 배열 형태의 카탈로그 파일을 읽어 Product 리스트로 반환합니다.

    Raises:
        InvalidArgumentError: 파일 형식이 잘못되었거나 제품 레코드 검증에 실패한 경우
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise InvalidArgumentError(f"catalog file {path} must contain a JSON array")

    products = []
    for index, record in enumerate(raw):
        try:
            products.append(Product(**record))
        except (TypeError, ValidationError) as e:
            name = record.get("id", index) if isinstance(record, dict) else index
            raise InvalidArgumentError(f"invalid product record '{name}' in {path}: {e}") from e

    logger.info(f"📂 [File] {len(products)}개의 제품 로드 완료 ({path})")
    return products


# ==============================================================================
# 2. 데이터베이스 (PostgreSQL)
# ==============================================================================

def _json_list(raw) -> list:
    """JSON 문자열 컬럼 -> 파이썬 리스트 (이미 리스트면 그대로)"""
    if not raw:
        return []
    if isinstance(raw, list):
        return raw
    return json.loads(raw)


def _row_to_product(row) -> Product:
    (row_id, name, brand, category, price_min, price_max, currency,
     rating, review_count, ings_raw, skin_raw, concerns_raw, img) = row

    return Product(
        id=str(row_id),
        name=name,
        brand=brand or "",
        category=category or "",
        price_min=price_min,
        price_max=price_max,
        currency=currency or DEFAULT_CURRENCY,
        rating=rating,
        review_count=review_count or 0,
        key_ingredients=_json_list(ings_raw),
        skin_types=_json_list(skin_raw),
        concerns_addressed=_json_list(concerns_raw),
        image_url=img,
    )


def load_products_from_db() -> list:
    """
    DB의 'products' 테이블에서 모든 제품 정보를 가져옵니다.
    (JSON 형태의 성분/피부타입/고민 데이터를 파이썬 리스트로 변환하여 반환)
    검증에 실패한 행은 건너뛰고 경고 로그를 남깁니다.
    """
    query = """
        SELECT id, name, brand, category, price_min, price_max, currency,
               rating, review_count, key_ingredients, skin_types, concerns_addressed, image_url
        FROM products
        ORDER BY id
    """

    conn = None
    try:
        conn = psycopg2.connect(**DB_CONFIG)
        with conn.cursor() as cursor:
            cursor.execute(query)
            rows = cursor.fetchall()
    except psycopg2.Error as e:
        logger.error(f"❌ [DB 로드 실패] {e}")
        return []
    finally:
        if conn is not None:
            conn.close()

    if not rows:
        logger.warning("⚠️ [DB] 제품 데이터가 비어있습니다.")
        return []

    products = []
    for row in rows:
        try:
            products.append(_row_to_product(row))
        except (ValidationError, json.JSONDecodeError) as e:
            logger.warning(f"⚠️ [DB] 잘못된 제품 행 건너뜀 (id={row[0]}): {e}")

    logger.info(f"📂 [DB] {len(products)}개의 제품 로드 완료")
    return products


# ==============================================================================
# 3. 카탈로그 선택
# ==============================================================================

def load_catalog(source: str = None) -> list:
    """CATALOG_SOURCE 설정('file' / 'db')에 맞는 카탈로그를 불러옵니다."""
    source = (source or CATALOG_SOURCE).lower()
    if source == "db":
        return load_products_from_db()
    if source == "file":
        return load_products_from_file()
    raise InvalidArgumentError(f"unknown catalog source '{source}' (expected 'file' or 'db')")
