# services/filters.py
"""
[제품 필터]
추천 전 단계에서 카탈로그를 거르는 조건과 제품 라이브러리 검색 조건을 모아둔 모듈입니다.
모든 함수는 카탈로그를 변경하지 않습니다.
"""

from typing import List, Optional

from .config import BUDGET_TIERS, NATURAL_CATEGORY_KEYWORD, NATURAL_MARKERS, RULES
from .models import BudgetTier, Product, ProductPreference

ALL_SKIN_TYPES = RULES["skin_type"]["all_sentinel"]


def in_budget(product: Product, budget_tier: BudgetTier) -> bool:
    """price_min이 예산 구간 [min, max) 안에 있는지 확인 (가격 없음 = 0)"""
    low, high = BUDGET_TIERS[budget_tier.value]
    price = product.price_min if product.price_min is not None else 0
    if price < low:
        return False
    return high is None or price < high


def is_natural(product: Product) -> bool:
    """카테고리에 'natural'이 있거나 핵심 성분에 식물성 마커가 있으면 천연 제품"""
    if NATURAL_CATEGORY_KEYWORD in (product.category or "").lower():
        return True
    for ingredient in product.key_ingredients:
        name = ingredient.lower()
        if any(marker in name for marker in NATURAL_MARKERS):
            return True
    return False


def matches_preference(product: Product, preference: ProductPreference) -> bool:
    if preference == ProductPreference.ANY:
        return True
    natural = is_natural(product)
    if preference == ProductPreference.NATURAL:
        return natural
    return not natural


def matches_skin_type(product: Product, skin_type: str) -> bool:
    """제품 피부 타입 문자열에 'all' 또는 사용자 피부 타입이 포함되면 일치 (예: "All Skin Types")"""
    wanted = skin_type.lower()
    for entry in product.skin_types:
        name = entry.lower()
        if ALL_SKIN_TYPES in name or wanted in name:
            return True
    return False


def matched_concerns(product: Product, concerns: List[str]) -> List[str]:
    """
    사용자 고민과 겹치는 제품 고민 항목을 제품 정의 순서대로 반환합니다.
    양방향 부분 일치(대소문자 무시)이며, 제품 항목 하나는 한 번만 셉니다.
    """
    wanted = [c.lower() for c in concerns]
    matched = []
    for entry in product.concerns_addressed:
        name = entry.lower()
        if any(name in c or c in name for c in wanted):
            matched.append(entry)
    return matched


def search_products(catalog: List[Product], category: Optional[str] = None,
                    query: Optional[str] = None) -> List[Product]:
    """
    제품 라이브러리 목록 조회용 필터입니다.

    Args:
        category: 카테고리명 (대소문자 무시). None 또는 "all"이면 전체
        query: 이름/브랜드/핵심 성분에 대한 부분 일치 검색어
    """
    results = []
    cat = (category or "all").strip().lower()
    keyword = (query or "").strip().lower()

    for product in catalog:
        if cat != "all" and product.category.lower() != cat:
            continue
        if keyword:
            haystack = [product.name, product.brand] + list(product.key_ingredients)
            if not any(keyword in text.lower() for text in haystack):
                continue
        results.append(product)

    return results
