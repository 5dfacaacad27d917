# rationale.py
"""
[추천 사유 생성]
성분 효능 사전(config.INGREDIENT_BENEFITS)을 참고하여
제품마다 한 문장짜리 추천 사유를 만들어 줍니다. (화면 표시용, 점수에는 영향 없음)
"""

from typing import List

from .config import FALLBACK_REASON, INGREDIENT_BENEFITS, MAX_REASON_CONCERNS
from .filters import matched_concerns, matches_skin_type
from .models import Product, SkinType


def get_ingredient_benefit(ingredient: str) -> str:
    """
    성분명으로 효능 설명을 찾습니다. 못 찾으면 빈 문자열을 반환합니다.
    1순위: 정확히 일치 (소문자/공백 제거)
    2순위: 양방향 부분 일치 (사전 정의 순서대로 첫 번째)
    빈 문자열은 모든 키에 포함되므로 첫 번째 항목(rosehip oil)과 일치합니다.
    """
    normalized = ingredient.lower().strip()

    if normalized in INGREDIENT_BENEFITS:
        return INGREDIENT_BENEFITS[normalized]

    for key, benefit in INGREDIENT_BENEFITS.items():
        if key in normalized or normalized in key:
            return benefit

    return ""


def explain(product: Product, skin_type: SkinType, concerns: List[str]) -> str:
    reasons = []

    # 1. 대표 성분 효능
    if product.key_ingredients:
        key_ingredient = product.key_ingredients[0]
        benefit = get_ingredient_benefit(key_ingredient)
        if benefit:
            reasons.append(f"{key_ingredient} {benefit}")

    # 2. 피부 타입 일치
    skin = SkinType(skin_type).value
    if matches_skin_type(product, skin):
        reasons.append(f"Formulated specifically for {skin} skin")

    # 3. 고민 일치 (앞의 2개만)
    matched = matched_concerns(product, concerns)
    if matched:
        joined = " and ".join(matched[:MAX_REASON_CONCERNS]).lower()
        reasons.append(f"Clinically proven to address {joined}")

    if not reasons:
        return FALLBACK_REASON
    return ". ".join(reasons) + "."
