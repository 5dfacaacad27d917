# skin_advisor_logic.py
"""
[로직 담당]
분석 요약(피부 타입 + 고민 라벨)과 사용자 선호를 바탕으로
카탈로그 제품을 걸러내고, 점수를 매기고, 순위를 정하는 추천 엔진입니다.

기능 목록:
1. Filter Stage: 예산 구간 / 성분 성향(천연 vs 과학) 필터
2. Scoring Engine: 피부 타입, 고민 일치, 평점, 인기도 가중치 합산
3. Ranking: 점수 내림차순 안정 정렬 후 상위 N개
4. Tagging: 우선순위 등급 + 추천 사유 부착
"""

import math
from typing import List, Optional

from .config import DEFAULT_LIMIT, DEFAULT_PRIORITY_LEVEL, PRIORITY_LEVELS, RULES
from .filters import in_budget, matched_concerns, matches_preference, matches_skin_type
from .models import Product, ScoredProduct, SkinType, UserPreferences
from .rationale import explain


class ProductRecommender:
    def __init__(self, skin_type: SkinType, concerns: List[str],
                 preferences: Optional[UserPreferences] = None):
        """
        추천 엔진 초기화
        """
        self.skin_type = SkinType(skin_type)
        self.concerns = list(concerns)
        self.prefs = preferences or UserPreferences()

    # ==========================================================================
    # 1. 필터 (Filter Stage)
    # ==========================================================================

    def is_eligible(self, product: Product) -> bool:
        """예산 필터와 성분 성향 필터를 모두 통과해야 후보가 됩니다."""
        return (
            in_budget(product, self.prefs.budget_tier)
            and matches_preference(product, self.prefs.product_preference)
        )

    # ==========================================================================
    # 2. 채점 (Scoring Engine)
    # ==========================================================================

    def score_breakdown(self, product: Product) -> dict:
        """
        [채점 로직] config.py의 RULES를 기반으로 항목별 점수를 계산합니다.

        Returns:
            dict: {skin_type, concern, rating, popularity, total}
        """
        # [A] 피부 타입 (전부 아니면 0점)
        skin_pts = RULES["skin_type"]["match"] if matches_skin_type(product, self.skin_type.value) else 0

        # [B] 고민 일치 (항목당 10점, 최대 40점)
        match_count = len(matched_concerns(product, self.concerns))
        concern_pts = min(match_count * RULES["concern"]["per_match"], RULES["concern"]["max"])

        # [C] 평점 (반올림은 최종 합계에서 한 번만)
        rating_pts = 0.0
        if product.rating is not None:
            rating_pts = (product.rating / RULES["rating"]["scale"]) * RULES["rating"]["max"]

        # [D] 인기도 (리뷰 수 구간, 중복 적용 없음)
        popularity_pts = 0
        for min_reviews, pts in RULES["popularity"]:
            if product.review_count > min_reviews:
                popularity_pts = pts
                break

        total = skin_pts + concern_pts + rating_pts + popularity_pts
        return {
            "skin_type": skin_pts,
            "concern": concern_pts,
            "rating": rating_pts,
            "popularity": popularity_pts,
            "total": round_half_up(total),
        }

    def score(self, product: Product) -> int:
        return self.score_breakdown(product)["total"]

    # ==========================================================================
    # 3. 추천 (Rank & Tag)
    # ==========================================================================

    def recommend_products(self, catalog: List[Product], limit: int = DEFAULT_LIMIT) -> List[ScoredProduct]:
        scored_list = []
        for product in catalog:
            if not self.is_eligible(product):
                continue
            scored_list.append((self.score(product), product))

        # 점수순 정렬 (sort는 안정 정렬이므로 동점이면 카탈로그 순서 유지)
        scored_list.sort(key=lambda x: x[0], reverse=True)

        return [self._to_scored_product(product, score) for score, product in scored_list[:max(limit, 0)]]

    def _to_scored_product(self, product: Product, score: int) -> ScoredProduct:
        return ScoredProduct(
            **product.model_dump(),
            recommendation_score=score,
            recommendation_reason=explain(product, self.skin_type, self.concerns),
            priority_level=priority_for(score),
        )


# ==============================================================================
# 4. 함수형 진입점 (Module-level API)
# ==============================================================================

def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def priority_for(score: int) -> int:
    """80점 이상 = 1 (Top Pick), 60점 이상 = 2, 그 외 = 3"""
    for min_score, level in PRIORITY_LEVELS:
        if score >= min_score:
            return level
    return DEFAULT_PRIORITY_LEVEL


def score_product(product: Product, skin_type: SkinType, concerns: List[str]) -> int:
    """필터를 거치지 않고 단일 제품의 추천 점수만 계산합니다."""
    return ProductRecommender(skin_type, concerns).score(product)


def recommend(catalog: List[Product], skin_type: SkinType, concerns: List[str],
              preferences: Optional[UserPreferences] = None,
              limit: int = DEFAULT_LIMIT) -> List[ScoredProduct]:
    """
    카탈로그를 필터링/채점/정렬하여 상위 limit개의 추천 제품을 반환합니다.
    결과가 비어 있으면 '조건에 맞는 제품 없음'이며 오류가 아닙니다.
    """
    return ProductRecommender(skin_type, concerns, preferences).recommend_products(catalog, limit)
