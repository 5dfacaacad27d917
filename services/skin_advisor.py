# skin_advisor.py
"""
[피부 맞춤형 제품 추천 담당]
API 서버의 요청을 받아 분석 결과와 사용자 선호를 검증하고,
고민 라벨 도출 -> 제품 추천 -> 요약 생성까지 한 번에 처리하는 모듈입니다.
"""

import logging
from typing import Mapping

from pydantic import ValidationError

from core.utils import load_catalog
from .config import DEFAULT_LIMIT, PRIMARY_CONCERN_COUNT
from .exceptions import InvalidArgumentError
from .models import RecommendationResult, RecommendationSummary, UserPreferences
from .skin_advisor_logic import recommend
from .skin_analyzer import derive_concerns, parse_analysis_result

# 로깅 설정
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# 프론트엔드(camelCase) 키 호환
PREFERENCE_ALIASES = {
    "budgetTier": "budget_tier",
    "productPreference": "product_preference",
}


# ==============================================================================
# 1. 입력 검증 (Boundary)
# ==============================================================================

def parse_preferences(raw) -> UserPreferences:
    """
    사용자 선호를 UserPreferences로 변환합니다. 값이 없으면 기본값(medium / any)을 씁니다.

    Raises:
        InvalidArgumentError: 알 수 없는 예산 구간/성향 값
    """
    if raw is None:
        return UserPreferences()
    if isinstance(raw, UserPreferences):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidArgumentError(f"preferences must be a mapping, got {type(raw).__name__}")

    data = {}
    for key, value in raw.items():
        if value is None:
            continue
        data[PREFERENCE_ALIASES.get(key, key)] = value.lower() if isinstance(value, str) else value

    unknown = set(data) - set(UserPreferences.model_fields)
    if unknown:
        raise InvalidArgumentError(f"unknown preference field(s): {', '.join(sorted(unknown))}")

    try:
        return UserPreferences(**data)
    except ValidationError as e:
        raise InvalidArgumentError(f"invalid preferences: {e}") from e


def check_limit(limit) -> int:
    if limit is None:
        return DEFAULT_LIMIT
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise InvalidArgumentError(f"limit must be a non-negative integer, got {limit!r}")
    return limit


# ==============================================================================
# 2. 메인 실행 함수 (Main Logic)
# ==============================================================================

def run_skin_advisor(analysis, preferences=None, limit=None, catalog=None) -> RecommendationResult:
    """
    분석 결과와 사용자 선호를 결합하여 최종 추천 목록을 만듭니다.

    Args:
        analysis: AnalysisSummary 또는 외부 분석 결과(dict)
        preferences: UserPreferences 또는 dict (생략 시 기본값)
        limit: 최대 추천 개수 (생략 시 RECOMMENDATION_LIMIT)
        catalog: 제품 리스트 (생략 시 설정된 소스에서 로드)
    """
    # -------------------------------------------------------
    # Step 1. 입력 검증
    # -------------------------------------------------------
    summary = parse_analysis_result(analysis)
    prefs = parse_preferences(preferences)
    limit = check_limit(limit)

    logger.info(
        f"🧠 [Advisor] 추천 시작 (skin={summary.skin_type.value}, "
        f"budget={prefs.budget_tier.value}, pref={prefs.product_preference.value})"
    )

    # -------------------------------------------------------
    # Step 2. 고민 도출 및 추천
    # -------------------------------------------------------
    concerns = derive_concerns(summary.attribute_severities)

    if catalog is None:
        catalog = load_catalog()

    recommendations = recommend(catalog, summary.skin_type, concerns, prefs, limit)

    if not recommendations:
        logger.warning(f"⚠️ [Advisor] 조건에 맞는 제품이 없습니다. (catalog={len(catalog)})")

    # -------------------------------------------------------
    # Step 3. 결과 정리
    # -------------------------------------------------------
    logger.info(f"✨ [Advisor] 추천 완료: {len(recommendations)}개 (concerns={concerns})")

    return RecommendationResult(
        recommendations=recommendations,
        total_count=len(recommendations),
        analysis_summary=RecommendationSummary(
            total_count=len(recommendations),
            skin_type=summary.skin_type,
            primary_concerns=concerns[:PRIMARY_CONCERN_COUNT],
        ),
    )
