# skin_analyzer.py
"""
[Service Layer] Skin Analysis Logic
1. 외부 AI 분석 결과(JSON) -> AnalysisSummary 변환 (경계 검증)
2. 심각도 점수 -> 고민(Concern) 라벨 도출
"""

import logging
from typing import List, Mapping

from pydantic import ValidationError

from .config import ATTRIBUTE_ORDER, CONCERN_LABELS, CONCERN_THRESHOLD
from .exceptions import InvalidArgumentError
from .models import AnalysisSummary

# 로깅 설정
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SCORE_SUFFIX = "_score"


# ==============================================================================
# 1. 고민 라벨 도출 (Concern Derivation)
# ==============================================================================

def derive_concerns(attribute_severities: Mapping[str, int]) -> List[str]:
    """
    심각도가 기준값(5) 이상인 속성의 고민 라벨을 고정된 속성 순서대로 반환합니다.
    값이 없는 속성은 '알 수 없음'으로 보고 건너뜁니다.

    Example:
        {"sebum": 7} -> ["Oily Skin", "Excess Oil"]
    """
    concerns = []
    for attribute in ATTRIBUTE_ORDER:
        severity = attribute_severities.get(attribute)
        if severity is None:
            continue
        if severity >= CONCERN_THRESHOLD:
            concerns.extend(CONCERN_LABELS[attribute])
    return concerns


# ==============================================================================
# 2. 분석 결과 파싱 (Boundary Validation)
# ==============================================================================

def parse_analysis_result(raw) -> AnalysisSummary:
    """
    외부 분석 결과를 AnalysisSummary로 변환합니다.

    지원 형태:
        1. {"analysis": {"wrinkles_score": 7, ..., "skin_type": "oily"}, ...}
        2. {"wrinkles_score": 7, ..., "skin_type": "oily"}
        3. {"skin_type": "oily", "attribute_severities": {"wrinkles": 7}}

    Raises:
        InvalidArgumentError: 피부 타입이 없거나 심각도가 1~10 범위를 벗어난 경우
    """
    if isinstance(raw, AnalysisSummary):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidArgumentError(f"analysis must be a mapping, got {type(raw).__name__}")

    data = raw.get("analysis", raw)
    if not isinstance(data, Mapping):
        raise InvalidArgumentError("'analysis' must be a mapping")

    if "attribute_severities" in data:
        severities = data["attribute_severities"] or {}
    else:
        severities = {}
        for attribute in ATTRIBUTE_ORDER:
            value = data.get(attribute + SCORE_SUFFIX)
            if value is not None:
                severities[attribute] = value

    skin_type = data.get("skin_type")
    if not skin_type:
        raise InvalidArgumentError("analysis is missing 'skin_type'")
    if isinstance(skin_type, str):
        skin_type = skin_type.strip().lower()

    try:
        return AnalysisSummary(skin_type=skin_type, attribute_severities=severities)
    except ValidationError as e:
        logger.warning(f"⚠️ 분석 결과 검증 실패: {e.error_count()}건")
        raise InvalidArgumentError(f"invalid analysis result: {e}") from e
