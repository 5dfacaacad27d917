# models.py
"""
[데이터 모델]
분석 요약, 사용자 선호, 제품 카탈로그, 추천 결과를 표현하는 Pydantic 모델입니다.
모든 모델은 요청 단위의 불변(frozen) 값입니다.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .config import (
    ATTRIBUTE_ORDER,
    DEFAULT_CURRENCY,
    SEVERITY_MIN,
    SEVERITY_MAX,
)


# ==============================================================================
# 1. 열거형 (Enums)
# ==============================================================================

class SkinType(str, Enum):
    NORMAL = "normal"
    DRY = "dry"
    OILY = "oily"
    COMBINATION = "combination"
    SENSITIVE = "sensitive"


class BudgetTier(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    LUXURY = "luxury"


class ProductPreference(str, Enum):
    ANY = "any"
    NATURAL = "natural"
    SCIENTIFIC = "scientific"


# ==============================================================================
# 2. 입력 모델 (Analysis & Preferences)
# ==============================================================================

class AnalysisSummary(BaseModel):
    """외부 피부 분석이 끝난 뒤 사용할 수 있는 입력값"""
    model_config = ConfigDict(frozen=True)

    skin_type: SkinType
    attribute_severities: Dict[str, int] = Field(default_factory=dict)

    @field_validator("attribute_severities")
    @classmethod
    def check_severities(cls, value: Dict[str, int]) -> Dict[str, int]:
        for name, severity in value.items():
            if name not in ATTRIBUTE_ORDER:
                raise ValueError(f"unknown skin attribute '{name}'")
            if not SEVERITY_MIN <= severity <= SEVERITY_MAX:
                raise ValueError(
                    f"severity for '{name}' must be between {SEVERITY_MIN} and {SEVERITY_MAX}, got {severity}"
                )
        return value


class UserPreferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    budget_tier: BudgetTier = BudgetTier.MEDIUM
    product_preference: ProductPreference = ProductPreference.ANY


# ==============================================================================
# 3. 카탈로그 모델 (Product)
# ==============================================================================

class Product(BaseModel):
    """카탈로그 제품 (읽기 전용)"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    brand: str
    category: str = ""
    price_min: Optional[float] = Field(default=None, ge=0)
    price_max: Optional[float] = Field(default=None, ge=0)
    currency: str = DEFAULT_CURRENCY
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    review_count: int = Field(default=0, ge=0)
    key_ingredients: List[str] = Field(default_factory=list)
    skin_types: List[str] = Field(default_factory=list)
    concerns_addressed: List[str] = Field(default_factory=list)

    # 화면 표시용 부가 정보
    image_url: Optional[str] = None
    country_origin: Optional[str] = None
    purchase_urls: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_price_range(self):
        if self.price_min is not None and self.price_max is not None and self.price_min > self.price_max:
            raise ValueError(f"price_min ({self.price_min}) is greater than price_max ({self.price_max})")
        return self


# ==============================================================================
# 4. 결과 모델 (Recommendation)
# ==============================================================================

class ScoredProduct(Product):
    recommendation_score: int
    recommendation_reason: str
    priority_level: int


class RecommendationSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_count: int
    skin_type: SkinType
    primary_concerns: List[str]


class RecommendationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    recommendations: List[ScoredProduct]
    total_count: int
    analysis_summary: RecommendationSummary
