# main.py
"""
[Skin Advisor Recommendation API Server]
FastAPI 기반의 메인 서버 구동 파일입니다.
외부 AI 피부 분석 결과를 받아 고민 라벨과 맞춤 제품 추천을 돌려줍니다.
"""

import logging
from typing import Optional

from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

# ---------------------------------------------------------
# [Services Import]
# 핵심 로직은 services 폴더의 모듈에서 가져옵니다.
# ---------------------------------------------------------
from core.utils import load_catalog
from services.exceptions import InvalidArgumentError
from services.filters import search_products
from services.rationale import get_ingredient_benefit
from services.skin_advisor import run_skin_advisor
from services.skin_analyzer import derive_concerns, parse_analysis_result

# 로깅 설정
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------
# [Lifespan 설정] 시작 시 카탈로그를 한 번만 로드
# ---------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    # [시작 시 실행]
    logger.info("🔄 서버 시작: 제품 카탈로그를 불러옵니다...")
    app.state.catalog = load_catalog()
    logger.info(f"✅ 서버 시작 완료: 제품 {len(app.state.catalog)}개")

    yield

    # [종료 시 실행]
    logger.info("👋 서버 종료")


# ---------------------------------------------------------
# [App 생성]
# ---------------------------------------------------------
app = FastAPI(
    title="Skin Advisor Recommendation API",
    description="피부 분석 결과 기반 맞춤형 화장품 추천 시스템",
    version="1.0.0",
    lifespan=lifespan
)

# CORS 설정 (앱/웹 통신 허용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------
# [Pydantic Models] 요청 데이터 검증용 모델
# ---------------------------------------------------------

class ConcernRequest(BaseModel):
    analysis: dict  # {"skin_type": ..., "wrinkles_score": ...} 또는 {"analysis": {...}}


class RecommendationRequest(BaseModel):
    analysis: dict
    preferences: Optional[dict] = None  # {budget_tier, product_preference}
    limit: Optional[int] = None


def get_catalog(request: Request) -> list:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        catalog = load_catalog()
        request.app.state.catalog = catalog
    return catalog


# ==============================================================================
# 1. Health
# ==============================================================================

@app.get("/")
async def read_index():
    return {"service": app.title, "version": app.version, "status": "ok"}


# ==============================================================================
# 2. Analysis (고민 라벨 도출)
# ==============================================================================

@app.post("/analysis/concerns", tags=["Analysis"])
async def concerns_endpoint(req: ConcernRequest):
    try:
        summary = parse_analysis_result(req.analysis)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "skin_type": summary.skin_type.value,
        "concerns": derive_concerns(summary.attribute_severities),
    }


# ==============================================================================
# 3. Recommendation (제품 추천)
# ==============================================================================

@app.post("/recommend", tags=["Recommendation"])
async def recommend_endpoint(req: RecommendationRequest, request: Request):
    """
    분석 결과 + 사용자 선호(예산, 성분 성향)를 종합하여 제품을 추천합니다.
    """
    try:
        result = run_skin_advisor(
            analysis=req.analysis,
            preferences=req.preferences,
            limit=req.limit,
            catalog=get_catalog(request),
        )
    except InvalidArgumentError as e:
        logger.warning(f"추천 요청 검증 실패: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return result.model_dump(mode="json")


# ==============================================================================
# 4. Product Library (제품 목록 / 성분 정보)
# ==============================================================================

@app.get("/products", tags=["Products"])
async def products_endpoint(request: Request, category: Optional[str] = None, q: Optional[str] = None):
    products = search_products(get_catalog(request), category=category, query=q)
    return {
        "total_count": len(products),
        "products": [p.model_dump(mode="json") for p in products],
    }


@app.get("/ingredients/{name}", tags=["Products"])
async def ingredient_endpoint(name: str):
    benefit = get_ingredient_benefit(name)
    if not benefit:
        raise HTTPException(status_code=404, detail=f"Unknown ingredient: {name}")
    return {"ingredient": name, "benefit": benefit}


# ==============================================================================
# 5. 메인 실행부
# ==============================================================================
if __name__ == "__main__":
    import uvicorn

    logger.info("🚀 API 서버를 시작합니다...")
    uvicorn.run(app, host="0.0.0.0", port=8000)
