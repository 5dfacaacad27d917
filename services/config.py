# config.py
"""
[전역 설정 및 상수 관리]
서버, 카탈로그 로딩, 추천 엔진에서 사용하는 모든 상수를 관리합니다.

목차:
1. SYSTEM : 카탈로그 경로 및 기본 설정
2. SKIN ANALYSIS : 피부 속성 순서 및 고민(Concern) 라벨 매핑
3. LOGIC RULES : 추천 알고리즘 가중치/필터 설정
4. KNOWLEDGE : 성분 효능 사전
5. INFRASTRUCTURE : 데이터베이스 접속 설정
"""

import os
from dotenv import load_dotenv

# .env 파일 로드 (환경변수 설정)
load_dotenv()

# ==============================================================================
# 1. SYSTEM (시스템 설정)
# ==============================================================================

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# 제품 카탈로그 소스: "file" (JSON 시드 파일) 또는 "db" (PostgreSQL)
CATALOG_SOURCE = os.getenv("CATALOG_SOURCE", "file").lower()

# JSON 카탈로그 경로 (core/utils.py의 load_products_from_file에서 사용)
CATALOG_PATH = os.getenv("CATALOG_PATH", os.path.join(BASE_DIR, "data", "products.json"))

# 추천 결과 최대 개수
DEFAULT_LIMIT = int(os.getenv("RECOMMENDATION_LIMIT", "12"))

DEFAULT_CURRENCY = "EUR"

# ==============================================================================
# 2. SKIN ANALYSIS (피부 진단 기준)
# ==============================================================================

# 심각도 범위 (1 = 양호, 10 = 매우 심각)
SEVERITY_MIN = 1
SEVERITY_MAX = 10

# 이 값 이상이면 고민(Concern)으로 분류 (중간값)
CONCERN_THRESHOLD = 5

# [고민 라벨] 속성 -> 라벨 목록
# dict 정의 순서가 곧 derive_concerns의 순회 순서입니다.
CONCERN_LABELS = {
    "wrinkles": ["Wrinkles"],
    "spots": ["Dark Spots"],
    "acne": ["Acne"],
    "texture": ["Uneven Texture"],
    "hydration": ["Dryness"],
    "sebum": ["Oily Skin", "Excess Oil"],
    "pores": ["Large Pores"],
    "redness": ["Redness"],
    "dark_circles": ["Dark Circles"],
}

ATTRIBUTE_ORDER = list(CONCERN_LABELS)

# 요약(summary)에 노출할 대표 고민 개수
PRIMARY_CONCERN_COUNT = 3

# ==============================================================================
# 3. LOGIC RULES (추천 엔진 규칙)
# ==============================================================================

# [예산 구간] (최소, 최대) - 최소 포함, 최대 미포함. None = 상한 없음
BUDGET_TIERS = {
    "low": (0, 30),
    "medium": (30, 70),
    "high": (70, 150),
    "luxury": (150, None),
}

DEFAULT_BUDGET_TIER = "medium"
DEFAULT_PRODUCT_PREFERENCE = "any"

# [천연 성분 판별] 카테고리 키워드 + 핵심 성분 마커
NATURAL_CATEGORY_KEYWORD = "natural"
NATURAL_MARKERS = ["oil", "extract", "butter", "botanical"]

# [가중치 설정] 합계 최대 100점
RULES = {
    "skin_type": {
        "match": 40,
        "all_sentinel": "all",
    },
    "concern": {
        "per_match": 10,
        "max": 40,
    },
    "rating": {
        "scale": 5.0,
        "max": 10,
    },
    # (리뷰 수 초과 기준, 점수) - 위에서부터 먼저 만족하는 구간 하나만 적용
    "popularity": [
        (1000, 10),
        (500, 5),
    ],
}

# [우선순위] (최소 점수, 등급) - 1 = Top Pick
PRIORITY_LEVELS = [
    (80, 1),
    (60, 2),
]
DEFAULT_PRIORITY_LEVEL = 3

# ==============================================================================
# 4. KNOWLEDGE (성분 효능 사전)
# ==============================================================================

# [추천 사유 문구]
FALLBACK_REASON = "Recommended based on your skin profile and analysis results."
MAX_REASON_CONCERNS = 2

# [성분 효능] 정의 순서가 부분 일치 검색 우선순위입니다.
INGREDIENT_BENEFITS = {
    # 천연 오일
    "rosehip oil": "Rich in essential fatty acids (omega-3, omega-6) and vitamin A, stimulates collagen production, reduces hyperpigmentation through natural retinoids, and improves skin elasticity",
    "argan oil": "High in vitamin E and fatty acids, strengthens skin barrier, provides antioxidant protection, and improves skin hydration without clogging pores",
    "jojoba oil": "Mimics skin sebum, regulates oil production, has anti-inflammatory properties, and helps balance both dry and oily skin types",
    "sweet almond oil": "Contains vitamin E and fatty acids, deeply moisturizes, reduces inflammation, and improves skin tone",
    "coconut oil": "Contains lauric acid with antimicrobial properties, deeply hydrates, strengthens skin barrier, and has anti-inflammatory effects",
    "squalane": "Biomimetic lipid that enhances skin barrier function, provides deep hydration, has antioxidant properties, and improves skin elasticity",

    # 기능성 성분
    "retinol": "Vitamin A derivative that accelerates cell turnover, stimulates collagen synthesis, reduces fine lines and wrinkles, and improves skin texture",
    "niacinamide": "Vitamin B3 that reduces inflammation, minimizes pore appearance, regulates sebum production, improves skin barrier function, and reduces hyperpigmentation",
    "vitamin c": "Powerful antioxidant that neutralizes free radicals, brightens skin, stimulates collagen production, and reduces hyperpigmentation",
    "hyaluronic acid": "Humectant that holds up to 1000x its weight in water, deeply hydrates skin, plumps fine lines, and improves skin texture",
    "salicylic acid": "Beta hydroxy acid (BHA) that penetrates pores, exfoliates dead skin cells, reduces acne, and has anti-inflammatory properties",
    "glycolic acid": "Alpha hydroxy acid (AHA) that exfoliates surface skin, improves texture, reduces hyperpigmentation, and stimulates collagen production",
    "peptides": "Amino acid chains that signal skin to produce more collagen and elastin, improve firmness, and reduce wrinkle depth",

    # 식물 추출물
    "green tea": "Contains polyphenols (EGCG) with potent antioxidant and anti-inflammatory properties, protects against UV damage, and reduces sebum production",
    "chamomile": "Contains bisabolol and chamazulene with anti-inflammatory and soothing properties, reduces redness, and calms sensitive skin",
    "calendula": "Anti-inflammatory and antimicrobial properties, accelerates wound healing, soothes irritation, and promotes skin regeneration",
    "aloe vera": "Contains vitamins, minerals, and polysaccharides that hydrate, soothe inflammation, accelerate healing, and provide antimicrobial benefits",
    "tea tree": "Contains terpinen-4-ol with strong antimicrobial and anti-inflammatory properties, effective against acne-causing bacteria",
    "lavender": "Anti-inflammatory and antimicrobial properties, promotes healing, reduces redness, and has calming effects",
    "rose": "Rich in antioxidants and vitamins, anti-inflammatory, balances skin pH, and provides hydration",

    # 세라마이드/지질
    "ceramides": "Essential lipids that strengthen skin barrier, prevent moisture loss, protect against environmental damage, and reduce inflammation",
    "cholesterol": "Natural lipid that repairs skin barrier, improves hydration, and works synergistically with ceramides and fatty acids",

    # 기타
    "zinc": "Anti-inflammatory mineral that regulates sebum production, has antimicrobial properties, and accelerates wound healing",
    "nori extract": "Marine extract rich in vitamins and minerals, provides antioxidant protection, and improves skin hydration",
    "bakuchiol": "Natural retinol alternative derived from plants, stimulates collagen production, improves elasticity, and reduces fine lines without irritation",
    "azelaic acid": "Multi-functional acid that reduces acne, brightens skin, has antimicrobial properties, and reduces inflammation",
    "ferulic acid": "Antioxidant that enhances vitamin C and E stability, neutralizes free radicals, and protects against UV damage",
}

# ==============================================================================
# 5. INFRASTRUCTURE (DB)
# ==============================================================================

# [데이터베이스] PostgreSQL 접속 정보 (환경변수 우선)
DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "database": os.getenv("DB_NAME", "postgres"),
    "user": os.getenv("DB_USER", "postgres"),
    "password": os.getenv("DB_PASSWORD", "password"),
    "port": os.getenv("DB_PORT", "5432")
}
