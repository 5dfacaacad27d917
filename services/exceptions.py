# exceptions.py
"""
[예외 정의]
입력 계약 위반(잘못된 심각도, 알 수 없는 예산 구간 등)을 호출자에게 그대로 알립니다.
"""


class InvalidArgumentError(ValueError):
    """경계에서 검증에 실패한 입력값"""
