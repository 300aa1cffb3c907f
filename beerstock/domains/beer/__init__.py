# beerstock/domains/beer/__init__.py

"""
FastAPI 애플리케이션의 'beer' 도메인 패키지입니다.

맥주 품목(Beer)의 등록, 조회, 수정, 삭제와 최대 재고(capacity) 범위 안에서의
재고 증가/감소 로직을 담당합니다.

주요 서브모듈:
- `models.py`: 'beers' 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답(와이어) 모델.
- `mapper.py`: 와이어 모델과 영속 모델 간 변환.
- `exceptions.py`: 재고 관련 비즈니스 오류 분류.
- `repository.py`: 저장소 인터페이스와 구현체.
- `service.py`: 재고 규칙을 적용하는 서비스.
- `routers.py`: API 엔드포인트 정의.
"""

__title__ = "Beer Stock Domain"
__all__ = []
