# beerstock/core/__init__.py

"""
애플리케이션 전반에서 사용되는 핵심 구성 요소 패키지입니다.

- `config.py`: 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 비동기 엔진, 세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `crud_base.py`: 공통 비동기 CRUD 기본 클래스.
- `result.py`: 서비스 계층이 반환하는 성공/실패 결과 타입.
- `dependencies.py`: FastAPI 의존성 주입 함수들.
"""

__all__ = []
