# tests/__init__.py

"""
Beer Stock API 테스트 스위트 패키지입니다.

- `conftest.py`: 테스트용 DB 엔진, 세션, 비동기 클라이언트 픽스처.
- `test_main.py`: 루트 및 헬스 체크 엔드포인트 테스트.
- `domains/`: 도메인별 단위/통합 테스트.
"""

__all__ = []
