# beerstock/__init__.py

"""
Beer Stock FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 맥주 재고 관리 API의 진입점(main.py),
공통 설정 및 데이터베이스 연결을 담는 core 서브패키지,
그리고 비즈니스 도메인을 대표하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "Beer Stock API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Beer stock management API backend."
__all__ = []
