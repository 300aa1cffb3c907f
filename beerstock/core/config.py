# beerstock/core/config.py

import os

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=True
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Beer Stock API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "REST API for managing beer stock with capacity bounds."
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Echo SQL statements and enable verbose errors")

    # --- 데이터베이스 설정 ---
    # 운영 환경에서는 postgresql+asyncpg://... 형태의 URL을 사용합니다.
    DATABASE_URL: SecretStr = Field(
        SecretStr("sqlite+aiosqlite:///./beerstock.db"),
        description="Async SQLAlchemy database URL",
    )
    CREATE_TABLES_ON_STARTUP: bool = Field(True, description="Run metadata.create_all in the lifespan hook")

    # --- 로깅 설정 ---
    LOG_LEVEL: str = Field("INFO", description="Root logger level name")


settings = Settings()
