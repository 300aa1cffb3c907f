# beerstock/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- 요청 단위 세션에 묶인 BeerService 조립 (get_beer_service).
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from beerstock.core.database import get_session as get_main_app_session
from beerstock.domains.beer.mapper import BeerMapper
from beerstock.domains.beer.repository import SQLBeerRepository
from beerstock.domains.beer.service import BeerService


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    beerstock.core.database.get_session을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session():
        yield session


def get_beer_service(db: AsyncSession = Depends(get_db_session)) -> BeerService:
    """요청 세션 기반 저장소와 매퍼를 주입한 서비스를 반환합니다."""
    return BeerService(SQLBeerRepository(db), BeerMapper())
