# tests/conftest.py

import os
from typing import AsyncGenerator, Awaitable, Callable

# 앱 모듈이 임포트되기 전에 테스트용 DB URL을 지정합니다.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from beerstock.core import dependencies as deps  # noqa: E402
from beerstock.core.database import get_session  # noqa: E402
from beerstock.domains.beer import models as beer_models  # noqa: E402
from beerstock.domains.beer.mapper import BeerMapper  # noqa: E402
from beerstock.domains.beer.repository import InMemoryBeerRepository  # noqa: E402
from beerstock.domains.beer.service import BeerService  # noqa: E402
from beerstock.main import app as main_app  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    테스트마다 독립된 인메모리 SQLite 엔진을 만들고 테이블을 생성합니다.
    StaticPool을 사용해 모든 세션이 같은 연결(같은 메모리 DB)을 공유합니다.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """테스트용 비동기 데이터베이스 세션을 제공합니다."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session


# --- 비동기 테스트 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    테스트용 비동기 DB 세션을 주입한 AsyncClient 인스턴스를 생성합니다.
    """

    def override_get_session():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()
    try:
        main_app.dependency_overrides[get_session] = override_get_session
        main_app.dependency_overrides[deps.get_db_session] = override_get_session

        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client
    finally:
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


# --- 서비스 픽스처 (인메모리 저장소) ---
@pytest_asyncio.fixture(scope="function")
async def memory_repository() -> InMemoryBeerRepository:
    return InMemoryBeerRepository()


@pytest_asyncio.fixture(scope="function")
async def beer_service(memory_repository: InMemoryBeerRepository) -> BeerService:
    return BeerService(memory_repository, BeerMapper())


# --- 도메인 공통 픽스처 ---
@pytest.fixture(scope="function")
def beer_factory(db_session: AsyncSession) -> Callable[..., Awaitable[beer_models.Beer]]:
    """속성을 지정하여 테스트용 맥주 레코드를 DB에 직접 생성하는 팩토리 함수를 반환합니다."""
    async def _create_beer(
        name: str = "Brahma",
        brand: str = "Ambev",
        max_quantity: int = 100,
        quantity: int = 10,
        beer_type: beer_models.BeerType = beer_models.BeerType.LAGER,
    ) -> beer_models.Beer:
        beer = beer_models.Beer(
            name=name,
            brand=brand,
            max_quantity=max_quantity,
            quantity=quantity,
            beer_type=beer_type,
        )
        db_session.add(beer)
        await db_session.commit()
        await db_session.refresh(beer)
        return beer
    return _create_beer


@pytest_asyncio.fixture(scope="function")
async def test_beer(beer_factory: Callable[..., Awaitable[beer_models.Beer]]) -> beer_models.Beer:
    """기본 테스트용 맥주 (Brahma, 10/100)."""
    return await beer_factory()
