# tests/domains/test_beer_repository.py

"""
SQLBeerRepository 통합 테스트 모듈입니다.
테스트용 SQLite 세션 위에서 저장소 인터페이스 동작을 검증합니다.
"""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from beerstock.domains.beer.models import Beer, BeerType
from beerstock.domains.beer.repository import InMemoryBeerRepository, SQLBeerRepository


def new_beer(name: str = "Brahma", **kwargs) -> Beer:
    data = {"brand": "Ambev", "max_quantity": 100, "quantity": 10, "beer_type": BeerType.LAGER}
    data.update(kwargs)
    return Beer(name=name, **data)


@pytest.fixture
def sql_repository(db_session: AsyncSession) -> SQLBeerRepository:
    return SQLBeerRepository(db_session)


@pytest.mark.asyncio
async def test_insert_assigns_positive_id(sql_repository: SQLBeerRepository):
    saved = await sql_repository.insert(new_beer())
    assert saved.id is not None and saved.id > 0
    assert saved.beer_type == BeerType.LAGER
    assert saved.max_quantity == 100


@pytest.mark.asyncio
async def test_find_by_name(sql_repository: SQLBeerRepository):
    await sql_repository.insert(new_beer())
    found = await sql_repository.find_by_name("Brahma")
    assert found is not None
    assert found.brand == "Ambev"
    assert await sql_repository.find_by_name("brahma") is None
    assert await sql_repository.exists_by_name("Brahma")
    assert not await sql_repository.exists_by_name("Skol")


@pytest.mark.asyncio
async def test_find_by_id_missing_returns_none(sql_repository: SQLBeerRepository):
    assert await sql_repository.find_by_id(999999) is None


@pytest.mark.asyncio
async def test_list_all_ordered_by_id(sql_repository: SQLBeerRepository):
    assert await sql_repository.list_all() == []
    await sql_repository.insert(new_beer("Skol"))
    await sql_repository.insert(new_beer("Brahma"))
    assert [beer.name for beer in await sql_repository.list_all()] == ["Skol", "Brahma"]


@pytest.mark.asyncio
async def test_update_replaces_fields(sql_repository: SQLBeerRepository):
    saved = await sql_repository.insert(new_beer())
    replacement = new_beer("Brahma Duplo Malte", brand="Ambev", max_quantity=60, quantity=60, beer_type=BeerType.MALZBIER)
    replacement.id = saved.id

    updated = await sql_repository.update(replacement)

    assert updated.id == saved.id
    assert updated.name == "Brahma Duplo Malte"
    assert updated.beer_type == BeerType.MALZBIER
    assert (await sql_repository.find_by_id(saved.id)).quantity == 60


@pytest.mark.asyncio
async def test_update_missing_returns_none(sql_repository: SQLBeerRepository):
    ghost = new_beer()
    ghost.id = 404
    assert await sql_repository.update(ghost) is None


@pytest.mark.asyncio
async def test_delete(sql_repository: SQLBeerRepository):
    saved = await sql_repository.insert(new_beer())
    assert await sql_repository.delete(saved.id) is True
    assert await sql_repository.find_by_id(saved.id) is None
    assert await sql_repository.delete(saved.id) is False


@pytest.mark.asyncio
async def test_deleted_id_is_not_reused(sql_repository: SQLBeerRepository):
    """(성공) 마지막 행을 삭제해도 다음 id는 새로 할당됩니다."""
    first = await sql_repository.insert(new_beer())
    first_id = first.id
    await sql_repository.delete(first_id)
    second = await sql_repository.insert(new_beer())
    assert second.id > first_id


@pytest.mark.asyncio
async def test_unique_name_enforced_by_store(sql_repository: SQLBeerRepository):
    """서비스 사전 검사와 별개로 저장소도 이름 중복을 거부합니다."""
    await sql_repository.insert(new_beer())
    with pytest.raises(IntegrityError):
        await sql_repository.insert(new_beer())
    # 롤백 후에도 세션은 계속 사용할 수 있습니다.
    assert len(await sql_repository.list_all()) == 1


@pytest.mark.asyncio
async def test_in_memory_repository_returns_copies():
    repository = InMemoryBeerRepository()
    saved = await repository.insert(new_beer())
    saved.quantity = 99
    assert (await repository.find_by_id(saved.id)).quantity == 10
