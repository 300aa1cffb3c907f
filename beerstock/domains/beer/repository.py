# beerstock/domains/beer/repository.py

"""
'beer' 도메인의 저장소 인터페이스와 구현체입니다.

서비스는 BeerRepository 인터페이스에만 의존하며, 생성자 주입으로 구현체를 받습니다.
- SQLBeerRepository: SQLModel 비동기 세션 기반 (운영용).
- InMemoryBeerRepository: 딕셔너리 기반 (테스트 및 경량 실행용).

조회 메서드는 대상이 없으면 예외 대신 None을 반환합니다.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from beerstock.core.crud_base import CRUDBase
from beerstock.domains.beer.models import Beer
from beerstock.domains.beer.schemas import BeerCreate, BeerUpdate


class BeerRepository(ABC):

    @abstractmethod
    async def insert(self, beer: Beer) -> Beer:
        """새 품목을 저장하고 id가 할당된 품목을 반환합니다."""

    @abstractmethod
    async def find_by_id(self, beer_id: int) -> Optional[Beer]:
        """id로 품목을 조회합니다."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Beer]:
        """이름(대소문자 구분)으로 품목을 조회합니다."""

    @abstractmethod
    async def list_all(self) -> List[Beer]:
        """모든 품목을 반환합니다."""

    @abstractmethod
    async def update(self, beer: Beer) -> Optional[Beer]:
        """beer.id에 해당하는 품목의 id 외 모든 필드를 교체합니다."""

    @abstractmethod
    async def delete(self, beer_id: int) -> bool:
        """품목을 삭제합니다. 삭제했으면 True를 반환합니다."""

    async def exists_by_name(self, name: str) -> bool:
        return await self.find_by_name(name) is not None


class SQLBeerRepository(BeerRepository):
    """요청 단위 AsyncSession에 묶인 저장소입니다. 쓰기마다 커밋합니다."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.crud: CRUDBase[Beer, BeerCreate, BeerUpdate] = CRUDBase(Beer)

    async def insert(self, beer: Beer) -> Beer:
        beer.id = None
        return await self.crud.create(self.db, obj_in=beer)

    async def find_by_id(self, beer_id: int) -> Optional[Beer]:
        return await self.crud.get(self.db, beer_id)

    async def find_by_name(self, name: str) -> Optional[Beer]:
        return await self.crud.get_by_attribute(self.db, attribute="name", value=name)

    async def list_all(self) -> List[Beer]:
        return await self.crud.get_multi(self.db, limit=None, order_by_field="id")

    async def update(self, beer: Beer) -> Optional[Beer]:
        db_obj = await self.crud.get(self.db, beer.id)
        if db_obj is None:
            return None
        return await self.crud.update(
            self.db, db_obj=db_obj, obj_in=beer.model_dump(exclude={"id"})
        )

    async def delete(self, beer_id: int) -> bool:
        return await self.crud.delete(self.db, id=beer_id) is not None


class InMemoryBeerRepository(BeerRepository):
    """
    딕셔너리 기반 저장소입니다.
    저장/반환 시 복사본을 사용하므로 호출자가 저장된 상태를 직접 변경할 수 없습니다.
    삭제된 id는 재사용되지 않습니다.
    """

    def __init__(self):
        self._rows: Dict[int, Beer] = {}
        self._next_id = 1

    @staticmethod
    def _clone(beer: Beer) -> Beer:
        return Beer(**beer.model_dump())

    async def insert(self, beer: Beer) -> Beer:
        stored = self._clone(beer)
        stored.id = self._next_id
        self._next_id += 1
        self._rows[stored.id] = stored
        return self._clone(stored)

    async def find_by_id(self, beer_id: int) -> Optional[Beer]:
        beer = self._rows.get(beer_id)
        return self._clone(beer) if beer else None

    async def find_by_name(self, name: str) -> Optional[Beer]:
        for beer in self._rows.values():
            if beer.name == name:
                return self._clone(beer)
        return None

    async def list_all(self) -> List[Beer]:
        return [self._clone(beer) for beer in self._rows.values()]

    async def update(self, beer: Beer) -> Optional[Beer]:
        if beer.id not in self._rows:
            return None
        self._rows[beer.id] = self._clone(beer)
        return self._clone(beer)

    async def delete(self, beer_id: int) -> bool:
        return self._rows.pop(beer_id, None) is not None
