# beerstock/domains/beer/service.py

"""
맥주 재고 서비스 모듈입니다.

생성 시 이름 중복 검사와 재고 범위(0 <= quantity <= capacity) 검사를 수행하고,
저장소 호출을 조율합니다. 모든 공개 메서드는 예외를 던지지 않고
Ok/Err 결과를 반환합니다. 실패한 연산은 저장소에 아무것도 쓰지 않습니다.

범위 검사 기준:
- create/update: 요청 본문의 quantity/capacity
- increment/decrement: 저장된 품목의 capacity와 계산된 새 수량
"""

import logging
from typing import List, Optional

from beerstock.core.result import Err, Ok, Result
from beerstock.domains.beer.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockError,
    InsufficientStockError,
    InvalidAmountError,
    InvalidStockError,
)
from beerstock.domains.beer.mapper import BeerMapper
from beerstock.domains.beer.models import Beer
from beerstock.domains.beer.repository import BeerRepository
from beerstock.domains.beer.schemas import BeerBase, BeerDTO

logger = logging.getLogger(__name__)


class BeerService:

    def __init__(self, repository: BeerRepository, mapper: BeerMapper):
        self.repository = repository
        self.mapper = mapper

    async def create(self, beer_in: BeerBase) -> Result[BeerDTO, BeerStockError]:
        """이름이 중복되지 않고 수량이 범위 안이면 새 품목을 저장합니다."""
        if await self.repository.exists_by_name(beer_in.name):
            return self._reject("create", BeerAlreadyRegisteredError(beer_in.name))

        error = self._validate_stock(beer_in.quantity, beer_in.capacity)
        if error:
            return self._reject("create", error)

        beer = self.mapper.to_model(beer_in)
        beer.id = None  # id는 저장소가 할당합니다.
        saved = await self.repository.insert(beer)
        logger.info("Created beer %s (%s)", saved.id, saved.name)
        return Ok(self.mapper.to_dto(saved))

    async def get_by_id(self, beer_id: int) -> Result[BeerDTO, BeerStockError]:
        beer = await self.repository.find_by_id(beer_id)
        if beer is None:
            return Err(BeerNotFoundError.for_id(beer_id))
        return Ok(self.mapper.to_dto(beer))

    async def get_by_name(self, name: str) -> Result[BeerDTO, BeerStockError]:
        beer = await self.repository.find_by_name(name)
        if beer is None:
            return Err(BeerNotFoundError.for_name(name))
        return Ok(self.mapper.to_dto(beer))

    async def list_all(self) -> Result[List[BeerDTO], BeerStockError]:
        beers = await self.repository.list_all()
        return Ok([self.mapper.to_dto(beer) for beer in beers])

    async def update(self, beer_id: int, beer_in: BeerBase) -> Result[BeerDTO, BeerStockError]:
        """
        id를 제외한 모든 필드를 교체합니다.
        본문에 id가 있더라도 경로의 beer_id가 유지됩니다.
        """
        if await self.repository.find_by_id(beer_id) is None:
            return self._reject("update", BeerNotFoundError.for_id(beer_id))

        error = self._validate_stock(beer_in.quantity, beer_in.capacity)
        if error:
            return self._reject("update", error)

        beer = self.mapper.to_model(beer_in)
        beer.id = beer_id
        updated = await self.repository.update(beer)
        if updated is None:
            return self._reject("update", BeerNotFoundError.for_id(beer_id))
        logger.info("Updated beer %s", beer_id)
        return Ok(self.mapper.to_dto(updated))

    async def delete(self, beer_id: int) -> Result[None, BeerStockError]:
        if await self.repository.find_by_id(beer_id) is None:
            return self._reject("delete", BeerNotFoundError.for_id(beer_id))
        await self.repository.delete(beer_id)
        logger.info("Deleted beer %s", beer_id)
        return Ok(None)

    async def increment(self, beer_id: int, amount: int) -> Result[BeerDTO, BeerStockError]:
        error = self._validate_amount(amount, "increment")
        if error:
            return self._reject("increment", error)

        beer = await self.repository.find_by_id(beer_id)
        if beer is None:
            return self._reject("increment", BeerNotFoundError.for_id(beer_id))

        new_quantity = beer.quantity + amount
        error = self._validate_stock(new_quantity, beer.max_quantity)
        if error:
            return self._reject("increment", error)

        return await self._save_quantity(beer, new_quantity, "increment")

    async def decrement(self, beer_id: int, amount: int) -> Result[BeerDTO, BeerStockError]:
        error = self._validate_amount(amount, "decrement")
        if error:
            return self._reject("decrement", error)

        beer = await self.repository.find_by_id(beer_id)
        if beer is None:
            return self._reject("decrement", BeerNotFoundError.for_id(beer_id))

        new_quantity = beer.quantity - amount
        if new_quantity < 0:
            return self._reject("decrement", InsufficientStockError(amount, beer.quantity))

        return await self._save_quantity(beer, new_quantity, "decrement")

    # =========================================================================
    # 내부 헬퍼
    # =========================================================================
    async def _save_quantity(
        self, beer: Beer, new_quantity: int, operation: str
    ) -> Result[BeerDTO, BeerStockError]:
        old_quantity = beer.quantity
        beer.quantity = new_quantity
        updated = await self.repository.update(beer)
        if updated is None:
            return self._reject(operation, BeerNotFoundError.for_id(beer.id))
        logger.info(
            "Beer %s %s: quantity %s -> %s", beer.id, operation, old_quantity, new_quantity
        )
        return Ok(self.mapper.to_dto(updated))

    @staticmethod
    def _validate_stock(quantity: int, max_quantity: int) -> Optional[InvalidStockError]:
        if quantity < 0:
            return InvalidStockError.negative()
        if quantity > max_quantity:
            return InvalidStockError.exceeded(quantity, max_quantity)
        return None

    @staticmethod
    def _validate_amount(amount: int, operation: str) -> Optional[InvalidAmountError]:
        if amount <= 0:
            return InvalidAmountError(operation)
        return None

    @staticmethod
    def _reject(operation: str, error: BeerStockError) -> Err:
        logger.warning("Beer %s rejected [%s]: %s", operation, error.error, error.message)
        return Err(error)
