# beerstock/domains/beer/mapper.py

"""
와이어 표현(BeerDTO)과 영속 표현(Beer) 사이의 순수 변환기입니다.
검증은 하지 않으며, 필드명만 바꿔 그대로 복사합니다.

    capacity <-> max_quantity
    category <-> beer_type
"""

from typing import Union

from beerstock.domains.beer.models import Beer
from beerstock.domains.beer.schemas import BeerBase, BeerDTO


class BeerMapper:

    def to_model(self, dto: Union[BeerBase, BeerDTO]) -> Beer:
        return Beer(
            id=getattr(dto, "id", None),
            name=dto.name,
            brand=dto.brand,
            max_quantity=dto.capacity,
            quantity=dto.quantity,
            beer_type=dto.category,
        )

    def to_dto(self, beer: Beer) -> BeerDTO:
        return BeerDTO(
            id=beer.id,
            name=beer.name,
            brand=beer.brand,
            capacity=beer.max_quantity,
            quantity=beer.quantity,
            category=beer.beer_type,
        )
