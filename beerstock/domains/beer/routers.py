# beerstock/domains/beer/routers.py

from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from beerstock.core import dependencies as deps
from beerstock.core.result import Err, Result
from beerstock.domains.beer import schemas as beer_schemas
from beerstock.domains.beer.service import BeerService

router = APIRouter(
    tags=["Beer Stock (맥주 재고 관리)"],
    responses={
        404: {"model": beer_schemas.ErrorResponse, "description": "Not found"},
        400: {"model": beer_schemas.ErrorResponse, "description": "Bad request"},
    },
)


def _respond(result: Result, status_code: int = status.HTTP_200_OK):
    """서비스 결과를 HTTP 응답으로 변환합니다."""
    if isinstance(result, Err):
        return JSONResponse(status_code=result.error.status_code, content=result.error.to_dict())
    if status_code == status.HTTP_200_OK:
        return result.value
    return JSONResponse(status_code=status_code, content=result.value.model_dump(mode="json"))


@router.post(
    "",
    response_model=beer_schemas.BeerDTO,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": beer_schemas.ErrorResponse, "description": "Already registered"}},
)
async def create_beer(
    beer_create: beer_schemas.BeerCreate,
    service: BeerService = Depends(deps.get_beer_service),
):
    """새로운 맥주를 등록합니다."""
    return _respond(await service.create(beer_create), status.HTTP_201_CREATED)


@router.get("", response_model=List[beer_schemas.BeerDTO])
async def list_beers(service: BeerService = Depends(deps.get_beer_service)):
    """등록된 모든 맥주 목록을 조회합니다. 없으면 빈 배열을 반환합니다."""
    return _respond(await service.list_all())


@router.get("/name/{name}", response_model=beer_schemas.BeerDTO)
async def read_beer_by_name(name: str, service: BeerService = Depends(deps.get_beer_service)):
    """이름으로 특정 맥주를 조회합니다."""
    return _respond(await service.get_by_name(name))


@router.get("/{beer_id}", response_model=beer_schemas.BeerDTO)
async def read_beer(beer_id: int, service: BeerService = Depends(deps.get_beer_service)):
    """ID로 특정 맥주를 조회합니다."""
    return _respond(await service.get_by_id(beer_id))


@router.put("/{beer_id}", response_model=beer_schemas.BeerDTO)
async def update_beer(
    beer_id: int,
    beer_update: beer_schemas.BeerUpdate,
    service: BeerService = Depends(deps.get_beer_service),
):
    """ID로 특정 맥주의 모든 필드를 교체합니다. ID는 변경되지 않습니다."""
    return _respond(await service.update(beer_id, beer_update))


@router.delete("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_beer(beer_id: int, service: BeerService = Depends(deps.get_beer_service)):
    """ID로 특정 맥주를 삭제합니다."""
    result = await service.delete(beer_id)
    if isinstance(result, Err):
        return _respond(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{beer_id}/increment", response_model=beer_schemas.BeerDTO)
async def increment_stock(
    beer_id: int,
    quantity_to_increment: int = Query(..., alias="quantityToIncrement"),
    service: BeerService = Depends(deps.get_beer_service),
):
    """재고를 증가시킵니다. 최대 재고를 넘으면 400을 반환합니다."""
    return _respond(await service.increment(beer_id, quantity_to_increment))


@router.patch("/{beer_id}/decrement", response_model=beer_schemas.BeerDTO)
async def decrement_stock(
    beer_id: int,
    quantity_to_decrement: int = Query(..., alias="quantityToDecrement"),
    service: BeerService = Depends(deps.get_beer_service),
):
    """재고를 감소시킵니다. 가용 수량보다 많으면 400을 반환합니다."""
    return _respond(await service.decrement(beer_id, quantity_to_decrement))
