# beerstock/domains/beer/schemas.py

"""
'beer' 도메인의 요청/응답 스키마를 정의하는 모듈입니다.
와이어 표현은 capacity/category 필드명을 사용합니다.
"""

from typing import Any, List, Optional

from pydantic import ConfigDict, Field, field_validator
from sqlmodel import SQLModel

from beerstock.domains.beer.models import BeerType

# 저장 컬럼(INTEGER)이 표현할 수 있는 최댓값
INT32_MAX = 2_147_483_647


class BeerBase(SQLModel):
    name: str = Field(..., min_length=1, max_length=200, description="맥주 이름 (고유)")
    brand: str = Field(..., min_length=1, max_length=200, description="브랜드")
    capacity: int = Field(..., ge=1, le=INT32_MAX, description="최대 재고 수량")
    quantity: int = Field(..., ge=0, le=INT32_MAX, description="현재 재고 수량")
    category: BeerType = Field(..., description="맥주 종류")

    @field_validator("name", "brand")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class BeerCreate(BeerBase):
    pass


class BeerUpdate(BeerBase):
    # 본문의 id는 무시되며 경로 파라미터의 id가 유지됩니다.
    id: Optional[int] = Field(None, description="무시됨")


class BeerDTO(SQLModel):
    """서비스가 반환하는 와이어 표현. 내부 데이터는 이미 검증된 상태입니다."""
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="맥주 고유 ID")
    name: str
    brand: str
    capacity: int
    quantity: int
    category: BeerType


class ErrorResponse(SQLModel):
    error: str = Field(..., description="오류 분류 라벨")
    message: str = Field(..., description="사람이 읽을 수 있는 상세 메시지")
    details: Optional[List[Any]] = Field(None, description="요청 검증 오류 상세")
