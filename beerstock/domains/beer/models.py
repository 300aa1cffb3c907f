# beerstock/domains/beer/models.py

"""
'beer' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

import enum
from typing import Optional

from sqlalchemy import Column, Enum as SAEnum
from sqlmodel import Field, SQLModel


class BeerType(str, enum.Enum):
    """맥주 종류 (닫힌 열거형)."""
    LAGER = "LAGER"
    MALZBIER = "MALZBIER"
    WITBIER = "WITBIER"
    WEISS = "WEISS"
    ALE = "ALE"
    IPA = "IPA"
    STOUT = "STOUT"


# =============================================================================
# beers 테이블 모델
# =============================================================================
class Beer(SQLModel, table=True):
    """
    재고 관리 대상 맥주 품목.
    0 <= quantity <= max_quantity 불변식은 서비스 계층이 보장합니다.
    """
    __tablename__ = "beers"
    # SQLite에서도 삭제된 id가 재사용되지 않도록 AUTOINCREMENT를 사용합니다.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=200, unique=True, index=True, nullable=False)
    brand: str = Field(max_length=200, nullable=False)
    max_quantity: int = Field(nullable=False, description="최대 재고 수량")
    quantity: int = Field(default=0, nullable=False, description="현재 재고 수량")
    beer_type: BeerType = Field(sa_column=Column(SAEnum(BeerType, name="beer_type"), nullable=False))
