# beerstock/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 환경에 맞게 작성되었습니다.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    이 클래스를 상속받거나 감싸서 각 모델에 특화된 저장소를 구현합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """ID를 기준으로 단일 레코드를 조회합니다."""
        return await db.get(self.model, id)

    async def get_multi(
        self,
        db: AsyncSession,
        *,
        skip: int = 0,
        limit: Optional[int] = 100,
        order_by_field: Optional[str] = "id",
        **kwargs: Any
    ) -> List[ModelType]:
        """
        여러 레코드를 조회합니다. 필터링을 위한 키워드 인자를 지원합니다.
        limit이 None이면 전체 레코드를 반환합니다.
        """
        query = select(self.model)

        for field, value in kwargs.items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)

        if order_by_field and hasattr(self.model, order_by_field):
            query = query.order_by(getattr(self.model, order_by_field))

        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_by_attribute(
        self, db: AsyncSession, *, attribute: str, value: Any
    ) -> Optional[ModelType]:
        """단일 속성 값으로 레코드를 조회합니다. 없으면 None을 반환합니다."""
        statement = select(self.model).where(getattr(self.model, attribute) == value)
        response = await db.execute(statement)
        return response.scalar_one_or_none()

    async def create(
        self, db: AsyncSession, *, obj_in: Union[CreateSchemaType, ModelType, Dict[str, Any]]
    ) -> ModelType:
        """
        새로운 레코드를 생성합니다.
        이미 모델 인스턴스가 전달되면 그대로 저장합니다.
        """
        db_obj = obj_in if isinstance(obj_in, self.model) else self.model.model_validate(obj_in)
        db.add(db_obj)
        await self._commit(db)
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """기존 레코드를 업데이트합니다."""
        update_data = (
            obj_in
            if isinstance(obj_in, dict)
            else obj_in.model_dump(exclude_unset=True)
        )
        for key, value in update_data.items():
            if hasattr(db_obj, key):
                setattr(db_obj, key, value)

        db.add(db_obj)
        await self._commit(db)
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """ID를 기준으로 레코드를 삭제합니다."""
        db_obj = await db.get(self.model, id)
        if db_obj:
            await db.delete(db_obj)
            await self._commit(db)
        return db_obj

    async def _commit(self, db: AsyncSession) -> None:
        # 커밋 실패 시 세션을 롤백한 뒤 예외를 그대로 전파합니다.
        try:
            await db.commit()
        except Exception:
            await db.rollback()
            raise
