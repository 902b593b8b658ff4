# app/core/crud_base.py

"""
공통 CRUD(Create, Read, Update) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 환경에 맞게 작성되었습니다.

쓰기 메서드는 flush까지만 수행합니다. 커밋/롤백 경계는 호출하는 쪽에서
app.core.database.atomic()으로 정합니다.
"""

from typing import Generic, List, Optional, Type, TypeVar, Any, Dict, Union

from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        기본 키를 기준으로 단일 레코드를 조회합니다.
        복합 키 모델은 (값1, 값2) 튜플을 전달합니다.
        """
        return await db.get(self.model, id)

    async def get_for_update(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        기본 키로 레코드를 조회하면서 행 잠금(SELECT ... FOR UPDATE)을 획득합니다.
        잠금은 현재 트랜잭션이 끝날 때까지 유지됩니다.
        세션에 캐시된 객체가 있더라도 DB의 최신 값으로 덮어씁니다.
        """
        statement = (
            select(self.model)
            .where(self.model.id == id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await db.execute(statement)
        return result.scalars().one_or_none()

    async def get_multi(
        self, db: AsyncSession, *, order_by: Optional[List[Any]] = None, **kwargs: Any
    ) -> List[ModelType]:
        """
        여러 레코드를 조회합니다. 필터링을 위한 키워드 인자를 지원합니다.
        """
        query = select(self.model)

        for field, value in kwargs.items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)

        if order_by:
            query = query.order_by(*order_by)

        result = await db.execute(query)
        return result.scalars().all()

    async def create(self, db: AsyncSession, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
        """
        새로운 레코드를 세션에 추가하고 flush하여 자동 생성 키를 확보합니다.
        """
        db_obj = self.model.model_validate(obj_in)
        db.add(db_obj)
        await db.flush()
        return db_obj
