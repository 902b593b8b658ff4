# app/domains/catalog/crud.py

"""
'catalog' 도메인의 조회 로직을 담당하는 모듈입니다.
참조 테이블은 API에서 읽기 전용이며, 쓰기 메소드는 카탈로그 적재 스크립트에서만 사용합니다.
"""

import logging
from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.core.crud_base import CRUDBase

from . import models as catalog_models
from . import schemas as catalog_schemas

logger = logging.getLogger(__name__)


# =============================================================================
# 1. 분석 메소드 (Method) CRUD
# =============================================================================
class CRUDMethod(CRUDBase[catalog_models.Method, catalog_schemas.MethodCreate, catalog_schemas.MethodCreate]):
    def __init__(self):
        super().__init__(model=catalog_models.Method)

    async def get_all(self, db: AsyncSession) -> List[catalog_models.Method]:
        """모든 메소드를 메소드/리비전 번호 순으로 조회합니다."""
        return await self.get_multi(db, order_by=[self.model.method_number, self.model.revision_number])

    async def get_by_compound(self, db: AsyncSession, *, compound: str) -> List[catalog_models.Method]:
        """화합물명이 정확히 일치하는 메소드를 최신 메소드/리비전 순(내림차순)으로 조회합니다."""
        statement = (
            select(self.model)
            .where(self.model.compound == compound)
            .order_by(self.model.method_number.desc(), self.model.revision_number.desc())
        )
        result = await db.execute(statement)
        return result.scalars().all()

    async def exists(self, db: AsyncSession, *, method_number: int, revision_number: int) -> bool:
        """(메소드, 리비전) 쌍이 존재하는지 확인합니다."""
        return await self.get(db, (method_number, revision_number)) is not None

    async def merge(self, db: AsyncSession, *, obj_in: catalog_schemas.MethodCreate) -> catalog_models.Method:
        """복합 키 기준으로 메소드를 추가하거나 갱신합니다. (카탈로그 적재용)"""
        db_obj = await db.merge(self.model.model_validate(obj_in.model_dump()))
        await db.flush()
        return db_obj


method = CRUDMethod()


# =============================================================================
# 2. 직원 (Employee) CRUD
# =============================================================================
class CRUDEmployee(CRUDBase[catalog_models.Employee, catalog_schemas.EmployeeCreate, catalog_schemas.EmployeeCreate]):
    def __init__(self):
        super().__init__(model=catalog_models.Employee)

    async def get_chemists(self, db: AsyncSession) -> List[catalog_models.Employee]:
        """화학자/분석자 역할의 직원을 이름 오름차순으로 조회합니다."""
        statement = (
            select(self.model)
            .where(self.model.role.in_(settings.CHEMIST_ROLES))
            .order_by(self.model.name)
        )
        result = await db.execute(statement)
        return result.scalars().all()

    async def get_by_name_and_role(self, db: AsyncSession, *, name: str, role: str) -> Optional[catalog_models.Employee]:
        statement = select(self.model).where(self.model.name == name, self.model.role == role)
        result = await db.execute(statement)
        return result.scalars().first()

    async def resolve_id(self, db: AsyncSession, *, name: Optional[str]) -> Optional[int]:
        """
        직원 이름을 ID로 변환합니다.
        '배정 없음' 표식(N/A)이나 찾을 수 없는 이름은 오류가 아니라 None(미배정)으로 처리합니다.
        동명이인이 있으면 가장 먼저 등록된 직원을 사용합니다.
        """
        if not name or name == settings.NO_CHEMIST_SENTINEL:
            return None

        statement = select(self.model.id).where(self.model.name == name).order_by(self.model.id)
        result = await db.execute(statement)
        employee_id = result.scalars().first()
        if employee_id is None:
            logger.info("Employee '%s' not found; assignment cleared.", name)
        return employee_id


employee = CRUDEmployee()
