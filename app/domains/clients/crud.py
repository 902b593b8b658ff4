# app/domains/clients/crud.py

"""
'clients' 도메인의 CRUD 로직을 담당하는 모듈입니다.
"""

import logging
from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from app.core.database import upsert_insert

from . import models as clients_models
from . import schemas as clients_schemas

logger = logging.getLogger(__name__)


class CRUDClient(CRUDBase[clients_models.Client, clients_schemas.ClientIdentity, clients_schemas.ClientIdentity]):
    def __init__(self):
        super().__init__(model=clients_models.Client)

    async def resolve(self, db: AsyncSession, *, obj_in: clients_schemas.ClientIdentity) -> int:
        """
        이메일 기준으로 고객을 추가하거나 이름/회사명을 갱신하고 고객 ID를 반환합니다.
        저장소의 유일 제약과 네이티브 upsert 한 번으로 처리하므로
        같은 이메일에 대해 두 개의 ID가 생기지 않습니다.
        커밋하지 않으므로 호출하는 쪽의 트랜잭션에 포함됩니다.
        """
        insert = upsert_insert(db)
        statement = insert(self.model).values(email=obj_in.email, name=obj_in.name, company=obj_in.company)
        statement = statement.on_conflict_do_update(
            index_elements=["email"],
            set_={"name": statement.excluded.name, "company": statement.excluded.company},
        ).returning(self.model.id)

        result = await db.execute(statement)
        client_id = result.scalar_one()
        logger.debug("Resolved client %s -> id %s", obj_in.email, client_id)
        return client_id

    async def search_by_company(self, db: AsyncSession, *, company: str) -> List[clients_models.Client]:
        """회사명 부분 문자열(대소문자 무시)로 고객을 검색합니다."""
        statement = (
            select(self.model)
            .where(self.model.company.ilike(f"%{company}%"))
            .order_by(self.model.company, self.model.name)
        )
        result = await db.execute(statement)
        return result.scalars().all()


client = CRUDClient()
