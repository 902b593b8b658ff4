# app/domains/clients/routers.py

"""
'clients' 도메인 (고객 레지스트리) 관련 API 엔드포인트를 정의하는 모듈입니다.
"""
from typing import List

from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import APIRouter, Depends, Query

from app.core import dependencies as deps

from . import crud as clients_crud
from . import schemas as clients_schemas

router = APIRouter(
    tags=["Client Registry (고객 관리)"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[clients_schemas.ClientResponse], summary="회사명으로 고객 검색")
async def search_clients(
    company: str = Query(..., min_length=1, description="회사명 부분 문자열 (대소문자 무시)"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """회사명에 검색어가 포함된 고객 목록을 반환합니다. 검색어가 없으면 400을 반환합니다."""
    return await clients_crud.client.search_by_company(db, company=company)
