# app/domains/catalog/routers.py

"""
'catalog' 도메인 (분석 메소드, 직원) 관련 API 엔드포인트를 정의하는 모듈입니다.
"""
from typing import List

from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import APIRouter, Depends

from app.core import dependencies as deps
from app.core.exceptions import NotFoundError

from . import crud as catalog_crud
from . import schemas as catalog_schemas

router = APIRouter(
    tags=["Reference Catalog (참조 카탈로그)"],
    responses={404: {"description": "Not found"}},
)


@router.get("/methods", response_model=List[catalog_schemas.MethodResponse], summary="모든 분석 메소드 조회")
async def read_methods(db: AsyncSession = Depends(deps.get_db_session)):
    return await catalog_crud.method.get_all(db)


@router.get(
    "/methods/compound/{compound}",
    response_model=List[catalog_schemas.MethodResponse],
    summary="화합물별 메소드/LOQ 조회",
)
async def read_compound_methods(compound: str, db: AsyncSession = Depends(deps.get_db_session)):
    """
    화합물명으로 메소드 목록을 조회합니다. 최신 메소드/리비전이 먼저 옵니다.
    일치하는 메소드가 없으면 404를 반환합니다.
    """
    methods = await catalog_crud.method.get_by_compound(db, compound=compound)
    if not methods:
        raise NotFoundError(detail="Compound not found")
    return methods


@router.get("/chemists", response_model=List[catalog_schemas.ChemistResponse], summary="화학자/분석자 목록 조회")
async def read_chemists(db: AsyncSession = Depends(deps.get_db_session)):
    return await catalog_crud.employee.get_chemists(db)
