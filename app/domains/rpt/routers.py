# app/domains/rpt/routers.py

from typing import List

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from . import crud, schemas

router = APIRouter(
    tags=["Report Views (보고서 조회)"],
    responses={404: {"description": "Not found"}},
)


@router.get("/unreported-projects", response_model=List[schemas.UnreportedProjectRow])
async def read_unreported_projects(
    *,
    session: AsyncSession = Depends(deps.get_db_session),
):
    """
    미보고 프로젝트 목록을 대시보드 우선순위 순서로 조회합니다.
    """
    return await crud.get_unreported_projects(db=session)


@router.get("/projects/{report_id}", response_model=schemas.ProjectDetail)
async def read_project_detail(
    *,
    session: AsyncSession = Depends(deps.get_db_session),
    report_id: int,
):
    """
    프로젝트 상세 정보를 조회합니다. 존재하지 않는 보고서 번호는 404를 반환합니다.
    """
    return await crud.get_project_detail(db=session, report_id=report_id)
