# app/domains/lims/routers.py

"""
'lims' 도메인 (의뢰 접수 및 분석 진행 관리) 관련 API 엔드포인트를 정의하는 모듈입니다.
"""
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import APIRouter, Depends, status

# 중앙 의존성 관리 모듈 임포트
from app.core import dependencies as deps

# 도메인 관련 모듈 임포트
from . import crud as lims_crud
from . import schemas as lims_schemas

router = APIRouter(
    tags=["Laboratory Information Management (실험실 정보 관리)"],  # Swagger UI에 표시될 태그
    responses={404: {"description": "Not found"}},  # 이 라우터의 공통 응답 정의
)


# =============================================================================
# 1. 고객 의뢰 접수 라우터
# =============================================================================
@router.post(
    "/intakes",
    response_model=lims_schemas.IntakeSubmitResponse,
    status_code=status.HTTP_201_CREATED,
    summary="고객 시료 의뢰 접수",
)
async def submit_intake(
    submission_in: lims_schemas.IntakeSubmission,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    고객 정보와 시료 목록을 받아 보고서를 생성합니다.
    고객 upsert, 의뢰, 시료 생성은 전부 성공하거나 전부 롤백됩니다.
    """
    report_id = await lims_crud.intake.submit(db, obj_in=submission_in)
    return lims_schemas.IntakeSubmitResponse(report_id=report_id)


# =============================================================================
# 2. 프로젝트 (직원용) 라우터
# =============================================================================
@router.post(
    "/projects",
    response_model=lims_schemas.ProjectCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="새 프로젝트 생성",
)
async def create_project(
    project_in: lims_schemas.ProjectCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """기존 고객에 대해 시료 없이 보고서를 생성합니다. 납기일이 있으면 분석 메타데이터도 생성됩니다."""
    report_id = await lims_crud.intake.create_project(db, obj_in=project_in)
    return lims_schemas.ProjectCreateResponse(report_id=report_id)


# =============================================================================
# 3. 분석 메타데이터 필드 그룹 라우터
# =============================================================================
@router.put(
    "/projects/{report_id}/project-number",
    response_model=lims_schemas.AnalysisMetadataResponse,
    summary="프로젝트 번호 지정",
)
async def set_project_number(
    report_id: int,
    update_in: lims_schemas.ProjectNumberUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await lims_crud.analysis_metadata.set_project_number(db, report_id=report_id, obj_in=update_in)


@router.put(
    "/projects/{report_id}/received",
    response_model=lims_schemas.AnalysisMetadataResponse,
    summary="시료 접수 정보 지정",
)
async def set_received(
    report_id: int,
    update_in: lims_schemas.ReceivedUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """접수일과 도착/보관 조건을 기록합니다. 조건이 없으면 'Not specified'로 채웁니다."""
    return await lims_crud.analysis_metadata.set_received(db, report_id=report_id, obj_in=update_in)


@router.put(
    "/projects/{report_id}/chemist",
    response_model=lims_schemas.AnalysisMetadataResponse,
    summary="담당 화학자 배정",
)
async def assign_chemist(
    report_id: int,
    update_in: lims_schemas.ChemistAssign,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """이름으로 담당자를 배정합니다. 'N/A'나 찾을 수 없는 이름은 배정 해제로 처리됩니다."""
    return await lims_crud.analysis_metadata.assign_chemist(db, report_id=report_id, obj_in=update_in)


@router.put(
    "/projects/{report_id}/reviewer",
    response_model=lims_schemas.AnalysisMetadataResponse,
    summary="검토자 배정",
)
async def assign_reviewer(
    report_id: int,
    update_in: lims_schemas.ReviewerAssign,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await lims_crud.analysis_metadata.assign_reviewer(db, report_id=report_id, obj_in=update_in)


@router.put(
    "/projects/{report_id}/due-date",
    response_model=lims_schemas.AnalysisMetadataResponse,
    summary="납기일 지정",
)
async def set_due_date(
    report_id: int,
    update_in: lims_schemas.DueDateUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await lims_crud.analysis_metadata.set_due_date(db, report_id=report_id, obj_in=update_in)


@router.put(
    "/projects/{report_id}/analysis-dates",
    response_model=lims_schemas.AnalysisMetadataResponse,
    summary="추출/분석 일자 지정",
)
async def set_analysis_dates(
    report_id: int,
    update_in: lims_schemas.AnalysisDatesUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    전달된 일자만 반영합니다.
    반영 결과가 추출일 <= 분석 시작일 <= 분석 종료일을 어기면 400을 반환합니다.
    """
    return await lims_crud.analysis_metadata.set_analysis_dates(db, report_id=report_id, obj_in=update_in)


@router.put(
    "/projects/{report_id}/reported",
    response_model=lims_schemas.AnalysisMetadataResponse,
    summary="보고서 발행일 지정",
)
async def set_reported(
    report_id: int,
    update_in: lims_schemas.ReportedUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """보고서 발행일을 기록합니다. 발행된 보고서는 미보고 목록에서 빠집니다."""
    return await lims_crud.analysis_metadata.set_reported(db, report_id=report_id, obj_in=update_in)
