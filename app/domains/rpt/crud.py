# app/domains/rpt/crud.py

import logging
from typing import List

from sqlalchemy import and_, case, select
from sqlalchemy.orm import aliased
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.exceptions import NotFoundError
from app.domains.catalog.models import Employee, Method
from app.domains.clients.models import Client
from app.domains.lims.models import AnalysisMetadata, Intake, Sample
from . import schemas

logger = logging.getLogger(__name__)

# 의뢰 -> 메소드 복합 키 조인 조건
_METHOD_JOIN = and_(Intake.method == Method.method_number, Intake.revision == Method.revision_number)


async def get_unreported_projects(db: AsyncSession) -> List[schemas.UnreportedProjectRow]:
    """
    보고서 발행일이 없는(또는 분석 메타데이터가 없는) 프로젝트를 조회합니다.
    정렬: 납기일이 있는 행을 납기일 오름차순으로 먼저, 납기일 없는 행은 뒤로, 동률은 보고서 번호 내림차순.
    """
    preparer = aliased(Employee)
    statement = (
        select(
            Intake.id.label("report_id"),
            Method.compound,
            Intake.num_samples,
            Client.company.label("customer"),
            AnalysisMetadata.date_received,
            AnalysisMetadata.due_date,
            AnalysisMetadata.project_number,
            preparer.name.label("chemist"),
        )
        .select_from(Intake)
        .join(Method, _METHOD_JOIN)
        .join(Client, Intake.client_id == Client.id)
        .outerjoin(AnalysisMetadata, AnalysisMetadata.report_id == Intake.id)
        .outerjoin(preparer, AnalysisMetadata.preparer_id == preparer.id)
        .where(AnalysisMetadata.date_reported.is_(None))
        .order_by(
            case((AnalysisMetadata.due_date.is_(None), 1), else_=0),
            AnalysisMetadata.due_date.asc(),
            Intake.id.desc(),
        )
    )
    result = await db.execute(statement)
    rows = [schemas.UnreportedProjectRow(**row) for row in result.mappings().all()]
    logger.debug("Unreported worklist: %d row(s)", len(rows))
    return rows


async def get_project_detail(db: AsyncSession, report_id: int) -> schemas.ProjectDetail:
    """보고서 번호로 프로젝트 상세를 조립합니다. (시료는 순번 오름차순)"""
    preparer = aliased(Employee)
    reviewer = aliased(Employee)
    statement = (
        select(
            Intake.id.label("report_id"),
            Intake.num_samples,
            Intake.site_sampling,
            Intake.sample_collector,
            Intake.reporting_unit_air,
            Intake.reporting_unit_surface,
            Intake.method,
            Intake.revision,
            Intake.created_at,
            Method.compound,
            Client.name.label("client_name"),
            Client.company.label("client_company"),
            AnalysisMetadata.num_samples_analyzed,
            AnalysisMetadata.date_received,
            AnalysisMetadata.due_date,
            AnalysisMetadata.date_reported,
            AnalysisMetadata.project_number,
            AnalysisMetadata.conditions_upon_arrival,
            AnalysisMetadata.storage_conditions,
            AnalysisMetadata.extraction_date,
            AnalysisMetadata.analysis_start_date,
            AnalysisMetadata.analysis_end_date,
            AnalysisMetadata.analysis_unit,
            preparer.name.label("preparer_name"),
            reviewer.name.label("reviewer_name"),
        )
        .select_from(Intake)
        .join(Method, _METHOD_JOIN)
        .join(Client, Intake.client_id == Client.id)
        .outerjoin(AnalysisMetadata, AnalysisMetadata.report_id == Intake.id)
        .outerjoin(preparer, AnalysisMetadata.preparer_id == preparer.id)
        .outerjoin(reviewer, AnalysisMetadata.reviewer_id == reviewer.id)
        .where(Intake.id == report_id)
    )
    row = (await db.execute(statement)).mappings().first()
    if row is None:
        raise NotFoundError(detail="Project not found")

    samples_statement = select(Sample).where(Sample.report_id == report_id).order_by(Sample.sample_seq)
    samples = (await db.execute(samples_statement)).scalars().all()

    return schemas.ProjectDetail(**row, samples=[schemas.SampleRead.model_validate(s) for s in samples])
