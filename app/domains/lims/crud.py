# app/domains/lims/crud.py

"""
'lims' 도메인의 CRUD 로직을 담당하는 모듈입니다.

- 의뢰 접수(submit): 고객 upsert, 의뢰 생성, 시료 순번 발급, 시료 생성을 한 트랜잭션으로 처리합니다.
- 분석 메타데이터: 필드 그룹마다 같은 upsert 경로(stage)를 거칩니다.
  부모 의뢰 행을 잠근 뒤 레코드가 없으면 기본값으로 만들고, 전달된 그룹만 덮어씁니다.
"""

import logging
from typing import Any, Dict, Optional
from datetime import datetime, UTC

from pydantic import ValidationError
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.core.crud_base import CRUDBase
from app.core.database import atomic
from app.core.exceptions import ConstraintViolationError, MissingReferenceError, NotFoundError
from app.domains.catalog import crud as catalog_crud
from app.domains.clients import crud as clients_crud

from . import models as lims_models
from . import schemas as lims_schemas

logger = logging.getLogger(__name__)


# =============================================================================
# 1. 의뢰 (Intake) CRUD
# =============================================================================
class CRUDIntake(CRUDBase[lims_models.Intake, lims_schemas.ProjectCreate, lims_schemas.ProjectCreate]):
    def __init__(self):
        super().__init__(model=lims_models.Intake)

    async def _ensure_method(self, db: AsyncSession, *, method: int, revision: int) -> None:
        if not await catalog_crud.method.exists(db, method_number=method, revision_number=revision):
            raise MissingReferenceError(detail=f"Method {method} revision {revision} does not exist")

    async def claim_sample_seqs(self, db: AsyncSession, *, report_id: int, count: int) -> range:
        """
        의뢰 행을 잠그고 시료 순번 count개를 발급합니다.
        발급 범위는 last_sample_seq + 1 부터 시작하며, 카운터는 같은 트랜잭션에서 증가합니다.
        """
        intake = await self.get_for_update(db, report_id)
        if intake is None:
            raise NotFoundError(detail=f"Report {report_id} not found")

        start = intake.last_sample_seq + 1
        intake.last_sample_seq += count
        db.add(intake)
        return range(start, start + count)

    async def submit(self, db: AsyncSession, *, obj_in: lims_schemas.IntakeSubmission) -> int:
        """
        고객 의뢰를 접수하고 보고서 번호를 반환합니다.
        어느 단계에서든 실패하면 고객 upsert를 포함한 모든 쓰기가 롤백됩니다.
        신고 시료 수(num_samples)와 실제 시료 건수는 대조하지 않습니다.
        """
        info = obj_in.client_info

        async with atomic(db):
            client_id = await clients_crud.client.resolve(db, obj_in=info)
            await self._ensure_method(db, method=info.method_id, revision=info.revision)

            intake = self.model(
                client_id=client_id,
                num_samples=info.num_samples,
                site_sampling=info.site_sampling,
                sample_collector=info.sample_collector,
                reporting_unit_air=info.reporting_unit_air,
                reporting_unit_surface=info.reporting_unit_surface,
                method=info.method_id,
                revision=info.revision,
            )
            db.add(intake)
            await db.flush()
            report_id = intake.id

            seqs = await self.claim_sample_seqs(db, report_id=report_id, count=len(obj_in.samples))
            for sample_seq, sample in zip(seqs, obj_in.samples):
                db.add(lims_models.Sample(
                    report_id=report_id,
                    sample_seq=sample_seq,
                    client_assigned_name=sample.client_name,
                    date_sampled=sample.date_sampled,
                    air_volume=sample.air_volume,
                    surface_area=sample.surface_area,
                    mass=sample.mass,
                ))
            await db.flush()

        logger.info("Intake submitted: report %s with %d sample(s) for %s", report_id, len(obj_in.samples), info.email)
        return report_id

    async def create_project(self, db: AsyncSession, *, obj_in: lims_schemas.ProjectCreate) -> int:
        """
        시료 없이 보고서를 만듭니다. 보고 단위가 없으면 기본 단위를 채웁니다.
        납기일이 있으면 같은 트랜잭션에서 분석 메타데이터를 생성합니다.
        """
        async with atomic(db):
            if await clients_crud.client.get(db, obj_in.client_id) is None:
                raise MissingReferenceError(detail=f"Client {obj_in.client_id} does not exist")
            await self._ensure_method(db, method=obj_in.method, revision=obj_in.revision)

            intake_data = obj_in.model_dump(exclude={"due_date"})
            intake_data["reporting_unit_air"] = obj_in.reporting_unit_air or settings.DEFAULT_REPORTING_UNIT_AIR
            intake_data["reporting_unit_surface"] = obj_in.reporting_unit_surface or settings.DEFAULT_REPORTING_UNIT_SURFACE
            intake = await self.create(db, obj_in=intake_data)
            report_id = intake.id

            if obj_in.due_date is not None:
                await analysis_metadata.stage(db, report_id=report_id, values={"due_date": obj_in.due_date})

        logger.info("Project created: report %s for client %s", report_id, obj_in.client_id)
        return report_id


intake = CRUDIntake()


# =============================================================================
# 2. 분석 메타데이터 (AnalysisMetadata) CRUD
# =============================================================================
class CRUDAnalysisMetadata(
    CRUDBase[lims_models.AnalysisMetadata, lims_schemas.AnalysisMetadataResponse, lims_schemas.AnalysisMetadataResponse]
):
    def __init__(self):
        super().__init__(model=lims_models.AnalysisMetadata)

    @staticmethod
    def _validate_dates(db_obj: lims_models.AnalysisMetadata) -> None:
        try:
            lims_schemas.AnalysisDates.model_validate(db_obj)
        except ValidationError as e:
            messages = "; ".join(error["msg"] for error in e.errors())
            raise ConstraintViolationError(detail=f"Invalid analysis dates: {messages}") from e

    async def stage(
        self, db: AsyncSession, *, report_id: int, values: Dict[str, Any]
    ) -> lims_models.AnalysisMetadata:
        """
        필드 그룹 하나를 현재 트랜잭션에 반영합니다. (커밋하지 않음)

        부모 의뢰 행의 잠금이 같은 보고서에 대한 읽기-수정-쓰기와
        기본값 생성 분기를 직렬화합니다.
        """
        parent = await intake.get_for_update(db, report_id)
        if parent is None:
            raise NotFoundError(detail=f"Report {report_id} not found")

        db_obj = await db.get(self.model, report_id, populate_existing=True)
        if db_obj is None:
            db_obj = self.model(
                report_id=report_id,
                num_samples_analyzed=parent.num_samples,
                conditions_upon_arrival=settings.DEFAULT_CONDITIONS,
                storage_conditions=settings.DEFAULT_CONDITIONS,
                analysis_unit=settings.DEFAULT_ANALYSIS_UNIT,
            )
            logger.info("Analysis metadata created for report %s", report_id)

        for key, value in values.items():
            setattr(db_obj, key, value)
        db_obj.updated_at = datetime.now(UTC)
        self._validate_dates(db_obj)

        db.add(db_obj)
        await db.flush()
        return db_obj

    async def apply_field_group(
        self, db: AsyncSession, *, report_id: int, values: Dict[str, Any]
    ) -> lims_models.AnalysisMetadata:
        """필드 그룹 하나를 독립 트랜잭션으로 반영하고 메타데이터 레코드를 반환합니다."""
        async with atomic(db):
            db_obj = await self.stage(db, report_id=report_id, values=values)
        logger.debug("Report %s updated: %s", report_id, sorted(values))
        return db_obj

    # --- 필드 그룹별 진입점 ---
    async def set_project_number(self, db: AsyncSession, *, report_id: int, obj_in: lims_schemas.ProjectNumberUpdate):
        return await self.apply_field_group(db, report_id=report_id, values=obj_in.model_dump())

    async def set_received(self, db: AsyncSession, *, report_id: int, obj_in: lims_schemas.ReceivedUpdate):
        values = {
            "date_received": obj_in.date_received,
            "conditions_upon_arrival": obj_in.conditions_upon_arrival or settings.DEFAULT_CONDITIONS,
            "storage_conditions": obj_in.storage_conditions or settings.DEFAULT_CONDITIONS,
        }
        return await self.apply_field_group(db, report_id=report_id, values=values)

    async def _assign_employee(
        self, db: AsyncSession, *, report_id: int, field: str, name: Optional[str]
    ) -> lims_models.AnalysisMetadata:
        async with atomic(db):
            employee_id = await catalog_crud.employee.resolve_id(db, name=name)
            db_obj = await self.stage(db, report_id=report_id, values={field: employee_id})
        return db_obj

    async def assign_chemist(self, db: AsyncSession, *, report_id: int, obj_in: lims_schemas.ChemistAssign):
        return await self._assign_employee(db, report_id=report_id, field="preparer_id", name=obj_in.chemist)

    async def assign_reviewer(self, db: AsyncSession, *, report_id: int, obj_in: lims_schemas.ReviewerAssign):
        return await self._assign_employee(db, report_id=report_id, field="reviewer_id", name=obj_in.reviewer)

    async def set_due_date(self, db: AsyncSession, *, report_id: int, obj_in: lims_schemas.DueDateUpdate):
        return await self.apply_field_group(db, report_id=report_id, values=obj_in.model_dump())

    async def set_analysis_dates(self, db: AsyncSession, *, report_id: int, obj_in: lims_schemas.AnalysisDatesUpdate):
        return await self.apply_field_group(db, report_id=report_id, values=obj_in.model_dump(exclude_unset=True))

    async def set_reported(self, db: AsyncSession, *, report_id: int, obj_in: lims_schemas.ReportedUpdate):
        return await self.apply_field_group(db, report_id=report_id, values=obj_in.model_dump())


analysis_metadata = CRUDAnalysisMetadata()
