# app/domains/lims/models.py

"""
'lims' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional, List, TYPE_CHECKING
from datetime import datetime, date, UTC

from sqlalchemy import CheckConstraint, ForeignKeyConstraint
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

from sqlmodel import Field, Relationship, SQLModel, Column

# 순환 임포트 방지를 위한 TYPE_CHECKING
if TYPE_CHECKING:
    from app.domains.clients.models import Client


# =============================================================================
# 1. intakes 테이블 모델 (보고서 집합체 루트)
# =============================================================================
class Intake(SQLModel, table=True):
    """
    고객 의뢰 1건 = 보고서 1건. id가 보고서 번호입니다.
    last_sample_seq는 이 보고서에서 마지막으로 발급한 시료 순번이며,
    행 잠금을 잡은 상태에서만 증가시킵니다.
    """
    __tablename__ = "intakes"
    __table_args__ = (
        ForeignKeyConstraint(
            ["method", "revision"],
            ["methods.method_number", "methods.revision_number"],
            name="fk_intakes_method_revision",
        ),
        CheckConstraint("num_samples > 0", name="check_num_samples_positive"),
    )

    id: Optional[int] = Field(default=None, primary_key=True, description="보고서 번호")
    client_id: int = Field(foreign_key="clients.id", index=True, description="의뢰 고객 ID")
    num_samples: int = Field(description="신고된 시료 수")
    site_sampling: Optional[str] = Field(default=None, max_length=255, description="채취 장소")
    sample_collector: Optional[str] = Field(default=None, max_length=255, description="채취자")
    reporting_unit_air: Optional[str] = Field(default=None, max_length=50, description="공기 시료 보고 단위")
    reporting_unit_surface: Optional[str] = Field(default=None, max_length=50, description="표면 시료 보고 단위")
    method: int = Field(description="분석 메소드 번호")
    revision: int = Field(description="분석 메소드 리비전")
    last_sample_seq: int = Field(default=0, description="마지막 발급 시료 순번")
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )

    # --- 관계 정의 ---
    client: "Client" = Relationship(back_populates="intakes")
    samples: List["Sample"] = Relationship(
        back_populates="intake", sa_relationship_kwargs={'cascade': 'all, delete-orphan'}
    )
    analysis_metadata: Optional["AnalysisMetadata"] = Relationship(
        back_populates="intake", sa_relationship_kwargs={'uselist': False, 'cascade': 'all, delete-orphan'}
    )


# =============================================================================
# 2. samples 테이블 모델
# =============================================================================
class Sample(SQLModel, table=True):
    """
    보고서에 속한 시료. (report_id, sample_seq)가 복합 기본 키이며
    공기 부피와 표면적 중 정확히 하나만 값을 가집니다.
    """
    __tablename__ = "samples"
    __table_args__ = (
        CheckConstraint(
            "(air_volume IS NOT NULL AND surface_area IS NULL) OR "
            "(air_volume IS NULL AND surface_area IS NOT NULL)",
            name="check_measurement_type",
        ),
        CheckConstraint("sample_seq > 0", name="check_sample_seq_positive"),
    )

    report_id: int = Field(foreign_key="intakes.id", primary_key=True, description="보고서 번호")
    sample_seq: int = Field(primary_key=True, description="보고서 내 시료 순번 (1부터)")
    client_assigned_name: str = Field(max_length=255, description="고객이 부여한 시료명")
    date_sampled: date = Field(description="채취 일자")
    air_volume: Optional[float] = Field(default=None, description="공기 부피")
    surface_area: Optional[float] = Field(default=None, description="표면적")
    mass: Optional[float] = Field(default=None, description="질량")

    # --- 관계 정의 ---
    intake: "Intake" = Relationship(back_populates="samples")


# =============================================================================
# 3. analysis_metadata 테이블 모델
# =============================================================================
class AnalysisMetadata(SQLModel, table=True):
    """
    보고서의 분석 진행 기록. 의뢰와 1:1이며 첫 필드 그룹 갱신 시점에 생성됩니다.
    추출일 <= 분석 시작일 <= 분석 종료일 (둘 다 값이 있을 때만 비교).
    """
    __tablename__ = "analysis_metadata"
    __table_args__ = (
        CheckConstraint("num_samples_analyzed > 0", name="check_num_samples_analyzed_positive"),
        CheckConstraint(
            "(extraction_date IS NULL OR analysis_start_date IS NULL OR extraction_date <= analysis_start_date) AND "
            "(analysis_start_date IS NULL OR analysis_end_date IS NULL OR analysis_end_date >= analysis_start_date)",
            name="check_analysis_dates",
        ),
    )

    report_id: int = Field(
        foreign_key="intakes.id", primary_key=True,
        sa_column_kwargs={"autoincrement": False}, description="보고서 번호"
    )
    num_samples_analyzed: int = Field(description="분석 시료 수")
    conditions_upon_arrival: str = Field(max_length=255, description="도착 시 상태")
    storage_conditions: str = Field(max_length=255, description="보관 조건")
    analysis_unit: str = Field(max_length=50, description="분석 단위")
    extraction_date: Optional[date] = Field(default=None, description="추출일")
    analysis_start_date: Optional[date] = Field(default=None, description="분석 시작일")
    analysis_end_date: Optional[date] = Field(default=None, description="분석 종료일")
    date_received: Optional[date] = Field(default=None, description="접수일")
    due_date: Optional[date] = Field(default=None, description="납기일")
    date_reported: Optional[date] = Field(default=None, description="보고서 발행일")
    project_number: Optional[str] = Field(default=None, max_length=100, description="프로젝트 번호")
    preparer_id: Optional[int] = Field(default=None, foreign_key="employees.id", description="담당 화학자 ID")
    reviewer_id: Optional[int] = Field(default=None, foreign_key="employees.id", description="검토자 ID")
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 마지막 업데이트 일시 (필드 그룹 반영 시 갱신)"
    )

    # --- 관계 정의 ---
    intake: "Intake" = Relationship(back_populates="analysis_metadata")
