# app/domains/rpt/schemas.py

from typing import List, Optional
from datetime import date, datetime
from pydantic import BaseModel, Field


class UnreportedProjectRow(BaseModel):
    """
    미보고 프로젝트 목록의 한 행입니다.
    """
    report_id: int = Field(..., description="보고서 번호")
    compound: str = Field(..., description="화합물명")
    num_samples: int = Field(..., description="신고 시료 수")
    customer: str = Field(..., description="고객 회사명")
    date_received: Optional[date] = Field(None, description="접수일")
    due_date: Optional[date] = Field(None, description="납기일")
    project_number: Optional[str] = Field(None, description="프로젝트 번호")
    chemist: Optional[str] = Field(None, description="담당 화학자 이름")


class SampleRead(BaseModel):
    report_id: int
    sample_seq: int = Field(..., description="보고서 내 시료 순번")
    client_assigned_name: str
    date_sampled: date
    air_volume: Optional[float] = None
    surface_area: Optional[float] = None
    mass: Optional[float] = None

    class Config:
        from_attributes = True


class ProjectDetail(BaseModel):
    """
    프로젝트 상세 조립 결과입니다.
    분석 메타데이터가 아직 없으면 메타데이터 필드는 모두 null 입니다.
    """
    report_id: int
    num_samples: int
    site_sampling: Optional[str] = None
    sample_collector: Optional[str] = None
    reporting_unit_air: Optional[str] = None
    reporting_unit_surface: Optional[str] = None
    method: int
    revision: int
    compound: str
    created_at: Optional[datetime] = None
    client_name: str
    client_company: str
    num_samples_analyzed: Optional[int] = None
    date_received: Optional[date] = None
    due_date: Optional[date] = None
    date_reported: Optional[date] = None
    project_number: Optional[str] = None
    conditions_upon_arrival: Optional[str] = None
    storage_conditions: Optional[str] = None
    extraction_date: Optional[date] = None
    analysis_start_date: Optional[date] = None
    analysis_end_date: Optional[date] = None
    analysis_unit: Optional[str] = None
    preparer_name: Optional[str] = None
    reviewer_name: Optional[str] = None
    samples: List[SampleRead] = Field(default_factory=list, description="시료 목록 (순번 오름차순)")
