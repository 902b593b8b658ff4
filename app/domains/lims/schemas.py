# app/domains/lims/schemas.py

"""
'lims' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.

요청 스키마의 유효성 검사는 DB 쓰기 전에 수행되며,
실패하면 요청 전체가 400으로 거부되고 어떤 행도 기록되지 않습니다.
"""

from typing import List, Optional, Any
from datetime import date, datetime, UTC

from pydantic import BaseModel, Field as PydanticField, field_validator, model_validator

from app.domains.clients.schemas import ClientIdentity


def normalize_to_date(value: Any) -> Any:
    """
    datetime 또는 ISO 일시 문자열을 달력 날짜로 줄입니다. 그 외 값은 그대로 둡니다.
    시간대가 있는 일시는 UTC로 변환한 뒤 날짜를 취합니다.
    """
    if isinstance(value, str) and len(value) > 10:
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value.date()
    return value


def blank_to_none(value: Any) -> Any:
    """빈 문자열과 숫자 0은 값이 없는 것(None)으로 봅니다."""
    if isinstance(value, str) and not value.strip():
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0:
        return None
    return value


# =============================================================================
# 1. 고객 의뢰 접수 (Intake Submission) 스키마
# =============================================================================
class IntakeClientInfo(ClientIdentity):
    """의뢰 고객 정보 + 보고서 공통 정보."""
    num_samples: int = PydanticField(..., gt=0, description="신고 시료 수")
    method_id: int = PydanticField(..., description="분석 메소드 번호")
    revision: int = PydanticField(..., description="분석 메소드 리비전")
    site_sampling: Optional[str] = PydanticField(None, max_length=255, description="채취 장소")
    sample_collector: Optional[str] = PydanticField(None, max_length=255, description="채취자")
    reporting_unit_air: Optional[str] = PydanticField(None, max_length=50, description="공기 시료 보고 단위")
    reporting_unit_surface: Optional[str] = PydanticField(None, max_length=50, description="표면 시료 보고 단위")


class SampleIn(BaseModel):
    """
    접수 시료 1건. 공기 부피와 표면적 중 정확히 하나만 지정해야 합니다.
    null, 빈 문자열, 0은 미지정으로 취급하고 음수는 거부합니다.
    """
    client_name: str = PydanticField(..., min_length=1, max_length=255, description="고객 부여 시료명")
    date_sampled: date = PydanticField(..., description="채취 일자 (일시가 오면 날짜로 변환)")
    air_volume: Optional[float] = PydanticField(None, gt=0, description="공기 부피")
    surface_area: Optional[float] = PydanticField(None, gt=0, description="표면적")
    mass: Optional[float] = PydanticField(None, ge=0, description="질량")

    @field_validator("date_sampled", mode="before")
    @classmethod
    def _normalize_date_sampled(cls, value: Any) -> Any:
        return normalize_to_date(value)

    @field_validator("air_volume", "surface_area", "mass", mode="before")
    @classmethod
    def _blank_measurement(cls, value: Any) -> Any:
        return blank_to_none(value)

    @model_validator(mode="after")
    def _check_measurement_type(self) -> "SampleIn":
        if (self.air_volume is None) == (self.surface_area is None):
            raise ValueError(
                f"Sample '{self.client_name}' must have either air_volume or surface_area, but not both"
            )
        return self


class IntakeSubmission(BaseModel):
    client_info: IntakeClientInfo = PydanticField(..., description="의뢰 고객 정보")
    samples: List[SampleIn] = PydanticField(..., min_length=1, description="접수 시료 목록 (1건 이상)")


class IntakeSubmitResponse(BaseModel):
    success: bool = True
    message: str = "Data successfully submitted!"
    report_id: int = PydanticField(description="생성된 보고서 번호")


# =============================================================================
# 2. 프로젝트 생성 (직원용) 스키마
# =============================================================================
class ProjectCreate(BaseModel):
    """시료 없이 보고서를 만드는 직원용 입력. 납기일이 있으면 분석 메타데이터도 함께 생성됩니다."""
    client_id: int = PydanticField(..., description="기존 고객 ID")
    num_samples: int = PydanticField(..., gt=0, description="신고 시료 수")
    method: int = PydanticField(..., description="분석 메소드 번호")
    revision: int = PydanticField(..., description="분석 메소드 리비전")
    site_sampling: Optional[str] = PydanticField(None, max_length=255)
    sample_collector: Optional[str] = PydanticField(None, max_length=255)
    reporting_unit_air: Optional[str] = PydanticField(None, max_length=50)
    reporting_unit_surface: Optional[str] = PydanticField(None, max_length=50)
    due_date: Optional[date] = PydanticField(None, description="납기일")

    @field_validator("due_date", mode="before")
    @classmethod
    def _normalize_due_date(cls, value: Any) -> Any:
        return normalize_to_date(value)


class ProjectCreateResponse(BaseModel):
    success: bool = True
    report_id: int = PydanticField(description="생성된 보고서 번호")


# =============================================================================
# 3. 분석 메타데이터 필드 그룹 입력 스키마
# =============================================================================
class ProjectNumberUpdate(BaseModel):
    """숫자로 온 번호는 문자열로 바꿉니다. 명시적 null은 프로젝트 번호를 비웁니다."""
    project_number: Optional[str] = PydanticField(..., max_length=100, description="프로젝트 번호")

    @field_validator("project_number", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ReceivedUpdate(BaseModel):
    date_received: date = PydanticField(..., description="접수일")
    conditions_upon_arrival: Optional[str] = PydanticField(None, max_length=255, description="도착 시 상태")
    storage_conditions: Optional[str] = PydanticField(None, max_length=255, description="보관 조건")

    @field_validator("date_received", mode="before")
    @classmethod
    def _normalize_date_received(cls, value: Any) -> Any:
        return normalize_to_date(value)


class ChemistAssign(BaseModel):
    chemist: str = PydanticField(..., min_length=1, description="담당 화학자 이름 ('N/A'는 배정 해제)")


class ReviewerAssign(BaseModel):
    reviewer: str = PydanticField(..., min_length=1, description="검토자 이름 ('N/A'는 배정 해제)")


class DueDateUpdate(BaseModel):
    due_date: date = PydanticField(..., description="납기일")

    @field_validator("due_date", mode="before")
    @classmethod
    def _normalize_due_date(cls, value: Any) -> Any:
        return normalize_to_date(value)


class AnalysisDatesUpdate(BaseModel):
    """전달된 일자만 반영합니다. 명시적으로 null을 보내면 해당 일자를 비웁니다."""
    extraction_date: Optional[date] = None
    analysis_start_date: Optional[date] = None
    analysis_end_date: Optional[date] = None

    @field_validator("extraction_date", "analysis_start_date", "analysis_end_date", mode="before")
    @classmethod
    def _normalize_dates(cls, value: Any) -> Any:
        return normalize_to_date(value)

    @model_validator(mode="after")
    def _require_any_date(self) -> "AnalysisDatesUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one of extraction_date, analysis_start_date, analysis_end_date is required")
        return self


class ReportedUpdate(BaseModel):
    date_reported: date = PydanticField(..., description="보고서 발행일")

    @field_validator("date_reported", mode="before")
    @classmethod
    def _normalize_date_reported(cls, value: Any) -> Any:
        return normalize_to_date(value)


# =============================================================================
# 4. 분석 일자 값 객체
# =============================================================================
class AnalysisDates(BaseModel):
    """
    분석 일자의 부분 순서를 검증하는 값 객체입니다.
    추출일 <= 분석 시작일, 분석 시작일 <= 분석 종료일. 비어 있는 일자는 비교하지 않습니다.
    """
    extraction_date: Optional[date] = None
    analysis_start_date: Optional[date] = None
    analysis_end_date: Optional[date] = None

    class Config:
        from_attributes = True

    @model_validator(mode="after")
    def _check_order(self) -> "AnalysisDates":
        start = self.analysis_start_date
        if start is not None and self.extraction_date is not None and self.extraction_date > start:
            raise ValueError("extraction_date must be on or before analysis_start_date")
        if start is not None and self.analysis_end_date is not None and self.analysis_end_date < start:
            raise ValueError("analysis_end_date must be on or after analysis_start_date")
        return self


# =============================================================================
# 5. 분석 메타데이터 응답 스키마
# =============================================================================
class AnalysisMetadataResponse(BaseModel):
    report_id: int
    num_samples_analyzed: int
    conditions_upon_arrival: str
    storage_conditions: str
    analysis_unit: str
    extraction_date: Optional[date] = None
    analysis_start_date: Optional[date] = None
    analysis_end_date: Optional[date] = None
    date_received: Optional[date] = None
    due_date: Optional[date] = None
    date_reported: Optional[date] = None
    project_number: Optional[str] = None
    preparer_id: Optional[int] = None
    reviewer_id: Optional[int] = None

    class Config:
        from_attributes = True
