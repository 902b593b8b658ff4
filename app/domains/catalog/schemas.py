# app/domains/catalog/schemas.py

"""
'catalog' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from pydantic import BaseModel, Field as PydanticField


# =============================================================================
# 1. 분석 메소드 (Method) 스키마
# =============================================================================
class MethodBase(BaseModel):
    method_number: int = PydanticField(description="메소드 번호")
    revision_number: int = PydanticField(description="리비전 번호")
    compound: str = PydanticField(max_length=255, description="화합물명")
    air_loq: float = PydanticField(description="공기 시료 LOQ")
    surface_loq: float = PydanticField(description="표면 시료 LOQ")


class MethodCreate(MethodBase):
    pass


class MethodResponse(MethodBase):
    class Config:
        from_attributes = True


# =============================================================================
# 2. 직원 (Employee) 스키마
# =============================================================================
class EmployeeCreate(BaseModel):
    name: str = PydanticField(min_length=1, max_length=255, description="직원 이름")
    role: str = PydanticField(min_length=1, max_length=255, description="역할")


class ChemistResponse(BaseModel):
    """담당자 선택 목록용 응답 (ID와 이름만 노출)."""
    id: int = PydanticField(description="직원 고유 ID")
    name: str = PydanticField(description="직원 이름")

    class Config:
        from_attributes = True
