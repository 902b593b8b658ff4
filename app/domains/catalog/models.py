# app/domains/catalog/models.py

"""
'catalog' 도메인 (분석 메소드, 직원 참조 테이블)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


# =============================================================================
# 1. methods 테이블 모델
# =============================================================================
class Method(SQLModel, table=True):
    """
    분석 메소드 + 리비전 쌍. (method_number, revision_number)가 복합 기본 키입니다.
    """
    __tablename__ = "methods"

    method_number: int = Field(primary_key=True, description="메소드 번호")
    revision_number: int = Field(primary_key=True, description="리비전 번호")
    compound: str = Field(max_length=255, index=True, description="화합물명")
    air_loq: float = Field(description="공기 시료 정량 한계(LOQ)")
    surface_loq: float = Field(description="표면 시료 정량 한계(LOQ)")


# =============================================================================
# 2. employees 테이블 모델
# =============================================================================
class Employee(SQLModel, table=True):
    __tablename__ = "employees"

    id: Optional[int] = Field(default=None, primary_key=True, description="직원 고유 ID")
    name: str = Field(max_length=255, index=True, description="직원 이름")
    role: str = Field(max_length=255, description="역할 (Chemist, Analyst, Reviewer 등)")
