# app/domains/clients/models.py

"""
'clients' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional, List, TYPE_CHECKING
from datetime import datetime, UTC

from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Field, Relationship, SQLModel, Column

# 순환 임포트 방지를 위한 TYPE_CHECKING
if TYPE_CHECKING:
    from app.domains.lims.models import Intake


# =============================================================================
# 1. clients 테이블 모델
# =============================================================================
class Client(SQLModel, table=True):
    """
    의뢰 고객. 이메일이 유일 키이며, 같은 이메일로 다시 제출하면
    이름/회사명이 최신 값으로 덮어써집니다.
    """
    __tablename__ = "clients"

    id: Optional[int] = Field(default=None, primary_key=True, description="고객 고유 ID")
    email: str = Field(max_length=255, unique=True, index=True, description="고객 이메일 (유일)")
    name: str = Field(max_length=255, description="고객 이름")
    company: str = Field(max_length=255, index=True, description="회사명")
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )

    # --- 관계 정의 ---
    intakes: List["Intake"] = Relationship(back_populates="client")
