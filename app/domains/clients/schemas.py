# app/domains/clients/schemas.py

"""
'clients' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from pydantic import BaseModel, Field as PydanticField

# 공백 없는 local@domain.tld 형식만 허용합니다.
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class ClientIdentity(BaseModel):
    """고객 식별 정보 (이메일 기준 upsert 입력)."""
    email: str = PydanticField(..., max_length=255, pattern=EMAIL_PATTERN, description="고객 이메일")
    name: str = PydanticField(..., min_length=1, max_length=255, description="고객 이름")
    company: str = PydanticField(..., min_length=1, max_length=255, description="회사명")


class ClientResponse(BaseModel):
    id: int = PydanticField(description="고객 고유 ID")
    email: str = PydanticField(description="고객 이메일")
    name: str = PydanticField(description="고객 이름")
    company: str = PydanticField(description="회사명")

    class Config:
        from_attributes = True
