# app/domains/models/__init__.py

"""
이 파일은 모든 도메인의 SQLModel 모델들을 한 곳에서 중앙 관리하여,
다른 모듈에서 쉽게 임포트할 수 있도록 하는 역할을 합니다.
SQLModel.metadata가 모든 테이블을 인식하도록 보장합니다.
"""

# catalog (Method, Employee)
from app.domains.catalog.models import Method, Employee

# clients (Client)
from app.domains.clients.models import Client

# lims (Intake, Sample, AnalysisMetadata)
from app.domains.lims.models import Intake, Sample, AnalysisMetadata


#  `from app.domains.models import *` 구문으로 임포트될 모델 목록 정의
__all__ = [
    # catalog
    "Method", "Employee",
    # clients
    "Client",
    # lims
    "Intake", "Sample", "AnalysisMetadata",
]
