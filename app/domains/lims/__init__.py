# app/domains/lims/__init__.py

"""
FastAPI 애플리케이션의 'lims' 도메인 패키지입니다.

'lims' 도메인은 보고서(의뢰, Intake) 집합체를 관리합니다.
고객 의뢰 접수 시 의뢰와 시료를 하나의 트랜잭션으로 생성하고,
이후 실험실 직원이 분석 메타데이터(접수, 담당자, 분석 일자, 보고 일자 등)를
필드 그룹 단위로 점진적으로 채워 나갑니다.

주요 서브모듈:
- `models.py`: intakes, samples, analysis_metadata 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청/응답 Pydantic 모델과 분석 일자 값 객체(AnalysisDates).
- `crud.py`: 의뢰 접수, 프로젝트 생성, 필드 그룹 upsert 로직.
- `routers.py`: 'lims' 데이터에 접근하기 위한 FastAPI API 엔드포인트 정의.
"""

__title__ = "SBTS LIMS Domain"
__description__ = "Manages intakes, samples and analysis lifecycle metadata."
__version__ = "0.1.0"
__all__ = []
