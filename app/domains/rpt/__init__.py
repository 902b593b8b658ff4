# app/domains/rpt/__init__.py

"""
FastAPI 애플리케이션의 'rpt' (Report) 도메인 패키지입니다.

이 패키지는 읽기 전용 집계 뷰 두 가지를 제공합니다.
- 미보고 프로젝트 목록: 대시보드의 작업 우선순위 순서(납기일 오름차순, 납기일 없음은 뒤로).
- 프로젝트 상세: 의뢰, 고객, 메소드, 분석 메타데이터, 시료 목록을 하나로 조립한 결과.

자체 테이블은 없으며 'lims', 'clients', 'catalog' 도메인의 테이블을 조인합니다.

주요 서브모듈:
- `schemas.py`: 뷰 응답 Pydantic 모델.
- `crud.py`: 조인 쿼리.
- `routers.py`: 뷰 API 엔드포인트 정의.
"""

# 패키지 메타데이터
__title__ = "SBTS Report Views Domain"
__description__ = "Read-only worklist and project detail projections."
__version__ = "0.1.0"
__all__ = []
