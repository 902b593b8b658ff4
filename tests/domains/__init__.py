# tests/domains/__init__.py

"""
FastAPI 애플리케이션의 도메인별 테스트 스위트 패키지입니다.

- `test_catalog_n.py`: 'catalog' 도메인 (분석 메소드, 직원, 카탈로그 적재).
- `test_clients_n.py`: 'clients' 도메인 (이메일 기준 upsert, 회사명 검색).
- `test_lims_n.py`: 'lims' 도메인 (의뢰 접수, 프로젝트 생성, 분석 메타데이터 필드 그룹).
- `test_rpt_n.py`: 'rpt' 도메인 (미보고 목록, 프로젝트 상세).
"""

# 패키지 메타데이터 (선택 사항)
__title__ = "SBTS Domain Tests"
__description__ = "Categorized tests for each business domain in SBTS FastAPI application."
__version__ = "0.1.0"
__all__ = []
