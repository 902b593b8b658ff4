# app/domains/catalog/__init__.py

"""
FastAPI 애플리케이션의 'catalog' 도메인 패키지입니다.

분석 메소드(Method, 화합물별 LOQ)와 직원(Employee) 참조 테이블을 관리합니다.
두 테이블 모두 읽기 전용 참조 데이터이며, 시료 접수 시 외래 키 검증과
담당 화학자 이름 -> ID 변환에 사용됩니다. 데이터 적재는 scripts/seed_catalogs.py가 담당합니다.

주요 서브모듈:
- `models.py`: methods, employees 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 응답 Pydantic 모델.
- `crud.py`: 조회 로직.
- `routers.py`: API 엔드포인트 정의.
"""

__title__ = "SBTS Reference Catalog Domain"
__description__ = "Read-only method/LOQ and employee reference data."
__version__ = "0.1.0"
__all__ = []
