# app/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

주요 서브모듈:
- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 데이터베이스 연결, 세션 및 트랜잭션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `exceptions.py`: 도메인 예외 분류 (입력 오류, 참조 오류, 제약 위반, 미존재, 일시 장애).
- `crud_base.py`: 공통 비동기 CRUD 기본 클래스.
- `dependencies.py`: FastAPI의 의존성 주입 시스템에서 사용될 공통 의존성 함수들.
- `tasks.py`: ARQ 워커가 실행하는 공통 태스크.
"""

__title__ = "SBTS Core"
__description__ = "Core components for SBTS FastAPI application."
__version__ = "0.1.0"
__all__ = []
