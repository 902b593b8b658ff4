# tests/__init__.py

"""
FastAPI 애플리케이션의 테스트 스위트 패키지입니다.

테스트 코드는 `pytest`, `pytest-asyncio` 기반이며, API는 httpx AsyncClient로 호출합니다.

주요 구성:
- `conftest.py`: 테스트용 엔진/세션, 의존성 오버라이드된 클라이언트, 카탈로그 시드 픽스처.
- `test_main.py`: 루트/헬스 체크, 공통 예외 처리, ARQ 태스크 테스트.
- `domains/`: 비즈니스 도메인(catalog, clients, lims, rpt)별 테스트.
"""

# 패키지 메타데이터 (선택 사항)
__title__ = "SBTS API Tests"
__description__ = "Test suite for SBTS FastAPI application."
__version__ = "0.1.0"  # 테스트 스위트의 내부 버전
__all__ = []
