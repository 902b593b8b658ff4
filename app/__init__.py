# app/__init__.py

"""
SBTS(SafeBridge Sample Tracking) FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 시료 접수(intake)부터 보고서 발행까지의 흐름을 관리하는
백엔드 로직과 도메인별 모듈을 포함합니다.
FastAPI 애플리케이션의 진입점 (main.py)과
공통 설정, 데이터베이스 연결, 예외 정의를 담는 core 서브패키지,
그리고 각 비즈니스 도메인(catalog, clients, lims, rpt)을 대표하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "SBTS FastAPI API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "SafeBridge Sample Tracking System (SBTS) API backend."
__license__ = "MIT"
__all__ = []
