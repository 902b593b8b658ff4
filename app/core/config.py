# app/core/config.py

from typing import Any, List
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "SBTS FastAPI API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "SafeBridge Sample Tracking System (SBTS) API"
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for detailed logging and SQL echo")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(..., description="Database connection URL (postgresql+asyncpg://...)")

    # --- ARQ 워커 (Redis) 설정 ---
    REDIS_HOST: str = Field("localhost", description="Redis host for the ARQ worker")
    REDIS_PORT: int = Field(6379, description="Redis port for the ARQ worker")

    # --- 분석 메타데이터 기본값 ---
    # 메타데이터 레코드가 처음 생성될 때 NOT NULL 컬럼에 채워지는 값입니다.
    DEFAULT_CONDITIONS: str = Field("Not specified", description="Default arrival/storage conditions")
    DEFAULT_ANALYSIS_UNIT: str = Field("ng", description="Default analysis unit")
    DEFAULT_REPORTING_UNIT_AIR: str = Field("ng/m³", description="Default air reporting unit for new projects")
    DEFAULT_REPORTING_UNIT_SURFACE: str = Field("ng/cm²", description="Default surface reporting unit for new projects")

    # --- 담당자 배정 ---
    NO_CHEMIST_SENTINEL: str = Field("N/A", description="Chemist name meaning 'no assignment'")
    CHEMIST_ROLES: List[str] = Field(default=["Chemist", "Analyst"], description="Employee roles listed as chemists")

    def model_post_init(self, __context: Any) -> None:  # noqa: ANN001
        # testing 환경에서는 SQL 출력을 끕니다.
        if self.APP_ENV == "testing":
            self.DEBUG_MODE = False


settings = Settings()
