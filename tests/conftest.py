# tests/conftest.py

import os
from typing import AsyncGenerator, Callable, Awaitable, Dict, Any

# 앱 임포트 전에 테스트 환경 변수를 지정해야 Settings()가 이 값을 읽습니다.
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)
os.environ["APP_ENV"] = "testing"

import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import NullPool, StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

# app.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from app.main import app as main_app  # noqa: E402
from app.core import dependencies as deps  # noqa: E402
from app.core.database import build_engine, get_session  # noqa: E402

# --- 모든 모델 임포트 ---
#  SQLModel.metadata.create_all()이 모든 테이블을 인식하려면,
#  모든 모델 클래스가 한 번 이상 임포트되어야 합니다.
from app.domains.models import *    # noqa: F401, F403, E402
from app.domains.catalog import models as catalog_models  # noqa: E402
from app.domains.lims import schemas as lims_schemas  # noqa: E402
from app.domains.lims import crud as lims_crud  # noqa: E402


def _create_test_engine() -> AsyncEngine:
    """
    테스트용 엔진을 만듭니다.
    SQLite 메모리 DB는 연결 하나를 공유해야 테이블이 유지되므로 StaticPool을 사용하고,
    외래 키 검사를 켭니다. 그 외 URL(PostgreSQL 등)은 NullPool을 사용합니다.
    """
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = build_engine(
            TEST_DATABASE_URL,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return build_engine(TEST_DATABASE_URL, echo=False, poolclass=NullPool)


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    테스트 함수마다 모든 테이블을 새로 만들고, 끝나면 삭제합니다.
    애플리케이션 코드가 직접 커밋하므로 트랜잭션 롤백 대신 테이블을 재생성해 격리합니다.
    """
    engine = _create_test_engine()
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """테스트와 API 요청이 함께 사용하는 비동기 데이터베이스 세션을 제공합니다."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session


# --- 비동기 테스트 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    AsyncClient 인스턴스를 생성하고, 테스트용 비동기 DB 세션을 주입합니다.
    """

    def override_get_session_and_dependency():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()

    try:
        # get_session과 deps.get_db_session 모두 오버라이드
        main_app.dependency_overrides[get_session] = override_get_session_and_dependency
        main_app.dependency_overrides[deps.get_db_session] = override_get_session_and_dependency

        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client

    finally:
        # 클라이언트 픽스처가 끝나면 오버라이드를 반드시 복원해야 합니다.
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


# --- 참조 카탈로그 픽스처 ---
@pytest_asyncio.fixture(name="seed_catalog")
async def seed_catalog_fixture(db_session: AsyncSession) -> Dict[str, Any]:
    """
    테스트용 분석 메소드와 직원을 생성합니다.
    - Toluene: (101, 0), (101, 1)   - Benzene: (202, 0)
    - Alice Kim(Chemist), Bob Lee(Analyst), Carol Park(Reviewer)
    """
    methods = [
        catalog_models.Method(method_number=101, revision_number=0, compound="Toluene", air_loq=0.5, surface_loq=0.1),
        catalog_models.Method(method_number=101, revision_number=1, compound="Toluene", air_loq=0.4, surface_loq=0.1),
        catalog_models.Method(method_number=202, revision_number=0, compound="Benzene", air_loq=1.0, surface_loq=0.2),
    ]
    employees = {
        "alice": catalog_models.Employee(name="Alice Kim", role="Chemist"),
        "bob": catalog_models.Employee(name="Bob Lee", role="Analyst"),
        "carol": catalog_models.Employee(name="Carol Park", role="Reviewer"),
    }
    db_session.add_all(methods)
    db_session.add_all(employees.values())
    await db_session.commit()
    return {"methods": methods, "employees": {key: e.id for key, e in employees.items()}}


# --- 의뢰 접수 헬퍼 ---
def make_submission(
    email: str = "a@x.com",
    name: str = "A",
    company: str = "Acme",
    samples: Any = None,
    **client_fields: Any,
) -> Dict[str, Any]:
    """의뢰 접수 요청 본문(JSON)을 만듭니다."""
    client_info = {
        "email": email,
        "name": name,
        "company": company,
        "num_samples": 2,
        "method_id": 101,
        "revision": 1,
    }
    client_info.update(client_fields)
    if samples is None:
        samples = [
            {"client_name": "S-air", "date_sampled": "2024-01-05", "air_volume": 10},
            {"client_name": "S-surface", "date_sampled": "2024-01-06", "surface_area": 5},
        ]
    return {"client_info": client_info, "samples": samples}


@pytest_asyncio.fixture(name="submit_intake")
def submit_intake_fixture(
    db_session: AsyncSession, seed_catalog: Dict[str, Any]
) -> Callable[..., Awaitable[int]]:
    """CRUD 계층으로 의뢰를 접수하고 보고서 번호를 반환하는 팩토리입니다."""
    async def _submit(**kwargs: Any) -> int:
        submission = lims_schemas.IntakeSubmission.model_validate(make_submission(**kwargs))
        return await lims_crud.intake.submit(db_session, obj_in=submission)
    return _submit
