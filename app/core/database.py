# app/core/database.py

"""
애플리케이션의 데이터베이스 연결, 세션 및 트랜잭션 관리를 담당하는 모듈입니다.

- SQLModel의 비동기 엔진을 설정합니다.
- 비동기 세션 생성을 위한 유틸리티 함수를 제공합니다.
- 하나의 작업 단위를 전부 커밋하거나 전부 롤백하는 atomic() 컨텍스트를 제공합니다.
- 애플리케이션 시작 시 데이터베이스 테이블을 생성하는 함수를 포함합니다 (개발용).
"""

import logging
from typing import Any, AsyncGenerator, Callable, Dict
from contextlib import asynccontextmanager

from sqlalchemy import make_url
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import configure_mappers, sessionmaker

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.core.exceptions import ConstraintViolationError, DatabaseConfigurationError, TransientError

# =============================================================================
# 모든 도메인 모델 임포트
# =============================================================================
# 모든 SQLModel 클래스가 SQLModel.metadata에 등록되도록 명시적으로 임포트해야 합니다.
from app.domains.catalog import models      # noqa
from app.domains.clients import models      # noqa
from app.domains.lims import models         # noqa

logger = logging.getLogger(__name__)


def engine_options(url: str) -> Dict[str, Any]:
    """드라이버별 커넥션 풀 옵션을 반환합니다. (SQLite는 풀 크기 옵션을 받지 않습니다)"""
    if url.startswith("sqlite"):
        return {}
    return {
        "pool_recycle": 3600,  # 1시간마다 연결 재활용
        "pool_size": 10,       # 최소 10개의 연결 유지
        "max_overflow": 20,    # 최대 20개의 추가 연결 허용 (총 30개)
    }


# 방언별 INSERT ... ON CONFLICT 구문 생성기. 여기에 없는 방언으로는 엔진을 만들지 않습니다.
UPSERT_INSERTS: Dict[str, Callable[..., Any]] = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def build_engine(url: str, **kwargs: Any) -> AsyncEngine:
    """
    비동기 엔진을 만들고, 네이티브 upsert를 지원하는 방언인지 확인합니다.
    """
    backend = make_url(url).get_backend_name()
    if backend not in UPSERT_INSERTS:
        raise DatabaseConfigurationError(
            f"Unsupported database dialect '{backend}' "
            f"(supported: {', '.join(sorted(UPSERT_INSERTS))})"
        )
    return create_async_engine(url, future=True, **kwargs)


def upsert_insert(db: AsyncSession) -> Callable[..., Any]:
    """세션이 연결된 방언의 insert() 생성기를 반환합니다."""
    return UPSERT_INSERTS[db.get_bind().dialect.name]


_database_url = settings.DATABASE_URL.get_secret_value()

engine: AsyncEngine = build_engine(
    _database_url,
    echo=settings.DEBUG_MODE,  # 디버그 모드일 때만 SQL 쿼리 출력
    **engine_options(_database_url),
)

# 비동기 세션을 생성하는 '세션 공장'을 정의합니다.
AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

metadata = SQLModel.metadata

# 매퍼 구성 완료 플래그 (중복 호출 방지)
_mappers_configured = False


# =============================================================================
# 데이터베이스 초기화 및 테이블 생성 함수
# =============================================================================
async def create_db_and_tables(bind: AsyncEngine = engine) -> None:
    """
    데이터베이스 테이블을 생성합니다.
    이 함수는 개발/테스트 환경에서만 사용해야 하며, 기존 테이블을 삭제하지는 않습니다.
    """
    global _mappers_configured

    if not _mappers_configured:
        configure_mappers()
        _mappers_configured = True

    async with bind.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("데이터베이스 테이블 생성이 완료되었습니다 (또는 이미 존재).")


# =============================================================================
# 트랜잭션 작업 단위
# =============================================================================
@asynccontextmanager
async def atomic(db: AsyncSession) -> AsyncGenerator[AsyncSession, None]:
    """
    블록 안의 모든 쓰기를 하나의 트랜잭션으로 묶습니다.
    블록이 정상 종료되면 커밋하고, 어떤 예외든 발생하면 전부 롤백합니다.

    - IntegrityError -> ConstraintViolationError (400, 저장소 메시지 포함)
    - OperationalError / InterfaceError -> TransientError (503, 재시도는 호출자 정책)
    """
    try:
        yield db
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning("Transaction rolled back on constraint violation: %s", e.orig)
        raise ConstraintViolationError(detail=f"Database constraint violation: {e.orig}") from e
    except (OperationalError, InterfaceError) as e:
        await db.rollback()
        logger.error("Transaction rolled back on database error: %s", e, exc_info=True)
        raise TransientError(detail="Database temporarily unavailable. The operation was not applied.") from e
    except Exception:
        await db.rollback()
        raise


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with AsyncSessionLocal() as session:
        yield session


@asynccontextmanager
async def get_async_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    ARQ Task 등 요청 밖의 비동기 컨텍스트에서 사용할 독립적인 DB 세션을 제공합니다.
    """
    async with AsyncSessionLocal() as session:
        async with atomic(session):
            yield session
