# app/core/tasks.py

"""
ARQ 워커가 실행하는 공통 태스크 모듈입니다.
"""

import logging
from datetime import datetime

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import get_async_session_context

logger = logging.getLogger(__name__)


async def _ping(db: AsyncSession) -> dict:
    result = await db.execute(select(1))
    if result.scalar_one_or_none() == 1:
        logger.info("데이터베이스 헬스 체크: 성공적으로 연결되었습니다.")
        return {"status": "success", "message": "Database connection successful."}

    # select(1)이 1을 반환하지 않는 경우는 드뭅니다.
    error_msg = "Database health check failed: No result from test query."
    logger.error("데이터베이스 헬스 체크: 실패 - %s", error_msg)
    return {"status": "failed", "message": error_msg}


async def health_check_database_task(ctx):
    """
    ARQ 워커에 의해 실행될 주기적인 데이터베이스 헬스 체크 태스크.
    ctx에 'db' 세션이 있으면 그것을 사용하고, 없으면 독립 세션을 엽니다.
    연결 오류는 예외로 올리지 않고 실패 상태로 반환합니다.
    """
    logger.info("[%s] ARQ 태스크: 데이터베이스 헬스 체크 실행", datetime.now())

    try:
        db = ctx.get("db")
        if db is not None:
            return await _ping(db)
        async with get_async_session_context() as session:
            return await _ping(session)
    except Exception as e:
        error_msg = f"데이터베이스 연결 오류: {e}"
        logger.error("데이터베이스 헬스 체크: 실패 - %s", error_msg)
        return {"status": "failed", "message": error_msg}
