# backoffice/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- SQLModel 비동기 엔진과 커넥션 풀을 설정합니다.
- 요청 단위의 비동기 세션을 제공하는 의존성 함수를 제공합니다.
- 개발 환경에서 테이블을 생성하는 함수를 포함합니다.
"""

import logging
from typing import Any, AsyncGenerator, Dict
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.core.config import settings

logger = logging.getLogger(__name__)


def build_engine_kwargs(url: str) -> Dict[str, Any]:
    """
    드라이버에 맞는 엔진 옵션을 구성합니다.
    SQLite(테스트/로컬)는 풀 크기 옵션을 받지 않으므로 제외합니다.
    """
    kwargs: Dict[str, Any] = {"echo": settings.DEBUG_MODE, "future": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs.update(
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_pre_ping=True,
        )
    return kwargs


def enable_sqlite_foreign_keys(sync_engine: Engine) -> None:
    """SQLite 는 연결마다 외래 키 검사를 켜야 ON DELETE RESTRICT 가 동작합니다."""
    @event.listens_for(sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):  # noqa: ANN001
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


_database_url = settings.DATABASE_URL.get_secret_value()

engine: AsyncEngine = create_async_engine(_database_url, **build_engine_kwargs(_database_url))
if settings.is_sqlite:
    enable_sqlite_foreign_keys(engine.sync_engine)

# 비동기 세션을 생성하는 '세션 공장'을 정의합니다.
AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

metadata = SQLModel.metadata


# =============================================================================
# 데이터베이스 초기화 및 테이블 생성 함수
# =============================================================================
async def create_db_and_tables() -> None:
    """
    모든 SQLModel 테이블을 생성합니다. (개발 환경 전용, 기존 테이블은 유지)
    """
    # 모든 도메인 모델이 metadata 에 등록되도록 임포트합니다.
    from backoffice.domains import models  # noqa: F401

    logger.info("Creating database tables (if missing)...")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables are ready.")


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 풀에서 연결을 빌려오고, 요청 처리 후 세션을 닫습니다.
    """
    async with AsyncSessionLocal() as session:
        yield session


@asynccontextmanager
async def get_async_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    스크립트 등 요청 밖에서 사용할 독립적인 비동기 DB 세션 컨텍스트 관리자입니다.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
