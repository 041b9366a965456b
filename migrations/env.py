# migrations/env.py

"""
카탈로그 백오피스 스키마용 Alembic 환경입니다.

접속 URL 은 alembic.ini 가 비어 있으면 애플리케이션 설정(DATABASE_URL)에서 가져오고,
온라인 모드에서는 애플리케이션과 같은 비동기 드라이버로 연결합니다.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel import SQLModel

from backoffice.core.config import settings
import backoffice.domains.models  # noqa: F401  (테이블 등록)

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = SQLModel.metadata

# autogenerate 비교에서 제외할 테이블
IGNORED_TABLES = frozenset({"alembic_version"})


def database_url() -> str:
    return config.get_main_option("sqlalchemy.url") or settings.DATABASE_URL.get_secret_value()


def include_object(object, name, type_, reflected, compare_to):  # noqa: A002
    return not (type_ == "table" and name in IGNORED_TABLES)


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        include_object=include_object,
        compare_type=True,
        **kwargs,
    )


def run_migrations_offline() -> None:
    """연결 없이 SQL 스크립트만 출력합니다. (`alembic upgrade head --sql`)"""
    _configure(url=database_url(), literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    # SQLite 는 ALTER TABLE 지원이 제한적이라 batch 모드로 테이블을 재생성합니다.
    _configure(connection=connection, render_as_batch=connection.dialect.name == "sqlite")
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = create_async_engine(database_url(), poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(do_run_migrations)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
