# flake8: noqa
# scripts/init_db.py

"""
개발 환경에서 모든 테이블을 생성합니다. (이미 있는 테이블은 건드리지 않습니다)
운영 환경의 스키마는 `alembic upgrade head` 로 관리합니다.
"""

import asyncio

from backoffice.core.database import create_db_and_tables, engine
from backoffice.core.logging_config import configure_logging


async def main() -> None:
    configure_logging()
    try:
        await create_db_and_tables()
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
