# backoffice/main.py

"""
FastAPI 애플리케이션의 진입점입니다.

- 수명 주기: 로깅 구성, 종료 시 DB 연결 풀 정리
- CORS 미들웨어, 응답 봉투 예외 처리기
- 관리자 API (/api/admin/...) 및 공개 접수 API (/api/orders, /api/questions)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice import API_PREFIX, PUBLIC_API_PREFIX
from backoffice.core.config import settings
from backoffice.core import dependencies as deps
from backoffice.core.database import engine
from backoffice.core.logging_config import configure_logging
from backoffice.core.responses import ok, register_exception_handlers

from backoffice.domains.admin.routers import router as admin_router
from backoffice.domains.category.routers import router as category_router
from backoffice.domains.form_type.routers import router as form_type_router
from backoffice.domains.packing.routers import router as packing_router
from backoffice.domains.product.routers import router as product_router
from backoffice.domains.user.routers import router as user_router
from backoffice.domains.order.routers import router as order_router, public_router as order_public_router
from backoffice.domains.question.routers import router as question_router, public_router as question_public_router

logger = logging.getLogger(__name__)

HEALTH_CHECK_FAILED = "Database connection error during health check"


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging()
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} starting (env={settings.APP_ENV})")
    logger.info("Database schema is managed outside the app (scripts/init_db.py or alembic upgrade head).")

    yield  # 애플리케이션 실행

    logger.info("Shutting down, disposing database connection pool...")
    await engine.dispose()


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# -- CORS 미들웨어 설정 --
# 세션 쿠키를 쓰므로 운영 환경에서는 CORS_ORIGINS 를 실제 프론트엔드 도메인으로 제한해야 합니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 모든 오류를 {success: false, error} 봉투로 변환 --
register_exception_handlers(app)

# -- 도메인 라우터 포함 --
app.include_router(admin_router, prefix=API_PREFIX)
app.include_router(product_router, prefix=API_PREFIX)
app.include_router(packing_router, prefix=API_PREFIX)
app.include_router(form_type_router, prefix=API_PREFIX)
app.include_router(category_router, prefix=API_PREFIX)
app.include_router(user_router, prefix=API_PREFIX)
app.include_router(order_router, prefix=API_PREFIX)
app.include_router(question_router, prefix=API_PREFIX)

app.include_router(order_public_router, prefix=PUBLIC_API_PREFIX)
app.include_router(question_public_router, prefix=PUBLIC_API_PREFIX)


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    return ok(message=f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation.")


# -- 헬스 체크 엔드포인트 --
@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(deps.get_db_session)):
    """
    데이터베이스에 `SELECT 1` 을 실행하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        result = await session.execute(select(1))
        result.scalar_one()
    except SQLAlchemyError as e:
        logger.error(f"{HEALTH_CHECK_FAILED}: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=HEALTH_CHECK_FAILED) from e
    return ok({"status": "ok", "database_connection": "successful"})
