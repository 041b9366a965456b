# tests/conftest.py

import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable, Optional

# --- 테스트 환경 변수 ---
# backoffice.core.config 는 임포트 시점에 설정을 읽으므로, 앱 임포트보다 먼저 지정해야 합니다.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("APP_ENV", "testing")

import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from backoffice.main import app as main_app  # noqa: E402
from backoffice.core import dependencies as deps  # noqa: E402
from backoffice.core.database import enable_sqlite_foreign_keys  # noqa: E402
from backoffice.core.security import create_session_token, get_password_hash  # noqa: E402

# --- 모든 모델 임포트 ---
#  SQLModel.metadata.create_all()이 모든 테이블을 인식하려면 모든 모델이 임포트되어야 합니다.
from backoffice.domains.models import *  # noqa: F401, F403, E402
from backoffice.domains.category import models as category_models  # noqa: E402
from backoffice.domains.form_type import models as form_type_models  # noqa: E402
from backoffice.domains.packing import models as packing_models  # noqa: E402
from backoffice.domains.product import models as product_models  # noqa: E402
from backoffice.domains.order import models as order_models  # noqa: E402
from backoffice.domains.user import models as user_models  # noqa: E402


# --- 테스트용 데이터베이스 설정 ---
# 메모리 SQLite 는 연결이 닫히면 사라지므로 StaticPool 로 연결 하나를 공유합니다.
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """
    테스트마다 새 메모리 DB 를 만들고 모든 테이블을 생성합니다.
    외래 키 검사(ON DELETE RESTRICT)를 켭니다.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine.sync_engine)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session


# --- 테스트 데이터 팩토리 ---
@pytest_asyncio.fixture(scope="function")
def user_factory(db_session: AsyncSession) -> Callable[..., Awaitable[user_models.User]]:
    """역할과 비밀번호를 지정하여 users 테이블에 사용자를 직접 생성합니다."""
    async def _create_user(
        email: str,
        password: str = "password123",
        role: str = user_models.UserRole.MANAGER.value,
        is_active: bool = True,
        **kwargs,
    ) -> user_models.User:
        user = user_models.User(
            email=email,
            password_hash=get_password_hash(password),
            role=role,
            is_active=is_active,
            **kwargs,
        )
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user
    return _create_user


@pytest_asyncio.fixture(scope="function")
async def form_type(db_session: AsyncSession) -> form_type_models.FormType:
    obj = form_type_models.FormType(name="Жидкость")
    db_session.add(obj)
    await db_session.commit()
    await db_session.refresh(obj)
    return obj


@pytest_asyncio.fixture(scope="function")
async def category(db_session: AsyncSession) -> category_models.Category:
    obj = category_models.Category(name="Напитки", description="Безалкогольные напитки")
    db_session.add(obj)
    await db_session.commit()
    await db_session.refresh(obj)
    return obj


@pytest_asyncio.fixture(scope="function")
async def packing(db_session: AsyncSession, form_type: form_type_models.FormType) -> packing_models.Packing:
    obj = packing_models.Packing(name="ПЭТ 0.5", form_type=form_type.id, volume="0.5 л")
    db_session.add(obj)
    await db_session.commit()
    await db_session.refresh(obj)
    return obj


@pytest_asyncio.fixture(scope="function")
def product_factory(
    db_session: AsyncSession,
    category: category_models.Category,
    form_type: form_type_models.FormType,
) -> Callable[..., Awaitable[product_models.Product]]:
    """기본 카테고리/형태 유형을 참조하는 제품을 생성합니다."""
    async def _create_product(name: str, **kwargs) -> product_models.Product:
        values = {"category": category.id, "form_type": form_type.id, **kwargs}
        obj = product_models.Product(name=name, **values)
        db_session.add(obj)
        await db_session.commit()
        await db_session.refresh(obj)
        return obj
    return _create_product


@pytest_asyncio.fixture(scope="function")
def order_factory(db_session: AsyncSession) -> Callable[..., Awaitable[order_models.Order]]:
    async def _create_order(**kwargs) -> order_models.Order:
        values = {"customer_name": "Иван", "phone": "+70000000000", **kwargs}
        obj = order_models.Order(**values)
        db_session.add(obj)
        await db_session.commit()
        await db_session.refresh(obj)
        return obj
    return _create_order


# --- 역할별 클라이언트 팩토리 ---
# 클라이언트마다 자기 세션 토큰을 Authorization 헤더로 보냅니다.
# 앱 전역 오버라이드는 DB 세션만 둡니다.
@pytest_asyncio.fixture(scope="function")
def client_factory(db_session: AsyncSession):
    """
    지정한 세션(또는 세션 없음)으로 요청하는 AsyncClient 를 만드는 팩토리를 반환합니다.
    role 이 None 이면 헤더 없이 요청합니다. (로그인으로 받은 쿠키는 그대로 사용)
    """
    @asynccontextmanager
    async def _create_client(
        role: Optional[str] = None,
        email: str = "someone@example.com",
    ) -> AsyncGenerator[AsyncClient, None]:
        async def override_get_session():
            yield db_session

        original_overrides = main_app.dependency_overrides.copy()
        try:
            main_app.dependency_overrides[deps.get_db_session] = override_get_session
            headers = {}
            if role is not None:
                headers["Authorization"] = f"Bearer {create_session_token(email, role)}"

            transport = ASGITransport(app=main_app)
            async with AsyncClient(transport=transport, base_url="http://test", headers=headers) as client:
                yield client
        finally:
            main_app.dependency_overrides.clear()
            main_app.dependency_overrides.update(original_overrides)

    return _create_client


@pytest_asyncio.fixture(scope="function")
async def director_client(client_factory) -> AsyncGenerator[AsyncClient, None]:
    async with client_factory(user_models.UserRole.DIRECTOR.value, email="director@example.com") as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def stmanager_client(client_factory) -> AsyncGenerator[AsyncClient, None]:
    async with client_factory(user_models.UserRole.STOCK_MANAGER.value, email="stock@example.com") as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def manager_client(client_factory) -> AsyncGenerator[AsyncClient, None]:
    async with client_factory(user_models.UserRole.MANAGER.value, email="manager@example.com") as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def anon_client(client_factory) -> AsyncGenerator[AsyncClient, None]:
    """세션 없이 요청하는 클라이언트 (공개 API, 로그인, 401 검증용)"""
    async with client_factory() as client:
        yield client
