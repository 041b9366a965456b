# backoffice/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 (get_db_session).
- 현재 관리자 세션 (get_admin_session, get_required_session).
- 관리자 메뉴 표와 같은 규칙으로 엔드포인트 접근을 제한하는 역할 의존성.
"""

from typing import AsyncGenerator

from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.core.database import get_session as get_main_app_session

# flake8: noqa
from backoffice.core.security import (
    AdminSession,
    create_session_token,
    get_admin_session,
    get_required_session,
    require_roles,
)
from backoffice.domains.admin.navigation import roles_for_path


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    요청 단위 비동기 데이터베이스 세션 제너레이터입니다.
    backoffice.core.database.get_session 을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session():
        yield session


# --- 메뉴 표에 맞춘 엔드포인트 접근 권한 ---
# 엔드포인트 권한은 해당 관리 화면 링크의 허용 역할과 동일합니다.
require_product_access = require_roles(roles_for_path("/admin/products"))
require_packing_access = require_roles(roles_for_path("/admin/packings"))
require_category_access = require_roles(roles_for_path("/admin/categories"))
require_user_access = require_roles(roles_for_path("/admin/users"))
require_order_access = require_roles(roles_for_path("/admin/orders"))
require_question_access = require_roles(roles_for_path("/admin/questions"))
# 형태 유형은 포장 화면에서 관리합니다.
require_form_type_access = require_packing_access
