# backoffice/domains/user/crud.py

"""
'user' 도메인의 CRUD 로직을 담당하는 모듈입니다.

- 이메일 정리/형식 검증, 역할 검증, 비밀번호 해싱
- 로그인 인증 (authenticate)
- 자기 자신 삭제 방지
"""

import logging
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from pydantic import BaseModel, EmailStr, TypeAdapter, ValidationError
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.core.crud_base import CRUDBase, EntityMessages, ReferenceGuard
from backoffice.core.security import get_password_hash, verify_password
from backoffice.core.validation import clean_optional_text
from backoffice.domains.order.models import Order
from backoffice.domains.user import models as user_models
from backoffice.domains.user import schemas as user_schemas

logger = logging.getLogger(__name__)

USER_MESSAGES = EntityMessages(
    invalid_id="Некорректный ID пользователя",
    invalid_name="Email пользователя обязателен и должен быть строкой",
    not_found="Пользователь не найден",
    duplicate="Пользователь с таким email уже существует",
    in_use_edit="Нельзя редактировать пользователя, за которым закреплены заявки",
    in_use_delete="Нельзя удалить пользователя, за которым закреплены заявки",
    not_updated="Не удалось обновить пользователя — данные не изменились или запись не найдена",
    created="Пользователь успешно создан",
    updated="Пользователь успешно обновлен",
    deleted="Пользователь успешно удален",
    list_failed="Не удалось загрузить пользователей",
    create_failed="Не удалось создать пользователя",
    update_failed="Ошибка обновления пользователя",
    delete_failed="Ошибка удаления пользователя",
)

INVALID_EMAIL = "Некорректный email пользователя"
INVALID_ROLE = "Некорректная роль пользователя"
PASSWORD_TOO_SHORT = "Пароль должен содержать не менее 8 символов"
CANNOT_DELETE_SELF = "Нельзя удалить собственную учетную запись"

PASSWORD_MIN_LENGTH = 8
VALID_ROLES = frozenset(role.value for role in user_models.UserRole)

_email_adapter = TypeAdapter(EmailStr)


def normalize_email(value: str) -> str:
    """저장 시와 같은 규칙(도메인 소문자화 등)으로 이메일을 정규화합니다. 형식이 틀리면 그대로 둡니다."""
    value = value.strip()
    try:
        return _email_adapter.validate_python(value)
    except ValidationError:
        return value


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class CRUDUser(
    CRUDBase[
        user_models.User,
        user_schemas.UserCreate,
        user_schemas.UserUpdate,
    ]
):
    def __init__(self):
        super().__init__(
            model=user_models.User,
            messages=USER_MESSAGES,
            unique_field="email",
            guards=[ReferenceGuard(Order.manager)],
        )

    def to_values(self, obj_in: BaseModel) -> Dict[str, Any]:
        """
        이메일 형식과 역할을 검증하고, 비밀번호를 해시로 바꿉니다.
        수정 요청에서 비밀번호가 비어 있으면 기존 해시를 유지합니다.
        """
        values = super().to_values(obj_in)
        try:
            values["email"] = _email_adapter.validate_python(values["email"])
        except ValidationError:
            raise _bad_request(INVALID_EMAIL)
        if values.get("role") not in VALID_ROLES:
            raise _bad_request(INVALID_ROLE)
        values["name"] = clean_optional_text(values.get("name"))

        password = values.pop("password", None)
        if password is None and isinstance(obj_in, user_schemas.UserUpdate):
            return values
        if password is None or len(password) < PASSWORD_MIN_LENGTH:
            raise _bad_request(PASSWORD_TOO_SHORT)
        values["password_hash"] = get_password_hash(password)
        return values

    async def get_by_email(self, db: AsyncSession, *, email: str) -> Optional[user_models.User]:
        return await self.get_by_attribute(db, attribute="email", value=email)

    async def authenticate(self, db: AsyncSession, *, email: str, password: str) -> Optional[user_models.User]:
        """이메일과 비밀번호로 활성 사용자를 인증합니다. 실패 시 None 을 반환합니다."""
        user = await self.get_by_email(db, email=normalize_email(email))
        if not user or not user.is_active:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    async def remove(self, db: AsyncSession, *, id: int, current_email: Optional[str] = None) -> None:
        """참조 검사에 더해, 로그인한 사용자 자신의 계정 삭제를 거부합니다."""
        if current_email is not None:
            target = await self.get(db, id)
            if target is not None and target.email == normalize_email(current_email):
                logger.info(f"User {current_email} tried to delete own account (id={id})")
                raise _bad_request(CANNOT_DELETE_SELF)
        await super().remove(db, id=id)


user = CRUDUser()
