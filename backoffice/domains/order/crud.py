# backoffice/domains/order/crud.py

"""
'order' 도메인의 CRUD 로직을 담당하는 모듈입니다.
주문에는 고유 키가 없으며, 목록은 최신 접수 순으로 정렬합니다.
"""

from typing import Any, Dict

from fastapi import HTTPException, status
from pydantic import BaseModel
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.core.crud_base import CRUDBase, EntityMessages
from backoffice.core.validation import clean_name, clean_optional_text
from backoffice.domains.order import models as order_models
from backoffice.domains.order import schemas as order_schemas
from backoffice.domains.product.models import Product
from backoffice.domains.user.models import User


ORDER_MESSAGES = EntityMessages(
    invalid_id="Некорректный ID заявки",
    invalid_name="Имя клиента обязательно и должно быть строкой",
    not_found="Заявка не найдена",
    not_updated="Не удалось обновить заявку — данные не изменились или запись не найдена",
    created="Заявка успешно создана",
    updated="Заявка успешно обновлена",
    deleted="Заявка успешно удалена",
    list_failed="Не удалось загрузить заявки",
    create_failed="Не удалось создать заявку",
    update_failed="Ошибка обновления заявки",
    delete_failed="Ошибка удаления заявки",
)

CONTACT_REQUIRED = "Укажите телефон или email для связи"
INVALID_QUANTITY = "Количество должно быть не меньше 1"
INVALID_STATUS = "Некорректный статус заявки"
PRODUCT_NOT_FOUND = "Указанный продукт не существует"
MANAGER_NOT_FOUND = "Указанный менеджер не существует"

VALID_STATUSES = frozenset(s.value for s in order_models.OrderStatus)


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class CRUDOrder(
    CRUDBase[
        order_models.Order,
        order_schemas.OrderCreate,
        order_schemas.OrderUpdate,
    ]
):
    def __init__(self):
        super().__init__(
            model=order_models.Order,
            messages=ORDER_MESSAGES,
            unique_field=None,
            order_by=[order_models.Order.created_at.desc(), order_models.Order.id.desc()],
        )

    def to_values(self, obj_in: BaseModel) -> Dict[str, Any]:
        values = super().to_values(obj_in)
        values["customer_name"] = clean_name(
            values.get("customer_name"), self.messages.invalid_name, max_length=255
        )
        values["phone"] = clean_optional_text(values.get("phone"))
        values["comment"] = clean_optional_text(values.get("comment"))
        if values["phone"] is None and values.get("email") is None:
            raise _bad_request(CONTACT_REQUIRED)
        if values.get("quantity") is None or values["quantity"] < 1:
            raise _bad_request(INVALID_QUANTITY)
        if values.get("status") not in VALID_STATUSES:
            raise _bad_request(INVALID_STATUS)
        return values

    async def validate_references(self, db: AsyncSession, values: Dict[str, Any]) -> None:
        product_id = values.get("product")
        if product_id is not None and (await db.get(Product, product_id)) is None:
            raise _bad_request(PRODUCT_NOT_FOUND)
        manager_id = values.get("manager")
        if manager_id is not None and (await db.get(User, manager_id)) is None:
            raise _bad_request(MANAGER_NOT_FOUND)


order = CRUDOrder()
