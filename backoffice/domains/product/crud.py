# backoffice/domains/product/crud.py

"""
'product' 도메인의 CRUD 로직을 담당하는 모듈입니다.
"""

from typing import Any, Dict

from fastapi import HTTPException, status
from pydantic import BaseModel
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.core.crud_base import CRUDBase, EntityMessages, ReferenceGuard
from backoffice.core.validation import clean_optional_text
from backoffice.domains.category.crud import category as category_crud
from backoffice.domains.form_type.crud import form_type as form_type_crud
from backoffice.domains.order.models import Order
from backoffice.domains.packing.crud import packing as packing_crud
from backoffice.domains.product import models as product_models
from backoffice.domains.product import schemas as product_schemas


PRODUCT_MESSAGES = EntityMessages(
    invalid_id="Некорректный ID продукта",
    invalid_name="Название продукта обязательно и должно быть строкой",
    not_found="Продукт не найден",
    duplicate="Продукт с таким названием уже существует",
    in_use_edit="Нельзя редактировать продукт, который используется в заявках",
    in_use_delete="Нельзя удалить продукт, который используется в заявках",
    not_updated="Не удалось обновить продукт — данные не изменились или запись не найдена",
    created="Продукт успешно создан",
    updated="Продукт успешно обновлен",
    deleted="Продукт успешно удален",
    list_failed="Не удалось загрузить продукты",
    create_failed="Не удалось создать продукт",
    update_failed="Ошибка обновления продукта",
    delete_failed="Ошибка удаления продукта",
)

CATEGORY_REQUIRED = "Укажите существующую категорию"
FORM_TYPE_REQUIRED = "Укажите существующий тип формы"
PACKING_NOT_FOUND = "Указанная упаковка не существует"
NEGATIVE_PRICE = "Цена не может быть отрицательной"


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class CRUDProduct(
    CRUDBase[
        product_models.Product,
        product_schemas.ProductCreate,
        product_schemas.ProductUpdate,
    ]
):
    def __init__(self):
        super().__init__(
            model=product_models.Product,
            messages=PRODUCT_MESSAGES,
            guards=[ReferenceGuard(Order.product)],
        )

    def to_values(self, obj_in: BaseModel) -> Dict[str, Any]:
        values = super().to_values(obj_in)
        values["description"] = clean_optional_text(values.get("description"))
        price = values.get("price")
        if price is not None and price < 0:
            raise _bad_request(NEGATIVE_PRICE)
        return values

    async def validate_references(self, db: AsyncSession, values: Dict[str, Any]) -> None:
        """카테고리와 형태 유형은 필수, 포장은 지정된 경우에만 존재를 확인합니다."""
        category_id = values.get("category")
        if category_id is None or not await category_crud.exists(db, category_id):
            raise _bad_request(CATEGORY_REQUIRED)
        form_type_id = values.get("form_type")
        if form_type_id is None or not await form_type_crud.exists(db, form_type_id):
            raise _bad_request(FORM_TYPE_REQUIRED)
        packing_id = values.get("packing")
        if packing_id is not None and not await packing_crud.exists(db, packing_id):
            raise _bad_request(PACKING_NOT_FOUND)


product = CRUDProduct()
