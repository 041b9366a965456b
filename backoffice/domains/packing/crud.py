# backoffice/domains/packing/crud.py

"""
'packing' 도메인의 CRUD 로직을 담당하는 모듈입니다.
"""

from typing import Any, Dict

from fastapi import HTTPException, status
from pydantic import BaseModel
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.core.crud_base import CRUDBase, EntityMessages, ReferenceGuard
from backoffice.core.validation import clean_optional_text
from backoffice.domains.form_type.crud import form_type as form_type_crud
from backoffice.domains.packing import models as packing_models
from backoffice.domains.packing import schemas as packing_schemas
from backoffice.domains.product.models import Product


PACKING_MESSAGES = EntityMessages(
    invalid_id="Некорректный ID упаковки",
    invalid_name="Название упаковки обязательно и должно быть строкой",
    not_found="Упаковка не найдена",
    duplicate="Упаковка с таким названием уже существует",
    in_use_edit="Нельзя редактировать упаковку, которая используется в продуктах",
    in_use_delete="Нельзя удалить упаковку, которая используется в продуктах",
    not_updated="Не удалось обновить упаковку — данные не изменились или запись не найдена",
    created="Упаковка успешно создана",
    updated="Упаковка успешно обновлена",
    deleted="Упаковка успешно удалена",
    list_failed="Не удалось загрузить упаковки",
    create_failed="Не удалось создать упаковку",
    update_failed="Ошибка обновления упаковки",
    delete_failed="Ошибка удаления упаковки",
)

FORM_TYPE_NOT_FOUND = "Указанный тип формы не существует"


class CRUDPacking(
    CRUDBase[
        packing_models.Packing,
        packing_schemas.PackingCreate,
        packing_schemas.PackingUpdate,
    ]
):
    def __init__(self):
        super().__init__(
            model=packing_models.Packing,
            messages=PACKING_MESSAGES,
            guards=[ReferenceGuard(Product.packing)],
        )

    def to_values(self, obj_in: BaseModel) -> Dict[str, Any]:
        values = super().to_values(obj_in)
        values["volume"] = clean_optional_text(values.get("volume"))
        return values

    async def validate_references(self, db: AsyncSession, values: Dict[str, Any]) -> None:
        """형태 유형은 선택 항목이지만, 지정된 경우 실제로 존재해야 합니다."""
        form_type_id = values.get("form_type")
        if form_type_id is not None and not await form_type_crud.exists(db, form_type_id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=FORM_TYPE_NOT_FOUND)


packing = CRUDPacking()
