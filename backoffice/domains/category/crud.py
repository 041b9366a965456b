# backoffice/domains/category/crud.py

"""
'category' 도메인의 CRUD 로직을 담당하는 모듈입니다.
"""

from backoffice.core.crud_base import CRUDBase, EntityMessages, ReferenceGuard
from backoffice.domains.category import models as category_models
from backoffice.domains.category import schemas as category_schemas
from backoffice.domains.product.models import Product


CATEGORY_MESSAGES = EntityMessages(
    invalid_id="Некорректный ID категории",
    invalid_name="Название категории обязательно и должно быть строкой",
    not_found="Категория не найдена",
    duplicate="Категория с таким названием уже существует",
    in_use_edit="Нельзя редактировать категорию, которая используется в продуктах",
    in_use_delete="Нельзя удалить категорию, которая используется в продуктах",
    not_updated="Не удалось обновить категорию — данные не изменились или запись не найдена",
    created="Категория успешно создана",
    updated="Категория успешно обновлена",
    deleted="Категория успешно удалена",
    list_failed="Не удалось загрузить категории",
    create_failed="Не удалось создать категорию",
    update_failed="Ошибка обновления категории",
    delete_failed="Ошибка удаления категории",
)


class CRUDCategory(
    CRUDBase[
        category_models.Category,
        category_schemas.CategoryCreate,
        category_schemas.CategoryUpdate,
    ]
):
    def __init__(self):
        super().__init__(
            model=category_models.Category,
            messages=CATEGORY_MESSAGES,
            guards=[ReferenceGuard(Product.category)],
        )


category = CRUDCategory()
