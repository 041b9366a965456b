# backoffice/domains/form_type/crud.py

"""
'form_type' 도메인의 CRUD 로직을 담당하는 모듈입니다.
"""

from backoffice.core.crud_base import CRUDBase, EntityMessages, ReferenceGuard
from backoffice.domains.form_type import models as form_type_models
from backoffice.domains.form_type import schemas as form_type_schemas
from backoffice.domains.product.models import Product


FORM_TYPE_MESSAGES = EntityMessages(
    invalid_id="Некорректный ID типа формы",
    invalid_name="Название типа формы не указано или некорректно",
    name_too_long="Название типа формы не должно превышать 255 символов",
    not_found="Тип формы не найден",
    duplicate="Тип формы с таким названием уже существует",
    in_use_edit="Нельзя редактировать тип формы, который используется в продуктах",
    in_use_delete="Нельзя удалить тип формы, который используется в продуктах",
    not_updated="Не удалось обновить тип формы — данные не изменились или запись не найдена",
    created="Тип формы успешно создан",
    updated="Тип формы успешно обновлен",
    deleted="Тип формы успешно удален",
    list_failed="Не удалось загрузить типы форм",
    create_failed="Не удалось создать тип формы",
    update_failed="Ошибка обновления типа формы",
    delete_failed="Ошибка удаления типа формы",
)


class CRUDFormType(
    CRUDBase[
        form_type_models.FormType,
        form_type_schemas.FormTypeCreate,
        form_type_schemas.FormTypeUpdate,
    ]
):
    def __init__(self):
        # 포장(packings.form_type)의 참조는 검사 대상이 아닙니다. (삭제 시 NULL 로 변경)
        super().__init__(
            model=form_type_models.FormType,
            messages=FORM_TYPE_MESSAGES,
            unique_max_length=form_type_models.FORM_TYPE_NAME_MAX_LENGTH,
            guards=[ReferenceGuard(Product.form_type)],
        )


form_type = CRUDFormType()
