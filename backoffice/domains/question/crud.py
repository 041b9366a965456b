# backoffice/domains/question/crud.py

"""
'question' 도메인의 CRUD 로직을 담당하는 모듈입니다.
"""

from typing import Any, Dict

from pydantic import BaseModel

from backoffice.core.crud_base import CRUDBase, EntityMessages
from backoffice.core.validation import clean_name, clean_optional_text
from backoffice.domains.question import models as question_models
from backoffice.domains.question import schemas as question_schemas


QUESTION_MESSAGES = EntityMessages(
    invalid_id="Некорректный ID вопроса",
    invalid_name="Имя автора вопроса обязательно и должно быть строкой",
    not_found="Вопрос не найден",
    not_updated="Не удалось обновить вопрос — данные не изменились или запись не найдена",
    created="Вопрос успешно отправлен",
    updated="Вопрос успешно обновлен",
    deleted="Вопрос успешно удален",
    list_failed="Не удалось загрузить вопросы",
    create_failed="Не удалось сохранить вопрос",
    update_failed="Ошибка обновления вопроса",
    delete_failed="Ошибка удаления вопроса",
)

TEXT_REQUIRED = "Текст вопроса обязателен"


class CRUDQuestion(
    CRUDBase[
        question_models.Question,
        question_schemas.QuestionCreate,
        question_schemas.QuestionUpdate,
    ]
):
    def __init__(self):
        super().__init__(
            model=question_models.Question,
            messages=QUESTION_MESSAGES,
            unique_field=None,
            order_by=[question_models.Question.created_at.desc(), question_models.Question.id.desc()],
        )

    def to_values(self, obj_in: BaseModel) -> Dict[str, Any]:
        values = super().to_values(obj_in)
        values["name"] = clean_name(values.get("name"), self.messages.invalid_name, max_length=255)
        values["text"] = clean_name(values.get("text"), TEXT_REQUIRED)
        values["phone"] = clean_optional_text(values.get("phone"))
        values["answer"] = clean_optional_text(values.get("answer"))
        values["is_answered"] = values["answer"] is not None
        return values


question = CRUDQuestion()
