# backoffice/domains/models/__init__.py

"""
이 파일은 모든 도메인의 SQLModel 모델들을 한 곳에서 임포트하여,
SQLModel.metadata 가 모든 테이블과 외래 키를 인식하도록 보장합니다.
"""

from backoffice.domains.user.models import User, UserRole
from backoffice.domains.category.models import Category
from backoffice.domains.form_type.models import FormType
from backoffice.domains.packing.models import Packing
from backoffice.domains.product.models import Product
from backoffice.domains.order.models import Order, OrderStatus
from backoffice.domains.question.models import Question


__all__ = [
    "User", "UserRole",
    "Category",
    "FormType",
    "Packing",
    "Product",
    "Order", "OrderStatus",
    "Question",
]
