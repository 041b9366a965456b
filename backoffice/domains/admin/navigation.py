# backoffice/domains/admin/navigation.py

"""
관리자 헤더의 역할 기반 메뉴를 정의하는 모듈입니다.

메뉴 표(NAV_LINKS)는 화면 링크와 API 접근 권한의 단일 기준입니다.
`backoffice.core.dependencies` 의 역할 의존성도 이 표에서 허용 역할을 읽어갑니다.
"""

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from backoffice.core.config import settings
from backoffice.core.security import AdminSession
from backoffice.domains.user.models import UserRole

ADMIN_TITLE = "Админ-панель"
ADMIN_BANNER = "ВЫ НАХОДИТЕСЬ В АДМИН-ПАНЕЛИ"

_ALL_ROLES = frozenset(role.value for role in UserRole)
_CATALOG_ROLES = frozenset({UserRole.STOCK_MANAGER.value, UserRole.DIRECTOR.value})
_DIRECTOR_ONLY = frozenset({UserRole.DIRECTOR.value})


@dataclass(frozen=True)
class NavLink:
    href: str
    label: str
    roles: FrozenSet[str]

    def to_dict(self) -> Dict[str, str]:
        return {"href": self.href, "label": self.label}


NAV_LINKS: Tuple[NavLink, ...] = (
    NavLink("/", "Вернуться на сайт", _ALL_ROLES),
    NavLink("/admin/products", "Продукция", _CATALOG_ROLES),
    NavLink("/admin/packings", "Упаковки", _CATALOG_ROLES),
    NavLink("/admin/categories", "Категории", _CATALOG_ROLES),
    NavLink("/admin/users", "Пользователи", _DIRECTOR_ONLY),
    NavLink("/admin/orders", "Заявки", _ALL_ROLES),
    NavLink("/admin/questions", "Вопросы", _ALL_ROLES),
)


def roles_for_path(href: str) -> FrozenSet[str]:
    """메뉴 표에서 해당 경로에 허용된 역할을 찾습니다. 표에 없는 경로면 KeyError."""
    for link in NAV_LINKS:
        if link.href == href:
            return link.roles
    raise KeyError(href)


def filter_links(role: Optional[str]) -> List[NavLink]:
    """역할에 허용된 링크만 표 순서대로 반환합니다. 빈 역할이나 알 수 없는 역할은 빈 목록입니다."""
    if not role:
        return []
    return [link for link in NAV_LINKS if role in link.roles]


class AdminHeader:
    """
    관리자 헤더의 상태를 표현합니다.

    세션은 생성 시 명시적으로 전달받습니다. 모바일 메뉴는 닫힌 상태로 시작하며,
    모바일 링크를 따라가거나 로그아웃하면 닫힙니다.
    """

    def __init__(self, session: Optional[AdminSession]):
        self.session = session
        self.mobile_menu_open = False

    @property
    def role(self) -> str:
        return self.session.role if self.session else ""

    @property
    def links(self) -> List[NavLink]:
        return filter_links(self.role)

    @property
    def user_label(self) -> Optional[str]:
        if self.session is None:
            return None
        return f"{self.session.user.email} | {self.role}"

    def toggle_mobile_menu(self) -> bool:
        self.mobile_menu_open = not self.mobile_menu_open
        return self.mobile_menu_open

    def close_mobile_menu(self) -> None:
        self.mobile_menu_open = False

    def follow_mobile_link(self, href: str) -> str:
        self.close_mobile_menu()
        return href

    def sign_out(self) -> str:
        """
        세션을 무효화하고 이동할 경로(로그인 화면)를 돌려줍니다.
        쿠키 삭제는 HTTP 응답을 만드는 쪽에서 합니다.
        """
        self.session = None
        self.close_mobile_menu()
        return settings.LOGIN_PATH

    def to_dict(self) -> Dict[str, Any]:
        links = [link.to_dict() for link in self.links]
        return {
            "title": ADMIN_TITLE,
            "banner": ADMIN_BANNER,
            "user": self.user_label,
            "links": links,
            "desktop": links,
            "mobile": {
                "open": self.mobile_menu_open,
                "links": links if self.mobile_menu_open else [],
            },
        }
