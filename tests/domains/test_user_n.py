# tests/domains/test_user_n.py

"""
'user' 도메인 API 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.
"""

import pytest
from httpx import AsyncClient

from backoffice.core.security import verify_password
from backoffice.domains.user import crud as user_crud
from backoffice.domains.user.crud import (
    CANNOT_DELETE_SELF,
    INVALID_EMAIL,
    INVALID_ROLE,
    PASSWORD_TOO_SHORT,
    USER_MESSAGES as MSG,
)

URL = "/api/admin/users"


@pytest.mark.asyncio
async def test_create_user_hashes_password(director_client: AsyncClient, db_session):
    payload = {"email": " new.manager@example.com ", "password": "secret-pass", "role": "manager", "name": "Олег"}
    response = await director_client.post(URL, json=payload)
    assert response.status_code == 201
    assert response.json()["message"] == MSG.created

    user = await user_crud.user.get_by_email(db_session, email="new.manager@example.com")
    assert user is not None
    assert user.password_hash != "secret-pass"
    assert verify_password("secret-pass", user.password_hash)


@pytest.mark.asyncio
async def test_list_users_never_exposes_password_hash(director_client: AsyncClient, user_factory):
    await user_factory("b@example.com")
    await user_factory("a@example.com", role="stmanager")

    rows = (await director_client.get(URL)).json()["data"]
    assert [row["email"] for row in rows] == ["a@example.com", "b@example.com"]
    assert all("password_hash" not in row and "password" not in row for row in rows)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload, error",
    [
        ({"password": "secret-pass"}, MSG.invalid_name),
        ({"email": "  ", "password": "secret-pass"}, MSG.invalid_name),
        ({"email": "not-an-email", "password": "secret-pass"}, INVALID_EMAIL),
        ({"email": "x@example.com", "password": "secret-pass", "role": "admin"}, INVALID_ROLE),
        ({"email": "x@example.com", "password": "short"}, PASSWORD_TOO_SHORT),
        ({"email": "x@example.com"}, PASSWORD_TOO_SHORT),
    ],
)
async def test_create_user_validation(director_client: AsyncClient, payload: dict, error: str):
    response = await director_client.post(URL, json=payload)
    assert response.status_code == 400
    assert response.json()["error"] == error


@pytest.mark.asyncio
async def test_create_duplicate_email(director_client: AsyncClient, user_factory):
    await user_factory("taken@example.com")
    response = await director_client.post(URL, json={"email": "taken@example.com", "password": "secret-pass"})
    assert response.status_code == 400
    assert response.json()["error"] == MSG.duplicate


@pytest.mark.asyncio
async def test_update_user_without_password_keeps_hash(director_client: AsyncClient, user_factory, db_session):
    user = await user_factory("keep@example.com", password="original-pass")
    response = await director_client.put(
        f"{URL}?id={user.id}", json={"email": "keep@example.com", "role": "stmanager"}
    )
    assert response.status_code == 200

    refreshed = await user_crud.user.get(db_session, user.id)
    assert refreshed.role == "stmanager"
    assert verify_password("original-pass", refreshed.password_hash)


@pytest.mark.asyncio
async def test_user_with_assigned_orders_is_locked(director_client: AsyncClient, user_factory, order_factory):
    user = await user_factory("busy@example.com")
    await order_factory(manager=user.id)

    response = await director_client.put(f"{URL}?id={user.id}", json={"email": "busy@example.com", "role": "director"})
    assert response.json()["error"] == MSG.in_use_edit

    response = await director_client.delete(f"{URL}?id={user.id}")
    assert response.status_code == 400
    assert response.json()["error"] == MSG.in_use_delete


@pytest.mark.asyncio
async def test_director_cannot_delete_self(director_client: AsyncClient, user_factory):
    me = await user_factory("director@example.com", role="director")
    response = await director_client.delete(f"{URL}?id={me.id}")
    assert response.status_code == 400
    assert response.json()["error"] == CANNOT_DELETE_SELF


@pytest.mark.asyncio
async def test_delete_other_user(director_client: AsyncClient, user_factory):
    other = await user_factory("other@example.com")
    response = await director_client.delete(f"{URL}?id={other.id}")
    assert response.status_code == 200
    assert (await director_client.get(URL)).json()["data"] == []


@pytest.mark.asyncio
async def test_users_are_director_only(stmanager_client: AsyncClient, manager_client: AsyncClient):
    assert (await stmanager_client.get(URL)).status_code == 403
    assert (await manager_client.get(URL)).status_code == 403
