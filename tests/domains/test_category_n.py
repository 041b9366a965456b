# tests/domains/test_category_n.py

"""
'category' 도메인 API 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.
"""

import pytest
from httpx import AsyncClient

from backoffice.domains.category.crud import CATEGORY_MESSAGES as MSG

URL = "/api/admin/categories"


@pytest.mark.asyncio
async def test_category_crud_flow(director_client: AsyncClient):
    response = await director_client.post(URL, json={"name": " Соки ", "description": "  "})
    assert response.status_code == 201
    assert response.json()["message"] == MSG.created

    response = await director_client.get(URL)
    rows = response.json()["data"]
    assert rows == [{"id": rows[0]["id"], "name": "Соки", "description": "  "}]
    category_id = rows[0]["id"]

    # 이름은 그대로, 설명만 변경하는 수정은 허용됩니다.
    response = await director_client.put(f"{URL}?id={category_id}", json={"name": "Соки", "description": "100%"})
    assert response.status_code == 200
    assert response.json()["message"] == MSG.updated

    response = await director_client.get(URL)
    assert response.json()["data"][0]["description"] == "100%"

    response = await director_client.delete(f"{URL}?id={category_id}")
    assert response.status_code == 200
    assert (await director_client.get(URL)).json()["data"] == []


@pytest.mark.asyncio
async def test_create_category_blank_name_ignores_other_fields(director_client: AsyncClient):
    response = await director_client.post(URL, json={"name": "\t ", "description": "Описание"})
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": MSG.invalid_name}


@pytest.mark.asyncio
async def test_create_duplicate_category(director_client: AsyncClient, category):
    response = await director_client.post(URL, json={"name": f"  {category.name}"})
    assert response.status_code == 400
    assert response.json()["error"] == MSG.duplicate


@pytest.mark.asyncio
async def test_list_categories_sorted(director_client: AsyncClient):
    for name in ["Чай", "Вода", "Кофе"]:
        await director_client.post(URL, json={"name": name})
    response = await director_client.get(URL)
    assert [row["name"] for row in response.json()["data"]] == ["Вода", "Кофе", "Чай"]


@pytest.mark.asyncio
async def test_referenced_category_is_locked(director_client: AsyncClient, category, product_factory):
    await product_factory("Морс клюквенный")

    response = await director_client.put(f"{URL}?id={category.id}", json={"name": "Другое"})
    assert response.status_code == 400
    assert response.json()["error"] == MSG.in_use_edit

    response = await director_client.delete(f"{URL}?id={category.id}")
    assert response.status_code == 400
    assert response.json()["error"] == MSG.in_use_delete


@pytest.mark.asyncio
async def test_update_checks_existence_before_duplicate(director_client: AsyncClient, category):
    response = await director_client.put(f"{URL}?id=12345", json={"name": category.name})
    assert response.status_code == 404
    assert response.json()["error"] == MSG.not_found


@pytest.mark.asyncio
async def test_categories_role_access(manager_client: AsyncClient, stmanager_client: AsyncClient):
    assert (await manager_client.post(URL, json={"name": "Чай"})).status_code == 403
    assert (await stmanager_client.post(URL, json={"name": "Чай"})).status_code == 201
