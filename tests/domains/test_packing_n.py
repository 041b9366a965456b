# tests/domains/test_packing_n.py

"""
'packing' 도메인 API 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.
"""

import pytest
from httpx import AsyncClient

from backoffice.domains.packing.crud import FORM_TYPE_NOT_FOUND, PACKING_MESSAGES as MSG

URL = "/api/admin/packings"


@pytest.mark.asyncio
async def test_create_packing_with_form_type(stmanager_client: AsyncClient, form_type):
    payload = {"name": "Банка 0.33", "form_type": form_type.id, "volume": "0.33 л"}
    response = await stmanager_client.post(URL, json=payload)
    assert response.status_code == 201

    rows = (await stmanager_client.get(URL)).json()["data"]
    assert rows[0]["name"] == "Банка 0.33"
    assert rows[0]["form_type"] == form_type.id
    assert rows[0]["volume"] == "0.33 л"


@pytest.mark.asyncio
async def test_create_packing_without_form_type(stmanager_client: AsyncClient):
    response = await stmanager_client.post(URL, json={"name": "Коробка"})
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_packing_description_stored_as_sent(stmanager_client: AsyncClient):
    response = await stmanager_client.post(URL, json={"name": "Пакет", "description": " дой-пак "})
    assert response.status_code == 201

    rows = (await stmanager_client.get(URL)).json()["data"]
    assert rows[0]["description"] == " дой-пак "


@pytest.mark.asyncio
async def test_create_packing_unknown_form_type(stmanager_client: AsyncClient):
    response = await stmanager_client.post(URL, json={"name": "Коробка", "form_type": 404})
    assert response.status_code == 400
    assert response.json()["error"] == FORM_TYPE_NOT_FOUND


@pytest.mark.asyncio
async def test_create_packing_blank_name(stmanager_client: AsyncClient, form_type):
    response = await stmanager_client.post(URL, json={"name": "  ", "form_type": form_type.id})
    assert response.status_code == 400
    assert response.json()["error"] == MSG.invalid_name


@pytest.mark.asyncio
async def test_update_packing_keeps_own_name(stmanager_client: AsyncClient, packing):
    response = await stmanager_client.put(
        f"{URL}?id={packing.id}",
        json={"name": packing.name, "form_type": packing.form_type, "volume": "0.6 л"},
    )
    assert response.status_code == 200

    rows = (await stmanager_client.get(URL)).json()["data"]
    assert rows[0]["volume"] == "0.6 л"


@pytest.mark.asyncio
async def test_update_packing_to_taken_name(stmanager_client: AsyncClient, packing):
    await stmanager_client.post(URL, json={"name": "Стекло 1.0"})
    response = await stmanager_client.put(f"{URL}?id={packing.id}", json={"name": "Стекло 1.0"})
    assert response.status_code == 400
    assert response.json()["error"] == MSG.duplicate


@pytest.mark.asyncio
async def test_packing_used_by_product_is_locked(stmanager_client: AsyncClient, packing, product_factory, db_session):
    product = await product_factory("Лимонад", packing=packing.id)

    response = await stmanager_client.delete(f"{URL}?id={packing.id}")
    assert response.status_code == 400
    assert response.json()["error"] == MSG.in_use_delete

    response = await stmanager_client.put(f"{URL}?id={packing.id}", json={"name": "Другая"})
    assert response.json()["error"] == MSG.in_use_edit

    await db_session.delete(product)
    await db_session.commit()
    response = await stmanager_client.delete(f"{URL}?id={packing.id}")
    assert response.status_code == 200
