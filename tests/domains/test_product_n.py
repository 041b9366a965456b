# tests/domains/test_product_n.py

"""
'product' 도메인 API 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.

- 외래 키(카테고리/형태 유형/포장) 존재 검증
- 가격 검증
- 주문에서 참조 중인 제품의 수정/삭제 차단
"""

import pytest
from httpx import AsyncClient

from backoffice.domains.product.crud import (
    CATEGORY_REQUIRED,
    FORM_TYPE_REQUIRED,
    NEGATIVE_PRICE,
    PACKING_NOT_FOUND,
    PRODUCT_MESSAGES as MSG,
)

URL = "/api/admin/products"


@pytest.fixture
def payload(category, form_type):
    return {
        "name": "Квас",
        "description": "Хлебный",
        "category": category.id,
        "form_type": form_type.id,
        "price": "99.90",
    }


@pytest.mark.asyncio
async def test_create_and_list_product(stmanager_client: AsyncClient, payload, packing):
    response = await stmanager_client.post(URL, json={**payload, "packing": packing.id})
    assert response.status_code == 201
    assert response.json()["message"] == MSG.created

    rows = (await stmanager_client.get(URL)).json()["data"]
    assert len(rows) == 1
    assert rows[0]["name"] == "Квас"
    assert rows[0]["packing"] == packing.id
    assert rows[0]["is_active"] is True


@pytest.mark.asyncio
async def test_create_product_requires_category(stmanager_client: AsyncClient, payload):
    response = await stmanager_client.post(URL, json={**payload, "category": None})
    assert response.status_code == 400
    assert response.json()["error"] == CATEGORY_REQUIRED

    response = await stmanager_client.post(URL, json={**payload, "category": 9999})
    assert response.json()["error"] == CATEGORY_REQUIRED


@pytest.mark.asyncio
async def test_create_product_requires_form_type(stmanager_client: AsyncClient, payload):
    response = await stmanager_client.post(URL, json={**payload, "form_type": 9999})
    assert response.status_code == 400
    assert response.json()["error"] == FORM_TYPE_REQUIRED


@pytest.mark.asyncio
async def test_create_product_unknown_packing(stmanager_client: AsyncClient, payload):
    response = await stmanager_client.post(URL, json={**payload, "packing": 9999})
    assert response.status_code == 400
    assert response.json()["error"] == PACKING_NOT_FOUND


@pytest.mark.asyncio
async def test_create_product_negative_price(stmanager_client: AsyncClient, payload):
    response = await stmanager_client.post(URL, json={**payload, "price": "-1"})
    assert response.status_code == 400
    assert response.json()["error"] == NEGATIVE_PRICE


@pytest.mark.asyncio
async def test_create_product_blank_name_checked_first(stmanager_client: AsyncClient):
    response = await stmanager_client.post(URL, json={"name": " ", "category": 9999, "price": "-5"})
    assert response.status_code == 400
    assert response.json()["error"] == MSG.invalid_name


@pytest.mark.asyncio
async def test_create_duplicate_product(stmanager_client: AsyncClient, payload, product_factory):
    await product_factory("Квас")
    response = await stmanager_client.post(URL, json=payload)
    assert response.status_code == 400
    assert response.json()["error"] == MSG.duplicate


@pytest.mark.asyncio
async def test_update_product_toggle_active(stmanager_client: AsyncClient, payload, product_factory):
    product = await product_factory("Квас")
    response = await stmanager_client.put(f"{URL}?id={product.id}", json={**payload, "is_active": False})
    assert response.status_code == 200

    rows = (await stmanager_client.get(URL)).json()["data"]
    assert rows[0]["is_active"] is False


@pytest.mark.asyncio
async def test_ordered_product_is_locked(stmanager_client: AsyncClient, payload, product_factory, order_factory):
    product = await product_factory("Квас")
    await order_factory(product=product.id)

    response = await stmanager_client.put(f"{URL}?id={product.id}", json={**payload, "description": "новое"})
    assert response.status_code == 400
    assert response.json()["error"] == MSG.in_use_edit

    response = await stmanager_client.delete(f"{URL}?id={product.id}")
    assert response.status_code == 400
    assert response.json()["error"] == MSG.in_use_delete


@pytest.mark.asyncio
async def test_products_hidden_from_manager(manager_client: AsyncClient):
    response = await manager_client.get(URL)
    assert response.status_code == 403
