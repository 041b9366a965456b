# tests/test_main.py

"""
FastAPI 애플리케이션의 메인 엔드포인트와 공통 응답 봉투에 대한 통합 테스트를 정의하는 모듈입니다.

- 루트 경로 (`/`), 헬스 체크 (`/health-check`)
- 라우팅/본문 오류의 봉투 변환
- 저장소 오류의 500 변환
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from backoffice.core.responses import INVALID_REQUEST_BODY
from backoffice.domains.category import crud as category_crud


@pytest.mark.asyncio
async def test_read_root(anon_client: AsyncClient):
    response = await anon_client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert "/docs" in body["message"]


@pytest.mark.asyncio
async def test_health_check(anon_client: AsyncClient):
    response = await anon_client.get("/health-check")
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": {"status": "ok", "database_connection": "successful"}}


@pytest.mark.asyncio
async def test_unknown_route_is_enveloped(anon_client: AsyncClient):
    response = await anon_client.get("/api/admin/unknown")
    assert response.status_code == 404
    assert response.json()["success"] is False
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_malformed_json_body_is_400(director_client: AsyncClient):
    response = await director_client.post(
        "/api/admin/categories",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": INVALID_REQUEST_BODY}


@pytest.mark.asyncio
async def test_store_failure_is_generic_500(director_client: AsyncClient, monkeypatch):
    async def broken_get_multi(db):
        raise OperationalError("SELECT", {}, Exception("database is gone"))

    monkeypatch.setattr(category_crud.category, "get_multi", broken_get_multi)
    response = await director_client.get("/api/admin/categories")
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": category_crud.CATEGORY_MESSAGES.list_failed}
