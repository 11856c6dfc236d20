# -*- coding: utf-8 -*-
"""
backend/tests/modules/projects/routes/test_projects_routes.py

Rutas de Projects de punta a punta: app real, JWT reales, SQLite en memoria
y storage en memoria.
"""
import json

import pytest

OWNER = 11
STRANGER = 22


def _project_form(**overrides):
    payload = {
        "title": "App de voluntariado",
        "tech_stack": "Python, FastAPI",
        "recruits": [
            {"position": "Backend", "current_count": 0, "target_count": 2},
            {"position": "Frontend", "current_count": 0, "target_count": 1},
        ],
    }
    payload.update(overrides)
    return {"project": json.dumps(payload)}


async def _create(client, headers, files=None, **overrides) -> int:
    r = await client.post("/projects", data=_project_form(**overrides), files=files, headers=headers)
    assert r.status_code == 201, r.text
    mine = await client.get("/projects/mine", headers=headers)
    return mine.json()["data"][0]["project_id"]


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------
async def test_create_requires_token(async_client):
    r = await async_client.post("/projects", data=_project_form())
    assert r.status_code == 401
    assert r.headers["WWW-Authenticate"] == "Bearer"


async def test_create_rejects_invalid_token(async_client):
    r = await async_client.post(
        "/projects", data=_project_form(), headers={"Authorization": "Bearer no-es-un-jwt"}
    )
    assert r.status_code == 401
    assert r.json()["detail"]["error"] == "invalid_token"


async def test_create_returns_saved_message(async_client, auth_headers):
    r = await async_client.post("/projects", data=_project_form(), headers=auth_headers(OWNER))

    assert r.status_code == 201, r.text
    assert r.json() == {"result": "success", "data": "Proyecto guardado"}
    assert r.headers["content-type"].startswith("application/json")


async def test_create_with_malformed_json_is_400(async_client, auth_headers, storage):
    r = await async_client.post(
        "/projects", data={"project": "{no es json"}, headers=auth_headers(OWNER)
    )
    assert r.status_code == 400
    assert r.json() == {"detail": "El campo project no es JSON válido"}
    assert storage.uploads == []


async def test_create_with_invalid_payload_is_422(async_client, auth_headers, storage):
    form = _project_form(recruits=[{"position": "Backend", "current_count": 5, "target_count": 1}])
    r = await async_client.post(
        "/projects",
        data=form,
        files={"file": ("plan.pdf", b"%PDF", "application/pdf")},
        headers=auth_headers(OWNER),
    )
    assert r.status_code == 422
    assert storage.uploads == []


async def test_create_with_file(async_client, auth_headers, storage):
    headers = auth_headers(OWNER)
    pid = await _create(async_client, headers, files={"file": ("Plan final.pdf", b"%PDF", "application/pdf")})

    detail = (await async_client.get(f"/projects/{pid}")).json()["data"]
    assert detail["file_url"] == storage.uploads[0]
    assert detail["file_url"].endswith("/Plan-final.pdf")


async def test_create_with_empty_file_is_treated_as_no_file(async_client, auth_headers, storage):
    headers = auth_headers(OWNER)
    pid = await _create(async_client, headers, files={"file": ("vacio.pdf", b"", "application/pdf")})

    detail = (await async_client.get(f"/projects/{pid}")).json()["data"]
    assert detail["file_url"] == ""
    assert storage.uploads == []


async def test_create_rejects_oversized_file(async_client, auth_headers, storage, monkeypatch):
    from app.shared.config import get_settings

    monkeypatch.setattr(get_settings(), "max_file_size_mb", 0)
    r = await async_client.post(
        "/projects",
        data=_project_form(),
        files={"file": ("big.bin", b"x", "application/octet-stream")},
        headers=auth_headers(OWNER),
    )
    assert r.status_code == 413
    assert storage.uploads == []


async def test_create_storage_failure_is_502(async_client, auth_headers, storage):
    storage.fail_next_upload = True
    r = await async_client.post(
        "/projects",
        data=_project_form(),
        files={"file": ("plan.pdf", b"%PDF", "application/pdf")},
        headers=auth_headers(OWNER),
    )
    assert r.status_code == 502
    listing = (await async_client.get("/projects")).json()
    assert listing["total_elements"] == 0


# ---------------------------------------------------------------------------
# detail / listados
# ---------------------------------------------------------------------------
async def test_detail_increments_views_and_returns_recruits(async_client, auth_headers):
    pid = await _create(async_client, auth_headers(OWNER))

    await async_client.get(f"/projects/{pid}")
    r = await async_client.get(f"/projects/{pid}")

    assert r.status_code == 200
    data = r.json()["data"]
    assert data["view_count"] == 2
    assert data["position"] == "Backend, Frontend"
    assert [rec["position"] for rec in data["recruits"]] == ["Backend", "Frontend"]
    assert data["recruitment"] == "OPEN"


async def test_detail_missing_is_404(async_client):
    r = await async_client.get("/projects/9999")
    assert r.status_code == 404
    assert r.json() == {"detail": "Proyecto no encontrado"}


async def test_list_is_public_and_marks_recent(async_client, auth_headers):
    await _create(async_client, auth_headers(OWNER), title="Uno")
    await _create(async_client, auth_headers(OWNER), title="Dos")

    r = await async_client.get("/projects", params={"page": 0, "size": 1})

    body = r.json()
    assert r.status_code == 200
    assert body["result"] == "success"
    assert body["total_elements"] == 2
    assert body["total_pages"] == 2
    assert len(body["data"]) == 1
    assert body["data"][0]["recent"] is True


async def test_list_filters_by_keyword(async_client, auth_headers):
    await _create(async_client, auth_headers(OWNER), title="Bot de Discord")
    await _create(async_client, auth_headers(OWNER), title="Tienda")

    r = await async_client.get("/projects", params={"keyword": "bot"})

    assert [p["title"] for p in r.json()["data"]] == ["Bot de Discord"]


async def test_hot_list(async_client, auth_headers):
    pid = await _create(async_client, auth_headers(OWNER), title="Popular")
    await _create(async_client, auth_headers(OWNER), title="Tranquilo")
    await async_client.get(f"/projects/{pid}")

    r = await async_client.get("/projects/hot", params={"size": 1})

    assert r.status_code == 200
    assert [p["title"] for p in r.json()["data"]] == ["Popular"]


async def test_mine_and_favorites_require_token(async_client):
    assert (await async_client.get("/projects/mine")).status_code == 401
    assert (await async_client.get("/projects/favorites")).status_code == 401


async def test_favorites_flow(async_client, auth_headers):
    pid = await _create(async_client, auth_headers(OWNER))
    fan = auth_headers(STRANGER)

    first = await async_client.post(f"/projects/{pid}/favorite", headers=fan)
    again = await async_client.post(f"/projects/{pid}/favorite", headers=fan)
    listing = await async_client.get("/projects/favorites", headers=fan)

    assert first.json()["data"] is True
    assert again.json()["data"] is False
    assert [p["project_id"] for p in listing.json()["data"]] == [pid]

    removed = await async_client.delete(f"/projects/{pid}/favorite", headers=fan)
    assert removed.json()["data"] is True
    assert (await async_client.get("/projects/favorites", headers=fan)).json()["data"] == []


async def test_favorite_missing_project_is_404(async_client, auth_headers):
    r = await async_client.post("/projects/777/favorite", headers=auth_headers(STRANGER))
    assert r.status_code == 404


# ---------------------------------------------------------------------------
# update / delete / recruitment
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("method", ["PUT", "PATCH"])
async def test_update_by_owner(async_client, auth_headers, method):
    headers = auth_headers(OWNER)
    pid = await _create(async_client, headers)

    r = await async_client.request(
        method,
        f"/projects/{pid}",
        data=_project_form(title="Renombrado", recruits=[{"position": "QA", "target_count": 1}]),
        headers=headers,
    )

    assert r.status_code == 200, r.text
    assert r.json()["data"] == "Proyecto actualizado"
    detail = (await async_client.get(f"/projects/{pid}")).json()["data"]
    assert detail["title"] == "Renombrado"
    assert detail["position"] == "QA"


async def test_update_by_stranger_is_403(async_client, auth_headers):
    pid = await _create(async_client, auth_headers(OWNER))

    r = await async_client.put(
        f"/projects/{pid}", data=_project_form(title="Hackeado"), headers=auth_headers(STRANGER)
    )

    assert r.status_code == 403
    assert r.json() == {"detail": "No eres el autor del proyecto"}
    detail = (await async_client.get(f"/projects/{pid}")).json()["data"]
    assert detail["title"] == "App de voluntariado"


async def test_update_replaces_file(async_client, auth_headers, storage):
    headers = auth_headers(OWNER)
    pid = await _create(async_client, headers, files={"file": ("v1.pdf", b"1", "application/pdf")})
    old_url = storage.uploads[0]

    r = await async_client.put(
        f"/projects/{pid}",
        data=_project_form(),
        files={"file": ("v2.pdf", b"2", "application/pdf")},
        headers=headers,
    )

    assert r.status_code == 200
    assert not storage.has(old_url)
    assert storage.has(storage.uploads[-1])


async def test_delete_by_stranger_is_404_and_keeps_project(async_client, auth_headers):
    pid = await _create(async_client, auth_headers(OWNER))

    r = await async_client.delete(f"/projects/{pid}", headers=auth_headers(STRANGER))

    assert r.status_code == 404
    assert (await async_client.get(f"/projects/{pid}")).status_code == 200


async def test_delete_by_owner(async_client, auth_headers, storage):
    headers = auth_headers(OWNER)
    pid = await _create(async_client, headers, files={"file": ("v1.pdf", b"1", "application/pdf")})

    r = await async_client.delete(f"/projects/{pid}", headers=headers)

    assert r.status_code == 200
    assert r.json()["data"] == "Proyecto eliminado"
    assert (await async_client.get(f"/projects/{pid}")).status_code == 404
    assert not storage.has(storage.uploads[0])


async def test_change_recruitment(async_client, auth_headers):
    headers = auth_headers(OWNER)
    pid = await _create(async_client, headers)

    r = await async_client.patch(f"/projects/{pid}/recruitment", json={"recruitment": "CLOSED"}, headers=headers)
    denied = await async_client.patch(
        f"/projects/{pid}/recruitment", json={"recruitment": "OPEN"}, headers=auth_headers(STRANGER)
    )

    assert r.status_code == 200
    assert r.json()["data"] == "CLOSED"
    assert denied.status_code == 403
    hot = (await async_client.get("/projects/hot")).json()["data"]
    assert hot == []


async def test_delete_missing_and_foreign_project_look_the_same(async_client, auth_headers):
    pid = await _create(async_client, auth_headers(OWNER))

    foreign = await async_client.delete(f"/projects/{pid}", headers=auth_headers(STRANGER))
    missing = await async_client.delete("/projects/987654", headers=auth_headers(STRANGER))

    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json() == {"detail": "Proyecto no encontrado"}


# ---------------------------------------------------------------------------
# storage sin credenciales
# ---------------------------------------------------------------------------
@pytest.fixture
def unconfigured_storage(app, monkeypatch):
    """Usa el storage real de la app sin credenciales de Supabase."""
    from app.shared.config import get_settings
    from app.shared.storage import get_object_storage

    monkeypatch.setattr(get_settings(), "supabase_url", None)
    monkeypatch.setattr(get_settings(), "supabase_service_role_key", None)
    app.dependency_overrides.pop(get_object_storage, None)


async def test_file_less_commands_work_without_storage_credentials(
    async_client, auth_headers, unconfigured_storage
):
    headers = auth_headers(OWNER)
    pid = await _create(async_client, headers)

    favorite = await async_client.post(f"/projects/{pid}/favorite", headers=auth_headers(STRANGER))
    unfavorite = await async_client.delete(f"/projects/{pid}/favorite", headers=auth_headers(STRANGER))
    recruitment = await async_client.patch(
        f"/projects/{pid}/recruitment", json={"recruitment": "CLOSED"}, headers=headers
    )
    updated = await async_client.put(f"/projects/{pid}", data=_project_form(title="Sin archivo"), headers=headers)
    deleted = await async_client.delete(f"/projects/{pid}", headers=headers)

    assert favorite.status_code == 200
    assert unfavorite.status_code == 200
    assert recruitment.status_code == 200
    assert updated.status_code == 200
    assert deleted.status_code == 200


async def test_upload_without_storage_credentials_is_502(async_client, auth_headers, unconfigured_storage):
    r = await async_client.post(
        "/projects",
        data=_project_form(),
        files={"file": ("plan.pdf", b"%PDF", "application/pdf")},
        headers=auth_headers(OWNER),
    )

    assert r.status_code == 502
    assert (await async_client.get("/projects")).json()["total_elements"] == 0
