# -*- coding: utf-8 -*-
import app.routes.health_routes as health_mod


async def test_health_reports_database(async_client, monkeypatch):
    async def _ok(timeout_s: float = 2.0) -> bool:
        return True

    monkeypatch.setattr(health_mod, "check_database_health", _ok)

    r = await async_client.get("/health")

    body = r.json()
    assert r.status_code == 200
    assert body["status"] == "ok"
    assert body["database"] == {"reachable": True}
    assert body["environment"] == "test"


async def test_health_degraded_when_database_unreachable(async_client, monkeypatch):
    async def _down(timeout_s: float = 2.0) -> bool:
        return False

    monkeypatch.setattr(health_mod, "check_database_health", _down)

    r = await async_client.get("/health")

    assert r.json()["status"] == "degraded"


async def test_unhandled_errors_become_json_500(app, async_client, monkeypatch):
    from app.modules.projects.routes import deps

    class _Boom:
        async def find_by_id(self, project_id):
            raise RuntimeError("boom")

    app.dependency_overrides[deps.get_projects_query_service] = lambda: _Boom()

    r = await async_client.get("/projects/1", headers={"X-Request-ID": "req-123"})

    assert r.status_code == 500
    assert r.json()["detail"] == {
        "error_code": "INTERNAL_SERVER_ERROR",
        "message": "Internal server error",
        "request_id": "req-123",
    }


def test_public_routers_are_mounted():
    from app.routes.master_routes import loaded_routers

    assert loaded_routers() == ["/:projects", "/:comments"]
