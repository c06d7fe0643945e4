import json

from fastapi.testclient import TestClient

from api.server import app
from core.config import load_registry
from core.controller import AuthorizedController

ROLES = {
    "roles": [
        {"name": "admin", "actions": ["index", "show", "create", "update", "destroy"]},
        {"name": "user", "actions": ["index", "show"]},
    ]
}


def _write_config(tmp_path, monkeypatch):
    path = tmp_path / "roles.json"
    path.write_text(json.dumps(ROLES))
    monkeypatch.setenv("RBAC_CONFIG_PATH", str(path))
    monkeypatch.setenv("RBAC_STRICT", "true")
    return path


def test_api_serves_table_loaded_at_startup(tmp_path, monkeypatch):
    _write_config(tmp_path, monkeypatch)

    try:
        with TestClient(app) as client:
            assert client.get("/authorize", params={"role": "admin", "action": "create"}).json()["authorized"]
            assert not client.get("/authorize", params={"role": "admin", "action": "delete"}).json()["authorized"]
            assert not client.get("/authorize", params={"role": "user", "action": "create"}).json()["authorized"]
            assert not client.get("/authorize", params={"role": "guest", "action": "index"}).json()["authorized"]
            assert [r["role"] for r in client.get("/roles").json()] == ["admin", "user"]
    finally:
        del app.state.authorization


def test_controller_with_configured_registry(tmp_path, monkeypatch):
    _write_config(tmp_path, monkeypatch)

    class ArticlesController(AuthorizedController):
        authorization = load_registry()

    controller = ArticlesController()
    assert controller.admin_authorized_on("destroy")
    assert controller.able("user", "index")
    assert controller.unable("user", "update")
    assert controller.unable("guest", "index")
