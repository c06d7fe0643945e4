# tests/conftest.py
import sys
from pathlib import Path

import httpx
import pytest
from httpx import AsyncClient as _orig_AsyncClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.rbac import AuthorizationRegistry  # noqa: E402

# ---------------------------------------------------------------------------
# Custom AsyncClient wrapper
# ---------------------------------------------------------------------------
ASGITransport = getattr(httpx, "ASGITransport", None)


class AsyncClient(_orig_AsyncClient):
    """
    A compatibility shim that injects ASGITransport(app=...) automatically
    when tests pass `app=...` to AsyncClient.
    """

    def __init__(self, *args, app=None, **kwargs):
        if app is not None and ASGITransport is not None and "transport" not in kwargs:
            kwargs["transport"] = ASGITransport(app=app)
        super().__init__(*args, **kwargs)


@pytest.fixture(autouse=True)
def patch_httpx_async_client(monkeypatch):
    monkeypatch.setattr(httpx, "AsyncClient", AsyncClient)
    yield


# ---------------------------------------------------------------------------
# Keep the environment from leaking configuration into tests
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def clean_rbac_env(monkeypatch, tmp_path):
    for var in ("RBAC_CONFIG_PATH", "RBAC_ROLES", "RBAC_STRICT", "RBAC_KNOWN_ACTIONS"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def registry():
    r = AuthorizationRegistry()
    r.register_role("admin", ["index", "show", "create", "update", "destroy"])
    r.register_role("user", ["index", "show"])
    return r
