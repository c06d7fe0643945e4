"""Authorization dependencies for FastAPI routes.

The acting principal's role arrives in the ``X-Role`` header; resolving that
role from a session or token is the job of whatever sits in front of the API.
"""
from __future__ import annotations

from typing import Callable, Optional

from fastapi import Depends, FastAPI, HTTPException, Request, Security
from fastapi.security import APIKeyHeader
from loguru import logger

from core.config import known_actions, load_registry, strict_mode
from core.metrics import REGISTERED_ROLES_GAUGE
from core.rbac import AuthorizationRegistry
from core.security import check_table_on_startup

role_header = APIKeyHeader(name="X-Role", auto_error=False)


def install_registry(app: FastAPI) -> AuthorizationRegistry:
    """Load the configured table, validate it and make it the one ``app`` serves."""
    registry = load_registry()
    check_table_on_startup(registry, strict=strict_mode(), known_actions=known_actions())
    app.state.authorization = registry
    REGISTERED_ROLES_GAUGE.set(len(registry))
    return registry


def get_registry(request: Request) -> AuthorizationRegistry:
    registry = getattr(request.app.state, "authorization", None)
    if registry is None:
        registry = install_registry(request.app)
    return registry


def require_action(action: str) -> Callable[..., str]:
    """Build a dependency that rejects requests whose role may not perform ``action``."""

    def dependency(
        role: Optional[str] = Security(role_header),
        registry: AuthorizationRegistry = Depends(get_registry),
    ) -> str:
        if not role:
            raise HTTPException(status_code=403, detail="Missing role")
        if registry.unable(role, action):
            logger.info(f"Denied role {role!r} on {action!r}")
            raise HTTPException(status_code=403, detail=f"Role not authorized on {action}")
        return role

    return dependency
