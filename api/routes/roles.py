"""Read-only view of the authorization table."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from api.middleware.auth import get_registry
from api.schemas import AuthorizationDecision, RoleActions
from core.rbac import AuthorizationRegistry, normalize_token

router = APIRouter()


@router.get("/roles", response_model=List[RoleActions])
def list_roles(registry: AuthorizationRegistry = Depends(get_registry)):
    return [
        RoleActions(role=role, actions=sorted(actions))
        for role, actions in sorted(registry.table.items())
    ]


@router.get("/roles/{role}", response_model=RoleActions)
def get_role(role: str, registry: AuthorizationRegistry = Depends(get_registry)):
    if role not in registry:
        raise HTTPException(status_code=404, detail="Role not registered")
    return RoleActions(role=role, actions=sorted(registry.actions_for(role)))


@router.get("/authorize", response_model=AuthorizationDecision)
def authorize(role: str, action: str, registry: AuthorizationRegistry = Depends(get_registry)):
    """Answer a single role/action query; unknown roles are a normal ``False``."""
    return AuthorizationDecision(
        role=normalize_token(role),
        action=normalize_token(action),
        authorized=registry.able(role, action),
    )
