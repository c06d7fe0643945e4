from typing import List

from pydantic import BaseModel, Field, field_validator

from .rbac import AuthorizationRegistry, normalize_token


class RoleDefinition(BaseModel):
    name: str
    actions: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("role name must not be empty")
        return normalize_token(v)

    @field_validator("actions")
    @classmethod
    def canonical_actions(cls, v: List[str]) -> List[str]:
        return [normalize_token(a) for a in v]


class AuthorizationConfig(BaseModel):
    roles: List[RoleDefinition] = Field(default_factory=list)

    def build_registry(self) -> AuthorizationRegistry:
        registry = AuthorizationRegistry()
        for role in self.roles:
            registry.register_role(role.name, role.actions)
        return registry
