from typing import List

from pydantic import BaseModel, Field


class RoleActions(BaseModel):
    role: str
    actions: List[str] = Field(default_factory=list, description="Sorted allowed actions")


class AuthorizationDecision(BaseModel):
    role: str
    action: str
    authorized: bool
