"""Host type for request handlers that declare their authorization table up front.

Roles are declared once on the class body and shared by every instance::

    class ArticlesController(AuthorizedController):
        pass

    ArticlesController.add_authorization("admin", on=["index", "show", "create"])
    ArticlesController.add_authorization("user", on=["index", "show"])

    ArticlesController().able("user", "index")   # True
    ArticlesController().user_authorized_on("create")   # False

An instance can be handed its own registry instead, which keeps tests isolated.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional

from .rbac import PREDICATE_SUFFIX, AuthorizationRegistry


class AuthorizedController:
    authorization: AuthorizationRegistry = AuthorizationRegistry()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # subclasses never share a table with their parent unless they ask to
        if "authorization" not in cls.__dict__:
            cls.authorization = AuthorizationRegistry()

    def __init__(self, authorization: Optional[AuthorizationRegistry] = None):
        if authorization is not None:
            self.authorization = authorization

    @classmethod
    def add_authorization(cls, role: Any, *, on: Optional[Iterable[Any]] = None) -> None:
        cls.authorization.add_authorization(role, on=on)

    def able(self, role: Any, action: Any) -> bool:
        return self.authorization.able(role, action)

    def unable(self, role: Any, action: Any) -> bool:
        return self.authorization.unable(role, action)

    def authorize(self, role: Any, action: Any) -> None:
        self.authorization.authorize(role, action)

    def __getattr__(self, name: str):
        if name.endswith(PREDICATE_SUFFIX):
            return getattr(self.authorization, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
