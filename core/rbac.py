"""Static role-based access control: roles map to fixed sets of allowed actions."""
from __future__ import annotations

import threading
from enum import Enum
from functools import wraps
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Iterable, Mapping, Optional

from loguru import logger

from .metrics import AUTHORIZATION_CHECKS_COUNTER

PREDICATE_SUFFIX = "_authorized_on"


class AuthorizationDenied(PermissionError):
    """Raised only by enforcement helpers when a role may not perform an action."""

    def __init__(self, role: Any, action: Any):
        self.role = normalize_token(role)
        self.action = normalize_token(action)
        super().__init__(f"Role {self.role!r} is not authorized on {self.action!r}")


def normalize_token(token: Any) -> str:
    """Canonical string spelling of a role or action token."""
    if isinstance(token, Enum):
        token = token.value
    if isinstance(token, bytes):
        return token.decode("utf-8", errors="surrogateescape")
    if isinstance(token, str):
        return str.__str__(token)
    return str(token)


class AuthorizationRegistry:
    def __init__(self, roles: Optional[Mapping[Any, Iterable[Any]]] = None):
        self._lock = threading.Lock()
        self._table: Mapping[str, FrozenSet[str]] = MappingProxyType({})
        self._predicates: Dict[str, Callable[[Any], bool]] = {}
        for role, actions in (roles or {}).items():
            self.register_role(role, actions)

    # -------------------------
    # REGISTRATION
    # -------------------------
    def register_role(self, role: Any, actions: Optional[Iterable[Any]] = ()) -> None:
        """Insert or replace the action set for ``role``.

        An empty (or ``None``) action list is accepted: the role exists but is
        authorized on nothing. A single token counts as a one-action list.
        """
        name = normalize_token(role)
        if isinstance(actions, (str, bytes, Enum)):
            actions = (actions,)
        allowed = frozenset(normalize_token(a) for a in (actions or ()))

        with self._lock:
            table = dict(self._table)
            replaced = name in table
            table[name] = allowed
            self._table = MappingProxyType(table)
            self._predicates[name] = self._make_predicate(name)

        logger.debug(
            f"{'Replaced' if replaced else 'Registered'} role {name!r} "
            f"with actions {sorted(allowed)}"
        )

    def add_authorization(self, role: Any, *, on: Optional[Iterable[Any]] = None) -> None:
        self.register_role(role, on)

    def _make_predicate(self, role: str) -> Callable[[Any], bool]:
        def predicate(action: Any) -> bool:
            return self.able(role, action)

        predicate.__name__ = f"{role}{PREDICATE_SUFFIX}"
        return predicate

    # -------------------------
    # QUERIES
    # -------------------------
    def is_authorized(self, role: Any, action: Any) -> bool:
        allowed = self._table.get(normalize_token(role))
        if allowed is None:
            return False
        return normalize_token(action) in allowed

    def able(self, role: Any, action: Any) -> bool:
        result = self.is_authorized(role, action)
        AUTHORIZATION_CHECKS_COUNTER.labels(result="allowed" if result else "denied").inc()
        return result

    def unable(self, role: Any, action: Any) -> bool:
        return not self.able(role, action)

    def predicate(self, role: Any) -> Optional[Callable[[Any], bool]]:
        """Return the ``<role>_authorized_on`` callable, or None for unknown roles."""
        return self._predicates.get(normalize_token(role))

    def roles(self) -> FrozenSet[str]:
        return frozenset(self._table)

    def actions_for(self, role: Any) -> FrozenSet[str]:
        return self._table.get(normalize_token(role), frozenset())

    @property
    def table(self) -> Mapping[str, FrozenSet[str]]:
        return self._table

    def __contains__(self, role: Any) -> bool:
        return normalize_token(role) in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __getattr__(self, name: str) -> Callable[[Any], bool]:
        if name.endswith(PREDICATE_SUFFIX) and not name.startswith("_"):
            predicates = self.__dict__.get("_predicates", {})
            fn = predicates.get(name[: -len(PREDICATE_SUFFIX)])
            if fn is not None:
                return fn
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    # -------------------------
    # ENFORCEMENT
    # -------------------------
    def authorize(self, role: Any, action: Any) -> None:
        if self.unable(role, action):
            raise AuthorizationDenied(role, action)

    def require(self, role: Any, action: Any) -> Callable:
        def wrapper(fn: Callable) -> Callable:
            @wraps(fn)
            def inner(*args, **kwargs):
                self.authorize(role, action)
                return fn(*args, **kwargs)

            return inner

        return wrapper
