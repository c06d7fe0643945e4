"""Authorization table configuration loaded from the environment.

Sources, first match wins:
- ``RBAC_CONFIG_PATH``: JSON file shaped like ``AuthorizationConfig``
- ``RBAC_ROLES``: inline ``admin=index,show;user=index``

A ``.env`` file in the working directory is loaded first; real environment
variables take precedence over it.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from loguru import logger

from .rbac import AuthorizationRegistry
from .schemas import AuthorizationConfig, RoleDefinition


def _load_env_file() -> None:
    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path, override=False)


def parse_inline_roles(raw: str) -> AuthorizationConfig:
    roles: List[RoleDefinition] = []
    for entry in raw.split(";"):
        entry = entry.strip()
        if not entry:
            continue
        if "=" not in entry:
            raise ValueError(f"Invalid role entry {entry!r} (expected role=action,...)")
        name, _, actions = entry.partition("=")
        name = name.strip()
        if not name:
            raise ValueError(f"Invalid role entry {entry!r} (missing role name)")
        roles.append(
            RoleDefinition(
                name=name,
                actions=[a.strip() for a in actions.split(",") if a.strip()],
            )
        )
    return AuthorizationConfig(roles=roles)


def load_config_file(path: Path) -> AuthorizationConfig:
    if not path.exists():
        raise FileNotFoundError(f"Authorization config not found: {path}")
    return AuthorizationConfig.model_validate_json(path.read_text())


def load_config() -> AuthorizationConfig:
    _load_env_file()

    config_path = os.getenv("RBAC_CONFIG_PATH")
    if config_path:
        logger.info(f"Loading authorization table from {config_path}")
        return load_config_file(Path(config_path))

    inline = os.getenv("RBAC_ROLES")
    if inline:
        logger.info("Loading authorization table from RBAC_ROLES")
        return parse_inline_roles(inline)

    logger.warning("No authorization table configured; every check will be denied")
    return AuthorizationConfig()


def load_registry() -> AuthorizationRegistry:
    return load_config().build_registry()


def strict_mode() -> bool:
    return os.getenv("RBAC_STRICT", "false").lower() == "true"


def known_actions() -> Optional[List[str]]:
    raw = os.getenv("RBAC_KNOWN_ACTIONS")
    if not raw:
        return None
    return [a.strip() for a in raw.split(",") if a.strip()]
