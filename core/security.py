# core/security.py
"""Sanity checks for an authorization table before it starts serving requests."""
import logging
from typing import Iterable, List, Optional, Tuple

from .rbac import AuthorizationRegistry, normalize_token

logger = logging.getLogger(__name__)


def validate_authorization_table(
    registry: AuthorizationRegistry, known_actions: Optional[Iterable[str]] = None
) -> Tuple[bool, List[str]]:
    """
    Report suspicious entries in an authorization table.

    Registration is permissive, so nothing here is an error for the registry
    itself; these are hints for whoever wrote the configuration.

    Args:
        registry: The populated registry to inspect
        known_actions: Optional vocabulary of actions handlers actually expose

    Returns:
        Tuple of (is_valid, list_of_issues)
    """
    issues = []
    vocabulary = (
        None if known_actions is None else {normalize_token(a) for a in known_actions}
    )

    if len(registry) == 0:
        issues.append("No roles registered (every check will be denied)")

    for role in sorted(registry.roles()):
        actions = registry.actions_for(role)

        # Role registered but authorized on nothing
        if not actions:
            issues.append(f"Role {role!r} has an empty action set")
            continue

        if vocabulary is not None:
            unknown = sorted(actions - vocabulary)
            if unknown:
                issues.append(f"Role {role!r} references unknown actions: {unknown}")

    return len(issues) == 0, issues


def check_table_on_startup(
    registry: AuthorizationRegistry,
    strict: bool = False,
    known_actions: Optional[Iterable[str]] = None,
) -> None:
    """
    Validate the table on application startup and log warnings.

    Args:
        registry: The registry the application will serve from
        strict: If True, raise exception on validation failure
        known_actions: Optional vocabulary of actions

    Raises:
        ValueError: If strict=True and validation fails
    """
    from loguru import logger as loguru_logger

    is_valid, issues = validate_authorization_table(registry, known_actions)

    if not is_valid:
        header = "AUTHORIZATION TABLE VALIDATION FAILED"
        logger.warning(header)
        loguru_logger.warning(header)
        for issue in issues:
            logger.warning(f"  - {issue}")
            loguru_logger.warning(f"  - {issue}")

        if strict:
            raise ValueError(
                f"Authorization table validation failed: {len(issues)} issue(s) found."
            )
    else:
        loguru_logger.info(f"Authorization table OK ({len(registry)} roles)")
