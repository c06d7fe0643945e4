import sys

from loguru import logger

from core.config import load_registry


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 2:
        logger.error("Usage: python main.py <role> <action>")
        sys.exit(1)

    role, action = argv[0], argv[1]

    try:
        registry = load_registry()
    except (OSError, ValueError) as e:
        logger.critical(f"Could not load authorization table: {e}")
        sys.exit(1)

    logger.info(f"Loaded {len(registry)} roles")

    if registry.able(role, action):
        logger.success(f"{role} is able to {action}")
        sys.exit(0)

    if role not in registry:
        logger.warning(f"Role {role} is not registered")
    logger.error(f"{role} is unable to {action}")
    sys.exit(1)


if __name__ == "__main__":
    main()
