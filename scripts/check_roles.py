#!/usr/bin/env python3
# scripts/check_roles.py
"""Pre-commit hook to validate authorization table JSON files."""
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.config import load_config_file  # noqa: E402
from core.security import validate_authorization_table  # noqa: E402


def check_file(filepath: Path) -> tuple[bool, list[str]]:
    """Check a roles file parses and has no suspicious entries."""
    try:
        registry = load_config_file(filepath).build_registry()
    except (OSError, ValueError) as e:
        return False, [f"Could not load: {e}"]

    return validate_authorization_table(registry)


def main(paths: list[str]) -> int:
    failed = False
    for raw in paths:
        filepath = Path(raw)
        ok, issues = check_file(filepath)
        if not ok:
            failed = True
            print(f"❌ {filepath}:")
            for issue in issues:
                print(f"   {issue}")

    if failed:
        return 1

    print("✅ Authorization tables look good")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
