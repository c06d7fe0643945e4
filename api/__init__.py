# api/__init__.py
from . import server  # re-export for convenience

__all__ = ["server"]
