"""FastAPI dependencies."""
from exambuilder.dependencies.auth import CurrentAdmin, get_current_admin

__all__ = ["CurrentAdmin", "get_current_admin"]
