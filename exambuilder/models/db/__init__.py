"""Database models."""
from exambuilder.models.db.admin import Admin
from exambuilder.models.db.test import Test

__all__ = [
    "Admin",
    "Test",
]
