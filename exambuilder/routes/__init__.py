"""API route modules."""
from exambuilder.routes import auth, questions, tests, uploads

__all__ = ["auth", "questions", "tests", "uploads"]
