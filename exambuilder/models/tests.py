"""Test and question Pydantic models."""
from pydantic import BaseModel, field_validator

from exambuilder.config import OPTION_LABELS


class TestCreate(BaseModel):
    """Model for creating a new test."""

    title: str
    description: str | None = None


class QuestionCreate(BaseModel):
    """Model for adding a single question to a test.

    Option texts are stored as given; only the correct answer is normalised.
    """

    questionText: str
    optionA: str
    optionB: str
    optionC: str
    optionD: str
    correctAnswer: str

    @field_validator("correctAnswer")
    @classmethod
    def normalize_correct_answer(cls, value: str) -> str:
        answer = value.upper()
        if answer not in OPTION_LABELS:
            raise ValueError("must be one of A, B, C, D")
        return answer

    def options(self) -> dict[str, str]:
        return {
            "A": self.optionA,
            "B": self.optionB,
            "C": self.optionC,
            "D": self.optionD,
        }


class UploadResponse(BaseModel):
    """Result of a CSV import."""

    message: str
    questionsCount: int
