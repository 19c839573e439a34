"""Bulk question import from CSV files."""
import csv
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path

from sqlalchemy.orm import Session as DbSession

from exambuilder.config import CSV_CONTENT_TYPES, CSV_EXTENSION, OPTION_LABELS
from exambuilder.exceptions import BadRequestError
from exambuilder.services import test_service
from exambuilder.utils.file_utils import remove_file

logger = logging.getLogger(__name__)

# Preferred header first, alternate second
QUESTION_HEADERS = ("questionText", "question")
OPTION_HEADERS = {
    "A": ("option1", "optionA"),
    "B": ("option2", "optionB"),
    "C": ("option3", "optionC"),
    "D": ("option4", "optionD"),
}
ANSWER_HEADERS = ("correctAnswer", "correct")


class CsvParseError(BadRequestError):
    default_message = "Error parsing CSV file"


def is_csv_upload(filename: str | None, content_type: str | None) -> bool:
    """Accept by content type or by file extension."""
    if content_type and content_type.split(";")[0].strip().lower() in CSV_CONTENT_TYPES:
        return True
    return bool(filename) and filename.endswith(CSV_EXTENSION)


def _first_value(row: Mapping[str, str | None], headers: tuple[str, ...]) -> str:
    for header in headers:
        value = row.get(header)
        if value:
            return value
    return ""


def map_row(row: Mapping[str, str | None]) -> dict[str, object]:
    """Map a CSV row to question fields using the header fallbacks."""
    return {
        "questionText": _first_value(row, QUESTION_HEADERS),
        "options": {
            label: _first_value(row, headers) for label, headers in OPTION_HEADERS.items()
        },
        "correctAnswer": _first_value(row, ANSWER_HEADERS),
    }


def is_valid_question(fields: Mapping[str, object]) -> bool:
    """Question text, all four options and a correct label A-D are required."""
    options = fields["options"]
    return (
        bool(fields["questionText"])
        and all(options[label] for label in OPTION_LABELS)
        and fields["correctAnswer"].upper() in OPTION_LABELS
    )


def iter_csv_questions(path: Path) -> Iterator[dict[str, object]]:
    """Stream rows from a CSV file, yielding only valid question fields.

    Raises:
        CsvParseError: the file cannot be decoded or parsed.
    """
    kept = skipped = 0
    try:
        with path.open("r", encoding="utf-8-sig", newline="") as handle:
            for row in csv.DictReader(handle):
                fields = map_row(row)
                if not is_valid_question(fields):
                    skipped += 1
                    continue
                fields["correctAnswer"] = fields["correctAnswer"].upper()
                kept += 1
                yield fields
    except (csv.Error, UnicodeDecodeError) as e:
        logger.warning(f"CSV parse error in {path.name}: {e}")
        raise CsvParseError()

    logger.info(f"Parsed {path.name}: {kept} rows kept, {skipped} rows skipped")


def import_questions(db: DbSession, admin_id: str, test_id: str, path: Path) -> int:
    """Import questions from a stored upload into an owned test.

    All rows are parsed before anything is written, and the batch is
    appended in one transaction. The upload file is removed afterwards
    whatever the outcome.

    Returns:
        Number of imported questions.
    """
    try:
        test = test_service.get_test(db, admin_id, test_id)
        questions = [
            test_service.build_question(
                fields["questionText"], fields["options"], fields["correctAnswer"]
            )
            for fields in iter_csv_questions(path)
        ]
        count = test_service.append_questions(db, test, questions)
    finally:
        remove_file(path)

    logger.info(f"Imported {count} questions into test {test_id}")
    return count
