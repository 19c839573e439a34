"""Bulk CSV upload endpoint."""
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session as DbSession

from exambuilder.database import get_db
from exambuilder.dependencies.auth import CurrentAdmin
from exambuilder.exceptions import BadRequestError
from exambuilder.models import UploadResponse
from exambuilder.services import csv_import_service
from exambuilder.utils import save_upload_file, uploads_dir

router = APIRouter(prefix="/api/tests/{test_id}", tags=["uploads"])


@router.post("/upload-csv", response_model=UploadResponse)
def upload_csv(
    test_id: str,
    current_admin: CurrentAdmin,
    db: Annotated[DbSession, Depends(get_db)],
    csv_file: UploadFile | None = File(None, alias="csvFile"),
) -> UploadResponse:
    """Import questions from an uploaded CSV file."""
    if csv_file is None:
        raise BadRequestError("No file uploaded")
    if not csv_import_service.is_csv_upload(csv_file.filename, csv_file.content_type):
        raise BadRequestError("Only CSV files are allowed")

    saved_path = save_upload_file(csv_file, uploads_dir())
    count = csv_import_service.import_questions(db, current_admin.id, test_id, saved_path)
    return UploadResponse(
        message=f"{count} questions uploaded successfully",
        questionsCount=count,
    )
