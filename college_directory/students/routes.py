"""FastAPI routes for students."""
import json
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session

from college_directory.db import get_db
from college_directory.metrics import (
    LISTING_REQUESTS,
    REGISTRATION_REQUESTS,
    REGISTRATION_SUCCESSES,
)
from college_directory.students.service import StudentService
from college_directory.students.schemas import (
    REQUIRED_FIELDS,
    ErrorResponse,
    RegistrationResponse,
    StudentListResponse,
    StudentRegistration,
)

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

router = APIRouter(prefix="/api", tags=["students"])


async def read_registration(request: Request) -> StudentRegistration:
    """
    Parse a registration from a JSON or form body.

    Bodies with any other content type are read as empty, so every field
    is then reported missing.
    """
    # counted before parsing so rejected bodies show up too
    REGISTRATION_REQUESTS.inc()
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_TYPES):
        payload = dict(await request.form())
    elif content_type.startswith("application/json"):
        body = await request.body()
        try:
            payload = json.loads(body) if body.strip() else {}
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid JSON body")
    else:
        payload = {}

    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Request body must be an object")

    try:
        return StudentRegistration.model_validate(payload)
    except ValidationError as e:
        invalid = {str(err["loc"][0]) for err in e.errors() if err["loc"]}
        fields = [field for field in REQUIRED_FIELDS if field in invalid]
        raise HTTPException(
            status_code=400, detail=f"Invalid fields: {', '.join(fields)}"
        )


@router.post(
    "/register",
    response_model=RegistrationResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def register_student(
    student_data: StudentRegistration = Depends(read_registration),
    db: Session = Depends(get_db),
):
    """Register a student and assign the next registration number."""
    service = StudentService(db)
    student = service.register_student(student_data)
    REGISTRATION_SUCCESSES.inc()
    return RegistrationResponse(student=student)


@router.get(
    "/students",
    response_model=StudentListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def get_students(
    department: Optional[str] = Query(None, description="Exact department name"),
    db: Session = Depends(get_db),
):
    """List students, most recently registered first."""
    LISTING_REQUESTS.inc()
    service = StudentService(db)
    return StudentListResponse(students=service.get_students(department=department))
