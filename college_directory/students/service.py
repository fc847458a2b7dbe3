"""Business logic for students."""

import logging
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy import text
from sqlalchemy.orm import Session

from college_directory.students.registration_number import generate_registration_number
from college_directory.students.schemas import REQUIRED_FIELDS, StudentRegistration

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal Server Error"


class StudentService:
    """Service class for student operations."""

    def __init__(self, db: Session):
        self.db = db

    def get_students(self, department: Optional[str] = None) -> List[dict]:
        """Get every student, newest first, optionally for one department."""
        where_clause = ""
        params = {}

        if department:
            where_clause = "WHERE department = :department"
            params["department"] = department

        try:
            students = self.db.execute(
                text(
                    f"""
                    SELECT id, reg_no, name, email, department, address, division
                    FROM students
                    {where_clause}
                    ORDER BY id DESC
                    """
                ),
                params,
            ).fetchall()
        except Exception:
            logger.exception("Fetch students error")
            raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

        return [
            {
                "id": s.id,
                "reg_no": s.reg_no,
                "name": s.name,
                "email": s.email,
                "department": s.department,
                "address": s.address,
                "division": s.division,
            }
            for s in students
        ]

    def register_student(
        self, student_data: StudentRegistration, year: Optional[int] = None
    ) -> dict:
        """Allocate a registration number and store a new student."""
        missing = student_data.missing_fields()
        if missing:
            raise HTTPException(
                status_code=400, detail=f"Missing fields: {', '.join(missing)}"
            )

        values = {field: getattr(student_data, field) for field in REQUIRED_FIELDS}

        try:
            reg_no = generate_registration_number(self.db, year)
            self.db.execute(
                text(
                    """
                    INSERT INTO students (reg_no, name, email, department, address, division)
                    VALUES (:reg_no, :name, :email, :department, :address, :division)
                    """
                ),
                {"reg_no": reg_no, **values},
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.exception("Registration error")
            raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

        logger.info("Registered %s in %s", reg_no, values["department"])
        return {"reg_no": reg_no, **values}
