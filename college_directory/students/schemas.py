"""Pydantic schemas for students."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

REQUIRED_FIELDS = ("name", "email", "department", "address", "division")


class StudentRegistration(BaseModel):
    """
    Incoming registration form.

    Every field is optional here so that all missing ones can be reported
    together; blank values are normalised to None.
    """

    name: Optional[str] = Field(None, description="Full name")
    email: Optional[str] = Field(None, description="Email address")
    department: Optional[str] = Field(None, description="Department")
    address: Optional[str] = Field(None, description="Postal address")
    division: Optional[str] = Field(None, description="Division")

    model_config = ConfigDict(extra="ignore")

    @field_validator(*REQUIRED_FIELDS)
    @classmethod
    def strip_blank(cls, v):
        """Trim whitespace; blank strings count as missing."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    def missing_fields(self) -> List[str]:
        """Required fields that were absent or blank, in form order."""
        return [field for field in REQUIRED_FIELDS if getattr(self, field) is None]


class StudentBase(BaseModel):
    """Base schema for a stored student."""

    reg_no: str = Field(..., description="Registration number (COL{YYYY}{NNN})")
    name: str
    email: str
    department: str
    address: str
    division: str


class RegisteredStudent(StudentBase):
    """Student as returned right after registration."""

    pass


class StudentResponse(StudentBase):
    """Schema for a listed student."""

    id: int

    model_config = ConfigDict(from_attributes=True)


class RegistrationResponse(BaseModel):
    """Schema for the registration response."""

    success: bool = True
    student: RegisteredStudent


class StudentListResponse(BaseModel):
    """Schema for the student list response."""

    success: bool = True
    students: List[StudentResponse]


class ErrorResponse(BaseModel):
    """Error envelope shared by every endpoint."""

    success: bool = False
    error: str
