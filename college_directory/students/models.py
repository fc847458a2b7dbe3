"""SQLAlchemy models for students."""

from sqlalchemy import Column, Integer, String, Text
from college_directory.db import Base


class Student(Base):
    """Registered student."""

    __tablename__ = "students"
    # ids are never reused, even after the highest row disappears
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    reg_no = Column(String(20), unique=True, nullable=False, index=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    department = Column(Text, nullable=False, index=True)
    address = Column(Text, nullable=False)
    division = Column(Text, nullable=False)
