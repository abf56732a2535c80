"""Local models for course entities."""

from __future__ import annotations

from typing import Literal

from sqlmodel import SQLModel

CourseStatus = Literal["active", "upcoming", "completed"]

COURSE_STATUSES: tuple[str, ...] = ("active", "upcoming", "completed")


class Course(SQLModel):
    """Fully-defaulted course with its category reduced to a bare record id."""

    record_id: str
    title: str = ""
    description: str = ""
    category_id: str = ""
    instructor: str = ""
    max_participants: int = 20
    current_participants: int = 0
    start_date: str = ""
    end_date: str = ""
    status: CourseStatus = "upcoming"


class CourseForm(SQLModel):
    """Editable part of a course.

    Enrollment is not part of the form; it is carried over from the loaded
    course on update and starts at zero on create.
    """

    title: str = ""
    description: str = ""
    category_id: str = ""
    instructor: str = ""
    max_participants: int = 20
    start_date: str = ""
    end_date: str = ""
    status: CourseStatus = "upcoming"


__all__ = ["COURSE_STATUSES", "Course", "CourseForm", "CourseStatus"]
