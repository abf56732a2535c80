"""Model exports."""

from .category import Category, CategoryForm
from .course import COURSE_STATUSES, Course, CourseForm, CourseStatus
from .record import RawRecord

__all__ = [
    "COURSE_STATUSES",
    "Category",
    "CategoryForm",
    "Course",
    "CourseForm",
    "CourseStatus",
    "RawRecord",
]
