"""Conversion between raw store records and the local dashboard models."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping, Optional

from ..core import CATEGORIES_APP_ID, LIVING_APPS_BASE_URL, ValidationError
from ..models import (
    COURSE_STATUSES,
    Category,
    CategoryForm,
    Course,
    CourseForm,
    RawRecord,
)

logger = logging.getLogger(__name__)

_RECORD_ID_RE = re.compile(r"([a-f0-9]{24})$", re.IGNORECASE)

# Applied only when a field is missing or null; present-and-zero is kept.
COURSE_DEFAULTS: Dict[str, Any] = {
    "title": "",
    "description": "",
    "instructor": "",
    "max_participants": 20,
    "current_participants": 0,
    "start_date": "",
    "end_date": "",
    "status": "upcoming",
}

CATEGORY_DEFAULTS: Dict[str, Any] = {
    "name": "",
}


def extract_record_id(url: Optional[str]) -> Optional[str]:
    """Return the trailing 24-hex record id of an applookup URL, if any."""

    if not url or not isinstance(url, str):
        return None
    match = _RECORD_ID_RE.search(url)
    return match.group(1) if match else None


def create_record_url(app_id: str, record_id: str) -> str:
    """Build the applookup URL pointing at ``record_id`` in ``app_id``."""

    return f"{LIVING_APPS_BASE_URL}/apps/{app_id}/records/{record_id}"


def coerce_int(value: Any) -> int:
    """Form-layer number parsing: anything unparsable becomes 0."""

    if isinstance(value, int):
        return int(value)
    try:
        if isinstance(value, float):
            return int(value)
        return int(str(value).strip())
    except (TypeError, ValueError, OverflowError):
        return 0


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _field(fields: Mapping[str, Any], name: str, defaults: Mapping[str, Any]) -> Any:
    value = fields.get(name)
    return defaults[name] if value is None else value


def _status(value: Any) -> str:
    if value in COURSE_STATUSES:
        return value
    logger.debug("Unknown course status %r, using 'upcoming'", value)
    return "upcoming"


def category_to_local(raw: RawRecord) -> Category:
    return Category(
        record_id=raw.record_id,
        name=_text(_field(raw.fields, "name", CATEGORY_DEFAULTS)),
    )


def course_to_local(raw: RawRecord) -> Course:
    """Default every optional field and reduce the category URL to its id."""

    fields = raw.fields

    def get(name: str) -> Any:
        return _field(fields, name, COURSE_DEFAULTS)

    return Course(
        record_id=raw.record_id,
        title=_text(get("title")),
        description=_text(get("description")),
        category_id=extract_record_id(fields.get("category")) or "",
        instructor=_text(get("instructor")),
        max_participants=coerce_int(get("max_participants")),
        current_participants=coerce_int(get("current_participants")),
        start_date=_text(get("start_date")),
        end_date=_text(get("end_date")),
        status=_status(get("status")),
    )


def course_form_from_body(body: Mapping[str, Any]) -> CourseForm:
    """Read a submitted course form.

    A missing or invalid ``max_participants`` counts as unset (0) and is left
    out of the outgoing payload.
    """

    return CourseForm(
        title=_text(body.get("title")),
        description=_text(body.get("description")),
        category_id=_text(body.get("category_id")),
        instructor=_text(body.get("instructor")),
        max_participants=coerce_int(body.get("max_participants")),
        start_date=_text(body.get("start_date")),
        end_date=_text(body.get("end_date")),
        status=_status(body.get("status") or "upcoming"),
    )


def category_form_from_body(body: Mapping[str, Any]) -> CategoryForm:
    return CategoryForm(name=_text(body.get("name")))


def course_form_from_local(course: Course) -> CourseForm:
    """Prefill the edit form from a loaded course."""

    return CourseForm(
        title=course.title,
        description=course.description,
        category_id=course.category_id,
        instructor=course.instructor,
        max_participants=course.max_participants,
        start_date=course.start_date,
        end_date=course.end_date,
        status=course.status,
    )


def validate_course_form(form: CourseForm) -> None:
    missing = [
        name
        for name in ("title", "instructor", "category_id")
        if not getattr(form, name).strip()
    ]
    if missing:
        raise ValidationError(missing)


def validate_category_form(form: CategoryForm) -> None:
    if not form.name.strip():
        raise ValidationError(["name"])


def course_to_fields(
    form: CourseForm,
    current_participants: Optional[int] = None,
    *,
    categories_app_id: str = CATEGORIES_APP_ID,
) -> Dict[str, Any]:
    """Build the outgoing fields payload for a course.

    Empty optional values are omitted rather than sent, since the store reads
    an explicit empty value as "clear this field". ``current_participants`` is
    the loaded enrollment on update and ``None`` on create.
    """

    fields: Dict[str, Any] = {
        "title": form.title,
        "description": form.description or None,
        "category": create_record_url(categories_app_id, form.category_id),
        "instructor": form.instructor,
        "max_participants": form.max_participants or None,
        "current_participants": current_participants or 0,
        "start_date": form.start_date or None,
        "end_date": form.end_date or None,
        "status": form.status,
    }
    return {key: value for key, value in fields.items() if value is not None}


def category_to_fields(form: CategoryForm) -> Dict[str, Any]:
    return {"name": form.name}


__all__ = [
    "CATEGORY_DEFAULTS",
    "COURSE_DEFAULTS",
    "category_form_from_body",
    "category_to_fields",
    "category_to_local",
    "coerce_int",
    "course_form_from_body",
    "course_form_from_local",
    "course_to_fields",
    "course_to_local",
    "create_record_url",
    "extract_record_id",
    "validate_category_form",
    "validate_course_form",
]
