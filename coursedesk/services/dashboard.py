"""
Dashboard state and actions.

The dashboard owns one immutable :class:`DashboardState` snapshot holding the
loaded categories and courses. Every load replaces it wholesale, and every
mutation (create/update/delete) is followed by a full reload; nothing is
patched into the local lists.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import date
from typing import Any, AsyncIterator, Dict, Iterable, List, Optional, Sequence, Tuple

from ..core import (
    BusyError,
    CourseDeskError,
    RecordNotFoundError,
)
from ..models import Category, CategoryForm, Course, CourseForm
from .living_apps import LivingAppsClient
from .transform import (
    category_to_fields,
    category_to_local,
    course_to_fields,
    course_to_local,
    validate_category_form,
    validate_course_form,
)

logger = logging.getLogger(__name__)

ALL = "all"
UNKNOWN_CATEGORY = "Unbekannt"

STATUS_LABELS: Dict[str, str] = {
    "active": "Aktiv",
    "upcoming": "Geplant",
    "completed": "Abgeschlossen",
}


@dataclass(frozen=True)
class DashboardState:
    categories: Tuple[Category, ...] = ()
    courses: Tuple[Course, ...] = ()
    loaded: bool = False


# View helpers -----------------------------------------------------------------


def filter_courses(
    courses: Iterable[Course], category: str = ALL, status: str = ALL
) -> List[Course]:
    """Apply the category and status filters; ``"all"`` disables a filter."""

    out: List[Course] = []
    for course in courses:
        if category != ALL and course.category_id != category:
            continue
        if status != ALL and course.status != status:
            continue
        out.append(course)
    return out


def compute_stats(state: DashboardState) -> Dict[str, int]:
    return {
        "total_courses": len(state.courses),
        "active_courses": sum(1 for c in state.courses if c.status == "active"),
        "total_participants": sum(c.current_participants for c in state.courses),
        "categories": len(state.categories),
    }


def category_name(categories: Iterable[Category], category_id: str) -> str:
    """Look up a category name; unknown or empty ids give the sentinel label."""

    if category_id:
        for category in categories:
            if category.record_id == category_id:
                return category.name or UNKNOWN_CATEGORY
    return UNKNOWN_CATEGORY


def status_label(status: str) -> str:
    return STATUS_LABELS.get(status, status)


def fill_percent(course: Course) -> float:
    """Enrollment as a percentage of capacity, clamped to 100.

    Overbooking is allowed, so the raw ratio may exceed 1.
    """

    if course.max_participants <= 0:
        return 100.0 if course.current_participants > 0 else 0.0
    ratio = course.current_participants / course.max_participants
    return min(ratio * 100, 100.0)


def is_full(course: Course) -> bool:
    return course.current_participants >= course.max_participants


def format_date(value: str) -> str:
    """Render ``YYYY-MM-DD`` / ISO strings as ``DD.MM.YYYY``."""

    if not value:
        return "-"
    try:
        parsed = date.fromisoformat(value[:10])
    except ValueError:
        return value
    return parsed.strftime("%d.%m.%Y")


def course_card(course: Course, categories: Sequence[Category]) -> Dict[str, Any]:
    """Serialise a course with the derived values the course grid shows."""

    has_dates = bool(course.start_date or course.end_date)
    return {
        **course.model_dump(),
        "category_name": category_name(categories, course.category_id),
        "status_label": status_label(course.status),
        "fill_percent": round(fill_percent(course), 1),
        "is_full": is_full(course),
        "date_range": (
            f"{format_date(course.start_date)} - {format_date(course.end_date)}"
            if has_dates
            else None
        ),
    }


def new_course_form(state: DashboardState) -> CourseForm:
    """Defaults for the "new course" dialog; preselects the first category."""

    first = state.categories[0].record_id if state.categories else ""
    return CourseForm(category_id=first)


def dashboard_view(
    state: DashboardState, category: str = ALL, status: str = ALL
) -> Dict[str, Any]:
    courses = filter_courses(state.courses, category=category, status=status)
    return {
        "stats": compute_stats(state),
        "categories": [c.model_dump() for c in state.categories],
        "filters": {"category": category, "status": status},
        "course_count": len(courses),
        "courses": [course_card(c, state.categories) for c in courses],
        "new_course_form": new_course_form(state).model_dump(),
    }


# Actions ----------------------------------------------------------------------


class Dashboard:
    """Loads both collections and runs the create/update/delete actions."""

    def __init__(self, client: LivingAppsClient) -> None:
        self._client = client
        self._saving = asyncio.Lock()
        self.state = DashboardState()

    @property
    def saving(self) -> bool:
        return self._saving.locked()

    async def load(self) -> DashboardState:
        """Fetch categories and courses concurrently and replace the state.

        If either read fails the previous state is kept.
        """

        try:
            raw_categories, raw_courses = await asyncio.gather(
                self._client.categories.list_all(),
                self._client.courses.list_all(),
            )
        except CourseDeskError:
            logger.exception("Error loading data")
            raise

        self.state = DashboardState(
            categories=tuple(category_to_local(raw) for raw in raw_categories),
            courses=tuple(course_to_local(raw) for raw in raw_courses),
            loaded=True,
        )
        logger.info(
            "Loaded %d categories and %d courses",
            len(self.state.categories),
            len(self.state.courses),
        )
        return self.state

    @asynccontextmanager
    async def _mutation(self, action: str) -> AsyncIterator[None]:
        if self._saving.locked():
            raise BusyError(f"Cannot start {action}: another change is still running")
        async with self._saving:
            try:
                yield
            except CourseDeskError as exc:
                logger.error("Error %s: %s", action, exc)
                raise

    async def get_course(self, record_id: str) -> Course:
        for course in self.state.courses:
            if course.record_id == record_id:
                return course
        raw = await self._client.courses.get_one(record_id)
        if raw is None:
            raise RecordNotFoundError(f"Course {record_id} not found")
        return course_to_local(raw)

    async def get_category(self, record_id: str) -> Category:
        for category in self.state.categories:
            if category.record_id == record_id:
                return category
        raw = await self._client.categories.get_one(record_id)
        if raw is None:
            raise RecordNotFoundError(f"Category {record_id} not found")
        return category_to_local(raw)

    async def save_course(
        self, form: CourseForm, record_id: Optional[str] = None
    ) -> DashboardState:
        """Create (no ``record_id``) or update a course, then reload."""

        async with self._mutation("saving course"):
            validate_course_form(form)
            categories_app_id = self._client.categories.app_id
            if record_id:
                existing = await self.get_course(record_id)
                fields = course_to_fields(
                    form,
                    existing.current_participants,
                    categories_app_id=categories_app_id,
                )
                await self._client.courses.update(record_id, fields)
                logger.info("Updated course %s", record_id)
            else:
                fields = course_to_fields(form, categories_app_id=categories_app_id)
                created = await self._client.courses.create(fields)
                logger.info("Created course %s", created.record_id or "?")
            return await self.load()

    async def delete_course(self, record_id: str) -> DashboardState:
        async with self._mutation("deleting course"):
            await self._client.courses.delete(record_id)
            logger.info("Deleted course %s", record_id)
            return await self.load()

    async def save_category(
        self, form: CategoryForm, record_id: Optional[str] = None
    ) -> DashboardState:
        async with self._mutation("saving category"):
            validate_category_form(form)
            fields = category_to_fields(form)
            if record_id:
                await self._client.categories.update(record_id, fields)
                logger.info("Updated category %s", record_id)
            else:
                created = await self._client.categories.create(fields)
                logger.info("Created category %s", created.record_id or "?")
            return await self.load()

    async def delete_category(self, record_id: str) -> DashboardState:
        async with self._mutation("deleting category"):
            await self._client.categories.delete(record_id)
            logger.info("Deleted category %s", record_id)
            return await self.load()


__all__ = [
    "ALL",
    "STATUS_LABELS",
    "UNKNOWN_CATEGORY",
    "Dashboard",
    "DashboardState",
    "category_name",
    "compute_stats",
    "course_card",
    "dashboard_view",
    "filter_courses",
    "fill_percent",
    "format_date",
    "is_full",
    "new_course_form",
    "status_label",
]
