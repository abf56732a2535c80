"""Local models for category entities."""

from __future__ import annotations

from sqlmodel import SQLModel


class Category(SQLModel):
    """Fully-defaulted category as shown in the dashboard."""

    record_id: str
    name: str = ""


class CategoryForm(SQLModel):
    name: str = ""


__all__ = ["Category", "CategoryForm"]
