# toolfinder/catalog/models.py
"""Pydantic models for the searchable tool catalog."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class CategoryType(str, Enum):
    """Tool categories."""

    TEXT = "text"
    DEVELOPER = "developer"
    IMAGE = "image"
    PRODUCTIVITY = "productivity"
    FUN = "fun"


class ToolRecord(BaseModel):
    """A single searchable tool. Immutable once loaded."""

    id: str = Field(min_length=1, description="Unique tool identifier")
    name: str = Field(description="Display name")
    description: str = Field(default="", description="Short description")
    category: CategoryType = Field(description="Category the tool belongs to")
    keywords: tuple[str, ...] = Field(default=(), description="Search keywords")
    featured: bool = Field(default=False, description="Highlighted on the homepage")
    route: str | None = Field(default=None, description="Route path to the tool")

    model_config = {"frozen": True}


class CategoryInfo(BaseModel):
    """Display information for a category."""

    id: CategoryType
    name: str
    description: str = ""

    model_config = {"frozen": True}


class Catalog(BaseModel):
    """The complete set of tools plus category display data."""

    tools: list[ToolRecord] = Field(default_factory=list)
    categories: list[CategoryInfo] = Field(default_factory=list)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "Catalog":
        seen: set[str] = set()
        for tool in self.tools:
            if tool.id in seen:
                raise ValueError(f"Duplicate tool id: {tool.id}")
            seen.add(tool.id)
        return self

    def __len__(self) -> int:
        return len(self.tools)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Catalog":
        """Create from dictionary."""
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return self.model_dump(mode="json")
