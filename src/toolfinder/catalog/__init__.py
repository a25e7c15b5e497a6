"""Catalog package with Pydantic models."""

from toolfinder.catalog.models import Catalog, CategoryInfo, CategoryType, ToolRecord
from toolfinder.catalog.registry import default_catalog

__all__ = [
    "Catalog",
    "CategoryInfo",
    "CategoryType",
    "ToolRecord",
    "default_catalog",
]
