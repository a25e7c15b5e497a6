# tests/catalog/test_models.py
"""Tests for catalog models and the built-in registry."""

import pytest
from pydantic import ValidationError

from toolfinder.catalog import (
    Catalog,
    CategoryInfo,
    CategoryType,
    ToolRecord,
    default_catalog,
)


class TestToolRecord:
    """Tests for ToolRecord."""

    def test_defaults(self):
        record = ToolRecord(id="x", name="X Tool", category=CategoryType.FUN)
        assert record.description == ""
        assert record.keywords == ()
        assert record.featured is False
        assert record.route is None

    def test_category_from_string(self):
        record = ToolRecord(id="x", name="X", category="image")
        assert record.category is CategoryType.IMAGE

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            ToolRecord(id="", name="X", category="fun")

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            ToolRecord(id="x", name="X", category="weather")

    def test_frozen(self):
        record = ToolRecord(id="x", name="X", category="fun")
        with pytest.raises(ValidationError):
            record.name = "Y"

    def test_keywords_immutable(self):
        record = ToolRecord(id="x", name="X", category="fun", keywords=["a", "b"])
        assert record.keywords == ("a", "b")
        with pytest.raises(AttributeError):
            record.keywords.append("c")

    def test_hashable(self):
        record = ToolRecord(id="x", name="X", category="fun", keywords=["a"])
        same = ToolRecord(id="x", name="X", category="fun", keywords=("a",))
        assert hash(record) == hash(same)
        assert len({record, same}) == 1


class TestCatalog:
    """Tests for Catalog."""

    def test_duplicate_ids_rejected(self):
        tool = {"id": "dup", "name": "Dup", "category": "fun"}
        with pytest.raises(ValidationError, match="Duplicate tool id: dup"):
            Catalog.from_dict({"tools": [tool, tool]})

    def test_featured_flags(self, catalog):
        assert [t.id for t in catalog.tools if t.featured] == [
            "base64-encoder",
            "json-formatter",
            "qr-generator",
            "password-generator",
        ]

    def test_round_trip_dict(self, catalog):
        data = catalog.to_dict()
        assert data["tools"][0]["category"] == "text"
        assert Catalog.from_dict(data) == catalog


class TestDefaultCatalog:
    """Tests for the built-in registry."""

    def test_size(self):
        assert len(default_catalog()) == 19

    def test_every_category_described(self):
        catalog = default_catalog()
        described = {info.id for info in catalog.categories}
        assert described == set(CategoryType)
        assert all(isinstance(info, CategoryInfo) for info in catalog.categories)

    def test_fresh_copy(self):
        assert default_catalog() is not default_catalog()
