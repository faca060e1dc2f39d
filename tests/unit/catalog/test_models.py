"""Tests for pattern catalog models."""
import pytest
from pydantic import ValidationError

from design_patterns.catalog import Participant, PatternCategory, PatternInfo


def _info(**overrides):
    data = {
        "slug": "abstract-factory",
        "name": "Abstract Factory",
        "category": PatternCategory.CREATIONAL,
        "intent": "Create families of related objects.",
        "participants": [Participant(role="AbstractFactory", class_name="ContinentFactory")],
    }
    data.update(overrides)
    return PatternInfo(**data)


class TestPatternCategory:
    """Test pattern category ordering."""

    def test_order_follows_catalog(self):
        assert PatternCategory.CREATIONAL.order < PatternCategory.STRUCTURAL.order
        assert PatternCategory.STRUCTURAL.order < PatternCategory.BEHAVIORAL.order

    def test_lookup_by_value(self):
        assert PatternCategory("behavioral") is PatternCategory.BEHAVIORAL


class TestPatternInfo:
    """Test PatternInfo validation and serialisation."""

    def test_valid_info(self):
        info = _info()
        assert info.slug == "abstract-factory"
        assert info.applicability == []

    @pytest.mark.parametrize("slug", ["AbstractFactory", "abstract_factory", "-builder", "builder-", ""])
    def test_rejects_non_kebab_slug(self, slug):
        with pytest.raises(ValidationError):
            _info(slug=slug)

    def test_requires_a_participant(self):
        with pytest.raises(ValidationError):
            _info(participants=[])

    def test_is_frozen(self):
        info = _info()
        with pytest.raises(ValidationError):
            info.name = "Other"

    def test_category_accepts_string(self):
        info = _info(category="structural")
        assert info.category is PatternCategory.STRUCTURAL

    def test_summary(self):
        assert _info().summary() == {
            "slug": "abstract-factory",
            "name": "Abstract Factory",
            "category": "creational",
            "intent": "Create families of related objects.",
        }

    def test_to_dict_is_json_ready(self):
        data = _info().to_dict()
        assert data["category"] == "creational"
        assert data["participants"] == [
            {"role": "AbstractFactory", "class_name": "ContinentFactory", "description": ""}
        ]
