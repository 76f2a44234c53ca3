"""
Tests for attribute type descriptors.
"""

import pydantic
import pytest

from proptree import AttributeType, AttributeValue, AttributeValueError, ListAttribute


class TestAttributeType:
    """Test schema entry construction and validation."""

    def test_defaults(self):
        """Only the id is required."""
        attr_type = AttributeType(id="note")
        assert attr_type.name == "note"
        assert attr_type.value_class is AttributeValue
        assert attr_type.default is None
        assert not attr_type.scenario_specific
        assert not attr_type.inheritable

    def test_value_type_defaults_to_none(self):
        """A schema entry without a value type validates any value."""
        attr_type = AttributeType(id="note")
        assert attr_type.value_type is None
        assert attr_type.validate_value("draft") == "draft"
        assert attr_type.validate_value(3) == 3

    def test_explicit_name(self):
        """An explicit display label is kept."""
        assert AttributeType(id="rate", name="Daily Rate").name == "Daily Rate"

    def test_frozen(self):
        """Schema entries cannot be modified after creation."""
        attr_type = AttributeType(id="rate")
        with pytest.raises(pydantic.ValidationError):
            attr_type.inheritable = True

    def test_value_class_must_be_holder(self):
        """Only AttributeValue subclasses are accepted as holder classes."""
        with pytest.raises(pydantic.ValidationError):
            AttributeType(id="rate", value_class=dict)

    def test_validate_value(self):
        """Values are checked against the value type."""
        attr_type = AttributeType(id="priority", value_type=int)
        assert attr_type.validate_value("7") == 7
        with pytest.raises(AttributeValueError) as exc_info:
            attr_type.validate_value("high")
        assert exc_info.value.attribute_id == "priority"
        assert exc_info.value.value == "high"

    def test_any_value_type_accepts_everything(self):
        """Without a value type every value is accepted unchanged."""
        marker = object()
        assert AttributeType(id="anything").validate_value(marker) is marker

    def test_new_value_uses_value_class(self):
        """The factory builds holders of the configured class."""
        attr_type = AttributeType(
            id="tags", value_class=ListAttribute, value_type=list[str]
        )
        holder = attr_type.new_value(None)
        assert isinstance(holder, ListAttribute)
        assert holder.type is attr_type

    def test_default_value_is_a_copy(self):
        """Mutable defaults are handed out as copies."""
        attr_type = AttributeType(id="tags", default=["a"])
        value = attr_type.default_value()
        value.append("b")
        assert attr_type.default_value() == ["a"]
