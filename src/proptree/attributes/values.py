"""
Value holders for property attributes.

Every declared attribute of a property is stored in a value holder. A holder
wraps the value and records how it got there: `provided` when a caller set it
explicitly, `inherited` when one of the inheritance passes copied it from a
parent property, a parent scenario or the project. An empty holder carries the
attribute type's default value and neither flag.
"""

from typing import TYPE_CHECKING, Any

from proptree.exceptions import AttributeValueError, UnknownPropertyError

if TYPE_CHECKING:
    from proptree.attributes.attribute_type import AttributeType
    from proptree.core.tree_node import PropertyTreeNode
    from proptree.structure.project import Project


class AttributeValue:
    """Holder for a scalar attribute value."""

    def __init__(
        self, attribute_type: "AttributeType", property_node: "PropertyTreeNode"
    ):
        """
        Initialize an empty holder.

        Params:
            attribute_type: Schema entry this holder belongs to
            property_node: Property that owns this holder
        """
        self.type = attribute_type
        self.property = property_node
        self.provided = False
        self.inherited = False
        self.value = self.empty_value()

    @property
    def id(self) -> str:
        return self.type.id

    @property
    def is_empty(self) -> bool:
        """True while the value is neither provided nor inherited."""
        return not (self.provided or self.inherited)

    def empty_value(self) -> Any:
        return self.type.default_value()

    def get(self) -> Any:
        return self.value

    def set(self, value: Any) -> None:
        """
        Store an explicitly provided value.

        Params:
            value: New value, validated against the attribute's value type

        Raises:
            AttributeValueError: If the value does not match the value type
        """
        self.value = self.validate(value)
        self.provided = True
        self.inherited = False

    def inherit(self, value: Any) -> None:
        """
        Store a value copied from an inheritance source.

        Does nothing if the holder already has a provided or inherited value,
        which makes repeated inheritance passes idempotent.

        Params:
            value: Value of the parent property, parent scenario or project
        """
        if self.provided or self.inherited:
            return
        self.value = self.copy_value(value)
        self.inherited = True

    def validate(self, value: Any) -> Any:
        return self.type.validate_value(value)

    def copy_value(self, value: Any) -> Any:
        return value

    def to_str(self) -> str:
        return "" if self.value is None else str(self.value)

    def __repr__(self) -> str:
        state = "provided" if self.provided else "inherited" if self.inherited else "empty"
        return f"{type(self).__name__}({self.id}={self.value!r}, {state})"


class ListAttribute(AttributeValue):
    """Holder for a list value. Stored lists are never shared between holders."""

    def empty_value(self) -> list:
        default = self.type.default_value()
        return [] if default is None else list(default)

    def validate(self, value: Any) -> list:
        return list(super().validate(self._check_sequence(value)))

    def copy_value(self, value: Any) -> list:
        return list(self._check_sequence(value))

    def _check_sequence(self, value: Any) -> Any:
        # Strings are iterable but never a list of items.
        if not isinstance(value, (list, tuple)):
            raise AttributeValueError(self.id, value, "expected a list")
        return value

    def to_str(self) -> str:
        return ", ".join(str(item) for item in self.value)


class ReferenceAttribute(AttributeValue):
    """Holder for a reference to another property.

    Values can be given as property objects or as full ids. Ids are resolved
    through the property sets registered with the project, so the holder needs
    the project handed over with `set_project` before ids can be set.
    """

    def __init__(
        self, attribute_type: "AttributeType", property_node: "PropertyTreeNode"
    ):
        super().__init__(attribute_type, property_node)
        self.project: "Project | None" = None

    def set_project(self, project: "Project") -> None:
        self.project = project

    def validate(self, value: Any) -> Any:
        if isinstance(value, str):
            if self.project is None:
                raise UnknownPropertyError(
                    value, "cannot be resolved without a project"
                )
            value = self.project.find_property(value)
        return super().validate(value)

    def to_str(self) -> str:
        return "" if self.value is None else self.value.full_id
