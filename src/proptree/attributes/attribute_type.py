"""
Attribute type descriptors.

An attribute type is one entry of a property set's schema. It names the
attribute, says whether its values differ per scenario and whether they are
inherited, and builds the value holders that properties store.
"""

import copy
from typing import TYPE_CHECKING, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    PrivateAttr,
    TypeAdapter,
    ValidationError,
    model_validator,
)

from proptree.attributes.values import AttributeValue
from proptree.exceptions import AttributeValueError

if TYPE_CHECKING:
    from proptree.core.tree_node import PropertyTreeNode


class AttributeType(BaseModel):
    """Schema entry describing one attribute of a property set.

    Params:
        id: Attribute id used as key in the property attribute maps
        name: Display label, defaults to the id
        value_class: Value holder class instantiated for every property
        value_type: Python type that values are validated against, None
            accepts any value
        default: Value of an empty holder
        scenario_specific: One holder per scenario instead of a single one
        inheritable: Values propagate from parent properties (and from the
            project for top-level properties)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str
    name: str = ""
    value_class: type[AttributeValue] = AttributeValue
    value_type: Any = None
    default: Any = None
    scenario_specific: bool = False
    inheritable: bool = False

    _adapter: TypeAdapter = PrivateAttr()

    @model_validator(mode="before")
    @classmethod
    def _default_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("name"):
            data = {**data, "name": data.get("id", "")}
        return data

    def model_post_init(self, __context: Any) -> None:
        self._adapter = TypeAdapter(Any if self.value_type is None else self.value_type)

    def default_value(self) -> Any:
        """Return a fresh copy of the default so holders never share it."""
        return copy.copy(self.default)

    def validate_value(self, value: Any) -> Any:
        """
        Validate a value against this attribute's value type.

        Params:
            value: Candidate value for a holder of this type

        Returns:
            The validated (possibly coerced) value

        Raises:
            AttributeValueError: If the value does not match the value type
        """
        try:
            return self._adapter.validate_python(value)
        except ValidationError as e:
            reason = "; ".join(err["msg"] for err in e.errors())
            raise AttributeValueError(self.id, value, reason) from e

    def new_value(self, property_node: "PropertyTreeNode") -> AttributeValue:
        """Build an empty value holder bound to `property_node`."""
        return self.value_class(self, property_node)
