"""
Attribute schema and value holders.

This package provides the attribute type descriptors that make up a property
set's schema and the value holder variants stored on every property.
"""

from proptree.attributes.attribute_type import AttributeType
from proptree.attributes.values import (
    AttributeValue,
    ListAttribute,
    ReferenceAttribute,
)

__all__ = [
    "AttributeType",
    "AttributeValue",
    "ListAttribute",
    "ReferenceAttribute",
]
