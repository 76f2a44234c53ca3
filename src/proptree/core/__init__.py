"""
Core proptree components.

This package provides the property tree node base class and the type
definitions shared by the rest of the package.
"""

from proptree.core.tree_node import PropertyTreeNode
from proptree.core.types import (
    RESERVED_ATTRIBUTE_IDS,
    AttributeMap,
    ScenarioAttributeMaps,
)

__all__ = [
    "PropertyTreeNode",
    "AttributeMap",
    "ScenarioAttributeMaps",
    "RESERVED_ATTRIBUTE_IDS",
]
