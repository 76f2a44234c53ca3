"""
Core type definitions for proptree.

This module contains type aliases used throughout proptree for type safety
and consistency.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from proptree.attributes.values import AttributeValue

AttributeMap = dict[str, "AttributeValue"]

# One AttributeMap per scenario index
ScenarioAttributeMaps = list[AttributeMap]

# Ids answered from built-in property fields instead of the attribute maps
RESERVED_ATTRIBUTE_IDS = frozenset({"id", "name", "seqno"})

