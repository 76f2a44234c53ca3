"""
proptree - Hierarchical, multi-scenario attribute store for project properties

proptree keeps trees of properties (tasks, resources, ...) whose typed
attributes are inherited down the tree and across what-if scenarios.
"""

from importlib.metadata import version

from proptree.attributes import (
    AttributeType,
    AttributeValue,
    ListAttribute,
    ReferenceAttribute,
)
from proptree.config import DEFAULT_PROJECT_INHERITED_ATTRIBUTES, PropertySetConfig
from proptree.core import PropertyTreeNode
from proptree.exceptions import (
    AttributeValueError,
    DuplicatePropertyError,
    PropTreeError,
    ScenarioOrderError,
    UnknownAttributeError,
    UnknownPropertyError,
    UnknownScenarioError,
)
from proptree.formatting import format_node
from proptree.structure import (
    Project,
    PropertySet,
    Scenario,
    inherit_attributes,
    inherit_attributes_from_scenario,
)

__version__ = version("proptree")

__all__ = [
    "__version__",
    "PropertyTreeNode",
    "PropertySet",
    "PropertySetConfig",
    "DEFAULT_PROJECT_INHERITED_ATTRIBUTES",
    "Project",
    "Scenario",
    "AttributeType",
    "AttributeValue",
    "ListAttribute",
    "ReferenceAttribute",
    "inherit_attributes",
    "inherit_attributes_from_scenario",
    "format_node",
    "PropTreeError",
    "UnknownAttributeError",
    "AttributeValueError",
    "DuplicatePropertyError",
    "UnknownPropertyError",
    "UnknownScenarioError",
    "ScenarioOrderError",
]
