"""
proptree structure components.

This package provides the owning property set, the project with its scenario
list, and the inheritance passes that run over a finished tree.
"""

from proptree.structure.inheritance import (
    inherit_attributes,
    inherit_attributes_from_scenario,
)
from proptree.structure.project import Project, Scenario
from proptree.structure.property_set import PropertySet

__all__ = [
    "PropertySet",
    "Project",
    "Scenario",
    "inherit_attributes",
    "inherit_attributes_from_scenario",
]
