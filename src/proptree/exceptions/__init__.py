"""
proptree exception classes.

This package provides all exception types used throughout proptree for
consistent error handling and reporting.
"""

from proptree.exceptions.core import (
    AttributeValueError,
    DuplicatePropertyError,
    PropTreeError,
    ScenarioOrderError,
    UnknownAttributeError,
    UnknownPropertyError,
    UnknownScenarioError,
)

__all__ = [
    "PropTreeError",
    "UnknownAttributeError",
    "AttributeValueError",
    "DuplicatePropertyError",
    "UnknownPropertyError",
    "UnknownScenarioError",
    "ScenarioOrderError",
]
