"""
Exception classes for proptree property trees.

This module defines specific exception types for the error conditions that
can occur while building property trees, declaring attributes and reading or
writing attribute values.
"""

from typing import Any


class PropTreeError(Exception):
    """Base exception for all proptree errors."""

    pass


class UnknownAttributeError(PropTreeError):
    """Raised when an attribute id has no declared holder or schema entry."""

    def __init__(
        self,
        attribute_id: str,
        container: str,
        scenario_idx: int | None = None,
    ):
        """
        Initialize the exception.

        Params:
            attribute_id: The attribute id that was not found
            container: The property or property set the attribute was expected in
            scenario_idx: Scenario index of the lookup, if it was scenario specific
        """
        self.attribute_id = attribute_id
        self.container = container
        self.scenario_idx = scenario_idx

        message = f"Unknown attribute '{attribute_id}' in {container}"
        if scenario_idx is not None:
            message += f" (scenario {scenario_idx})"
        super().__init__(message)


class AttributeValueError(PropTreeError):
    """Raised when a value does not match the attribute's value type."""

    def __init__(self, attribute_id: str, value: Any, reason: str):
        """
        Initialize the exception.

        Params:
            attribute_id: The attribute that rejected the value
            value: The rejected value
            reason: Why the value was rejected
        """
        self.attribute_id = attribute_id
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid value {value!r} for attribute '{attribute_id}': {reason}"
        )


class DuplicatePropertyError(PropTreeError):
    """Raised when a property with the same full id already exists in a set."""

    def __init__(self, full_id: str):
        self.full_id = full_id
        super().__init__(f"Property '{full_id}' already exists")


class UnknownPropertyError(PropTreeError):
    """Raised when a property id cannot be resolved."""

    def __init__(self, property_id: str, reason: str = "does not exist"):
        self.property_id = property_id
        self.reason = reason
        super().__init__(f"Property '{property_id}' {reason}")


class UnknownScenarioError(PropTreeError):
    """Raised when a scenario id or index cannot be resolved."""

    def __init__(self, scenario_id: str | int):
        self.scenario_id = scenario_id
        super().__init__(f"Unknown scenario '{scenario_id}'")


class ScenarioOrderError(PropTreeError):
    """Raised when a scenario cannot be added to the project's scenario list."""

    def __init__(self, scenario_id: str, reason: str):
        """
        Initialize the exception.

        Params:
            scenario_id: The scenario that could not be added
            reason: Why the scenario list would become inconsistent
        """
        self.scenario_id = scenario_id
        self.reason = reason
        super().__init__(f"Cannot add scenario '{scenario_id}': {reason}")
