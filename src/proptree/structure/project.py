"""
Project and scenario classes.

The project owns the ordered scenario list and the project-wide attribute
values that top-level properties fall back to. Scenarios form their own
tree: a child scenario is a what-if variant of its parent and inherits the
parent's values unless it overrides them.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from proptree.exceptions import (
    ScenarioOrderError,
    UnknownPropertyError,
    UnknownScenarioError,
)

if TYPE_CHECKING:
    from proptree.core.tree_node import PropertyTreeNode
    from proptree.structure.property_set import PropertySet

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Scenario:
    """One entry of the project's scenario list.

    Params:
        id: Scenario id, unique within the project
        name: Display label
        sequence_no: 1-based position in the project's scenario list
        parent: Scenario this one is a variant of, None for top-level scenarios
    """

    id: str
    name: str
    sequence_no: int
    parent: Optional["Scenario"] = None
    children: list["Scenario"] = field(default_factory=list)

    @property
    def index(self) -> int:
        return self.sequence_no - 1

    def get(self, attribute_id: str) -> Any:
        if attribute_id == "id":
            return self.id
        if attribute_id == "name":
            return self.name
        if attribute_id == "seqno":
            return self.sequence_no
        raise KeyError(attribute_id)


class Project:
    """Scenario list, project-wide attribute values and registered property sets."""

    def __init__(self, id: str, name: str, default_scenario: bool = True):
        """
        Initialize the project.

        Params:
            id: Project id
            name: Display label
            default_scenario: Create the top-level scenario `plan`
        """
        self.id = id
        self.name = name
        self.scenarios: list[Scenario] = []
        self.property_sets: list["PropertySet"] = []
        self._attributes: dict[str, Any] = {}
        if default_scenario:
            self.add_scenario("plan", "Plan Scenario")

    def __getitem__(self, attribute_id: str) -> Any:
        """Project-wide value of an attribute, None if the project has none."""
        return self._attributes.get(attribute_id)

    def __setitem__(self, attribute_id: str, value: Any) -> None:
        self._attributes[attribute_id] = value

    @property
    def scenario_count(self) -> int:
        return len(self.scenarios)

    def scenario(self, index: int) -> Scenario:
        return self.scenarios[index]

    def scenario_idx(self, scenario_id: str) -> int:
        """
        Look up the index of a scenario by id.

        Raises:
            UnknownScenarioError: If no scenario has this id
        """
        for scenario in self.scenarios:
            if scenario.id == scenario_id:
                return scenario.index
        raise UnknownScenarioError(scenario_id)

    def add_scenario(
        self, id: str, name: str, parent_id: str | None = None
    ) -> Scenario:
        """
        Append a scenario to the scenario list.

        The parent must already be in the list, so parent scenarios always
        have a smaller index than their children. Scenario inheritance
        depends on this order.

        Params:
            id: Scenario id
            name: Display label
            parent_id: Id of the scenario this one is a variant of

        Returns:
            The new Scenario

        Raises:
            UnknownScenarioError: If the parent scenario does not exist
            ScenarioOrderError: If the id is taken or properties already exist
        """
        if any(scenario.id == id for scenario in self.scenarios):
            raise ScenarioOrderError(id, "scenario id already exists")
        if any(property_set.items for property_set in self.property_sets):
            raise ScenarioOrderError(
                id, "properties have already been created for this project"
            )

        parent = None
        if parent_id is not None:
            parent = self.scenarios[self.scenario_idx(parent_id)]

        scenario = Scenario(
            id=id, name=name, sequence_no=len(self.scenarios) + 1, parent=parent
        )
        if parent is not None:
            parent.children.append(scenario)
        self.scenarios.append(scenario)
        logger.debug(
            "Added scenario %s (%d) to project %s", id, scenario.index, self.id
        )
        return scenario

    def register_property_set(self, property_set: "PropertySet") -> None:
        if property_set not in self.property_sets:
            self.property_sets.append(property_set)

    def find_property(self, full_id: str) -> "PropertyTreeNode":
        """
        Resolve a property full id across all registered property sets.

        Raises:
            UnknownPropertyError: If no registered set contains the id
        """
        for property_set in self.property_sets:
            node = property_set.get(full_id)
            if node is not None:
                return node
        raise UnknownPropertyError(full_id)
