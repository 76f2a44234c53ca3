"""
Attribute inheritance passes.

Structural inheritance copies inheritable values from the parent property
into its children, and for top-level properties from a whitelist of
project-wide values. Scenario inheritance then copies scenario-specific values
from a parent scenario into its child scenarios within the same property.

Both passes only fill holders that are still empty, so running them more
than once has no further effect. Structural inheritance has to see a parent
before its children; scenario inheritance has to run after structural
inheritance.
"""

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

from proptree.exceptions import UnknownAttributeError

if TYPE_CHECKING:
    from proptree.attributes.values import AttributeValue
    from proptree.core.tree_node import PropertyTreeNode

logger = logging.getLogger(__name__)


def _holder(
    node: "PropertyTreeNode", attribute_id: str, scenario_idx: int | None = None
) -> "AttributeValue":
    holder = node.get_attr(attribute_id, scenario_idx)
    if holder is None:
        raise UnknownAttributeError(
            attribute_id, f"property '{node.full_id}'", scenario_idx
        )
    return holder


def inherit_attributes(
    node: "PropertyTreeNode", project_attributes: Collection[str] | None = None
) -> None:
    """
    Inherit attribute values from the parent property or from the project.

    For every inheritable attribute of the node's property set: if the node
    has a parent whose value is provided or inherited, that value is copied.
    Top-level nodes instead copy the project's value, but only for attribute
    ids in `project_attributes` and only if the project has a value.
    Scenario-specific attributes are handled per scenario.

    Params:
        node: Property to fill; its parent must already have been processed
        project_attributes: Attribute ids top-level properties take from the
            project, defaults to the property set's configuration
    """
    if project_attributes is None:
        project_attributes = node.property_set.config.project_inherited_attributes
    parent = node.parent
    project = node.project

    for attr_type in node.property_set.each_attribute_definition():
        if attr_type.scenario_specific or not attr_type.inheritable:
            continue

        attribute_id = attr_type.id
        if parent is not None:
            if parent.provided(attribute_id) or parent.inherited(attribute_id):
                _holder(node, attribute_id).inherit(parent.get(attribute_id))
                logger.debug(
                    "%s inherited %s from %s",
                    node.full_id,
                    attribute_id,
                    parent.full_id,
                )
        elif attribute_id in project_attributes and project[attribute_id] is not None:
            _holder(node, attribute_id).inherit(project[attribute_id])
            logger.debug("%s inherited %s from project", node.full_id, attribute_id)

    for attr_type in node.property_set.each_attribute_definition():
        if not (attr_type.scenario_specific and attr_type.inheritable):
            continue

        attribute_id = attr_type.id
        for scenario_idx in range(project.scenario_count):
            if parent is not None:
                if parent.provided(attribute_id, scenario_idx) or parent.inherited(
                    attribute_id, scenario_idx
                ):
                    _holder(node, attribute_id, scenario_idx).inherit(
                        parent.get_scenario(attribute_id, scenario_idx)
                    )
                    logger.debug(
                        "%s inherited %s[%d] from %s",
                        node.full_id,
                        attribute_id,
                        scenario_idx,
                        parent.full_id,
                    )
            elif (
                attribute_id in project_attributes
                and project[attribute_id] is not None
            ):
                _holder(node, attribute_id, scenario_idx).inherit(
                    project[attribute_id]
                )
                logger.debug(
                    "%s inherited %s[%d] from project",
                    node.full_id,
                    attribute_id,
                    scenario_idx,
                )


def inherit_attributes_from_scenario(node: "PropertyTreeNode") -> None:
    """
    Inherit scenario-specific values from parent scenarios.

    A scenario takes the value of its parent scenario when the parent's value
    is provided or inherited and its own value is neither. Parent scenarios
    always precede their children in the project's scenario list, so walking
    the indices in order makes a grandparent's value reach its grandchildren
    without recursion.

    Params:
        node: Property whose scenario values are filled
    """
    project = node.project

    for attr_type in node.property_set.each_attribute_definition():
        if not attr_type.scenario_specific:
            continue

        attribute_id = attr_type.id
        for scenario_idx in range(project.scenario_count):
            scenario = project.scenario(scenario_idx)
            if scenario.parent is None:
                continue
            parent_idx = scenario.parent.index

            if (
                node.provided(attribute_id, parent_idx)
                or node.inherited(attribute_id, parent_idx)
            ) and not (
                node.provided(attribute_id, scenario_idx)
                or node.inherited(attribute_id, scenario_idx)
            ):
                _holder(node, attribute_id, scenario_idx).inherit(
                    _holder(node, attribute_id, parent_idx).get()
                )
                logger.debug(
                    "%s inherited %s[%d] from scenario %d",
                    node.full_id,
                    attribute_id,
                    scenario_idx,
                    parent_idx,
                )
