"""
Property set: the owning collection of properties of one kind.

A property set holds all properties of the same kind (e.g. all tasks of a
project), numbers them, indexes them by full id and carries the attribute
types every property of the set is declared with.
"""

import logging
from collections.abc import Iterator
from typing import Any

from proptree.attributes.attribute_type import AttributeType
from proptree.config import PropertySetConfig
from proptree.core.tree_node import PropertyTreeNode
from proptree.core.types import RESERVED_ATTRIBUTE_IDS
from proptree.exceptions import (
    DuplicatePropertyError,
    UnknownAttributeError,
    UnknownPropertyError,
)
from proptree.structure.inheritance import (
    inherit_attributes,
    inherit_attributes_from_scenario,
)
from proptree.structure.project import Project

logger = logging.getLogger(__name__)


class PropertySet:
    """Collection of properties sharing one attribute schema.

    Responsibilities:
    - Keep the running counts used to number new properties
    - Register attribute types and declare them on every property
    - Index properties by full id
    - Run both inheritance passes over all properties in a safe order
    """

    def __init__(
        self,
        project: Project,
        name: str = "properties",
        config: PropertySetConfig | None = None,
    ):
        self.project = project
        self.name = name
        self.config = config or PropertySetConfig()
        self.items = 0
        self.top_level_items = 0
        self._attribute_types: dict[str, AttributeType] = {}
        self._properties: dict[str, PropertyTreeNode] = {}
        project.register_property_set(self)

    @property
    def flat_namespace(self) -> bool:
        return self.config.flat_namespace

    # Schema

    def add_attribute_type(self, attribute_type: AttributeType) -> None:
        """
        Register an attribute type with the set.

        Existing properties get the attribute declared right away. Registering
        an id again replaces the previous type and its holders.

        Params:
            attribute_type: Schema entry to add

        Raises:
            ValueError: If the id is one of the built-in field names
        """
        attribute_id = attribute_type.id
        if attribute_id in RESERVED_ATTRIBUTE_IDS:
            raise ValueError(f"Attribute id '{attribute_id}' is reserved")

        if attribute_id in self._attribute_types and self.items:
            logger.warning(
                "Redeclaring attribute %s replaces the values of %d properties in %s",
                attribute_id,
                self.items,
                self.name,
            )
        self._attribute_types[attribute_id] = attribute_type
        for node in self._properties.values():
            node.declare_attribute(attribute_type)
        logger.debug("Registered attribute type %s in %s", attribute_id, self.name)

    def each_attribute_definition(self) -> Iterator[AttributeType]:
        yield from self._attribute_types.values()

    def attribute_type(self, attribute_id: str) -> AttributeType:
        attribute_type = self._attribute_types.get(attribute_id)
        if attribute_type is None:
            raise UnknownAttributeError(attribute_id, f"property set '{self.name}'")
        return attribute_type

    def known_attribute(self, attribute_id: str) -> bool:
        return attribute_id in self._attribute_types

    def scenario_specific(self, attribute_id: str) -> bool:
        return self.attribute_type(attribute_id).scenario_specific

    def inheritable(self, attribute_id: str) -> bool:
        return self.attribute_type(attribute_id).inheritable

    def default_value(self, attribute_id: str) -> Any:
        return self.attribute_type(attribute_id).default_value()

    # Properties

    def new_node(
        self,
        id: str,
        name: str,
        parent: PropertyTreeNode | None = None,
        node_class: type[PropertyTreeNode] = PropertyTreeNode,
    ) -> PropertyTreeNode:
        """
        Create a property, register it and declare all attributes on it.

        Params:
            id: Property id, unique among the parent's children
            name: Display label
            parent: Existing property of this set, None for a top-level property
            node_class: PropertyTreeNode subclass to instantiate

        Returns:
            The new property

        Raises:
            UnknownPropertyError: If the parent does not belong to this set
            DuplicatePropertyError: If the full id is already taken
        """
        if parent is not None and self._properties.get(parent.full_id) is not parent:
            raise UnknownPropertyError(
                parent.full_id, f"is not part of property set '{self.name}'"
            )
        if self.flat_namespace or parent is None:
            full_id = id
        else:
            full_id = f"{parent.full_id}.{id}"
        if full_id in self._properties:
            raise DuplicatePropertyError(full_id)

        node = node_class(self, id, name, parent)
        self.add_node(node)
        for attribute_type in self._attribute_types.values():
            node.declare_attribute(attribute_type)
        return node

    def add_node(self, node: PropertyTreeNode) -> None:
        """
        Index a freshly constructed property and advance the counters.

        A rejected property is unlinked from its parent again.

        Raises:
            DuplicatePropertyError: If the full id is already taken
        """
        full_id = node.full_id
        if full_id in self._properties:
            # The constructor already linked the node to its parent.
            if node.parent is not None:
                node.parent.detach_child(node)
            raise DuplicatePropertyError(full_id)
        self._properties[full_id] = node
        self.items += 1
        if node.parent is None:
            self.top_level_items += 1
        logger.debug(
            "Created %s %s (seqno %d) in %s",
            type(node).__name__,
            full_id,
            node.sequence_no,
            self.name,
        )

    def get(self, full_id: str) -> PropertyTreeNode | None:
        return self._properties.get(full_id)

    def __getitem__(self, full_id: str) -> PropertyTreeNode:
        node = self._properties.get(full_id)
        if node is None:
            raise UnknownPropertyError(full_id)
        return node

    def __contains__(self, full_id: str) -> bool:
        return full_id in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def __iter__(self) -> Iterator[PropertyTreeNode]:
        return iter(self._properties.values())

    def roots(self) -> list[PropertyTreeNode]:
        return [node for node in self._properties.values() if node.parent is None]

    def inherit_attributes(self) -> None:
        """Run structural and then scenario inheritance over all properties.

        Properties are visited in creation order. A parent always exists before
        its children, so every parent is processed before its children.
        """
        project_attributes = self.config.project_inherited_attributes
        for node in self._properties.values():
            inherit_attributes(node, project_attributes)
        for node in self._properties.values():
            inherit_attributes_from_scenario(node)
