"""
Core PropertyTreeNode class for proptree.

A property is e.g. a task or a resource of a project. Properties can be
arranged in tree form by creating child properties of an existing property;
the parent has to exist when the child is created. This module holds the
tree topology and the attribute storage that all property kinds share. The
PropertySet holds collections of properties of the same kind and the
attribute types they carry.
"""

from collections.abc import Collection, Iterator
from typing import TYPE_CHECKING, Any, Optional

from proptree.core.types import AttributeMap, ScenarioAttributeMaps
from proptree.exceptions import UnknownAttributeError, UnknownScenarioError

if TYPE_CHECKING:
    from proptree.attributes.attribute_type import AttributeType
    from proptree.attributes.values import AttributeValue
    from proptree.structure.property_set import PropertySet


class PropertyTreeNode:
    """
    Base class for all project properties.

    Each property carries one holder per declared plain attribute and, for
    scenario-specific attributes, one holder per scenario. Reparenting is not
    supported: `parent`, `level_seq_no` and the cached `level` are fixed once
    the node exists.
    """

    def __init__(
        self,
        property_set: "PropertySet",
        id: str,
        name: str,
        parent: Optional["PropertyTreeNode"] = None,
    ):
        """
        Initialize the node and link it into the tree.

        Use `PropertySet.new_node` to also register the node and declare its
        attributes.

        Params:
            property_set: Owning set that numbers the node
            id: Id, unique among the parent's children
            name: Display label
            parent: Existing parent property, None for top-level properties
        """
        self.id = id
        self.name = name
        self.property_set = property_set
        self.project = property_set.project
        self.source_file_info: Any = None

        self.parent = parent
        self.children: list["PropertyTreeNode"] = []
        self._child_set: set["PropertyTreeNode"] = set()
        self._level: int | None = None
        self.sequence_no = property_set.items + 1
        if parent is not None:
            parent.attach_child(self)
            self.level_seq_no = len(parent.children)
        else:
            self.level_seq_no = property_set.top_level_items + 1

        self._attributes: AttributeMap = {}
        self._scenario_attributes: ScenarioAttributeMaps = [
            {} for _ in range(self.project.scenario_count)
        ]

    # Tree topology

    def attach_child(self, child: "PropertyTreeNode") -> None:
        """Append `child` to the children. The child must already point to this node."""
        if child not in self._child_set:
            self._child_set.add(child)
            self.children.append(child)

    def detach_child(self, child: "PropertyTreeNode") -> None:
        """Remove `child` from the children if it is attached."""
        if child in self._child_set:
            self._child_set.discard(child)
            self.children[:] = [node for node in self.children if node is not child]

    def all_descendants(self) -> list["PropertyTreeNode"]:
        """Return this node followed by all nodes below it in depth-first order."""
        result = [self]
        for child in self.children:
            result.extend(child.all_descendants())
        return result

    def all_leaves(self) -> list["PropertyTreeNode"]:
        """Return all leaf nodes of this sub tree, left to right."""
        if self.is_leaf:
            return [self]
        result = []
        for child in self.children:
            result.extend(child.all_leaves())
        return result

    def is_descendant_of(self, ancestor: "PropertyTreeNode") -> bool:
        """Find out if this node is a direct or indirect child of `ancestor`."""
        node = self.parent
        while node is not None:
            if node is ancestor:
                return True
            node = node.parent
        return False

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_container(self) -> bool:
        return bool(self.children)

    @property
    def root(self) -> "PropertyTreeNode":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def level(self) -> int:
        """
        Depth of this node in the tree.

        Top-level properties return 0, their children 1 and so on. The value
        is computed on first access and cached.
        """
        if self._level is None:
            level = 0
            node = self.parent
            while node is not None:
                level += 1
                node = node.parent
            self._level = level
        return self._level

    def ancestry(self) -> list["PropertyTreeNode"]:
        """Return the chain of nodes from the root down to this node."""
        chain = []
        node: PropertyTreeNode | None = self
        while node is not None:
            chain.insert(0, node)
            node = node.parent
        return chain

    @property
    def full_id(self) -> str:
        if self.property_set.flat_namespace:
            return self.id
        return ".".join(node.id for node in self.ancestry())

    def wbs_indices(self) -> list[int]:
        """Return the level sequence numbers from the root down to this node."""
        return [node.level_seq_no for node in self.ancestry()]

    # Attribute registry

    def declare_attribute(self, attribute_type: "AttributeType") -> None:
        """
        Register an attribute with this node and create its empty holders.

        Scenario-specific attributes get one holder per scenario. Declaring
        an id again replaces the existing holders.

        Params:
            attribute_type: Schema entry to create holders for
        """
        attribute_id = attribute_type.id
        if attribute_type.scenario_specific:
            self._attributes.pop(attribute_id, None)
            for scenario_attributes in self._scenario_attributes:
                scenario_attributes[attribute_id] = self._new_attribute(
                    attribute_type
                )
        else:
            for scenario_attributes in self._scenario_attributes:
                scenario_attributes.pop(attribute_id, None)
            self._attributes[attribute_id] = self._new_attribute(attribute_type)

    def get(self, attribute_id: str) -> Any:
        """
        Return the value of a built-in field or a plain attribute.

        Raises:
            UnknownAttributeError: If the attribute is not declared
        """
        if attribute_id == "id":
            return self.id
        if attribute_id == "name":
            return self.name
        if attribute_id == "seqno":
            return self.sequence_no

        holder = self._attributes.get(attribute_id)
        if holder is None:
            raise UnknownAttributeError(attribute_id, self._container_label())
        return holder.get()

    def get_scenario(self, attribute_id: str, scenario_idx: int) -> Any:
        """
        Return the scenario value, falling back to the plain attribute.

        Raises:
            UnknownScenarioError: If the scenario index is out of range
            UnknownAttributeError: If the attribute is not declared
        """
        holder = self._scenario_map(scenario_idx).get(attribute_id)
        if holder is not None:
            return holder.get()
        return self.get(attribute_id)

    def set(self, attribute_id: str, value: Any) -> None:
        """
        Provide a value for a plain attribute.

        Raises:
            UnknownAttributeError: If the attribute is not declared
            AttributeValueError: If the value does not match the value type
        """
        holder = self._attributes.get(attribute_id)
        if holder is None:
            raise UnknownAttributeError(attribute_id, self._container_label())
        holder.set(value)

    def set_scenario(self, attribute_id: str, scenario_idx: int, value: Any) -> None:
        """
        Provide a value for an attribute in one scenario.

        Scenario-specific attributes are set in the given scenario. Plain
        attributes are set as well, and the value is also written to a
        scenario slot for this scenario so that it overrides the plain value
        there. The scenario slot is created from the plain attribute's type
        when it does not exist yet.

        Params:
            attribute_id: Attribute to set
            scenario_idx: Index of the scenario
            value: New value

        Raises:
            UnknownAttributeError: If the attribute is declared in neither map
            UnknownScenarioError: If the scenario index is out of range
            AttributeValueError: If the value does not match the value type
        """
        scenario_attributes = self._scenario_map(scenario_idx)
        if attribute_id not in scenario_attributes:
            holder = self._attributes.get(attribute_id)
            if holder is None:
                raise UnknownAttributeError(
                    attribute_id, self._container_label(), scenario_idx
                )
            holder.set(value)
            scenario_attributes[attribute_id] = self._new_attribute(holder.type)
        scenario_attributes[attribute_id].set(value)

    def get_attr(
        self, attribute_id: str, scenario_idx: int | None = None
    ) -> Optional["AttributeValue"]:
        """Return the raw value holder, or None if it is not declared."""
        if scenario_idx is None:
            return self._attributes.get(attribute_id)
        return self._scenario_map(scenario_idx).get(attribute_id)

    def provided(self, attribute_id: str, scenario_idx: int | None = None) -> bool:
        holder = self.get_attr(attribute_id, scenario_idx)
        return holder is not None and holder.provided

    def inherited(self, attribute_id: str, scenario_idx: int | None = None) -> bool:
        holder = self.get_attr(attribute_id, scenario_idx)
        return holder is not None and holder.inherited

    def each_attribute(self) -> Iterator["AttributeValue"]:
        yield from self._attributes.values()

    def each_scenario_attribute(self, scenario_idx: int) -> Iterator["AttributeValue"]:
        yield from self._scenario_map(scenario_idx).values()

    # Inheritance

    def inherit_attributes(self, project_attributes: Collection[str] | None = None) -> None:
        """Inherit values from the parent node, or from the project for top-level nodes."""
        from proptree.structure.inheritance import inherit_attributes

        inherit_attributes(self, project_attributes)

    def inherit_attributes_from_scenario(self) -> None:
        """Inherit scenario-specific values from parent scenarios."""
        from proptree.structure.inheritance import inherit_attributes_from_scenario

        inherit_attributes_from_scenario(self)

    def _new_attribute(self, attribute_type: "AttributeType") -> "AttributeValue":
        attribute = attribute_type.new_value(self)
        # Holders that resolve values through the project get a reference to it.
        set_project = getattr(attribute, "set_project", None)
        if set_project is not None:
            set_project(self.project)
        return attribute

    def _scenario_map(self, scenario_idx: int) -> AttributeMap:
        if not 0 <= scenario_idx < len(self._scenario_attributes):
            raise UnknownScenarioError(scenario_idx)
        return self._scenario_attributes[scenario_idx]

    def _container_label(self) -> str:
        return f"property '{self.full_id}'"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.full_id!r})"

    def __str__(self) -> str:
        from proptree.formatting import format_node

        return format_node(self)
