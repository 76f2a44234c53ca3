"""
Configuration for property sets.

Top-level properties have no parent to inherit from, so a small fixed set of
project-wide settings is back-filled into them instead. Only these attribute
ids are ever looked up on the project during structural inheritance.
"""

from attrs import field, frozen

DEFAULT_PROJECT_INHERITED_ATTRIBUTES = frozenset(
    {"priority", "projectid", "rate", "vacation", "workinghours"}
)


@frozen
class PropertySetConfig:
    """Settings shared by all properties of one property set.

    Params:
        flat_namespace: Property ids are unique across the whole set, so full
            ids are the bare ids instead of dotted ancestor paths.
        project_inherited_attributes: Attribute ids that top-level properties
            inherit from the project.
    """

    flat_namespace: bool = False
    project_inherited_attributes: frozenset[str] = field(
        default=DEFAULT_PROJECT_INHERITED_ATTRIBUTES, converter=frozenset
    )
