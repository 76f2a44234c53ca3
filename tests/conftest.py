"""
Shared test fixtures and utilities for the proptree test suite.
"""

import pytest

from proptree import (
    AttributeType,
    ListAttribute,
    Project,
    PropertySet,
    ReferenceAttribute,
)


def task_attribute_types() -> list[AttributeType]:
    """Schema used by the `tasks` fixture.

    Covers every combination the inheritance passes distinguish: plain or
    scenario specific, inheritable or not, whitelisted for project
    inheritance or not.
    """
    return [
        AttributeType(id="rate", value_type=float, default=0.0, inheritable=True),
        AttributeType(id="note", value_type=str),
        AttributeType(id="flavor", value_type=str, inheritable=True),
        AttributeType(
            id="vacation",
            value_class=ListAttribute,
            value_type=list[str],
            inheritable=True,
        ),
        AttributeType(id="manager", value_class=ReferenceAttribute),
        AttributeType(
            id="priority",
            value_type=int,
            default=500,
            inheritable=True,
            scenario_specific=True,
        ),
        AttributeType(
            id="effort", value_type=float, default=0.0, scenario_specific=True
        ),
        AttributeType(
            id="color", value_type=str, inheritable=True, scenario_specific=True
        ),
    ]


@pytest.fixture
def project():
    """Project with the default `plan` scenario and a `delayed` child scenario."""
    project = Project("prj", "Test Project")
    project.add_scenario("delayed", "Delayed", parent_id="plan")
    return project


@pytest.fixture
def tasks(project):
    """Empty task set carrying the full test schema."""
    tasks = PropertySet(project, "tasks")
    for attribute_type in task_attribute_types():
        tasks.add_attribute_type(attribute_type)
    return tasks


@pytest.fixture
def tree(tasks):
    """Small task tree.

    r
    ├── c1
    │   ├── g1
    │   └── g2
    └── c2
    s
    """
    r = tasks.new_node("r", "Root")
    c1 = tasks.new_node("c1", "Child 1", r)
    g1 = tasks.new_node("g1", "Grandchild 1", c1)
    g2 = tasks.new_node("g2", "Grandchild 2", c1)
    c2 = tasks.new_node("c2", "Child 2", r)
    s = tasks.new_node("s", "Second Root")
    return {"r": r, "c1": c1, "g1": g1, "g2": g2, "c2": c2, "s": s}
