"""Human-readable dumps of properties for debugging."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from proptree.core.tree_node import PropertyTreeNode

SEPARATOR = "-" * 75


def indent(tag: str, text: str) -> str:
    """Prefix `text` with `tag` and align continuation lines under the first one."""
    return tag + text.replace("\n", "\n" + " " * len(tag)) + "\n"


def format_node(node: "PropertyTreeNode") -> str:
    """
    Describe a property and all attribute values that differ from the defaults.

    Params:
        node: Property to describe

    Returns:
        Multi-line text: header, sequence number, parent, plain attributes,
        one section per scenario with differing values, separator line
    """
    project = node.project

    res = f'{type(node).__name__} {node.full_id} "{node.name}"\n'
    res += f"  Sequence No: {node.sequence_no}\n"
    if node.parent is not None:
        res += f"  Parent: {node.parent.get('id')}\n"

    for attr in sorted(node.each_attribute(), key=lambda a: a.id):
        if attr.get() != attr.empty_value():
            res += indent(f"  {attr.id}: ", attr.to_str())

    for scenario_idx in range(project.scenario_count):
        header_shown = False
        for attr in sorted(node.each_scenario_attribute(scenario_idx), key=lambda a: a.id):
            if attr.get() == attr.empty_value():
                continue
            if not header_shown:
                scenario_id = project.scenario(scenario_idx).get("id")
                res += f"  Scenario {scenario_id} ({scenario_idx})\n"
                header_shown = True
            res += indent(f"    {attr.id}: ", attr.to_str())

    return res + SEPARATOR + "\n"
