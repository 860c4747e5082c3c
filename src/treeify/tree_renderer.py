"""Text tree rendering."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from treeify.models import NodeKind, RenderOptions, TreeCharacters, TreeNode
from treeify.tree_builder import parse_tree

logger = logging.getLogger(__name__)


def render(items: Any, options: RenderOptions | Mapping | None = None) -> str:
    """Render a nested list of strings as a text tree.

    The first element is the root line. A string followed by a list holds
    that list as its children; a list with no string in front of it is an
    unlabeled extra indent level. Other values are skipped.

    Example:
        >>> print(render(["root", ["child1", "child2", ["grandchild"]]]))
        root
        ├─ child1
        └─ child2
           └─ grandchild

    Args:
        items: the encoded tree, e.g. ``["root", ["a", "b"]]``
        options: ``RenderOptions`` or a mapping such as ``{"plain": True}``

    Returns:
        One line per node joined with newlines, or "" for empty or
        non-list input.

    Raises:
        InvalidRootError: if the first element is not a string.
    """
    characters = _resolve_options(options).resolve_characters()

    tree = parse_tree(items)
    if tree is None:
        return ""

    lines: list[str] = [tree.root]
    for entry in tree.entries:
        if entry.kind is NodeKind.GROUP:
            _render_nodes(entry.children, lines, prefix="", characters=characters)
        else:
            # Sibling roots are printed without a connector
            lines.append(entry.label)

    logger.debug("Rendered tree with %d lines", len(lines))
    return "\n".join(lines)


def _resolve_options(options: RenderOptions | Mapping | None) -> RenderOptions:
    if options is None:
        return RenderOptions()
    if isinstance(options, RenderOptions):
        return options
    if isinstance(options, Mapping):
        return RenderOptions.from_dict(options)
    raise TypeError(
        f"options must be RenderOptions, a mapping or None, not {type(options).__name__}"
    )


def _render_nodes(
    nodes: tuple[TreeNode, ...],
    lines: list[str],
    prefix: str,
    characters: TreeCharacters,
) -> None:
    """Recursively render one sibling list into lines."""
    for node in nodes:
        extension = characters.space if node.is_last else characters.pipe

        if node.kind is NodeKind.GROUP:
            _render_nodes(node.children, lines, prefix + extension, characters)
            continue

        connector = characters.last_branch if node.is_last else characters.branch
        lines.append(f"{prefix}{connector}{node.label}")

        if node.kind is NodeKind.BRANCH:
            _render_nodes(node.children, lines, prefix + extension, characters)
