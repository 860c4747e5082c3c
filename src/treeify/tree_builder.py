"""Parse the flat encoded input into a tree of tagged nodes."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from treeify.models import NodeKind, ParsedTree, TreeNode

logger = logging.getLogger(__name__)


class InvalidRootError(ValueError):
    """Raised when the first element of the input is not a string."""

    def __init__(self) -> None:
        super().__init__("First element must be a string")


def is_group(value: Any) -> bool:
    """Lists and tuples are groups; strings never are."""
    return isinstance(value, (list, tuple))


def parse_tree(items: Any) -> ParsedTree | None:
    """Parse top-level input into a ParsedTree.

    Returns None when *items* is not a list/tuple or is empty.

    Raises:
        InvalidRootError: if the first element is not a string.
    """
    if not is_group(items) or not items:
        return None

    root = items[0]
    if not isinstance(root, str):
        raise InvalidRootError()

    entries: list[TreeNode] = []
    for index, item in enumerate(items[1:], start=1):
        if isinstance(item, str):
            entries.append(TreeNode(NodeKind.LEAF, label=item))
        elif is_group(item):
            entries.append(TreeNode(NodeKind.GROUP, children=parse_group(item)))
        else:
            _log_skipped(item, index)

    return ParsedTree(root=root, entries=tuple(entries))


def parse_group(nodes: Sequence[Any]) -> tuple[TreeNode, ...]:
    """Parse one sibling list, tagging each node with its last/not-last status.

    A string followed by a group becomes a BRANCH owning that group. A group
    not consumed that way becomes an unlabeled GROUP level.
    """
    parent_indices = find_parent_indices(nodes)
    last_string = last_string_index(nodes)

    result: list[TreeNode] = []
    i = 0
    while i < len(nodes):
        node = nodes[i]

        if i in parent_indices:
            result.append(
                TreeNode(
                    NodeKind.BRANCH,
                    label=node,
                    children=parse_group(nodes[i + 1]),
                    is_last=i == last_string,
                )
            )
            # label and its children group
            i += 2
        elif isinstance(node, str):
            result.append(
                TreeNode(NodeKind.LEAF, label=node, is_last=i == last_string)
            )
            i += 1
        elif is_group(node):
            # Unlabeled levels are last only by position
            result.append(
                TreeNode(
                    NodeKind.GROUP,
                    children=parse_group(node),
                    is_last=i == len(nodes) - 1,
                )
            )
            i += 1
        else:
            _log_skipped(node, i)
            i += 1

    return tuple(result)


def find_parent_indices(nodes: Sequence[Any]) -> set[int]:
    """Return the indices of strings immediately followed by a group."""
    return {
        i
        for i in range(len(nodes) - 1)
        if isinstance(nodes[i], str) and is_group(nodes[i + 1])
    }


def last_string_index(nodes: Sequence[Any]) -> int:
    """Return the index of the final string in *nodes*, or -1 if there is none.

    A string at index ``i`` is the last visible sibling iff no string follows
    it, i.e. iff ``i`` equals this index. Groups in between do not count.
    """
    for i in range(len(nodes) - 1, -1, -1):
        if isinstance(nodes[i], str):
            return i
    return -1


def _log_skipped(value: Any, index: int) -> None:
    logger.debug(
        "Skipping unsupported element of type %s at index %d",
        type(value).__name__,
        index,
    )
