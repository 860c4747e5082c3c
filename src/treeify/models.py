"""Data classes for treeify."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class TreeCharacters:
    """The four connector strings drawn in front of each line."""

    branch: str
    last_branch: str
    pipe: str
    space: str

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> TreeCharacters:
        """Build a character set from a mapping holding all four slots.

        Raises:
            KeyError: if one of the slots is missing.
        """
        return cls(
            branch=data["branch"],
            last_branch=data["last_branch"],
            pipe=data["pipe"],
            space=data["space"],
        )

    def blanked(self) -> TreeCharacters:
        """Return a copy with every slot replaced by spaces of equal width."""
        return TreeCharacters(
            branch=" " * len(self.branch),
            last_branch=" " * len(self.last_branch),
            pipe=" " * len(self.pipe),
            space=" " * len(self.space),
        )


DEFAULT_CHARACTERS = TreeCharacters(
    branch="├─ ",
    last_branch="└─ ",
    pipe="│  ",
    space="   ",
)

PLAIN_CHARACTERS = DEFAULT_CHARACTERS.blanked()


@dataclass(frozen=True)
class RenderOptions:
    plain: bool = False
    characters: TreeCharacters | None = None

    @classmethod
    def from_dict(cls, data: Mapping | None) -> RenderOptions:
        """Build options from a loosely-typed mapping.

        Accepts ``{"plain": True}`` and/or ``{"characters": {...}}`` where
        the characters entry is a ``TreeCharacters`` or a mapping of the
        four slots.
        """
        if not data:
            return cls()

        characters = data.get("characters")
        if characters is not None and not isinstance(characters, TreeCharacters):
            characters = TreeCharacters.from_dict(characters)

        return cls(plain=bool(data.get("plain", False)), characters=characters)

    def resolve_characters(self) -> TreeCharacters:
        """Explicit characters win over ``plain``, which wins over the default."""
        if self.characters is not None:
            return self.characters
        if self.plain:
            return PLAIN_CHARACTERS
        return DEFAULT_CHARACTERS


class NodeKind(Enum):
    LEAF = "leaf"
    BRANCH = "branch"
    GROUP = "group"  # unlabeled indent level


@dataclass(frozen=True)
class TreeNode:
    kind: NodeKind
    label: str | None = None
    children: tuple[TreeNode, ...] = ()
    is_last: bool = False


@dataclass(frozen=True)
class ParsedTree:
    root: str
    # Top-level LEAF entries are sibling roots, GROUP entries are rendered
    # at the root indent.
    entries: tuple[TreeNode, ...] = ()
