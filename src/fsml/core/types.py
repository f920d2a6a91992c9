"""Core type definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, TypedDict

# Drop position relative to a target entry
Position = Literal["before", "after", "inside"]

POSITIONS: tuple[Position, ...] = ("before", "after", "inside")


class ReorderCase(Enum):
    """Reorder scenario, selected once per plan."""

    # Source moves to a higher position number within its directory
    SAME_DIR_DOWN = "same_dir_down"
    # Source moves to a lower position number within its directory
    SAME_DIR_UP = "same_dir_up"
    CROSS_DIR_OR_UNNUMBERED = "cross_dir_or_unnumbered"
    NO_OP = "no_op"


class PathDescriptorDict(TypedDict):
    """Dictionary representation of a path descriptor."""

    path: str
    order: int | None
    name: str
    title: str
    extension: str
    isFolder: bool
    isHidden: bool
    isSystem: bool
    depth: int
    parent: str


@dataclass(frozen=True)
class PathDescriptor:
    """Structural attributes of a single FSML path."""

    path: str
    order: int | None
    name: str
    title: str
    extension: str
    is_folder: bool
    is_hidden: bool
    is_system: bool
    depth: int
    parent: str

    def to_dict(self) -> PathDescriptorDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path,
            "order": self.order,
            "name": self.name,
            "title": self.title,
            "extension": self.extension,
            "isFolder": self.is_folder,
            "isHidden": self.is_hidden,
            "isSystem": self.is_system,
            "depth": self.depth,
            "parent": self.parent,
        }


class NavNodeDict(TypedDict):
    """Dictionary representation of a navigation node."""

    path: str
    title: str
    order: int | None
    isFolder: bool
    hasIndex: bool
    children: list[NavNodeDict]


@dataclass
class NavNode:
    """Navigation node with children for UI tree."""

    path: str
    title: str
    order: int | None
    is_folder: bool = False
    has_index: bool = False
    children: list[NavNode] = field(default_factory=list)

    def to_dict(self) -> NavNodeDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path,
            "title": self.title,
            "order": self.order,
            "isFolder": self.is_folder,
            "hasIndex": self.has_index,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass(frozen=True)
class Rename:
    """Single rename operation."""

    source: str
    target: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"from": self.source, "to": self.target}


class ReorderPlanDict(TypedDict):
    """Dictionary representation of a reorder plan."""

    newPath: str
    renames: list[dict[str, str]]


@dataclass(frozen=True)
class ReorderPlan:
    """Ordered rename batch that repositions one entry.

    Renames must be applied strictly in list order.
    """

    new_path: str
    renames: list[Rename] = field(default_factory=list)
    case: ReorderCase | None = None

    def to_dict(self) -> ReorderPlanDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "newPath": self.new_path,
            "renames": [rename.to_dict() for rename in self.renames],
        }
