from __future__ import annotations

"""
Tree Listing Data Models.

Provides the line-level and structural types shared by the parsing
subsystem: raw source lines, their classification, and the arena-backed
tree of directory/file nodes rooted at the destination directory.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Optional, Tuple

ROOT_INDEX = 0

# -----------------------------------------------------------------------------
# LINE LEVEL MODELS
# -----------------------------------------------------------------------------

class Dialect(Enum):
    """Indentation conventions accepted for tree listings."""
    TREE = "tree"
    PLAIN = "plain"


class LineKind(Enum):
    """Semantic role assigned to a single line of input."""
    DIRECTORY = "directory"
    FILE = "file"
    BLANK = "blank"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class SourceLine:
    """
    A raw line of input text.

    Attributes:
        text: Line content without the trailing newline.
        number: 1-based position in the input.
    """
    text: str
    number: int


@dataclass(frozen=True)
class ClassifiedLine:
    """
    A source line after classification.

    Attributes:
        kind: Semantic role of the line.
        depth: Nesting level (0 for entries directly under the destination).
        name: Entry name with connectors, indentation and type markers removed.
            Plain listings may give a relative path here.
        number: 1-based line number of the originating SourceLine.
        marked: True when the kind was decided by an explicit marker.
    """
    kind: LineKind
    depth: int = 0
    name: str = ""
    number: int = 0
    marked: bool = True

    @property
    def is_entry(self) -> bool:
        return self.kind in (LineKind.DIRECTORY, LineKind.FILE)

    @property
    def segments(self) -> Tuple[str, ...]:
        """Path segments of the name; more than one for `src/main.rs` style entries."""
        return tuple(self.name.split("/"))

# -----------------------------------------------------------------------------
# STRUCTURAL MODELS
# -----------------------------------------------------------------------------

@dataclass
class Node:
    """
    A directory or file entry stored in a FileTree arena.

    Attributes:
        index: Position of the node inside the arena.
        name: Entry name (empty for the synthetic root).
        is_directory: Whether the entry is a directory.
        depth: Nesting depth; the root is 0.
        parent: Arena index of the owning directory (None for the root).
        children: Arena indices of the children, in source order.
        marked: Whether the node kind came from an explicit marker.
    """
    index: int
    name: str
    is_directory: bool
    depth: int
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)
    marked: bool = True


class FileTree:
    """
    Arena of nodes rooted at a synthetic destination node.

    Nodes are referenced by integer index; the root always sits at
    ROOT_INDEX and owns the whole hierarchy.
    """

    def __init__(self) -> None:
        self.nodes: List[Node] = [Node(index=ROOT_INDEX, name="", is_directory=True, depth=0)]

    @property
    def root(self) -> Node:
        return self.nodes[ROOT_INDEX]

    def __len__(self) -> int:
        """Number of entries, excluding the synthetic root."""
        return len(self.nodes) - 1

    def add_child(self, parent_index: int, name: str, is_directory: bool, marked: bool = True) -> int:
        """
        Append a new node as the last child of a directory.

        Args:
            parent_index: Arena index of the owning directory.
            name: Entry name.
            is_directory: Kind of the new entry.
            marked: Whether the kind came from an explicit marker.

        Returns:
            int: Arena index of the new node.

        Raises:
            ValueError: If the parent is a file.
        """
        parent = self.nodes[parent_index]
        if not parent.is_directory:
            raise ValueError(f"Cannot attach '{name}' under file '{parent.name}'")

        index = len(self.nodes)
        self.nodes.append(Node(
            index=index,
            name=name,
            is_directory=is_directory,
            depth=parent.depth + 1,
            parent=parent_index,
            marked=marked,
        ))
        parent.children.append(index)
        return index

    def promote_to_directory(self, index: int) -> None:
        """Turn a childless file node into a directory."""
        node = self.nodes[index]
        node.is_directory = True
        node.marked = True

    def children(self, index: int = ROOT_INDEX) -> List[Node]:
        return [self.nodes[i] for i in self.nodes[index].children]

    def path_of(self, index: int) -> Tuple[str, ...]:
        """Return the root-relative path segments of a node."""
        segments: List[str] = []
        node = self.nodes[index]
        while node.parent is not None:
            segments.append(node.name)
            node = self.nodes[node.parent]
        return tuple(reversed(segments))

    def walk_preorder(self) -> Iterator[Node]:
        """Yield every entry (root excluded) parents first, siblings in order."""
        stack = list(reversed(self.root.children))
        while stack:
            node = self.nodes[stack.pop()]
            yield node
            stack.extend(reversed(node.children))

    def shape(self, index: int = ROOT_INDEX) -> Tuple[Any, ...]:
        """Ordered structural form: ((name, is_directory, children_shape), ...)."""
        return tuple(
            (child.name, child.is_directory, self.shape(child.index))
            for child in self.children(index)
        )

    def canonical(self, index: int = ROOT_INDEX) -> Tuple[Any, ...]:
        """Structural form with siblings sorted by name."""
        return tuple(sorted(
            (child.name, child.is_directory, self.canonical(child.index))
            for child in self.children(index)
        ))
