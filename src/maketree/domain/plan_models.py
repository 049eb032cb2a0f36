from __future__ import annotations

"""
Reconstruction Plan Models.

Defines the ordered filesystem actions derived from a parsed tree.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class ActionKind(Enum):
    """Filesystem operation requested by a plan entry."""
    MAKE_DIRECTORY = "mkdir"
    WRITE_FILE = "write"


@dataclass(frozen=True)
class Action:
    """
    A single filesystem operation.

    Attributes:
        target: Destination-relative path segments.
        kind: Operation to perform.
        content: File body (always empty for directories).
    """
    target: Tuple[str, ...]
    kind: ActionKind
    content: bytes = b""

    @property
    def rel_path(self) -> str:
        suffix = "/" if self.kind is ActionKind.MAKE_DIRECTORY else ""
        return "/".join(self.target) + suffix

    def resolve(self, destination: str) -> str:
        """Join the target segments onto an absolute destination root."""
        return os.path.join(destination, *self.target)


@dataclass(frozen=True)
class Plan:
    """
    Ordered actions rooted at an absolute destination directory.

    Attributes:
        destination: Absolute path of the destination root.
        actions: Actions in pre-order (parents before descendants).
    """
    destination: str
    actions: List[Action] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.actions)

    @property
    def directory_count(self) -> int:
        return sum(1 for a in self.actions if a.kind is ActionKind.MAKE_DIRECTORY)

    @property
    def file_count(self) -> int:
        return sum(1 for a in self.actions if a.kind is ActionKind.WRITE_FILE)
