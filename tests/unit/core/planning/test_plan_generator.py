from __future__ import annotations

"""
Unit tests for the Plan Generator.

Verifies pre-order emission, sibling order preservation and destination
resolution.
"""

import os
from pathlib import Path

from maketree.core.parsing.parser import parse_tree_text
from maketree.core.planning.plan_generator import generate_plan
from maketree.domain.plan_models import ActionKind


def test_actions_follow_preorder(tmp_path: Path, plain_listing: str) -> None:
    """TC-01: Parents are emitted before descendants, in source order."""
    tree = parse_tree_text(plain_listing).tree
    plan = generate_plan(tree, str(tmp_path))

    assert [a.rel_path for a in plan.actions] == [
        "src/",
        "src/main.py",
        "src/utils/",
        "src/utils/helpers.py",
        "README.md",
        "run.sh",
    ]
    assert plan.directory_count == 2
    assert plan.file_count == 4
    assert len(plan) == 6


def test_every_directory_precedes_its_descendants(tmp_path: Path) -> None:
    """TC-02: For each action, all ancestor mkdir actions come earlier."""
    text = "a/\n  b/\n    c.txt\n  d/\n    e/\n      f\nz/\n  y\n"
    plan = generate_plan(parse_tree_text(text).tree, str(tmp_path))

    seen = set()
    for action in plan.actions:
        for i in range(1, len(action.target)):
            assert action.target[:i] in seen, f"{action.rel_path} before its parent"
        if action.kind is ActionKind.MAKE_DIRECTORY:
            seen.add(action.target)


def test_sibling_order_is_not_sorted(tmp_path: Path) -> None:
    """TC-03: Siblings keep listing order rather than alphabetical order."""
    plan = generate_plan(parse_tree_text("zeta/\nalpha.txt\n").tree, str(tmp_path))
    assert [a.target for a in plan.actions] == [("zeta",), ("alpha.txt",)]


def test_destination_is_made_absolute(tmp_path: Path, monkeypatch) -> None:
    """TC-04: A relative destination resolves against the working directory."""
    monkeypatch.chdir(tmp_path)
    plan = generate_plan(parse_tree_text("a\n").tree, "out")

    assert os.path.isabs(plan.destination)
    assert plan.destination == os.path.join(os.path.abspath(str(tmp_path)), "out")
    assert plan.actions[0].resolve(plan.destination) == os.path.join(plan.destination, "a")


def test_file_contents_are_attached(tmp_path: Path) -> None:
    """TC-05: Optional bodies are attached to their write actions only."""
    tree = parse_tree_text("a/\n  b.txt\nc.txt\n").tree
    plan = generate_plan(tree, str(tmp_path), contents={("a", "b.txt"): b"hello"})

    by_target = {a.target: a for a in plan.actions}
    assert by_target[("a", "b.txt")].content == b"hello"
    assert by_target[("c.txt",)].content == b""
    assert by_target[("a",)].content == b""
