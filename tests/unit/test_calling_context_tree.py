"""
Unit tests for CallTree

This module contains tests for the weighted prefix tree built from stacks.
"""

import pytest
from profmd.perf_data_struct.dynamic.profile.calling_context_tree import CallTree, ROOT_NAME


def _names(nodes):
    return [node.getName() for node in nodes]


class TestCallTreeCreation:
    """Test CallTree creation and initialization."""

    def test_new_tree_has_root(self):
        """Test that a new tree holds only its root."""
        tree = CallTree()

        assert tree.getRoot() is not None
        assert tree.getRoot().getName() == ROOT_NAME
        assert tree.getNodeCount() == 1
        assert tree.getTotalSamples() == 0


class TestCallTreeInsertion:
    """Test inserting stacks."""

    def test_insert_single_stack(self):
        """Test that every frame of a stack gets its weight."""
        tree = CallTree()
        tree.insertStack(["main", "run", "work"], 4)

        root = tree.getRoot()
        main = tree.getChild(root.getId(), "main")
        run = tree.getChild(main.getId(), "run")
        work = tree.getChild(run.getId(), "work")

        assert tree.getNodeCount() == 4
        assert root.getSamples() == 4
        assert main.getSamples() == 4
        assert run.getSamples() == 4
        assert work.getSamples() == 4

    def test_inclusive_weights(self):
        """Test that shared prefixes accumulate weight."""
        tree = CallTree()
        tree.insertStack(["main", "a"], 3)
        tree.insertStack(["main", "b"], 5)
        tree.insertStack(["other"], 2)

        root = tree.getRoot()
        main = tree.getChild(root.getId(), "main")

        assert tree.getTotalSamples() == 10
        assert main.getSamples() == 8
        assert tree.getChild(main.getId(), "a").getSamples() == 3
        assert tree.getChild(main.getId(), "b").getSamples() == 5
        assert tree.getChild(root.getId(), "other").getSamples() == 2

    def test_frames_trimmed_and_empty_frames_skipped(self):
        """Test that blank frames do not create nodes."""
        tree = CallTree()
        tree.insertStack([" main ", "", "  ", "work"], 2)

        main = tree.getChild(tree.getRoot().getId(), "main")
        assert main is not None
        assert _names(tree.getChildren(main.getId())) == ["work"]
        assert tree.getNodeCount() == 3

    def test_empty_stack_ignored(self):
        """Test that a stack without frames leaves the tree untouched."""
        tree = CallTree()
        tree.insertStack(["", " "], 7)

        assert tree.getTotalSamples() == 0
        assert tree.getNodeCount() == 1

    def test_non_positive_samples_ignored(self):
        """Test that non-positive counts are ignored."""
        tree = CallTree()
        tree.insertStack(["main"], 0)

        assert tree.getTotalSamples() == 0
        assert tree.getNodeCount() == 1


class TestCallTreeQueries:
    """Test sorted children and depth."""

    def test_sorted_children_heaviest_first(self):
        """Test that children are ordered by weight."""
        tree = CallTree()
        tree.insertStack(["a"], 1)
        tree.insertStack(["b"], 5)
        tree.insertStack(["c"], 3)

        assert _names(tree.getSortedChildren(tree.getRoot().getId())) == ["b", "c", "a"]

    def test_sorted_children_ties_keep_insertion_order(self):
        """Test that equal weights keep the order frames were first seen."""
        tree = CallTree()
        tree.insertStack(["x"], 2)
        tree.insertStack(["y"], 2)
        tree.insertStack(["z"], 2)

        assert _names(tree.getSortedChildren(tree.getRoot().getId())) == ["x", "y", "z"]

    def test_clear_keeps_fresh_root(self):
        """Test clearing the tree."""
        tree = CallTree()
        tree.insertStack(["a", "b"], 1)

        tree.clear()
        assert tree.getNodeCount() == 1
        assert tree.getRoot().getName() == ROOT_NAME
        assert tree.getTotalSamples() == 0
