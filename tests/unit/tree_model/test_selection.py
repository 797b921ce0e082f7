"""Cascading selection tests for the live tree and filtered views.

Checks the directory AND-of-children rule after every kind of mutation.
"""

from __future__ import annotations

import unittest
from pathlib import Path

from filecat.tree_model import (
    TreeNode,
    all_selected,
    collect_selected_files,
    count_selected_files,
    file_extension,
    filter_tree,
    set_all_expanded,
    toggle_all,
    toggle_selection,
)

ROOT = Path("/work/project")


def _node(relative_path: str, is_dir: bool = False) -> TreeNode:
    parts = relative_path.split("/")
    return TreeNode(
        path=ROOT / relative_path,
        relative_path=relative_path,
        name=parts[-1],
        is_dir=is_dir,
        depth=len(parts) - 1,
    )


def _scenario_tree() -> tuple[list[TreeNode], dict[str, TreeNode]]:
    """Return ``a.ts``, ``src/main.ts``, ``src/lib/x.ts`` with collapsed dirs."""
    a_node = _node("a.ts")
    src = _node("src", is_dir=True)
    lib = _node("src/lib", is_dir=True)
    main = _node("src/main.ts")
    x_node = _node("src/lib/x.ts")
    src.add_child(lib)
    src.add_child(main)
    lib.add_child(x_node)
    nodes = {"a.ts": a_node, "src": src, "lib": lib, "main.ts": main, "x.ts": x_node}
    return [a_node, src], nodes


def _assert_invariant(test: unittest.TestCase, nodes: list[TreeNode]) -> None:
    for node in nodes:
        if node.is_dir and node.children:
            test.assertEqual(node.selected, all(child.selected for child in node.children), node.relative_path)
            _assert_invariant(test, node.children)


class ToggleSelectionTests(unittest.TestCase):
    def test_parent_follows_children(self) -> None:
        tree, nodes = _scenario_tree()
        nodes["src"].expanded = True

        toggle_selection(nodes["main.ts"])
        self.assertTrue(nodes["main.ts"].selected)
        self.assertFalse(nodes["src"].selected)

        toggle_selection(nodes["lib"])
        self.assertTrue(nodes["x.ts"].selected)
        self.assertTrue(nodes["lib"].selected)
        self.assertTrue(nodes["src"].selected)
        _assert_invariant(self, tree)

    def test_directory_toggle_cascades_to_descendants(self) -> None:
        tree, nodes = _scenario_tree()

        toggle_selection(nodes["src"])
        self.assertTrue(all(nodes[name].selected for name in ("src", "lib", "main.ts", "x.ts")))

        toggle_selection(nodes["x.ts"])
        self.assertFalse(nodes["x.ts"].selected)
        self.assertFalse(nodes["lib"].selected)
        self.assertFalse(nodes["src"].selected)
        self.assertTrue(nodes["main.ts"].selected)
        _assert_invariant(self, tree)

    def test_double_toggle_of_leaf_or_uniform_directory_restores_every_flag(self) -> None:
        tree, nodes = _scenario_tree()
        toggle_selection(nodes["main.ts"])
        before = {name: node.selected for name, node in nodes.items()}

        for name in ("lib", "x.ts", "a.ts", "main.ts"):
            with self.subTest(name=name):
                toggle_selection(nodes[name])
                toggle_selection(nodes[name])
                self.assertEqual({key: node.selected for key, node in nodes.items()}, before)

    def test_forced_value_is_idempotent(self) -> None:
        tree, nodes = _scenario_tree()

        toggle_selection(nodes["lib"], True)
        toggle_selection(nodes["lib"], True)

        self.assertTrue(nodes["lib"].selected)
        self.assertTrue(nodes["x.ts"].selected)
        self.assertFalse(nodes["src"].selected)
        _assert_invariant(self, tree)


class ToggleAllAndCollectTests(unittest.TestCase):
    def test_toggle_all_then_collect_returns_every_leaf_sorted(self) -> None:
        tree, _nodes = _scenario_tree()

        toggle_all(tree, True)

        self.assertTrue(all_selected(tree))
        files = collect_selected_files(tree)
        self.assertEqual([item.relative_path for item in files], ["a.ts", "src/lib/x.ts", "src/main.ts"])
        self.assertEqual(files[0].absolute_path, ROOT / "a.ts")
        self.assertEqual(files[0].extension, "ts")
        self.assertEqual(count_selected_files(tree), 3)

        toggle_all(tree, False)
        self.assertFalse(all_selected(tree))
        self.assertEqual(collect_selected_files(tree), [])
        self.assertEqual(count_selected_files(tree), 0)

    def test_collect_makes_paths_relative_to_base(self) -> None:
        tree, nodes = _scenario_tree()
        toggle_selection(nodes["main.ts"])

        files = collect_selected_files(tree, base=ROOT.parent)

        self.assertEqual([item.relative_path for item in files], ["project/src/main.ts"])

    def test_all_selected_sees_partially_selected_subtree(self) -> None:
        tree, nodes = _scenario_tree()
        toggle_selection(nodes["a.ts"])
        toggle_selection(nodes["main.ts"])

        self.assertFalse(all_selected(tree))


class FilteredSelectionTests(unittest.TestCase):
    def test_toggling_filtered_directory_only_touches_retained_descendants(self) -> None:
        tree, nodes = _scenario_tree()
        shadow_src = filter_tree(tree, "main")[0]

        toggle_selection(shadow_src)

        self.assertTrue(nodes["main.ts"].selected)
        self.assertFalse(nodes["x.ts"].selected)
        self.assertFalse(nodes["src"].selected)
        self.assertTrue(shadow_src.selected)
        _assert_invariant(self, tree)

        toggle_selection(shadow_src)
        self.assertFalse(nodes["main.ts"].selected)
        self.assertFalse(shadow_src.selected)

    def test_selecting_leaf_through_filtered_view_updates_live_ancestors(self) -> None:
        tree, nodes = _scenario_tree()
        toggle_selection(nodes["main.ts"])
        shadow_src = filter_tree(tree, "x.ts")[0]
        shadow_lib = shadow_src.children[0]

        toggle_selection(shadow_lib.children[0])

        self.assertTrue(nodes["x.ts"].selected)
        self.assertTrue(nodes["lib"].selected)
        self.assertTrue(nodes["src"].selected)


class ExpandAndExtensionTests(unittest.TestCase):
    def test_set_all_expanded_reaches_nested_directories(self) -> None:
        tree, nodes = _scenario_tree()

        set_all_expanded(tree, True)
        self.assertTrue(nodes["src"].expanded)
        self.assertTrue(nodes["lib"].expanded)

        set_all_expanded(tree, False)
        self.assertFalse(nodes["src"].expanded)
        self.assertFalse(nodes["lib"].expanded)

    def test_file_extension_uses_text_after_last_dot(self) -> None:
        self.assertEqual(file_extension("archive.tar.gz"), "gz")
        self.assertEqual(file_extension("Makefile"), "")
        self.assertEqual(file_extension(".gitignore"), "gitignore")


if __name__ == "__main__":
    unittest.main()
