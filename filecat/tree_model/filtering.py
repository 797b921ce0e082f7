"""Query-filtered shadow view of the selection tree."""

from __future__ import annotations

from .types import FilteredNode, TreeNode, TreeRow


def node_matches(node: TreeNode, folded_query: str) -> bool:
    """Return whether name or relative path contains the case-folded query."""
    return folded_query in node.name.casefold() or folded_query in node.relative_path.casefold()


def filter_tree(nodes: list[TreeNode], query: str) -> list[TreeRow]:
    """Return the rows of ``nodes`` retained by ``query``.

    Matching files are returned as-is. A directory is retained when it matches
    itself or keeps at least one descendant, and is wrapped in an expanded
    ``FilteredNode`` holding only the retained children. The live tree is never
    modified. An empty query returns ``nodes`` unchanged.
    """
    if not query:
        return nodes
    folded_query = query.casefold()

    def filter_nodes(items: list[TreeNode]) -> list[TreeRow]:
        """Recursively keep matches and the directories that lead to them."""
        retained: list[TreeRow] = []
        for item in items:
            if item.is_dir:
                children = filter_nodes(item.children)
                if children or node_matches(item, folded_query):
                    retained.append(FilteredNode(source=item, children=children, expanded=True))
            elif node_matches(item, folded_query):
                retained.append(item)
        return retained

    return filter_nodes(nodes)
