"""Build the documentation sidebar tree from a flat list of documents.

The sidebar mirrors the content folder hierarchy. :class:`SidebarTreeBuilder`
owns a mutable tree while documents are inserted; :meth:`~SidebarTreeBuilder.
get_tree` hands out a frozen :class:`TreeNode` snapshot whose children iterate
in first-insertion order, so the numbered on-disk layout still decides link
order even though the numbers never appear in keys.

Example
-------
>>> from k6_docs.sidebar import SidebarEntry, SidebarTreeBuilder, list_children
>>> builder = SidebarTreeBuilder()
>>> builder.add_node(
...     ["01 guides", "02 Using k6"],
...     "HTTP Requests",
...     SidebarEntry(path="/using-k6/http-requests", title="HTTP Requests"),
... )
>>> tree = builder.get_tree()
>>> [key for key, _node in list_children(tree)]
['guides']
"""

from __future__ import annotations

import dataclasses as dc
import types
import typing as typ

from .paths import strip_order_prefix

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class SidebarPathError(ValueError):
    """Raised when a directory path cannot be inserted into the sidebar tree."""


class MissingSectionError(LookupError):
    """Raised when a page needs a sidebar section that does not exist."""


@dc.dataclass(frozen=True, slots=True)
class SidebarEntry:
    """Link data attached to a sidebar leaf.

    Attributes
    ----------
    path : str
        Public route the sidebar link points at.
    title : str
        Link label, taken from the document's frontmatter.
    redirect : str or None
        External or internal target when the document only redirects.
    """

    path: str
    title: str
    redirect: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        """Return a JSON-ready mapping of the entry."""
        return {"path": self.path, "title": self.title, "redirect": self.redirect}


@dc.dataclass(frozen=True, slots=True)
class TreeNode:
    """Immutable sidebar node keyed by an order-stripped path segment."""

    key: str
    children: cabc.Mapping[str, TreeNode] = dc.field(
        default_factory=lambda: types.MappingProxyType({})
    )
    data: SidebarEntry | None = None

    def to_dict(self) -> dict[str, typ.Any]:
        """Serialize the subtree into plain dicts for templates and manifests."""
        return {
            "name": self.key,
            "meta": self.data.to_dict() if self.data else {},
            "children": {key: child.to_dict() for key, child in self.children.items()},
        }


@dc.dataclass(slots=True)
class _MutableNode:
    key: str
    children: dict[str, _MutableNode] = dc.field(default_factory=dict)
    data: SidebarEntry | None = None

    def freeze(self) -> TreeNode:
        frozen = {key: child.freeze() for key, child in self.children.items()}
        return TreeNode(
            key=self.key, children=types.MappingProxyType(frozen), data=self.data
        )


class SidebarTreeBuilder:
    """Accumulate documents into a nested, insertion-ordered sidebar tree."""

    root_key = "/"

    def __init__(self) -> None:
        self._root = _MutableNode(self.root_key)

    def add_node(
        self,
        directory_path: cabc.Sequence[str],
        leaf_key: str,
        data: SidebarEntry,
    ) -> None:
        """Insert ``leaf_key`` under ``directory_path`` and attach ``data``.

        Missing intermediate nodes are created on the way down, each keyed by
        its segment with the order prefix removed. Re-inserting an existing
        directory is a no-op; re-inserting a leaf replaces its data.

        Parameters
        ----------
        directory_path : Sequence[str]
            Folder segments relative to the docs root, order prefixes allowed.
        leaf_key : str
            Document name; its order prefix is stripped as well.
        data : SidebarEntry
            Link data stored on the leaf.

        Raises
        ------
        SidebarPathError
            If any segment or the leaf key is empty after stripping. The tree
            is left unchanged.
        """
        keys = [self._segment_key(segment, directory_path) for segment in directory_path]
        keys.append(self._segment_key(leaf_key, directory_path))

        node = self._root
        for key in keys:
            child = node.children.get(key)
            if child is None:
                child = _MutableNode(key)
                node.children[key] = child
            node = child
        node.data = data

    def get_tree(self) -> TreeNode:
        """Return an immutable snapshot of the tree built so far."""
        return self._root.freeze()

    @staticmethod
    def _segment_key(segment: str, directory_path: cabc.Sequence[str]) -> str:
        key = strip_order_prefix(segment.strip())
        if not key:
            joined = "/".join(directory_path)
            msg = (
                f"Empty path segment in sidebar directory '{joined}'; "
                "check the content folder layout."
            )
            raise SidebarPathError(msg)
        return key


def get_subtree(
    root: TreeNode, section_key: str, root_aliases: cabc.Collection[str] = ()
) -> TreeNode | None:
    """Return the top-level section node, the whole tree for aliases, or ``None``."""
    if section_key in root_aliases:
        return root
    return root.children.get(section_key)


def require_subtree(
    root: TreeNode, section_key: str, root_aliases: cabc.Collection[str] = ()
) -> TreeNode:
    """Return the section subtree or fail the build when it is missing.

    Raises
    ------
    MissingSectionError
        If ``section_key`` is neither a top-level key nor a root alias.
    """
    subtree = get_subtree(root, section_key, root_aliases)
    if subtree is None:
        available = ", ".join(root.children) or "<none>"
        msg = f"Unknown sidebar section '{section_key}'. Known sections: {available}"
        raise MissingSectionError(msg)
    return subtree


def list_children(node: TreeNode) -> tuple[tuple[str, TreeNode], ...]:
    """Return ``(key, node)`` pairs for the direct children of ``node`` in order."""
    return tuple(node.children.items())


def find_node(root: TreeNode, keys: cabc.Iterable[str]) -> TreeNode | None:
    """Walk ``keys`` from ``root`` and return the node reached, if any."""
    node: TreeNode | None = root
    for key in keys:
        if node is None:
            return None
        node = node.children.get(key)
    return node


__all__ = [
    "MissingSectionError",
    "SidebarEntry",
    "SidebarPathError",
    "SidebarTreeBuilder",
    "TreeNode",
    "find_node",
    "get_subtree",
    "list_children",
    "require_subtree",
]
