"""
HydraNode - a single vertex of the hydra tree.

Children are owned by their parent; the parent link is a weak reference used
only for walking upwards (to the grandparent, to the root).
"""

import weakref
from typing import Iterable, Iterator, List, Optional

from .profiling import profile


class HydraNode:
    __slots__ = ('children', '_parent_ref', 'depth', 'label', 'x', 'y',
                 'subtree_width', 'size', '__weakref__')

    def __init__(self, children: Optional[Iterable['HydraNode']] = None):
        self.children: List['HydraNode'] = []
        self._parent_ref = None
        self.depth = 0
        # Display fields, rewritten by every layout pass
        self.label = -1
        self.x = 0.0
        self.y = 0.0
        self.subtree_width = 0.0
        self.size = 1

        for child in children or ():
            attach(self, child)

    @property
    def parent(self) -> Optional['HydraNode']:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, node: Optional['HydraNode']):
        self._parent_ref = weakref.ref(node) if node is not None else None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return not self.children and self.parent is not None

    def __repr__(self) -> str:
        return f"HydraNode(label={self.label}, depth={self.depth}, children={len(self.children)})"


def is_root(node: HydraNode) -> bool:
    return node.parent is None


def is_leaf(node: HydraNode) -> bool:
    """A leaf has no children and is not the root."""
    return not node.children and node.parent is not None


def attach(parent: HydraNode, child: HydraNode):
    child.parent = parent
    parent.children.append(child)


def detach(child: HydraNode):
    """Remove a node from its parent's children and clear its parent link."""
    parent = child.parent
    if parent is None:
        return
    parent.children = [c for c in parent.children if c is not child]
    child.parent = None


def build(*children: HydraNode) -> HydraNode:
    return HydraNode(children)


def iter_preorder(root: HydraNode) -> Iterator[HydraNode]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def assign_depths(root: HydraNode):
    """Set depth=0 at the root and depth+1 per level below it."""
    root.depth = 0
    stack = [root]
    while stack:
        node = stack.pop()
        for child in node.children:
            child.depth = node.depth + 1
            stack.append(child)


def relabel(root: HydraNode) -> int:
    """Assign pre-order ranks to `label`. Returns the node count."""
    count = 0
    for node in iter_preorder(root):
        node.label = count
        count += 1
    return count


def count_nodes(root: HydraNode) -> int:
    return sum(1 for _ in iter_preorder(root))


def subtree_size(node: HydraNode) -> int:
    return count_nodes(node)


def leaves(root: HydraNode) -> List[HydraNode]:
    return [n for n in iter_preorder(root) if is_leaf(n)]


def find_root(node: HydraNode) -> HydraNode:
    current = node
    while current.parent is not None:
        current = current.parent
    return current


@profile
def clone_subtree(node: HydraNode) -> HydraNode:
    """
    Structural deep copy of the subtree rooted at `node`.

    Every node of the copy is freshly allocated, child order is kept and parent
    links point into the copy. The returned root is detached.
    Recursion depth equals the subtree height.
    """
    return _clone(node)


def _clone(node: HydraNode) -> HydraNode:
    copy = HydraNode()
    copy.depth = node.depth
    for child in node.children:
        attach(copy, _clone(child))
    return copy


def shape(node: HydraNode) -> tuple:
    """Nested tuple of child shapes, handy for structural comparisons."""
    return tuple(shape(c) for c in node.children)
