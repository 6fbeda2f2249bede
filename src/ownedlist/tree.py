"""N-ary tree built bottom-up from subtrees."""

from typing import Any, Generic, Iterator

from ownedlist.closures import MapperLike, Mapper, Predicate, PredicateLike, as_mapper, as_predicate
from ownedlist.linkedlist import LinkedList
from ownedlist.types import T, U

_INDENT = "   "


class _TreeNode(Generic[T]):
    """A value plus the ordered list of its children, owned by this node."""

    __slots__ = ("value", "children")

    def __init__(self, value: T) -> None:
        self.value = value
        self.children: LinkedList[_TreeNode[T]] = LinkedList(strict=True)


class Tree(Generic[T]):
    """
    Tree in which every element has one parent and any number of children.

    Subtrees handed to or returned from a tree are views, not copies: they
    keep referring to nodes of the tree they were attached to.
    """

    def __init__(self, root: T, *children: T) -> None:
        """
        Initialize a tree with a root value and optional depth-one children.

        Args:
            root: The value at the root of the tree.
            children: Values added as immediate children of the root, in order.
        """
        self._root: _TreeNode[T] = _TreeNode(root)
        for child in children:
            self.add_child(child)

    @classmethod
    def of(cls, root: T, *subtrees: "Tree[T]") -> "Tree[T]":
        """Create a tree whose root's children are the roots of the given subtrees."""
        tree = cls(root)
        for subtree in subtrees:
            tree.add_subtree(subtree)
        return tree

    @classmethod
    def _wrap(cls, node: _TreeNode[T]) -> "Tree[T]":
        tree = cls.__new__(cls)
        tree._root = node
        return tree

    @property
    def root(self) -> T:
        return self._root.value

    @root.setter
    def root(self, value: T) -> None:
        self._root.value = value

    def subtrees(self) -> list["Tree[T]"]:
        """Return the subtrees attached to the root. These are views, not copies."""
        return [Tree._wrap(node) for node in self._root.children]

    def add_child(self, child: T, index: int | None = None) -> None:
        """
        Add a value as an immediate child of the root.

        Args:
            child: The value to add.
            index: Position among the existing children, 0 to their count
                inclusive. Appends after the last child when omitted.

        Raises:
            IndexOutOfRangeError: If ``index`` is out of range.
        """
        self._attach(_TreeNode(child), index)

    def add_subtree(self, subtree: "Tree[T]", index: int | None = None) -> None:
        """
        Attach a subtree's root as an immediate child of this tree's root.

        The subtree is not copied. Raises IndexOutOfRangeError like add_child().
        """
        self._attach(subtree._root, index)

    def _attach(self, node: _TreeNode[T], index: int | None) -> None:
        if index is None:
            self._root.children.add_last(node)
        else:
            self._root.children.add(node, index)

    def remove_if(self, selector: PredicateLike) -> None:
        """
        Remove every element below the root that matches a predicate.

        The children of a removed element are promoted to take its place.
        The root itself is never removed. The predicate is released afterwards.
        """
        predicate = as_predicate(selector)
        try:
            _remove_matching(predicate, self._root)
        finally:
            predicate.release()

    def contains(self, selector: PredicateLike) -> bool:
        """Return True if any element, the root included, matches a predicate."""
        predicate = as_predicate(selector)
        try:
            return _any_matching(predicate, self._root)
        finally:
            predicate.release()

    def map(self, function: MapperLike) -> "Tree[Any]":
        """Return a new tree of the same shape with every value mapped. This tree is unchanged."""
        mapper = as_mapper(function)
        try:
            return Tree._wrap(_map_node(mapper, self._root))
        finally:
            mapper.release()

    def to_list(self) -> LinkedList[T]:
        """Return every value in depth-first pre-order."""
        values: LinkedList[T] = LinkedList()
        _collect(self._root, values)
        return values

    def copy(self) -> "Tree[T]":
        """Shallow copy: new nodes, same values."""
        return Tree._wrap(_copy_node(self._root))

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        return _nodes_equal(self._root, other._root)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        lines: list[str] = []
        _render(self._root, "", lines)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._root.value!r}, <{len(self._root.children)} subtrees>)"


def _remove_matching(predicate: Predicate, node: _TreeNode[Any]) -> None:
    for child in node.children:
        _remove_matching(predicate, child)

    kept: LinkedList[_TreeNode[Any]] = LinkedList(strict=True)
    for child in node.children:
        if predicate.test(child.value):
            kept.add_all(child.children)
        else:
            kept.add_last(child)
    node.children = kept


def _any_matching(predicate: Predicate, node: _TreeNode[Any]) -> bool:
    if predicate.test(node.value):
        return True
    return any(_any_matching(predicate, child) for child in node.children)


def _map_node(mapper: Mapper[U], node: _TreeNode[Any]) -> _TreeNode[U]:
    mapped = _TreeNode(mapper.apply(node.value))
    for child in node.children:
        mapped.children.add_last(_map_node(mapper, child))
    return mapped


def _copy_node(node: _TreeNode[T]) -> _TreeNode[T]:
    clone = _TreeNode(node.value)
    for child in node.children:
        clone.children.add_last(_copy_node(child))
    return clone


def _collect(node: _TreeNode[T], values: LinkedList[T]) -> None:
    values.add_last(node.value)
    for child in node.children:
        _collect(child, values)


def _nodes_equal(first: _TreeNode[Any], second: _TreeNode[Any]) -> bool:
    if first.value != second.value or len(first.children) != len(second.children):
        return False
    return all(_nodes_equal(a, b) for a, b in zip(first.children, second.children))


def _render(node: _TreeNode[Any], indent: str, lines: list[str]) -> None:
    lines.append(f"{indent}{node.value}")
    for child in node.children:
        _render(child, indent + _INDENT, lines)
