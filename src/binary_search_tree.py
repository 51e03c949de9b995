from typing import TypeVar, Generic, List, Iterable, Iterator, Optional

T = TypeVar('T')


class BSTNode(Generic[T]):
    """Binary search tree node carrying a back-reference to its parent.

    Every operation starts from the node it is called on, so any node can be
    treated as the root of its own subtree. `left` and `right` own their
    subtrees; `parent` is only followed upward and never owns anything.
    """

    def __init__(self, value: T) -> None:
        self.value: T = value
        self.parent: Optional['BSTNode[T]'] = None
        self.left: Optional['BSTNode[T]'] = None
        self.right: Optional['BSTNode[T]'] = None

    def search(self, value: T) -> Optional['BSTNode[T]']:
        node: Optional[BSTNode[T]] = self
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def min(self) -> 'BSTNode[T]':
        node = self
        while node.left is not None:
            node = node.left
        return node

    def max(self) -> 'BSTNode[T]':
        node = self
        while node.right is not None:
            node = node.right
        return node

    def successor(self) -> Optional['BSTNode[T]']:
        if self.right is not None:
            return self.right.min()
        node, parent = self, self.parent
        while parent is not None and node is parent.right:
            node, parent = parent, parent.parent
        return parent

    def predecessor(self) -> Optional['BSTNode[T]']:
        if self.left is not None:
            return self.left.max()
        node, parent = self, self.parent
        while parent is not None and node is parent.left:
            node, parent = parent, parent.parent
        return parent

    def size(self) -> int:
        # No cached count, every call walks the whole subtree.
        return len(self.inorder())

    def immediate_child_count(self) -> int:
        return (self.left is not None) + (self.right is not None)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        return self.parent is None

    def insert(self, value: T) -> bool:
        """Attach `value` below this node.

        Only `<` and `>` place a value, so a value equal to one already on the
        descent path is dropped and False is returned.
        """
        node = self
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BSTNode(value)
                    node.left.parent = node
                    return True
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = BSTNode(value)
                    node.right.parent = node
                    return True
                node = node.right
            else:
                return False

    def remove(self, value: T) -> bool:
        """Remove the node holding `value` from this subtree.

        Returns False if the value is absent. The removed node is detached
        from the tree. When the target is this node and it has no parent, the
        node object stays in place as the tree handle and its contents are
        replaced instead; a childless parentless node cannot remove itself.
        """
        node = self.search(value)
        if node is None:
            return False

        if node.parent is None:
            return node._remove_in_place()

        if node.is_leaf():
            node._replace_in_parent(None)
        elif node.immediate_child_count() == 1:
            child = node.left if node.left is not None else node.right
            node._replace_in_parent(child)
        else:
            successor = node.successor()
            assert successor is not None
            node._splice_and_graft(successor)
        node._detach()
        return True

    def clone(self) -> 'BSTNode[T]':
        root: BSTNode[T] = BSTNode(self.value)
        stack: List[tuple] = [(self, root)]
        while stack:
            source, target = stack.pop()
            if source.left is not None:
                target.left = BSTNode(source.left.value)
                target.left.parent = target
                stack.append((source.left, target.left))
            if source.right is not None:
                target.right = BSTNode(source.right.value)
                target.right.parent = target
                stack.append((source.right, target.right))
        return root

    def inorder(self) -> List[T]:
        result: List[T] = []
        stack: List[BSTNode[T]] = []
        node: Optional[BSTNode[T]] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def level_order(self) -> List[List[T]]:
        """Values grouped by depth, shallowest first.

        Two buffers alternate: one level is drained while the next is filled
        into the other, then they swap roles.
        """
        levels: List[List[T]] = []
        buffers: List[List[BSTNode[T]]] = [[self], []]
        current = 0
        while buffers[0] or buffers[1]:
            frontier, upcoming = buffers[current], buffers[1 - current]
            level: List[T] = []
            for node in frontier:
                level.append(node.value)
                if node.left is not None:
                    upcoming.append(node.left)
                if node.right is not None:
                    upcoming.append(node.right)
            frontier.clear()
            levels.append(level)
            current = 1 - current
        return levels

    def _replace_in_parent(self, replacement: Optional['BSTNode[T]']) -> None:
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = replacement
            else:
                parent.right = replacement
        if replacement is not None:
            replacement.parent = parent

    def _splice_and_graft(self, successor: 'BSTNode[T]') -> None:
        """Move `successor` into this node's position.

        `successor` is the in-order successor of a node with two children, so
        it has no left child. Its right child takes its old place, then it
        adopts this node's parent and both children.
        """
        assert self.left is not None and self.right is not None
        if successor.parent is not self:
            successor._replace_in_parent(successor.right)
            successor.right = self.right
            self.right.parent = successor
        successor.left = self.left
        self.left.parent = successor
        self._replace_in_parent(successor)

    def _remove_in_place(self) -> bool:
        if self.is_leaf():
            return False
        if self.left is not None and self.right is not None:
            successor = self.right.min()
            self.value = successor.value
            successor._replace_in_parent(successor.right)
            successor._detach()
            return True

        child = self.left if self.left is not None else self.right
        assert child is not None
        self.value = child.value
        self.left, self.right = child.left, child.right
        if self.left is not None:
            self.left.parent = self
        if self.right is not None:
            self.right.parent = self
        child._detach()
        return True

    def _detach(self) -> None:
        self.parent = None
        self.left = None
        self.right = None

    def __repr__(self) -> str:
        return f"BSTNode({self.value!r})"


class BinarySearchTree(Generic[T]):
    def __init__(self) -> None:
        self._root: Optional[BSTNode[T]] = None

    @classmethod
    def from_values(cls, values: Iterable[T]) -> 'BinarySearchTree[T]':
        tree: BinarySearchTree[T] = cls()
        for value in values:
            tree.insert(value)
        return tree

    @property
    def root(self) -> Optional[BSTNode[T]]:
        return self._root

    def insert(self, value: T) -> bool:
        if self._root is None:
            self._root = BSTNode(value)
            return True
        return self._root.insert(value)

    def remove(self, value: T) -> bool:
        root = self._root
        if root is None:
            return False
        if root.is_leaf():
            if root.search(value) is None:
                return False
            self._root = None
            return True
        return root.remove(value)

    def search(self, value: T) -> Optional[BSTNode[T]]:
        if self._root is None:
            return None
        return self._root.search(value)

    def contains(self, value: T) -> bool:
        return self.search(value) is not None

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._root.min().value

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        return self._root.max().value

    def size(self) -> int:
        if self._root is None:
            return 0
        return self._root.size()

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None

    def inorder(self) -> List[T]:
        if self._root is None:
            return []
        return self._root.inorder()

    def level_order(self) -> List[List[T]]:
        if self._root is None:
            return []
        return self._root.level_order()

    def clone(self) -> 'BinarySearchTree[T]':
        copy: BinarySearchTree[T] = BinarySearchTree()
        if self._root is not None:
            copy._root = self._root.clone()
        return copy

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.inorder())

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self.size()})"
