import enum
import sys

from .. import log
from ..exception import InvalidPrintModeError
from .node import TreeNode


class TreePrintMode(enum.Enum):
    INORDER = 0
    PREORDER = 1
    POSTORDER = 2


class BinarySearchTree(object):
    """An unbalanced binary search tree mapping keys to payloads.

    Keys are ordered by comparator(a, b), which must return -1, 0 or 1.
    Equal keys are allowed; they are inserted into the right subtree, so
    among equal keys the in-order sequence follows insertion order."""

    def __init__(self, comparator, print_mode=TreePrintMode.INORDER,
                 node_type=TreeNode):
        self.comparator = comparator
        self.print_mode = print_mode
        self.node_type = node_type
        self.root = None
        self._length = 0

    @property
    def length(self):
        """Number of nodes stored in the tree.

        Time complexity: O(1)"""
        return self._length

    def __len__(self):
        return self._length

    def __contains__(self, k):
        return self.contains(k)

    def is_empty(self):
        return self._length == 0

    def contains(self, k):
        return self.find(k) is not None

    def insert(self, k, v):
        """Inserts key k with payload v. Duplicate keys go to the right.

        Time complexity: O(h)"""
        y = None
        x = self.root
        c = 0
        while x is not None:
            y = x
            c = self.comparator(k, x.key)
            if c < 0:
                x = x.left
            else:
                x = x.right

        new = self.node_type(k, v, y)
        if y is None:
            self.root = new
        elif c < 0:
            y.left = new
        else:
            y.right = new
        self._length += 1
        log.debug3("inserted key ", k, ", tree size = ", self._length)

    def find(self, k):
        """Finds the node with key k. Returns None if k is not found.

        Time complexity: O(h)"""
        x = self.root
        while x is not None:
            c = self.comparator(k, x.key)
            if c == 0:
                break
            if c < 0:
                x = x.left
            else:
                x = x.right
        return x

    def search(self, k):
        """Returns the payload stored under key k, or None."""
        x = self.find(k)
        return x.payload if x is not None else None

    def delete(self, k):
        """Removes one node with key k from the tree.

        A node with two children is replaced by its successor: the successor
        is unlinked and its key and payload are moved into the matched node.
        Returns the payload of the unlinked node, or None if k is not found.
        Time complexity: O(h)"""
        node = self.find(k)
        if node is None:
            log.debug3("delete: key ", k, " not found")
            return None

        if node.children() == 2:
            deleted = node.successor()
        else:
            deleted = node

        if deleted.left is not None:
            replacement = deleted.left
        else:
            replacement = deleted.right

        if replacement is not None:
            # None if deleted is the root
            replacement.parent = deleted.parent

        if deleted.is_root():
            self.root = replacement
        elif deleted.is_left_child():
            deleted.parent.left = replacement
        else:
            deleted.parent.right = replacement

        if deleted is not node:
            node.key = deleted.key
            node.payload = deleted.payload

        payload = deleted.payload
        deleted.unlink()
        self._length -= 1
        log.debug3("deleted key ", k, ", tree size = ", self._length)
        return payload

    def minimum(self):
        """Finds the node with the minimal key

        Returns None if tree is empty"""
        if self.root is None:
            return None
        return self.root.minimum()

    def maximum(self):
        """Finds the node with the maximum key

        Returns None if tree is empty"""
        if self.root is None:
            return None
        return self.root.maximum()

    def inorder(self, f):
        """Does an inorder traversal and calls f(x) for every node x.

        Time complexity: O(n)
        """
        stack = []
        x = self.root
        while stack or x is not None:
            while x is not None:
                stack.append(x)
                x = x.left
            x = stack.pop()
            f(x)
            x = x.right

    def preorder(self, f):
        """Does a preorder traversal and calls f(x) for every node x.

        Time complexity: O(n)
        """
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            x = stack.pop()
            f(x)
            if x.right is not None:
                stack.append(x.right)
            if x.left is not None:
                stack.append(x.left)

    def postorder(self, f):
        """Does a postorder traversal and calls f(x) for every node x.

        Time complexity: O(n)
        """
        stack = []
        last = None
        x = self.root
        while stack or x is not None:
            if x is not None:
                stack.append(x)
                x = x.left
                continue
            top = stack[-1]
            if top.right is not None and top.right is not last:
                x = top.right
            else:
                f(top)
                last = stack.pop()

    def traverse(self, f, mode=None):
        if mode is None:
            mode = self.print_mode
        if mode == TreePrintMode.INORDER:
            self.inorder(f)
        elif mode == TreePrintMode.PREORDER:
            self.preorder(f)
        elif mode == TreePrintMode.POSTORDER:
            self.postorder(f)
        else:
            raise InvalidPrintModeError(mode)

    def _collect(self, func, mode):
        values = []
        self.traverse(lambda n: values.append(func(n)), mode)
        return values

    def records(self, mode=None):
        return self._collect(str, mode)

    def items(self, mode=None):
        return self._collect(lambda n: (n.key, n.payload), mode)

    def keys(self, mode=None):
        return self._collect(lambda n: n.key, mode)

    def payloads(self, mode=None):
        return self._collect(lambda n: n.payload, mode)

    def print(self, mode=None, file=None):
        """Writes a "Key: ...\\nPayload: ...\\n" record for every node.

        Uses the tree's print_mode if mode is None."""
        if file is None:
            file = sys.stdout
        self.traverse(lambda n: file.write(str(n) + '\n'), mode)
