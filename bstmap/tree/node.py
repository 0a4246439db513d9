class TreeNode(object):
    """A node of an unbalanced binary search tree.

    Only the child links own other nodes; parent is a back reference used for
    upward navigation. Nodes never compare keys, all ordering decisions are
    made by the tree."""

    def __init__(self, k, v, parent=None):
        self.key = k
        self.payload = v

        self.parent = parent
        self.left = None
        self.right = None

    def is_root(self):
        return self.parent is None

    def is_left_child(self):
        return not self.is_root() and self.parent.left is self

    def is_right_child(self):
        return not self.is_root() and self.parent.right is self

    def is_leaf(self):
        return self.left is None and self.right is None

    def children(self):
        """Returns the number of non-empty child links (0, 1 or 2)."""
        return (self.left is not None) + (self.right is not None)

    def minimum(self):
        """Finds the node with the minimal key in the subtree rooted here.

        Returns self if there is no left subtree.
        Time complexity: O(h)"""
        x = self
        while x.left is not None:
            x = x.left
        return x

    def maximum(self):
        """Finds the node with the maximum key in the subtree rooted here.

        Time complexity: O(h)"""
        x = self
        while x.right is not None:
            x = x.right
        return x

    def successor(self):
        """Finds the next node in sorted order

        Returns None if this is the maximum node of the tree.
        Time complexity: O(h)"""
        if self.right is not None:
            return self.right.minimum()
        x = self
        while x.is_right_child():
            x = x.parent
        return x.parent

    def predecessor(self):
        """Finds the previous node in sorted order

        Returns None if this is the minimum node of the tree.
        Time complexity: O(h)"""
        if self.left is not None:
            return self.left.maximum()
        x = self
        while x.is_left_child():
            x = x.parent
        return x.parent

    def unlink(self):
        self.parent = None
        self.left = None
        self.right = None

    def __str__(self):
        return "Key: {0!s}\nPayload: {1!s}\n".format(self.key, self.payload)

    def __repr__(self):
        return "{0:s}(key={1!r})".format(self.__class__.__name__, self.key)
