__version__ = "0.4.0"

from .tree.bstree import BinarySearchTree, TreePrintMode
from .tree.node import TreeNode
from .comparator import natural_order, reverse_order, key_order, dname_order
