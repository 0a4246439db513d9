import pytest

from bstmap import log
from bstmap.comparator import natural_order
from bstmap.tree.bstree import BinarySearchTree

SAMPLE_KEYS = [5, 3, 8, 1, 4, 7, 9]


def build(keys, comparator=natural_order, **kwargs):
    tree = BinarySearchTree(comparator, **kwargs)
    for k in keys:
        tree.insert(k, "v{0:d}".format(k))
    return tree


@pytest.fixture
def empty_tree():
    return BinarySearchTree(natural_order)


@pytest.fixture
def sample_tree():
    """The tree 5 / (3: 1, 4) (8: 7, 9)."""
    return build(SAMPLE_KEYS)


@pytest.fixture(autouse=True)
def quiet_logger():
    saved = log.logger
    log.logger = log.Logger(colors='never')
    yield log.logger
    log.logger = saved


@pytest.fixture
def make_tree():
    return build
