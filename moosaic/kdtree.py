"""
Balanced k-d tree with exact nearest neighbor search.

The tree is built once from a fixed list of elements and never changes
afterwards. An empty tree is ``None``; every other tree is a :class:`Node`
whose value splits its children along axis ``depth % k``:

- everything in ``left`` is <= the value on that axis
- everything in ``right`` is >= the value on that axis

The tree is generic: all comparisons and distances go through a comparable
object (see :mod:`moosaic.comparable`).
"""

import functools
from collections import namedtuple

from moosaic.comparable import Order


EMPTY = None

Node = namedtuple("Node", "left value right")


class EmptyTreeError(LookupError):
	"""Raised when querying a tree that holds no elements."""


def median_index(length):
	"""Rank of the median in a sorted sequence of ``length`` items."""
	return length // 2


def sort_along(elements, comparable, axis):
	"""Stable sort of ``elements`` along ``axis`` using ``comparable.compare``."""
	key = functools.cmp_to_key(
		lambda a, b: comparable.compare(axis, a, b).value
	)
	return sorted(elements, key=key)


def build_balanced(elements, comparable, depth=0):
	"""
	Build a balanced k-d tree.

	Elements are sorted along the axis for ``depth`` and the one at the
	median rank becomes the node. Elements ranked before it form the left
	subtree and elements ranked after it the right one. Ties with the
	median are split by rank, so equal values can end up on either side.

	Args:
	    elements: Sequence of (point, payload) elements. Not modified.
	    comparable: Object providing compare/distance/distance_to_plane
	    depth: Depth of the subtree root, selects the first split axis

	Returns:
	    Root Node, or EMPTY for an empty input
	"""
	if not elements:
		return EMPTY

	sorted_elements = sort_along(elements, comparable, depth)
	median = median_index(len(sorted_elements))

	return Node(
		build_balanced(sorted_elements[:median], comparable, depth + 1),
		sorted_elements[median],
		build_balanced(sorted_elements[median + 1:], comparable, depth + 1),
	)


def nearest_neighbor(query, tree, comparable):
	"""
	Find the stored element closest to ``query``.

	Depth-first branch-and-bound search. The side of each node holding the
	query is searched first. The other side is only searched when the
	plane bound is within the best distance found so far. A node replaces the
	current best only if it is strictly closer, so among equally close
	elements the first one visited wins.

	Args:
	    query: (point, payload) element to search for; the payload is ignored
	    tree: Tree built by build_balanced
	    comparable: The comparable the tree was built with

	Returns:
	    The nearest stored element, unchanged

	Raises:
	    EmptyTreeError: if the tree is empty
	"""
	if tree is EMPTY:
		raise EmptyTreeError("there are no nodes in this tree")

	best = tree.value
	best, _ = _search(
		query, tree, 0, comparable, best, comparable.distance(best, query)
	)
	return best


def _search(query, node, depth, comparable, best, best_distance):
	if node is EMPTY:
		return best, best_distance

	value = node.value
	value_distance = comparable.distance(value, query)
	if value_distance < best_distance:
		best, best_distance = value, value_distance

	if comparable.compare(depth, query, value) is Order.LESS:
		near, far = node.left, node.right
	else:
		near, far = node.right, node.left

	best, best_distance = _search(
		query, near, depth + 1, comparable, best, best_distance
	)
	if comparable.distance_to_plane(depth, query, value) <= best_distance:
		best, best_distance = _search(
			query, far, depth + 1, comparable, best, best_distance
		)
	return best, best_distance


# Inspection helpers, mostly for checking tree invariants.

def max_depth(tree):
	"""Depth of the deepest empty slot; an empty tree has depth 0."""
	if tree is EMPTY:
		return 0
	return 1 + max(max_depth(tree.left), max_depth(tree.right))


def min_depth(tree):
	"""Depth of the shallowest empty slot."""
	if tree is EMPTY:
		return 0
	return 1 + min(min_depth(tree.left), min_depth(tree.right))


def is_balanced(tree):
	return max_depth(tree) - min_depth(tree) <= 1


def iter_elements(tree):
	"""In-order iteration over the stored elements."""
	if tree is EMPTY:
		return
	yield from iter_elements(tree.left)
	yield tree.value
	yield from iter_elements(tree.right)


def tree_size(tree):
	return sum(1 for _ in iter_elements(tree))
