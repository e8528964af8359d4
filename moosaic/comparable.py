"""
Axis comparison and distance operations for k-d tree elements.

The spatial index in :mod:`moosaic.kdtree` knows nothing about colors. Every
piece of domain knowledge it needs is supplied by a comparable object with
three methods:

1. ``compare(axis, a, b)`` orders two elements along one coordinate
2. ``distance(a, b)`` measures two elements against each other
3. ``distance_to_plane(axis, query, reference)`` lower-bounds the distance
   from ``query`` to anything beyond the splitting plane of ``reference``
"""

import enum
from collections import namedtuple


class Order(enum.Enum):
	LESS = -1
	EQUAL = 0
	GREATER = 1


# A point plus an opaque payload (for the mosaic, the path of a tile image).
# Plain (point, payload) tuples work too.
Element = namedtuple("Element", "point payload")


class AxisComparable:
	"""
	Base class for element comparators used by the k-d tree.

	Subclasses set ``dimensions`` and implement the three operations below.
	Axes are taken modulo ``dimensions`` so the tree can pass its depth
	directly.
	"""

	dimensions = 3

	def compare(self, axis, a, b):
		raise NotImplementedError

	def distance(self, a, b):
		raise NotImplementedError

	def distance_to_plane(self, axis, query, reference):
		raise NotImplementedError


class ColorComparable(AxisComparable):
	"""
	Comparator for (rgb, payload) elements.

	Distances are squared Euclidean distances over the three channels, so
	they stay integers and skip the square root.
	"""

	dimensions = 3

	def compare(self, axis, a, b):
		axis = axis % self.dimensions
		left, right = a[0][axis], b[0][axis]
		if left > right:
			return Order.GREATER
		if left < right:
			return Order.LESS
		return Order.EQUAL

	def distance(self, a, b):
		return sum((p - q) ** 2 for p, q in zip(a[0], b[0]))

	def distance_to_plane(self, axis, query, reference):
		axis = axis % self.dimensions
		return (query[0][axis] - reference[0][axis]) ** 2


class OriginAnchoredColorComparable(ColorComparable):
	"""
	Color comparator measuring the plane distance against an anchored point.

	The plane bound is the full distance from ``query`` to a point that keeps
	only the reference's split channel and zeroes the other two. That adds
	the query's off-axis channels to the bound, so it can exceed the true
	distance to the plane and prune a subtree holding the real nearest
	neighbor. Kept for comparison against :class:`ColorComparable`.
	"""

	def distance_to_plane(self, axis, query, reference):
		axis = axis % self.dimensions
		anchored = [0] * self.dimensions
		anchored[axis] = reference[0][axis]
		return self.distance(query, (tuple(anchored), reference[1]))
