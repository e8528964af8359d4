"""Color matching on top of the k-d tree."""

from moosaic.comparable import ColorComparable, Element
from moosaic.kdtree import build_balanced, nearest_neighbor


COLOR_COMPARABLE = ColorComparable()


def build_color_tree(elements):
	"""
	Build a k-d tree for fast color matching.

	Args:
	    elements: List of (average_rgb, image reference) elements

	Returns:
	    Balanced k-d tree over the elements
	"""
	return build_balanced(elements, COLOR_COMPARABLE)


def find_best_match(target_color, tree):
	"""
	Find the image whose average color is closest to a target color.

	Args:
	    target_color: RGB tuple
	    tree: Tree from build_color_tree

	Returns:
	    Image reference of the best match

	Raises:
	    EmptyTreeError: if the tree holds no images
	"""
	return nearest_neighbor(Element(tuple(target_color), None), tree, COLOR_COMPARABLE)[1]
