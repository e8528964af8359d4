"""Target image analysis: tile sizing, grid cropping and per-tile colors."""

import math
from PIL import Image

from moosaic.analyze_images_in_folder import average_color


def validate_tile_count(width, height, num_tiles):
	"""A mosaic needs at least one tile and at least 10 pixels per tile."""
	return 1 <= num_tiles <= (width * height) // 10


def tile_side_for(width, height, num_tiles):
	"""
	Side of the square tiles giving at least ``num_tiles`` tiles.

	The shorter image side is divided by sqrt(num_tiles).
	"""
	small_side = min(width, height)
	return max(1, int(small_side / math.sqrt(num_tiles)))


def crop_to_grid(img, tile_side):
	"""
	Crop evenly from both sides so both dimensions are multiples of tile_side.
	"""
	width, height = img.size
	new_width = tile_side * (width // tile_side)
	new_height = tile_side * (height // tile_side)
	left = (width - new_width) // 2
	top = (height - new_height) // 2
	return img.crop((left, top, left + new_width, top + new_height))


def gridder(num_tiles, target_path, output_path, quality=95):
	"""
	Compute the tile size for a target image and save the cropped target.

	Args:
	    num_tiles: Minimum number of tiles wanted in the mosaic
	    target_path: Path to the target image
	    output_path: Where the grid-aligned target is written
	    quality: JPEG quality of the saved image

	Returns:
	    Tile side in pixels
	"""
	with Image.open(target_path) as target:
		img = target.convert("RGB")

	tile_side = tile_side_for(img.width, img.height, num_tiles)
	crop_to_grid(img, tile_side).save(output_path, quality=quality)
	return tile_side


def grid_colors(img, tile_side):
	"""
	Average color of every tile of a grid-aligned image.

	Yields:
	    ((x, y), rgb) for each tile, row by row
	"""
	for y in range(0, img.height - tile_side + 1, tile_side):
		for x in range(0, img.width - tile_side + 1, tile_side):
			tile = img.crop((x, y, x + tile_side, y + tile_side))
			yield (x, y), average_color(tile)
