"""
Main mosaic assembly module.

This module coordinates the entire mosaic creation process:
1. Crop the target image to a grid of square tiles
2. Crop and resize every library image to the tile size
3. Index the library tiles by average color in a k-d tree
4. Replace every target tile with its closest library tile
"""

import os
from PIL import Image
from tqdm import tqdm

from moosaic.analyze_images_in_folder import analyze_images
from moosaic.color_matching import build_color_tree, find_best_match
from moosaic.image_loader import load_image
from moosaic.target_analyzer import gridder, grid_colors, validate_tile_count
from moosaic.tile_preparation import crop_resize_all


def prefixed_path(path, prefix="out"):
	"""``photos/cat.jpg`` -> ``photos/outcat.jpg``."""
	folder, filename = os.path.split(path)
	return os.path.join(folder, prefix + filename)


def blitz(tree, base_path, tile_side, output_file, quality=95):
	"""
	Stamp the best matching library tile onto every tile of the base image.

	Args:
	    tree: Color tree of the library tiles
	    base_path: Grid-aligned target image (from gridder)
	    tile_side: Tile side in pixels
	    output_file: Where the mosaic is saved
	    quality: JPEG quality of the saved mosaic

	Returns:
	    PIL Image of the mosaic
	"""
	with Image.open(base_path) as base:
		img = base.convert("RGB")

	tiles = {}
	cells = list(grid_colors(img, tile_side))
	for (x, y), color in tqdm(cells, desc="Stamping tiles"):
		match = find_best_match(color, tree)
		if match not in tiles:
			tiles[match] = load_image(match)
		tile = tiles[match]
		if tile is None:
			continue
		if tile.size != (tile_side, tile_side):
			tile = tile.resize((tile_side, tile_side), Image.Resampling.LANCZOS)
		img.paste(tile, (x, y))

	print(f"Stamped {len(cells)} tiles using {len(tiles)} unique images")
	img.save(output_file, quality=quality)
	return img


def masterpiece(
	num_tiles,
	target_path,
	library_folder="photos",
	tiles_folder="outphotos",
	output_file=None,
	quality=95,
	processes=None,
):
	"""
	Create a photomosaic of a target image from a folder of photos.

	Args:
	    num_tiles: Minimum number of tiles the mosaic is made of
	    target_path: Image the mosaic should resemble
	    library_folder: Folder of photos used as tiles
	    tiles_folder: Folder where the cropped and resized tiles are written
	    output_file: Output path. Defaults to the target's name prefixed
	        with "outout" next to the target
	    quality: JPEG quality for every saved image
	    processes: Worker count for color analysis

	Returns:
	    PIL Image of the completed mosaic, or None if it could not be made
	"""
	print("\n=== MOSAIC ASSEMBLY ===")
	print(f"Target image: {target_path}")

	with Image.open(target_path) as target:
		width, height = target.size

	if not validate_tile_count(width, height, num_tiles):
		print("Invalid number of images!")
		return None

	cropped_path = prefixed_path(target_path)
	if output_file is None:
		output_file = prefixed_path(cropped_path)

	tile_side = gridder(num_tiles, target_path, cropped_path, quality)
	print(f"Tile size: {tile_side}x{tile_side}px")

	tile_paths = crop_resize_all(tile_side, library_folder, tiles_folder, quality)
	# tiles written by this run only
	elements = analyze_images(tile_paths, processes)
	if not elements:
		print(f"[ERROR] No usable images found in '{library_folder}'")
		return None

	tree = build_color_tree(elements)
	mosaic = blitz(tree, cropped_path, tile_side, output_file, quality)

	print(f"[OK] Mosaic saved to {output_file}")
	return mosaic
