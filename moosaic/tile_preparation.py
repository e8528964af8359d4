"""Square cropping and resizing of library images into uniform tiles."""

import os
from PIL import Image
from tqdm import tqdm

from moosaic.image_loader import list_image_files, load_image


def square_crop(img):
	"""Crop the longer side evenly from both ends so the image is square."""
	width, height = img.size
	diff = abs(width - height)
	if width > height:
		return img.crop((diff // 2, 0, diff // 2 + height, height))
	return img.crop((0, diff // 2, width, diff // 2 + width))


def crop_resize(image_path, size, output_folder, quality=95):
	"""
	Turn one library image into a square tile.

	Args:
	    image_path: Source image
	    size: Side of the tile in pixels
	    output_folder: Folder the tile is written to, under the same file name
	    quality: JPEG quality for the saved tile

	Returns:
	    Path of the written tile, or None if the image could not be read
	"""
	img = load_image(image_path)
	if img is None:
		return None

	tile = square_crop(img).resize((size, size), Image.Resampling.LANCZOS)
	output_path = os.path.join(output_folder, os.path.basename(image_path))
	tile.save(output_path, quality=quality)
	return output_path


def crop_resize_all(size, library_folder="photos", output_folder="outphotos", quality=95):
	"""
	Crop and resize every image of the library into ``size`` x ``size`` tiles.

	Args:
	    size: Tile side in pixels
	    library_folder: Folder holding the original photos
	    output_folder: Folder for the tiles, created if missing
	    quality: JPEG quality for the saved tiles

	Returns:
	    List of written tile paths
	"""
	os.makedirs(output_folder, exist_ok=True)
	written = []
	for image_path in tqdm(list_image_files(library_folder), desc="Preparing tiles"):
		output_path = crop_resize(image_path, size, output_folder, quality)
		if output_path is not None:
			written.append(output_path)
	return written
