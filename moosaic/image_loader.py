"""Image loading utilities."""

import os
from PIL import Image
from tqdm import tqdm


SUPPORTED_FORMATS = (".jpg", ".jpeg", ".png", ".bmp", ".gif")


def list_image_files(folder):
	"""
	List the image files of a folder.

	Args:
	    folder: Folder to scan (not recursive)

	Returns:
	    Sorted list of paths with a supported image extension
	"""
	return sorted(
		os.path.join(folder, fn)
		for fn in os.listdir(folder)
		if fn.lower().endswith(SUPPORTED_FORMATS)
	)


def load_image(image_path):
	"""
	Load an image as RGB.

	Args:
	    image_path: Path to the image file

	Returns:
	    PIL Image in RGB mode, or None if loading fails
	"""
	try:
		with Image.open(image_path) as img:
			return img.convert("RGB")
	except Exception as e:
		tqdm.write(f"[ERROR] Could not load {image_path}: {e}")
		return None
