import multiprocessing

import numpy as np
from tqdm import tqdm

from moosaic.comparable import Element
from moosaic.image_loader import list_image_files, load_image


def average_color(img):
	"""Mean RGB color of an image, truncated to ints."""
	np_array = np.asarray(img.convert("RGB"), dtype=np.int64)
	pixels = np_array.shape[0] * np_array.shape[1]
	totals = np_array.reshape(-1, 3).sum(axis=0)
	return tuple(int(c) // pixels for c in totals)


def analyze_image(file_path):
	"""Analyzes a single image and returns its (average color, path) element."""
	img = load_image(file_path)
	if img is None:
		return None, None
	try:
		return Element(average_color(img), file_path)
	except Exception as e:
		tqdm.write(f"  [ERROR] Could not process {file_path}. Reason: {e}")
		return None, None


def analyze_images(image_paths, processes=None):
	"""
	Compute the average color of the given images.

	Args:
	    image_paths: Paths of (already cropped) tile images
	    processes: Worker count for the pool, defaults to the CPU count

	Returns:
	    List of Element(average_rgb, path) for the readable images, ordered by path
	"""
	elements = []
	if not image_paths:
		return elements

	# Use multiprocessing to analyze images in parallel
	with multiprocessing.Pool(processes) as pool:
		with tqdm(total=len(image_paths), desc="Analyzing Images") as pbar:
			for color, path in pool.imap_unordered(analyze_image, image_paths):
				if path is not None:
					elements.append(Element(color, path))
				pbar.update()

	elements.sort(key=lambda element: element.payload)
	print(f"Analyzed {len(elements)} of {len(image_paths)} images")
	return elements


def analyze_images_in_folder(folder_path, processes=None):
	"""Compute the average color of every image in a folder."""
	print(f"Scanning folder: {folder_path}")
	return analyze_images(list_image_files(folder_path), processes)
