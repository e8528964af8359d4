"""
Mosaic Maker - Create a photomosaic from a folder of photos

This script recreates a target image as a grid of square tiles, choosing for
every tile the photo whose average color is closest.
"""

from moosaic.assemble_mosaic import masterpiece

# ==================== CONFIGURATION ====================

# Target image - the image you want to recreate as a mosaic
TARGET_IMAGE = "target.jpg"

# Minimum number of tiles the mosaic should be made of
# (at most one tile per 10 pixels of the target image)
NUM_TILES = 400

# Folder containing the photos to use as tiles
IMAGE_FOLDER = "photos"

# Folder where the cropped and resized tiles are written
TILES_FOLDER = "outphotos"

# Output filename (None = "outout<target name>" next to the target)
OUTPUT_FILE = None

# JPEG quality of every saved image
QUALITY = 95

# ======================================================

if __name__ == "__main__":
	print("=" * 60)
	print("MOSAIC MAKER")
	print("=" * 60)

	mosaic = masterpiece(
		NUM_TILES,
		TARGET_IMAGE,
		library_folder=IMAGE_FOLDER,
		tiles_folder=TILES_FOLDER,
		output_file=OUTPUT_FILE,
		quality=QUALITY,
	)

	print("\n" + "=" * 60)
	if mosaic is None:
		print("✗ No mosaic was created")
	else:
		print(f"✓ Mosaic of {mosaic.size[0]}x{mosaic.size[1]}px created")
	print("=" * 60)
