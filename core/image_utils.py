"""Low-level image operations."""

import cv2
import numpy as np
from pathlib import Path
from PIL import Image


def load_image(file_path):
    """Load a screenshot from path and return it as an RGB numpy array."""
    with Image.open(file_path) as pic:
        return np.array(pic.convert("RGB"))


def load_image_bgr(file_path):
    """Load image using OpenCV (BGR format)."""
    img = cv2.imread(str(file_path))
    if img is None:
        raise ValueError(f"Could not load image: {file_path}")
    return img


def to_unit_rgb(image):
    """
    Normalise an image to float RGB values in [0, 1].

    Accepts uint8 or float images, grayscale (H, W) or colour
    (H, W, 3|4). An alpha channel is dropped.
    """
    img = np.asarray(image)

    if img.ndim == 2:
        img = np.repeat(img[:, :, None], 3, axis=2)
    elif img.ndim != 3 or img.shape[2] not in (3, 4):
        raise ValueError(f"Expected (H, W), (H, W, 3) or (H, W, 4) image, got {img.shape}")

    img = img[:, :, :3]
    if np.issubdtype(img.dtype, np.integer):
        return img.astype(np.float64) / 255.0
    return img.astype(np.float64)


def save_image(image, file_path):
    """Save an RGB image with OpenCV, creating parent directories."""
    output_dir = Path(file_path).parent
    if output_dir and str(output_dir) != '.':
        output_dir.mkdir(parents=True, exist_ok=True)
    if len(image.shape) == 3 and image.shape[2] == 3:
        image = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)
    if not cv2.imwrite(str(file_path), image):
        raise ValueError(f"Could not save image: {file_path}")
