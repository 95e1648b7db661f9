"""
Default artwork collaborators: k-means color quantization and average luminance.
"""

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from .color import create_color


def _load_rgb(image):
    """Accept a path or an already opened PIL image."""
    if isinstance(image, Image.Image):
        return image.convert("RGB")
    with Image.open(image) as img:
        return img.convert("RGB")


def extract_colors(image, count=4):
    """Extract up to `count` distinct dominant colors using k-means clustering"""
    img = _load_rgb(image)
    img.thumbnail((300, 300))
    pixels = np.array(img).reshape(-1, 3)

    distinct = np.unique(pixels, axis=0)
    if len(distinct) <= count:
        # Not enough variety to cluster; every pixel color is a candidate
        centers = distinct
    else:
        kmeans = KMeans(n_clusters=count, random_state=42, n_init=10)
        kmeans.fit(pixels)
        centers = kmeans.cluster_centers_

    colors = []
    seen = set()
    for center in centers:
        r, g, b = int(round(center[0])), int(round(center[1])), int(round(center[2]))
        color = create_color(r, g, b)
        if color.hex in seen:
            continue
        seen.add(color.hex)
        colors.append(color)

    return colors


def find_average_color(image):
    """Get overall average color of image"""
    img = _load_rgb(image)
    img.thumbnail((100, 100))
    pixels = np.array(img).reshape(-1, 3)
    avg = pixels.mean(axis=0)
    return create_color(int(avg[0]), int(avg[1]), int(avg[2]))


def average_luminance(image):
    return find_average_color(image).luminance
