# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Image loading for hue extraction.

Decodes an image, converts it to RGBA and rescales it so its longer side
is ``max_dimension`` pixels before handing the buffer to the extractor.
"""

from __future__ import annotations

import io
import logging
import math
from pathlib import Path
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from huecore.hue.extract import HueExtractionConfig, extract_dominant_hue


logger = logging.getLogger(__name__)

MAX_DIMENSION = 250

ImageSource = Union[str, Path, bytes, NDArray[np.uint8]]


def _require_pillow():
    try:
        from PIL import Image
    except ImportError as e:
        raise ImportError(
            "Pillow is required for image loading. "
            "Install with: pip install huecore[image]"
        ) from e
    return Image


def _open(source: ImageSource):
    """Open a source as a PIL image in RGBA mode."""
    Image = _require_pillow()

    if isinstance(source, np.ndarray):
        if source.ndim != 3 or source.shape[2] not in (3, 4):
            raise ValueError(
                f"Expected (H, W, 3) or (H, W, 4) array, got shape {source.shape}"
            )
        if source.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {source.dtype}")
        return Image.fromarray(source).convert("RGBA")

    if isinstance(source, bytes):
        fp = io.BytesIO(source)
    elif isinstance(source, (str, Path)):
        fp = source
    else:
        raise TypeError(
            f"Expected file path, encoded bytes or numpy array, got {type(source)}"
        )

    from PIL import UnidentifiedImageError

    try:
        img = Image.open(fp)
        img.load()
    except FileNotFoundError:
        raise
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Failed to load image: {e}") from e

    if "icc_profile" in img.info:
        img = _to_srgb(img)

    return img.convert("RGBA")


def _to_srgb(img):
    """
    Apply the embedded ICC profile so pixels are in sRGB.

    Browsers color-manage images before drawing them, so wide-gamut
    photos (Display P3, Adobe RGB) must be remapped here to give the
    same hue. Alpha is carried over untouched.
    """
    from PIL import ImageCms

    rgba = img.convert("RGBA")
    alpha = rgba.getchannel("A")

    try:
        embedded_profile = ImageCms.ImageCmsProfile(
            io.BytesIO(img.info["icc_profile"])
        )
        srgb_profile = ImageCms.createProfile("sRGB")
        converted = ImageCms.profileToProfile(
            rgba.convert("RGB"), embedded_profile, srgb_profile
        )
    except (ImageCms.PyCMSError, OSError):
        # Unreadable profile: treat the pixels as sRGB
        logger.debug("Ignoring unusable ICC profile", exc_info=True)
        return rgba

    converted = converted.convert("RGBA")
    converted.putalpha(alpha)
    return converted


def _fit(width: int, height: int, max_dimension: int) -> tuple[int, int]:
    """Scale (width, height) so the longer side equals max_dimension."""
    scale = min(max_dimension / width, max_dimension / height)
    return max(1, math.floor(width * scale)), max(1, math.floor(height * scale))


def load_rgba(
    source: ImageSource,
    *,
    max_dimension: int = MAX_DIMENSION,
) -> NDArray[np.uint8]:
    """
    Decode an image into an RGBA pixel array ready for hue extraction.

    Args:
        source: One of:
            - Path to an image file (str or Path)
            - Encoded image bytes (PNG, JPEG, ...)
            - NumPy array of shape (H, W, 3) or (H, W, 4) with uint8 values
        max_dimension: Target size of the longer side, in pixels

    Returns:
        Array of shape (H', W', 4), dtype uint8
    """
    if max_dimension < 1:
        raise ValueError(f"max_dimension must be >= 1, got {max_dimension}")

    img = _open(source)
    size = _fit(img.width, img.height, max_dimension)

    if size != img.size:
        Image = _require_pillow()
        img = img.resize(size, Image.Resampling.LANCZOS)

    return np.array(img, dtype=np.uint8)


def image_hue(
    source: ImageSource,
    *,
    max_dimension: int = MAX_DIMENSION,
    config: Optional[HueExtractionConfig] = None,
) -> int:
    """
    Extract the dominant hue of an image.

    Example:
        >>> from huecore.hue import image_hue
        >>> image_hue("sunset.jpg")
        24
    """
    pixels = load_rgba(source, max_dimension=max_dimension)
    height, width = pixels.shape[:2]
    logger.debug("Analyzing %dx%d RGBA buffer", width, height)
    return extract_dominant_hue(pixels, config)
