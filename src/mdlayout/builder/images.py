#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/builder/images.py
"""Resolution of ``img`` sources into image nodes.

An image source may carry a ``#WxH`` suffix giving the display size, for
example ``/upload/photo.png#320x200``. The remaining URI is classified by
scheme so a rendering surface knows how to load it:

    - ``http``/``https``: network image
    - ``data``: inline data URI
    - ``resource``: bundled asset (``resource:images/logo.png``)
    - anything else: file path, joined with the configured image directory
      when relative

"""

from __future__ import annotations

import logging
import os
from typing import Optional
from urllib.parse import urlparse

from mdlayout.exceptions import AttributeParseError
from mdlayout.layout.nodes import ImageRun

logger = logging.getLogger(__name__)


def parse_image_source(src: str) -> tuple[str, Optional[float], Optional[float]]:
    """Split an image source into its URI and optional ``#WxH`` dimensions.

    Parameters
    ----------
    src : str
        Raw ``src`` attribute

    Returns
    -------
    tuple
        ``(uri, width, height)``; width and height are None without a suffix

    Raises
    ------
    AttributeParseError
        If the source has more than one ``#`` or the suffix is not two
        numbers separated by ``x``

    """
    parts = src.split("#")
    if len(parts) == 1:
        return src, None, None
    if len(parts) != 2:
        raise AttributeParseError("img", "src", src, f"Image source {src!r} has more than one '#' suffix")

    dimensions = parts[1].split("x")
    if len(dimensions) != 2:
        raise AttributeParseError("img", "src", src, f"Image size suffix {parts[1]!r} is not of the form WxH")
    try:
        width = float(dimensions[0])
        height = float(dimensions[1])
    except ValueError as e:
        raise AttributeParseError(
            "img", "src", src, f"Image size suffix {parts[1]!r} is not numeric", original_error=e
        ) from e
    return parts[0], width, height


def default_image_builder(
    uri: str,
    image_directory: Optional[str] = None,
    width: Optional[float] = None,
    height: Optional[float] = None,
    title: Optional[str] = None,
    alt: Optional[str] = None,
) -> ImageRun:
    """Build the image node used when no image builder is configured.

    Parameters
    ----------
    uri : str
        Image URI without the size suffix
    image_directory : str or None
        Base directory for relative file paths
    width, height : float or None
        Display size
    title, alt : str or None
        Image title and alternative text

    Returns
    -------
    ImageRun
        The classified image node

    """
    scheme = urlparse(uri).scheme
    if scheme in ("http", "https"):
        return ImageRun(uri, "network", width, height, title, alt)
    if scheme == "data":
        return ImageRun(uri, "data", width, height, title, alt)
    if scheme == "resource":
        return ImageRun(uri[len("resource:") :], "resource", width, height, title, alt)

    path = uri[len("file://") :] if scheme == "file" else uri
    if image_directory is not None and not os.path.isabs(path):
        path = os.path.join(image_directory, path)
        logger.debug(f"Resolved relative image path against {image_directory}: {path}")
    return ImageRun(path, "file", width, height, title, alt)


__all__ = ["parse_image_source", "default_image_builder"]
