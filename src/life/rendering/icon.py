from __future__ import annotations

import logging
from pathlib import Path

import pyglet

logger = logging.getLogger(__name__)


def load_icon(path: Path | str):
    """Decode an image file into a pyglet image usable as a window icon.

    Returns None when the file is missing or cannot be decoded; the window
    then keeps the platform default icon.
    """
    icon_path = Path(path)
    if not icon_path.is_file():
        logger.warning("window icon not found at %s", icon_path)
        return None
    try:
        return pyglet.image.load(str(icon_path))
    except (OSError, pyglet.image.codecs.ImageDecodeException) as exc:
        logger.warning("failed to decode window icon %s: %s", icon_path, exc)
        return None


def apply_icon(window, path: Path | str) -> bool:
    icon = load_icon(path)
    if icon is None:
        return False
    window.set_icon(icon)
    return True
