"""Pillow backed implementation of :class:`~fic.core.protocols.Engine`.

This module is the **only** place in the codebase that touches image
codecs.  Pillow is imported lazily and every Pillow or I/O exception is
re-raised as :class:`~fic.exceptions.EngineError`.

The stream written by :meth:`PillowEngine.compress` is a baseline JPEG.
Metric, fuzz, domain scale and tile size are accepted for fractal
backends and only logged here.
"""

from __future__ import annotations

import logging
from typing import Any

from fic.core.models import Settings
from fic.exceptions import EngineError, EnvironmentError
from fic.utils.log import LOGGER_NAME

# JPEG quality above 95 grows files without visible gain.
MAX_JPEG_QUALITY: int = 95


def _import_pillow() -> Any:
    """Import ``PIL.Image`` lazily or raise ``EnvironmentError``."""
    try:
        from PIL import Image
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "Pillow is not installed. Install with: pip install Pillow",
        ) from exc
    return Image


def jpeg_quality(quality: float) -> int:
    """Map a ``[0, 1]`` quality onto Pillow's JPEG quality scale."""
    return max(1, round(quality * MAX_JPEG_QUALITY))


class PillowEngine:
    """Concrete :class:`Engine` backed by Pillow.

    This class satisfies the :class:`~fic.core.protocols.Engine`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, settings: Settings, logger: logging.Logger | None = None) -> None:
        self._settings: Settings = settings
        self._logger: logging.Logger = logger or logging.getLogger(LOGGER_NAME)

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def compress(self) -> None:
        """Encode the input image into the output stream.

        Raises
        ------
        EngineError
            When the input cannot be decoded or the output cannot be written.
        """
        settings = self._settings
        image_module = _import_pillow()
        self._logger.debug(
            "metric=%s fuzz=%s scale=%s tile=%s",
            settings.metric.name,
            settings.fuzz,
            settings.domain_scale,
            settings.tile_size,
        )

        image = self._open(image_module)
        mode = "L" if image.mode in ("1", "L", "I", "I;16", "F") else "RGB"
        quality = jpeg_quality(settings.quality)
        self._logger.info(
            "Compressing %s (%dx%d) at quality %d",
            settings.input_path,
            image.width,
            image.height,
            quality,
        )
        self._save(image.convert(mode), "JPEG", quality=quality, optimize=True)

    def decompress(self) -> None:
        """Decode the input stream into a PNG image.

        Raises
        ------
        EngineError
            When the input cannot be decoded or the output cannot be written.
        """
        image_module = _import_pillow()
        image = self._open(image_module)
        self._logger.info(
            "Decompressing %s (%dx%d)",
            self._settings.input_path,
            image.width,
            image.height,
        )
        self._save(image, "PNG")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _open(self, image_module: Any) -> Any:
        path = self._settings.input_path
        try:
            with image_module.open(path) as image:
                image.load()
                return image.copy()
        except image_module.UnidentifiedImageError as exc:
            raise EngineError(
                f"Not a readable image: {path}",
                hint="Check that the input file is an image in a supported format.",
            ) from exc
        except OSError as exc:
            raise EngineError(f"Cannot decode {path}: {exc}") from exc

    def _save(self, image: Any, fmt: str, **params: Any) -> None:
        target = self._settings.output_path
        try:
            image.save(target, format=fmt, **params)
        except OSError as exc:
            raise EngineError(
                f"Cannot write {target}: {exc}",
                hint="Check that the output directory exists and is writable.",
            ) from exc
