"""Export the rendered map as an image (experimental)."""

import logging

from toro.constants import ExportConfig, MessageName
from toro.core.target import MapTarget, dispatch

logger = logging.getLogger(__name__)


def download_map_image(
    target: MapTarget,
    filename: str,
    format: str = ExportConfig.FORMAT,
    width: int = ExportConfig.WIDTH_PX,
    height: int = ExportConfig.HEIGHT_PX,
) -> MapTarget:
    """Ask the browser to download a snapshot of a live map.

    Only a live map with a session can export; anything else logs a warning.
    """
    logger.info("download_map_image is experimental")
    return dispatch(
        target,
        MessageName.DOWNLOAD_MAP_IMAGE,
        {"filename": filename, "format": format, "width": width, "height": height},
    )
