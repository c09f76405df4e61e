"""
Screenshot file output.

Resolves the output filename (user override, or an automatic
``screenshot_<address>_<timestamp>.<format>`` name) and writes the raw
image bytes exactly as the instrument sent them.
"""

import io
import logging
import os
from datetime import datetime

from PIL import Image, UnidentifiedImageError

from . import settings
from .errors import ScreenshotFileError

logger = logging.getLogger(__name__)


def date_time(now: datetime | None = None) -> str:
    """Timestamp used in automatic filenames, e.g. 2026-02-19_14:30:55."""
    return (now or datetime.now()).strftime(settings.TIMESTAMP_FORMAT)


def address_label(address: str) -> str:
    """
    Host part of *address* for use in a filename.

    ``TCPIP0::10.0.0.2::inst0::INSTR`` becomes ``10.0.0.2``; other VISA
    resource strings have their ``::`` separators replaced.
    """
    if "::" not in address:
        return address
    fields = address.split("::")
    if fields[0].upper().startswith("TCPIP") and len(fields) > 1 and fields[1]:
        return fields[1]
    return "_".join(field for field in fields if field)


def resolve_filename(address: str, image_format: str, filename: str | None = None,
                     now: datetime | None = None) -> str:
    if filename:
        return filename
    return settings.FILENAME_TEMPLATE.format(
        address=address_label(address), timestamp=date_time(now), format=image_format
    )


def image_info(data: bytes) -> tuple[str, tuple[int, int]] | None:
    """
    Identify *data* with Pillow.

    Returns (format, (width, height)) with the format in lower case
    (``"png"``, ``"bmp"``, ...), or None when Pillow does not recognise it.
    Only the header is parsed; the pixels are never decoded.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            return img.format.lower(), img.size
    except (UnidentifiedImageError, OSError, ValueError):
        return None


def dump(screenshot, address: str, filename: str | None = None) -> str:
    """
    Write *screenshot* to disk and return the filename used.

    An existing file is truncated and rewritten. Missing parent
    directories are created.
    """
    path = resolve_filename(address, screenshot.image_format, filename)

    info = image_info(screenshot.data)
    if info is None:
        logger.warning("Image data not recognised - saving raw bytes")
    else:
        fmt, (width, height) = info
        logger.debug("Image: %s, %d x %d px", fmt.upper(), width, height)

    try:
        out_dir = os.path.dirname(os.path.abspath(path))
        os.makedirs(out_dir, exist_ok=True)
        with open(path, "wb") as fh:
            fh.write(screenshot.data)
    except OSError as exc:
        raise ScreenshotFileError(
            f"Could not write screenshot file ({exc.strerror or exc})"
        ) from exc

    print(f"Saved screenshot image to {path}")
    logger.debug("File size: %s bytes", f"{len(screenshot.data):,}")
    return path
