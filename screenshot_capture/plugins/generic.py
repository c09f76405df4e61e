"""
Generic :DISPlay:DATA? screen dump for instruments without a dedicated plugin.

Never autodetected; select it by name. The image format is whatever Pillow
recognises in the returned data.
"""

from .base import ScpiScreenshotHandler, ScreenshotPlugin

SCPI_DISPLAY = ScreenshotPlugin(
    name="scpi-display",
    description="Generic SCPI instrument answering :DISPlay:DATA? (select manually)",
    patterns=None,
    handler=ScpiScreenshotHandler(":DISPlay:DATA?", None),
)
