"""Siglent SDM3000 series bench multimeters: scdp dumps the display as a raw BMP."""

from .base import ScpiScreenshotHandler, ScreenshotPlugin

SIGLENT_SDM3000 = ScreenshotPlugin(
    name="siglent-sdm3000",
    description="Siglent SDM 3000/3000X series digital multimeter",
    patterns="SIGLENT TECHNOLOGIES Siglent Technologies SDM3...",
    handler=ScpiScreenshotHandler("scdp", "bmp", ieee_block=False),
)
