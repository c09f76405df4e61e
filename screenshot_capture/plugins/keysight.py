"""
Keysight / Agilent InfiniiVision X-series (DSO-X, MSO-X, EDUX).

:DISPlay:DATA? returns a definite-length binary block with a PNG image.
"""

from .base import ScpiScreenshotHandler, ScreenshotPlugin

KEYSIGHT_IVX = ScreenshotPlugin(
    name="keysight-ivx",
    description="Keysight InfiniiVision 1000X/2000X/3000X/4000X/6000X series oscilloscope",
    patterns=("KEYSIGHT|Keysight|AGILENT|Agilent", "[DM]SO-?X|EDUX"),
    handler=ScpiScreenshotHandler(":DISPlay:DATA? PNG, COLor", "png"),
)
