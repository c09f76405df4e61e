"""
Rohde & Schwarz HMO 1000/2000 and RTB2000 oscilloscopes.

HCOPy:FORMat selects the image type; HCOPy:DATA? returns it as an IEEE block.
"""

from .base import ScpiScreenshotHandler, ScreenshotPlugin

RS_HMO_RTB = ScreenshotPlugin(
    name="rs-hmo-rtb",
    description="Rohde & Schwarz HMO 1000/2000 and RTB 2000 series oscilloscope",
    patterns=("Rohde&Schwarz|ROHDE|HAMEG", "HMO[0-9]{4}|RTB20[0-9]{2}"),
    handler=ScpiScreenshotHandler(["HCOPy:FORMat PNG", "HCOPy:DATA?"], "png"),
)
