"""
Rigol DS / MSO oscilloscopes.

Both families answer :DISPlay:DATA? with an IEEE block (#9<9 digits>).
The 1000Z query takes arguments selecting colour, invert and PNG output;
the 2000 series always sends a BMP.
"""

from .base import ScpiScreenshotHandler, ScreenshotPlugin

RIGOL_1000Z = ScreenshotPlugin(
    name="rigol-1000z",
    description="Rigol DS/MSO 1000Z series oscilloscope",
    patterns=("RIGOL", "(DS|MSO)1[0-9]{2}4Z"),
    handler=ScpiScreenshotHandler(":DISPlay:DATA? ON,0,PNG", "png"),
)

RIGOL_2000 = ScreenshotPlugin(
    name="rigol-2000",
    description="Rigol DS/MSO 2000 series oscilloscope",
    patterns=("RIGOL", "(DS|MSO)2[0-9]{3}"),
    handler=ScpiScreenshotHandler(":DISPlay:DATA?", "bmp"),
)
