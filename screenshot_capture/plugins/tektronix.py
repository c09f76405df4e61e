"""
Tektronix MSO/DPO 2000 and MDO 3000 series.

HARDCopy START sends the image straight onto the bus without a block
header. INKSaver OFF keeps the native black background.
"""

from .base import ScpiScreenshotHandler, ScreenshotPlugin

TEKTRONIX_2000 = ScreenshotPlugin(
    name="tektronix-2000",
    description="Tektronix MSO/DPO 2000 and MDO 3000 series oscilloscope",
    patterns=("TEKTRONIX", "(DPO|MSO)2[0-9]{3}|MDO3[0-9]{3}"),
    handler=ScpiScreenshotHandler(
        ["SAVE:IMAGe:FILEFormat PNG", "HARDCopy:INKSaver OFF", "HARDCopy START"],
        "png",
        ieee_block=False,
        delay=0.2,
    ),
)
