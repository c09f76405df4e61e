"""Built-in screenshot plugins, in registration order."""

from .base import (
    ScpiScreenshotHandler,
    Screenshot,
    ScreenshotHandler,
    ScreenshotPlugin,
    split_patterns,
)
from .generic import SCPI_DISPLAY
from .keysight import KEYSIGHT_IVX
from .rigol import RIGOL_1000Z, RIGOL_2000
from .rohde_schwarz import RS_HMO_RTB
from .siglent import SIGLENT_SDM3000
from .tektronix import TEKTRONIX_2000

# First registered wins ties during autodetection.
BUILTIN_PLUGINS = (
    KEYSIGHT_IVX,
    RIGOL_1000Z,
    RIGOL_2000,
    RS_HMO_RTB,
    TEKTRONIX_2000,
    SIGLENT_SDM3000,
    SCPI_DISPLAY,
)

__all__ = [
    "BUILTIN_PLUGINS",
    "ScpiScreenshotHandler",
    "Screenshot",
    "ScreenshotHandler",
    "ScreenshotPlugin",
    "split_patterns",
]
