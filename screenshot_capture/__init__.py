"""
Instrument screen capture.

Grabs the display of a LAN connected bench instrument (oscilloscope,
multimeter, ...) and saves it to a file. A per-model plugin is picked by
matching the instrument's *IDN? reply, or named explicitly.
"""

__version__ = "1.0.0"

from .capture import dispatch, screenshot
from .errors import (
    ConfigurationError,
    DetectionAmbiguityError,
    PluginNotFoundError,
    RegistryError,
    ScreenshotError,
    ScreenshotFileError,
    TransportError,
)
from .plugins import Screenshot, ScreenshotHandler, ScreenshotPlugin
from .registry import PluginRegistry, default_registry
from .selector import autodetect, select_plugin

__all__ = [
    "__version__",
    "ConfigurationError",
    "DetectionAmbiguityError",
    "PluginNotFoundError",
    "PluginRegistry",
    "RegistryError",
    "Screenshot",
    "ScreenshotError",
    "ScreenshotFileError",
    "ScreenshotHandler",
    "ScreenshotPlugin",
    "TransportError",
    "autodetect",
    "default_registry",
    "dispatch",
    "screenshot",
    "select_plugin",
]
