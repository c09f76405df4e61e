"""
Exception hierarchy for screen capture.

Every failure the tool can report derives from ScreenshotError, so the CLI
can turn any of them into a one-line diagnostic and a non-zero exit code.
"""


class ScreenshotError(Exception):
    """Base class for all screen capture failures."""


class ConfigurationError(ScreenshotError):
    """A required option is missing or an option value is unusable."""


class RegistryError(ScreenshotError):
    """A plugin could not be registered (registry full, bad or duplicate name)."""


class PluginNotFoundError(ScreenshotError, LookupError):
    """An explicitly requested plugin name is not registered."""


class TransportError(ScreenshotError):
    """Connecting to, talking to, or reading from the instrument failed."""


class DetectionAmbiguityError(ScreenshotError):
    """No registered plugin matched the instrument identity."""


class ScreenshotFileError(ScreenshotError, OSError):
    """The screenshot file could not be written."""
