"""Top level screenshot flow: select a plugin, run it, save the image."""

import logging

from . import output, settings
from .errors import ConfigurationError
from .registry import default_registry
from .selector import select_plugin
from .transport import query_identity

logger = logging.getLogger(__name__)


def dispatch(plugin, address: str, timeout: float | None):
    """Run *plugin*'s handler; its result or exception is passed through."""
    logger.debug("Capturing from %s with %s", address, plugin.name)
    return plugin.handler.capture(address, timeout)


def screenshot(address: str, plugin_name: str | None = None, filename: str | None = None,
               timeout: float | None = settings.DEFAULT_TIMEOUT_SEC, registry=None,
               identify=query_identity) -> str:
    """
    Capture a screenshot from the instrument at *address*.

    Returns the name of the file written.
    """
    if not address:
        raise ConfigurationError("Missing address")
    if registry is None:
        registry = default_registry()

    plugin = select_plugin(registry, address, plugin_name, timeout, identify=identify)
    image = dispatch(plugin, address, timeout)
    return output.dump(image, address, filename)
