"""
Plugin selection.

Either the user names a plugin, or the instrument is asked for its ID and
every registered plugin is scored against it. The highest score wins;
on a tie the plugin registered first keeps the lead.
"""

import logging

from . import settings
from .errors import DetectionAmbiguityError, PluginNotFoundError, TransportError
from .matching import score
from .transport import query_identity, strip_line_terminator

logger = logging.getLogger(__name__)


def autodetect(registry, identity: str):
    """Return the best matching plugin for *identity*."""
    winner = None
    best = 0
    for plugin in registry:
        count = score(identity, plugin)
        logger.debug("%-16s score %d", plugin.name, count)
        # strictly greater: earlier registration wins ties
        if count > best:
            winner, best = plugin, count

    if winner is None:
        raise DetectionAmbiguityError(
            "Could not autodetect which screenshot plugin to use - "
            "please specify plugin name manually"
        )
    return winner


def select_plugin(registry, address: str, plugin_name: str | None = None,
                  timeout: float | None = settings.DEFAULT_TIMEOUT_SEC,
                  identify=query_identity):
    """
    Pick the plugin to use for the instrument at *address*.

    With *plugin_name* the registry is searched by exact name and the
    instrument is not contacted. Otherwise *identify* is called to fetch the
    instrument ID and the plugin is autodetected.
    """
    if plugin_name:
        plugin = registry.find_by_name(plugin_name)
        if plugin is None:
            raise PluginNotFoundError(f"Unknown plugin name '{plugin_name}'")
        return plugin

    try:
        identity = identify(address, timeout)
    except TransportError as exc:
        raise TransportError(f"Unable to retrieve instrument ID ({exc})") from exc
    identity = strip_line_terminator(identity)

    plugin = autodetect(registry, identity)
    print(f"Loaded {plugin.name} screenshot plugin")
    return plugin
