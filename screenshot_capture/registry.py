"""
Ordered registry of screenshot plugins.

Registration order matters: when two plugins match an instrument ID equally
well, the one registered first is selected.
"""

import logging

from . import settings
from .errors import RegistryError
from .plugins import BUILTIN_PLUGINS

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Append-only, bounded collection of ScreenshotPlugin objects."""

    def __init__(self, capacity: int = settings.PLUGIN_LIST_SIZE_MAX):
        self.capacity = capacity
        self._plugins = []

    def register(self, plugin) -> None:
        if not plugin.name:
            raise RegistryError("Screenshot plugin name must not be empty")
        if len(self._plugins) >= self.capacity:
            raise RegistryError("Screenshot plugin list full")
        if self.find_by_name(plugin.name) is not None:
            raise RegistryError(f"Screenshot plugin '{plugin.name}' already registered")
        self._plugins.append(plugin)
        logger.debug("Registered screenshot plugin %s", plugin.name)

    def find_by_name(self, name: str):
        """Return the plugin called exactly *name*, or None."""
        for plugin in self._plugins:
            if plugin.name == name:
                return plugin
        return None

    def all(self) -> tuple:
        return tuple(self._plugins)

    def names(self) -> list[str]:
        return [plugin.name for plugin in self._plugins]

    def __iter__(self):
        return iter(tuple(self._plugins))

    def __len__(self) -> int:
        return len(self._plugins)


def default_registry(capacity: int = settings.PLUGIN_LIST_SIZE_MAX) -> PluginRegistry:
    """Build a registry holding the built-in plugins."""
    registry = PluginRegistry(capacity)
    for plugin in BUILTIN_PLUGINS:
        registry.register(plugin)
    return registry
