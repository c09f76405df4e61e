"""Column aligned listing of registered plugins."""


def format_plugin_list(registry) -> list[str]:
    """
    Render the registry as lines of text::

                   Name   Description
           keysight-ivx   Keysight InfiniiVision ...
            rigol-1000z   Rigol DS/MSO 1000Z ...

    Names are right aligned to the longest registered name.
    """
    width = max((len(plugin.name) for plugin in registry), default=0)
    lines = [" " * (width - 4) + "Name   Description"]
    for plugin in registry:
        lines.append(f"{plugin.name:>{width}}   {plugin.description}")
    return lines


def list_plugins(registry) -> None:
    for line in format_plugin_list(registry):
        print(line)
