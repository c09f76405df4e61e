"""
Screenshot plugin building blocks.

A plugin pairs a name, a description and a set of identity patterns with a
handler that knows how to pull a screen dump out of one instrument family.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .. import settings
from ..errors import TransportError
from ..output import image_info
from ..transport import Connection, strip_ieee_block

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Screenshot:
    data: bytes
    image_format: str


class ScreenshotHandler(ABC):
    """Capability that captures a screenshot from one instrument."""

    @abstractmethod
    def capture(self, address: str, timeout: float | None) -> Screenshot:
        """Connect to *address*, grab the screen, return the image bytes."""


class ScpiScreenshotHandler(ScreenshotHandler):
    """
    Screen dump via a fixed SCPI command sequence.

    Every command in *commands* is written in order; the last one must make
    the instrument send the image, which is read as a single raw response.

    image_format : file extension of the returned image, or None to detect
                   it from the data with Pillow
    ieee_block   : response is wrapped in an IEEE 488.2 #N<len> block
    delay        : seconds to wait after each command (rendering time)
    """

    def __init__(self, commands, image_format: str | None, ieee_block: bool = True,
                 delay: float = 0.0):
        if isinstance(commands, str):
            commands = [commands]
        self.commands = tuple(commands)
        self.image_format = image_format
        self.ieee_block = ieee_block
        self.delay = delay

    def capture(self, address: str, timeout: float | None) -> Screenshot:
        with Connection(address, timeout) as conn:
            for command in self.commands:
                conn.send(command)
                if self.delay:
                    time.sleep(self.delay)
            data = conn.receive(settings.IMAGE_SIZE_MAX)

        if self.ieee_block:
            data = strip_ieee_block(data)
        if len(data) < settings.IMAGE_SIZE_MIN:
            raise TransportError(f"Image data too small ({len(data)} bytes)")

        return Screenshot(data, self.image_format or self._detect_format(data))

    @staticmethod
    def _detect_format(data: bytes) -> str:
        info = image_info(data)
        if info is None:
            raise TransportError("Received data is not a recognised image format")
        return info[0]

    def __repr__(self):
        return f"{self.__class__.__name__}({list(self.commands)!r}, {self.image_format!r})"


def split_patterns(patterns) -> tuple[str, ...] | None:
    """Normalise a pattern declaration to a tuple of fragments (None stays None)."""
    if patterns is None:
        return None
    if isinstance(patterns, str):
        return tuple(patterns.split())
    return tuple(patterns)


@dataclass(frozen=True)
class ScreenshotPlugin:
    """
    Registered screenshot plugin.

    patterns is None for plugins that are only used when named explicitly;
    otherwise it holds independent regular expressions, each of which adds
    one point to the plugin's score when it matches the instrument ID. A
    whitespace separated string is accepted and split into fragments.
    """

    name: str
    description: str
    patterns: tuple[str, ...] | None
    handler: ScreenshotHandler

    def __post_init__(self):
        object.__setattr__(self, "patterns", split_patterns(self.patterns))
