"""
╔══════════════════════════════════════════════════════════════════════════╗
║                 Instrument transport : SCPI over VISA (LAN)              ║
╠══════════════════════════════════════════════════════════════════════════╣
║  A thin blocking wrapper around pyvisa:                                  ║
║    • connect     : open a VXI-11 resource for an IP / hostname          ║
║    • send        : write one SCPI command                                ║
║    • receive     : read one raw (binary) response                        ║
║    • disconnect  : close the resource and its ResourceManager            ║
║                                                                          ║
║  Each call uses the same timeout; there is no overall deadline.          ║
╚══════════════════════════════════════════════════════════════════════════╝
"""

import logging

import pyvisa

from . import settings
from .errors import ConfigurationError, TransportError

logger = logging.getLogger(__name__)


def open_resource_manager() -> pyvisa.ResourceManager:
    """
    Return the best available VISA ResourceManager.

    Priority:
      1. System VISA backend (NI-VISA, Keysight IO, IVI Foundation driver).
      2. pyvisa-py pure-Python backend (@py)
         used when no system VISA is installed.
    """
    try:
        return pyvisa.ResourceManager()
    except (OSError, ValueError) as exc:
        logger.debug("System VISA unavailable (%s), using %s", exc, settings.VISA_BACKEND)
    return pyvisa.ResourceManager(settings.VISA_BACKEND)


# ══════════════════════════ Resource helpers ════════════════════════════════

def build_resource(address: str) -> str:
    """
    Return the VISA resource string for *address*.

    A bare IP address or hostname becomes a VXI-11 resource
    (``TCPIP::<address>::inst0::INSTR``); a full VISA resource string is
    passed through untouched.
    """
    if "::" in address:
        return address
    return settings.VISA_RESOURCE.format(address=address)


def timeout_ms(timeout: float | None) -> int | None:
    """Convert a timeout in seconds to pyvisa milliseconds (None = wait forever)."""
    if not timeout:
        return None
    return max(1, int(timeout * 1000))


def strip_ieee_block(data: bytes) -> bytes:
    """
    Remove an IEEE 488.2 block header from *data*.

    Definite length   #N<N digits><data>  -> <data>
    Indefinite length #0<data>\\n          -> <data>
    Data without a well formed header is returned unchanged.
    """
    if data[0:1] != b"#" or not data[1:2].isdigit():
        return data
    n_digits = int(data[1:2])
    if n_digits == 0:
        return data[2:-1] if data.endswith(b"\n") else data[2:]
    length_field = data[2 : 2 + n_digits]
    if len(length_field) != n_digits or not length_field.isdigit():
        return data
    byte_count = int(length_field)
    return data[2 + n_digits : 2 + n_digits + byte_count]


def strip_line_terminator(text: str) -> str:
    """Remove one trailing \\n or \\r\\n."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


# ══════════════════════════ Connection ══════════════════════════════════════

class Connection:
    """
    One VISA session to one instrument.

    Use as a context manager so the session is released on every path::

        with Connection("192.168.1.10", timeout=5) as conn:
            conn.send("*IDN?")
            reply = conn.receive(1024)
    """

    def __init__(self, address: str, timeout: float | None = settings.DEFAULT_TIMEOUT_SEC):
        if not address:
            raise ConfigurationError("Missing address")
        self.address = address
        self.resource = build_resource(address)
        self.timeout = timeout
        self._rm = None
        self._instrument = None

    @property
    def is_connected(self) -> bool:
        return self._instrument is not None

    def connect(self) -> "Connection":
        logger.debug("Opening %s (timeout %s s)", self.resource, self.timeout or "none")
        try:
            self._rm = open_resource_manager()
        except (pyvisa.errors.Error, OSError, ValueError) as exc:
            raise TransportError(f"Failed to connect: no VISA backend ({exc})") from exc

        kwargs = {}
        ms = timeout_ms(self.timeout)
        if ms is not None:
            kwargs["open_timeout"] = ms
        try:
            instrument = self._rm.open_resource(self.resource, **kwargs)
        except (pyvisa.errors.Error, OSError, ValueError) as exc:
            self._close_rm()
            raise TransportError(f"Failed to connect to {self.resource}: {exc}") from exc

        # binary responses: no read terminator, commands end with newline
        instrument.timeout = ms
        instrument.read_termination = None
        instrument.write_termination = "\n"
        self._instrument = instrument
        return self

    def send(self, command: str) -> None:
        if not self.is_connected:
            raise TransportError("Instrument not connected")
        logger.debug("WRITE: %s", command)
        try:
            self._instrument.write(command)
        except (pyvisa.errors.Error, OSError) as exc:
            raise TransportError(f"Failed to send '{command}': {exc}") from exc

    def receive(self, max_bytes: int) -> bytes:
        if not self.is_connected:
            raise TransportError("Instrument not connected")
        try:
            data = self._instrument.read_raw()
        except (pyvisa.errors.Error, OSError) as exc:
            raise TransportError(f"Failed to receive message: {exc}") from exc
        logger.debug("READ: %d bytes", len(data))
        if len(data) > max_bytes:
            raise TransportError(
                f"Failed to receive message: response of {len(data):,} bytes "
                f"exceeds limit of {max_bytes:,} bytes"
            )
        return bytes(data)

    def disconnect(self) -> None:
        instrument, self._instrument = self._instrument, None
        try:
            if instrument is not None:
                instrument.close()
        except (pyvisa.errors.Error, OSError) as exc:
            logger.warning("Error closing %s: %s", self.resource, exc)
        finally:
            self._close_rm()

    def _close_rm(self) -> None:
        rm, self._rm = self._rm, None
        if rm is None:
            return
        try:
            rm.close()
        except (pyvisa.errors.Error, OSError) as exc:
            logger.warning("Error closing resource manager: %s", exc)

    def __enter__(self) -> "Connection":
        return self.connect()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disconnect()


def query_identity(address: str, timeout: float | None = settings.DEFAULT_TIMEOUT_SEC) -> str:
    """
    Ask the instrument at *address* who it is (``*IDN?``).

    The reply is decoded as latin-1 so odd vendor bytes never fail decoding;
    its line terminator is left for the caller.
    """
    with Connection(address, timeout) as conn:
        conn.send("*IDN?")
        raw = conn.receive(settings.ID_LENGTH_MAX)
    identity = raw.decode("latin_1")
    logger.debug("Instrument ID: %s", identity.rstrip())
    return identity
