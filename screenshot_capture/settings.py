"""
Defaults for instrument screen capture.

Command line options override the timeout; the remaining values are fixed
limits of the capture protocol and the plugin registry.
"""

# ═══════════════════════════ CONFIGURATION ═════════════════════════════════ #

# ── Transport ────────────────────────────────────────────────────────────── #
DEFAULT_TIMEOUT_SEC = 15          # Seconds per transport call  |  0 = no timeout
VISA_RESOURCE       = "TCPIP::{address}::inst0::INSTR"   # VXI-11 LAN resource
VISA_BACKEND        = "@py"       # Fallback backend when no system VISA exists

# ── Response limits ──────────────────────────────────────────────────────── #
ID_LENGTH_MAX       = 65536       # Bytes accepted for a *IDN? response
IMAGE_SIZE_MAX      = 0x400000    # 4 MB, largest screen dump accepted
IMAGE_SIZE_MIN      = 100         # Anything smaller is not a real image

# ── Plugin registry ──────────────────────────────────────────────────────── #
PLUGIN_LIST_SIZE_MAX = 50

# ── Output ───────────────────────────────────────────────────────────────── #
FILENAME_TEMPLATE   = "screenshot_{address}_{timestamp}.{format}"
TIMESTAMP_FORMAT    = "%Y-%m-%d_%H:%M:%S"
