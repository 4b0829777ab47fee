"""Input-layer public API for key decoding and key-to-intent mapping.

Exports are split between low-level terminal decoding (``read_key``) and the
``KeyMap`` used by the runtime loop.
"""

from .keys import DEFAULT_PAGE_SIZE, KeyMap
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyMap",
    "read_key",
]
