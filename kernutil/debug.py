"""Selective debug output controlled by a string of single-character flags."""

from __future__ import annotations

import sys
from typing import TextIO

DBG_ALL = "+"
DBG_THREAD = "t"
DBG_SYNCH = "s"
DBG_INT = "i"
DBG_MACH = "m"
DBG_DISK = "d"
DBG_FILE = "f"
DBG_ADDR = "a"
DBG_NET = "n"


class Debug:
    """Decides which debug messages are printed.

    ``flags`` is a string of flag characters whose messages are enabled;
    the character ``+`` enables every message.  ``None`` disables all.
    """

    def __init__(self, flags: str | None = None, stream: TextIO | None = None) -> None:
        self.flags = flags
        self._stream = stream

    def is_enabled(self, flag: str) -> bool:
        """Return True if messages tagged with ``flag`` are to be printed."""
        if len(flag) != 1:
            raise ValueError(f"debug flag must be a single character, got {flag!r}")
        if self.flags is None:
            return False
        return flag in self.flags or DBG_ALL in self.flags

    def message(self, flag: str, text: object) -> bool:
        """Print ``text`` on its own line if ``flag`` is enabled.

        Returns whether the message was printed.
        """
        if not self.is_enabled(flag):
            return False
        stream = self._stream if self._stream is not None else sys.stderr
        print(text, file=stream)
        return True