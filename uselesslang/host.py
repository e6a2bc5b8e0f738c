"""Host environment side effects.

The interpreter never touches the outside world directly. Opening a browser
tab, sleeping, and writing output all go through a host object so that an
embedding (or a test) can swap in its own implementation.


File: host.py
Version: 0.1.0
License: MIT
"""

import logging
import time
import webbrowser
from typing import Protocol

logger = logging.getLogger(__name__)


class Host(Protocol):
    """Side-effecting operations the interpreter may invoke."""

    def open_url(self, url: str) -> bool:
        """Open ``url`` in a browser. Return ``False`` if that failed."""

    def sleep(self, milliseconds: int) -> None:
        """Block for ``milliseconds``."""

    def write_line(self, text: str) -> None:
        """Write one line of program output."""


class SystemHost:
    """Host backed by the real browser, clock and standard output."""

    def open_url(self, url: str) -> bool:
        logger.debug("Opening %s", url)
        try:
            return webbrowser.open(url)
        except webbrowser.Error as e:
            logger.debug("Browser refused to open %s: %s", url, e)
            return False

    def sleep(self, milliseconds: int) -> None:
        time.sleep(milliseconds / 1000)

    def write_line(self, text: str) -> None:
        print(text)
