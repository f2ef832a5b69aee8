import logging
import os
import sys
from typing import Protocol

from imgcatr.errors import TerminalSizeUnavailable
from imgcatr.geometry import Dimensions

logger = logging.getLogger(__name__)

FALLBACK_SIZE = Dimensions(138, 22)


class TerminalSizeSource(Protocol):
    def query(self) -> Dimensions:
        """Return (columns, rows) of the terminal, or raise TerminalSizeUnavailable."""
        ...


class SystemTerminal:
    """Asks the OS for the size of the terminal attached to a stream."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def query(self) -> Dimensions:
        try:
            size = os.get_terminal_size(self.stream.fileno())
        except (AttributeError, ValueError, OSError) as e:
            raise TerminalSizeUnavailable("Terminal size unavailable", str(e)) from e
        return Dimensions(size.columns, size.lines)


def terminal_bound(source: TerminalSizeSource) -> tuple[Dimensions, bool]:
    """Default output area and whether a terminal was actually found.

    One row is left free for the prompt that follows the image, unless the
    terminal has only one. A zero-sized terminal is passed through unchanged.
    """
    try:
        size = source.query()
    except TerminalSizeUnavailable as e:
        logger.debug("%s, falling back to %dx%d", e, *FALLBACK_SIZE)
        return FALLBACK_SIZE, False
    rows = max(size.rows - 1, 1) if size.rows > 0 else size.rows
    return Dimensions(size.columns, rows), True
