import re
import sys
from dataclasses import dataclass
from enum import Enum

from imgcatr.errors import InvalidSizeArgument
from imgcatr.geometry import Dimensions

_SIZE_RE = re.compile(r"^(\d+)[xX](\d+)$")


class OutputMode(Enum):
    TRUECOLOR = "truecolor"
    SIMPLE_BLACK = "simple-black"
    SIMPLE_WHITE = "simple-white"
    ASCII = "ascii"
    NO_ANSI = "no-ansi"

    @property
    def vertical_samples(self) -> int:
        """Pixel samples stacked in one character row."""
        if self in (OutputMode.ASCII, OutputMode.NO_ANSI):
            return 1
        return 2

    @property
    def uses_escapes(self) -> bool:
        return self not in (OutputMode.ASCII, OutputMode.NO_ANSI)


# Values accepted by --ansi; NO_ANSI is only ever picked automatically
CLI_MODES = [m.value for m in OutputMode if m is not OutputMode.NO_ANSI]


@dataclass(frozen=True)
class RenderConfig:
    size: Dimensions | None = None
    preserve_aspect: bool = True
    mode: OutputMode | None = None


def parse_size(text: str) -> Dimensions:
    """Parse an NxM size string such as "80x24"."""
    match = _SIZE_RE.match(text.strip())
    if match is None:
        raise InvalidSizeArgument(text)
    columns, rows = int(match.group(1)), int(match.group(2))
    if columns == 0 or rows == 0:
        raise InvalidSizeArgument(text, "Can't resize image to size 0")
    return Dimensions(columns, rows)


def default_output_mode(platform: str | None = None, have_terminal: bool = True) -> OutputMode:
    """Mode used when none was asked for.

    Windows consoles attached to a terminal get plain output; everything else,
    including redirected output, gets truecolor escapes.
    """
    if platform is None:
        platform = sys.platform
    if platform.startswith("win") and have_terminal:
        return OutputMode.NO_ANSI
    return OutputMode.TRUECOLOR
