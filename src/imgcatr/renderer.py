import io
import logging
from pathlib import Path
from typing import TextIO

import numpy as np
from PIL import Image

from imgcatr.decoder import ImageDecoder, PillowDecoder, to_pixels
from imgcatr.encoding import PALETTES, encode, encode_palette_grid
from imgcatr.geometry import Dimensions, bound, resolve
from imgcatr.options import OutputMode, RenderConfig, default_output_mode
from imgcatr.palettes import ANSI_RESET
from imgcatr.sampling import sample, sample_cells
from imgcatr.terminal import FALLBACK_SIZE, SystemTerminal, TerminalSizeSource, terminal_bound

logger = logging.getLogger(__name__)


def render_lines(image: np.ndarray, size: Dimensions, mode: OutputMode) -> list[str]:
    """Sample and encode an image already known to fit `size`, one string per row."""
    grid = sample(image, size.columns, size.rows * mode.vertical_samples)
    suffix = ANSI_RESET if mode.uses_escapes else ""
    palette = PALETTES.get(mode)
    if palette is not None:
        rows = encode_palette_grid(grid, palette)
    else:
        rows = ["".join(encode(mode, cell) for cell in row) for row in sample_cells(grid, mode.vertical_samples)]
    return [row + suffix for row in rows]


def render_to(
    out: TextIO,
    image: np.ndarray | Image.Image,
    config: RenderConfig,
    terminal: Dimensions = FALLBACK_SIZE,
) -> None:
    """Render an image to a text stream, sized against `terminal` unless the config asks for a size."""
    if isinstance(image, Image.Image):
        image = to_pixels(image)
    height, width = image.shape[:2]
    size = resolve((width, height), config.size, terminal, config.preserve_aspect)
    mode = config.mode if config.mode is not None else default_output_mode()
    logger.debug("Rendering %dx%d image as %dx%d cells in %s mode", width, height, *size, mode.value)

    for line in render_lines(image, size, mode):
        out.write(line)
        out.write("\n")


def render(image: np.ndarray | Image.Image, config: RenderConfig, terminal: Dimensions = FALLBACK_SIZE) -> str:
    buf = io.StringIO()
    render_to(buf, image, config, terminal)
    return buf.getvalue()


class Renderer:
    """Decodes image files and writes them out as terminal text."""

    def __init__(self, decoder: ImageDecoder | None = None, terminal: TerminalSizeSource | None = None):
        self.decoder = decoder if decoder is not None else PillowDecoder()
        self.terminal = terminal if terminal is not None else SystemTerminal()

    def resolve_config(self, config: RenderConfig) -> tuple[RenderConfig, Dimensions]:
        """Fill in the mode and check the output area, before any image is touched."""
        area, have_terminal = terminal_bound(self.terminal)
        bound(config.size, area)
        if config.mode is None:
            config = RenderConfig(config.size, config.preserve_aspect, default_output_mode(have_terminal=have_terminal))
        return config, area

    def render_file(self, path: str | Path, config: RenderConfig, out: TextIO) -> None:
        config, area = self.resolve_config(config)
        image = self.decoder.decode(path)
        render_to(out, image, config, area)
