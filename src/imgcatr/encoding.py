from typing import Callable, Sequence

import numpy as np

from imgcatr.options import OutputMode
from imgcatr.palettes import (
    ANSI_BG_ESCAPES,
    ANSI_COLOURS_BLACK_BG,
    ANSI_COLOURS_WHITE_BG,
    ANSI_FG_ESCAPES,
    HALF_BLOCK,
    LUMINANCE_RAMP,
)
from imgcatr.sampling import RGB, SampledCell


def closest_colours(colours: np.ndarray, palette: Sequence[RGB]) -> np.ndarray:
    """Index of the nearest palette entry for every colour of an (..., 3) array, lowest index on ties.

    Uses the weighted ("redmean") Euclidean distance, which tracks perceived
    difference better than plain RGB distance.
    """
    entries = np.asarray(palette, dtype=np.float64)  # (P, 3)
    target = np.asarray(colours, dtype=np.float64)[..., np.newaxis, :]  # (..., 1, 3)
    r_mean = (entries[:, 0] + target[..., 0]) / 2.0  # (..., P)
    diff = entries - target  # (..., P, 3)
    dist = (
        (2.0 + r_mean / 256.0) * diff[..., 0] ** 2
        + 4.0 * diff[..., 1] ** 2
        + (2.0 + (255.0 - r_mean) / 256.0) * diff[..., 2] ** 2
    )
    return np.argmin(dist, axis=-1)


def closest_colour(rgb: RGB, palette: Sequence[RGB]) -> int:
    return int(closest_colours(np.asarray(rgb), palette))


def background_palette(palette: Sequence[RGB]) -> Sequence[RGB]:
    """Colours usable as a background: only the 8 normal ones have escapes."""
    return palette[:8]


def colour_table(
    grid: np.ndarray, upper_palette: Sequence[RGB], lower_palette: Sequence[RGB]
) -> list[list[tuple[int, int]]]:
    """Approximate a half-block sampled grid to palette indices, one (upper, lower) pair per cell.

    Grid rows are taken in pairs; an unpaired last row is dropped.
    """
    rows = grid.shape[0] // 2 * 2
    upper = closest_colours(grid[0:rows:2], upper_palette)
    lower = closest_colours(grid[1:rows:2], lower_palette)
    return [list(zip(u.tolist(), lo.tolist())) for u, lo in zip(upper, lower)]


def palette_token(upper: int, lower: int) -> str:
    return f"{ANSI_FG_ESCAPES[upper]}{ANSI_BG_ESCAPES[lower]}{HALF_BLOCK}"


def encode_palette_grid(grid: np.ndarray, palette: Sequence[RGB]) -> list[str]:
    """Encode a whole half-block sampled grid against a 16-colour palette, one string per cell row."""
    table = colour_table(grid, palette, background_palette(palette))
    return ["".join(palette_token(upper, lower) for upper, lower in row) for row in table]


def ramp_index(lum: float, ramp: str = LUMINANCE_RAMP) -> int:
    return min(max(int(lum * len(ramp) / 256), 0), len(ramp) - 1)


def encode_truecolor(cell: SampledCell) -> str:
    (fr, fg, fb), (br, bg, bb) = cell.upper, cell.lower
    return f"\033[38;2;{fr};{fg};{fb}m\033[48;2;{br};{bg};{bb}m{HALF_BLOCK}"


def _encode_palette(cell: SampledCell, palette: Sequence[RGB]) -> str:
    return palette_token(closest_colour(cell.upper, palette), closest_colour(cell.lower, background_palette(palette)))


def encode_simple_black(cell: SampledCell) -> str:
    return _encode_palette(cell, ANSI_COLOURS_BLACK_BG)


def encode_simple_white(cell: SampledCell) -> str:
    return _encode_palette(cell, ANSI_COLOURS_WHITE_BG)


def encode_ascii(cell: SampledCell) -> str:
    return LUMINANCE_RAMP[ramp_index(cell.luminance)]


PALETTES: dict[OutputMode, Sequence[RGB]] = {
    OutputMode.SIMPLE_BLACK: ANSI_COLOURS_BLACK_BG,
    OutputMode.SIMPLE_WHITE: ANSI_COLOURS_WHITE_BG,
}

# NO_ANSI shares the ASCII glyphs, which never carry escapes
ENCODERS: dict[OutputMode, Callable[[SampledCell], str]] = {
    OutputMode.TRUECOLOR: encode_truecolor,
    OutputMode.SIMPLE_BLACK: encode_simple_black,
    OutputMode.SIMPLE_WHITE: encode_simple_white,
    OutputMode.ASCII: encode_ascii,
    OutputMode.NO_ANSI: encode_ascii,
}


def encode(mode: OutputMode, cell: SampledCell) -> str:
    """Turn one sampled cell into the text printed for it."""
    return ENCODERS[mode](cell)
