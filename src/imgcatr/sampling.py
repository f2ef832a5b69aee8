from typing import Iterator, NamedTuple

import numpy as np
from PIL import Image

RGB = tuple[int, int, int]


class SampledCell(NamedTuple):
    upper: RGB
    lower: RGB

    @property
    def luminance(self) -> float:
        return luminance(self.upper)


def luminance(rgb: RGB) -> float:
    """Perceptual brightness of an RGB colour, 0-255."""
    r, g, b = rgb
    return 0.299 * r + 0.587 * g + 0.114 * b


def _region_starts(source: int, target: int) -> np.ndarray:
    """First source index covered by each of `target` output samples."""
    return np.arange(target) * source // target


def _region_sums(arr: np.ndarray, starts: np.ndarray, axis: int) -> tuple[np.ndarray, np.ndarray]:
    """Sum arr over consecutive regions along an axis, returning (sums, region sizes).

    Repeated starts (up-scaling) select a single pixel, which is what reduceat
    does when an index is not smaller than the next one.
    """
    sums = np.add.reduceat(arr, starts, axis=axis)
    ends = np.append(starts[1:], arr.shape[axis])
    counts = np.maximum(ends - starts, 1)
    return sums, counts


def composite(pixels: np.ndarray) -> np.ndarray:
    """Flatten RGBA onto a black background, returning float64 RGB."""
    rgb = pixels[:, :, :3].astype(np.float64)
    if pixels.shape[2] < 4:
        return rgb
    alpha = pixels[:, :, 3:4].astype(np.float64) / 255.0
    return rgb * alpha


def sample(image: np.ndarray | Image.Image, columns: int, rows: int) -> np.ndarray:
    """Box-average an image down (or nearest-neighbour it up) to a (rows, columns, 3) uint8 grid.

    Each output sample covers source pixels [i * n // m, (i + 1) * n // m) along
    both axes, and at least one pixel, so a 1x1 image fills any grid.
    """
    if isinstance(image, Image.Image):
        image = np.asarray(image.convert("RGBA"))
    height, width = image.shape[:2]
    rgb = composite(image)

    row_starts = _region_starts(height, rows)
    col_starts = _region_starts(width, columns)

    summed, row_counts = _region_sums(rgb, row_starts, axis=0)
    summed, col_counts = _region_sums(summed, col_starts, axis=1)
    area = (row_counts[:, np.newaxis] * col_counts[np.newaxis, :])[:, :, np.newaxis]

    return np.clip(np.rint(summed / area), 0, 255).astype(np.uint8)


def sample_cells(grid: np.ndarray, vertical_samples: int) -> Iterator[list[SampledCell]]:
    """Group a sampled grid into rows of cells, stacking `vertical_samples` grid rows per cell."""
    for top in range(0, grid.shape[0], vertical_samples):
        upper = grid[top]
        lower = grid[min(top + vertical_samples - 1, grid.shape[0] - 1)]
        yield [
            SampledCell(tuple(int(v) for v in u), tuple(int(v) for v in lo))
            for u, lo in zip(upper, lower)
        ]
