from typing import NamedTuple

from imgcatr.errors import InvalidGeometry

# A character cell covers one pixel horizontally and two vertically
CELL_ASPECT = 2


class Dimensions(NamedTuple):
    columns: int
    rows: int


def bound(requested: Dimensions | None, terminal: Dimensions) -> Dimensions:
    """Pick the area to render into, rejecting empty ones."""
    area = requested if requested is not None else terminal
    if area.columns <= 0 or area.rows <= 0:
        raise InvalidGeometry(area.columns, area.rows)
    return Dimensions(area.columns, area.rows)


def resolve(
    source: tuple[int, int],
    requested: Dimensions | None,
    terminal: Dimensions,
    preserve_aspect: bool = True,
) -> Dimensions:
    """Compute the output size in cells for a source image of (width, height) pixels.

    With preserve_aspect the image is scaled to the largest size fitting the
    bound, counting every cell as CELL_ASPECT pixels tall. Otherwise it is
    stretched to fill the bound.
    """
    area = bound(requested, terminal)
    if not preserve_aspect:
        return area

    width, height = source
    pixel_width = area.columns
    pixel_height = area.rows * CELL_ASPECT

    # Integer arithmetic so the limiting side lands exactly on the bound
    if pixel_width * height <= pixel_height * width:
        columns = pixel_width
        rows = height * pixel_width // (width * CELL_ASPECT)
    else:
        columns = width * pixel_height // height
        rows = area.rows

    return Dimensions(max(1, min(area.columns, columns)), max(1, min(area.rows, rows)))
