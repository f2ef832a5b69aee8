import pytest
from hypothesis import given
from hypothesis import strategies as st

from imgcatr.errors import InvalidGeometry
from imgcatr.geometry import CELL_ASPECT, Dimensions, bound, resolve

source_sides = st.integers(min_value=1, max_value=4000)
bound_sides = st.integers(min_value=1, max_value=400)


def test_stretch_uses_bound_exactly():
    assert resolve((640, 480), None, Dimensions(80, 24), preserve_aspect=False) == (80, 24)


def test_wide_image_is_limited_by_columns():
    # Pixel bound is 80x48; 200x100 scales by 0.4 to 80x40 pixels = 80x20 cells
    assert resolve((200, 100), None, Dimensions(80, 24)) == (80, 20)


def test_tall_image_is_limited_by_rows():
    # 100x200 scales by 48/200 to 24x48 pixels = 24x24 cells
    assert resolve((100, 200), None, Dimensions(80, 24)) == (24, 24)


def test_requested_size_overrides_terminal():
    assert resolve((10, 10), Dimensions(4, 4), Dimensions(200, 200), preserve_aspect=False) == (4, 4)


def test_square_image_uses_half_as_many_rows():
    assert resolve((100, 100), Dimensions(40, 40), Dimensions(1, 1)) == (40, 20)


def test_extreme_aspect_never_collapses_to_zero():
    assert resolve((1000, 1), None, Dimensions(10, 10)) == (10, 1)
    assert resolve((1, 1000), None, Dimensions(10, 10)) == (1, 10)


def test_upscales_small_images():
    assert resolve((2, 2), None, Dimensions(8, 8)) == (8, 4)


@pytest.mark.parametrize("area", [Dimensions(0, 10), Dimensions(10, 0), Dimensions(0, 0), Dimensions(-1, 5)])
def test_zero_sized_bound_rejected(area):
    with pytest.raises(InvalidGeometry):
        resolve((10, 10), area, Dimensions(80, 24))
    with pytest.raises(InvalidGeometry):
        resolve((10, 10), None, area, preserve_aspect=False)


def test_bound_prefers_request():
    assert bound(Dimensions(3, 4), Dimensions(80, 24)) == (3, 4)
    assert bound(None, Dimensions(80, 24)) == (80, 24)


@given(w=source_sides, h=source_sides, bw=bound_sides, bh=bound_sides)
def test_preserved_aspect_fits_bound(w, h, bw, bh):
    columns, rows = resolve((w, h), Dimensions(bw, bh), Dimensions(1, 1))
    assert 1 <= columns <= bw
    assert 1 <= rows <= bh
    # One side touches the bound
    assert columns == bw or rows == bh


@given(w=source_sides, h=source_sides, bw=bound_sides, bh=bound_sides)
def test_preserved_aspect_within_one_cell(w, h, bw, bh):
    columns, rows = resolve((w, h), Dimensions(bw, bh), Dimensions(1, 1))
    exact_rows = columns * h / (w * CELL_ASPECT)
    exact_columns = rows * CELL_ASPECT * w / h
    assert abs(rows - exact_rows) < 1 or abs(columns - exact_columns) < 1


@given(w=source_sides, h=source_sides, bw=bound_sides, bh=bound_sides)
def test_stretch_equals_bound(w, h, bw, bh):
    assert resolve((w, h), None, Dimensions(bw, bh), preserve_aspect=False) == (bw, bh)
