import pytest

from rgb_inspector.models.pixel_model import Region
from rgb_inspector.services.selection_service import (
    ViewState,
    canvas_to_image,
    clamp_region,
    normalize_drag,
    region_to_canvas,
    selection_to_region,
)


def test_canvas_to_image_applies_offset_and_scale():
    view = ViewState(scale=2.0, offset_x=10, offset_y=20)
    assert canvas_to_image(view, 30, 60) == (10.0, 20.0)


def test_normalize_drag_any_direction():
    assert normalize_drag((10, 10), (4, 25)) == (4, 10, 6, 15)
    assert normalize_drag((4, 25), (10, 10)) == (4, 10, 6, 15)


def test_selection_at_identity_view():
    region = selection_to_region(ViewState(), (2.7, 3.2), (12.9, 8.8), 100, 50)
    assert region == Region(x=2, y=3, width=10, height=5)


def test_selection_under_zoom_and_pan():
    view = ViewState(scale=4.0, offset_x=100, offset_y=50)
    # canvas (120, 70)-(140, 90) -> image (5, 5)-(10, 10)
    region = selection_to_region(view, (140, 90), (120, 70), 64, 64)
    assert region == Region(5, 5, 5, 5)


def test_click_without_drag_selects_one_pixel():
    region = selection_to_region(ViewState(), (7, 7), (7, 7), 20, 20)
    assert region == Region(7, 7, 1, 1)


def test_selection_clamped_to_right_and_bottom_edges():
    region = selection_to_region(ViewState(), (90, 40), (130, 80), 100, 50)
    assert region == Region(90, 40, 10, 10)


def test_selection_starting_left_of_image_keeps_origin_at_zero():
    region = clamp_region(-5.0, -3.0, 8.0, 4.0, 20, 20)
    assert region.x == 0 and region.y == 0
    assert region.width == 8 and region.height == 4


def test_selection_entirely_past_edge_collapses_to_last_pixel():
    region = clamp_region(150.0, 10.0, 20.0, 5.0, 100, 50)
    assert region == Region(99, 10, 1, 5)


@pytest.mark.parametrize(
    "start,end",
    [((0, 0), (1000, 1000)), ((-50, -50), (5, 5)), ((33.3, 12.1), (34.0, 12.2)), ((199, 99), (400, 400))],
)
def test_selection_always_satisfies_region_invariant(start, end):
    width, height = 200, 100
    region = selection_to_region(ViewState(scale=0.5), start, end, width, height)
    assert region.x >= 0 and region.y >= 0
    assert region.width >= 1 and region.height >= 1
    assert region.x + region.width <= width
    assert region.y + region.height <= height


def test_selection_rejects_empty_image():
    with pytest.raises(ValueError):
        selection_to_region(ViewState(), (0, 0), (1, 1), 0, 10)


def test_region_to_canvas_inverts_mapping():
    view = ViewState(scale=2.0, offset_x=5, offset_y=7)
    assert region_to_canvas(view, Region(1, 2, 3, 4)) == (7.0, 11.0, 13.0, 19.0)
