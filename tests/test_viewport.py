import pytest

from vimrest.viewport import (
    HALF_PAGE,
    SCROLLOFF,
    WIDE_LAYOUT_THRESHOLD,
    PanelSizes,
    Viewport,
    follow_col,
    follow_row,
    panel_sizes,
)


@pytest.mark.parametrize("row", range(0, 200, 7))
@pytest.mark.parametrize("scroll", [0, 10, 50, 150])
def test_follow_row_keeps_margin(row, scroll):
    visible = 30
    new = follow_row(row, scroll, visible, SCROLLOFF)
    assert new >= 0
    assert new <= row
    if row >= SCROLLOFF:
        assert row >= new + SCROLLOFF
    assert row < new + visible - SCROLLOFF


def test_follow_row_unchanged_inside_margin():
    assert follow_row(20, 10, 30, 5) == 10


def test_follow_row_short_view_is_left_alone():
    assert follow_row(100, 7, 10, 5) == 7


def test_follow_row_is_idempotent():
    for row in range(0, 120, 3):
        once = follow_row(row, 40, 25, 4)
        assert follow_row(row, once, 25, 4) == once


def test_follow_col_zero_width_unchanged():
    assert follow_col(50, 3, 0) == 3


def test_follow_col_left_of_view_scrolls_to_col():
    assert follow_col(4, 10, 20) == 4


@pytest.mark.parametrize("col", range(0, 100, 9))
@pytest.mark.parametrize("hscroll", [0, 15, 60])
def test_follow_col_keeps_col_visible(col, hscroll):
    width = 20
    new = follow_col(col, hscroll, width)
    assert new <= col < new + width


def test_panel_sizes_wide_flag_follows_threshold():
    wide_width = (WIDE_LAYOUT_THRESHOLD + 50) * 2
    assert panel_sizes(wide_width, 50, False).wide is True
    assert panel_sizes(WIDE_LAYOUT_THRESHOLD // 2, 50, False).wide is False


def test_panel_sizes_narrow_widths_are_equal():
    sizes = panel_sizes(80, 40, False)
    assert isinstance(sizes, PanelSizes)
    assert sizes.body_width == sizes.response_width


def test_panel_sizes_wide_response_wider_than_body():
    sizes = panel_sizes(400, 60, False)
    assert sizes.response_width > sizes.body_width
    assert sizes.response_height > sizes.body_height


def test_panel_sizes_type_tab_shrinks_response_only():
    plain = panel_sizes(100, 60, False)
    typed = panel_sizes(100, 60, True)
    assert typed.response_height < plain.response_height
    assert typed.body_height == plain.body_height
    assert typed.body_width == plain.body_width


def test_panel_sizes_tiny_terminal_never_negative():
    for width in range(0, 20):
        for height in range(0, 10):
            sizes = panel_sizes(width, height, True)
            assert min(sizes.body_height, sizes.response_height,
                       sizes.body_width, sizes.response_width) >= 0


def _viewport():
    return Viewport(visible_height=20, visible_width=30)


def test_down_clamps_column_to_shorter_line():
    lines = ["a long first line", "ab"]
    view = _viewport()
    view.cursor_col = 10
    view.down(lines)
    assert (view.cursor_row, view.cursor_col) == (1, len(lines[1]))


def test_down_stops_at_last_line():
    lines = ["one", "two"]
    view = _viewport()
    view.down(lines)
    view.down(lines)
    assert view.cursor_row == len(lines) - 1


def test_up_stops_at_first_line_and_clamps():
    lines = ["x", "a much longer line"]
    view = _viewport()
    view.cursor_row = 1
    view.cursor_col = 12
    view.up(lines)
    assert (view.cursor_row, view.cursor_col) == (0, len(lines[0]))
    view.up(lines)
    assert view.cursor_row == 0


def test_top_resets_everything():
    view = Viewport(cursor_row=40, cursor_col=9, scroll_offset=30, hscroll=5,
                    visible_height=20, visible_width=30)
    view.top()
    assert (view.cursor_row, view.cursor_col, view.scroll_offset, view.hscroll) == (0, 0, 0, 0)


def test_bottom_goes_to_last_line_and_keeps_it_visible():
    lines = [f"line {n}" for n in range(100)]
    view = _viewport()
    view.cursor_col = 4
    view.bottom(lines)
    assert view.cursor_row == len(lines) - 1
    assert view.cursor_col == 0
    assert view.scroll_offset <= view.cursor_row < view.scroll_offset + view.visible_height


def test_bottom_of_empty_text():
    view = _viewport()
    view.bottom([])
    assert view.cursor_row == 0


def test_half_down_moves_half_page_and_clamps():
    lines = [str(n) for n in range(100)]
    view = _viewport()
    view.half_down(lines)
    assert view.cursor_row == HALF_PAGE
    short = [str(n) for n in range(HALF_PAGE - 3)]
    other = _viewport()
    other.half_down(short)
    assert other.cursor_row == len(short) - 1


def test_half_up_clamps_to_zero():
    view = _viewport()
    view.cursor_row = HALF_PAGE * 2
    view.half_up()
    assert view.cursor_row == HALF_PAGE
    view.half_up()
    view.half_up()
    assert view.cursor_row == 0


def test_sync_brings_cursor_into_view():
    view = Viewport(cursor_row=80, cursor_col=75, visible_height=20, visible_width=30)
    view.sync()
    assert view.scroll_offset <= view.cursor_row < view.scroll_offset + view.visible_height
    assert view.hscroll <= view.cursor_col < view.hscroll + view.visible_width