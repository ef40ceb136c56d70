"""Scroll-follow logic and panel geometry for the text panels."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

SCROLLOFF = 5
"""Lines kept visible above and below the cursor when scrolling."""

HALF_PAGE = 15
"""Rows moved by a half-page scroll."""

WIDE_LAYOUT_THRESHOLD = 120
"""Width of the right-hand area above which panels sit side by side."""

_CHROME_WIDTH = 6  # gutter (4) + borders (2)
_BODY_CHROME_HEIGHT = 4  # borders + tab bar + internal chrome
_RESPONSE_CHROME_HEIGHT = 6  # borders + status line + tab bar + separator


def follow_row(row: int, scroll_offset: int, visible: int, scrolloff: int = SCROLLOFF) -> int:
    """Return the vertical scroll offset that keeps ``row`` at least ``scrolloff`` lines from an edge.

    A view too short to honour the margin on both sides is left where it is.
    """
    if visible <= scrolloff * 2:
        return scroll_offset
    if row < scroll_offset + scrolloff:
        return max(0, row - scrolloff)
    if row >= scroll_offset + visible - scrolloff:
        return row - visible + scrolloff + 1
    return scroll_offset


def follow_col(col: int, hscroll: int, visible_width: int) -> int:
    """Return the horizontal scroll that keeps ``col`` inside a view ``visible_width`` wide."""
    if visible_width == 0:
        return hscroll
    if col < hscroll:
        return col
    if col >= hscroll + visible_width:
        return col - visible_width + 1
    return hscroll


@dataclass(frozen=True)
class PanelSizes:
    """Visible text area of the body and response panels for a terminal size."""

    wide: bool
    body_height: int
    response_height: int
    body_width: int
    response_width: int


def panel_sizes(width: int, height: int, type_tab: bool) -> PanelSizes:
    """Work out the visible text area of the body and response panels.

    ``type_tab`` is true when the response panel shows the type editor, which
    leaves only about half of the panel for the response preview.
    """
    right_width = width * 80 // 100
    wide = right_width > WIDE_LAYOUT_THRESHOLD
    main_height = max(0, height - 1)  # status bar

    if wide:
        body_height = main_height * 60 // 100
        response_height = main_height
        body_width = right_width * 40 // 100
        response_width = right_width * 50 // 100
    else:
        body_height = main_height * 35 // 100
        response_height = main_height * 40 // 100
        body_width = right_width
        response_width = right_width

    body_height = max(0, body_height - _BODY_CHROME_HEIGHT)
    response_height = max(0, response_height - _RESPONSE_CHROME_HEIGHT)
    if type_tab:
        response_height = max(0, response_height // 2 - 1)

    return PanelSizes(
        wide=wide,
        body_height=body_height,
        response_height=response_height,
        body_width=max(0, body_width - _CHROME_WIDTH),
        response_width=max(0, response_width - _CHROME_WIDTH),
    )


@dataclass
class Viewport:
    """A cursor over lines of text together with the scroll position that follows it."""

    cursor_row: int = 0
    cursor_col: int = 0
    scroll_offset: int = 0
    hscroll: int = 0
    visible_height: int = 0
    visible_width: int = 0
    scrolloff: int = SCROLLOFF

    def sync(self) -> None:
        """Scroll so that the cursor is in view."""
        self.scroll_offset = follow_row(
            self.cursor_row, self.scroll_offset, self.visible_height, self.scrolloff
        )
        self.hscroll = follow_col(self.cursor_col, self.hscroll, self.visible_width)

    def _clamp_col(self, lines: Sequence[str]) -> None:
        line_len = len(lines[self.cursor_row]) if self.cursor_row < len(lines) else 0
        self.cursor_col = min(self.cursor_col, line_len)

    def down(self, lines: Sequence[str]) -> None:
        """Move the cursor one line down, if there is one."""
        if self.cursor_row + 1 < len(lines):
            self.cursor_row += 1
            self._clamp_col(lines)
        self.sync()

    def up(self, lines: Sequence[str]) -> None:
        """Move the cursor one line up, if there is one."""
        if self.cursor_row > 0:
            self.cursor_row -= 1
            self._clamp_col(lines)
        self.sync()

    def top(self) -> None:
        """Move the cursor and the view to the first line."""
        self.cursor_row = 0
        self.cursor_col = 0
        self.scroll_offset = 0
        self.hscroll = 0

    def bottom(self, lines: Sequence[str]) -> None:
        """Move the cursor to the start of the last line."""
        self.cursor_row = max(0, len(lines) - 1)
        self.cursor_col = 0
        self.sync()

    def half_down(self, lines: Sequence[str]) -> None:
        """Move the cursor half a page down, stopping at the last line."""
        last = max(0, len(lines) - 1)
        self.cursor_row = min(self.cursor_row + HALF_PAGE, last)
        self.sync()

    def half_up(self) -> None:
        """Move the cursor half a page up, stopping at the first line."""
        self.cursor_row = max(0, self.cursor_row - HALF_PAGE)
        self.sync()