"""Case-insensitive incremental search over a panel's text."""

from __future__ import annotations

from dataclasses import dataclass, field


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def find_matches(text: str, query: str) -> list[tuple[int, int]]:
    """Return every (row, col) where ``query`` occurs in ``text``, ignoring case.

    Overlapping occurrences are all reported, in reading order.
    """
    if not query:
        return []
    needle = query.lower()
    matches: list[tuple[int, int]] = []
    for row, line in enumerate(_lines(text)):
        haystack = line.lower()
        start = haystack.find(needle)
        while start != -1:
            matches.append((row, start))
            start = haystack.find(needle, start + 1)
    return matches


def scroll_to_match(row: int, scroll_offset: int, visible: int) -> int:
    """Return the scroll offset that brings ``row`` into a view of ``visible`` lines."""
    if row < scroll_offset:
        return row
    if row >= scroll_offset + visible:
        return max(0, row - visible // 2)
    return scroll_offset


@dataclass
class SearchState:
    """The query, its matches and the currently selected match."""

    active: bool = False
    query: str = ""
    matches: list[tuple[int, int]] = field(default_factory=list)
    match_idx: int = 0

    def _reset(self) -> None:
        self.query = ""
        self.matches.clear()
        self.match_idx = 0

    def start(self) -> None:
        """Begin a new search, discarding any previous one."""
        self.active = True
        self._reset()

    def input(self, ch: str, text: str | None) -> tuple[int, int] | None:
        """Append ``ch`` to the query and search ``text`` again."""
        self.query += ch
        return self.recalculate(text)

    def backspace(self, text: str | None) -> tuple[int, int] | None:
        """Remove the last query character and search ``text`` again."""
        self.query = self.query[:-1]
        return self.recalculate(text)

    def recalculate(self, text: str | None) -> tuple[int, int] | None:
        """Recompute matches in ``text`` and return the first one, if any."""
        self.matches.clear()
        self.match_idx = 0
        if not self.query or text is None:
            return None
        self.matches = find_matches(text, self.query)
        return self.current()

    def confirm(self) -> None:
        """Close the prompt while keeping the matches highlighted."""
        self.active = False

    def cancel(self) -> None:
        """Close the prompt and forget the search."""
        self.active = False
        self._reset()

    def next(self) -> tuple[int, int] | None:
        """Move to the following match, wrapping around."""
        if self.matches:
            self.match_idx = (self.match_idx + 1) % len(self.matches)
        return self.current()

    def prev(self) -> tuple[int, int] | None:
        """Move to the preceding match, wrapping around."""
        if self.matches:
            count = len(self.matches)
            self.match_idx = (self.match_idx + count - 1) % count
        return self.current()

    def current(self) -> tuple[int, int] | None:
        """Return the selected match, or None when there is none."""
        if 0 <= self.match_idx < len(self.matches):
            return self.matches[self.match_idx]
        return None