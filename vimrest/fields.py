"""Editing of the single-line fields of a request: URL, headers, params and cookies."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import NamedTuple

from .motions import is_punct_char, is_word_char, word_end_forward, word_start_backward

_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")


@dataclass
class KeyValue:
    """A name/value pair that can be switched on and off (header, param, cookie)."""

    key: str = ""
    value: str = ""
    enabled: bool = True


class FocusKind(enum.Enum):
    """Which kind of request field has the focus."""

    URL = "url"
    HEADER = "header"
    PARAM = "param"
    COOKIE = "cookie"
    PATH_PARAM = "path_param"


@dataclass(frozen=True)
class Focus:
    """The focused field: its kind and, for list items, the item's index."""

    kind: FocusKind = FocusKind.URL
    index: int = 0


@dataclass
class RequestFields:
    """The editable text fields of a request."""

    url: str = ""
    headers: list[KeyValue] = field(default_factory=list)
    query_params: list[KeyValue] = field(default_factory=list)
    cookies: list[KeyValue] = field(default_factory=list)
    path_params: list[KeyValue] = field(default_factory=list)


class _Snapshot(NamedTuple):
    focus: Focus
    edit_field: int
    text: str
    cursor: int


def _default_cursors() -> dict[FocusKind, int]:
    return {kind: 0 for kind in FocusKind}


def _default_edit_fields() -> dict[FocusKind, int]:
    return {kind: 0 for kind in FocusKind if kind is not FocusKind.URL}


@dataclass
class FieldEditor:
    """Cursor, selection and undo handling for the focused request field.

    Each kind of field keeps its own cursor. For list items, ``edit_fields``
    chooses between the name (0) and the value (1).
    """

    fields: RequestFields = field(default_factory=RequestFields)
    focus: Focus = field(default_factory=Focus)
    visual_anchor: int = 0
    undo_limit: int = 100
    cursors: dict[FocusKind, int] = field(default_factory=_default_cursors)
    edit_fields: dict[FocusKind, int] = field(default_factory=_default_edit_fields)
    undo_stack: list[_Snapshot] = field(default_factory=list)
    redo_stack: list[_Snapshot] = field(default_factory=list)

    # -- slot access -------------------------------------------------------

    def _items(self, kind: FocusKind) -> list[KeyValue]:
        return {
            FocusKind.HEADER: self.fields.headers,
            FocusKind.PARAM: self.fields.query_params,
            FocusKind.COOKIE: self.fields.cookies,
            FocusKind.PATH_PARAM: self.fields.path_params,
        }[kind]

    def _slot(self, focus: Focus, edit_field: int) -> tuple[object, str] | None:
        if focus.kind is FocusKind.URL:
            return self.fields, "url"
        items = self._items(focus.kind)
        if not 0 <= focus.index < len(items):
            return None
        return items[focus.index], "key" if edit_field == 0 else "value"

    def _write(self, new_text: str) -> None:
        slot = self._slot(self.focus, self.edit_field())
        if slot is not None:
            target, attr = slot
            setattr(target, attr, new_text)

    # -- cursor and text ---------------------------------------------------

    def cursor(self) -> int:
        """Return the cursor of the focused field's kind."""
        return self.cursors[self.focus.kind]

    def set_cursor(self, pos: int) -> None:
        """Move the cursor of the focused field's kind."""
        self.cursors[self.focus.kind] = pos

    def text(self) -> str:
        """Return the focused field's text, or an empty string if it does not exist."""
        slot = self._slot(self.focus, self.edit_field())
        if slot is None:
            return ""
        target, attr = slot
        return getattr(target, attr)

    def edit_field(self) -> int:
        """Return 0 when editing a name, 1 when editing a value (0 for the URL)."""
        if self.focus.kind is FocusKind.URL:
            return 0
        return self.edit_fields[self.focus.kind]

    def set_field_text(self, focus: Focus, edit_field: int, text: str) -> None:
        """Overwrite the text of the field at ``focus``, whatever has the focus now."""
        slot = self._slot(focus, edit_field)
        if slot is not None:
            target, attr = slot
            setattr(target, attr, text)

    def clear(self) -> None:
        """Empty the focused field."""
        self._write("")

    def delete_range(self, start: int, end: int) -> None:
        """Remove the characters in ``[start, end)`` from the focused field."""
        if start >= end:
            return
        current = self.text()
        self._write(current[:start] + current[end:])

    def _selection_bounds(self) -> tuple[int, int]:
        cursor = self.cursor()
        start = min(cursor, self.visual_anchor)
        end = min(max(cursor, self.visual_anchor) + 1, len(self.text()))
        return start, end

    def selection(self) -> str:
        """Return the text between the visual anchor and the cursor, both included."""
        start, end = self._selection_bounds()
        if start <= end:
            return self.text()[start:end]
        return ""

    def delete_selection(self) -> None:
        """Remove the visual selection and put the cursor at its start."""
        start, end = self._selection_bounds()
        if start < end:
            current = self.text()
            self._write(current[:start] + current[end:])
        self.set_cursor(start)

    def delete_char(self) -> None:
        """Remove the character under the cursor, keeping the cursor on the text."""
        cursor = self.cursor()
        current = self.text()
        if cursor >= len(current):
            return
        self._write(current[:cursor] + current[cursor + 1:])
        new_len = len(self.text())
        if cursor >= new_len > 0:
            self.set_cursor(new_len - 1)

    def replace_char(self, pos: int, ch: str) -> None:
        """Replace the character at ``pos`` with ``ch``."""
        current = self.text()
        if pos < len(current):
            self._write(current[:pos] + ch + current[pos + 1:])

    def paste(self, text: str) -> None:
        """Insert ``text`` at the cursor with line breaks removed."""
        clean = text.replace("\n", "").replace("\r", "")
        cursor = self.cursor()
        current = self.text()
        self._write(current[:cursor] + clean + current[cursor:])
        self.set_cursor(cursor + len(clean))

    # -- motions -----------------------------------------------------------

    def word_forward(self) -> None:
        """Move to the start of the next word (``w``)."""
        current = self.text()
        self.set_cursor(min(word_end_forward(current, self.cursor()), len(current)))

    def word_backward(self) -> None:
        """Move to the start of the previous word (``b``)."""
        cursor = self.cursor()
        if cursor == 0:
            return
        self.set_cursor(word_start_backward(self.text(), cursor))

    def word_end(self) -> None:
        """Move to the end of the current or next word (``e``)."""
        current = self.text()
        size = len(current)
        col = self.cursor()
        if col + 1 >= size:
            return
        col += 1
        while col < size and current[col] in _ASCII_WHITESPACE:
            col += 1
        if col >= size:
            self.set_cursor(max(size - 1, 0))
            return
        if is_word_char(current[col]):
            while col + 1 < size and is_word_char(current[col + 1]):
                col += 1
        elif is_punct_char(current[col]):
            while col + 1 < size and is_punct_char(current[col + 1]):
                col += 1
        self.set_cursor(col)

    def cursor_to_end(self, insert: bool) -> None:
        """Put the cursor after the last character in insert mode, on it otherwise."""
        size = len(self.text())
        self.set_cursor(size if insert else max(size - 1, 0))

    # -- undo --------------------------------------------------------------

    def _snapshot(self) -> _Snapshot:
        return _Snapshot(self.focus, self.edit_field(), self.text(), self.cursor())

    def push_undo(self) -> None:
        """Record the focused field for undo and forget any redo history."""
        self.undo_stack.append(self._snapshot())
        self.redo_stack.clear()
        if len(self.undo_stack) > self.undo_limit:
            self.undo_stack.pop(0)

    def _restore(self, source: list[_Snapshot], target: list[_Snapshot]) -> bool:
        if not source:
            return False
        snapshot = source.pop()
        target.append(self._snapshot())
        self.set_field_text(snapshot.focus, snapshot.edit_field, snapshot.text)
        self.focus = snapshot.focus
        self.set_cursor(snapshot.cursor)
        return True

    def undo(self) -> bool:
        """Restore the last recorded state; return False when there is none."""
        return self._restore(self.undo_stack, self.redo_stack)

    def redo(self) -> bool:
        """Reapply the last undone state; return False when there is none."""
        return self._restore(self.redo_stack, self.undo_stack)