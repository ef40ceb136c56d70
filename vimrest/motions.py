"""Vim-style word motions and text offset helpers for single-line fields."""

_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")


def _is_space(ch: str) -> bool:
    return ch in _ASCII_WHITESPACE


def is_word_char(ch: str) -> bool:
    """Return True for ASCII letters, digits and underscore."""
    return ch == "_" or (ch.isascii() and ch.isalnum())


def is_punct_char(ch: str) -> bool:
    """Return True for any character that is neither whitespace nor a word character."""
    return not _is_space(ch) and not is_word_char(ch)


def word_end_forward(text: str, col: int) -> int:
    """Return the position after the word at ``col`` and its trailing whitespace.

    This is the target of vim's ``w`` motion and the end of a ``dw`` range.
    """
    end = col
    size = len(text)
    if end < size:
        if is_word_char(text[end]):
            while end < size and is_word_char(text[end]):
                end += 1
        elif is_punct_char(text[end]):
            while end < size and is_punct_char(text[end]):
                end += 1
        while end < size and _is_space(text[end]):
            end += 1
    return end


def word_start_backward(text: str, col: int) -> int:
    """Return the start of the word before ``col`` (vim's ``b`` motion)."""
    if col == 0:
        return 0
    start = col - 1
    while start > 0 and _is_space(text[start]):
        start -= 1
    if start > 0 and is_word_char(text[start]):
        while start > 0 and is_word_char(text[start - 1]):
            start -= 1
    elif start > 0 and is_punct_char(text[start]):
        while start > 0 and is_punct_char(text[start - 1]):
            start -= 1
    return start


def row_col_to_offset(text: str, row: int, col: int) -> int:
    """Convert a (row, col) position into an offset into ``text``.

    The column is clamped to the line's length; a row past the last line maps
    to the end of the text.
    """
    offset = 0
    for index, line in enumerate(text.split("\n")):
        if index == row:
            return offset + min(col, len(line))
        offset += len(line) + 1
    return len(text)