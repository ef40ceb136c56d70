# vimrest

vimrest holds the editing logic behind a terminal HTTP client with vim
keybindings. It keeps cursor and scroll state and runs the motions, search and
undo that act on the client's panels. It has no dependencies outside the
standard library.

## Modules

- `vimrest.motions`: word classes (`is_word_char`, `is_punct_char`), the word
  boundaries used by `w` and `b` (`word_end_forward`, `word_start_backward`),
  and `row_col_to_offset`, which turns a row and column into an offset into
  the text.
- `vimrest.search`: `find_matches` finds every occurrence of a query in a
  text, case-insensitively, overlapping ones included, and returns them as
  `(row, col)` pairs. `scroll_to_match` gives the scroll offset that brings a
  match into view. `SearchState` runs an incremental search: `start`,
  `input`, `backspace`, `confirm`, `cancel`, and `next`/`prev` with
  wrap-around.
- `vimrest.fields`: editing of the single-line fields of a request. These are
  the URL and the name or value of a header, query param, cookie or path
  param (`RequestFields`, `KeyValue`, `Focus`, `FocusKind`). `FieldEditor`
  keeps a cursor for each kind of field. It provides `w`/`b`/`e` motions,
  visual selection (`selection`, `delete_selection`), `delete_char`,
  `replace_char` and `paste`, which strips line breaks. It also has undo and
  redo; the undo stack holds 100 snapshots by default.
- `vimrest.viewport`: `follow_row` and `follow_col` keep the cursor in view,
  with a margin of 5 lines (`SCROLLOFF`). `panel_sizes` works out the visible
  area of the body and response panels for a terminal size. `Viewport` is a
  cursor with `down`, `up`, `top`, `bottom`, `half_down` and `half_up`; a
  half page is 15 lines.
- `vimrest.responses`: `ResponseView` is a read-only cursor over a response
  body, or over a diff when one is set. `ResponseHistory` keeps the newest
  responses for each key, five by default. The module also provides
  `history_key`, `type_name` (the request name with its first letter in
  upper case, or `ResponseType`), `export_extension`, which picks a file
  extension from a content type, and `spinner_status`, the status line shown
  while a request is running.

## Installation

```
pip install vimrest
```

## Example

```python
from vimrest.fields import FieldEditor, RequestFields
from vimrest.motions import word_end_forward
from vimrest.search import find_matches
from vimrest.viewport import follow_row

word_end_forward("hello world", 0)   # 6
find_matches("Foo\nfoo bar", "foo")  # [(0, 0), (1, 0)]
follow_row(30, 0, 20)                # 16

editor = FieldEditor(fields=RequestFields(url="https://example.com"))
editor.push_undo()
editor.cursor_to_end(insert=True)
editor.paste("/users")
editor.fields.url                    # "https://example.com/users"
editor.undo()
editor.fields.url                    # "https://example.com"
```

## What it does not do

vimrest does not send HTTP requests, draw a screen or read keys from a
terminal. It does not load or save collections, environments or history on
disk. `ResponseHistory` is held in memory only. Those parts belong to the
application that uses these modules.

## Running the tests

```
pip install vimrest[test]
pytest
```