"""Response history, type naming, export naming and the response viewer cursor."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .viewport import Viewport

T = TypeVar("T")

HISTORY_LIMIT = 5
"""Responses kept per request."""

_SPINNER = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"

_DEFAULT_TYPE_NAME = "ResponseType"
_NO_COLLECTION = "_"

# Checked in order; the first fragment found in the content type wins.
_EXTENSIONS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("json",), "json"),
    (("html",), "html"),
    (("xml",), "xml"),
    (("image/png",), "png"),
    (("image/jpeg", "image/jpg"), "jpg"),
    (("image/gif",), "gif"),
    (("image/webp",), "webp"),
    (("pdf",), "pdf"),
)


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def history_key(collection: str | None, name: str) -> str:
    """Return the key under which a request's responses are cached and kept."""
    return f"{collection if collection is not None else _NO_COLLECTION}/{name}"


def type_name(name: str | None) -> str:
    """Return the type name generated for a request: its name with a capital first letter."""
    if name is None:
        return _DEFAULT_TYPE_NAME
    if not name:
        return ""
    return name[0].upper() + name[1:]


def export_extension(content_type: str | None) -> str:
    """Return the file extension used when exporting a response of ``content_type``."""
    if content_type is not None:
        for fragments, extension in _EXTENSIONS:
            if any(fragment in content_type for fragment in fragments):
                return extension
    return "txt"


def spinner_status(elapsed: float) -> str:
    """Return the status line shown while a request has been running for ``elapsed`` seconds."""
    millis = int(elapsed * 1000)
    frame = _SPINNER[(millis // 100) % len(_SPINNER)]
    return f"{frame} Sending request... {elapsed:.1f}s (Esc to cancel)"


@dataclass
class ResponseHistory(Generic[T]):
    """The most recent responses of each request, newest first."""

    limit: int = HISTORY_LIMIT
    data: dict[str, deque[T]] = field(default_factory=dict)

    def add(self, key: str, entry: T) -> None:
        """Record ``entry`` as the newest response for ``key``, dropping the oldest past the limit."""
        history = self.data.setdefault(key, deque())
        history.appendleft(entry)
        while len(history) > self.limit:
            history.pop()

    def get(self, key: str) -> list[T]:
        """Return the responses kept for ``key``, newest first."""
        return list(self.data.get(key, ()))


@dataclass
class ResponseView:
    """A read-only cursor over the response body, or over a diff when one is shown."""

    body: str = ""
    diff: str | None = None
    viewport: Viewport = field(default_factory=Viewport)

    @property
    def text(self) -> str:
        """The text being shown: the diff if there is one, the body otherwise."""
        return self.diff if self.diff is not None else self.body

    def lines(self) -> list[str]:
        """Return the lines of the text being shown."""
        return _lines(self.text)

    def cursor_down(self) -> None:
        """Move the cursor one line down."""
        self.viewport.down(self.lines())

    def cursor_up(self) -> None:
        """Move the cursor one line up."""
        self.viewport.up(self.lines())

    def top(self) -> None:
        """Jump to the first line."""
        self.viewport.top()

    def bottom(self) -> None:
        """Jump to the start of the last line."""
        self.viewport.bottom(self.lines())

    def half_down(self) -> None:
        """Move half a page down."""
        self.viewport.half_down(self.lines())

    def half_up(self) -> None:
        """Move half a page up."""
        self.viewport.half_up()