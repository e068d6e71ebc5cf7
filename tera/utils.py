"""Small helpers shared across the template engine."""

from __future__ import annotations

import io
from typing import Callable

__all__ = [
    "Utf8ConversionError",
    "escape_html",
    "render_to_string",
    "buffer_to_string",
]

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#x27;",
        "/": "&#x2F;",
    }
)


class Utf8ConversionError(ValueError):
    """Rendered output could not be decoded as UTF-8."""

    def __init__(self, context: str, cause: UnicodeDecodeError) -> None:
        self.context = context
        self.cause = cause
        super().__init__(
            f"UTF-8 conversion error occurred while rendering template: {context}"
        )


def escape_html(text: str) -> str:
    """Escape ``& < > " ' /`` with HTML entities.

    The forward slash is included because it helps end an HTML entity, and
    the single quote uses a hex entity since ``&apos;`` is not recommended.
    """
    return text.translate(_HTML_ESCAPES)


def buffer_to_string(context: Callable[[], str], buffer: bytes | bytearray) -> str:
    """Decode ``buffer`` as UTF-8.

    ``context`` is only called when decoding fails, to describe what was being
    rendered in the raised :class:`Utf8ConversionError`.
    """
    try:
        return bytes(buffer).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise Utf8ConversionError(context(), exc) from exc


def render_to_string(
    context: Callable[[], str], render: Callable[[io.BytesIO], object]
) -> str:
    """Run ``render`` against a fresh byte buffer and return its text.

    Any exception raised by ``render`` propagates unchanged.
    """
    buffer = io.BytesIO()
    render(buffer)
    return buffer_to_string(context, buffer.getvalue())