import pytest

from tera.utils import (
    Utf8ConversionError,
    buffer_to_string,
    escape_html,
    render_to_string,
)


def _never_called() -> str:
    raise AssertionError("context must not be evaluated")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ""),
        ("a&b", "a&amp;b"),
        ("<a", "&lt;a"),
        (">a", "&gt;a"),
        ('"', "&quot;"),
        ("'", "&#x27;"),
        ("大阪", "大阪"),
    ],
)
def test_escape_html(text, expected):
    assert escape_html(text) == expected


def test_escape_html_empty_string():
    empty = str()
    assert escape_html(empty) == empty


def test_escape_html_slash():
    assert escape_html("</script>") == "&lt;&#x2F;script&gt;"


def test_escape_html_does_not_double_escape_untouched_text():
    assert escape_html("plain text 123") == "plain text 123"


def test_render_to_string():
    result = render_to_string(_never_called, lambda w: w.write(b"test"))
    assert result == "test"


def test_render_to_string_multiple_writes_utf8():
    def render(writer):
        writer.write("hello ".encode())
        writer.write("世界".encode())

    assert render_to_string(_never_called, render) == "hello 世界"


def test_render_to_string_propagates_render_errors():
    def render(writer):
        raise KeyError("boom")

    with pytest.raises(KeyError):
        render_to_string(_never_called, render)


def test_render_to_string_invalid_utf8():
    with pytest.raises(Utf8ConversionError) as info:
        render_to_string(lambda: "tpl.html", lambda w: w.write(b"\xff\xfe"))
    assert info.value.context == "tpl.html"
    assert "tpl.html" in str(info.value)
    assert isinstance(info.value.cause, UnicodeDecodeError)


def test_buffer_to_string_valid():
    assert buffer_to_string(_never_called, bytearray(b"abc")) == "abc"


def test_buffer_to_string_invalid_chains_cause():
    with pytest.raises(Utf8ConversionError) as info:
        buffer_to_string(lambda: "ctx", b"ok\x80")
    assert isinstance(info.value.__cause__, UnicodeDecodeError)
    assert info.value.context == "ctx"