# tera

Small helpers for a Jinja2/Django style template engine. The package has
one module, `tera.utils`. It escapes HTML and turns rendered byte output
into text.

## Installation

```
pip install .
```

## Escaping HTML

`escape_html(text)` replaces each character that could move an HTML
document into another execution context with an HTML entity:

| Character | Output    |
|-----------|-----------|
| `&`       | `&amp;`   |
| `<`       | `&lt;`    |
| `>`       | `&gt;`    |
| `"`       | `&quot;`  |
| `'`       | `&#x27;`  |
| `/`       | `&#x2F;`  |

All other characters stay as they are. Non-ASCII text is one of these.

```python
from tera.utils import escape_html

escape_html("<a href='/'>")
# '&lt;a href=&#x27;&#x2F;&#x27;&gt;'
```

## Rendering into a string

`render_to_string(context, render)` creates a fresh `io.BytesIO` buffer and
calls `render(buffer)`. The `render` function writes its output into that
buffer. When it returns, the buffer's contents are decoded as UTF-8 and
returned as a string. If `render` raises an exception, that exception
propagates unchanged.

`context` is a callable that takes no arguments. It returns a description of
what was being rendered, and it is called only when decoding fails.

```python
from tera.utils import render_to_string

render_to_string(lambda: "greeting", lambda buf: buf.write(b"hello"))
# 'hello'
```

`buffer_to_string(context, buffer)` performs only the decoding step, on a
`bytes` or `bytearray` value. If the bytes are not valid UTF-8, it raises
`Utf8ConversionError`. That exception is a `ValueError` subclass with these
attributes:

- `context`: the string that `context()` returned
- `cause`: the underlying `UnicodeDecodeError`

## What this package does not do

The package does not parse or render templates. It has no template loading,
no context, no filters, tests or functions, no inheritance and no macros.
It provides only the escaping and buffer-decoding helpers described above.

## Running the tests

```
pip install .[test]
pytest
```