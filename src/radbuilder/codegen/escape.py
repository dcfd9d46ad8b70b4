"""
String and number literal helpers for generated Python source.
"""

from __future__ import annotations

import math

_SIMPLE = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def escape(text: str) -> str:
    """Escape ``text`` for a double-quoted Python string literal.

    Backslashes are doubled and double quotes escaped; characters that may not
    appear raw inside a one-line literal (newlines, other control and
    non-printable characters, lone surrogates) become escape sequences.
    ``ast.literal_eval('"' + escape(s) + '"') == s`` holds for every ``s``.
    """
    out: list[str] = []
    for ch in text:
        simple = _SIMPLE.get(ch)
        if simple is not None:
            out.append(simple)
        elif ch.isprintable():
            out.append(ch)
        else:
            code = ord(ch)
            if code < 0x100:
                out.append(f"\\x{code:02x}")
            elif code < 0x10000:
                out.append(f"\\u{code:04x}")
            else:
                out.append(f"\\U{code:08x}")
    return "".join(out)


def quote(text: str) -> str:
    return f'"{escape(text)}"'


def num(value: float, places: int = 3) -> str:
    """Float literal with fixed precision; non-finite values stay valid source."""
    if math.isnan(value):
        return 'float("nan")'
    if math.isinf(value):
        return 'float("inf")' if value > 0 else '-float("inf")'
    return f"{value:.{places}f}"


def offset(base: str, value: float) -> str:
    """``base + value`` written without a ``+ -`` pair."""
    if math.isfinite(value) and value < 0:
        return f"{base} - {num(-value, 1)}"
    return f"{base} + {num(value, 1)}"


def boolean(flag: bool) -> str:
    return "True" if flag else "False"
