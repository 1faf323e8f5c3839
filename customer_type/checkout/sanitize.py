from __future__ import annotations

import re
from typing import Any, Optional

_SLASHED = re.compile(r"\\(.?)", re.DOTALL)
_SCRIPT_OR_STYLE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r"<[^>]*>")
# A "<" that does not open a tag is kept as text.
_LONE_LESS_THAN = re.compile(r"<(?![a-zA-Z/!?])")
_WHITESPACE = re.compile(r"[\r\n\t ]+")
_OCTET = re.compile(r"%[a-f0-9]{2}", re.IGNORECASE)


def unslash(value: str) -> str:
    """Remove escaping backslashes added by the request layer."""
    return _SLASHED.sub(r"\1", value)


def sanitize_text_field(value: Any) -> str:
    """Clean a single-line text value submitted through a form.

    Strips tags (and the contents of script/style blocks), collapses line
    breaks, tabs and runs of spaces, removes percent-encoded octets and trims
    the result. Non-string input is converted with str(); None becomes "".
    """
    if value is None:
        return ""
    text = str(value)

    if "<" in text:
        text = _LONE_LESS_THAN.sub("&lt;", text)
        text = _SCRIPT_OR_STYLE.sub("", text)
        text = _TAG.sub("", text)

    text = _WHITESPACE.sub(" ", text).strip()

    found = False
    while _OCTET.search(text):
        text = _OCTET.sub("", text)
        found = True
    if found:
        text = _WHITESPACE.sub(" ", text).strip()

    return text


def read_form_value(form_data: Any, key: str) -> Optional[str]:
    """Return the sanitized value of ``key`` or None when the key is absent."""
    if form_data is None or key not in form_data:
        return None
    raw = form_data[key]
    if isinstance(raw, str):
        raw = unslash(raw)
    return sanitize_text_field(raw)
