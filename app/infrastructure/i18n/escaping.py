"""HTML escaping for translated text.

Quotes are always escaped. Known named entities and valid numeric
references are left alone, so a translation may safely contain ``&amp;``
or ``&#039;``, while an unknown ``&foo;`` is still encoded.
"""

import re
from html.entities import name2codepoint

_AMPERSAND = re.compile(r"&(?:([A-Za-z][A-Za-z0-9]*)|#([0-9]+)|#[xX]([0-9A-Fa-f]+));|&")

_MAX_CODEPOINT = 0x10FFFF

_REPLACEMENTS = str.maketrans(
    {
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)


def _encode_ampersand(match: re.Match) -> str:
    name, decimal, hexadecimal = match.groups()
    if name is not None:
        known = name in name2codepoint
    elif decimal is not None:
        known = int(decimal) <= _MAX_CODEPOINT
    elif hexadecimal is not None:
        known = int(hexadecimal, 16) <= _MAX_CODEPOINT
    else:
        known = False
    if known:
        return match.group(0)
    return "&amp;" + match.group(0)[1:]


def escape_html(value: str) -> str:
    """Escape text for use in HTML content and attribute values.

    Args:
        value: Text to escape.

    Returns:
        The escaped text.

    Example:
        >>> escape_html('He said "hi" & left')
        'He said &quot;hi&quot; &amp; left'
        >>> escape_html("Tom &amp; Jerry &foo;")
        'Tom &amp; Jerry &amp;foo;'
    """
    if not value:
        return ""
    return _AMPERSAND.sub(_encode_ampersand, value).translate(_REPLACEMENTS)
