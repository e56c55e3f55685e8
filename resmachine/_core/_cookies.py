from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote

from resmachine._utils import format_http_date

__all__ = ("Cookie",)

# Attribute keys in output order, mapped to their wire names.
ATTRIBUTES: Dict[str, str] = {
    "secure": "Secure",
    "httponly": "HttpOnly",
    "path": "Path",
    "domain": "Domain",
    "comment": "Comment",
    "maxage": "Max-Age",
    "expires": "Expires",
    "version": "Version",
    "samesite": "SameSite",
}

FLAG_ATTRIBUTES = ("secure", "httponly")

# Printable ASCII other than the attribute delimiter.
ATTRIBUTE_SAFE = "".join(chr(i) for i in range(0x20, 0x7F) if chr(i) != ";")


def normalize_attribute(key: str) -> str:
    return key.replace("_", "").replace("-", "").lower()


def rfc2109_escape(text: str) -> str:
    """
    Percent-encode a cookie name or value as UTF-8.

    Only letters, digits and `_.-~` are kept, so the result is always a
    token and never carries separators, control characters or non-ASCII text.

    Examples:
        >>> rfc2109_escape("session")
        'session'
        >>> rfc2109_escape("a b")
        'a%20b'
        >>> rfc2109_escape("x\\r\\ny")
        'x%0D%0Ay'
    """
    return quote(text, safe="")


def escape_attribute(text: str) -> str:
    """
    Percent-encode the characters of an attribute value that could end it early.

    Examples:
        >>> escape_attribute("/docs")
        '/docs'
        >>> escape_attribute("/; Secure")
        '/%3B Secure'
    """
    return quote(text, safe=ATTRIBUTE_SAFE)


class Cookie:
    """
    A single `Set-Cookie` value in the RFC 2109 `Name=Value; Attr=Val` form.

    Attribute keys are matched ignoring case, dashes and underscores, so
    `max_age`, `Max-Age` and `maxage` are the same attribute. Unknown
    attributes are ignored.
    """

    def __init__(self, name: str, value: str, attributes: Optional[Mapping[str, Any]] = None) -> None:
        self.name = str(name)
        self.value = str(value)
        self.attributes: Dict[str, Any] = {}
        for key, attr_value in (attributes or {}).items():
            normalized = normalize_attribute(key)
            if normalized in ATTRIBUTES:
                self.attributes[normalized] = attr_value

    def to_header_value(self) -> str:
        parts: List[str] = [f"{rfc2109_escape(self.name)}={rfc2109_escape(self.value)}"]
        for key, wire_name in ATTRIBUTES.items():
            value = self.attributes.get(key)
            if value is None or value is False:
                continue
            if key in FLAG_ATTRIBUTES:
                parts.append(wire_name)
            elif isinstance(value, bool):
                continue
            elif key == "expires":
                parts.append(f"{wire_name}={escape_attribute(format_expires(value))}")
            else:
                parts.append(f"{wire_name}={escape_attribute(str(value))}")
        return "; ".join(parts)

    def __str__(self) -> str:
        return self.to_header_value()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


def format_expires(value: Any) -> str:
    if isinstance(value, (datetime, int, float)):
        return format_http_date(value)
    return str(value)
