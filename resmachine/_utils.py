from __future__ import annotations

import typing as tp
from datetime import datetime, timezone
from email.utils import formatdate

from typing_extensions import TypeAlias

HEADERS_ENCODING = "iso-8859-1"

Body: TypeAlias = tp.Union[str, bytes, tp.Iterable[tp.Union[str, bytes]]]


def format_http_date(value: tp.Union[datetime, int, float]) -> str:
    """
    Format a point in time as an HTTP date (IMF-fixdate, always GMT).

    Naive datetimes are treated as UTC.

    Examples:
        >>> format_http_date(0)
        'Thu, 01 Jan 1970 00:00:00 GMT'
        >>> format_http_date(datetime(2015, 10, 21, 7, 28))
        'Wed, 21 Oct 2015 07:28:00 GMT'
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        timeval = value.timestamp()
    else:
        timeval = float(value)
    return formatdate(timeval=timeval, localtime=False, usegmt=True)


def to_directive_name(text: str) -> str:
    """
    Convert a snake_case or mixed-case name to a lower-case, dash separated token.

    Examples:
        >>> to_directive_name("max_age")
        'max-age'
        >>> to_directive_name("No-Cache")
        'no-cache'
    """
    return text.replace("_", "-").lower()


def iter_body_chunks(body: Body) -> tp.Iterator[bytes]:
    """
    Yield the response body as byte chunks.

    A string or bytes body is a single chunk; any other iterable is consumed
    lazily, encoding string chunks as UTF-8.
    """
    if isinstance(body, bytes):
        yield body
        return
    if isinstance(body, str):
        yield body.encode("utf-8")
        return
    for chunk in body:
        yield chunk.encode("utf-8") if isinstance(chunk, str) else chunk
