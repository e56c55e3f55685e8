from __future__ import annotations

import logging
import typing as t

from resmachine._core.models import Response
from resmachine._utils import HEADERS_ENCODING, iter_body_chunks

logger = logging.getLogger(__name__)

_Send = t.Callable[[t.Dict[str, t.Any]], t.Awaitable[None]]


def asgi_headers(response: Response) -> list[tuple[bytes, bytes]]:
    """Header lines of `response` encoded for an ASGI `http.response.start` message."""
    return [
        (key.lower().encode(HEADERS_ENCODING), value.encode(HEADERS_ENCODING))
        for key, value in response.header_items()
    ]


async def send_response(response: Response, send: _Send) -> None:
    """
    Emit a finished response through an ASGI `send` callable.

    Sends `http.response.start`, one `http.response.body` message per body
    chunk and a final empty body message closing the response.

    Example:
        ```python
        async def app(scope, receive, send):
            response = Response()
            response.body = "Hello, World!"
            response.set_cache_control({"max-age": 60})
            await send_response(response, send)
        ```
    """
    await send(
        {
            "type": "http.response.start",
            "status": response.code,
            "headers": asgi_headers(response),
        }
    )
    logger.debug("Response headers sent: status=%d", response.code)

    chunk_count = 0
    bytes_sent = 0
    for chunk in iter_body_chunks(response.body):
        if not chunk:
            continue
        await send({"type": "http.response.body", "body": chunk, "more_body": True})
        chunk_count += 1
        bytes_sent += len(chunk)

    await send({"type": "http.response.body", "body": b"", "more_body": False})
    logger.debug("Response body sent: %d chunk(s), %d bytes", chunk_count, bytes_sent)
