from __future__ import annotations

import httpx

from resmachine._core.models import Response
from resmachine._utils import iter_body_chunks


def internal_to_httpx(value: Response) -> httpx.Response:
    """
    Convert a finished Response to httpx.Response.

    Multi-line headers such as `Set-Cookie` become separate header lines.
    """
    body = value.body
    if isinstance(body, (str, bytes)):
        content = b"".join(iter_body_chunks(body))
        return httpx.Response(status_code=value.code, headers=value.header_items(), content=content)
    return httpx.Response(status_code=value.code, headers=value.header_items(), content=iter_body_chunks(body))
