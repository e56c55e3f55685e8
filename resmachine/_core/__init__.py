from resmachine._core._cookies import Cookie as Cookie
from resmachine._core._headers import (
    CacheControl as CacheControl,
    Headers as Headers,
    format_directives as format_directives,
)
from resmachine._core.models import Response as Response, ResponseOptions as ResponseOptions

__all__ = (
    "Response",
    "ResponseOptions",
    "Headers",
    "Cookie",
    "CacheControl",
    "format_directives",
)
