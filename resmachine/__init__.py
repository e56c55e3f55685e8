from resmachine._core._cookies import Cookie as Cookie
from resmachine._core._headers import (
    CacheControl as CacheControl,
    Headers as Headers,
    format_directives as format_directives,
)
from resmachine._core.models import (
    CacheControlDirectives as CacheControlDirectives,
    Response as Response,
    ResponseOptions as ResponseOptions,
)
from resmachine._exceptions import InvalidArgument as InvalidArgument, ResponseError as ResponseError

__all__ = (
    ## Models
    "Response",
    "ResponseOptions",
    ## Headers
    "Headers",
    "CacheControl",
    "CacheControlDirectives",
    "Cookie",
    "format_directives",
    ## Errors
    "ResponseError",
    "InvalidArgument",
)

__version__ = "0.1.0"
