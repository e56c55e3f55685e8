from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple, Union

from typing_extensions import TypeAlias

from resmachine._core._cookies import Cookie
from resmachine._core._headers import CacheControl, Headers, format_directives
from resmachine._exceptions import InvalidArgument
from resmachine._utils import Body

logger = logging.getLogger("resmachine.response")

CacheControlDirectives: TypeAlias = Union[Mapping[str, Any], str, CacheControl]


@dataclass
class ResponseOptions:
    """
    Options controlling how a response's headers are handed to a transport.

    Attributes:
    ----------
    separator : str
        Joins list-valued headers into a single header line.

        Default: "," (as in `Headers.flattened`)

        Examples:
        --------
        >>> options = ResponseOptions(separator=", ")

    multi_line_headers : list[str]
        Headers that are never joined. Every value becomes its own header
        line. Cookie values may legitimately contain commas, so
        `Set-Cookie` must stay in this list.

        Default: ["Set-Cookie"]

        Examples:
        --------
        >>> options = ResponseOptions(multi_line_headers=["Set-Cookie", "Link"])
    """

    separator: str = ","
    """Separator used to join list values of ordinary headers."""

    multi_line_headers: List[str] = field(default_factory=lambda: ["Set-Cookie"])
    """Headers emitted as one line per value."""


@dataclass
class Response:
    """
    An HTTP response being assembled while a request is handled.

    The resource-dispatch state machine sets `code`, `body` and `error`
    directly, appends visited state names to `trace` and uses the helpers
    below for headers with special encoding rules. A response belongs to a
    single request and is not shared between threads.
    """

    code: int = 200
    body: Body = ""
    headers: Headers = field(default_factory=Headers)
    redirect: bool = False
    error: Optional[str] = None
    trace: List[str] = field(default_factory=list)
    options: ResponseOptions = field(default_factory=ResponseOptions)

    @property
    def is_redirect(self) -> bool:
        return self.redirect

    def do_redirect(self, location: Any = None) -> None:
        """
        Flag the response as a redirect.

        Pass the target of the redirection (a string or any object whose
        `str()` is a URL, such as `httpx.URL`) or set the `Location` header
        yourself through `headers`.
        """
        if location is not None:
            self.headers["Location"] = str(location)
        self.redirect = True
        logger.debug("Response flagged as redirect (location set: %s)", location is not None)

    redirect_to = do_redirect

    def set_cookie(self, name: str, value: str, attributes: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        """
        Add a cookie to the response.

        Attributes (see RFC 2109) may be given as a mapping, as keyword
        arguments, or both. Earlier cookies are kept: the `Set-Cookie` header
        holds a single string for one cookie and a list once there are more.
        """
        cookie = Cookie(name, value, {**(attributes or {}), **kwargs}).to_header_value()
        current = self.headers.get("Set-Cookie")
        if current is None:
            self.headers["Set-Cookie"] = cookie
        elif isinstance(current, str):
            self.headers["Set-Cookie"] = [current, cookie]
        else:
            self.headers["Set-Cookie"] = [*current, cookie]
        logger.debug(
            "Cookie %s set, response now sets %d cookie(s)", name, len(self.headers.get_list("Set-Cookie") or [])
        )

    def set_cache_control(self, directives: CacheControlDirectives) -> None:
        """
        Set the `Cache-Control` header.

        `directives` may be a mapping of directive names to values (rendered
        in the mapping's order), a preformatted string, or a `CacheControl`.
        An empty result leaves the headers untouched.

        Raises:
            InvalidArgument: if `directives` is none of the accepted shapes.
        """
        if isinstance(directives, CacheControl):
            cache_control = str(directives)
        elif isinstance(directives, str):
            cache_control = directives
        elif isinstance(directives, Mapping):
            cache_control = format_directives(directives)
        else:
            raise InvalidArgument(
                f"Cache-Control directives must be a mapping, a string or a CacheControl, "
                f"got {type(directives).__name__!r}."
            )

        if not cache_control:
            logger.debug("Empty Cache-Control directives, header not set")
            return
        self.headers["Cache-Control"] = cache_control
        logger.debug("Cache-Control set to %r", cache_control)

    def header_items(self) -> List[Tuple[str, str]]:
        """Header lines for a transport, keeping multi-line headers apart."""
        return self.headers.multi_items(
            separator=self.options.separator,
            multi_line=self.options.multi_line_headers,
        )
