from __future__ import annotations

from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Tuple,
    Union,
)

from typing_extensions import TypeAlias

from resmachine._utils import to_directive_name

"""
HTTP token and quoted-string utilities.

These functions implement the RFC 7230 rules for HTTP/1.1 tokens
and quoted strings, used when rendering Cache-Control directive values.
"""


def is_char(c: str) -> bool:
    """
    Check if character is a valid ASCII character (0-127).

    Per RFC 7230: CHAR = any US-ASCII character (octets 0 - 127)
    """
    if not c:
        return False
    return ord(c) <= 127


def is_ctl(c: str) -> bool:
    """
    Check if character is a control character.

    Per RFC 7230: CTL = control characters (0-31 and 127)
    """
    if not c:
        return False
    b = ord(c)
    return b <= 31 or b == 127


def is_separator(c: str) -> bool:
    """
    Check if character is an HTTP separator.

    Per RFC 2616 Section 2.2:
    separators = "(" | ")" | "<" | ">" | "@"
               | "," | ";" | ":" | "\" | <">
               | "/" | "[" | "]" | "?" | "="
               | "{" | "}" | SP | HT
    """
    if not c:
        return False
    return c in '()<>@,;:\\"/[]?={} \t'


def is_token(c: str) -> bool:
    """
    Check if character is valid in an HTTP token.

    Per RFC 7230 Section 3.2.6, token chars are CHAR but not CTL or separators.

    Examples:
        >>> is_token('a')
        True
        >>> is_token('-')
        True
        >>> is_token(' ')
        False
        >>> is_token(',')
        False
    """
    return is_char(c) and not is_ctl(c) and not is_separator(c)


def is_token_string(text: str) -> bool:
    """
    Check if a whole string is a non-empty HTTP token.

    Examples:
        >>> is_token_string("max-age")
        True
        >>> is_token_string("a b")
        False
        >>> is_token_string("")
        False
    """
    return bool(text) and all(is_token(c) for c in text)


def http_quote(text: str) -> str:
    r"""
    Render a string as an HTTP quoted-string.

    Double quotes and backslashes are escaped as quoted-pairs.

    Examples:
        >>> http_quote('hello world')
        '"hello world"'
        >>> http_quote('say "hi"')
        '"say \\"hi\\""'
    """
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


HeaderValue: TypeAlias = Union[str, List[str]]


class Headers(MutableMapping[str, HeaderValue]):
    """
    Response header collection.

    Names are matched case-insensitively; the spelling used when a header is
    first set is the one reported on iteration and output. A value is either
    a single string or an ordered list of strings. Assignment replaces the
    previous value, no merging is done here.
    """

    def __init__(self, headers: Optional[Mapping[str, HeaderValue]] = None) -> None:
        self._headers: Dict[str, Tuple[str, HeaderValue]] = {}
        if headers:
            for key, value in headers.items():
                self[key] = value

    def get_list(self, key: str) -> Optional[List[str]]:
        entry = self._headers.get(key.lower())
        if entry is None:
            return None
        value = entry[1]
        return [value] if isinstance(value, str) else value[:]

    def flattened(self, separator: str = ",") -> Dict[str, str]:
        """
        Return a new dict where every list value is joined with `separator`.

        String values pass through unchanged and the collection itself is not
        modified.
        """
        return {
            name: value if isinstance(value, str) else separator.join(value) for name, value in self._headers.values()
        }

    def multi_items(
        self,
        separator: str = ",",
        multi_line: Iterable[str] = ("Set-Cookie",),
    ) -> List[Tuple[str, str]]:
        """
        Return the header block as ordered (name, value) lines.

        Headers listed in `multi_line` produce one line per value; any other
        list value is joined with `separator`.
        """
        keep_apart = {name.lower() for name in multi_line}
        lines: List[Tuple[str, str]] = []
        for lowered, (name, value) in self._headers.items():
            if isinstance(value, str):
                lines.append((name, value))
            elif lowered in keep_apart:
                lines.extend((name, item) for item in value)
            else:
                lines.append((name, separator.join(value)))
        return lines

    def __getitem__(self, key: str) -> HeaderValue:
        return self._headers[key.lower()][1]

    def __setitem__(self, key: str, value: HeaderValue) -> None:
        lowered = key.lower()
        name = self._headers[lowered][0] if lowered in self._headers else key
        self._headers[lowered] = (name, value if isinstance(value, str) else list(value))

    def __delitem__(self, key: str) -> None:
        del self._headers[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._headers.values())

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._headers.values())!r})"

    def __eq__(self, other_headers: Any) -> bool:
        if isinstance(other_headers, Mapping) and not isinstance(other_headers, Headers):
            other_headers = Headers(other_headers)
        if not isinstance(other_headers, Headers):
            return NotImplemented
        return {k: v for k, (_, v) in self._headers.items()} == {
            k: v for k, (_, v) in other_headers._headers.items()
        }


def format_directives(directives: Mapping[str, Any]) -> str:
    """
    Render a mapping of Cache-Control directives, keeping the mapping's order.

    Names are lower-cased with underscores turned into dashes. `True` renders
    the bare directive, `False` and `None` drop it, a list or tuple renders a
    quoted field-name list and anything else renders as `name=value`, quoted
    when the value is not a token.

    Examples:
        >>> format_directives({"max-age": 3600, "private": True})
        'max-age=3600, private'
        >>> format_directives({"no_cache": ["Set-Cookie", "Authorization"]})
        'no-cache="Set-Cookie, Authorization"'
        >>> format_directives({})
        ''
    """
    parts: List[str] = []
    for key, value in directives.items():
        name = to_directive_name(key)
        if value is None or value is False:
            continue
        if value is True:
            parts.append(name)
        elif isinstance(value, (list, tuple)):
            parts.append(f"{name}={http_quote(', '.join(value))}" if value else name)
        else:
            text = str(value)
            parts.append(f"{name}={text if is_token_string(text) else http_quote(text)}")
    return ", ".join(parts)


class CacheControl:
    """
    Cache-Control directives for a response.

    Supported Directives:
    - max-age [RFC9111, Section 5.2.1.1, 5.2.2.1]
    - s-maxage [RFC9111, Section 5.2.2.10]
    - max-stale [RFC9111, Section 5.2.1.2]
    - min-fresh [RFC9111, Section 5.2.1.3]
    - stale-if-error [RFC5861, Section 4]
    - stale-while-revalidate [RFC5861, Section 3]
    - no-cache [RFC9111, Section 5.2.1.4, 5.2.2.4]
    - private [RFC9111, Section 5.2.2.7]
    - no-store [RFC9111, Section 5.2.1.5, 5.2.2.5]
    - no-transform [RFC9111, Section 5.2.1.6, 5.2.2.6]
    - must-revalidate [RFC9111, Section 5.2.2.2]
    - must-understand [RFC9111, Section 5.2.2.3]
    - proxy-revalidate [RFC9111, Section 5.2.2.8]
    - public [RFC9111, Section 5.2.2.9]
    - immutable [RFC8246]
    - only-if-cached [RFC9111, Section 5.2.1.7]

    no_cache and private can be:
        - False: directive not present
        - True: directive present without field names
        - List[str]: directive present with specific field names

    `str()` renders the set directives in the order listed above, followed by
    any `extensions` verbatim.
    """

    def __init__(
        self,
        max_age: Optional[int] = None,
        s_maxage: Optional[int] = None,
        max_stale: Optional[int] = None,
        min_fresh: Optional[int] = None,
        stale_if_error: Optional[int] = None,
        stale_while_revalidate: Optional[int] = None,
        no_cache: Union[bool, List[str]] = False,
        private: Union[bool, List[str]] = False,
        no_store: bool = False,
        no_transform: bool = False,
        must_revalidate: bool = False,
        must_understand: bool = False,
        proxy_revalidate: bool = False,
        public: bool = False,
        immutable: bool = False,
        only_if_cached: bool = False,
        extensions: Optional[List[str]] = None,
    ) -> None:
        self.max_age = max_age
        self.s_maxage = s_maxage
        self.max_stale = max_stale
        self.min_fresh = min_fresh
        self.stale_if_error = stale_if_error
        self.stale_while_revalidate = stale_while_revalidate
        self.no_cache = no_cache
        self.private = private
        self.no_store = no_store
        self.no_transform = no_transform
        self.must_revalidate = must_revalidate
        self.must_understand = must_understand
        self.proxy_revalidate = proxy_revalidate
        self.public = public
        self.immutable = immutable
        self.only_if_cached = only_if_cached
        self.extensions: List[str] = list(extensions or [])

    def to_directives(self) -> Dict[str, Any]:
        return {to_directive_name(name): getattr(self, name) for name in DIRECTIVE_FIELDS}

    def __str__(self) -> str:
        return ", ".join(part for part in [format_directives(self.to_directives()), *self.extensions] if part)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CacheControl):
            return NotImplemented
        return self.to_directives() == other.to_directives() and self.extensions == other.extensions


TIME_FIELDS = [
    "max_age",
    "s_maxage",
    "max_stale",
    "min_fresh",
    "stale_if_error",
    "stale_while_revalidate",
]

LIST_FIELDS = [
    "no_cache",
    "private",
]

BOOLEAN_FIELDS = [
    "no_store",
    "no_transform",
    "must_revalidate",
    "must_understand",
    "proxy_revalidate",
    "public",
    "immutable",
    "only_if_cached",
]

DIRECTIVE_FIELDS = TIME_FIELDS + LIST_FIELDS + BOOLEAN_FIELDS
