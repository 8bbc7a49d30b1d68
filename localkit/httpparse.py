"""Parsing of raw HTTP/1.x requests, responses and query strings."""

import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Tuple

from .crayon import Crayon
from .kvmap import KVMap
from .strings import (
    cut_before_delim,
    cut_before_delims,
    strloc,
    substr,
    to_number,
    trim,
    trim_left,
    truncate_from_left,
)

WHITESPACES = " \t\r\n"
HTTP_CRLF = "\r\n"

_VERSIONS = {"HTTP/1.1": 1.1, "HTTP/1.2": 1.2}
_U16_MASK = 0xFFFF

_STATUS_MESSAGES = {
    100: "Continue",
    101: "Switching Protocols",
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    306: "Unused",
    307: "Temporary Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Request Entity Too Large",
    414: "Request-url Too Long",
    415: "Unsupported Media Type",
    416: "Requested Range Not Satisified",
    417: "Expectation Failed",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
}


class HttpMethod(IntEnum):
    """Request methods understood by the parser."""

    GET = 0
    PUT = 1
    HEAD = 2
    POST = 3
    TRACE = 4
    DELETE = 5
    CONNECT = 6
    OPTIONS = 7
    UNKNOWN = 8


_METHODS = {m.name: m for m in HttpMethod if m is not HttpMethod.UNKNOWN}


class HttpParseError(ValueError):
    """Raised when HTTP text cannot be parsed."""


def _warning(message: str) -> None:
    tag = f"{Crayon.BOLD.value}{Crayon.YELLOW.value}HTTP{Crayon.NOCRAYON.value}"
    sys.stderr.write(f"[{tag}]: {message}\n")


def _highlight(text: str) -> str:
    return f"{Crayon.BOLD.value}{Crayon.RED.value}{text}{Crayon.NOCRAYON.value}"


def _advance(content: str, count: int) -> str:
    rest = truncate_from_left(content, count)
    return "" if rest is None else rest


def method_name(method) -> Optional[str]:
    """The wire name of method, or None for an unknown method."""
    try:
        method = HttpMethod(method)
    except ValueError:
        return None
    return None if method is HttpMethod.UNKNOWN else method.name


def status_message(code: int) -> Optional[str]:
    """The reason phrase for a status code, or None if it is not known."""
    return _STATUS_MESSAGES.get(code)


def header_exists(headers: Optional[KVMap], key: Optional[str]) -> bool:
    """True when headers holds key."""
    if headers is None or key is None:
        return False
    return key in headers


def header_get(headers: Optional[KVMap], key: Optional[str]) -> Optional[str]:
    """The value of header key, or None."""
    if headers is None or key is None:
        return None
    return headers.get(key)


def parse_headers(content: Optional[str]) -> Tuple[KVMap, str]:
    """Parse header lines up to the empty line; return them and the rest.

    The first occurrence of a header wins. Each line is assumed to end in
    CRLF. A line without ':' or with nothing on either side raises.
    """
    content = trim_left(content or "", WHITESPACES)
    headers = KVMap()
    line = cut_before_delims(content, HTTP_CRLF)
    while line:
        colon = strloc(line, ":")
        if colon is None:
            raise HttpParseError(f"Unknown header: {line}")
        raw_key, raw_value = line[:colon], line[colon + 1:]
        if not raw_key or not raw_value:
            raise HttpParseError(f"Malformed header: {line}")
        headers.insert(trim(raw_key, WHITESPACES), trim(raw_value, WHITESPACES))
        content = _advance(content, len(line) + 2)
        line = cut_before_delims(content, HTTP_CRLF)
    return headers, content


def parse_query(querystr: Optional[str]) -> Optional[KVMap]:
    """Parse 'k=v&k2=v2' into a KVMap; None when querystr is None.

    An empty value is stored as None; the first occurrence of a key wins.
    A segment without '=', an empty key or a trailing '&' raises.
    """
    if querystr is None:
        return None
    queries = KVMap()
    rest: Optional[str] = querystr
    while True:
        eq = strloc(rest, "=")
        if eq is None:
            raise HttpParseError(
                f"Query string {_highlight(querystr)} has bad format!"
            )
        key = substr(rest, 0, eq)
        if key is None:
            raise HttpParseError(f"Query string {querystr!r} has an empty key")
        amp = strloc(rest, "&")
        if amp is None:
            queries.insert(key, substr(rest, eq + 1, len(rest)))
            break
        queries.insert(key, substr(rest, eq + 1, amp))
        rest = truncate_from_left(rest, amp + 1)
    return queries if len(queries) else None


@dataclass
class HttpRequest:
    """A parsed HTTP request."""

    method: HttpMethod
    target: str
    version: float
    headers: KVMap = field(default_factory=KVMap)
    body: str = ""

    def target_path(self) -> Optional[str]:
        """The target before '?'; None when there is no '?' or no path."""
        if self.target is None:
            return None
        mark = strloc(self.target, "?")
        if mark is None:
            return None
        return substr(self.target, 0, mark)

    def target_queries(self) -> Optional[str]:
        """The target after '?'; None when there is no '?' or no query."""
        if self.target is None:
            return None
        mark = strloc(self.target, "?")
        if mark is None:
            return None
        return substr(self.target, mark + 1, len(self.target))

    def parse_query(self) -> Optional[KVMap]:
        """Parse the query part of the target."""
        return parse_query(self.target_queries())

    def header_exists(self, key: Optional[str]) -> bool:
        """True when the request carries header key."""
        return header_exists(self.headers, key)

    def header_get(self, key: Optional[str]) -> Optional[str]:
        """The value of request header key, or None."""
        return header_get(self.headers, key)


@dataclass
class HttpResponse:
    """A parsed HTTP response."""

    version: float
    status: int
    headers: KVMap = field(default_factory=KVMap)
    body: str = ""

    def header_exists(self, key: Optional[str]) -> bool:
        """True when the response carries header key."""
        return header_exists(self.headers, key)

    def header_get(self, key: Optional[str]) -> Optional[str]:
        """The value of response header key, or None."""
        return header_get(self.headers, key)


def _parse_request_method(content: str) -> Tuple[HttpMethod, str]:
    word = cut_before_delim(content, " ")
    method = _METHODS.get(word)
    if method is None:
        _warning(f"Unknown HTTP Method - {_highlight(word)}")
        raise HttpParseError(f"Unknown HTTP Method - {word}")
    return method, _advance(content, len(word))


def _parse_request_target(content: str) -> Tuple[str, str]:
    content = trim_left(content, WHITESPACES)
    target = cut_before_delim(content, " ")
    return target, _advance(content, len(target))


def _parse_request_version(content: str) -> Tuple[float, str]:
    content = trim_left(content, WHITESPACES)
    word = cut_before_delims(content, WHITESPACES)
    version = _VERSIONS.get(word)
    if version is None:
        _warning(f"Unknown HTTP Version - {_highlight(word)}")
        version = 0.0
    return version, _advance(content, len(word))


def analyze_request(content: str) -> HttpRequest:
    """Parse a complete request: request line, headers and body.

    An unknown version is reported on standard error and recorded as 0.0.
    """
    if content is None:
        raise HttpParseError("no request content")
    content = trim(content, WHITESPACES)
    method, content = _parse_request_method(content)
    target, content = _parse_request_target(content)
    version, content = _parse_request_version(content)
    headers, content = parse_headers(content)
    return HttpRequest(method, target, version, headers, trim(content, WHITESPACES))


def _parse_response_version(content: str) -> Tuple[float, str]:
    content = trim_left(content, WHITESPACES)
    word = cut_before_delim(content, " ")
    version = _VERSIONS.get(word)
    if version is None:
        _warning(f"Unknown HTTP Version - {_highlight(word)}")
        raise HttpParseError(f"Unknown HTTP Version - {word}")
    return version, _advance(content, len(word))


def _parse_response_status(content: str) -> Tuple[int, str]:
    content = trim_left(content, WHITESPACES)
    word = cut_before_delim(content, " ")
    try:
        number = to_number(word)
    except ValueError as exc:
        raise HttpParseError(f"Unknown HTTP Status Code - {word}") from exc
    if number is None:
        raise HttpParseError(f"Unknown HTTP Status Code - {word}")
    code = number & _U16_MASK
    expected = status_message(code)
    if expected is None:
        raise HttpParseError(f"Unknown HTTP Status Code - {word}")
    content = trim_left(_advance(content, len(word)), WHITESPACES)
    message = cut_before_delims(content, HTTP_CRLF)
    if message != expected:
        raise HttpParseError(
            f"Response Status Message Mismatch - should be {expected}, "
            f"but received {message}"
        )
    return code, _advance(content, len(message))


def analyze_response(content: str) -> HttpResponse:
    """Parse a complete response: status line, headers and body."""
    if content is None:
        raise HttpParseError("no response content")
    content = trim(content, WHITESPACES)
    version, content = _parse_response_version(content)
    status, content = _parse_response_status(content)
    headers, content = parse_headers(content)
    return HttpResponse(version, status, headers, trim(content, WHITESPACES))