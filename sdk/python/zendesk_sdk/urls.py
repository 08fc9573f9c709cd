"""URL assembly and query-string serialization."""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import quote, unquote

from .endpoints import DEFAULT_ENDPOINT_CHECKER, EndpointChecker

PathSpec = Union[str, Sequence[Any]]

CURSOR_PAGE_SIZE = 100
DOT_JSON = ".json"


def _encode(text: str) -> str:
    return quote(text, safe="")


def _scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def serialize_query(value: Any, prefix: str = "") -> str:
    """Serialize nested options into a bracket-notation query string.

    Mappings recurse into ``prefix[key]`` names, sequences collapse into a
    single comma-joined value and anything else is a scalar.

    >>> serialize_query({"page": {"size": 2}, "ids": [1, 2]})
    'page%5Bsize%5D=2&ids=1,2'
    """
    if isinstance(value, Mapping):
        fragments = []
        for key, child in value.items():
            child_prefix = f"{prefix}[{key}]" if prefix else str(key)
            fragment = serialize_query(child, child_prefix)
            if fragment:
                fragments.append(fragment)
        return "&".join(fragments)

    if isinstance(value, (list, tuple)):
        joined = ",".join(_encode(_scalar(item)) for item in value)
        return f"{_encode(prefix)}={joined}"

    return f"{_encode(prefix)}={_encode(_scalar(value))}"


def _pairs(query: str) -> Iterable[Tuple[str, str]]:
    for part in query.split("&"):
        if part:
            key, _, value = part.partition("=")
            yield unquote(key), value


def merge_queries(queries: Iterable[str]) -> str:
    """Merge query strings; a later key overrides an earlier one.

    Keys are compared decoded. Values keep their encoding, so an escaped
    comma inside a list item never turns into a separator.
    """
    merged: Dict[str, str] = {}
    for query in queries:
        if query:
            merged.update(_pairs(query))
    return "&".join(
        f"{quote(key, safe='[]')}={quote(value, safe='%,[]')}" for key, value in merged.items()
    )


def _is_absolute(uri: str) -> bool:
    return uri.startswith("http://") or uri.startswith("https://")


def split_path_spec(uri: PathSpec) -> Tuple[List[str], str]:
    """Split a path spec into its non-empty path segments and raw query."""
    query = ""
    if isinstance(uri, str):
        path, _, query = uri.partition("?")
        parts: List[Any] = [path]
    else:
        parts = list(uri)
        if parts:
            last = parts[-1]
            if isinstance(last, Mapping):
                parts.pop()
                query = serialize_query(last)
            elif isinstance(last, str) and last.startswith("?"):
                parts.pop()
                query = last[1:]

    segments = []
    for part in parts:
        if part is None:
            continue
        segment = str(part).strip("/")
        if segment:
            segments.append(segment)
    return segments, query


def assemble_url(
    base: str,
    method: str,
    uri: PathSpec,
    side_load: Sequence[str] = (),
    default_query: Optional[Mapping[str, Any]] = None,
    use_dot_json: bool = True,
    endpoint_checker: EndpointChecker = DEFAULT_ENDPOINT_CHECKER,
) -> str:
    """Build the absolute URL of a request.

    Fully-qualified string URIs (the ``next_page`` links handed back by the
    API) are returned untouched.
    """
    if isinstance(uri, str) and (base in uri or _is_absolute(uri)):
        return uri

    segments, explicit_query = split_path_spec(uri)
    path = "/".join(segments)

    page_default = ""
    if method.upper() == "GET" and endpoint_checker.supports_cursor_pagination(path):
        page_default = f"page[size]={CURSOR_PAGE_SIZE}"

    include = f"include={','.join(side_load)}" if side_load else ""

    query = merge_queries(
        [explicit_query, page_default, include, serialize_query(default_query or {})]
    )

    url = base.rstrip("/")
    if path:
        url = f"{url}/{path}{DOT_JSON if use_dot_json else ''}"
    if query:
        url = f"{url}?{query}"
    return url
