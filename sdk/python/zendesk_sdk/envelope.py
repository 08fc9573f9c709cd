"""Response classification, envelope unwrapping and side-loading."""

from typing import Any, Dict, List, Optional, Sequence

from .exceptions import (
    FAIL_CODES,
    EmptyResultError,
    NoContentError,
    RateLimitError,
    api_error_for,
)
from .models import ResourceMeta, SideLoadRule


def _is_empty(result: Any) -> bool:
    return result is None or (isinstance(result, (str, bytes)) and not result)


def _retry_after_seconds(value: str) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def check_request_response(response: Any, result: Any) -> Any:
    """Classify an HTTP outcome before its envelope is resolved.

    Returns the result unchanged on success, or a :class:`NoContentError`
    marker for ``204 No Content``. Every other failure is raised.
    """
    if _is_empty(result):
        raise EmptyResultError()

    status = response.status
    if status == 204 and (response.status_text or "No Content") == "No Content":
        return NoContentError("No Content", status_code=204)

    retry_after = response.headers.get("retry-after")
    if retry_after:
        raise RateLimitError(
            "Zendesk rate limits 200 requests per minute",
            retry_after=_retry_after_seconds(retry_after),
            result=result,
        )

    if status in FAIL_CODES:
        raise api_error_for(status, result)

    return result


def find_body(result: Any, json_api_names: Sequence[str]) -> Any:
    """Payload under the first declared API name present in the envelope."""
    if not isinstance(result, dict):
        return result
    for api_name in json_api_names:
        if api_name in result:
            return result[api_name]
    return result


def populate_fields(data: Any, response: Any, side_load_map: Sequence[SideLoadRule]) -> Any:
    """Attach side-loaded records from ``response`` onto ``data``.

    Records are augmented in place; the datasets they draw from are left
    as they are.
    """
    if not isinstance(response, dict) or not side_load_map:
        return data

    dataset_cache: Dict[str, Any] = {}

    def dataset_for(name: str) -> Any:
        if name not in dataset_cache:
            dataset_cache[name] = response.get(name)
        return dataset_cache[name]

    def populate_record(record: Dict[str, Any]) -> None:
        for rule in side_load_map:
            if rule.field not in record:
                continue
            dataset = dataset_for(rule.dataset)
            if dataset is None:
                continue

            key = rule.data_key or "id"
            value = record[rule.field]
            if rule.all:
                record[rule.name] = list(dataset)
            elif rule.array:
                record[rule.name] = [
                    entry for entry in dataset if isinstance(entry, dict) and entry.get(key) == value
                ]
            else:
                record[rule.name] = next(
                    (entry for entry in dataset if isinstance(entry, dict) and entry.get(key) == value),
                    None,
                )

    if isinstance(data, list):
        for record in data:
            if isinstance(record, dict):
                populate_record(record)
    elif isinstance(data, dict):
        populate_record(data)

    return data


def process_response_body(result: Any, meta: ResourceMeta) -> Any:
    """Unwrap the envelope of a checked result and side-load related records."""
    body = find_body(result, meta.json_api_names)
    if meta.side_load_map:
        body = populate_fields(body, result, meta.side_load_map)
    return body


def next_page_link(page: Any) -> Optional[str]:
    """Cursor ``links.next`` if present, else offset ``next_page``."""
    if not isinstance(page, dict):
        return None
    links = page.get("links")
    if isinstance(links, dict) and links.get("next"):
        return links["next"]
    return page.get("next_page") or None


def flatten(pages: List[Any]) -> List[Any]:
    """Flatten one level of nesting from a list of page payloads."""
    flat: List[Any] = []
    for page in pages:
        if isinstance(page, list):
            flat.extend(page)
        else:
            flat.append(page)
    return flat
