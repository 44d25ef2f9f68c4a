"""
Upstream access to the Petclinic owners API.

The owners resource lives at different paths depending on how Petclinic is
deployed (customers service, API gateway, monolith). Candidates are tried one
at a time, in order, and the first one that answers with JSON wins. Failures
never escape this module: callers get a result object with ``error`` set.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

import requests

from models.owner import DetailShape
from models.results import FetchResult, OwnerLookupResult
from services.normalizer import detect_detail_shape, normalize_owner
from utils.config import SourceSettings
from utils.error_handling import UpstreamError
from utils.logging_config import get_logger

logger = get_logger(__name__)

EXHAUSTED_MESSAGE = "Unable to fetch Petclinic owners from any known endpoint."
NOT_FOUND_MESSAGE = "Customer not found."
MISSING_OWNER_MESSAGE = "Owner not found in Petclinic response."
ARRAY_DETAIL_MESSAGE = "Unexpected array response when fetching owner by id."
LOOKUP_FAILED_MESSAGE = "Failed to load customer from Petclinic."


def fetch_json(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: float = 10.0,
) -> Any:
    """GET a URL and decode its JSON body, raising UpstreamError on any failure."""
    http = session or requests
    try:
        response = http.get(url, headers={"Accept": "application/json"}, timeout=timeout)
    except requests.RequestException as exc:
        raise UpstreamError(f"Request to {url} failed: {exc}", url=url) from exc

    if not 200 <= response.status_code < 300:
        raise UpstreamError(
            f"Request to {url} failed with {response.status_code} {response.reason}",
            url=url,
            upstream_status=response.status_code,
        )

    try:
        return response.json()
    except ValueError as exc:
        raise UpstreamError(f"Response from {url} is not valid JSON", url=url) from exc


def describe_shape(data: Any) -> Union[str, List[str]]:
    """Short excerpt of a payload's layout for diagnostics."""
    if isinstance(data, list):
        return f"array[{len(data)}]"
    if isinstance(data, dict):
        embedded = data.get("_embedded")
        if isinstance(embedded, dict):
            return sorted(embedded.keys())
        return sorted(data.keys())
    return type(data).__name__


def fetch_candidates(
    candidates: Optional[Sequence[str]] = None,
    session: Optional[requests.Session] = None,
    settings: Optional[SourceSettings] = None,
) -> FetchResult:
    """Try each candidate URL once, in order, and return the first payload."""
    settings = settings or SourceSettings.from_environment()
    urls = list(candidates) if candidates is not None else settings.owner_candidates
    tried: List[str] = []

    for url in urls:
        tried.append(url)
        try:
            data = fetch_json(url, session=session, timeout=settings.timeout_seconds)
        except UpstreamError as exc:
            logger.warning(
                "Owner endpoint failed",
                extra={"url": url, "upstream_status": exc.upstream_status, "error": str(exc)},
            )
            continue

        if data is None:
            logger.warning("Owner endpoint returned a null body", extra={"url": url})
            continue

        logger.info(
            "Fetched owners",
            extra={"url": url, "shape": describe_shape(data)},
        )
        return FetchResult(data=data, endpoints_tried=tried)

    logger.error("All owner endpoints failed", extra={"endpoints_tried": tried})
    return FetchResult(error=EXHAUSTED_MESSAGE, endpoints_tried=tried)


def fetch_owner_by_id(
    owner_id: Union[str, int],
    session: Optional[requests.Session] = None,
    settings: Optional[SourceSettings] = None,
) -> OwnerLookupResult:
    """
    Fetch one owner with a single request.

    A 404 is reported as ``not_found`` so the page can redirect; any other
    failure is a plain ``error``.
    """
    settings = settings or SourceSettings.from_environment()
    url = settings.owner_detail_url(owner_id)

    try:
        data = fetch_json(url, session=session, timeout=settings.timeout_seconds)
    except UpstreamError as exc:
        if exc.is_not_found:
            logger.info("Owner not found", extra={"url": url})
            return OwnerLookupResult(not_found=True, error=NOT_FOUND_MESSAGE)
        logger.warning("Owner lookup failed", extra={"url": url, "error": str(exc)})
        return OwnerLookupResult(error=str(exc) or LOOKUP_FAILED_MESSAGE)

    shape = detect_detail_shape(data)
    if shape is DetailShape.ARRAY:
        return OwnerLookupResult(error=ARRAY_DETAIL_MESSAGE)

    owner = normalize_owner(data)
    if owner is None:
        logger.info("No owner in response", extra={"url": url, "shape": describe_shape(data)})
        return OwnerLookupResult(not_found=True, error=MISSING_OWNER_MESSAGE)

    return OwnerLookupResult(owner=owner)
