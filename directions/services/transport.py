"""
Directions Transport Policy

Turns a built DirectionsRequest into an ``httpx.Request``. Unless the caller
pinned a method, the GET URL is built first and used when it stays below the
URL size limit; longer requests fall back to a form-encoded POST carrying the
same parameters in the body.
"""

import logging
from typing import Dict, Optional

import httpx

from directions.core.config import settings
from directions.services.directions_builder import DirectionsRequest

logger = logging.getLogger(__name__)

DIRECTIONS_PATH = "directions/v5"
MAX_URL_SIZE = 1024 * 8

GET = "GET"
POST = "POST"


def select_method(
    url_length: int, use_post: Optional[bool] = None, max_url_size: int = MAX_URL_SIZE
) -> str:
    """
    Choose the HTTP method for a request.

    Args:
        url_length: Length of the fully encoded GET URL
        use_post: Method pinned by the caller, None to decide by length
        max_url_size: URLs of this length or longer are sent as POST
    """
    if use_post is not None:
        return POST if use_post else GET
    return GET if url_length < max_url_size else POST


def _headers(request: DirectionsRequest) -> Dict[str, str]:
    agent = f"directions-gateway/{settings.VERSION}"
    if request.client_app_name:
        agent = f"{request.client_app_name} {agent}"
    return {"User-Agent": agent, "Accept": "application/json"}


def _endpoint(request: DirectionsRequest) -> str:
    base = request.base_url.rstrip("/")
    return f"{base}/{DIRECTIONS_PATH}/{request.user}/{request.profile.value}"


def build_get_request(request: DirectionsRequest) -> httpx.Request:
    """All parameters in the query string, coordinates in the path."""
    return httpx.Request(
        GET,
        f"{_endpoint(request)}/{request.coordinates_param()}",
        params=request.query_params(),
        headers=_headers(request),
    )


def build_post_request(request: DirectionsRequest) -> httpx.Request:
    """Access token in the query string, everything else form-encoded in the body."""
    params = request.query_params()
    access_token = params.pop("access_token")
    body = {"coordinates": request.coordinates_param(), **params}
    return httpx.Request(
        POST,
        _endpoint(request),
        params={"access_token": access_token},
        data=body,
        headers=_headers(request),
    )


def build_http_request(
    request: DirectionsRequest, max_url_size: Optional[int] = None
) -> httpx.Request:
    """
    Build the HTTP request for a directions call.

    The decision is made per call from the request's own parameters.
    """
    if request.use_post is not None:
        method = select_method(0, request.use_post)
        logger.debug("Using pinned %s method for directions request", method)
        return build_post_request(request) if method == POST else build_get_request(request)

    limit = max_url_size or settings.MAX_URL_SIZE
    get_request = build_get_request(request)
    url_length = len(str(get_request.url))
    if select_method(url_length, None, limit) == GET:
        return get_request

    logger.info(
        "Directions URL length %d reaches limit %d, sending request as POST",
        url_length,
        limit,
    )
    return build_post_request(request)
