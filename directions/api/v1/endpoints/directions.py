"""
Directions API Endpoint

Provides REST API for previewing and running directions requests.
"""

import logging
from urllib.parse import parse_qsl

from fastapi import APIRouter, HTTPException

from directions.core.exceptions import (
    DirectionsAPIError,
    DirectionsDecodeError,
    DirectionsEncodingError,
    DirectionsServiceError,
    DirectionsTransportError,
    DirectionsValidationError,
)
from directions.core.security import mask_access_token
from directions.schemas.search import (
    DirectionsPreviewResponse,
    DirectionsSearchRequest,
    DirectionsSearchResponse,
)
from directions.services.directions_builder import DirectionsBuilder, DirectionsRequest
from directions.services.directions_service import directions_service
from directions.services.transport import POST, build_http_request

logger = logging.getLogger(__name__)

router = APIRouter()


def build_directions_request(search: DirectionsSearchRequest) -> DirectionsRequest:
    """
    Translate an API search request into a built DirectionsRequest.

    Raises:
        DirectionsValidationError: If the options violate a constraint
        DirectionsEncodingError: If a value cannot be encoded
    """
    builder = DirectionsBuilder().waypoints(search.coordinates)
    if search.origin is not None:
        builder.origin(search.origin)
    if search.destination is not None:
        builder.destination(search.destination)
    if search.profile is not None:
        builder.profile(search.profile)
    if search.access_token:
        builder.access_token(search.access_token)
    if search.geometries is not None:
        builder.geometries(search.geometries)
    if search.use_post is True:
        builder.post()
    elif search.use_post is False:
        builder.get()

    return (
        builder.alternatives(search.alternatives)
        .language(search.language)
        .overview(search.overview)
        .steps(search.steps)
        .continue_straight(search.continue_straight)
        .roundabout_exits(search.roundabout_exits)
        .voice_instructions(search.voice_instructions)
        .banner_instructions(search.banner_instructions)
        .voice_units(search.voice_units)
        .exclude(search.exclude)
        .annotations(search.annotations)
        .radiuses(search.radiuses)
        .bearings(search.bearings)
        .approaches(search.approaches)
        .waypoint_indices(search.waypoint_indices)
        .waypoint_names(search.waypoint_names)
        .waypoint_targets(search.waypoint_targets)
        .walking_options(search.walking_options)
        .origin_trace(search.origin_trace)
        .origin_trace_radiuses(search.origin_trace_radiuses)
        .origin_trace_timestamps(search.origin_trace_timestamps)
        .build()
    )


def _build_or_422(search: DirectionsSearchRequest) -> DirectionsRequest:
    try:
        return build_directions_request(search)
    except (DirectionsValidationError, DirectionsEncodingError) as e:
        logger.warning("Rejected directions request: %s", str(e))
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from e


@router.post("/preview", response_model=DirectionsPreviewResponse)
async def preview_directions(search: DirectionsSearchRequest):
    """
    Show the HTTP request a directions search would send, without sending it.
    """
    request = _build_or_422(search)
    http_request = build_http_request(request)

    body = None
    if http_request.method == POST:
        body = dict(parse_qsl(http_request.content.decode(), keep_blank_values=True))

    masked_url = http_request.url.copy_set_param(
        "access_token", mask_access_token(request.access_token)
    )
    return DirectionsPreviewResponse(
        method=http_request.method,
        url=str(masked_url),
        url_length=len(str(http_request.url)),
        body=body,
    )


@router.post(
    "/search", response_model=DirectionsSearchResponse, response_model_by_alias=False
)
async def search_directions(search: DirectionsSearchRequest):
    """
    Request directions between the given coordinates.

    Returns:
        DirectionsSearchResponse whose routes carry the options they were requested
        with, minus the access token

    Raises:
        HTTPException: If the request is invalid or the directions API call fails
    """
    request = _build_or_422(search)

    logger.info(
        "Directions search request: profile=%s, coordinates=%d",
        request.profile.value,
        len(request.coordinates),
    )

    try:
        response = await directions_service.execute_async(request)
        logger.info("Directions search successful: found %d routes", len(response.routes))
        return DirectionsSearchResponse.model_validate(response.model_dump(by_alias=True))

    except DirectionsAPIError as e:
        logger.error("Directions API error: %s", str(e))
        raise HTTPException(
            status_code=502,
            detail=f"Directions API error: {str(e)}",
        ) from e

    except DirectionsTransportError as e:
        logger.error("Network error: %s", str(e))
        raise HTTPException(
            status_code=503,
            detail=f"Network error connecting to directions API: {str(e)}",
        ) from e

    except DirectionsDecodeError as e:
        logger.error("Data parsing error: %s", str(e))
        raise HTTPException(
            status_code=502,
            detail=f"Failed to parse directions API response: {str(e)}",
        ) from e

    except DirectionsServiceError as e:
        logger.error("Directions service error: %s", str(e))
        raise HTTPException(
            status_code=500,
            detail=f"Directions service error: {str(e)}",
        ) from e
