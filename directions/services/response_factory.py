"""
Directions Response Factory

Decodes a directions API response and attaches the options it was requested
with to every route. The request UUID only exists once the service has
answered, so the RouteOptions handed to callers are always created here.
"""

import logging
from typing import Any, Dict

import httpx
from pydantic import ValidationError as PydanticValidationError

from directions.core.exceptions import DirectionsAPIError, DirectionsDecodeError
from directions.schemas.directions_response import DirectionsResponse
from directions.services.directions_builder import DirectionsRequest

logger = logging.getLogger(__name__)

OK_CODE = "Ok"


class DirectionsResponseFactory:
    """Builds annotated DirectionsResponse objects for one request."""

    def __init__(self, request: DirectionsRequest):
        self._request = request

    def generate(self, response: httpx.Response) -> DirectionsResponse:
        """
        Turn an HTTP response into a DirectionsResponse with route options.

        Raises:
            DirectionsAPIError: If the service answered with an error status
            DirectionsDecodeError: If the body is malformed or incomplete
        """
        if not response.is_success:
            raise DirectionsAPIError(
                f"Directions API returned status {response.status_code}: "
                f"{self._error_message(response)}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise DirectionsDecodeError(f"Invalid response data: {str(e)}") from e

        return self.reconcile(payload)

    def reconcile(self, payload: Dict[str, Any]) -> DirectionsResponse:
        """
        Attach route index and post-response RouteOptions to each route.
        """
        if not payload or not isinstance(payload, dict):
            raise DirectionsDecodeError("Directions response body is empty")

        try:
            body = DirectionsResponse.model_validate(payload)
        except PydanticValidationError as e:
            raise DirectionsDecodeError(f"Invalid response data: {str(e)}") from e

        if body.code != OK_CODE:
            raise DirectionsAPIError(f"Directions API error: {body.message or body.code}")

        if not body.routes:
            raise DirectionsDecodeError("Directions response contains no routes")

        route_options = self._request.to_route_options(body.uuid)
        routes = [
            route.model_copy(update={"route_index": str(index), "route_options": route_options})
            for index, route in enumerate(body.routes)
        ]

        logger.debug("Reconciled %d routes for request %s", len(routes), body.uuid)
        return body.model_copy(update={"routes": routes})

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return response.text or response.reason_phrase
