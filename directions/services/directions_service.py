"""
Directions Service

Sends built directions requests to the directions API and returns responses
whose routes carry the options they were requested with.

API Endpoint: https://api.mapbox.com/directions/v5/{user}/{profile}/{coordinates}
Documentation: https://docs.mapbox.com/api/navigation/directions/
"""

import asyncio
import logging
from typing import Callable, Optional

import httpx

from directions.core.config import settings
from directions.core.exceptions import (
    DirectionsServiceError,
    DirectionsTransportError,
)
from directions.schemas.directions_response import DirectionsResponse
from directions.schemas.health import ServiceHealth
from directions.services.directions_builder import DirectionsRequest
from directions.services.response_factory import DirectionsResponseFactory
from directions.services.transport import build_http_request

logger = logging.getLogger(__name__)

ResponseCallback = Callable[[DirectionsResponse], None]
FailureCallback = Callable[[Exception], None]


class DirectionsService:
    """
    Service for calling the directions API.

    Supports blocking calls, coroutines and callback style calls. The
    underlying httpx clients are created lazily and shared between calls;
    timeouts and connection reuse are left to them.
    """

    def __init__(
        self,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the directions service.

        Args:
            transport: Optional httpx transport for blocking calls
            async_transport: Optional httpx transport for async calls
        """
        self._timeout = settings.REQUEST_TIMEOUT
        self._transport = transport
        self._async_transport = async_transport
        self._client: Optional[httpx.Client] = None
        self._async_client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self._timeout, transport=self._transport)
        return self._client

    def _get_async_client(self) -> httpx.AsyncClient:
        """
        Get or create the async HTTP client.

        Returns:
            httpx.AsyncClient instance for making requests to the directions API.
        """
        if self._async_client is None:
            self._async_client = httpx.AsyncClient(
                timeout=self._timeout, transport=self._async_transport
            )
        return self._async_client

    def execute(self, request: DirectionsRequest) -> DirectionsResponse:
        """
        Send a directions request and wait for the response.

        Args:
            request: Built directions request

        Returns:
            DirectionsResponse whose routes carry their RouteOptions

        Raises:
            DirectionsTransportError: If the network call fails
            DirectionsAPIError: If the API answers with an error
            DirectionsDecodeError: If the response cannot be parsed
        """
        http_request = build_http_request(request)
        self._log_request(http_request, request)

        try:
            response = self._get_client().send(http_request)
        except httpx.TimeoutException as e:
            logger.error("Request to directions API timed out")
            raise DirectionsTransportError(f"Request timed out: {str(e)}") from e
        except httpx.HTTPError as e:
            logger.error("Network error while contacting directions API: %s", str(e))
            raise DirectionsTransportError(f"Network error: {str(e)}") from e

        return self._generate(request, response)

    async def execute_async(self, request: DirectionsRequest) -> DirectionsResponse:
        """
        Send a directions request without blocking the event loop.

        Raises the same errors as ``execute``.
        """
        http_request = build_http_request(request)
        self._log_request(http_request, request)

        try:
            response = await self._get_async_client().send(http_request)
        except httpx.TimeoutException as e:
            logger.error("Request to directions API timed out")
            raise DirectionsTransportError(f"Request timed out: {str(e)}") from e
        except httpx.HTTPError as e:
            logger.error("Network error while contacting directions API: %s", str(e))
            raise DirectionsTransportError(f"Network error: {str(e)}") from e

        return self._generate(request, response)

    def enqueue(
        self,
        request: DirectionsRequest,
        on_response: ResponseCallback,
        on_failure: FailureCallback,
    ) -> "asyncio.Task[None]":
        """
        Schedule a directions request on the running event loop.

        Exactly one of the callbacks is invoked when the call finishes.
        Cancel the returned task to abandon the call.
        """

        async def _run() -> None:
            try:
                response = await self.execute_async(request)
            except asyncio.CancelledError:
                raise
            except Exception as e:  # pylint: disable=broad-except
                on_failure(e)
                return
            on_response(response)

        return asyncio.get_running_loop().create_task(_run())

    async def health_check(self) -> ServiceHealth:
        """
        Check that the directions API host is reachable.
        """
        try:
            response = await self._get_async_client().get(settings.DIRECTIONS_BASE_URL)
            if response.status_code < 500:
                return ServiceHealth(healthy=True, message="Directions API is responding")
            return ServiceHealth(
                healthy=False,
                message=f"Directions API returned status code: {response.status_code}",
            )
        except httpx.TimeoutException:
            return ServiceHealth(healthy=False, message="Directions API request timed out")
        except Exception as e:  # pylint: disable=broad-except
            return ServiceHealth(healthy=False, message=f"Directions API check failed: {str(e)}")

    def _generate(self, request: DirectionsRequest, response: httpx.Response) -> DirectionsResponse:
        try:
            return DirectionsResponseFactory(request).generate(response)
        except DirectionsServiceError as e:
            logger.error("Failed to handle directions response: %s", str(e))
            raise

    @staticmethod
    def _log_request(http_request: httpx.Request, request: DirectionsRequest) -> None:
        logger.info(
            "Directions request: method=%s, profile=%s, coordinates=%d",
            http_request.method,
            request.profile.value,
            len(request.coordinates),
        )

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    async def aclose(self) -> None:
        """
        Close both HTTP clients and cleanup resources.
        """
        self.close()
        if self._async_client is not None:
            await self._async_client.aclose()
            self._async_client = None


# Singleton instance for dependency injection
directions_service = DirectionsService()
