"""HTTP dispatch for endpoint calls.

:class:`BaseClient` and :class:`AsyncBaseClient` hold only immutable
configuration (base URL, default headers, timeout, auth) plus an optional
caller-owned httpx client, so a single instance can be shared by
independent call sites. Each call performs exactly one HTTP request and is
never retried.
"""

import asyncio
import logging
from typing import Any

import httpx
from httpx import USE_CLIENT_DEFAULT, AsyncClient, Client, Response

from zoomphone.core.decoding import decode_response
from zoomphone.core.endpoint import Endpoint, EndpointCall
from zoomphone.exceptions import APIError, RequestCanceledError, TransportError

__all__ = ('DEFAULT_BASE_URL', 'DEFAULT_TIMEOUT', 'AsyncBaseClient', 'BaseClient')

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://api.zoom.us/v2'
DEFAULT_TIMEOUT = 30.0


class _ClientConfig:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        access_token: str | None = None,
        auth: httpx.Auth | None = None,
    ) -> None:
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.headers = dict(headers or {})
        if access_token:
            self.headers['Authorization'] = f'Bearer {access_token}'
        self.auth = auth

    def _request_kwargs(
        self,
        params: list[tuple[str, str]] | None,
        json: Any | None,
        headers: dict[str, str] | None,
        timeout: float | None,
    ) -> dict[str, Any]:
        return {
            'params': params or None,
            'json': json,
            'headers': {**self.headers, **(headers or {})},
            'timeout': timeout if timeout is not None else self.timeout,
            'auth': self.auth if self.auth is not None else USE_CLIENT_DEFAULT,
        }

    def _transport_error(self, exc: httpx.RequestError, operation: str | None) -> TransportError:
        if isinstance(exc, httpx.TimeoutException):
            logger.warning(f'{operation}: request timed out: {exc}')
            return TransportError(
                'request timed out', cause=exc, timed_out=True, operation=operation
            )
        logger.warning(f'{operation}: request failed: {exc}')
        return TransportError('request failed', cause=exc, operation=operation)

    def _parse_response(self, response: Response, endpoint: Endpoint) -> Any:
        if not response.is_success:
            error = APIError.from_response(response, operation=endpoint.name)
            logger.debug(f'{endpoint.name}: {error!r}')
            raise error
        return decode_response(response, endpoint.response_model, endpoint.name)


class BaseClient(_ClientConfig):
    """Synchronous request infrastructure.

    Args:
        base_url: Base URL for API requests. Default: https://api.zoom.us/v2
        timeout: Request timeout in seconds. Default: 30.0
        headers: Default headers to include in all requests.
        access_token: OAuth access token sent as a bearer token.
        auth: Any httpx auth flow, used instead of ``access_token``.
        http_client: Custom httpx.Client. It stays owned by the caller.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        access_token: str | None = None,
        auth: httpx.Auth | None = None,
        http_client: Client | None = None,
    ) -> None:
        super().__init__(base_url, timeout, headers, access_token, auth)
        self._client = http_client

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: list[tuple[str, str]] | None = None,
        json: Any | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        operation: str | None = None,
    ) -> Response:
        url = f'{self.base_url}{path}'
        kwargs = self._request_kwargs(params, json, headers, timeout)
        logger.debug(f'{operation}: {method} {url}')
        try:
            if self._client:
                response = self._client.request(method, url, **kwargs)
            else:
                with Client() as client:
                    response = client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            raise self._transport_error(e, operation) from e
        logger.debug(f'{operation}: HTTP {response.status_code}')
        return response

    def execute(self, call: EndpointCall) -> Any:
        """Run one endpoint call: validate, shape, dispatch, decode."""
        prepared = call.prepare()
        response = self._request(
            prepared.method,
            prepared.path,
            params=prepared.params,
            json=prepared.json,
            operation=call.operation,
            **call.options,
        )
        return self._parse_response(response, call.endpoint)

    def call(
        self,
        endpoint: Endpoint,
        *path_params: Any,
        query: Any | None = None,
        body: Any | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> Any:
        return self.execute(
            EndpointCall(
                endpoint,
                path_params,
                query=query,
                body=body,
                options={'headers': headers, 'timeout': timeout},
            )
        )


class AsyncBaseClient(_ClientConfig):
    """Asynchronous request infrastructure.

    Cancelling the awaiting task while the request is in flight raises
    :class:`~zoomphone.exceptions.RequestCanceledError`.

    Args:
        base_url: Base URL for API requests. Default: https://api.zoom.us/v2
        timeout: Request timeout in seconds. Default: 30.0
        headers: Default headers to include in all requests.
        access_token: OAuth access token sent as a bearer token.
        auth: Any httpx auth flow, used instead of ``access_token``.
        http_client: Custom httpx.AsyncClient. It stays owned by the caller.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        access_token: str | None = None,
        auth: httpx.Auth | None = None,
        http_client: AsyncClient | None = None,
    ) -> None:
        super().__init__(base_url, timeout, headers, access_token, auth)
        self._client = http_client

    async def _request_async(
        self,
        method: str,
        path: str,
        *,
        params: list[tuple[str, str]] | None = None,
        json: Any | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        operation: str | None = None,
    ) -> Response:
        url = f'{self.base_url}{path}'
        kwargs = self._request_kwargs(params, json, headers, timeout)
        logger.debug(f'{operation}: {method} {url}')
        try:
            if self._client:
                response = await self._client.request(method, url, **kwargs)
            else:
                async with AsyncClient() as client:
                    response = await client.request(method, url, **kwargs)
        except asyncio.CancelledError as e:
            logger.debug(f'{operation}: request canceled')
            raise RequestCanceledError(cause=e, operation=operation) from e
        except httpx.RequestError as e:
            raise self._transport_error(e, operation) from e
        logger.debug(f'{operation}: HTTP {response.status_code}')
        return response

    async def execute(self, call: EndpointCall) -> Any:
        """Run one endpoint call: validate, shape, dispatch, decode."""
        prepared = call.prepare()
        response = await self._request_async(
            prepared.method,
            prepared.path,
            params=prepared.params,
            json=prepared.json,
            operation=call.operation,
            **call.options,
        )
        return self._parse_response(response, call.endpoint)

    def call(
        self,
        endpoint: Endpoint,
        *path_params: Any,
        query: Any | None = None,
        body: Any | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """Return an awaitable running the endpoint call."""
        return self.execute(
            EndpointCall(
                endpoint,
                path_params,
                query=query,
                body=body,
                options={'headers': headers, 'timeout': timeout},
            )
        )
