"""Custom exceptions for zoomphone.

Every failed endpoint call raises exactly one of four error kinds, all of
which inherit from :class:`ZoomPhoneError`:

- :class:`ValidationError`: a precondition failed locally, nothing was sent.
- :class:`TransportError`: the request could not be completed (connection
  failure, timeout or cancellation).
- :class:`APIError`: the service answered with a non-success status.
- :class:`DecodeError`: the service answered successfully but the body does
  not match the expected shape.
"""

import asyncio
from typing import Any

from httpx import Response


class ZoomPhoneError(Exception):
    """Base exception for all zoomphone errors.

    Example:
        try:
            client.phone.blocked_list.get_blocked_list('abc')
        except ZoomPhoneError as e:
            print(f'Zoom Phone error in {e.operation}: {e}')
    """

    def __init__(self, message: str, *, operation: str | None = None):
        self.message = message
        self.operation = operation
        super().__init__(message)


class ValidationError(ZoomPhoneError):
    """A request failed a local precondition and was never dispatched.

    Attributes:
        rule: Name of the violated validation rule.
        field: The request field the rule was checking.
    """

    def __init__(
        self,
        message: str,
        *,
        rule: str | None = None,
        field: str | None = None,
        operation: str | None = None,
    ):
        self.rule = rule
        self.field = field
        full_message = message
        if operation:
            full_message = f'{operation}: {message}'
        super().__init__(full_message, operation=operation)


class TransportError(ZoomPhoneError):
    """The HTTP call failed before a response was received.

    Attributes:
        cause: The underlying transport exception.
        canceled: True when the caller canceled the call.
        timed_out: True when the call exceeded its timeout.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        canceled: bool = False,
        timed_out: bool = False,
        operation: str | None = None,
    ):
        self.cause = cause
        self.canceled = canceled
        self.timed_out = timed_out
        full_message = message
        if operation:
            full_message = f'{operation}: {message}'
        if cause is not None and str(cause):
            full_message += f': {cause}'
        super().__init__(full_message, operation=operation)


class RequestCanceledError(TransportError, asyncio.CancelledError):
    """The caller canceled an in-flight async call.

    Also a :class:`asyncio.CancelledError`, so task cancellation and
    ``asyncio.timeout`` keep working for callers awaiting the call.
    """

    def __init__(
        self,
        message: str = 'request canceled',
        *,
        cause: BaseException | None = None,
        operation: str | None = None,
    ):
        super().__init__(message, cause=cause, canceled=True, operation=operation)


class APIError(ZoomPhoneError):
    """The service responded with a non-success status.

    Attributes:
        status_code: HTTP status code of the response.
        code: Zoom error code from the response body, if any.
        detail: Parsed error detail (message, errors list or raw text).
        body: Raw response text.
        response: The httpx response.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        response: Response | None = None,
        code: int | None = None,
        detail: Any | None = None,
        body: str = '',
        operation: str | None = None,
    ):
        self.status_code = status_code
        self.response = response
        self.code = code
        self.detail = detail
        self.body = body
        super().__init__(message, operation=operation)

    @classmethod
    def from_response(
        cls, response: Response, operation: str | None = None
    ) -> 'APIError':
        """Build an APIError from a failed response.

        Zoom error bodies look like ``{"code": 300, "message": "..."}`` and
        may carry an ``errors`` list with per-field messages.
        """
        status_code = response.status_code
        body = response.text
        code = None
        detail = None
        try:
            json_body = response.json()
            if isinstance(json_body, dict):
                code = json_body.get('code')
                detail = json_body.get('message', json_body)
                errors = json_body.get('errors')
                if isinstance(errors, list) and errors:
                    error_msgs = []
                    for err in errors:
                        if isinstance(err, dict):
                            field = err.get('field', 'unknown')
                            msg = err.get('message', str(err))
                            error_msgs.append(f'  - {field}: {msg}')
                        else:
                            error_msgs.append(f'  - {err}')
                    detail = f'{detail}\n' + '\n'.join(error_msgs)
            else:
                detail = json_body
        except ValueError:
            detail = body if body else None

        message = f'HTTP {status_code} Error'
        if code is not None:
            message += f' (code {code})'
        if detail:
            message += f': {detail}'
        if operation:
            message = f'{operation}: {message}'

        return cls(
            message,
            status_code=status_code,
            response=response,
            code=code,
            detail=detail,
            body=body,
            operation=operation,
        )

    def __repr__(self) -> str:
        return f'APIError(status_code={self.status_code}, code={self.code}, detail={self.detail!r})'


class DecodeError(ZoomPhoneError):
    """A successful response body did not match the expected output type.

    Attributes:
        body: Raw response text.
        cause: The underlying parsing or validation exception.
    """

    def __init__(
        self,
        message: str,
        *,
        body: str = '',
        cause: Exception | None = None,
        operation: str | None = None,
    ):
        self.body = body
        self.cause = cause
        full_message = message
        if operation:
            full_message = f'{operation}: {message}'
        if cause:
            full_message += f': {cause}'
        super().__init__(full_message, operation=operation)


class ConfigurationError(ZoomPhoneError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)
