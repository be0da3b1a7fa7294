"""Response decoding into typed output values."""

from functools import lru_cache
from typing import Any

import pydantic
from httpx import Response
from pydantic import RootModel, TypeAdapter

from zoomphone.exceptions import DecodeError

__all__ = ('decode_response',)


@lru_cache(maxsize=256)
def _adapter(response_model: Any) -> TypeAdapter:
    return TypeAdapter(response_model)


def _type_name(response_model: Any) -> str:
    return getattr(response_model, '__name__', repr(response_model))


def decode_response(
    response: Response, response_model: Any, operation: str | None = None
) -> Any:
    """Decode a successful response into ``response_model``.

    When ``response_model`` is None decoding is skipped and the raw response
    is returned, whatever its body.

    Raises:
        DecodeError: If the body is empty, is not JSON, or does not match the
            expected shape.
    """
    if response_model is None:
        return response

    content = response.content
    if not content.strip():
        raise DecodeError(
            f'empty response body, expected {_type_name(response_model)}',
            operation=operation,
        )

    try:
        validated = _adapter(response_model).validate_json(content)
    except pydantic.ValidationError as e:
        raise DecodeError(
            f'response does not match {_type_name(response_model)}',
            body=response.text,
            cause=e,
            operation=operation,
        ) from e

    if isinstance(validated, RootModel):
        return validated.root
    return validated
