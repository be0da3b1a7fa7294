"""Endpoint declarations and per-invocation calls."""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from zoomphone.core.shaping import (
    QueryPairs,
    build_path,
    encode_body,
    encode_query,
    path_param_names,
)
from zoomphone.core.validation import NotBlank, ValidationRule, validate
from zoomphone.exceptions import ValidationError
from zoomphone.models.base import QueryModel

__all__ = ('METHODS', 'Endpoint', 'EndpointCall', 'PreparedRequest')

METHODS = frozenset({'GET', 'POST', 'PUT', 'PATCH', 'DELETE'})


@dataclass(frozen=True)
class Endpoint:
    """A remote operation: verb, path template, rules and output type.

    Args:
        name: Operation name used in logs and error messages.
        method: HTTP verb.
        path: Path template with named placeholders, filled positionally.
        response_model: Type the response body decodes into, or None when
            the endpoint returns no body.
        rules: Preconditions checked before dispatch. Every path parameter
            additionally gets a :class:`NotBlank` rule.
    """

    name: str
    method: str
    path: str
    response_model: Any = None
    rules: tuple[ValidationRule, ...] = ()

    def __post_init__(self) -> None:
        if self.method not in METHODS:
            raise ValueError(f"Unsupported HTTP method '{self.method}' for {self.name}")

    @property
    def path_params(self) -> list[str]:
        return path_param_names(self.path)

    @property
    def all_rules(self) -> tuple[ValidationRule, ...]:
        return tuple(NotBlank(name) for name in self.path_params) + self.rules


@dataclass(frozen=True)
class PreparedRequest:
    method: str
    path: str
    params: QueryPairs
    json: dict[str, Any] | None


@dataclass
class EndpointCall:
    """One invocation of an endpoint."""

    endpoint: Endpoint
    path_params: tuple[Any, ...] = ()
    query: QueryModel | None = None
    body: BaseModel | None = None
    options: dict[str, Any] = field(default_factory=dict)

    @property
    def operation(self) -> str:
        return self.endpoint.name

    def prepare(self) -> PreparedRequest:
        """Validate the call and shape it into a wire request.

        Raises:
            ValidationError: If a rule fails or the path parameters do not
                fit the template. Nothing has been sent at this point.
        """
        names = self.endpoint.path_params
        if len(names) != len(self.path_params):
            raise ValidationError(
                f'expected {len(names)} path parameter(s), got {len(self.path_params)}',
                rule='PathParams',
                operation=self.operation,
            )

        validate(
            self.endpoint.all_rules,
            dict(zip(names, self.path_params)),
            self.query,
            self.body,
            operation=self.operation,
        )

        return PreparedRequest(
            method=self.endpoint.method,
            path=build_path(self.endpoint.path, *self.path_params),
            params=encode_query(self.query),
            json=encode_body(self.body),
        )
