"""Request preconditions checked before any network call.

Rules are immutable values attached to an :class:`~zoomphone.core.endpoint.Endpoint`
at import time. :func:`validate` evaluates them in order and raises on the
first violation.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from zoomphone.exceptions import ValidationError

__all__ = (
    'AllowedValues',
    'MaxItems',
    'NotBlank',
    'ValidationRule',
    'validate',
)


@dataclass(frozen=True)
class ValidationRule(ABC):
    """A named constraint on a single request field or path parameter."""

    field: str

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def check(self, value: Any) -> str | None:
        """Return a violation message, or None when ``value`` passes."""


@dataclass(frozen=True)
class MaxItems(ValidationRule):
    """Collection must not hold more than ``limit`` items.

    Empty and missing collections pass.
    """

    limit: int = 30

    def check(self, value: Any) -> str | None:
        if value is None:
            return None
        if len(value) > self.limit:
            return (
                f'cannot send more than {self.limit} {self.field} at once '
                f'(got {len(value)})'
            )
        return None


@dataclass(frozen=True)
class AllowedValues(ValidationRule):
    """Every entry must belong to ``allowed`` (case-sensitive).

    String values are split on ``separator`` and each entry is
    whitespace-trimmed before the membership check. A missing value passes.
    """

    allowed: frozenset[str]
    separator: str | None = ','

    def check(self, value: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, str):
            entries = value.split(self.separator) if self.separator else [value]
        else:
            entries = list(value)
        for entry in entries:
            entry = getattr(entry, 'value', entry)
            if isinstance(entry, str):
                entry = entry.strip()
            if entry not in self.allowed:
                return f"invalid {self.field} '{entry}'"
        return None


@dataclass(frozen=True)
class NotBlank(ValidationRule):
    """Value must be present and not whitespace only."""

    def check(self, value: Any) -> str | None:
        if value is None or not str(value).strip():
            return f'{self.field} must not be empty'
        return None


def _resolve(field: str, sources: Iterable[Mapping[str, Any] | BaseModel | None]) -> Any:
    for source in sources:
        if source is None:
            continue
        if isinstance(source, Mapping):
            if field in source:
                return source[field]
        elif hasattr(source, field):
            return getattr(source, field)
    return None


def validate(
    rules: Iterable[ValidationRule],
    *sources: Mapping[str, Any] | BaseModel | None,
    operation: str | None = None,
) -> None:
    """Check ``rules`` against the given sources.

    Each rule's field is looked up in the sources in order (path parameter
    mappings first, then query and body models); the first source that
    holds the field wins.

    Raises:
        ValidationError: Describing the first violated rule.
    """
    for rule in rules:
        message = rule.check(_resolve(rule.field, sources))
        if message:
            raise ValidationError(
                message, rule=rule.name, field=rule.field, operation=operation
            )
