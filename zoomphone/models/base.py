"""Base models shared by every Zoom Phone payload.

Two families of models exist:

- :class:`PhoneModel` for JSON request bodies and response payloads.
- :class:`QueryModel` for query-string options.

Field-level behaviour is controlled with ``Annotated`` markers:

- :class:`Flatten` on a :class:`PhoneModel` field stores a nested model whose
  keys live in the parent's JSON namespace (e.g. the ``enable``/``locked``
  state shared by every account setting).
- :class:`AlwaysSend` on a :class:`QueryModel` field keeps it in the query
  string even when it holds a zero value.
- :class:`CommaJoined` on a collection :class:`QueryModel` field joins its
  items with commas instead of repeating the key.

All-optional response payloads derive from :class:`ResponseEnvelope`, which
rejects a body that carries none of their fields.
"""

import types
from functools import lru_cache
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)
from pydantic.fields import FieldInfo

__all__ = (
    'AlwaysSend',
    'CommaJoined',
    'Flatten',
    'IdName',
    'PaginationOptions',
    'PaginationResponse',
    'Paging',
    'PhoneModel',
    'QueryModel',
    'ResponseEnvelope',
    'SettingState',
    'has_marker',
    'model_type',
)


class Flatten:
    """Marks a nested model field serialized into the parent's namespace."""

    def __repr__(self) -> str:
        return 'Flatten()'


class AlwaysSend:
    """Marks a query field that is sent even when it holds a zero value."""

    def __repr__(self) -> str:
        return 'AlwaysSend()'


class CommaJoined:
    """Marks a collection query field encoded as a single comma-joined value."""

    def __repr__(self) -> str:
        return 'CommaJoined()'


def has_marker(field: FieldInfo, marker: type) -> bool:
    return any(isinstance(item, marker) for item in field.metadata)


def model_type(annotation: Any, base: type[BaseModel] = BaseModel) -> type | None:
    """Return the model class held by ``annotation``, unwrapping ``X | None``.

    Returns:
        The ``base`` subclass, or None when the annotation is not a model.
    """
    if isinstance(annotation, type) and issubclass(annotation, base):
        return annotation
    if get_origin(annotation) in (Union, types.UnionType):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return model_type(members[0], base)
    return None


@lru_cache(maxsize=None)
def _flattened_fields(cls: type[BaseModel]) -> tuple[tuple[str, str, type], ...]:
    flattened = []
    for name, field in cls.model_fields.items():
        if not has_marker(field, Flatten):
            continue
        nested = model_type(field.annotation)
        if nested is None:
            raise TypeError(f'{cls.__name__}.{name} is marked Flatten() but is not a model')
        flattened.append((name, field.alias or name, nested))
    return tuple(flattened)


def _external_keys(cls: type[BaseModel]) -> set[str]:
    keys = set()
    for name, field in cls.model_fields.items():
        keys.add(field.alias or name)
        keys.add(name)
    return keys


class PhoneModel(BaseModel):
    """Base class for JSON payloads.

    Fields marked with :class:`Flatten` are collected from the parent's keys
    when validating and spread back into the parent when dumping.
    """

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    @model_validator(mode='before')
    @classmethod
    def _collect_flattened(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        flattened = _flattened_fields(cls)
        if not flattened:
            return data
        data = dict(data)
        for name, alias, nested in flattened:
            if alias in data or name in data:
                continue
            picked = {key: data[key] for key in _external_keys(nested) if key in data}
            if picked:
                data[alias] = picked
        return data

    @model_serializer(mode='wrap')
    def _spread_flattened(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Any:
        data = handler(self)
        if not isinstance(data, dict):
            return data
        for name, alias, _ in _flattened_fields(type(self)):
            key = alias if info.by_alias else name
            nested = data.pop(key, None)
            if isinstance(nested, dict):
                for nested_key, value in nested.items():
                    data.setdefault(nested_key, value)
        return data


class ResponseEnvelope(PhoneModel):
    """Response payload whose fields are all optional.

    A body carrying none of the declared fields is rejected instead of
    decoding into an empty default object.
    """

    @model_validator(mode='after')
    def _require_known_field(self) -> 'ResponseEnvelope':
        if not self.model_fields_set:
            raise ValueError(
                f'{type(self).__name__} body has none of the expected fields'
            )
        return self


class QueryModel(BaseModel):
    """Base class for query-string options.

    Nested :class:`QueryModel` fields are flattened into the same query
    string as their parent.
    """

    model_config = ConfigDict(populate_by_name=True, extra='forbid')


class IdName(PhoneModel):
    id: str | None = None
    name: str | None = None


class SettingState(PhoneModel):
    """Enable/lock state shared by every account-level setting."""

    enable: bool | None = None
    locked: bool | None = None
    locked_by: str | None = Field(
        default=None, description='Either "invalid" or "account".'
    )


class PaginationOptions(QueryModel):
    """Outbound page request. Unset fields mean "server default"."""

    page_size: int | None = Field(default=None, ge=1, le=300)
    next_page_token: str | None = None
    page_number: int | None = Field(default=None, ge=1)


class PaginationResponse(PhoneModel):
    """Inbound page metadata embedded in every list response."""

    next_page_token: str | None = None
    page_size: int | None = None
    page_number: int | None = None
    page_count: int | None = None
    total_records: int | None = None


Paging = Annotated[PaginationResponse, Flatten()]
