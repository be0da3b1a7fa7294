"""Request shaping: path templates, query strings and JSON bodies."""

import enum
from collections import defaultdict
from datetime import date, datetime, time
from string import Formatter
from typing import Any, TypeVar, get_args, get_origin
from urllib.parse import parse_qsl, quote

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from zoomphone.exceptions import ValidationError
from zoomphone.models.base import (
    AlwaysSend,
    CommaJoined,
    QueryModel,
    has_marker,
    model_type,
)

__all__ = (
    'build_path',
    'encode_body',
    'encode_query',
    'parse_query',
    'path_param_names',
)

QueryT = TypeVar('QueryT', bound=QueryModel)
QueryPairs = list[tuple[str, str]]

_COLLECTION_ORIGINS = (list, tuple, set, frozenset)


def path_param_names(template: str) -> list[str]:
    """Return the placeholder names of a path template in order of appearance.

    Examples:
        >>> path_param_names('/phone/audios/{audio_id}')
        ['audio_id']
    """
    return [
        name for _, name, _, _ in Formatter().parse(template) if name is not None
    ]


def build_path(template: str, *params: Any) -> str:
    """Substitute positional parameters into a path template.

    Every value is percent-escaped, including ``/``, so a parameter can never
    address a different resource.

    Raises:
        ValueError: If the number of parameters does not match the template.

    Examples:
        >>> build_path('/phone/audios/{audio_id}', 'a/b c')
        '/phone/audios/a%2Fb%20c'
    """
    names = path_param_names(template)
    if len(names) != len(params):
        raise ValueError(
            f"Path '{template}' expects {len(names)} parameter(s), got {len(params)}"
        )
    values = {
        name: quote(_format_value(value), safe='')
        for name, value in zip(names, params)
    }
    return template.format(**values)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, enum.Enum):
        return _format_value(value.value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def _is_zero(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, bytes, *_COLLECTION_ORIGINS)):
        return len(value) == 0
    if isinstance(value, (int, float)) and not isinstance(value, enum.Enum):
        return value == 0
    return False


def _is_collection(annotation: Any) -> bool:
    if get_origin(annotation) in _COLLECTION_ORIGINS:
        return True
    return any(
        get_origin(arg) in _COLLECTION_ORIGINS
        for arg in get_args(annotation)
        if arg is not type(None)
    )


def encode_query(model: QueryModel | None) -> QueryPairs:
    """Encode a query model into ``(key, value)`` pairs.

    - Fields holding a zero value are omitted unless marked ``AlwaysSend``.
    - Nested query models are flattened into the same namespace.
    - Collections repeat their key per item unless marked ``CommaJoined``.

    Examples:
        >>> class Query(QueryModel):
        ...     ids: list[str] | None = None
        >>> encode_query(Query(ids=['a', 'b']))
        [('ids', 'a'), ('ids', 'b')]
    """
    if model is None:
        return []

    pairs: QueryPairs = []
    for name, field in type(model).model_fields.items():
        value = getattr(model, name)
        if isinstance(value, QueryModel):
            pairs.extend(encode_query(value))
            continue
        if value is None:
            continue
        if _is_zero(value) and not has_marker(field, AlwaysSend):
            continue

        key = field.alias or name
        if isinstance(value, _COLLECTION_ORIGINS):
            items = value
            if isinstance(value, (set, frozenset)):
                items = sorted(value, key=_format_value)
            items = [_format_value(item) for item in items]
            if has_marker(field, CommaJoined):
                pairs.append((key, ','.join(items)))
            else:
                pairs.extend((key, item) for item in items)
        else:
            pairs.append((key, _format_value(value)))

    return pairs


def _collect_query_fields(
    model_cls: type[QueryModel], grouped: dict[str, list[str]], consumed: set[str]
) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for name, field in model_cls.model_fields.items():
        nested = model_type(field.annotation, QueryModel)
        if nested is not None:
            nested_data = _collect_query_fields(nested, grouped, consumed)
            if nested_data:
                data[name] = nested_data
            continue

        key = field.alias or name
        if key not in grouped:
            continue
        consumed.add(key)
        values = grouped[key]
        if _is_collection(field.annotation):
            if has_marker(field, CommaJoined):
                values = [item for joined in values for item in joined.split(',') if item]
            data[name] = values
        else:
            data[name] = values[0]
    return data


def parse_query(model_cls: type[QueryT], query: str | QueryPairs) -> QueryT:
    """Parse a query string back into a query model.

    This is the inverse of :func:`encode_query` and uses the same field
    name mapping. Omitted fields take their defaults.

    Raises:
        ValidationError: If a key is unknown or a value does not fit its
            field.
    """
    if isinstance(query, str):
        pairs = parse_qsl(query.lstrip('?'), keep_blank_values=True)
    else:
        pairs = list(query)

    grouped: dict[str, list[str]] = defaultdict(list)
    for key, value in pairs:
        grouped[key].append(value)

    consumed: set[str] = set()
    data = _collect_query_fields(model_cls, grouped, consumed)
    # Unknown keys are passed through so the model rejects them.
    for key in grouped.keys() - consumed:
        data[key] = grouped[key][0]
    try:
        return model_cls.model_validate(data)
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = '.'.join(str(part) for part in error['loc']) or None
        raise ValidationError(
            f'invalid query for {model_cls.__name__}: {error["msg"]}',
            rule='parse_query',
            field=field,
        ) from e


def encode_body(model: BaseModel | None) -> dict[str, Any] | None:
    """Serialize a body model to a JSON-ready dict keyed by external names.

    Unset (None) fields are dropped; other zero values such as ``False``
    are meaningful in bodies and are kept.
    """
    if model is None:
        return None
    return model.model_dump(mode='json', by_alias=True, exclude_none=True)
