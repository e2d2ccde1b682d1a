"""Response decoding and request body encoding.

Raw JSON bodies are parsed with ``json`` and projected into pydantic models.
Unknown fields are ignored, so the server can add fields without breaking
the client. Missing required fields, invalid JSON and structural mismatches
raise MAPPING_FAILED carrying the raw body verbatim.
"""

import json
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from tmdbapi.core.errors import MovieDbException, MovieDbExceptionType
from tmdbapi.core.results import ResultsEnvelope, ResultsList, ResultsMap

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_JSON_SCALARS = (str, int, float, bool, type(None))


def _mapping_failed(raw_body: str, message: str, error: Exception) -> MovieDbException:
    logger.warning("tmdb_mapping_failed", reason=message, error=str(error))
    return MovieDbException(MovieDbExceptionType.MAPPING_FAILED, message, response=raw_body)


def parse_json(raw_body: str) -> Any:
    """Parse a raw body into a JSON tree.

    Raises:
        MovieDbException: MAPPING_FAILED on invalid JSON
    """
    try:
        return json.loads(raw_body)
    except (json.JSONDecodeError, TypeError) as e:
        raise _mapping_failed(raw_body, "Response is not valid JSON", e) from e


def _parse_object(raw_body: str) -> dict[str, Any]:
    tree = parse_json(raw_body)
    if not isinstance(tree, dict):
        error = TypeError(f"expected JSON object, got {type(tree).__name__}")
        raise _mapping_failed(raw_body, "Response is not a JSON object", error) from error
    return tree


def decode(raw_body: str, model: type[ModelT]) -> ModelT:
    """Decode a raw body into a typed model.

    Args:
        raw_body: Raw JSON response
        model: Target pydantic model

    Returns:
        Validated model instance

    Raises:
        MovieDbException: MAPPING_FAILED
    """
    tree = _parse_object(raw_body)
    try:
        return model.model_validate(tree)
    except ValidationError as e:
        raise _mapping_failed(raw_body, f"Failed to map response to {model.__name__}", e) from e


def decode_list(
    raw_body: str,
    item_model: type[ModelT],
    keys: Sequence[str] = ("results",),
    source_field: str | None = None,
) -> ResultsList[ModelT]:
    """Decode a list-shaped response into a ResultsList.

    Items found under each of ``keys`` are concatenated in order. When
    ``source_field`` is set, each item records the key it came from in that
    field (e.g. "cast"/"crew"). Pagination metadata is copied verbatim from
    the envelope. Any invalid item fails the whole call; no partial page is
    returned.

    Raises:
        MovieDbException: MAPPING_FAILED
    """
    tree = _parse_object(raw_body)
    adapter = TypeAdapter(list[item_model])  # type: ignore[valid-type]

    try:
        envelope = ResultsEnvelope.model_validate(tree)
        items: list[ModelT] = []
        for key in keys:
            raw_items = tree.get(key) or []
            if source_field and isinstance(raw_items, list):
                raw_items = [
                    {**item, source_field: key} if isinstance(item, dict) else item
                    for item in raw_items
                ]
            items.extend(adapter.validate_python(raw_items))
    except ValidationError as e:
        raise _mapping_failed(
            raw_body, f"Failed to map response to list of {item_model.__name__}", e
        ) from e

    return ResultsList[item_model].from_envelope(items, envelope)  # type: ignore[valid-type]


def decode_map(
    raw_body: str,
    item_model: type[ModelT],
    container_key: str = "changes",
    group_key: str = "key",
    items_key: str = "items",
) -> ResultsMap[str, list[ModelT]]:
    """Decode a grouped response into a ResultsMap.

    Expects ``{container_key: [{group_key: ..., items_key: [...]}, ...]}``.

    Raises:
        MovieDbException: MAPPING_FAILED
    """
    tree = _parse_object(raw_body)
    adapter = TypeAdapter(list[item_model])  # type: ignore[valid-type]
    groups = tree.get(container_key) or []

    results: dict[str, list[ModelT]] = {}
    try:
        if not isinstance(groups, list):
            raise TypeError(f"'{container_key}' is not a list")
        for group in groups:
            if not isinstance(group, dict) or not isinstance(group.get(items_key, []), list):
                raise TypeError(f"malformed '{container_key}' entry")
            name = str(group.get(group_key, ""))
            results.setdefault(name, []).extend(
                adapter.validate_python(group.get(items_key) or [])
            )
    except (TypeError, ValidationError) as e:
        raise _mapping_failed(
            raw_body, f"Failed to map response to map of {item_model.__name__}", e
        ) from e

    return ResultsMap[str, list[item_model]](results=results)  # type: ignore[valid-type]


def _is_json_value(value: Any) -> bool:
    if isinstance(value, _JSON_SCALARS):
        return True
    if isinstance(value, (list, tuple)):
        return all(_is_json_value(item) for item in value)
    if isinstance(value, dict):
        return all(isinstance(k, str) and _is_json_value(v) for k, v in value.items())
    return False


def convert_to_json(body: Mapping[str, Any]) -> str:
    """Encode a simple key/value mapping as a JSON request body.

    Nested objects must be plain dicts. NaN and infinite floats are rejected.

    Raises:
        MovieDbException: MAPPING_FAILED for unsupported value types
    """
    for key, value in body.items():
        if not isinstance(key, str) or not _is_json_value(value):
            error = TypeError(f"unsupported value for '{key}': {type(value).__name__}")
            logger.warning("tmdb_json_conversion_failed", key=str(key))
            raise MovieDbException(
                MovieDbExceptionType.MAPPING_FAILED, "JSON conversion failed"
            ) from error
    try:
        return json.dumps(dict(body), allow_nan=False)
    except (TypeError, ValueError) as e:
        logger.warning("tmdb_json_conversion_failed", error=str(e))
        raise MovieDbException(MovieDbExceptionType.MAPPING_FAILED, "JSON conversion failed") from e
