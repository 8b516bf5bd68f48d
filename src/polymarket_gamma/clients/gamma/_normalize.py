r"""Normalise fields the Gamma API serialises as JSON-encoded strings.

Some market fields come back as strings such as ``"[\"Yes\",\"No\"]"``
instead of native arrays, under either their snake_case or camelCase
name depending on the endpoint.  ``parse_json_fields`` walks a decoded
response and parses those fields in place of the strings.
"""

import json
from typing import Any, cast

JSON_STRING_FIELDS: frozenset[str] = frozenset(
    {
        "outcomes",
        "outcome_prices",
        "outcomePrices",
        "clob_token_ids",
        "clobTokenIds",
        "uma_resolution_statuses",
        "umaResolutionStatuses",
    }
)


def parse_json_fields(data: Any) -> Any:
    """Return a copy of ``data`` with JSON-string fields parsed.

    Only keys listed in ``JSON_STRING_FIELDS`` whose value is a string
    starting with ``[`` are touched.  A string that fails to parse is
    kept as is, so the function never raises and running it twice
    gives the same result as running it once.

    Args:
        data: Any value decoded from a JSON response.

    Returns:
        A value of the same shape with the target fields converted.

    """
    if isinstance(data, list):
        return [parse_json_fields(item) for item in cast("list[Any]", data)]
    if not isinstance(data, dict):
        return data

    parsed: dict[str, Any] = {}
    for key, value in cast("dict[str, Any]", data).items():
        if key in JSON_STRING_FIELDS and isinstance(value, str) and value.startswith("["):
            parsed[key] = _loads_or_keep(value)
        elif isinstance(value, (dict, list)):
            parsed[key] = parse_json_fields(value)
        else:
            parsed[key] = value
    return parsed


def _loads_or_keep(value: str) -> Any:
    """Parse ``value`` as JSON, returning the original string on failure."""
    try:
        return json.loads(value)
    except ValueError:
        return value
