"""Component names derived from operation context."""

from __future__ import annotations

VERB_PREFIXES = (
    "get_",
    "post_",
    "put_",
    "delete_",
    "patch_",
    "options_",
    "head_",
    "list_",
    "create_",
    "update_",
    "remove_",
)

_FALLBACK_BASE = "Response"
_DEFAULT_STATUS = "Default"
_RESPONSE_SUFFIX = "Response"


def to_pascal_case(text: str) -> str:
    """Join `_`/`-` separated segments, uppercasing only the first character of each.

    The rest of every segment is kept as written, so `airport_ID-list`
    becomes `AirportIDList`. A first character whose upper case is more than
    one character (`ß`) is kept as it is.
    """
    segments = text.replace("-", "_").split("_")
    return "".join(_upper_first(segment) for segment in segments if segment)


def _upper_first(segment: str) -> str:
    upper = segment[0].upper()
    if len(upper) != 1:
        upper = segment[0]
    return upper + segment[1:]


def derive_schema_name(operation_id: str) -> str:
    """Derive a component name from an operationId.

    Examples:
      get_airport      -> Airport
      get_airport_info -> AirportInfo
      post_user_data   -> UserData
      getAirport       -> GetAirport (only snake_case prefixes are stripped)
    """
    if not operation_id:
        return ""
    for prefix in VERB_PREFIXES:
        if operation_id[: len(prefix)].lower() == prefix:
            operation_id = operation_id[len(prefix) :]
            break
    if not operation_id:
        return ""
    return to_pascal_case(operation_id)


def derive_name_from_path_and_method(path: str, method: str) -> str:
    segments = []
    for segment in path.split("/"):
        if not segment:
            continue
        if segment.startswith("{") and segment.endswith("}"):
            segment = segment[1:-1]
        segments.append(to_pascal_case(segment))
    segments.append(to_pascal_case(method.lower()))
    return "".join(segments)


def derive_response_name(path: str, method: str, operation_id: str, status: str) -> str:
    """Return the name hint for an inline response schema.

    The operationId wins when it yields a name; otherwise the path and method
    are used. The status code and a `Response` suffix are always appended.
    """
    base = (
        derive_schema_name(operation_id)
        or derive_name_from_path_and_method(path, method)
        or _FALLBACK_BASE
    )
    return base + to_pascal_case(status or _DEFAULT_STATUS) + _RESPONSE_SUFFIX
