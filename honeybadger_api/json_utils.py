import json
from typing import Any

from pydantic import BaseModel

JSON_COMPACT_SEPARATORS = (",", ":")


def pydantic_encoder(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True, exclude_none=True)

    raise TypeError(
        f"Object of type '{obj.__class__.__name__}' is not JSON serializable"
    )


def json_dumps(data: Any, *, compact: bool = True) -> str:
    """Serialize a request body to a JSON string with sorted keys.

    Pydantic models, also nested ones inside dicts and lists, are dumped by
    alias and without None fields, so unset optional parameters are not sent.

    Args:
        data: The data to serialize.
        compact: If True, use compact separators (no spaces).

    Returns:
        JSON formatted string.

    Raises:
        TypeError: If data contains a value that cannot be serialized.
        ValueError: If data contains NaN/Infinity or circular references.
    """
    if isinstance(data, BaseModel):
        data = pydantic_encoder(data)
    separators = JSON_COMPACT_SEPARATORS if compact else None
    return json.dumps(
        data,
        separators=separators,
        sort_keys=True,
        default=pydantic_encoder,
        allow_nan=False,
    )
