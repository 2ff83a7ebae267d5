import dataclasses
import json
from typing import Any
from urllib.parse import quote, urlencode

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ..models.errors import FormEncodingError, JsonEncodingError
from ..models.response import ContentType


def _to_jsonable(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True)
    if dataclasses.is_dataclass(body) and not isinstance(body, type):
        return to_jsonable_python(dataclasses.asdict(body))
    return to_jsonable_python(body)


def encode_json(body: Any) -> bytes:
    """Serialize ``body`` to a JSON document.

    Raises:
        JsonEncodingError: If the value has no JSON representation.
    """
    try:
        return json.dumps(_to_jsonable(body), allow_nan=False).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise JsonEncodingError() from e


def _form_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    # bools and numbers keep their JSON spelling
    return json.dumps(value)


def encode_form(body: Any) -> bytes:
    """Encode ``body`` as ``application/x-www-form-urlencoded``.

    The value goes through JSON first and its top-level fields are read back as
    a flat map of scalars. Nested objects and arrays are rejected rather than
    stringified.

    Raises:
        FormEncodingError: If the value is not a flat JSON object.
    """
    try:
        document = json.loads(encode_json(body))
    except JsonEncodingError as e:
        raise FormEncodingError() from e

    if not isinstance(document, dict):
        raise FormEncodingError()

    pairs = []
    for key, value in document.items():
        if isinstance(value, (dict, list)):
            raise FormEncodingError(
                f"Failed to encode form data: field '{key}' is not a scalar"
            )
        pairs.append((key, _form_value(value)))

    return urlencode(pairs, quote_via=quote).encode("ascii")


def encode_body(body: Any, content_type: ContentType) -> bytes:
    if content_type is ContentType.JSON:
        return encode_json(body)
    return encode_form(body)
