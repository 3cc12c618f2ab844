"""Response shape validation.

WHY: Decoded JSON is only useful if it has the fields a model expects.
Checking the shape up front turns a KeyError deep in a caller into a
DecodeError naming the offending response.

HOW: Each model declares a JSON schema. ``validate_shape`` runs
jsonschema against the decoded value and re-raises failures as DecodeError.
"""

from __future__ import annotations

from typing import Any, Dict

import jsonschema

from dolbyio_rest_apis.errors import DecodeError


def validate_shape(data: Any, schema: Dict[str, Any], name: str) -> None:
    """Raise DecodeError if ``data`` does not match ``schema``."""
    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise DecodeError(f"Unexpected {name} shape at {location}: {e.message}") from e
