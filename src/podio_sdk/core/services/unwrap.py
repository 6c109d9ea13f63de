"""Extracción de campos de un sobre de respuesta.

Uso típico: endpoints cuyo resultado útil es un escalar dentro de un objeto
mayor (`{"profile_id": 42}`, `{"total": 7}`). Transformación pura, sin I/O.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from podio_sdk.core.domain.dynamic import DynamicStructure
from podio_sdk.core.errors import DeserializationError, MissingFieldError


def extract_field(
    raw: DynamicStructure | Mapping[str, Any],
    field_name: str,
    expected_type: Any = None,
) -> Any:
    """Devuelve `raw[field_name]`, validado contra `expected_type` si se indica.

    - Clave ausente (o `raw` no es un objeto) -> `MissingFieldError`.
    - Clave presente con valor `null` -> `None` (sin validar).
    """

    value_tree = raw.value if isinstance(raw, DynamicStructure) else raw
    if not isinstance(value_tree, Mapping) or field_name not in value_tree:
        raise MissingFieldError(field_name)

    value = value_tree[field_name]
    if expected_type is None or value is None:
        return value

    try:
        return TypeAdapter(expected_type).validate_python(value)
    except ValidationError as exc:
        raise DeserializationError(
            f"Field '{field_name}' does not match {expected_type!r}: {exc}",
            expected_shape=repr(expected_type),
        ) from exc
