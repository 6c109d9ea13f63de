"""Codec de parámetros (query string / form).

Centraliza la conversión valor opcional -> string de wire que antes se
repetía en cada endpoint.

Reglas:
- `None` significa "no enviar": nunca se serializa como "" ni "null".
- Booleanos en minúscula (`true`/`false`), convención de la API.
- En una colisión de claves gana el valor del caller sobre el default.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Mapping

from podio_sdk.core.errors import InvalidArgumentError


def encode(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, Enum):
        return encode(value.value)
    # bool antes que int: bool es subclase de int.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    raise InvalidArgumentError(
        f"Cannot encode parameter value of type {type(value).__name__}: {value!r}"
    )


def join_identifiers(ids: Iterable[int]) -> str:
    """Une ids con `,` preservando el orden: `[3, 17, 9] -> "3,17,9"`."""

    items = list(ids)
    if not items:
        raise InvalidArgumentError("At least one identifier is required.")
    for item in items:
        if isinstance(item, bool) or not isinstance(item, int):
            raise InvalidArgumentError(f"Identifiers must be integers; got {item!r}.")
    return ",".join(str(item) for item in items)


def build_parameters(
    defaults: Mapping[str, Any],
    filters: Mapping[str, Any] | None = None,
) -> dict[str, str]:
    """Construye el ParameterMap de un endpoint.

    Orden resultante:
    - claves de `defaults` en su orden (las pisadas por el caller conservan
      su posición),
    - después las claves nuevas de `filters` en el orden del caller.

    Un filtro con valor `None` cuenta como no informado: ni escribe ni borra.
    """

    params: dict[str, str] = {}
    for key, value in defaults.items():
        encoded = encode(value)
        if encoded is not None:
            params[key] = encoded

    if filters:
        for key, value in filters.items():
            encoded = encode(value)
            if encoded is not None:
                params[key] = encoded

    return params
