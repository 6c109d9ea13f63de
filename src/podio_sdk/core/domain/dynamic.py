"""Estructura dinámica (árbol JSON parseado).

Por qué no un `dict` a secas:
- Algunas respuestas se consumen sin modelo (p.ej. `{"profile_id": 42}`), y
  indexarlas con `response["profile_id"]` lanza `KeyError`/`TypeError` según
  la forma real del cuerpo.
- `DynamicStructure` ofrece lookups seguros que devuelven `None` en vez de
  explotar; la extracción estricta vive en `core.services.unwrap`.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from podio_sdk.core.errors import DeserializationError


@dataclass(frozen=True)
class DynamicStructure:
    """Envoltorio inmutable sobre un valor JSON (dict, list, escalar o None)."""

    value: Any = None

    @classmethod
    def from_json(cls, text: str) -> "DynamicStructure":
        """Parsea `text`; un cuerpo vacío equivale a `null`."""

        if not text or not text.strip():
            return cls(None)
        try:
            return cls(json.loads(text))
        except json.JSONDecodeError as exc:
            raise DeserializationError(
                f"Response body is not valid JSON: {exc}",
                expected_shape="DynamicStructure",
                raw_body=text,
            ) from exc

    @property
    def is_mapping(self) -> bool:
        return isinstance(self.value, Mapping)

    @property
    def is_list(self) -> bool:
        return isinstance(self.value, list)

    def get(self, name: str, default: Any = None) -> Any:
        if not isinstance(self.value, Mapping):
            return default
        return self.value.get(name, default)

    def child(self, name: str) -> "DynamicStructure | None":
        """Sub-árbol en `name`, o `None` si la clave no existe."""

        if name not in self:
            return None
        return DynamicStructure(self.value[name])

    def items(self) -> Iterator["DynamicStructure"]:
        """Itera los elementos cuando el valor es una lista."""

        if not isinstance(self.value, list):
            return iter(())
        return (DynamicStructure(item) for item in self.value)

    def __contains__(self, name: object) -> bool:
        return isinstance(self.value, Mapping) and name in self.value
