"""Contrato del transporte HTTP.

Por qué Protocol:
- El dispatcher solo necesita cuatro verbos; autenticación, pool de
  conexiones y base URL son responsabilidad del adaptador concreto.
- Permite sustituir el transporte por un fake en tests sin herencia.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from podio_sdk.core.domain.models import TransportResponse


@runtime_checkable
class Transport(Protocol):
    """Transporte asíncrono.

    Reglas:
    - Devuelve la respuesta para cualquier status (también 4xx/5xx).
    - Fallos de red/timeouts se elevan como `TransportError` sin status.
    - No reintenta.
    """

    async def get(self, path: str, query: Mapping[str, str]) -> TransportResponse:
        ...

    async def post(self, path: str, query: Mapping[str, str], body: Any) -> TransportResponse:
        ...

    async def put(self, path: str, query: Mapping[str, str], body: Any) -> TransportResponse:
        ...

    async def delete(self, path: str, query: Mapping[str, str]) -> TransportResponse:
        ...
