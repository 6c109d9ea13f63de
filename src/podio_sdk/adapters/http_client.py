"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y autenticación para todo el SDK.
- Implementa el `Transport` del Core: el dispatcher nunca ve httpx.
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con `MockTransport`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from podio_sdk.core.config import AppSettings
from podio_sdk.core.domain.models import TransportResponse
from podio_sdk.core.errors import TransportError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` apuntando a la API con defaults seguros.

    Por qué un builder:
    - Centraliza base URL/timeouts/headers para que todas las llamadas se
      comporten igual.
    - `transport` permite enchufar `httpx.MockTransport` en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if settings.access_token:
        headers["Authorization"] = f"OAuth2 {settings.access_token}"
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.api_base_url.rstrip("/"),
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def _to_transport_response(response: httpx.Response) -> TransportResponse:
    return TransportResponse(
        status_code=response.status_code,
        body=response.text,
        headers={k.lower(): v for k, v in response.headers.items()},
    )


class HttpxTransport:
    """Implementación de `core.interfaces.transport.Transport` sobre httpx.

    No reintenta ni refresca tokens: cada verbo es un único intento.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client or build_async_client(self._settings)

    async def _send(
        self,
        method: str,
        path: str,
        query: Mapping[str, str],
        body: Any = None,
    ) -> TransportResponse:
        kwargs: dict[str, Any] = {"params": dict(query)}
        if body is not None:
            kwargs["json"] = body
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s transport failure: %s", method, path, exc)
            raise TransportError(f"{method} {path} failed: {exc}") from exc
        logger.debug("%s %s -> HTTP %s", method, path, response.status_code)
        return _to_transport_response(response)

    async def get(self, path: str, query: Mapping[str, str]) -> TransportResponse:
        return await self._send("GET", path, query)

    async def post(self, path: str, query: Mapping[str, str], body: Any) -> TransportResponse:
        return await self._send("POST", path, query, body)

    async def put(self, path: str, query: Mapping[str, str], body: Any) -> TransportResponse:
        return await self._send("PUT", path, query, body)

    async def delete(self, path: str, query: Mapping[str, str]) -> TransportResponse:
        return await self._send("DELETE", path, query)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
