"""Pytest fixtures: transporte en memoria para el dispatcher y los façades."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import pytest

from podio_sdk.core.domain.models import TransportResponse
from podio_sdk.core.services.dispatcher import Dispatcher


@dataclass
class RecordedCall:
    method: str
    path: str
    query: dict[str, str]
    body: Any = None


@dataclass
class FakeTransport:
    """Devuelve respuestas encoladas y registra cada llamada."""

    responses: list[TransportResponse] = field(default_factory=list)
    calls: list[RecordedCall] = field(default_factory=list)

    def queue(self, status_code: int = 200, body: Any = None, *, text: str | None = None, headers=None) -> None:
        if text is None:
            text = "" if body is None else json.dumps(body)
        self.responses.append(
            TransportResponse(status_code=status_code, body=text, headers=headers or {})
        )

    def _next(self, method: str, path: str, query, body=None) -> TransportResponse:
        self.calls.append(RecordedCall(method, path, dict(query), body))
        return self.responses.pop(0)

    async def get(self, path, query):
        return self._next("GET", path, query)

    async def post(self, path, query, body):
        return self._next("POST", path, query, body)

    async def put(self, path, query, body):
        return self._next("PUT", path, query, body)

    async def delete(self, path, query):
        return self._next("DELETE", path, query)

    @property
    def last(self) -> RecordedCall:
        return self.calls[-1]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def dispatcher(transport: FakeTransport) -> Dispatcher:
    return Dispatcher(transport)
