"""Dispatcher genérico de peticiones.

Responsabilidad:
- Enviar GET/POST/PUT/DELETE a un path ya sustituido, con su ParameterMap y
  un body opcional, a través del `Transport` compartido.
- Convertir respuestas no-2xx en `TransportError`.
- Devolver el cuerpo verbatim (modo raw) o validado contra la forma pedida.

Sin estado propio más allá del transporte: sin caché y sin reintentos.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from podio_sdk.core.domain.dynamic import DynamicStructure
from podio_sdk.core.domain.models import HttpMethod, RawResult, RequestOptions, TransportResponse
from podio_sdk.core.errors import DeserializationError, InvalidArgumentError, TransportError
from podio_sdk.core.interfaces.transport import Transport

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = RequestOptions()


def _encode_body(body: Any) -> Any:
    if body is None:
        return None
    if isinstance(body, (str, bytes)) or not isinstance(body, (BaseModel, Mapping, Sequence)):
        raise InvalidArgumentError(f"Unsupported request body type: {type(body).__name__}")
    # Los modelos anidados en dicts/listas también se vuelcan con alias y sin nulos.
    try:
        return to_jsonable_python(body, by_alias=True, exclude_none=True)
    except PydanticSerializationError as exc:
        raise InvalidArgumentError(f"Request body is not JSON serializable: {exc}") from exc


def _shape_name(result_type: Any) -> str:
    return getattr(result_type, "__name__", None) or repr(result_type)


def _deserialize(response: TransportResponse, result_type: Any) -> Any:
    if result_type is None:
        return None
    if result_type is DynamicStructure:
        return DynamicStructure.from_json(response.body)

    try:
        return TypeAdapter(result_type).validate_json(response.body)
    except ValidationError as exc:
        raise DeserializationError(
            f"Response does not match {_shape_name(result_type)}: {exc.error_count()} error(s)",
            expected_shape=_shape_name(result_type),
            raw_body=response.body,
        ) from exc


class Dispatcher:
    """Punto único por el que pasan todas las llamadas de los façades."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def dispatch(
        self,
        method: HttpMethod,
        path: str,
        *,
        result_type: Any = DynamicStructure,
        parameters: Mapping[str, str] | None = None,
        body: Any = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """Ejecuta una llamada y devuelve `result_type` validado o `RawResult`.

        `result_type` acepta cualquier tipo que pydantic sepa validar
        (`Contact`, `list[Contact]`, `int`...), `DynamicStructure` para un
        árbol JSON sin modelo, o `None` para descartar el cuerpo.
        """

        try:
            method = HttpMethod(method)
        except ValueError as exc:
            raise InvalidArgumentError(f"Unsupported HTTP method: {method!r}") from exc
        options = options or _DEFAULT_OPTIONS
        if not path.startswith("/"):
            raise InvalidArgumentError(f"Path must be absolute (start with '/'): {path!r}")
        if body is not None and method in (HttpMethod.GET, HttpMethod.DELETE):
            raise InvalidArgumentError(f"{method.value} requests cannot carry a body.")

        query = dict(parameters or {})
        payload = _encode_body(body)

        logger.debug("%s %s query=%s", method.value, path, query)
        if method is HttpMethod.GET:
            response = await self._transport.get(path, query)
        elif method is HttpMethod.POST:
            response = await self._transport.post(path, query, payload)
        elif method is HttpMethod.PUT:
            response = await self._transport.put(path, query, payload)
        else:
            response = await self._transport.delete(path, query)

        if not response.is_success:
            logger.warning("%s %s failed with HTTP %s", method.value, path, response.status_code)
            raise TransportError(
                f"{method.value} {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
                raw_body=response.body,
            )

        if options.return_raw:
            return RawResult(
                status_code=response.status_code,
                body=response.body,
                content_type=response.headers.get("content-type"),
            )

        try:
            return _deserialize(response, result_type)
        except DeserializationError:
            logger.warning("%s %s: response did not match %s", method.value, path, _shape_name(result_type))
            raise

    async def get(
        self,
        path: str,
        result_type: Any = DynamicStructure,
        *,
        parameters: Mapping[str, str] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        return await self.dispatch(
            HttpMethod.GET, path, result_type=result_type, parameters=parameters, options=options
        )

    async def post(
        self,
        path: str,
        body: Any = None,
        result_type: Any = DynamicStructure,
        *,
        parameters: Mapping[str, str] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        return await self.dispatch(
            HttpMethod.POST,
            path,
            result_type=result_type,
            parameters=parameters,
            body=body,
            options=options,
        )

    async def put(
        self,
        path: str,
        body: Any = None,
        result_type: Any = DynamicStructure,
        *,
        parameters: Mapping[str, str] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        return await self.dispatch(
            HttpMethod.PUT,
            path,
            result_type=result_type,
            parameters=parameters,
            body=body,
            options=options,
        )

    async def delete(
        self,
        path: str,
        result_type: Any = DynamicStructure,
        *,
        parameters: Mapping[str, str] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        return await self.dispatch(
            HttpMethod.DELETE, path, result_type=result_type, parameters=parameters, options=options
        )
