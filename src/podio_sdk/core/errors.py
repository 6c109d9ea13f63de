"""Taxonomía de errores del Core.

Por qué un módulo propio:
- El Core no recupera nada localmente: todo fallo sale tipado hacia el caller.
- Los façades (contacts, applications) y el transporte comparten las mismas
  excepciones sin importarse entre sí.
"""

from __future__ import annotations


class PodioError(Exception):
    """Base de todos los errores emitidos por el SDK."""


class TransportError(PodioError):
    """Respuesta no-2xx o fallo de conexión/timeout.

    `status_code` es `None` cuando ni siquiera hubo respuesta HTTP.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        raw_body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.raw_body = raw_body


class DeserializationError(PodioError):
    """El cuerpo de la respuesta no encaja con la forma pedida por el caller."""

    def __init__(
        self,
        message: str,
        *,
        expected_shape: str,
        raw_body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.expected_shape = expected_shape
        self.raw_body = raw_body


class MissingFieldError(PodioError):
    """Falta un campo esperado en el sobre (envelope) de la respuesta."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Missing field '{field_name}' in response envelope.")
        self.field_name = field_name


class InvalidArgumentError(PodioError, ValueError):
    """Argumentos inválidos detectados antes de tocar la red."""
