"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta de las respuestas de la API sin acoplar el Core a httpx.
- Serialización controlada de los payloads de escritura (`exclude_none`), de
  modo que los campos no informados no viajan como `null`.

Nota:
- Estos modelos describen *qué* intercambia la API, no *cómo* se transporta.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class RequestOptions(BaseModel):
    """Opciones por llamada del dispatcher.

    Hoy solo `return_raw`: devolver el cuerpo sin deserializar (p.ej. vCard).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    return_raw: bool = Field(
        default=False,
        description="Devuelve el cuerpo tal cual, sin deserialización estructurada.",
    )


class TransportResponse(BaseModel):
    """Lo mínimo que el Core necesita de una respuesta HTTP."""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., ge=100, le=599)
    body: str = Field(default="")
    headers: dict[str, str] = Field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class RawResult(BaseModel):
    """Resultado en modo raw: cuerpo verbatim + metadatos de la respuesta."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: str
    content_type: str | None = None


class Contact(BaseModel):
    """Contacto (de usuario o de espacio).

    Los campos multivalor (`mail`, `phone`, ...) son listas en la API.
    """

    model_config = ConfigDict(extra="ignore")

    profile_id: int | None = None
    user_id: int | None = None
    space_id: int | None = None
    type: str | None = Field(
        default=None,
        description="'user' o 'space'.",
    )
    name: str | None = None
    external_id: str | None = None
    avatar: int | None = None
    link: str | None = None
    title: list[str] | None = None
    organization: str | None = None
    mail: list[str] | None = None
    phone: list[str] | None = None
    address: list[str] | None = None
    url: list[str] | None = None
    skill: list[str] | None = None
    about: str | None = None
    rights: list[str] | None = None


class ContactTotalEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    count: int = 0


class ContactTotal(BaseModel):
    """Totales de contactos del usuario activo (endpoint v3)."""

    model_config = ConfigDict(extra="ignore")

    user: ContactTotalEntry | None = None
    space: ContactTotalEntry | None = None
    connection: ContactTotalEntry | None = None


class ApplicationConfiguration(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str | None = Field(
        default=None,
        description="'standard', 'meeting' o 'contact'.",
    )
    name: str | None = None
    item_name: str | None = None
    description: str | None = None
    usage: str | None = None
    external_id: str | None = None
    icon: str | None = None
    allow_edit: bool | None = None
    default_view: str | None = None
    allow_attachments: bool | None = None
    allow_comments: bool | None = None
    fivestar: bool | None = None
    approved: bool | None = None
    thumbs: bool | None = None
    rsvp: bool | None = None
    yesno: bool | None = None


class ApplicationField(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    field_id: int | None = None
    type: str = Field(..., min_length=1)
    external_id: str | None = None
    field_config: dict[str, Any] = Field(
        default_factory=dict,
        alias="config",
        description="label, description, delta, settings, required...",
    )


class ApplicationCreateUpdateRequest(BaseModel):
    """Payload para crear/actualizar una app. Los `None` no se envían."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    space_id: int | None = None
    app_config: ApplicationConfiguration | None = Field(default=None, alias="config")
    app_fields: list[ApplicationField] | None = Field(default=None, alias="fields")
