"""Façade: contactos.

Cada método es composición pura del Core: path + ParameterMap + dispatcher
+ (opcional) extracción de un campo del sobre.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from podio_sdk.core.domain.models import Contact, ContactTotal, RequestOptions
from podio_sdk.core.services.dispatcher import Dispatcher
from podio_sdk.core.services.parameters import build_parameters, join_identifiers
from podio_sdk.core.services.unwrap import extract_field

_RAW = RequestOptions(return_raw=True)


class ContactService:
    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    async def create_contact(self, space_id: int, contact: Contact) -> int:
        """Crea un contacto de espacio y devuelve su `profile_id`."""

        response = await self._dispatcher.post(f"/contact/space/{space_id}/", contact)
        return extract_field(response, "profile_id", int)

    async def update_contact(self, profile_id: int, contact: Contact) -> None:
        await self._dispatcher.put(f"/contact/{profile_id}", contact, None)

    async def delete_contacts(self, profile_ids: Sequence[int]) -> None:
        """Solo se permite borrar contactos de tipo "space"."""

        await self._dispatcher.delete(f"/contact/{join_identifiers(profile_ids)}", None)

    async def get_contact_totals(self) -> ContactTotal:
        return await self._dispatcher.get("/contact/totals/v3/", ContactTotal)

    async def get_skills(self, text: str, limit: int = 12) -> list[str]:
        """Skills de contactos relacionados, por frecuencia de uso."""

        params = build_parameters({"limit": limit, "text": text})
        return await self._dispatcher.get("/contact/skill/", list[str], parameters=params)

    async def get_space_contact_totals(self, space_id: int) -> int:
        response = await self._dispatcher.get(f"/contact/space/{space_id}/totals/space")
        return extract_field(response, "total", int)

    async def get_user_contact(self, user_id: int) -> Contact:
        return await self._dispatcher.get(f"/contact/user/{user_id}", Contact)

    async def get_contacts_by_profile_id(
        self,
        profile_ids: Sequence[int],
        space_id: int | None = None,
    ) -> list[Contact]:
        """Detalle de uno o varios contactos.

        Con un único id la API devuelve un objeto; con varios, una lista.
        Aquí siempre se devuelve una lista.
        """

        url = f"/contact/{join_identifiers(profile_ids)}/v2"
        params = build_parameters({"space_id": space_id})
        if len(profile_ids) > 1:
            return await self._dispatcher.get(url, list[Contact], parameters=params)
        contact = await self._dispatcher.get(url, Contact, parameters=params)
        return [contact]

    async def get_all_contacts(
        self,
        fields: Mapping[str, Any] | None = None,
        contact_type: str | None = "user",
        external_id: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        required: str | None = None,
        exclude_self: bool = True,
        order: str | None = "name",
        type: str | None = "mini",
    ) -> list[Contact]:
        """Contactos del usuario activo.

        `fields` filtra por valor de campo (coincidencia parcial en texto) y
        tiene prioridad sobre las opciones con el mismo nombre.
        """

        params = build_parameters(
            _list_options(contact_type, exclude_self, external_id, limit, offset, order, required, type),
            fields,
        )
        return await self._dispatcher.get("/contact/", list[Contact], parameters=params)

    async def get_organization_contacts(
        self,
        org_id: int,
        fields: Mapping[str, Any] | None = None,
        contact_type: str | None = "user",
        external_id: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        required: str | None = None,
        exclude_self: bool = True,
        order: str | None = "name",
        type: str | None = "mini",
    ) -> list[Contact]:
        params = build_parameters(
            _list_options(contact_type, exclude_self, external_id, limit, offset, order, required, type),
            fields,
        )
        return await self._dispatcher.get(f"/contact/org/{org_id}", list[Contact], parameters=params)

    async def get_space_contacts(
        self,
        space_id: int,
        fields: Mapping[str, Any] | None = None,
        contact_type: str | None = "user",
        external_id: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        required: str | None = None,
        exclude_self: bool = True,
        order: str | None = "name",
        type: str | None = "mini",
    ) -> list[Contact]:
        params = build_parameters(
            _list_options(contact_type, exclude_self, external_id, limit, offset, order, required, type),
            fields,
        )
        return await self._dispatcher.get(f"/contact/space/{space_id}/", list[Contact], parameters=params)

    async def get_space_contacts_on_app(
        self,
        app_id: int,
        fields: Mapping[str, Any] | None = None,
        limit: int | None = None,
        offset: int | None = None,
        order: str | None = "name",
    ) -> list[Contact]:
        """Contactos de espacio referenciados por la app."""

        params = build_parameters({"limit": limit, "offset": offset, "order": order}, fields)
        return await self._dispatcher.get(f"/contact/app/{app_id}/", list[Contact], parameters=params)

    async def get_user_contact_field(self, user_id: int, key: str) -> list[str]:
        return await self._dispatcher.get(f"/contact/user/{user_id}/{key}", list[str])

    async def get_vcard(self, profile_id: int) -> str:
        """vCard del contacto, como texto sin procesar."""

        result = await self._dispatcher.get(f"/contact/{profile_id}/vcard", options=_RAW)
        return result.body

    async def update_contact_field(self, profile_id: int, key: str, value: str) -> None:
        """Solo contactos de tipo "space" admiten actualizaciones."""

        await self._dispatcher.put(f"/contact/{profile_id}/{key}", {"value": value}, None)


def _list_options(
    contact_type: str | None,
    exclude_self: bool,
    external_id: str | None,
    limit: int | None,
    offset: int | None,
    order: str | None,
    required: str | None,
    type: str | None,
) -> dict[str, Any]:
    return {
        "contact_type": contact_type,
        "exclude_self": exclude_self,
        "external_id": external_id,
        "limit": limit,
        "offset": offset,
        "order": order,
        "required": required,
        "type": type,
    }
