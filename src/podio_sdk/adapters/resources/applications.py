"""Façade: configuración de aplicaciones."""

from __future__ import annotations

from podio_sdk.core.domain.models import ApplicationCreateUpdateRequest
from podio_sdk.core.services.dispatcher import Dispatcher
from podio_sdk.core.services.unwrap import extract_field


class ApplicationService:
    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    async def create_app(self, request: ApplicationCreateUpdateRequest) -> int:
        """Crea una app en `request.space_id` y devuelve su `app_id`."""

        response = await self._dispatcher.post("/app/", request)
        return extract_field(response, "app_id", int)

    async def update_app(self, app_id: int, request: ApplicationCreateUpdateRequest) -> None:
        # `space_id` no se puede cambiar tras la creación.
        payload = request.model_copy(update={"space_id": None})
        await self._dispatcher.put(f"/app/{app_id}", payload, None)
