"""Handle explícito del SDK.

`PodioClient` posee un transporte y un dispatcher y los comparte por
referencia con todos los façades. Cada instancia es independiente: el SDK no
guarda ningún cliente a nivel de proceso.
"""

from __future__ import annotations

from podio_sdk.adapters.http_client import HttpxTransport
from podio_sdk.adapters.resources import ApplicationService, ContactService
from podio_sdk.core.config import AppSettings
from podio_sdk.core.interfaces.transport import Transport
from podio_sdk.core.services.dispatcher import Dispatcher


class PodioClient:
    """Uso:

        async with PodioClient() as podio:
            total = await podio.contacts.get_space_contact_totals(space_id)
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: Transport | None = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self._owns_transport = transport is None
        self.transport = transport or HttpxTransport(self.settings)
        self.dispatcher = Dispatcher(self.transport)
        self.contacts = ContactService(self.dispatcher)
        self.applications = ApplicationService(self.dispatcher)

    async def aclose(self) -> None:
        """Cierra el transporte solo si lo creó este cliente."""

        if self._owns_transport:
            await self.transport.aclose()

    async def __aenter__(self) -> "PodioClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
