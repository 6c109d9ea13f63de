"""Façades por área de recursos.

Por qué un paquete:
- Agrupa módulos por área (contactos, aplicaciones...).
- Cada façade recibe el mismo `Dispatcher` explícito; no hay singleton global.
"""

from podio_sdk.adapters.resources.applications import ApplicationService
from podio_sdk.adapters.resources.contacts import ContactService

__all__ = [
    "ApplicationService",
    "ContactService",
]
