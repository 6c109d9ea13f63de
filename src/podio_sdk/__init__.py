"""Cliente asíncrono para la API REST de Podio.

Exporta el handle (`PodioClient`), el Core de dispatch y su taxonomía de
errores.
"""

from podio_sdk.client import PodioClient
from podio_sdk.core.config import AppSettings
from podio_sdk.core.domain.dynamic import DynamicStructure
from podio_sdk.core.domain.models import HttpMethod, RawResult, RequestOptions
from podio_sdk.core.errors import (
    DeserializationError,
    InvalidArgumentError,
    MissingFieldError,
    PodioError,
    TransportError,
)
from podio_sdk.core.services.dispatcher import Dispatcher
from podio_sdk.core.services.parameters import build_parameters, encode, join_identifiers
from podio_sdk.core.services.unwrap import extract_field

__all__ = [
    "AppSettings",
    "DeserializationError",
    "Dispatcher",
    "DynamicStructure",
    "HttpMethod",
    "InvalidArgumentError",
    "MissingFieldError",
    "PodioClient",
    "PodioError",
    "RawResult",
    "RequestOptions",
    "TransportError",
    "build_parameters",
    "encode",
    "extract_field",
    "join_identifiers",
]
