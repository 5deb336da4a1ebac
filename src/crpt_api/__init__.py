"""crpt_api package: app/core/infra/config.

Expose library-friendly registry client at the package level.
"""

from .app.api import AppConfig, CrptClient
from .core.cancellation import CancellationToken
from .core.domain.enums import ProductGroup, TimeUnit
from .core.domain.models import Description, Document, Product
from .core.errors import (
    ApiError,
    ConfigurationError,
    CrptApiError,
    InterruptedWaitError,
    ProtocolError,
    TransportError,
)

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "CrptClient",
    "AppConfig",
    "CancellationToken",
    "Document",
    "Description",
    "Product",
    "ProductGroup",
    "TimeUnit",
    "CrptApiError",
    "ConfigurationError",
    "InterruptedWaitError",
    "TransportError",
    "ApiError",
    "ProtocolError",
]
