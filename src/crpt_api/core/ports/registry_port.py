from __future__ import annotations

from typing import Protocol

from ..domain.enums import ProductGroup
from ..domain.models import Document


class DocumentRegistryPort(Protocol):
    def create_document(self, document: Document, signature: str, product_group: ProductGroup) -> str:
        """Submit a signed document and return the id assigned by the registry.

        Raises TransportError, ApiError or ProtocolError on failure.
        """
        ...
