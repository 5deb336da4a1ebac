from __future__ import annotations

import logging

from pydantic import ValidationError

from ..config.urls import get_create_document_url
from ..core.domain.enums import ProductGroup
from ..core.domain.models import Document
from ..core.errors import ApiError, ProtocolError
from ..core.ports.http_port import HttpPort
from ..core.ports.registry_port import DocumentRegistryPort
from ..core.ports.token_port import TokenProviderPort
from .schemas import CreateDocumentRequest, CreateDocumentResponse

logger = logging.getLogger(__name__)


class RegistryAdapter(DocumentRegistryPort):
    def __init__(self, http_client: HttpPort, token_provider: TokenProviderPort, base_url: str) -> None:
        self._http = http_client
        self._token_provider = token_provider
        self._url = get_create_document_url(base_url)

    def build_payload(self, document: Document, signature: str, product_group: ProductGroup) -> dict:
        """Return the JSON-ready request body for a create call."""
        request = CreateDocumentRequest.build(document, signature, product_group)
        return request.model_dump(mode="json")

    def create_document(self, document: Document, signature: str, product_group: ProductGroup) -> str:
        """Submit a signed document and return the registry-assigned id.

        Status 200 with a string "value" is success. Any other status raises
        ApiError. A 200 without "value" raises ProtocolError. Transport
        failures surface as TransportError from the HTTP client.
        """
        payload = self.build_payload(document, signature, product_group)
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._token_provider.get_token()}",
        }

        logger.debug("POST %s (doc_id=%s, products=%d)", self._url, document.doc_id, len(document.products))
        response = self._http.post_json(self._url, payload, headers=headers)

        if response.status_code != 200:
            logger.warning("Registry rejected document %s with status %d", document.doc_id, response.status_code)
            raise ApiError(response.status_code, response.body)

        try:
            parsed = CreateDocumentResponse.model_validate_json(response.body)
        except ValidationError as e:
            logger.warning("Unexpected response format for document %s", document.doc_id)
            raise ProtocolError("Unexpected response format", response.body) from e

        logger.info("Document created successfully with ID: %s", parsed.value)
        return parsed.value
