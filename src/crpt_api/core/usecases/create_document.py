from __future__ import annotations

import logging
import time

from ..cancellation import CancellationToken
from ..domain.enums import ProductGroup
from ..domain.models import Document
from ..ports.rate_limiter_port import RateLimiterPort
from ..ports.registry_port import DocumentRegistryPort

logger = logging.getLogger(__name__)


class CreateDocumentUseCase:
    """Rate-limited document submission.

    The admission is taken before anything is sent, and it counts against the
    shared budget whether or not the registry call succeeds.
    """

    def __init__(
        self,
        rate_limiter: RateLimiterPort,
        registry: DocumentRegistryPort,
        product_group: ProductGroup = ProductGroup.CLOTHES,
    ) -> None:
        self._rate_limiter = rate_limiter
        self._registry = registry
        self._product_group = ProductGroup(product_group)

    def execute(
        self,
        document: Document,
        signature: str,
        *,
        cancel_token: CancellationToken | None = None,
        timeout: float | None = None,
    ) -> str:
        started = time.monotonic()
        self._rate_limiter.acquire(cancel_token=cancel_token, timeout=timeout)
        logger.debug("Admitted document %s after %.3fs", document.doc_id, time.monotonic() - started)

        logger.info("Submitting document %s (group=%s)", document.doc_id, self._product_group.value)
        return self._registry.create_document(document, signature, self._product_group)
